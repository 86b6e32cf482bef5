"""A* shortest-path search over a walkable grid."""

from __future__ import annotations

import heapq
import itertools
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Set, Tuple

from ..base import DIRECTIONS, Coordinate, WalkableGrid, in_bounds
from ..errors import CoordinateOutOfBoundsError

logger = logging.getLogger(__name__)


def manhattan(a: Coordinate, b: Coordinate) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


@dataclass
class SearchNode:
    """Per-cell bookkeeping for a single search call."""

    row: int
    col: int
    walkable: bool
    g: Optional[int] = None
    h: int = 0
    parent: Optional[int] = None

    @property
    def cell(self) -> Coordinate:
        return (self.row, self.col)

    @property
    def f(self) -> Optional[int]:
        if self.g is None:
            return None
        return self.g + self.h

    def to_dict(self) -> dict:
        return {
            "row": self.row,
            "col": self.col,
            "walkable": self.walkable,
            "g": self.g,
            "h": self.h,
            "parent": self.parent,
        }


@dataclass
class SearchResult:
    path: List[Coordinate]
    nodes: List[SearchNode]
    expanded: int
    cols: int
    requeued: int = 0

    @property
    def found(self) -> bool:
        return bool(self.path)

    def node_at(self, cell: Coordinate) -> SearchNode:
        return self.nodes[cell[0] * self.cols + cell[1]]

    def to_dict(self) -> dict:
        return {
            "path": [list(cell) for cell in self.path],
            "expanded": self.expanded,
            "requeued": self.requeued,
            "found": self.found,
        }


@dataclass
class _OpenSet:
    """Binary heap of node indices ordered by f, with a pending-membership set."""

    heap: List[Tuple[int, int, int]] = field(default_factory=list)
    pending: Set[int] = field(default_factory=set)
    _counter: "itertools.count[int]" = field(default_factory=itertools.count)

    def push(self, f: int, index: int) -> None:
        # Insertion order breaks f ties.
        heapq.heappush(self.heap, (f, next(self._counter), index))
        self.pending.add(index)

    def pop(self) -> Tuple[int, int]:
        f, _, index = heapq.heappop(self.heap)
        self.pending.discard(index)
        return f, index

    def __bool__(self) -> bool:
        return bool(self.heap)

    def __contains__(self, index: int) -> bool:
        return index in self.pending


class Pathfinder:
    """A* search with unit step cost, 4-way movement and a Manhattan heuristic.

    The pathfinder keeps no state between calls: every search allocates its own
    node arena, so several searches may run over the same grid at once.
    """

    def search(self, grid: WalkableGrid, start: Coordinate, end: Coordinate) -> List[Coordinate]:
        """Return the shortest path from ``start`` to ``end`` inclusive, or ``[]``."""

        return self.search_nodes(grid, start, end).path

    def search_nodes(
        self,
        grid: WalkableGrid,
        start: Coordinate,
        end: Coordinate,
    ) -> SearchResult:
        rows, cols = grid.rows, grid.cols
        start = (int(start[0]), int(start[1]))
        end = (int(end[0]), int(end[1]))
        for cell in (start, end):
            if not in_bounds(cell[0], cell[1], rows, cols):
                raise CoordinateOutOfBoundsError(cell, rows, cols)

        nodes = [
            SearchNode(row=r, col=c, walkable=grid.is_walkable(r, c))
            for r in range(rows)
            for c in range(cols)
        ]
        start_index = start[0] * cols + start[1]
        end_index = end[0] * cols + end[1]

        if not nodes[start_index].walkable or not nodes[end_index].walkable:
            logger.debug("Search %s -> %s skipped: endpoint is a wall", start, end)
            return SearchResult(path=[], nodes=nodes, expanded=0, cols=cols)

        first = nodes[start_index]
        first.g = 0
        first.h = manhattan(start, end)
        open_set = _OpenSet()
        open_set.push(first.h, start_index)
        expanded = 0
        requeued = 0

        while open_set:
            f, index = open_set.pop()
            current = nodes[index]
            if f != current.f:
                # Superseded by a cheaper entry pushed later.
                continue
            if index == end_index:
                path = self._reconstruct_path(nodes, index)
                logger.debug(
                    "Search %s -> %s found a path of %d cells after expanding %d nodes",
                    start,
                    end,
                    len(path),
                    expanded,
                )
                return SearchResult(
                    path=path, nodes=nodes, expanded=expanded, cols=cols, requeued=requeued
                )

            expanded += 1
            tentative_g = current.g + 1
            for dr, dc in DIRECTIONS:
                nr, nc = current.row + dr, current.col + dc
                if not in_bounds(nr, nc, rows, cols):
                    continue
                neighbour_index = nr * cols + nc
                neighbour = nodes[neighbour_index]
                if not neighbour.walkable:
                    continue
                if neighbour.g is None or tentative_g < neighbour.g:
                    neighbour.parent = index
                    neighbour.g = tentative_g
                    if neighbour_index in open_set:
                        requeued += 1
                    neighbour.h = manhattan(neighbour.cell, end)
                    open_set.push(neighbour.f, neighbour_index)

        logger.debug("Search %s -> %s found no path after expanding %d nodes", start, end, expanded)
        return SearchResult(path=[], nodes=nodes, expanded=expanded, cols=cols, requeued=requeued)

    @staticmethod
    def _reconstruct_path(nodes: List[SearchNode], index: int) -> List[Coordinate]:
        path: List[Coordinate] = []
        current: Optional[int] = index
        while current is not None:
            node = nodes[current]
            path.append(node.cell)
            current = node.parent
        path.reverse()
        return path


def find_path(grid: WalkableGrid, start: Coordinate, end: Coordinate) -> List[Coordinate]:
    return Pathfinder().search(grid, start, end)


__all__ = ["Pathfinder", "SearchNode", "SearchResult", "find_path", "manhattan"]
