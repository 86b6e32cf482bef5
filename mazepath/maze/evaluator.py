"""Path and structure checks for generated mazes."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import List, Optional, Sequence

import numpy as np

from ..base import AbstractMazeEvaluator, Coordinate, WalkableGrid, neighbours
from .pathfinder import Pathfinder


@dataclass
class MazeEvaluationResult:
    connected: bool
    touches_goal: bool
    stray_in_walls: bool
    optimal: bool
    path_length: int
    shortest_length: int
    message: str

    @property
    def is_valid(self) -> bool:
        return self.connected and self.touches_goal and not self.stray_in_walls

    def to_dict(self) -> dict:
        return {
            "connected": self.connected,
            "touches_goal": self.touches_goal,
            "stray_in_walls": self.stray_in_walls,
            "optimal": self.optimal,
            "path_length": self.path_length,
            "shortest_length": self.shortest_length,
            "message": self.message,
        }


@dataclass
class MazeStructureReport:
    """Graph properties of the open cells of a grid under 4-way adjacency."""

    open_cells: int
    reachable_cells: int
    edge_count: int
    components: int

    @property
    def connected(self) -> bool:
        return self.components <= 1

    @property
    def acyclic(self) -> bool:
        return self.edge_count == self.open_cells - self.components

    @property
    def is_perfect(self) -> bool:
        return self.connected and self.acyclic

    def to_dict(self) -> dict:
        return {
            "open_cells": self.open_cells,
            "reachable_cells": self.reachable_cells,
            "edge_count": self.edge_count,
            "components": self.components,
            "connected": self.connected,
            "acyclic": self.acyclic,
        }


class MazeEvaluator(AbstractMazeEvaluator):
    """Evaluate candidate paths by checking they walk open cells from start to goal."""

    def evaluate(self, candidate_path: Sequence[Coordinate]) -> MazeEvaluationResult:
        cells = [(int(r), int(c)) for r, c in candidate_path]
        shortest = Pathfinder().search(self.grid, self.start, self.goal)

        stray_in_walls = any(not self.grid.is_walkable(r, c) for r, c in cells)
        touches_goal = bool(cells) and cells[-1] == self.goal
        connected = bool(cells) and cells[0] == self.start and is_contiguous(cells)
        valid = connected and touches_goal and not stray_in_walls
        optimal = valid and bool(shortest) and len(cells) == len(shortest)

        if not cells:
            message = "Path is empty."
        elif stray_in_walls:
            message = "Path crosses walls."
        elif cells[0] != self.start:
            message = "Path does not begin at the start cell."
        elif not touches_goal:
            message = "Path does not reach the goal."
        elif not connected:
            message = "Path is not continuous from start to goal."
        elif not optimal:
            message = f"Path reaches the goal in {len(cells)} cells; the shortest takes {len(shortest)}."
        else:
            message = "Path is a shortest route from start to goal."

        return MazeEvaluationResult(
            connected=connected,
            touches_goal=touches_goal,
            stray_in_walls=stray_in_walls,
            optimal=optimal,
            path_length=len(cells),
            shortest_length=len(shortest),
            message=message,
        )


def is_contiguous(path: Sequence[Coordinate]) -> bool:
    """True when every consecutive pair of cells is exactly one orthogonal step apart."""

    return all(
        abs(a[0] - b[0]) + abs(a[1] - b[1]) == 1 for a, b in zip(path, path[1:])
    )


def open_mask(grid: WalkableGrid) -> np.ndarray:
    return np.array(
        [[grid.is_walkable(r, c) for c in range(grid.cols)] for r in range(grid.rows)],
        dtype=bool,
    ).reshape(grid.rows, grid.cols)


def _flood(mask: np.ndarray, origin: Coordinate, seen: np.ndarray) -> int:
    rows, cols = mask.shape
    queue = deque([origin])
    seen[origin] = True
    count = 0
    while queue:
        cell = queue.popleft()
        count += 1
        for neighbour in neighbours(cell, rows, cols):
            if mask[neighbour] and not seen[neighbour]:
                seen[neighbour] = True
                queue.append(neighbour)
    return count


def analyze_structure(grid: WalkableGrid, origin: Optional[Coordinate] = None) -> MazeStructureReport:
    """Count open cells, adjacency edges and components; flood from ``origin`` if given."""

    mask = open_mask(grid)
    edge_count = int(np.sum(mask[:, :-1] & mask[:, 1:]) + np.sum(mask[:-1, :] & mask[1:, :]))

    seen = np.zeros_like(mask)
    reachable = 0
    if origin is not None and grid.is_walkable(origin[0], origin[1]):
        reachable = _flood(mask, (origin[0], origin[1]), seen)
        components = 1
    else:
        components = 0
    remaining: List[Coordinate] = [
        (int(r), int(c)) for r, c in zip(*np.nonzero(mask & ~seen))
    ]
    for cell in remaining:
        if not seen[cell]:
            _flood(mask, cell, seen)
            components += 1

    return MazeStructureReport(
        open_cells=int(mask.sum()),
        reachable_cells=reachable,
        edge_count=edge_count,
        components=components,
    )


__all__ = [
    "MazeEvaluator",
    "MazeEvaluationResult",
    "MazeStructureReport",
    "analyze_structure",
    "is_contiguous",
    "open_mask",
]
