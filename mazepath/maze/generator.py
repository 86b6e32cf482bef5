"""Randomized frontier-expansion maze generator (Prim's algorithm on a cell grid)."""

from __future__ import annotations

import argparse
import enum
import json
import logging
import random
import sys
import time
import uuid
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple

from ..base import OPEN, WALL, AbstractMazeGenerator, Coordinate, GridSnapshot, neighbours
from .pathfinder import Pathfinder
from .render import render_image, render_text

logger = logging.getLogger(__name__)


class EndPlacement(str, enum.Enum):
    """Where the start cell is drawn from; the end is always its mirror image."""

    REFLECTED = "reflected"
    CORNER = "corner"


@dataclass
class MazeRecord:
    id: str
    grid_size: Tuple[int, int]
    seed: int
    end_placement: str
    maze_grid: List[List[int]]
    start: Coordinate
    goal: Coordinate
    end_was_carved: bool
    path: List[Coordinate]

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "grid_size": list(self.grid_size),
            "seed": self.seed,
            "end_placement": self.end_placement,
            "maze_grid": self.maze_grid,
            "start": list(self.start),
            "goal": list(self.goal),
            "end_was_carved": self.end_was_carved,
            "path": [list(cell) for cell in self.path],
        }


class MazeGenerator(AbstractMazeGenerator[MazeRecord]):
    """Carve perfect mazes by growing a tree of open cells from a random start.

    A wall on the frontier is opened only when exactly one of its orthogonal
    neighbours is already open, so every opening attaches one new leaf to the
    tree and never closes a loop. The end cell is the start reflected through
    the grid centre and is forced open afterwards.
    """

    def __init__(
        self,
        rows: int,
        cols: int,
        *,
        seed: Optional[int] = None,
        end_placement: EndPlacement = EndPlacement.REFLECTED,
    ) -> None:
        super().__init__(rows, cols)
        self.seed = seed if seed is not None else time.time_ns()
        self.end_placement = EndPlacement(end_placement)
        self.end_was_carved = False
        self._rng = random.Random(self.seed)

    def generate(self) -> GridSnapshot:
        self._cells.fill(WALL)

        start = self._pick_start()
        self._cells[start] = OPEN

        frontier: List[Coordinate] = []
        self._add_walls(start, frontier)
        while frontier:
            self._rng.shuffle(frontier)
            candidate = frontier.pop()
            if self._open_neighbour_count(candidate) == 1:
                self._cells[candidate] = OPEN
                self._add_walls(candidate, frontier)

        end = (self.rows - 1 - start[0], self.cols - 1 - start[1])
        self.end_was_carved = bool(self._cells[end] == OPEN)
        self._cells[end] = OPEN

        self._start = start
        self._end = end
        logger.debug(
            "Generated %dx%d maze (seed=%d): start=%s end=%s open=%d%s",
            self.rows,
            self.cols,
            self.seed,
            start,
            end,
            int((self._cells == OPEN).sum()),
            "" if self.end_was_carved else " (end forced open)",
        )
        return self.snapshot()

    def create_record(self, *, record_id: Optional[str] = None, solve: bool = True) -> MazeRecord:
        maze = self.generate()
        path = Pathfinder().search(maze, self.start, self.end) if solve else []
        return MazeRecord(
            id=record_id or str(uuid.uuid4()),
            grid_size=(self.rows, self.cols),
            seed=self.seed,
            end_placement=self.end_placement.value,
            maze_grid=maze.to_list(),
            start=self.start,
            goal=self.end,
            end_was_carved=self.end_was_carved,
            path=path,
        )

    # ------------------------------------------------------------------

    def _pick_start(self) -> Coordinate:
        if self.end_placement is EndPlacement.CORNER:
            row = 0 if self._rng.random() < 0.5 else self.rows - 1
            col = 0 if self._rng.random() < 0.5 else self.cols - 1
            return (row, col)
        return (self._rng.randrange(self.rows), self._rng.randrange(self.cols))

    def _add_walls(self, cell: Coordinate, frontier: List[Coordinate]) -> None:
        for neighbour in neighbours(cell, self.rows, self.cols):
            if self._cells[neighbour] == WALL:
                frontier.append(neighbour)

    def _open_neighbour_count(self, cell: Coordinate) -> int:
        return sum(
            1 for neighbour in neighbours(cell, self.rows, self.cols) if self._cells[neighbour] == OPEN
        )


__all__ = ["EndPlacement", "MazeGenerator", "MazeRecord"]


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}") from exc
    if number <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {number}")
    return number


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate a random maze and solve it with A*")
    parser.add_argument("rows", nargs="?", type=_positive_int, help="Number of rows (prompted if omitted)")
    parser.add_argument("cols", nargs="?", type=_positive_int, help="Number of columns (prompted if omitted)")
    parser.add_argument("--seed", type=int, default=None, help="Seed for a reproducible maze")
    parser.add_argument(
        "--corner",
        action="store_true",
        help="Start in a random corner and end in the opposite one",
    )
    parser.add_argument("--json", action="store_true", help="Print the maze record as JSON")
    parser.add_argument("--image", type=Path, default=None, help="Optional PNG path for the solved maze")
    parser.add_argument("--cell-size", type=_positive_int, default=32)
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    for name in ("rows", "cols"):
        if getattr(args, name) is None:
            try:
                answer = input(f"Enter the number of {name} for the maze: ")
            except EOFError:
                parser.error(f"argument {name}: no input")
            try:
                setattr(args, name, _positive_int(answer.strip()))
            except argparse.ArgumentTypeError as exc:
                parser.error(f"argument {name}: {exc}")
    return args


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    generator = MazeGenerator(
        args.rows,
        args.cols,
        seed=args.seed,
        end_placement=EndPlacement.CORNER if args.corner else EndPlacement.REFLECTED,
    )
    record = generator.create_record()

    if args.image is not None:
        image = render_image(
            generator,
            cell_size=args.cell_size,
            start=record.start,
            goal=record.goal,
            path=record.path,
        )
        image.save(args.image)
        logger.info("Saved maze image to %s", args.image)

    if args.json:
        json.dump(generator.record_to_dict(record), sys.stdout, indent=2)
        sys.stdout.write("\n")
        return

    print(render_text(generator))
    print(f"Start: ({record.start[0]}, {record.start[1]})")
    print(f"End: ({record.goal[0]}, {record.goal[1]})")
    if record.path:
        print(" ".join(f"({r}, {c})" for r, c in record.path))
    else:
        print("No path found.")


if __name__ == "__main__":
    main()
