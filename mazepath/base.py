"""Shared grid types and abstract interfaces for maze generation and evaluation."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import (
    Any,
    Dict,
    Generic,
    Iterable,
    List,
    Optional,
    Protocol,
    Sequence,
    Tuple,
    TypeVar,
    Union,
)

import numpy as np

from .errors import InvalidDimensionsError, MazeNotGeneratedError

Coordinate = Tuple[int, int]
RecordT = TypeVar("RecordT")

WALL = 1
OPEN = 0

# Up, down, left, right. No diagonals.
DIRECTIONS: Tuple[Coordinate, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


def in_bounds(row: int, col: int, rows: int, cols: int) -> bool:
    return 0 <= row < rows and 0 <= col < cols


def neighbours(cell: Coordinate, rows: int, cols: int) -> List[Coordinate]:
    """Return the in-bounds orthogonal neighbours of ``cell``."""

    r, c = cell
    return [
        (r + dr, c + dc)
        for dr, dc in DIRECTIONS
        if in_bounds(r + dr, c + dc, rows, cols)
    ]


class WalkableGrid(Protocol):
    """Read-only view the pathfinder and evaluator work against."""

    @property
    def rows(self) -> int: ...

    @property
    def cols(self) -> int: ...

    def is_walkable(self, row: int, col: int) -> bool: ...


class GridSnapshot:
    """Immutable copy of a grid of ``OPEN``/``WALL`` cells."""

    def __init__(self, cells: Union[np.ndarray, Sequence[Sequence[int]]]) -> None:
        raw = np.asarray(cells)
        if raw.ndim != 2:
            raise ValueError("Grid cells must form a two-dimensional array")
        if raw.shape[0] == 0 or raw.shape[1] == 0:
            raise InvalidDimensionsError(raw.shape[0], raw.shape[1])
        if not np.all(np.isin(raw, (OPEN, WALL))):
            raise ValueError("Grid cells must be 0 (open) or 1 (wall)")
        array = raw.astype(np.uint8)
        array.setflags(write=False)
        self._cells = array

    @classmethod
    def from_text(cls, lines: Iterable[str], *, wall: str = "#") -> "GridSnapshot":
        """Build a grid from text rows where ``wall`` marks walls and anything else is open."""

        rows = [line for line in lines]
        if rows and len({len(line) for line in rows}) != 1:
            raise ValueError("All text rows must have the same length")
        return cls([[WALL if ch == wall else OPEN for ch in line] for line in rows])

    @classmethod
    def open_grid(cls, rows: int, cols: int) -> "GridSnapshot":
        if rows <= 0 or cols <= 0:
            raise InvalidDimensionsError(rows, cols)
        return cls(np.zeros((rows, cols), dtype=np.uint8))

    @property
    def rows(self) -> int:
        return int(self._cells.shape[0])

    @property
    def cols(self) -> int:
        return int(self._cells.shape[1])

    @property
    def cells(self) -> np.ndarray:
        return self._cells

    def in_bounds(self, row: int, col: int) -> bool:
        return in_bounds(row, col, self.rows, self.cols)

    def is_walkable(self, row: int, col: int) -> bool:
        return self.in_bounds(row, col) and bool(self._cells[row, col] == OPEN)

    def to_list(self) -> List[List[int]]:
        return self._cells.astype(int).tolist()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GridSnapshot):
            return NotImplemented
        return np.array_equal(self._cells, other._cells)

    def __repr__(self) -> str:
        return f"GridSnapshot(rows={self.rows}, cols={self.cols})"


class AbstractMazeGenerator(ABC, Generic[RecordT]):
    """Base class for generators that carve a maze into a wall-filled grid."""

    def __init__(self, rows: int, cols: int) -> None:
        if rows <= 0 or cols <= 0:
            raise InvalidDimensionsError(rows, cols)
        self.rows = rows
        self.cols = cols
        self._cells = np.full((rows, cols), WALL, dtype=np.uint8)
        self._start: Optional[Coordinate] = None
        self._end: Optional[Coordinate] = None

    @abstractmethod
    def generate(self) -> GridSnapshot:
        """Carve a new maze in place and record its start and end cells."""

    @abstractmethod
    def create_record(self, *args, **kwargs) -> RecordT:
        """Generate a maze and package it as a record."""

    def generate_dataset(self, count: int) -> List[RecordT]:
        """Generate a batch of maze records from the generator's random stream."""

        return [self.create_record() for _ in range(count)]

    def record_to_dict(self, record: RecordT) -> Dict[str, Any]:
        """Dictionary serialization hook for maze records."""

        if hasattr(record, "to_dict"):
            return getattr(record, "to_dict")()
        raise TypeError(
            "Maze record must implement to_dict() or override record_to_dict() in the generator."
        )

    # ------------------------------------------------------------------

    @property
    def cells(self) -> np.ndarray:
        view = self._cells.view()
        view.setflags(write=False)
        return view

    @property
    def is_generated(self) -> bool:
        return self._start is not None

    @property
    def start(self) -> Coordinate:
        if self._start is None:
            raise MazeNotGeneratedError("start is undefined until generate() has been called")
        return self._start

    @property
    def end(self) -> Coordinate:
        if self._end is None:
            raise MazeNotGeneratedError("end is undefined until generate() has been called")
        return self._end

    def get_start(self) -> Coordinate:
        return self.start

    def get_end(self) -> Coordinate:
        return self.end

    def in_bounds(self, row: int, col: int) -> bool:
        return in_bounds(row, col, self.rows, self.cols)

    def is_walkable(self, row: int, col: int) -> bool:
        return self.in_bounds(row, col) and bool(self._cells[row, col] == OPEN)

    def snapshot(self) -> GridSnapshot:
        return GridSnapshot(self._cells)


class AbstractMazeEvaluator(ABC):
    """Base class scaffolding for evaluators that judge paths through a maze."""

    def __init__(self, grid: WalkableGrid, start: Coordinate, goal: Coordinate) -> None:
        self.grid = grid
        self.start = (int(start[0]), int(start[1]))
        self.goal = (int(goal[0]), int(goal[1]))

    @classmethod
    def from_record(cls, record: Dict[str, Any]):
        """Build an evaluator from a serialized maze record."""

        try:
            maze_grid = record["maze_grid"]
            start = record["start"]
            goal = record["goal"]
        except KeyError as exc:
            raise ValueError(f"Maze record is missing field {exc.args[0]!r}") from exc
        return cls(GridSnapshot(maze_grid), tuple(map(int, start)), tuple(map(int, goal)))

    @abstractmethod
    def evaluate(self, candidate_path: Sequence[Coordinate], *args, **kwargs):
        """Evaluate a candidate path through the maze."""


__all__ = [
    "AbstractMazeGenerator",
    "AbstractMazeEvaluator",
    "Coordinate",
    "DIRECTIONS",
    "GridSnapshot",
    "OPEN",
    "WALL",
    "WalkableGrid",
    "in_bounds",
    "neighbours",
]
