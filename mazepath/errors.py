"""Exceptions raised by maze generation and search."""

from __future__ import annotations


class MazeError(Exception):
    """Base class for all maze errors."""


class InvalidDimensionsError(MazeError, ValueError):
    """Raised when a grid is requested with a non-positive row or column count."""

    def __init__(self, rows: int, cols: int) -> None:
        super().__init__(f"rows and cols must be positive, got {rows}x{cols}")
        self.rows = rows
        self.cols = cols


class CoordinateOutOfBoundsError(MazeError, IndexError):
    def __init__(self, cell, rows: int, cols: int) -> None:
        super().__init__(f"Cell {tuple(cell)} is outside the {rows}x{cols} grid")
        self.cell = tuple(cell)
        self.rows = rows
        self.cols = cols


class MazeNotGeneratedError(MazeError, RuntimeError):
    """Raised when start/end are queried before generate() has run."""


__all__ = [
    "MazeError",
    "InvalidDimensionsError",
    "CoordinateOutOfBoundsError",
    "MazeNotGeneratedError",
]
