"""Perfect maze generation and A* shortest-path search."""

__all__ = [
    "AbstractMazeGenerator",
    "AbstractMazeEvaluator",
    "GridSnapshot",
    "MazeError",
    "InvalidDimensionsError",
    "CoordinateOutOfBoundsError",
    "MazeNotGeneratedError",
    "EndPlacement",
    "MazeGenerator",
    "MazeRecord",
    "Pathfinder",
    "SearchNode",
    "SearchResult",
    "find_path",
    "MazeEvaluator",
    "MazeEvaluationResult",
    "MazeStructureReport",
    "analyze_structure",
    "render_image",
    "render_text",
]

from .base import AbstractMazeGenerator, AbstractMazeEvaluator, GridSnapshot
from .errors import (
    MazeError,
    InvalidDimensionsError,
    CoordinateOutOfBoundsError,
    MazeNotGeneratedError,
)
from .maze import (
    EndPlacement,
    MazeGenerator,
    MazeRecord,
    Pathfinder,
    SearchNode,
    SearchResult,
    find_path,
    MazeEvaluator,
    MazeEvaluationResult,
    MazeStructureReport,
    analyze_structure,
    render_image,
    render_text,
)
