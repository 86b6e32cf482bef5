"""Maze generation, A* search, rendering and evaluation package."""

__all__ = [
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

from .generator import EndPlacement, MazeGenerator, MazeRecord
from .pathfinder import Pathfinder, SearchNode, SearchResult, find_path
from .evaluator import MazeEvaluator, MazeEvaluationResult, MazeStructureReport, analyze_structure
from .render import render_image, render_text
