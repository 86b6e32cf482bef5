"""Text and image renderers for maze grids."""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

from PIL import Image, ImageDraw

from ..base import Coordinate, WalkableGrid

WALL_COLOR = (0, 0, 0)
PATH_COLOR = (255, 255, 255)
START_COLOR = (220, 30, 30)
GOAL_COLOR = (40, 180, 80)
LINE_COLOR = (220, 0, 0)


def render_text(
    grid: WalkableGrid,
    *,
    path: Optional[Sequence[Coordinate]] = None,
    start: Optional[Coordinate] = None,
    end: Optional[Coordinate] = None,
    wall_glyph: str = "#",
    open_glyph: str = " ",
    path_glyph: str = ".",
) -> str:
    """Render one line per row: walls as ``wall_glyph``, open cells as ``open_glyph``."""

    on_path = set(map(tuple, path or ()))
    lines = []
    for r in range(grid.rows):
        chars = []
        for c in range(grid.cols):
            if start is not None and (r, c) == tuple(start):
                chars.append("S")
            elif end is not None and (r, c) == tuple(end):
                chars.append("E")
            elif (r, c) in on_path:
                chars.append(path_glyph)
            else:
                chars.append(open_glyph if grid.is_walkable(r, c) else wall_glyph)
        lines.append("".join(chars))
    return "\n".join(lines)


def render_image(
    grid: WalkableGrid,
    *,
    cell_size: int = 32,
    start: Optional[Coordinate] = None,
    goal: Optional[Coordinate] = None,
    path: Optional[Sequence[Coordinate]] = None,
) -> Image.Image:
    if cell_size <= 0:
        raise ValueError("cell_size must be positive")
    canvas = Image.new("RGB", (grid.cols * cell_size, grid.rows * cell_size), WALL_COLOR)
    draw = ImageDraw.Draw(canvas)

    for r in range(grid.rows):
        for c in range(grid.cols):
            if start is not None and (r, c) == tuple(start):
                fill = START_COLOR
            elif goal is not None and (r, c) == tuple(goal):
                fill = GOAL_COLOR
            else:
                fill = PATH_COLOR if grid.is_walkable(r, c) else WALL_COLOR
            _draw_cell(draw, (r, c), cell_size, fill)

    if path:
        thickness = max(2, cell_size // 3)
        points = [
            (c * cell_size + cell_size / 2, r * cell_size + cell_size / 2)
            for r, c in path
        ]
        if len(points) >= 2:
            draw.line(points, fill=LINE_COLOR, width=thickness, joint="curve")
        else:
            x, y = points[0]
            half = thickness / 2
            draw.ellipse((x - half, y - half, x + half, y + half), fill=LINE_COLOR)
    return canvas


def _draw_cell(
    draw: ImageDraw.ImageDraw,
    cell: Coordinate,
    cell_size: int,
    color: Tuple[int, int, int],
) -> None:
    r, c = cell
    left = c * cell_size
    top = r * cell_size
    draw.rectangle((left, top, left + cell_size - 1, top + cell_size - 1), fill=color)


__all__ = ["render_image", "render_text"]
