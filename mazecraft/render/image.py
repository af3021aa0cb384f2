"""Raster maze drawing with Pillow."""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

import numpy as np
from PIL import Image, ImageDraw

from ..grid import WALL, Cell, Grid
from .text import HighlightSets

WALL_COLOR = (51, 51, 51)
PATH_COLOR = (255, 255, 255)
START_COLOR = (40, 180, 80)
GOAL_COLOR = (220, 30, 30)
LINE_COLOR = (220, 0, 0)

FORWARD_OPEN_COLOR = (200, 230, 201)
FORWARD_CLOSED_COLOR = (255, 205, 210)
BACKWARD_OPEN_COLOR = (187, 222, 251)
BACKWARD_CLOSED_COLOR = (255, 236, 179)
PATH_FILL_COLOR = (129, 199, 132)


class _Layout:
    """Pixel geometry of the block array: walls on even, cells on odd indices."""

    def __init__(self, cell_size: int, wall_size: int) -> None:
        self.cell_size = cell_size
        self.wall_size = wall_size

    def offset(self, index: int) -> int:
        return (index + 1) // 2 * self.wall_size + index // 2 * self.cell_size

    def extent(self, index: int) -> int:
        return self.cell_size if index % 2 else self.wall_size

    def block_box(self, row: int, col: int) -> Tuple[int, int, int, int]:
        left = self.offset(col)
        top = self.offset(row)
        return left, top, left + self.extent(col) - 1, top + self.extent(row) - 1

    def cell_box(self, cell: Cell) -> Tuple[int, int, int, int]:
        return self.block_box(2 * cell.y + 1, 2 * cell.x + 1)

    def cell_center(self, cell: Cell) -> Tuple[float, float]:
        left, top, _, _ = self.cell_box(cell)
        return left + self.cell_size / 2, top + self.cell_size / 2


def render_image(
    grid: Grid,
    *,
    path: Optional[Sequence[Cell]] = None,
    highlights: Optional[HighlightSets] = None,
    cell_size: int = 16,
    wall_size: Optional[int] = None,
) -> Image.Image:
    """Draw the grid, then highlighted cells, then a line along ``path``."""
    if cell_size <= 0:
        raise ValueError("cell_size must be positive")
    if wall_size is None:
        wall_size = max(2, cell_size // 4)
    if wall_size <= 0:
        raise ValueError("wall_size must be positive")

    blocks = grid.to_array()
    layout = _Layout(cell_size, wall_size)
    rows, cols = blocks.shape
    canvas_dims = (
        layout.offset(cols - 1) + layout.extent(cols - 1),
        layout.offset(rows - 1) + layout.extent(rows - 1),
    )
    canvas = Image.new("RGB", canvas_dims, PATH_COLOR)
    draw = ImageDraw.Draw(canvas)

    for r, c in np.argwhere(blocks == WALL):
        draw.rectangle(layout.block_box(int(r), int(c)), fill=WALL_COLOR)

    if highlights is not None:
        for cells, color in (
            (highlights.backward_closed, BACKWARD_CLOSED_COLOR),
            (highlights.forward_closed, FORWARD_CLOSED_COLOR),
            (highlights.backward_open, BACKWARD_OPEN_COLOR),
            (highlights.forward_open, FORWARD_OPEN_COLOR),
            (highlights.path, PATH_FILL_COLOR),
        ):
            for cell in cells:
                draw.rectangle(layout.cell_box(cell), fill=color)

    if path:
        draw.rectangle(layout.cell_box(path[0]), fill=START_COLOR)
        draw.rectangle(layout.cell_box(path[-1]), fill=GOAL_COLOR)
        thickness = max(2, cell_size // 3)
        points = [layout.cell_center(cell) for cell in path]
        if len(points) >= 2:
            draw.line(points, fill=LINE_COLOR, width=thickness, joint="curve")
        else:
            x, y = points[0]
            draw.ellipse(
                (
                    x - thickness // 2,
                    y - thickness // 2,
                    x + thickness // 2,
                    y + thickness // 2,
                ),
                fill=LINE_COLOR,
            )
    return canvas


__all__ = ["render_image"]
