"""Check candidate paths against a carved grid."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from ..grid import Cell, Grid
from .solver import Point


@dataclass
class PathEvaluationResult:
    starts_at_start: bool
    touches_goal: bool
    connected: bool
    crosses_walls: bool
    length: int
    message: str

    @property
    def is_valid(self) -> bool:
        return self.starts_at_start and self.touches_goal and self.connected and not self.crosses_walls

    def to_dict(self) -> dict:
        return {
            "starts_at_start": self.starts_at_start,
            "touches_goal": self.touches_goal,
            "connected": self.connected,
            "crosses_walls": self.crosses_walls,
            "length": self.length,
            "is_valid": self.is_valid,
            "message": self.message,
        }


class PathEvaluator:
    """Evaluate paths by walking them step by step through open walls."""

    def __init__(self, grid: Grid) -> None:
        self.grid = grid

    def evaluate(self, path: Sequence[Point], start: Point, goal: Point) -> PathEvaluationResult:
        cells = [self._resolve(point) for point in path]
        start_cell = self._resolve(start)
        goal_cell = self._resolve(goal)

        starts_at_start = bool(cells) and cells[0] == start_cell
        touches_goal = bool(cells) and cells[-1] == goal_cell
        connected, crosses_walls = self._check_steps(cells)

        if not cells:
            message = "Path is empty."
        elif crosses_walls:
            message = "Path passes through a wall."
        elif not connected:
            message = "Path jumps between cells that are not adjacent."
        elif not starts_at_start:
            message = "Path does not begin at the start cell."
        elif not touches_goal:
            message = "Path does not reach the goal."
        else:
            message = "Path successfully connects start to goal."

        return PathEvaluationResult(
            starts_at_start=starts_at_start,
            touches_goal=touches_goal,
            connected=connected,
            crosses_walls=crosses_walls,
            length=len(cells),
            message=message,
        )

    # ------------------------------------------------------------------

    def _resolve(self, point: Point) -> Cell:
        if isinstance(point, Cell):
            return self.grid.cell(point.x, point.y)
        x, y = point
        return self.grid.cell(x, y)

    def _check_steps(self, cells: List[Cell]) -> Tuple[bool, bool]:
        if not cells:
            return False, False
        connected = True
        crosses_walls = False
        for here, there in zip(cells, cells[1:]):
            if abs(here.x - there.x) + abs(here.y - there.y) != 1:
                connected = False
            elif not self.grid.is_open(here, there):
                crosses_walls = True
        return connected, crosses_walls


__all__ = ["PathEvaluator", "PathEvaluationResult"]
