"""A* and bidirectional A* over a carved grid."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Set, Tuple, Union

from ..base import SolverStep, StepCallback, StepReporter
from ..grid import Cell, Grid
from ..structures import PriorityQueue

logger = logging.getLogger(__name__)

Point = Union[Tuple[int, int], Cell]


def manhattan(a: Cell, b: Cell) -> int:
    return abs(a.x - b.x) + abs(a.y - b.y)


class _Search:
    """One direction of an A* search: open queue, closed set and scores."""

    def __init__(self, grid: Grid, origin: Cell, target: Cell) -> None:
        self.grid = grid
        self.target = target
        self.open: PriorityQueue[Cell] = PriorityQueue()
        self.closed: Set[Cell] = set()
        self.g_score: Dict[Cell, int] = {origin: 0}
        self.came_from: Dict[Cell, Cell] = {}
        self.open.insert(origin, manhattan(origin, target))

    def settle_next(self) -> Optional[Cell]:
        """Close and return the best open cell, skipping stale queue entries."""
        while True:
            cell = self.open.extract_min()
            if cell is None:
                return None
            if cell in self.closed:
                continue
            self.closed.add(cell)
            return cell

    def expand(self, cell: Cell) -> None:
        tentative = self.g_score[cell] + 1
        for neighbor in self.grid.traversable_neighbors(cell):
            if tentative < self.g_score.get(neighbor, float("inf")):
                self.came_from[neighbor] = cell
                self.g_score[neighbor] = tentative
                self.open.insert(neighbor, tentative + manhattan(neighbor, self.target))

    def path_to(self, cell: Cell) -> List[Cell]:
        path = [cell]
        while cell in self.came_from:
            cell = self.came_from[cell]
            path.append(cell)
        path.reverse()
        return path

    def open_cells(self) -> List[Cell]:
        return [cell for cell in dict.fromkeys(self.open.items()) if cell not in self.closed]


class MazeSolver(StepReporter[SolverStep]):
    """Find shortest paths through a grid with a Manhattan-distance A*.

    Steps cost 1 and movement goes only through open walls. Grids with
    unreachable regions are fine: an unreachable goal yields ``[]``.
    """

    def __init__(self, grid: Grid, *, on_step: Optional[StepCallback] = None) -> None:
        super().__init__(on_step)
        self.grid = grid

    def solve(self, start: Point, end: Point) -> List[Cell]:
        return self.solve_bidirectional(start, end)

    def solve_astar(self, start: Point, end: Point) -> List[Cell]:
        start_cell = self._resolve(start)
        end_cell = self._resolve(end)
        search = _Search(self.grid, start_cell, end_cell)

        while True:
            current = search.settle_next()
            if current is None:
                logger.debug("No path from %s to %s", start_cell.position, end_cell.position)
                return []
            self.report(
                lambda: SolverStep(
                    grid=self.grid,
                    open_forward=search.open_cells(),
                    closed_forward=list(search.closed),
                    current_forward=current,
                )
            )
            if current == end_cell:
                path = search.path_to(current)
                logger.debug("A* found a path of %d cells", len(path))
                return path
            search.expand(current)

    def solve_bidirectional(self, start: Point, end: Point) -> List[Cell]:
        """Search from both ends, alternating one settled cell per side.

        The first cell closed by one side that the other side has already
        closed is the meeting node; the path is stitched together there.
        """
        start_cell = self._resolve(start)
        end_cell = self._resolve(end)
        if start_cell == end_cell:
            return [start_cell]

        forward = _Search(self.grid, start_cell, end_cell)
        backward = _Search(self.grid, end_cell, start_cell)

        meeting: Optional[Cell] = None
        while meeting is None:
            current_forward = forward.settle_next()
            if current_forward is None:
                break
            if current_forward in backward.closed:
                meeting = current_forward
            self._report_pair(forward, backward, current_forward, None, meeting)
            if meeting is not None:
                break
            forward.expand(current_forward)

            current_backward = backward.settle_next()
            if current_backward is None:
                break
            if current_backward in forward.closed:
                meeting = current_backward
            self._report_pair(forward, backward, None, current_backward, meeting)
            if meeting is not None:
                break
            backward.expand(current_backward)

        if meeting is None:
            logger.debug("No path from %s to %s", start_cell.position, end_cell.position)
            return []

        head = forward.path_to(meeting)
        tail = backward.path_to(meeting)
        tail.reverse()
        path = head + tail[1:]
        logger.debug("Searches met at %s; path has %d cells", meeting.position, len(path))
        return path

    # ------------------------------------------------------------------

    def _resolve(self, point: Point) -> Cell:
        if isinstance(point, Cell):
            return self.grid.cell(point.x, point.y)
        x, y = point
        return self.grid.cell(x, y)

    def _report_pair(
        self,
        forward: _Search,
        backward: _Search,
        current_forward: Optional[Cell],
        current_backward: Optional[Cell],
        meeting: Optional[Cell],
    ) -> None:
        self.report(
            lambda: SolverStep(
                grid=self.grid,
                open_forward=forward.open_cells(),
                closed_forward=list(forward.closed),
                open_backward=backward.open_cells(),
                closed_backward=list(backward.closed),
                current_forward=current_forward,
                current_backward=current_backward,
                meeting_node=meeting,
            )
        )


__all__ = ["MazeSolver", "Point", "manhattan"]
