"""Step observation shared by maze generators and solvers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Generic, List, Optional, Sequence, TypeVar

from .grid import Cell, Grid

StepT = TypeVar("StepT", "GenerationStep", "SolverStep")
StepCallback = Callable[[StepT], Optional[bool]]


def _positions(cells: Sequence[Cell]) -> List[List[int]]:
    return [list(cell.position) for cell in cells]


def _position(cell: Optional[Cell]) -> Optional[List[int]]:
    return list(cell.position) if cell is not None else None


@dataclass
class GenerationStep:
    """Snapshot handed to a generation observer after one unit of progress."""

    grid: Grid
    current_cell: Optional[Cell] = None
    active_set: List[Cell] = field(default_factory=list)
    stack: List[Cell] = field(default_factory=list)
    walk_path: List[Cell] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "current_cell": _position(self.current_cell),
            "active_set": _positions(self.active_set),
            "stack": _positions(self.stack),
            "walk_path": _positions(self.walk_path),
        }


@dataclass
class SolverStep:
    """Snapshot handed to a solver observer after one queue extraction."""

    grid: Grid
    open_forward: List[Cell] = field(default_factory=list)
    closed_forward: List[Cell] = field(default_factory=list)
    open_backward: List[Cell] = field(default_factory=list)
    closed_backward: List[Cell] = field(default_factory=list)
    current_forward: Optional[Cell] = None
    current_backward: Optional[Cell] = None
    meeting_node: Optional[Cell] = None

    def to_dict(self) -> dict:
        return {
            "open_forward": _positions(self.open_forward),
            "closed_forward": _positions(self.closed_forward),
            "open_backward": _positions(self.open_backward),
            "closed_backward": _positions(self.closed_backward),
            "current_forward": _position(self.current_forward),
            "current_backward": _position(self.current_backward),
            "meeting_node": _position(self.meeting_node),
        }


class MazeAborted(RuntimeError):
    """Raised when a step observer asks a run to stop.

    ``grid`` is the grid as it stood at the checkpoint; it may be partially
    carved but its walls are still symmetric.
    """

    def __init__(self, grid: Grid, message: str = "Run stopped by step observer") -> None:
        super().__init__(message)
        self.grid = grid


class StepReporter(Generic[StepT]):
    """Base for runs that expose progress to an optional ``on_step`` callback.

    The callback is invoked synchronously. Returning ``True`` from it cancels
    the run with :class:`MazeAborted` at that checkpoint.
    """

    def __init__(self, on_step: Optional[StepCallback] = None) -> None:
        if on_step is not None and not callable(on_step):
            raise ValueError("on_step must be callable")
        self.on_step = on_step

    @property
    def observed(self) -> bool:
        return self.on_step is not None

    def report(self, build_step: Callable[[], StepT]) -> None:
        """Build a step snapshot and hand it to the observer, if there is one."""
        if self.on_step is None:
            return
        step = build_step()
        if self.on_step(step):
            raise MazeAborted(step.grid)


__all__ = [
    "GenerationStep",
    "MazeAborted",
    "SolverStep",
    "StepCallback",
    "StepReporter",
]
