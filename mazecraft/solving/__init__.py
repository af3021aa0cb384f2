"""Pathfinding engine and path checking."""

__all__ = [
    "MazeSolver",
    "PathEvaluator",
    "PathEvaluationResult",
]

from .solver import MazeSolver
from .evaluator import PathEvaluator, PathEvaluationResult
