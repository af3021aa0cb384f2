"""Rectangular maze generation and A* solving."""

__all__ = [
    "Algorithm",
    "BinaryTreeBias",
    "Cell",
    "Direction",
    "DisjointSet",
    "GenerationStep",
    "GeneratorOptions",
    "Grid",
    "GrowingTreeStrategy",
    "HighlightSets",
    "MazeAborted",
    "MazeGenerator",
    "MazeSolver",
    "PathEvaluationResult",
    "PathEvaluator",
    "PriorityQueue",
    "SeededRandom",
    "SolverStep",
    "Walls",
    "create_random",
    "render_image",
    "render_text",
]

from .base import GenerationStep, MazeAborted, SolverStep
from .grid import Cell, Direction, Grid, Walls
from .rng import SeededRandom, create_random
from .structures import DisjointSet, PriorityQueue
from .generation import (
    Algorithm,
    BinaryTreeBias,
    GeneratorOptions,
    GrowingTreeStrategy,
    MazeGenerator,
)
from .solving import MazeSolver, PathEvaluator, PathEvaluationResult
from .render import HighlightSets, render_image, render_text
