"""Maze generation engine."""

__all__ = [
    "Algorithm",
    "BinaryTreeBias",
    "GeneratorOptions",
    "GrowingTreeStrategy",
    "MazeGenerator",
]

from .options import Algorithm, BinaryTreeBias, GeneratorOptions, GrowingTreeStrategy
from .generator import MazeGenerator
