"""Supporting data structures for generation and search."""

__all__ = ["DisjointSet", "PriorityQueue"]

from .disjoint_set import DisjointSet
from .priority_queue import PriorityQueue
