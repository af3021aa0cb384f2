"""Binary min-heap keyed by numeric priority."""

from __future__ import annotations

import heapq
import itertools
from typing import Generic, List, Optional, Tuple, TypeVar

T = TypeVar("T")


class PriorityQueue(Generic[T]):
    """Lower priority values are extracted first.

    Items are never compared with each other; an insertion counter breaks ties
    so any object can be queued, including the same item several times.
    """

    def __init__(self) -> None:
        self._heap: List[Tuple[float, int, T]] = []
        self._counter = itertools.count()

    def __len__(self) -> int:
        return len(self._heap)

    def insert(self, item: T, priority: float) -> None:
        heapq.heappush(self._heap, (priority, next(self._counter), item))

    def extract_min(self) -> Optional[T]:
        """Remove and return the lowest-priority item, or ``None`` when empty."""
        if not self._heap:
            return None
        _, _, item = heapq.heappop(self._heap)
        return item

    def peek_min(self) -> Optional[T]:
        if not self._heap:
            return None
        return self._heap[0][2]

    def is_empty(self) -> bool:
        return not self._heap

    def items(self) -> List[T]:
        """Snapshot of queued items in heap order."""
        return [entry[2] for entry in self._heap]


__all__ = ["PriorityQueue"]
