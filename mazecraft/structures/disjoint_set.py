"""Disjoint-set forest with path compression and union by rank."""

from __future__ import annotations

from typing import Dict, Generic, Hashable, Iterable, TypeVar

T = TypeVar("T", bound=Hashable)


class DisjointSet(Generic[T]):
    """Track which items have been merged into the same set."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._parent: Dict[T, T] = {}
        self._rank: Dict[T, int] = {}
        for item in items:
            self.make_set(item)

    def __len__(self) -> int:
        return len(self._parent)

    def __contains__(self, item: object) -> bool:
        return item in self._parent

    def make_set(self, item: T) -> None:
        if item not in self._parent:
            self._parent[item] = item
            self._rank[item] = 0

    def find(self, item: T) -> T:
        """Return the representative of ``item``'s set, compressing the path."""
        try:
            root = self._parent[item]
        except KeyError as exc:
            raise KeyError(f"Item {item!r} is not tracked by this disjoint set") from exc
        while self._parent[root] != root:
            root = self._parent[root]
        node = item
        while node != root:
            parent = self._parent[node]
            self._parent[node] = root
            node = parent
        return root

    def union(self, first: T, second: T) -> bool:
        """Merge the sets holding both items. Returns ``False`` if already merged."""
        root_a = self.find(first)
        root_b = self.find(second)
        if root_a == root_b:
            return False
        rank_a = self._rank[root_a]
        rank_b = self._rank[root_b]
        if rank_a < rank_b:
            self._parent[root_a] = root_b
        elif rank_a > rank_b:
            self._parent[root_b] = root_a
        else:
            self._parent[root_b] = root_a
            self._rank[root_a] = rank_a + 1
        return True

    def connected(self, first: T, second: T) -> bool:
        return self.find(first) == self.find(second)


__all__ = ["DisjointSet"]
