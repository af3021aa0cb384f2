"""Random sources for maze generation.

Every algorithm draws through ``random()`` on a single injected source so that
a seeded run is reproducible end to end.
"""

from __future__ import annotations

import random
from typing import MutableSequence, Optional, Protocol, Sequence, TypeVar, Union

T = TypeVar("T")

_MASK = 0xFFFFFFFF
_INCREMENT = 0x6D2B79F5


class RandomSource(Protocol):
    def random(self) -> float:
        ...


class SeededRandom:
    """Mulberry32 generator returning floats in ``[0, 1)``.

    Fast and statistically weak, but fully determined by its 32-bit seed and
    identical across platforms.
    """

    def __init__(self, seed: int) -> None:
        self.seed = seed
        self._state = seed & _MASK

    def random(self) -> float:
        self._state = (self._state + _INCREMENT) & _MASK
        t = self._state
        t = _imul(t ^ (t >> 15), t | 1)
        t ^= (t + _imul(t ^ (t >> 7), t | 61)) & _MASK
        return ((t ^ (t >> 14)) & _MASK) / 4294967296


def _imul(a: int, b: int) -> int:
    return (a * b) & _MASK


def create_random(seed: Optional[int] = None) -> Union[SeededRandom, random.Random]:
    """Seeded Mulberry32 for an int seed, otherwise a system-seeded source."""
    if seed is None:
        return random.Random()
    return SeededRandom(seed)


def random_index(rng: RandomSource, length: int) -> int:
    return int(rng.random() * length)


def choice(rng: RandomSource, items: Sequence[T]) -> T:
    return items[random_index(rng, len(items))]


def shuffle(rng: RandomSource, items: MutableSequence[T]) -> None:
    """In-place Fisher-Yates shuffle, walking from the last position down."""
    for i in range(len(items) - 1, 0, -1):
        j = random_index(rng, i + 1)
        items[i], items[j] = items[j], items[i]


__all__ = [
    "RandomSource",
    "SeededRandom",
    "choice",
    "create_random",
    "random_index",
    "shuffle",
]
