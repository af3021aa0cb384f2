"""Algorithm names and validated generation options."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from numbers import Real
from typing import Optional, Type, TypeVar, Union

from ..base import StepCallback

E = TypeVar("E", bound=Enum)


class Algorithm(str, Enum):
    RECURSIVE_BACKTRACKER = "recursive-backtracker"
    RECURSIVE_BACKTRACKER_BIASED = "recursive-backtracker-biased"
    PRIM = "prim"
    KRUSKAL = "kruskal"
    WILSON = "wilson"
    GROWING_TREE = "growing-tree"
    BINARY_TREE = "binary-tree"
    ALDOUS_BRODER = "aldous-broder"
    SIDEWINDER = "sidewinder"


class GrowingTreeStrategy(str, Enum):
    """How growing-tree picks the next active cell.

    ``newest`` behaves like the recursive backtracker, ``random`` like Prim's,
    ``oldest`` produces long corridors.
    """

    NEWEST = "newest"
    RANDOM = "random"
    OLDEST = "oldest"


class BinaryTreeBias(str, Enum):
    NORTH_WEST = "north-west"
    NORTH_EAST = "north-east"
    SOUTH_WEST = "south-west"
    SOUTH_EAST = "south-east"

    @property
    def vertical(self) -> str:
        return self.value.split("-")[0]

    @property
    def horizontal(self) -> str:
        return self.value.split("-")[1]


def coerce_enum(enum_type: Type[E], value: Union[E, str], label: str) -> E:
    if isinstance(value, enum_type):
        return value
    try:
        return enum_type(value)
    except ValueError as exc:
        choices = ", ".join(member.value for member in enum_type)
        raise ValueError(f"Unknown {label} {value!r}; expected one of: {choices}") from exc


@dataclass
class GeneratorOptions:
    """Knobs shared by every algorithm; each algorithm reads only its own."""

    seed: Optional[int] = None
    straight_bias: float = 0.75
    growing_tree_strategy: Union[GrowingTreeStrategy, str] = GrowingTreeStrategy.RANDOM
    binary_tree_bias: Union[BinaryTreeBias, str] = BinaryTreeBias.NORTH_WEST
    on_step: Optional[StepCallback] = None

    def __post_init__(self) -> None:
        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int)):
            raise ValueError("seed must be an integer or None")
        if isinstance(self.straight_bias, bool) or not isinstance(self.straight_bias, Real):
            raise ValueError("straight_bias must be a number between 0.0 and 1.0")
        if not 0.0 <= self.straight_bias <= 1.0:
            raise ValueError("straight_bias must be between 0.0 and 1.0")
        self.straight_bias = float(self.straight_bias)
        self.growing_tree_strategy = coerce_enum(
            GrowingTreeStrategy, self.growing_tree_strategy, "growing-tree strategy"
        )
        self.binary_tree_bias = coerce_enum(BinaryTreeBias, self.binary_tree_bias, "binary-tree bias")

    def to_dict(self) -> dict:
        return {
            "seed": self.seed,
            "straight_bias": self.straight_bias,
            "growing_tree_strategy": self.growing_tree_strategy.value,
            "binary_tree_bias": self.binary_tree_bias.value,
        }


__all__ = [
    "Algorithm",
    "BinaryTreeBias",
    "GeneratorOptions",
    "GrowingTreeStrategy",
    "coerce_enum",
]
