"""Cell, wall and adjacency primitives shared by every algorithm."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional, Set, Tuple

import numpy as np

WALL = 1
PATH = 0


class Direction(Enum):
    """Grid directions in neighbor enumeration order."""

    UP = (0, -1, "top")
    RIGHT = (1, 0, "right")
    DOWN = (0, 1, "bottom")
    LEFT = (-1, 0, "left")

    @property
    def delta(self) -> Tuple[int, int]:
        dx, dy, _ = self.value
        return dx, dy

    @property
    def wall(self) -> str:
        """Name of the wall a cell opens when carving in this direction."""
        return self.value[2]

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    @classmethod
    def between(cls, a: "Cell", b: "Cell") -> Optional["Direction"]:
        """Direction leading from ``a`` to ``b``, or ``None`` if not adjacent."""
        step = (b.x - a.x, b.y - a.y)
        for direction in cls:
            if direction.delta == step:
                return direction
        return None


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.RIGHT: Direction.LEFT,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
}


@dataclass
class Walls:
    top: bool = True
    right: bool = True
    bottom: bool = True
    left: bool = True

    def as_tuple(self) -> Tuple[bool, bool, bool, bool]:
        return self.top, self.right, self.bottom, self.left

    def count(self) -> int:
        return sum(self.as_tuple())

    def to_dict(self) -> dict:
        return {
            "top": self.top,
            "right": self.right,
            "bottom": self.bottom,
            "left": self.left,
        }


class Cell:
    """One grid unit. Equal to any other cell at the same ``(x, y)``."""

    __slots__ = ("x", "y", "walls", "visited", "_width")

    def __init__(self, x: int, y: int, width: int) -> None:
        self.x = x
        self.y = y
        self.walls = Walls()
        self.visited = False
        self._width = width

    @property
    def position(self) -> Tuple[int, int]:
        return self.x, self.y

    @property
    def index(self) -> int:
        """Row-major index of the cell inside its grid."""
        return self.y * self._width + self.x

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cell):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    def __repr__(self) -> str:
        return f"Cell(x={self.x}, y={self.y})"

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y, "walls": self.walls.to_dict()}


class Grid:
    """A ``height x width`` row-major arena of fully walled cells.

    The grid owns one :class:`Cell` per position, so the handle returned by
    :meth:`cell` is shared by every caller. All wall mutations go through
    :meth:`remove_walls` (or :meth:`open_boundary` for the outer frame), which
    keeps the two sides of a shared wall in agreement.
    """

    def __init__(self, width: int, height: int) -> None:
        if not isinstance(width, int) or not isinstance(height, int):
            raise ValueError("Width and height must be integers.")
        if width <= 0 or height <= 0:
            raise ValueError("Width and height must be greater than 0.")
        self.width = width
        self.height = height
        self._cells: List[Cell] = [
            Cell(x, y, width) for y in range(height) for x in range(width)
        ]

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)

    def rows(self) -> List[List[Cell]]:
        return [
            self._cells[y * self.width:(y + 1) * self.width]
            for y in range(self.height)
        ]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cell(self, x: int, y: int) -> Cell:
        if not self.in_bounds(x, y):
            raise IndexError(f"Coordinate ({x}, {y}) out of bounds")
        return self._cells[y * self.width + x]

    # ------------------------------------------------------------------

    def neighbors(self, cell: Cell) -> List[Cell]:
        """Physically adjacent cells in up, right, down, left order."""
        result: List[Cell] = []
        for direction in Direction:
            dx, dy = direction.delta
            nx, ny = cell.x + dx, cell.y + dy
            if self.in_bounds(nx, ny):
                result.append(self._cells[ny * self.width + nx])
        return result

    def unvisited_neighbors(self, cell: Cell) -> List[Cell]:
        return [neighbor for neighbor in self.neighbors(cell) if not neighbor.visited]

    def traversable_neighbors(self, cell: Cell) -> List[Cell]:
        """Neighbors reachable through an open wall."""
        result: List[Cell] = []
        for direction in Direction:
            if getattr(cell.walls, direction.wall):
                continue
            dx, dy = direction.delta
            nx, ny = cell.x + dx, cell.y + dy
            if self.in_bounds(nx, ny):
                result.append(self._cells[ny * self.width + nx])
        return result

    def remove_walls(self, a: Cell, b: Cell) -> None:
        """Open the wall pair between two grid-adjacent cells."""
        direction = Direction.between(a, b)
        if direction is None:
            raise ValueError(f"Cells {a.position} and {b.position} are not adjacent")
        setattr(a.walls, direction.wall, False)
        setattr(b.walls, direction.opposite.wall, False)

    def is_open(self, a: Cell, b: Cell) -> bool:
        direction = Direction.between(a, b)
        if direction is None:
            return False
        return not getattr(a.walls, direction.wall)

    def open_boundary(self, cell: Cell, direction: Direction) -> None:
        """Open an outer wall, e.g. to mark an entrance or an exit."""
        dx, dy = direction.delta
        if self.in_bounds(cell.x + dx, cell.y + dy):
            raise ValueError(
                f"{direction.wall} wall of {cell.position} is not on the grid boundary"
            )
        setattr(cell.walls, direction.wall, False)

    # ------------------------------------------------------------------

    def passage_count(self) -> int:
        """Number of opened internal walls, each shared wall counted once."""
        count = 0
        for cell in self._cells:
            if cell.x < self.width - 1 and not cell.walls.right:
                count += 1
            if cell.y < self.height - 1 and not cell.walls.bottom:
                count += 1
        return count

    def reachable_from(self, cell: Cell) -> Set[Cell]:
        queue = deque([cell])
        seen = {cell}
        while queue:
            current = queue.popleft()
            for neighbor in self.traversable_neighbors(current):
                if neighbor not in seen:
                    seen.add(neighbor)
                    queue.append(neighbor)
        return seen

    def wall_signature(self) -> Tuple[Tuple[bool, bool, bool, bool], ...]:
        return tuple(cell.walls.as_tuple() for cell in self._cells)

    def to_array(self) -> np.ndarray:
        """Block representation: ``1`` for wall, ``0`` for open space.

        Cell ``(x, y)`` lands at ``[2 * y + 1, 2 * x + 1]``; the blocks between
        cell centers carry the shared walls and the outer frame carries the
        boundary walls.
        """
        blocks = np.full((2 * self.height + 1, 2 * self.width + 1), WALL, dtype=np.uint8)
        for cell in self._cells:
            r, c = 2 * cell.y + 1, 2 * cell.x + 1
            blocks[r, c] = PATH
            if not cell.walls.top:
                blocks[r - 1, c] = PATH
            if not cell.walls.right:
                blocks[r, c + 1] = PATH
            if not cell.walls.bottom:
                blocks[r + 1, c] = PATH
            if not cell.walls.left:
                blocks[r, c - 1] = PATH
        return blocks


__all__ = ["Cell", "Direction", "Grid", "Walls", "WALL", "PATH"]
