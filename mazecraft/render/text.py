"""Plain-text maze drawing."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Set, Union

from ..grid import Cell, Grid


@dataclass
class HighlightSets:
    """Cells to mark when drawing; any subset may be empty."""

    path: Set[Cell] = field(default_factory=set)
    forward_open: Set[Cell] = field(default_factory=set)
    forward_closed: Set[Cell] = field(default_factory=set)
    backward_open: Set[Cell] = field(default_factory=set)
    backward_closed: Set[Cell] = field(default_factory=set)

    @classmethod
    def from_path(cls, path: Iterable[Cell]) -> "HighlightSets":
        return cls(path=set(path))

    def marker(self, cell: Cell) -> str:
        if cell in self.path:
            return " . "
        if cell in self.backward_open:
            return " O "
        if cell in self.forward_open:
            return " o "
        if cell in self.backward_closed:
            return " X "
        if cell in self.forward_closed:
            return " x "
        return "   "


def render_text(
    grid: Grid,
    path_or_highlights: Optional[Union[Iterable[Cell], HighlightSets]] = None,
) -> str:
    if path_or_highlights is None:
        highlights = HighlightSets()
    elif isinstance(path_or_highlights, HighlightSets):
        highlights = path_or_highlights
    else:
        highlights = HighlightSets.from_path(path_or_highlights)

    rows = grid.rows()
    lines: List[str] = ["+" + "".join(("---" if cell.walls.top else "   ") + "+" for cell in rows[0])]
    for row in rows:
        line = "|" if row[0].walls.left else " "
        for cell in row:
            line += highlights.marker(cell)
            line += "|" if cell.walls.right else " "
        lines.append(line)
        lines.append("+" + "".join(("---" if cell.walls.bottom else "   ") + "+" for cell in row))
    return "\n".join(lines)


__all__ = ["HighlightSets", "render_text"]
