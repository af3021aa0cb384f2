"""Text and image renderers for finished grids."""

__all__ = ["HighlightSets", "render_image", "render_text"]

from .text import HighlightSets, render_text
from .image import render_image
