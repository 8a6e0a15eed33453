"""Viewport rendering: view geometry, string renderer, terminal surfaces."""

from .renderer import ScreenRow, StringRenderer
from .surface import ScreenGrid, TerminalSurface
from .view import ViewOpts

__all__ = [
    "ScreenRow",
    "StringRenderer",
    "ScreenGrid",
    "TerminalSurface",
    "ViewOpts",
]
