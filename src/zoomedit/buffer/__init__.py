"""Text buffer model: document rows, cursor, selection, search."""

from .buffer import TextBuffer, cells_to_text
from .document import ROW_SEPARATOR, Cell, Document
from .state import BufferState, CursorMarker, clamp_cursor

__all__ = [
    "Cell",
    "Document",
    "ROW_SEPARATOR",
    "BufferState",
    "CursorMarker",
    "TextBuffer",
    "cells_to_text",
    "clamp_cursor",
]
