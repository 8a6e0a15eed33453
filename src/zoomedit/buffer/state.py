"""Cursor and selection state for buffers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from zoomedit.geometry import Position

from .document import Document


class CursorMarker(str, Enum):
    """Named cursor destinations understood by ``TextBuffer.move_cursor_to``."""

    LINE_BEGINNING = "line_beginning"
    LINE_END = "line_end"
    NEXT_WORD = "next_word"
    PREVIOUS_WORD = "previous_word"


@dataclass(slots=True)
class BufferState:
    """Mutable cursor + selection info tied to a Document."""

    cursor: Position = Position(0, 0)
    anchor: Optional[Position] = None
    selecting: bool = False

    def begin_select(self) -> None:
        self.anchor = self.cursor
        self.selecting = True

    def clear_selection(self) -> None:
        self.anchor = None
        self.selecting = False

    def selection(self) -> Optional[Tuple[Position, Position]]:
        if not self.selecting or self.anchor is None:
            return None
        return min(self.anchor, self.cursor), max(self.anchor, self.cursor)


def clamp_cursor(document: Document, x: int, y: int) -> Position:
    """Clamp ``(x, y)`` so it addresses a valid insertion point."""

    y = max(0, min(int(y), document.row_count - 1))
    x = max(0, min(int(x), document.row_len(y)))
    return Position(x, y)


__all__ = ["BufferState", "CursorMarker", "clamp_cursor"]
