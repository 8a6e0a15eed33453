"""High-level text buffer combining document storage and cursor state."""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import ContextManager, List, Optional, Tuple

from zoomedit.geometry import Position
from zoomedit.runtime import telemetry

from .document import ROW_SEPARATOR, Cell, Document
from .state import BufferState, CursorMarker, clamp_cursor


class TextBuffer:
    """Coordinate-addressable character store with a clamped cursor.

    None of the operations raise for out-of-range input: positions are
    clamped and failed lookups return ``None``.
    """

    def __init__(
        self,
        *,
        name: str = "default",
        document: Optional[Document] = None,
        state: Optional[BufferState] = None,
    ) -> None:
        self.name = name
        self.document = document or Document()
        self.state = state or BufferState()
        self.state.cursor = clamp_cursor(self.document, *self.state.cursor)

    @classmethod
    def from_text(cls, text: str, *, name: str = "default") -> "TextBuffer":
        return cls(name=name, document=Document.from_text(text))

    def to_string(self) -> str:
        return self.document.to_text()

    __str__ = to_string

    @property
    def cursor(self) -> Position:
        return self.state.cursor

    @property
    def anchor(self) -> Optional[Position]:
        return self.state.anchor

    @property
    def selecting(self) -> bool:
        return self.state.selecting

    @property
    def row_count(self) -> int:
        return self.document.row_count

    @property
    def version(self) -> int:
        return self.document.version

    def line_len(self) -> int:
        return self.document.row_len(self.state.cursor.y)

    def get_cell(self, x: int, y: int) -> Optional[Cell]:
        char = self.document.get_char(x, y)
        if char is None:
            return None
        return Cell(char)

    # -- mutation -----------------------------------------------------------

    def write(self, char: str) -> None:
        with _Mutation(self, "write"):
            x, y = self.state.cursor
            if char == ROW_SEPARATOR:
                self.document.split_row(x, y)
                self.state.cursor = Position(0, y + 1)
            else:
                self.document.insert_char(x, y, char)
                self.state.cursor = Position(x + 1, y)

    def delete(self) -> Optional[Cell]:
        """Remove the character before the cursor (backspace)."""

        with _Mutation(self, "delete"):
            x, y = self.state.cursor
            if x > 0:
                char = self.document.remove_char(x - 1, y)
                self.state.cursor = Position(x - 1, y)
                return Cell(char)
            if y > 0:
                join = self.document.join_with_previous(y)
                self.state.cursor = Position(join, y - 1)
                return Cell(ROW_SEPARATOR)
            return None

    # -- navigation ---------------------------------------------------------

    def set_cursor(self, position: Position | Tuple[int, int]) -> None:
        x, y = position
        self.state.cursor = clamp_cursor(self.document, x, y)

    def move_cursor(self, dx: int, dy: int) -> None:
        x, y = self.state.cursor
        self.set_cursor((x + dx, y + dy))

    def move_cursor_to(self, marker: CursorMarker) -> None:
        x, y = self.state.cursor
        if marker is CursorMarker.LINE_BEGINNING:
            self.set_cursor((0, y))
        elif marker is CursorMarker.LINE_END:
            self.set_cursor((self.document.row_len(y), y))
        elif marker is CursorMarker.NEXT_WORD:
            self.set_cursor(self.next_word(self.state.cursor, forward=True))
        elif marker is CursorMarker.PREVIOUS_WORD:
            self.set_cursor(self.next_word(self.state.cursor, forward=False))

    def next_word(self, start: Position, *, forward: bool) -> Position:
        """Start of the next (or previous) whitespace-delimited word."""

        text = self.to_string()
        offset = self._offset(start)
        if forward:
            end = len(text)
            while offset < end and not text[offset].isspace():
                offset += 1
            while offset < end and text[offset].isspace():
                offset += 1
        else:
            while offset > 0 and text[offset - 1].isspace():
                offset -= 1
            while offset > 0 and not text[offset - 1].isspace():
                offset -= 1
        return self._position(offset)

    def step(self, start: Position, delta: int) -> Position:
        """Move ``start`` by ``delta`` characters in reading order."""

        offset = self._offset(start) + delta
        offset = max(0, min(offset, self.document.length()))
        return self._position(offset)

    # -- search -------------------------------------------------------------

    def search(
        self, text: str, start: Position, reverse: bool = False
    ) -> Optional[Position]:
        """Nearest occurrence of ``text`` from ``start``; no wraparound.

        Forward search considers matches starting at or after ``start``;
        reverse search considers matches starting strictly before it.
        """

        if not text:
            return None
        haystack = self.to_string()
        offset = self._offset(start)
        if reverse:
            found = haystack.rfind(text, 0, offset + len(text) - 1)
        else:
            found = haystack.find(text, offset)
        if found < 0:
            return None
        return self._position(found)

    # -- selection ----------------------------------------------------------

    def begin_select(self) -> None:
        self.state.begin_select()

    def clear_selection(self) -> None:
        self.state.clear_selection()

    def selection(self) -> Optional[Tuple[Position, Position]]:
        return self.state.selection()

    def copy(self) -> Optional[List[Cell]]:
        selection = self.state.selection()
        if selection is None:
            return None
        start, end = selection
        text = self.to_string()[self._offset(start) : self._offset(end)]
        return [Cell(char) for char in text]

    # -- helpers ------------------------------------------------------------

    def _offset(self, position: Position) -> int:
        clamped = clamp_cursor(self.document, *position)
        return self.document.offset_of(clamped.x, clamped.y)

    def _position(self, offset: int) -> Position:
        x, y = self.document.position_of(offset)
        return Position(x, y)


class _Mutation(AbstractContextManager["_Mutation"]):
    """Wraps a buffer edit in a telemetry span and re-clamps the cursor."""

    def __init__(self, buffer: TextBuffer, label: str) -> None:
        self.buffer = buffer
        self.label = label
        self._span_cm: Optional[ContextManager[object]] = None

    def __enter__(self) -> "_Mutation":
        self.buffer.set_cursor(self.buffer.state.cursor)
        self._span_cm = telemetry.span(
            name=f"buffer::{self.label}",
            metadata={"buffer": self.buffer.name},
        )
        self._span_cm.__enter__()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False


def cells_to_text(cells: List[Cell]) -> str:
    return "".join(cell.char for cell in cells)


__all__ = ["TextBuffer", "cells_to_text"]
