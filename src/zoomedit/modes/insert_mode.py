"""Insert mode: unmapped text goes straight into the buffer."""

from __future__ import annotations

from zoomedit.buffer import ROW_SEPARATOR

from .base_mode import FULL_REDRAW, KeyInput, ModeResult, Redraw
from .keymap_helpers import KeymapMode


class InsertMode(KeymapMode):
    name = "insert"

    def handle_unmapped(self, key: KeyInput) -> ModeResult:
        if not key.text or key.modifiers:
            return ModeResult(consumed=False, status="miss")

        buffer = self.context.buffer
        row = buffer.cursor.y
        for char in key.text.replace("\r", ""):
            buffer.write(char)
        self.context.log = f"[{key.text}]"

        if ROW_SEPARATOR in key.text:
            return ModeResult(consumed=True, status="inserted", redraw=FULL_REDRAW)
        return ModeResult(
            consumed=True,
            status="inserted",
            redraw=Redraw(line=row, break_on_line_end=True),
        )


__all__ = ["InsertMode"]
