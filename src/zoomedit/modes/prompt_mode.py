"""Prompt mode: edits the scratch line used by search and save-as."""

from __future__ import annotations

from typing import Optional

from zoomedit.buffer import ROW_SEPARATOR, TextBuffer

from .base_mode import KeyInput, ModeResult
from .keymap_helpers import KeymapMode


class PromptMode(KeymapMode):
    name = "prompt"

    def on_enter(self, previous: Optional[str]) -> None:
        del previous
        self.context.prompt = TextBuffer(name="prompt")

    def on_exit(self, next_mode: Optional[str]) -> None:
        super().on_exit(next_mode)
        self.context.prompt = TextBuffer(name="prompt")

    def handle_unmapped(self, key: KeyInput) -> ModeResult:
        if not key.text or key.modifiers:
            return ModeResult(consumed=False, status="miss")
        for char in key.text:
            if char not in (ROW_SEPARATOR, "\r"):
                self.context.prompt.write(char)
        return ModeResult(consumed=True, status="editing")


__all__ = ["PromptMode"]
