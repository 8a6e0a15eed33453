"""Clipboard capability and its implementations."""

from __future__ import annotations

from typing import Optional, Protocol

import pyperclip


class ClipboardError(RuntimeError):
    """Raised when the host clipboard cannot be read or written."""


class Clipboard(Protocol):
    def copy(self, text: str) -> None:
        ...

    def paste(self) -> str:
        ...


class SystemClipboard:
    """OS clipboard via pyperclip."""

    def copy(self, text: str) -> None:
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as exc:
            raise ClipboardError(f"clipboard unavailable: {exc}") from exc

    def paste(self) -> str:
        try:
            return pyperclip.paste() or ""
        except pyperclip.PyperclipException as exc:
            raise ClipboardError(f"clipboard unavailable: {exc}") from exc


class MemoryClipboard:
    """Process-local clipboard, used when no system clipboard is wanted."""

    def __init__(self, text: str = "", *, error: Optional[str] = None) -> None:
        self.text = text
        self.error = error

    def copy(self, text: str) -> None:
        if self.error:
            raise ClipboardError(self.error)
        self.text = text

    def paste(self) -> str:
        if self.error:
            raise ClipboardError(self.error)
        return self.text


def create_clipboard(kind: str) -> Clipboard:
    if kind == "memory":
        return MemoryClipboard()
    if kind == "system":
        return SystemClipboard()
    raise ValueError(f"Unknown clipboard kind '{kind}'")


__all__ = [
    "Clipboard",
    "ClipboardError",
    "MemoryClipboard",
    "SystemClipboard",
    "create_clipboard",
]
