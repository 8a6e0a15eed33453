"""Textual adapter that feeds host events into the editor core."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from zoomedit.application import Application
from zoomedit.modes import KeyInput, MouseInput
from zoomedit.render import ScreenGrid
from zoomedit.runtime import telemetry

NAMED_KEYS = {
    "up": "UP",
    "down": "DOWN",
    "left": "LEFT",
    "right": "RIGHT",
    "home": "HOME",
    "end": "END",
    "f1": "F1",
    "f5": "F5",
    "escape": "ESC",
    "enter": "ENTER",
    "backspace": "BACKSPACE",
    "tab": "TAB",
}

MOUSE_BUTTONS = {1: "left", 2: "middle", 3: "right"}


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


def normalize_key(
    key: str, character: Optional[str] = None, is_printable: bool = False
) -> Optional[KeyInput]:
    """Translate a Textual key name into a ``KeyInput``.

    Printable characters become themselves (``"H"``, ``"$"``); named keys
    and ``ctrl+`` combinations map onto the editor's key names. Keys the
    editor has no name for yield ``None``.
    """

    if is_printable and character:
        return KeyInput(key=character, text=character)

    *modifiers, name = key.split("+")
    if name in NAMED_KEYS:
        base = NAMED_KEYS[name]
    elif len(name) == 1:
        base = name
    else:
        return None

    text = "\t" if base == "TAB" and not modifiers else None
    return KeyInput(key=base, modifiers=tuple(modifiers), text=text)


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    refresh: Callable[[ScreenGrid], None]
    exit: Callable[[], None] = _noop


class TextualEditorAdapter:
    """Bridges Textual key, mouse and resize events to an ``Application``."""

    def __init__(self, application: Application, hooks: TextualUIHooks) -> None:
        if not isinstance(application.surface, ScreenGrid):
            raise TypeError("TextualEditorAdapter needs an Application drawing to a ScreenGrid")
        self.application = application
        self.grid: ScreenGrid = application.surface
        self.hooks = hooks

    def start(self) -> None:
        self.application.render()
        self.hooks.refresh(self.grid)

    def handle_textual_key(
        self,
        key: str,
        *,
        character: Optional[str] = None,
        is_printable: bool = False,
    ) -> bool:
        event = normalize_key(key, character, is_printable)
        if event is None:
            return False
        telemetry.record_event(
            "adapter.key", level="debug", data={"key": key, "mapped": event.key}
        )
        consumed = self.application.process_key_event(event)
        self._after_event(consumed)
        return consumed

    def handle_click(self, x: int, y: int, button: int = 1) -> bool:
        event = MouseInput(x=x, y=y, button=MOUSE_BUTTONS.get(button, "other"))
        consumed = self.application.process_mouse_event(event)
        self._after_event(consumed)
        return consumed

    def resize(self, width: int, height: int) -> None:
        self.grid.resize(width, height)
        self.application.render()
        self.hooks.refresh(self.grid)

    def _after_event(self, consumed: bool) -> None:
        if consumed:
            self.hooks.refresh(self.grid)
        if self.application.exit:
            self.hooks.exit()


__all__ = ["NAMED_KEYS", "TextualEditorAdapter", "TextualUIHooks", "normalize_key"]
