"""Base classes and shared utilities for editor modes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Optional, Tuple

from zoomedit.buffer import TextBuffer
from zoomedit.clipboard import Clipboard
from zoomedit.config import EditorConfig
from zoomedit.render import ViewOpts

from .edit_mode import INSERT, EditMode


@dataclass(slots=True)
class KeyInput:
    """Normalized key event passed to modes."""

    key: str
    modifiers: Tuple[str, ...] = ()
    text: Optional[str] = None


@dataclass(slots=True)
class MouseInput:
    """Mouse press at a screen cell."""

    x: int
    y: int
    button: str = "left"


@dataclass(frozen=True, slots=True)
class Redraw:
    """What to repaint after an event: the whole frame or one buffer row."""

    line: Optional[int] = None
    break_on_line_end: bool = False


FULL_REDRAW = Redraw()


@dataclass(slots=True)
class ModeResult:
    """Result returned from ``Mode.handle_key``."""

    consumed: bool
    switch_to: Optional[EditMode] = None
    status: str = "ok"
    message: Optional[str] = None
    redraw: Optional[Redraw] = None


@dataclass(slots=True)
class ModeContext:
    """Shared services every mode and action can access."""

    buffer: TextBuffer
    view: ViewOpts
    clipboard: Clipboard
    bus: "ModeBus"
    config: EditorConfig = field(default_factory=EditorConfig)
    prompt: TextBuffer = field(default_factory=lambda: TextBuffer(name="prompt"))
    filepath: str = ""
    mode: EditMode = INSERT
    log: str = ""
    last_search: Optional[str] = None
    exit: bool = False
    extras: Dict[str, object] = field(default_factory=dict)


class ModeBus:
    """Minimal event bus letting modes exchange structured signals."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


class Mode:
    """Base class all concrete editor modes inherit from."""

    name: str = "mode"

    def __init__(self, context: ModeContext) -> None:
        self.context = context

    @property
    def pending(self) -> Tuple[str, ...]:
        return ()

    def on_enter(
        self, previous: Optional[str]
    ) -> None:  # pragma: no cover - default no-op
        del previous

    def on_exit(
        self, next_mode: Optional[str]
    ) -> None:  # pragma: no cover - default no-op
        del next_mode

    def handle_key(
        self, key: KeyInput
    ) -> ModeResult:  # pragma: no cover - abstract override
        raise NotImplementedError


__all__ = [
    "FULL_REDRAW",
    "KeyInput",
    "Mode",
    "ModeBus",
    "ModeContext",
    "ModeResult",
    "MouseInput",
    "Redraw",
]
