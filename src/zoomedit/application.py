"""The editor core: routes input events and keeps the screen in sync.

``Application`` owns the document buffer, the view and the mode manager.
After every consumed event it repaints what the handler asked for (the
whole frame, one buffer row, or nothing), then the status line, then the
caret. It never talks to a terminal directly; all output goes through a
``TerminalSurface``.
"""

from __future__ import annotations

from typing import Iterable, Optional, Union

from zoomedit.buffer import TextBuffer
from zoomedit.clipboard import Clipboard
from zoomedit.config import EditorConfig
from zoomedit.keymaps import KeymapRegistry
from zoomedit.modes import (
    FULL_REDRAW,
    CommandMode,
    EditMode,
    InsertMode,
    KeyInput,
    ModeBus,
    ModeContext,
    MouseInput,
    Prompt,
    PromptMode,
    Redraw,
)
from zoomedit.modes.mode_manager import ModeManager
from zoomedit.render import StringRenderer, TerminalSurface, ViewOpts
from zoomedit.runtime import telemetry

InputEvent = Union[KeyInput, MouseInput]


class Application:
    def __init__(
        self,
        buffer: TextBuffer,
        clipboard: Clipboard,
        filepath: str,
        *,
        surface: TerminalSurface,
        config: Optional[EditorConfig] = None,
        keymap_registry: Optional[KeymapRegistry] = None,
    ) -> None:
        self.surface = surface
        self.config = config or EditorConfig()
        self.view = ViewOpts()
        self.context = ModeContext(
            buffer=buffer,
            view=self.view,
            clipboard=clipboard,
            bus=ModeBus(),
            config=self.config,
            filepath=filepath,
        )
        self.modes = ModeManager(self.context, keymap_registry=keymap_registry)
        for mode_cls in (InsertMode, CommandMode, PromptMode):
            self.modes.register_mode(mode_cls)
        self.cursor_hidden = False
        self.help_visible = False
        self.logger = telemetry.get_logger("zoomedit.application")
        self.context.bus.subscribe("help.show", self._show_help)

    # -- state --------------------------------------------------------------

    @property
    def buffer(self) -> TextBuffer:
        return self.context.buffer

    @property
    def edit_mode(self) -> EditMode:
        return self.context.mode

    @property
    def log(self) -> str:
        return self.context.log

    @property
    def exit(self) -> bool:
        return self.context.exit

    @property
    def filepath(self) -> str:
        return self.context.filepath

    # -- events -------------------------------------------------------------

    def run(self, events: Iterable[InputEvent]) -> None:
        """Paint the first frame, then process ``events`` until quit."""

        self.render()
        for event in events:
            self.process_event(event)
            if self.exit:
                break

    def process_event(self, event: object) -> bool:
        if isinstance(event, KeyInput):
            return self.process_key_event(event)
        if isinstance(event, MouseInput):
            return self.process_mouse_event(event)
        return False

    def process_key_event(self, key: KeyInput) -> bool:
        help_was_visible = self.help_visible
        result = self.modes.handle_key(key)
        if not result.consumed:
            return False
        self._apply(FULL_REDRAW if help_was_visible else result.redraw)
        return True

    def process_mouse_event(self, event: MouseInput) -> bool:
        if event.button != "left":
            return False
        self.update_view_size()
        if not (0 <= event.x < self.view.width and 0 <= event.y < self.view.height):
            return False

        position = self.view.to_buffer(event.x, event.y)
        self.buffer.set_cursor(position)
        cursor = self.buffer.cursor
        self.context.log = f"mouse: set cursor location to {cursor.x}:{cursor.y}"
        self._apply(FULL_REDRAW if self.help_visible else None)
        return True

    def _apply(self, redraw: Optional[Redraw]) -> None:
        if redraw is None:
            self.render_status_bar()
            self.update_cursor_pos()
        elif redraw.line is None:
            self.render()
        else:
            self.render_line(redraw.line, break_on_line_end=redraw.break_on_line_end)

    # -- rendering ----------------------------------------------------------

    def render(self) -> None:
        """Repaint every text row, the status line and the caret."""

        with telemetry.span("render::full", metadata={"scale": self.view.scale}):
            self.update_view_size()
            for row, text in StringRenderer().rows(self.buffer, self.view):
                self.surface.paint_row(row, text)
            self.help_visible = False
        self.render_status_bar()
        self.update_cursor_pos()

    def render_line(self, line: int, *, break_on_line_end: bool = False) -> None:
        """Repaint only the screen rows showing buffer row ``line``."""

        with telemetry.span("render::line", metadata={"line": line}):
            self.update_view_size()
            renderer = StringRenderer.with_line_hint(
                line, break_on_line_end=break_on_line_end
            )
            for row, text in renderer.rows(self.buffer, self.view):
                self.surface.paint_row(row, text)
        self.render_status_bar()
        self.update_cursor_pos()

    def render_status_bar(self) -> None:
        view = self.view
        loc = view.location
        mode = self.edit_mode
        text = (
            f"help[F1] {loc.x:g}:{loc.y:g}:{view.width}:{view.height}/{view.scale:g}"
            f" // [{self.log}] [{mode.name.upper()} mode]"
        )
        highlight = None
        if isinstance(mode, Prompt):
            prefix = f"{mode.action.label}: "
            highlight = len(prefix) + self.context.prompt.cursor.x
            text = f"{prefix}{self.context.prompt.to_string()} | {text}"
        self.surface.paint_status(text, highlight)

    def update_cursor_pos(self) -> None:
        """Show the caret over the cursor when it is in view, else hide it."""

        cell = None if self.help_visible else self.view.caret_cell(self.buffer.cursor)
        if cell is None:
            if not self.cursor_hidden:
                self.surface.hide_caret()
                self.cursor_hidden = True
            return

        self.surface.move_caret(*cell)
        if self.cursor_hidden:
            self.surface.show_caret()
            self.cursor_hidden = False

    def update_view_size(self) -> None:
        columns, rows = self.surface.size()
        self.view.resize(columns, rows - 1)

    def _show_help(self, payload: object) -> None:
        lines = str(payload).split("\n")
        self.update_view_size()
        for row in range(self.view.height):
            text = lines[row] if row < len(lines) else ""
            self.surface.paint_row(row, text.ljust(self.view.width))
        self.help_visible = True


__all__ = ["Application", "InputEvent"]
