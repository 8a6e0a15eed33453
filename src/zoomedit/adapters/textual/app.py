"""Executable Textual app that hosts the editor."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

try:  # pragma: no cover - imported only when the app is run
    from rich.text import Text
    from textual import events
    from textual.app import App, ComposeResult
    from textual.widgets import Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use zoomedit.adapters.textual.app"
    ) from exc

from zoomedit.application import Application
from zoomedit.buffer import TextBuffer
from zoomedit.clipboard import Clipboard, create_clipboard
from zoomedit.config import EditorConfig
from zoomedit.files import load_initial
from zoomedit.render import ScreenGrid
from zoomedit.runtime import telemetry

from .controller import TextualEditorAdapter, TextualUIHooks

CARET_STYLE = "reverse"
STATUS_STYLE = "bold"


def grid_to_text(grid: ScreenGrid) -> Text:
    """Rich text for the whole grid, with carets drawn in reverse video."""

    text = Text(no_wrap=True, overflow="crop")
    caret_x, caret_y = grid.caret
    for row, line in enumerate(grid.lines()):
        if row:
            text.append("\n")
        if row == grid.status_row:
            _append_with_caret(text, line, grid.status_highlight, base=STATUS_STYLE)
        elif grid.caret_visible and row == caret_y:
            _append_with_caret(text, line, caret_x)
        else:
            text.append(line)
    return text


def _append_with_caret(
    text: Text, line: str, column: Optional[int], *, base: str = ""
) -> None:
    if column is None or not 0 <= column < len(line):
        text.append(line, style=base)
        return
    caret_style = f"{base} {CARET_STYLE}".strip()
    text.append(line[:column], style=base)
    text.append(line[column], style=caret_style)
    text.append(line[column + 1 :], style=base)


class EditorApp(App[None]):
    """Full-screen Textual UI around one ``Application``."""

    CSS = """
	Screen {
		overflow: hidden;
	}

	#editor {
		width: 100%;
		height: 100%;
	}
	"""

    ENABLE_COMMAND_PALETTE = False

    def __init__(
        self,
        *,
        buffer: TextBuffer,
        clipboard: Clipboard,
        filepath: str,
        config: Optional[EditorConfig] = None,
    ) -> None:
        super().__init__()
        self._buffer = buffer
        self._clipboard = clipboard
        self._filepath = filepath
        self._config = config
        self.adapter: TextualEditorAdapter | None = None
        self._editor_widget: Static | None = None

    def compose(self) -> ComposeResult:
        self._editor_widget = Static("", id="editor")
        yield self._editor_widget

    def on_mount(self) -> None:
        width, height = self.size
        application = Application(
            self._buffer,
            self._clipboard,
            self._filepath,
            surface=ScreenGrid(width, height),
            config=self._config,
        )
        hooks = TextualUIHooks(refresh=self._refresh, exit=self.exit)
        self.adapter = TextualEditorAdapter(application, hooks)
        self.adapter.start()

    def on_key(self, event: events.Key) -> None:
        if not self.adapter:
            return
        self.adapter.handle_textual_key(
            event.key, character=event.character, is_printable=event.is_printable
        )
        event.prevent_default()
        event.stop()

    def on_mouse_down(self, event: events.MouseDown) -> None:
        if self.adapter:
            self.adapter.handle_click(event.x, event.y, event.button)

    def on_resize(self, event: events.Resize) -> None:
        if self.adapter:
            self.adapter.resize(event.size.width, event.size.height)

    def action_help_quit(self) -> None:
        # ctrl+c belongs to the editor
        if self.adapter:
            self.adapter.handle_textual_key("ctrl+c")

    def _refresh(self, grid: ScreenGrid) -> None:
        if self._editor_widget:
            self._editor_widget.update(grid_to_text(grid))


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="A zoomable modal text editor.")
    parser.add_argument(
        "path",
        nargs="?",
        help="File to edit (default: the bundled sample text)",
    )
    parser.add_argument(
        "--memory-clipboard",
        action="store_true",
        help="Keep copied text inside the editor instead of the system clipboard",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Write logs to this file (default: $ZOOMEDIT_LOG_FILE)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    telemetry.configure(log_file=args.log_file)
    config = EditorConfig.from_env()

    try:
        text = load_initial(args.path)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"zoomedit: cannot open {args.path}: {exc}", file=sys.stderr)
        return 1

    filepath = args.path or config.default_path
    clipboard = create_clipboard("memory" if args.memory_clipboard else config.clipboard)
    app = EditorApp(
        buffer=TextBuffer.from_text(text, name=filepath),
        clipboard=clipboard,
        filepath=filepath,
        config=config,
    )
    app.run()
    return 0


if __name__ == "__main__":  # pragma: no cover - manual run
    sys.exit(main())
