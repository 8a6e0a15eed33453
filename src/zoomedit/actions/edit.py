"""Text editing actions."""

from __future__ import annotations

from zoomedit.buffer import ROW_SEPARATOR, CursorMarker
from zoomedit.clipboard import ClipboardError
from zoomedit.keymaps import ResolutionMatch
from zoomedit.modes.base_mode import FULL_REDRAW, ModeContext, ModeResult, Redraw
from zoomedit.modes.edit_mode import INSERT
from zoomedit.runtime import telemetry


def backspace(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    removed = context.buffer.delete()
    if removed is None:
        return ModeResult(consumed=True, status="noop")
    if removed.is_separator:
        return ModeResult(consumed=True, redraw=FULL_REDRAW)
    return ModeResult(consumed=True, redraw=Redraw(line=context.buffer.cursor.y))


def newline(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.buffer.write(ROW_SEPARATOR)
    return ModeResult(consumed=True, redraw=FULL_REDRAW)


def delete_at_cursor(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    buffer = context.buffer
    if buffer.cursor.x >= buffer.line_len():
        return ModeResult(consumed=True, status="noop")
    buffer.move_cursor(1, 0)
    buffer.delete()
    return ModeResult(consumed=True, redraw=Redraw(line=buffer.cursor.y))


def delete_line(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    """Remove the cursor row together with the separator that starts it.

    The first row has no leading separator, so once emptied the separator
    after it is removed instead.
    """

    del match
    buffer = context.buffer
    first_row = buffer.cursor.y == 0
    buffer.move_cursor_to(CursorMarker.LINE_END)
    while True:
        removed = buffer.delete()
        if removed is None or removed.is_separator:
            break

    buffer.move_cursor_to(CursorMarker.LINE_BEGINNING)
    buffer.move_cursor(0, 1)
    if first_row:
        buffer.delete()
    return ModeResult(consumed=True, redraw=FULL_REDRAW)


def open_line_below(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.buffer.move_cursor_to(CursorMarker.LINE_END)
    context.buffer.write(ROW_SEPARATOR)
    return ModeResult(consumed=True, switch_to=INSERT, redraw=FULL_REDRAW)


def open_line_above(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.buffer.move_cursor_to(CursorMarker.LINE_BEGINNING)
    context.buffer.write(ROW_SEPARATOR)
    context.buffer.move_cursor(0, -1)
    return ModeResult(consumed=True, switch_to=INSERT, redraw=FULL_REDRAW)


def paste(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    try:
        text = context.clipboard.paste()
    except ClipboardError as exc:
        context.log = f"paste failed: {exc}"
        telemetry.record_event(
            "clipboard.paste_failed", level="error", data={"error": str(exc)}
        )
        return ModeResult(consumed=True, status="error")

    text = text.replace("\r", "")
    for char in text:
        context.buffer.write(char)
    context.log = f"pasted {len(text)} characters"
    return ModeResult(consumed=True, redraw=FULL_REDRAW)


__all__ = [
    "backspace",
    "delete_at_cursor",
    "delete_line",
    "newline",
    "open_line_above",
    "open_line_below",
    "paste",
]
