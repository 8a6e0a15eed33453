"""Cursor movement actions."""

from __future__ import annotations

from zoomedit.buffer import CursorMarker
from zoomedit.keymaps import ResolutionMatch
from zoomedit.modes.base_mode import FULL_REDRAW, ModeContext, ModeResult


def move_cursor(
    context: ModeContext, match: ResolutionMatch, *, dx: int, dy: int
) -> ModeResult:
    del match
    context.buffer.move_cursor(dx, dy)
    return ModeResult(consumed=True, status="moved")


def move_to_marker(
    context: ModeContext, match: ResolutionMatch, *, marker: CursorMarker
) -> ModeResult:
    del match
    context.buffer.move_cursor_to(marker)
    return ModeResult(consumed=True, status="moved")


def jump_into_view(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    """Put the cursor at column 0 of the row shown in the middle of the view."""

    del match
    view = context.view
    row = view.to_buffer(0, view.height // 2).y
    context.buffer.set_cursor((0, row))
    return ModeResult(consumed=True, status="moved")


def move_to_document_edge(
    context: ModeContext, match: ResolutionMatch, *, end: bool
) -> ModeResult:
    """Jump to the start or the end of the document, scrolling to it."""

    del match
    buffer = context.buffer
    if end:
        buffer.set_cursor((0, buffer.row_count - 1))
        buffer.move_cursor_to(CursorMarker.LINE_END)
    else:
        buffer.set_cursor((0, 0))
    if context.view.caret_cell(buffer.cursor) is None:
        context.view.center_on(buffer.cursor)
        return ModeResult(consumed=True, status="moved", redraw=FULL_REDRAW)
    return ModeResult(consumed=True, status="moved")


__all__ = ["jump_into_view", "move_cursor", "move_to_document_edge", "move_to_marker"]
