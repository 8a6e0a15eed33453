"""Selection actions."""

from __future__ import annotations

from zoomedit.buffer import cells_to_text
from zoomedit.clipboard import ClipboardError
from zoomedit.keymaps import ResolutionMatch
from zoomedit.modes.base_mode import ModeContext, ModeResult
from zoomedit.runtime import telemetry


def begin_selection(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.buffer.begin_select()
    cursor = context.buffer.cursor
    context.log = f"selecting from {cursor.x}:{cursor.y}"
    return ModeResult(consumed=True, status="selecting")


def clear_selection(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.buffer.clear_selection()
    context.log = "selection cleared"
    return ModeResult(consumed=True)


def copy_selection(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    """Copy the selection to the clipboard; the selection stays active."""

    del match
    cells = context.buffer.copy()
    if cells is None:
        context.log = "nothing selected"
        return ModeResult(consumed=True, status="noop")

    text = cells_to_text(cells)
    try:
        context.clipboard.copy(text)
    except ClipboardError as exc:
        context.log = f"copy failed: {exc}"
        telemetry.record_event(
            "clipboard.copy_failed", level="error", data={"error": str(exc)}
        )
        return ModeResult(consumed=True, status="error")

    context.log = f"copied {len(text)} characters"
    return ModeResult(consumed=True, status="copied")


__all__ = ["begin_selection", "clear_selection", "copy_selection"]
