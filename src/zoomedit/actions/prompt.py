"""Prompt actions: opening, editing, committing and cancelling, plus search."""

from __future__ import annotations

from dataclasses import replace

from zoomedit.buffer import CursorMarker, TextBuffer
from zoomedit.keymaps import ResolutionMatch
from zoomedit.modes.base_mode import FULL_REDRAW, ModeContext, ModeResult
from zoomedit.modes.edit_mode import Prompt, PromptAction, SaveFileAs, Search
from zoomedit.runtime import telemetry

from .files import save_to


def open_prompt(context: ModeContext, action: PromptAction) -> ModeResult:
    """Switch to a prompt that returns to the current mode.

    Asking for a prompt while one is open is a logged no-op.
    """

    if isinstance(context.mode, Prompt):
        telemetry.record_event(
            "prompt.nested",
            level="warning",
            data={"open": context.mode.action, "requested": action},
        )
        return ModeResult(consumed=True, status="noop", message="prompt_already_open")
    return ModeResult(
        consumed=True,
        switch_to=Prompt(return_mode=context.mode, action=action),
        message="prompt_open",
    )


def open_search(
    context: ModeContext, match: ResolutionMatch, *, reverse: bool = False
) -> ModeResult:
    del match
    return open_prompt(context, Search(reverse=reverse))


def open_save_as(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    return open_prompt(context, SaveFileAs())


def prompt_backspace(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.prompt.delete()
    return ModeResult(consumed=True, status="editing")


def prompt_move(context: ModeContext, match: ResolutionMatch, *, dx: int) -> ModeResult:
    del match
    context.prompt.move_cursor(dx, 0)
    return ModeResult(consumed=True, status="editing")


def recall_search(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    """Replace the prompt text with the previous search (search prompts only)."""

    del match
    mode = context.mode
    if not isinstance(mode, Prompt) or not isinstance(mode.action, Search):
        return ModeResult(consumed=True, status="noop")
    if context.last_search is None:
        return ModeResult(consumed=True, status="noop")
    context.prompt = TextBuffer.from_text(context.last_search, name="prompt")
    context.prompt.move_cursor_to(CursorMarker.LINE_END)
    return ModeResult(consumed=True, status="editing")


def cancel_prompt(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    mode = context.mode
    if not isinstance(mode, Prompt):
        return ModeResult(consumed=False, status="miss")
    return ModeResult(consumed=True, switch_to=mode.return_mode, message="prompt_cancel")


def commit_prompt(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    mode = context.mode
    if not isinstance(mode, Prompt):
        return ModeResult(consumed=False, status="miss")

    text = context.prompt.to_string()
    if isinstance(mode.action, Search):
        result = run_search(context, text, reverse=mode.action.reverse)
    else:
        result = save_to(context, text)
    return replace(result, switch_to=mode.return_mode, message="prompt_commit")


def repeat_search(
    context: ModeContext, match: ResolutionMatch, *, reverse: bool = False
) -> ModeResult:
    del match
    if context.last_search is None:
        context.log = "no previous search"
        return ModeResult(consumed=True, status="noop")
    return run_search(context, context.last_search, reverse=reverse)


def run_search(context: ModeContext, text: str, *, reverse: bool) -> ModeResult:
    """Move the cursor to the nearest match, scrolling it into view if needed.

    A forward search starts one character past the cursor so repeating it
    advances to the next occurrence.
    """

    if not text:
        context.log = "nothing to search for"
        return ModeResult(consumed=True, status="noop")

    context.last_search = text
    buffer = context.buffer
    start = buffer.cursor if reverse else buffer.step(buffer.cursor, 1)
    found = buffer.search(text, start, reverse)
    if found is None:
        context.log = f"'{text}' not found"
        return ModeResult(consumed=True, status="not_found")

    buffer.set_cursor(found)
    context.log = f"found '{text}' at {found.x}:{found.y}"
    if context.view.caret_cell(found) is None:
        context.view.center_on(found)
        return ModeResult(consumed=True, status="found", redraw=FULL_REDRAW)
    return ModeResult(consumed=True, status="found")


__all__ = [
    "cancel_prompt",
    "commit_prompt",
    "open_prompt",
    "open_save_as",
    "open_search",
    "prompt_backspace",
    "prompt_move",
    "recall_search",
    "repeat_search",
    "run_search",
]
