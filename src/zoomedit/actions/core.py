"""Core action implementations shared across modes."""

from __future__ import annotations

from zoomedit.files import help_text
from zoomedit.keymaps import ResolutionMatch
from zoomedit.modes.base_mode import FULL_REDRAW, ModeContext, ModeResult
from zoomedit.modes.edit_mode import COMMAND, INSERT


def enter_insert_mode(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del context, match
    return ModeResult(consumed=True, switch_to=INSERT, message="enter_insert")


def enter_command_mode(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del context, match
    return ModeResult(consumed=True, switch_to=COMMAND, message="exit_insert")


def quit_editor(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.exit = True
    return ModeResult(consumed=True, status="quit")


def show_help(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.bus.emit("help.show", help_text())
    return ModeResult(consumed=True, status="help")


def force_redraw(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del context, match
    return ModeResult(consumed=True, redraw=FULL_REDRAW)


__all__ = [
    "enter_insert_mode",
    "enter_command_mode",
    "force_redraw",
    "quit_editor",
    "show_help",
]
