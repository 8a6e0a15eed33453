"""High-level editing verbs reused across modes."""

from .core import enter_command_mode, enter_insert_mode, force_redraw, quit_editor, show_help
from .edit import (
    backspace,
    delete_at_cursor,
    delete_line,
    newline,
    open_line_above,
    open_line_below,
    paste,
)
from .files import save, save_to
from .motion import jump_into_view, move_cursor, move_to_document_edge, move_to_marker
from .prompt import (
    cancel_prompt,
    commit_prompt,
    open_save_as,
    open_search,
    prompt_backspace,
    prompt_move,
    recall_search,
    repeat_search,
    run_search,
)
from .selection import begin_selection, clear_selection, copy_selection
from .view import pan_view, recenter_view, reset_zoom, zoom

__all__ = [
    "backspace",
    "begin_selection",
    "cancel_prompt",
    "clear_selection",
    "commit_prompt",
    "copy_selection",
    "delete_at_cursor",
    "delete_line",
    "enter_command_mode",
    "enter_insert_mode",
    "force_redraw",
    "jump_into_view",
    "move_cursor",
    "move_to_document_edge",
    "move_to_marker",
    "newline",
    "open_line_above",
    "open_line_below",
    "open_save_as",
    "open_search",
    "pan_view",
    "paste",
    "prompt_backspace",
    "prompt_move",
    "quit_editor",
    "recall_search",
    "recenter_view",
    "repeat_search",
    "reset_zoom",
    "run_search",
    "save",
    "save_to",
    "show_help",
    "zoom",
]
