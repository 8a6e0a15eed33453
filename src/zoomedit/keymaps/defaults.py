"""Built-in keymaps that seed each mode with the editor's default keys."""

from __future__ import annotations

from functools import partial
from typing import Iterable, Sequence

from zoomedit.actions import core as core_actions
from zoomedit.actions import edit as edit_actions
from zoomedit.actions import files as file_actions
from zoomedit.actions import motion as motion_actions
from zoomedit.actions import prompt as prompt_actions
from zoomedit.actions import selection as selection_actions
from zoomedit.actions import view as view_actions
from zoomedit.buffer import CursorMarker

from .models import ActionRef, Binding, KeySequence
from .registry import KeymapRegistry

NOT_PROMPTING = ("!prompt_active",)

DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    ActionRef("core.enter_insert", core_actions.enter_insert_mode, "Enter insert mode"),
    ActionRef("core.enter_command", core_actions.enter_command_mode, "Enter command mode"),
    ActionRef("core.quit", core_actions.quit_editor, "Quit the editor"),
    ActionRef("core.help", core_actions.show_help, "Show the help overlay"),
    ActionRef("core.redraw", core_actions.force_redraw, "Redraw the whole screen"),
    ActionRef("motion.left", partial(motion_actions.move_cursor, dx=-1, dy=0), "Cursor left"),
    ActionRef("motion.right", partial(motion_actions.move_cursor, dx=1, dy=0), "Cursor right"),
    ActionRef("motion.up", partial(motion_actions.move_cursor, dx=0, dy=-1), "Cursor up"),
    ActionRef("motion.down", partial(motion_actions.move_cursor, dx=0, dy=1), "Cursor down"),
    ActionRef(
        "motion.line_start",
        partial(motion_actions.move_to_marker, marker=CursorMarker.LINE_BEGINNING),
        "Cursor to line start",
    ),
    ActionRef(
        "motion.line_end",
        partial(motion_actions.move_to_marker, marker=CursorMarker.LINE_END),
        "Cursor to line end",
    ),
    ActionRef(
        "motion.next_word",
        partial(motion_actions.move_to_marker, marker=CursorMarker.NEXT_WORD),
        "Cursor to next word",
    ),
    ActionRef(
        "motion.previous_word",
        partial(motion_actions.move_to_marker, marker=CursorMarker.PREVIOUS_WORD),
        "Cursor to previous word",
    ),
    ActionRef("motion.into_view", motion_actions.jump_into_view, "Bring cursor into view"),
    ActionRef(
        "motion.document_start",
        partial(motion_actions.move_to_document_edge, end=False),
        "Cursor to document start",
    ),
    ActionRef(
        "motion.document_end",
        partial(motion_actions.move_to_document_edge, end=True),
        "Cursor to document end",
    ),
    ActionRef("view.pan_left", partial(view_actions.pan_view, dx=-1, dy=0), "Pan left"),
    ActionRef("view.pan_right", partial(view_actions.pan_view, dx=1, dy=0), "Pan right"),
    ActionRef("view.pan_up", partial(view_actions.pan_view, dx=0, dy=-1), "Pan up"),
    ActionRef("view.pan_down", partial(view_actions.pan_view, dx=0, dy=1), "Pan down"),
    ActionRef(
        "view.page_left",
        partial(view_actions.pan_view, dx=-1, dy=0, stepped=True),
        "Pan left by the pan step",
    ),
    ActionRef(
        "view.page_right",
        partial(view_actions.pan_view, dx=1, dy=0, stepped=True),
        "Pan right by the pan step",
    ),
    ActionRef(
        "view.page_up",
        partial(view_actions.pan_view, dx=0, dy=-1, stepped=True),
        "Pan up by the pan step",
    ),
    ActionRef(
        "view.page_down",
        partial(view_actions.pan_view, dx=0, dy=1, stepped=True),
        "Pan down by the pan step",
    ),
    ActionRef("view.recenter", view_actions.recenter_view, "Center the view on the cursor"),
    ActionRef("view.zoom_out", partial(view_actions.zoom, direction=1), "Zoom out"),
    ActionRef("view.zoom_in", partial(view_actions.zoom, direction=-1), "Zoom in"),
    ActionRef("view.zoom_reset", view_actions.reset_zoom, "Reset zoom"),
    ActionRef("edit.backspace", edit_actions.backspace, "Delete before the cursor"),
    ActionRef("edit.newline", edit_actions.newline, "Split the line"),
    ActionRef("edit.delete_at_cursor", edit_actions.delete_at_cursor, "Delete under the cursor"),
    ActionRef("edit.delete_line", edit_actions.delete_line, "Delete the cursor line"),
    ActionRef("edit.open_below", edit_actions.open_line_below, "Open a line below"),
    ActionRef("edit.open_above", edit_actions.open_line_above, "Open a line above"),
    ActionRef("edit.paste", edit_actions.paste, "Paste the clipboard"),
    ActionRef("selection.begin", selection_actions.begin_selection, "Start selecting"),
    ActionRef("selection.clear", selection_actions.clear_selection, "Clear the selection"),
    ActionRef("selection.copy", selection_actions.copy_selection, "Copy the selection"),
    ActionRef("file.save", file_actions.save, "Save to the current file"),
    ActionRef("prompt.save_as", prompt_actions.open_save_as, "Save to a new file"),
    ActionRef(
        "prompt.search_forward",
        partial(prompt_actions.open_search, reverse=False),
        "Search forward",
    ),
    ActionRef(
        "prompt.search_backward",
        partial(prompt_actions.open_search, reverse=True),
        "Search backward",
    ),
    ActionRef(
        "search.repeat_forward",
        partial(prompt_actions.repeat_search, reverse=False),
        "Repeat the last search forward",
    ),
    ActionRef(
        "search.repeat_backward",
        partial(prompt_actions.repeat_search, reverse=True),
        "Repeat the last search backward",
    ),
    ActionRef("prompt.commit", prompt_actions.commit_prompt, "Run the prompt"),
    ActionRef("prompt.cancel", prompt_actions.cancel_prompt, "Abandon the prompt"),
    ActionRef("prompt.backspace", prompt_actions.prompt_backspace, "Delete in the prompt"),
    ActionRef("prompt.left", partial(prompt_actions.prompt_move, dx=-1), "Prompt cursor left"),
    ActionRef("prompt.right", partial(prompt_actions.prompt_move, dx=1), "Prompt cursor right"),
    ActionRef("prompt.recall", prompt_actions.recall_search, "Recall the last search"),
)


def _bind(
    mode: str, keys: str, action_id: str, *, when: Sequence[str] = ()
) -> Binding:
    return Binding(
        id=f"{mode}.{keys}",
        mode=mode,
        sequence=KeySequence.from_strings(*keys.split(" ")),
        action_id=action_id,
        when=tuple(when),
    )


DEFAULT_BINDINGS: tuple[Binding, ...] = (
    # global
    _bind("global", "UP", "motion.up", when=NOT_PROMPTING),
    _bind("global", "DOWN", "motion.down"),
    _bind("global", "LEFT", "motion.left", when=NOT_PROMPTING),
    _bind("global", "RIGHT", "motion.right", when=NOT_PROMPTING),
    _bind("global", "ctrl+UP", "view.pan_up"),
    _bind("global", "ctrl+DOWN", "view.pan_down"),
    _bind("global", "ctrl+LEFT", "view.pan_left"),
    _bind("global", "ctrl+RIGHT", "view.pan_right"),
    _bind("global", "ctrl+c", "core.quit"),
    _bind("global", "ctrl+d", "edit.delete_line"),
    _bind("global", "ctrl+a", "motion.into_view"),
    _bind("global", "ctrl+v", "edit.paste"),
    _bind("global", "ctrl+l", "view.recenter"),
    _bind("global", "ctrl+s", "file.save"),
    _bind("global", "ctrl+x", "prompt.save_as"),
    _bind("global", "HOME", "motion.line_start"),
    _bind("global", "END", "motion.line_end"),
    _bind("global", "F1", "core.help"),
    _bind("global", "F5", "core.redraw"),
    # command
    _bind("command", "h", "motion.left"),
    _bind("command", "j", "motion.down"),
    _bind("command", "k", "motion.up"),
    _bind("command", "l", "motion.right"),
    _bind("command", "H", "view.page_left"),
    _bind("command", "J", "view.page_down"),
    _bind("command", "K", "view.page_up"),
    _bind("command", "L", "view.page_right"),
    _bind("command", "w", "motion.next_word"),
    _bind("command", "b", "motion.previous_word"),
    _bind("command", "0", "motion.line_start"),
    _bind("command", "$", "motion.line_end"),
    _bind("command", "g g", "motion.document_start"),
    _bind("command", "G", "motion.document_end"),
    _bind("command", "v", "selection.begin"),
    _bind("command", "x", "edit.delete_at_cursor"),
    _bind("command", "y", "selection.copy"),
    _bind("command", "ESC", "selection.clear", when=("selecting",)),
    _bind("command", "/", "prompt.search_forward"),
    _bind("command", "?", "prompt.search_backward"),
    _bind("command", "n", "search.repeat_forward"),
    _bind("command", "N", "search.repeat_backward"),
    _bind("command", "_", "view.zoom_out"),
    _bind("command", "+", "view.zoom_in"),
    _bind("command", "=", "view.zoom_reset"),
    _bind("command", "i", "core.enter_insert"),
    _bind("command", "o", "edit.open_below"),
    _bind("command", "O", "edit.open_above"),
    # insert
    _bind("insert", "ESC", "core.enter_command"),
    _bind("insert", "BACKSPACE", "edit.backspace"),
    _bind("insert", "ENTER", "edit.newline"),
    # prompt
    _bind("prompt", "ESC", "prompt.cancel"),
    _bind("prompt", "ENTER", "prompt.commit"),
    _bind("prompt", "BACKSPACE", "prompt.backspace"),
    _bind("prompt", "LEFT", "prompt.left"),
    _bind("prompt", "RIGHT", "prompt.right"),
    _bind("prompt", "UP", "prompt.recall"),
)


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    replace: bool = False,
    extra_bindings: Iterable[Binding] | None = None,
    include_actions: Sequence[str] | None = None,
    exclude_actions: Sequence[str] | None = None,
    include_bindings: Sequence[str] | None = None,
    exclude_bindings: Sequence[str] | None = None,
) -> None:
    """Register built-in actions and bindings for every mode."""

    allowed_actions = _build_filters(include_actions, exclude_actions)
    allowed_bindings = _build_filters(include_bindings, exclude_bindings)

    for action in DEFAULT_ACTIONS:
        if not _selected(action.id, allowed_actions):
            continue
        registry.register_action(action, replace=replace)

    for binding in DEFAULT_BINDINGS:
        if not _selected(binding.id, allowed_bindings):
            continue
        if not _selected(binding.action_id, allowed_actions):
            continue
        registry.register_binding(binding, replace=replace)

    if extra_bindings:
        for binding in extra_bindings:
            registry.register_binding(binding, replace=replace)


def _build_filters(
    include: Sequence[str] | None, exclude: Sequence[str] | None
) -> tuple[set[str] | None, set[str]]:
    include_set = set(include) if include else None
    exclude_set = set(exclude or ())
    return include_set, exclude_set


def _selected(item_id: str, filters: tuple[set[str] | None, set[str]]) -> bool:
    include, exclude = filters
    if include is not None and item_id not in include:
        return False
    if item_id in exclude:
        return False
    return True


__all__ = ["load_default_keymaps", "DEFAULT_ACTIONS", "DEFAULT_BINDINGS"]
