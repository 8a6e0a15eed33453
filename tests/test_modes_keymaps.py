from __future__ import annotations

from typing import Any, Dict, Optional

import pytest

from zoomedit.buffer import TextBuffer
from zoomedit.clipboard import MemoryClipboard
from zoomedit.geometry import Position
from zoomedit.keymaps import (
    ActionRef,
    Binding,
    KeySequence,
    KeymapRegistry,
    KeymapResolver,
)
from zoomedit.keymaps.defaults import load_default_keymaps
from zoomedit.modes import (
    COMMAND,
    INSERT,
    CommandMode,
    InsertMode,
    KeyInput,
    ModeBus,
    ModeContext,
    ModeResult,
    Prompt,
    PromptMode,
    Redraw,
    Search,
)
from zoomedit.modes.keymap_helpers import key_to_token
from zoomedit.modes.mode_manager import ModeManager
from zoomedit.render import ViewOpts


def make_context(
    registry: KeymapRegistry,
    resolver: KeymapResolver,
    *,
    buffer: Optional[TextBuffer] = None,
) -> ModeContext:
    extras: Dict[str, Any] = {
        "keymap_registry": registry,
        "keymap_resolver": resolver,
        "keymap_flags": {},
    }
    return ModeContext(
        buffer=buffer or TextBuffer(),
        view=ViewOpts(),
        clipboard=MemoryClipboard(),
        bus=ModeBus(),
        extras=extras,
    )


def make_manager(text: str = "") -> ModeManager:
    buffer = TextBuffer.from_text(text)
    context = ModeContext(
        buffer=buffer, view=ViewOpts(), clipboard=MemoryClipboard(), bus=ModeBus()
    )
    manager = ModeManager(context)
    manager.register_mode(InsertMode)
    manager.register_mode(CommandMode)
    manager.register_mode(PromptMode)
    return manager


def test_key_to_token_normalizes_modifiers() -> None:
    assert key_to_token(KeyInput(key="a", modifiers=("CTRL",))) == "ctrl+a"
    assert key_to_token(KeyInput(key="UP", modifiers=("shift", "ctrl"))) == "ctrl+shift+UP"
    assert key_to_token(KeyInput(key="$", text="$")) == "$"


def test_command_mode_uses_keymap_binding() -> None:
    registry = KeymapRegistry()
    load_default_keymaps(registry)
    context = make_context(registry, KeymapResolver(registry))
    mode = CommandMode(context)

    result = mode.handle_key(KeyInput(key="i"))

    assert result.switch_to == INSERT
    assert result.consumed is True


def test_command_mode_ignores_unbound_keys() -> None:
    registry = KeymapRegistry()
    load_default_keymaps(registry)
    context = make_context(registry, KeymapResolver(registry))
    mode = CommandMode(context)

    result = mode.handle_key(KeyInput(key="q", text="q"))

    assert result.consumed is False
    assert result.status == "miss"


def test_insert_mode_writes_unbound_text() -> None:
    registry = KeymapRegistry()
    load_default_keymaps(registry)
    buffer = TextBuffer.from_text("ac")
    buffer.set_cursor((1, 0))
    context = make_context(registry, KeymapResolver(registry), buffer=buffer)
    mode = InsertMode(context)

    result = mode.handle_key(KeyInput(key="b", text="b"))

    assert buffer.to_string() == "abc"
    assert result.redraw == Redraw(line=0, break_on_line_end=True)


def test_custom_multi_key_sequence_waits_for_next_key() -> None:
    registry = KeymapRegistry()
    calls: list[str] = []

    def record(context: ModeContext, match: object) -> ModeResult:
        del context, match
        calls.append("gg")
        return ModeResult(consumed=True, status="custom")

    registry.register_action(ActionRef(id="custom.gg", handler=record))
    registry.register_binding(
        Binding(
            id="command.gg",
            mode="command",
            sequence=KeySequence.from_strings("g", "g"),
            action_id="custom.gg",
        )
    )
    context = make_context(registry, KeymapResolver(registry))
    mode = CommandMode(context)

    first = mode.handle_key(KeyInput(key="g", text="g"))
    assert first.status == "pending"
    assert mode.pending == ("g",)

    second = mode.handle_key(KeyInput(key="g", text="g"))
    assert second.status == "custom"
    assert calls == ["gg"]
    assert mode.pending == ()


def test_manager_switches_modes_and_tracks_prompt_flag() -> None:
    manager = make_manager("text")

    manager.handle_key(KeyInput(key="ESC"))
    assert manager.edit_mode == COMMAND

    manager.handle_key(KeyInput(key="/", text="/"))
    assert isinstance(manager.edit_mode, Prompt)
    assert manager.context.extras["keymap_flags"]["prompt_active"] is True

    manager.handle_key(KeyInput(key="ESC"))
    assert manager.edit_mode == COMMAND
    assert manager.context.extras["keymap_flags"]["prompt_active"] is False


def test_manager_refuses_to_nest_prompts() -> None:
    manager = make_manager()
    search = Prompt(return_mode=INSERT, action=Search())
    manager.switch_mode(search)

    manager.switch_mode(Prompt(return_mode=COMMAND, action=Search(reverse=True)))

    assert manager.edit_mode == search


def test_manager_rejects_unknown_mode_names() -> None:
    context = ModeContext(
        buffer=TextBuffer(), view=ViewOpts(), clipboard=MemoryClipboard(), bus=ModeBus()
    )
    manager = ModeManager(context)
    manager.register_mode(InsertMode)

    with pytest.raises(KeyError):
        manager.switch_mode(COMMAND)


def test_manager_rejects_duplicate_modes() -> None:
    manager = make_manager()

    with pytest.raises(ValueError):
        manager.register_mode(InsertMode)


def test_global_bindings_take_precedence() -> None:
    manager = make_manager("abc")

    result = manager.handle_key(KeyInput(key="c", modifiers=("ctrl",)))

    assert result.consumed is True
    assert manager.context.exit is True


def test_default_command_keymap_waits_for_second_g() -> None:
    manager = make_manager("one\ntwo\nthree")
    manager.handle_key(KeyInput(key="ESC"))
    manager.context.buffer.set_cursor((2, 2))

    first = manager.handle_key(KeyInput(key="g", text="g"))
    assert first.status == "pending"
    assert manager.context.buffer.cursor == Position(2, 2)

    manager.handle_key(KeyInput(key="g", text="g"))
    assert manager.context.buffer.cursor == Position(0, 0)

    manager.handle_key(KeyInput(key="G", text="G"))
    assert manager.context.buffer.cursor == Position(5, 2)


def test_pending_sequence_bypasses_global_bindings() -> None:
    manager = make_manager("abc\ndef")
    manager.handle_key(KeyInput(key="ESC"))
    manager.handle_key(KeyInput(key="g", text="g"))

    result = manager.handle_key(KeyInput(key="c", modifiers=("ctrl",)))

    assert manager.context.exit is False
    assert result.consumed is False
    assert manager.active_mode is not None
    assert manager.active_mode.pending == ()
