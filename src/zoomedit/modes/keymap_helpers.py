"""Helper utilities for keymap-driven modes."""

from __future__ import annotations

from typing import List, Mapping, MutableMapping, Tuple, cast

from zoomedit.keymaps import KeymapResolver, ResolutionMatch
from zoomedit.runtime import telemetry

from .base_mode import KeyInput, Mode, ModeContext, ModeResult


def key_to_token(key: KeyInput) -> str:
    if key.modifiers:
        modifiers = sorted(dict.fromkeys(m.lower() for m in key.modifiers))
        return f"{'+'.join(modifiers)}+{key.key}"
    return key.key


def require_keymap_resolver(context: ModeContext) -> KeymapResolver:
    resolver = context.extras.get("keymap_resolver")
    if not isinstance(resolver, KeymapResolver):
        raise RuntimeError("ModeContext.extras missing 'keymap_resolver'")
    return resolver


def keymap_flag_context(context: ModeContext) -> Mapping[str, bool]:
    flags = context.extras.setdefault("keymap_flags", {})
    return cast(Mapping[str, bool], flags)


def update_flag(context: ModeContext, key: str, value: bool) -> None:
    flags = cast(
        MutableMapping[str, bool], context.extras.setdefault("keymap_flags", {})
    )
    flags[key] = value


def execute_match(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    with telemetry.span(
        "keymaps::execute",
        component="keymaps",
        metadata={"binding_id": match.binding.id, "action": match.action.id},
    ):
        outcome = match.action(context, match)

    if isinstance(outcome, ModeResult):
        return outcome
    return ModeResult(consumed=True)


class KeymapMode(Mode):
    """Mode whose keys resolve through the keymap before falling back.

    A partially typed sequence simply waits for the next key; a miss drops
    the pending keys and hands the last one to ``handle_unmapped``.
    """

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self.logger = telemetry.get_logger(f"zoomedit.modes.{self.name}")
        self._resolver = require_keymap_resolver(context)
        self._flags = keymap_flag_context(context)
        self._pending: List[str] = []

    @property
    def pending(self) -> Tuple[str, ...]:
        return tuple(self._pending)

    def on_exit(self, next_mode: str | None) -> None:
        del next_mode
        self._pending.clear()

    def handle_key(self, key: KeyInput) -> ModeResult:
        self._pending.append(key_to_token(key))
        result = self._resolver.resolve(
            self.name, tuple(self._pending), context=self._flags
        )

        if result.status == "match" and result.match:
            self._pending.clear()
            return execute_match(self.context, result.match)

        if result.status == "pending":
            return ModeResult(
                consumed=True, status="pending", message="awaiting_sequence"
            )

        self._pending.clear()
        return self.handle_unmapped(key)

    def handle_unmapped(self, key: KeyInput) -> ModeResult:
        del key
        return ModeResult(consumed=False, status="miss")


__all__ = [
    "KeymapMode",
    "execute_match",
    "key_to_token",
    "keymap_flag_context",
    "require_keymap_resolver",
    "update_flag",
]
