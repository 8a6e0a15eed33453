"""Mode manager routing keys through global bindings and the active mode."""

from __future__ import annotations

from typing import Dict, Optional, Type

from zoomedit.keymaps import KeymapRegistry, KeymapResolver
from zoomedit.keymaps.defaults import load_default_keymaps
from zoomedit.runtime import telemetry

from .base_mode import KeyInput, Mode, ModeContext, ModeResult
from .edit_mode import EditMode, Prompt
from .keymap_helpers import execute_match, key_to_token, keymap_flag_context, update_flag

GLOBAL_MODE = "global"


class ModeManager:
    """Owns the edit mode, handles transitions, and dispatches key events.

    Global bindings are consulted first on every key unless the active mode
    is in the middle of a multi-key sequence.
    """

    def __init__(
        self,
        context: ModeContext,
        *,
        keymap_registry: KeymapRegistry | None = None,
        keymap_resolver: KeymapResolver | None = None,
        load_defaults: bool = True,
    ) -> None:
        self.context = context
        self._modes: Dict[str, Mode] = {}
        self.logger = telemetry.get_logger("zoomedit.modes")
        self.keymap_registry = keymap_registry or KeymapRegistry(
            logger_name="zoomedit.keymaps"
        )
        if load_defaults and keymap_registry is None:
            load_default_keymaps(self.keymap_registry)
        self.keymap_resolver = keymap_resolver or KeymapResolver(self.keymap_registry)
        self.context.extras.setdefault("keymap_registry", self.keymap_registry)
        self.context.extras.setdefault("keymap_resolver", self.keymap_resolver)
        self.context.extras.setdefault("keymap_flags", {})
        self.context.extras.setdefault("mode_manager", self)
        update_flag(self.context, "prompt_active", isinstance(context.mode, Prompt))

    @property
    def edit_mode(self) -> EditMode:
        return self.context.mode

    @property
    def active_mode(self) -> Optional[Mode]:
        return self._modes.get(self.context.mode.name)

    def register_mode(
        self,
        mode_cls: Type[Mode],
        /,
        *mode_args: object,
        **mode_kwargs: object,
    ) -> Mode:
        mode = mode_cls(self.context, *mode_args, **mode_kwargs)
        if mode.name in self._modes:
            raise ValueError(f"Mode '{mode.name}' already registered")
        self._modes[mode.name] = mode
        if mode.name == self.context.mode.name:
            mode.on_enter(None)
        return mode

    def switch_mode(self, target: EditMode) -> None:
        if target.name not in self._modes:
            raise KeyError(f"Unknown mode '{target.name}'")
        current = self.context.mode
        if current == target:
            return
        if isinstance(current, Prompt) and isinstance(target, Prompt):
            telemetry.record_event(
                "mode.nested_prompt", level="warning", data={"action": target.action}
            )
            return

        previous = self.active_mode
        if previous:
            previous.on_exit(target.name)
        self.context.mode = target
        update_flag(self.context, "prompt_active", isinstance(target, Prompt))
        self._modes[target.name].on_enter(previous.name if previous else None)
        telemetry.record_event("mode.switch", data={"mode": target.name})

    def handle_key(self, key: KeyInput) -> ModeResult:
        mode = self.active_mode
        if mode is None:
            raise RuntimeError("No active mode registered")
        update_flag(self.context, "selecting", self.context.buffer.selecting)
        with telemetry.span(
            name=f"mode::{mode.name}",
            component=True,
            metadata={"key": key_to_token(key), "mode": mode.name},
        ):
            result = None if mode.pending else self._handle_global(key)
            if result is None:
                result = mode.handle_key(key)
        return self._after_mode_result(result)

    def _handle_global(self, key: KeyInput) -> Optional[ModeResult]:
        resolution = self.keymap_resolver.resolve(
            GLOBAL_MODE, (key_to_token(key),), context=keymap_flag_context(self.context)
        )
        if resolution.status == "match" and resolution.match:
            return execute_match(self.context, resolution.match)
        return None

    def _after_mode_result(self, result: ModeResult) -> ModeResult:
        if result.switch_to is not None:
            self.switch_mode(result.switch_to)
        return result


__all__ = ["GLOBAL_MODE", "ModeManager"]
