"""Editor settings read from ``ZOOMEDIT_*`` environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

ENV_PREFIX = "ZOOMEDIT_"


def _env(environ: Mapping[str, str], name: str) -> Optional[str]:
    return environ.get(f"{ENV_PREFIX}{name}")


def _env_int(environ: Mapping[str, str], name: str, fallback: int) -> int:
    value = _env(environ, name)
    if value is None:
        return fallback
    try:
        return int(value)
    except ValueError:
        return fallback


def _env_float(environ: Mapping[str, str], name: str, fallback: float) -> float:
    value = _env(environ, name)
    if value is None:
        return fallback
    try:
        return float(value)
    except ValueError:
        return fallback


@dataclass(slots=True)
class EditorConfig:
    pan_step: int = 5
    scale_step: float = 0.1
    default_path: str = "editor_content.txt"
    clipboard: str = "system"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EditorConfig":
        env = os.environ if environ is None else environ
        defaults = cls()
        clipboard = (_env(env, "CLIPBOARD") or defaults.clipboard).lower()
        if clipboard not in {"system", "memory"}:
            clipboard = defaults.clipboard
        return cls(
            pan_step=max(1, _env_int(env, "PAN_STEP", defaults.pan_step)),
            scale_step=abs(_env_float(env, "SCALE_STEP", defaults.scale_step))
            or defaults.scale_step,
            default_path=_env(env, "DEFAULT_PATH") or defaults.default_path,
            clipboard=clipboard,
        )


__all__ = ["EditorConfig"]
