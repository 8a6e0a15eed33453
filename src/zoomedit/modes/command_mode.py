"""Command mode: navigation, selection, search and zoom keys.

Every command-mode key is a binding; anything unbound is ignored.
"""

from __future__ import annotations

from .keymap_helpers import KeymapMode


class CommandMode(KeymapMode):
    name = "command"


__all__ = ["CommandMode"]
