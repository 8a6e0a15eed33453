"""Edit modes and key dispatch.

``ModeManager`` lives in ``zoomedit.modes.mode_manager``; it pulls in the
default keymaps, which in turn import the action modules built on this
package.
"""

from .base_mode import (
    FULL_REDRAW,
    KeyInput,
    Mode,
    ModeBus,
    ModeContext,
    ModeResult,
    MouseInput,
    Redraw,
)
from .edit_mode import COMMAND, INSERT, Command, EditMode, Insert, Prompt, SaveFileAs, Search
from .command_mode import CommandMode
from .insert_mode import InsertMode
from .prompt_mode import PromptMode

__all__ = [
    "COMMAND",
    "Command",
    "CommandMode",
    "EditMode",
    "FULL_REDRAW",
    "INSERT",
    "Insert",
    "InsertMode",
    "KeyInput",
    "Mode",
    "ModeBus",
    "ModeContext",
    "ModeResult",
    "MouseInput",
    "Prompt",
    "PromptMode",
    "Redraw",
    "SaveFileAs",
    "Search",
]
