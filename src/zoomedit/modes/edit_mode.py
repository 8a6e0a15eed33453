"""Edit mode values: ``Command``, ``Insert`` and ``Prompt(return_mode, action)``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union


@dataclass(frozen=True, slots=True)
class SaveFileAs:
    label: ClassVar[str] = "save as"


@dataclass(frozen=True, slots=True)
class Search:
    reverse: bool = False

    @property
    def label(self) -> str:
        return "reverse search" if self.reverse else "search"


PromptAction = Union[SaveFileAs, Search]


@dataclass(frozen=True, slots=True)
class Command:
    name: ClassVar[str] = "command"


@dataclass(frozen=True, slots=True)
class Insert:
    name: ClassVar[str] = "insert"


@dataclass(frozen=True, slots=True)
class Prompt:
    """Single-line input that hands control back to ``return_mode`` when done."""

    name: ClassVar[str] = "prompt"

    return_mode: Union[Command, Insert]
    action: PromptAction

    def __post_init__(self) -> None:
        if isinstance(self.return_mode, Prompt):
            raise ValueError("a prompt cannot return to another prompt")


EditMode = Union[Command, Insert, Prompt]

COMMAND = Command()
INSERT = Insert()


__all__ = [
    "COMMAND",
    "Command",
    "EditMode",
    "INSERT",
    "Insert",
    "Prompt",
    "PromptAction",
    "SaveFileAs",
    "Search",
]
