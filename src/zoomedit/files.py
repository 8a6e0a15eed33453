"""Whole-file load/save and bundled resources."""

from __future__ import annotations

from importlib import resources
from pathlib import Path
from typing import Optional

RESOURCE_PACKAGE = "zoomedit.resources"


def load_text(path: str | Path) -> str:
    return Path(path).read_text(encoding="utf-8")


def save_text(path: str | Path, text: str) -> None:
    Path(path).write_text(text, encoding="utf-8")


def read_resource(name: str) -> str:
    return resources.files(RESOURCE_PACKAGE).joinpath(name).read_text(encoding="utf-8")


def help_text() -> str:
    return read_resource("help_text.txt")


def sample_text() -> str:
    return read_resource("sample_text.txt")


def load_initial(path: Optional[str]) -> str:
    """Contents of ``path``, or the bundled sample when no path was given.

    Read errors propagate: without a document there is nothing to edit.
    """

    if path is None:
        return sample_text()
    return load_text(path)


__all__ = [
    "help_text",
    "load_initial",
    "load_text",
    "read_resource",
    "sample_text",
    "save_text",
]
