"""Textual host for the editor core."""

from .controller import TextualEditorAdapter, TextualUIHooks, normalize_key

__all__ = ["TextualEditorAdapter", "TextualUIHooks", "normalize_key"]
