"""Row-array document storage."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

ROW_SEPARATOR = "\n"


@dataclass(frozen=True, slots=True)
class Cell:
    """A single stored character."""

    char: str

    @property
    def is_separator(self) -> bool:
        return self.char == ROW_SEPARATOR


@dataclass(slots=True)
class Document:
    """Ordered rows of characters; always holds at least one (possibly empty) row.

    Each row is a mutable list of single characters. The row separator is
    implied between rows and never stored.
    """

    _rows: List[List[str]] = field(default_factory=lambda: [[]])
    version: int = 0

    @classmethod
    def from_text(cls, text: str) -> "Document":
        return cls(_rows=[list(row) for row in text.split(ROW_SEPARATOR)])

    def to_text(self) -> str:
        return ROW_SEPARATOR.join("".join(row) for row in self._rows)

    @property
    def row_count(self) -> int:
        return len(self._rows)

    def row_len(self, y: int) -> int:
        return len(self._rows[y])

    def row(self, y: int) -> Sequence[str]:
        return tuple(self._rows[y])

    def get_char(self, x: int, y: int) -> Optional[str]:
        if y < 0 or y >= len(self._rows) or x < 0:
            return None
        row = self._rows[y]
        if x >= len(row):
            return None
        return row[x]

    def insert_char(self, x: int, y: int, char: str) -> None:
        self._rows[y].insert(x, char)
        self.version += 1

    def remove_char(self, x: int, y: int) -> str:
        char = self._rows[y].pop(x)
        self.version += 1
        return char

    def split_row(self, x: int, y: int) -> None:
        """Move everything from column ``x`` onward into a new row below ``y``."""

        row = self._rows[y]
        self._rows.insert(y + 1, row[x:])
        del row[x:]
        self.version += 1

    def join_with_previous(self, y: int) -> int:
        """Append row ``y`` onto row ``y - 1`` and return the join column."""

        previous = self._rows[y - 1]
        join = len(previous)
        previous.extend(self._rows.pop(y))
        self.version += 1
        return join

    def offset_of(self, x: int, y: int) -> int:
        """Flat character offset of ``(x, y)``; separators count as one char."""

        return sum(len(row) + 1 for row in self._rows[:y]) + x

    def position_of(self, offset: int) -> tuple[int, int]:
        running = 0
        for y, row in enumerate(self._rows):
            if offset <= running + len(row):
                return (max(0, offset - running), y)
            running += len(row) + 1
        return (len(self._rows[-1]), len(self._rows) - 1)

    def length(self) -> int:
        return sum(len(row) for row in self._rows) + len(self._rows) - 1


__all__ = ["Cell", "Document", "ROW_SEPARATOR"]
