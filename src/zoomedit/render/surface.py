"""Terminal surface boundary and an in-memory cell grid implementing it."""

from __future__ import annotations

from typing import List, Optional, Protocol, Set, Tuple


class TerminalSurface(Protocol):
    """What the editor core needs from a terminal.

    ``paint_row`` writes text from column 0 of a text-area row and leaves any
    cells past the end of ``text`` untouched. The status line lives on the
    last physical row, below the text area.
    """

    def size(self) -> Tuple[int, int]:
        ...

    def paint_row(self, row: int, text: str) -> None:
        ...

    def paint_status(self, text: str, highlight: Optional[int] = None) -> None:
        ...

    def move_caret(self, x: int, y: int) -> None:
        ...

    def show_caret(self) -> None:
        ...

    def hide_caret(self) -> None:
        ...


class ScreenGrid:
    """Character grid that records which rows were repainted."""

    def __init__(self, width: int = 80, height: int = 24) -> None:
        self.width = 0
        self.height = 0
        self._cells: List[List[str]] = []
        self.caret: Tuple[int, int] = (0, 0)
        self.caret_visible = True
        self.status_highlight: Optional[int] = None
        self.caret_toggles = 0
        self._damage: Set[int] = set()
        self.resize(width, height)

    def size(self) -> Tuple[int, int]:
        return (self.width, self.height)

    @property
    def status_row(self) -> int:
        return self.height - 1

    def resize(self, width: int, height: int) -> None:
        self.width = max(0, int(width))
        self.height = max(1, int(height))
        self._cells = [[" "] * self.width for _ in range(self.height)]
        self._damage = set(range(self.status_row))

    def paint_row(self, row: int, text: str) -> None:
        if row < 0 or row >= self.status_row:
            return
        self._write(row, text)

    def paint_status(self, text: str, highlight: Optional[int] = None) -> None:
        self._write(self.status_row, text.ljust(self.width), track=False)
        self.status_highlight = highlight

    def move_caret(self, x: int, y: int) -> None:
        self.caret = (x, y)

    def show_caret(self) -> None:
        self.caret_visible = True
        self.caret_toggles += 1

    def hide_caret(self) -> None:
        self.caret_visible = False
        self.caret_toggles += 1

    def line(self, row: int) -> str:
        return "".join(self._cells[row])

    def lines(self) -> List[str]:
        return [self.line(row) for row in range(self.height)]

    def text_lines(self) -> List[str]:
        return self.lines()[: self.status_row]

    def status_text(self) -> str:
        return self.line(self.status_row)

    def take_damage(self) -> List[int]:
        """Text-area rows repainted since the previous call, in ascending order."""

        damaged = sorted(self._damage)
        self._damage.clear()
        return damaged

    def _write(self, row: int, text: str, *, track: bool = True) -> None:
        cells = self._cells[row]
        for column, char in enumerate(text[: self.width]):
            cells[column] = char if char.isprintable() else " "
        if track:
            self._damage.add(row)


__all__ = ["TerminalSurface", "ScreenGrid"]
