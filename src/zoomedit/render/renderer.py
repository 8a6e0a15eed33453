"""Renders a buffer through a view into rows of screen text."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from zoomedit.buffer import TextBuffer

from .view import ViewOpts

ScreenRow = Tuple[int, str]


@dataclass(slots=True)
class StringRenderer:
    """Renders the whole viewport, or only the rows showing ``line_hint``.

    With ``break_on_line_end`` a row stops at the first absent cell past
    column 0, leaving whatever is already on screen to its right untouched.
    """

    line_hint: Optional[int] = None
    break_on_line_end: bool = False

    @classmethod
    def with_line_hint(
        cls, line: int, *, break_on_line_end: bool = False
    ) -> "StringRenderer":
        return cls(line_hint=line, break_on_line_end=break_on_line_end)

    def rows(self, buffer: TextBuffer, opts: ViewOpts) -> List[ScreenRow]:
        if self.line_hint is None:
            targets = range(opts.height)
        else:
            targets = opts.screen_rows_for(self.line_hint)
        return [(row, self._render_row(buffer, opts, row)) for row in targets]

    def render(self, buffer: TextBuffer, opts: ViewOpts) -> str:
        return "\n".join(text for _, text in self.rows(buffer, opts))

    def _render_row(self, buffer: TextBuffer, opts: ViewOpts, row: int) -> str:
        chars: List[str] = []
        for column in range(opts.width):
            x, y = opts.to_buffer(column, row)
            cell = buffer.get_cell(x, y)
            if cell is not None:
                chars.append(cell.char)
            elif self.break_on_line_end and column > 0:
                break
            else:
                chars.append(" ")
        return "".join(chars)


__all__ = ["ScreenRow", "StringRenderer"]
