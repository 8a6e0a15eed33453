from __future__ import annotations

import pytest

from zoomedit.buffer import Cell, CursorMarker, TextBuffer, cells_to_text
from zoomedit.geometry import Position


def make_buffer(text: str = "", *, cursor: tuple[int, int] = (0, 0)) -> TextBuffer:
    buffer = TextBuffer.from_text(text)
    buffer.set_cursor(cursor)
    return buffer


def assert_cursor_valid(buffer: TextBuffer) -> None:
    x, y = buffer.cursor
    assert 0 <= y < buffer.row_count
    assert 0 <= x <= buffer.line_len()


@pytest.mark.parametrize(
    "text",
    ["", "a", "\n", "hello\nworld", "trailing\n", "\n\nblank rows\n\n", "tabs\tand spaces  "],
)
def test_round_trip(text: str) -> None:
    assert TextBuffer.from_text(text).to_string() == text


def test_get_cell_reports_absent_cells() -> None:
    buffer = make_buffer("ab\nc")

    assert buffer.get_cell(1, 0) == Cell("b")
    assert buffer.get_cell(2, 0) is None
    assert buffer.get_cell(0, 2) is None
    assert buffer.get_cell(-1, 0) is None


def test_write_inserts_and_advances() -> None:
    buffer = make_buffer("ac", cursor=(1, 0))

    buffer.write("b")

    assert buffer.to_string() == "abc"
    assert buffer.cursor == Position(2, 0)


def test_write_separator_splits_row() -> None:
    buffer = make_buffer("hello world", cursor=(5, 0))

    buffer.write("\n")

    assert buffer.to_string() == "hello\n world"
    assert buffer.cursor == Position(0, 1)
    assert buffer.row_count == 2


def test_delete_removes_character_before_cursor() -> None:
    buffer = make_buffer("abc", cursor=(2, 0))

    removed = buffer.delete()

    assert removed == Cell("b")
    assert buffer.to_string() == "ac"
    assert buffer.cursor == Position(1, 0)


def test_delete_separator_joins_rows_at_join_point() -> None:
    buffer = make_buffer("ab\ncd", cursor=(0, 1))

    removed = buffer.delete()

    assert removed is not None and removed.is_separator
    assert buffer.to_string() == "abcd"
    assert buffer.cursor == Position(2, 0)


def test_delete_at_document_start_returns_none() -> None:
    buffer = make_buffer("abc")

    assert buffer.delete() is None
    assert buffer.to_string() == "abc"


@pytest.mark.parametrize("char", ["x", " ", "\t", "é", "$"])
def test_insert_then_delete_is_identity(char: str) -> None:
    buffer = make_buffer("one\ntwo", cursor=(1, 1))
    before = (buffer.to_string(), buffer.cursor)

    buffer.write(char)
    buffer.delete()

    assert (buffer.to_string(), buffer.cursor) == before


def test_cursor_stays_clamped_through_edits() -> None:
    buffer = make_buffer("short\na much longer row\n")
    steps = [
        lambda b: b.move_cursor(100, 0),
        lambda b: b.move_cursor(0, 1),
        lambda b: b.move_cursor(0, -5),
        lambda b: b.write("\n"),
        lambda b: b.delete(),
        lambda b: b.delete(),
        lambda b: b.move_cursor(-100, 100),
        lambda b: b.move_cursor_to(CursorMarker.LINE_END),
        lambda b: b.move_cursor_to(CursorMarker.NEXT_WORD),
        lambda b: b.move_cursor_to(CursorMarker.PREVIOUS_WORD),
        lambda b: b.set_cursor((50, 50)),
        lambda b: b.set_cursor((-3, -3)),
    ]
    for step in steps:
        step(buffer)
        assert_cursor_valid(buffer)


def test_vertical_move_clamps_column_to_shorter_row() -> None:
    buffer = make_buffer("a long row\nab", cursor=(8, 0))

    buffer.move_cursor(0, 1)

    assert buffer.cursor == Position(2, 1)


def test_line_markers() -> None:
    buffer = make_buffer("hello\nworld", cursor=(2, 1))

    buffer.move_cursor_to(CursorMarker.LINE_END)
    assert buffer.cursor == Position(5, 1)

    buffer.move_cursor_to(CursorMarker.LINE_BEGINNING)
    assert buffer.cursor == Position(0, 1)


def test_next_word_crosses_rows() -> None:
    buffer = make_buffer("alpha\n  beta gamma", cursor=(1, 0))

    buffer.move_cursor_to(CursorMarker.NEXT_WORD)

    assert buffer.cursor == Position(2, 1)


def test_next_word_clamps_at_document_end() -> None:
    buffer = make_buffer("one two", cursor=(5, 0))

    buffer.move_cursor_to(CursorMarker.NEXT_WORD)

    assert buffer.cursor == Position(7, 0)


def test_previous_word_clamps_at_document_start() -> None:
    buffer = make_buffer("  lead", cursor=(1, 0))

    buffer.move_cursor_to(CursorMarker.PREVIOUS_WORD)

    assert buffer.cursor == Position(0, 0)


@pytest.mark.parametrize("column", [6, 7, 8])
def test_next_then_previous_word_returns_to_word_start(column: int) -> None:
    buffer = make_buffer("alpha bravo charlie", cursor=(column, 0))

    buffer.move_cursor_to(CursorMarker.NEXT_WORD)
    buffer.move_cursor_to(CursorMarker.PREVIOUS_WORD)

    assert buffer.cursor == Position(6, 0)


def test_search_forward_and_reverse() -> None:
    buffer = make_buffer("ab cd ab")

    forward = buffer.search("ab", Position(2, 0), reverse=False)
    assert forward == Position(6, 0)

    backward = buffer.search("ab", forward, reverse=True)
    assert backward == Position(0, 0)


def test_search_forward_includes_start_position() -> None:
    buffer = make_buffer("ab cd ab")

    assert buffer.search("ab", Position(0, 0)) == Position(0, 0)


def test_search_spans_row_separators() -> None:
    buffer = make_buffer("one\ntwo\nthree")

    assert buffer.search("o\nt", Position(0, 0)) == Position(2, 1)
    assert buffer.search("three", Position(0, 0)) == Position(0, 2)


def test_search_has_no_wraparound_and_ignores_empty_text() -> None:
    buffer = make_buffer("ab cd ab")

    assert buffer.search("ab", Position(7, 0)) is None
    assert buffer.search("ab", Position(0, 0), reverse=True) is None
    assert buffer.search("", Position(0, 0)) is None
    assert buffer.search("zz", Position(0, 0)) is None


def test_search_does_not_move_cursor() -> None:
    buffer = make_buffer("ab cd ab", cursor=(1, 0))

    buffer.search("cd", Position(0, 0))

    assert buffer.cursor == Position(1, 0)


def test_step_moves_in_reading_order() -> None:
    buffer = make_buffer("ab\ncd")

    assert buffer.step(Position(2, 0), 1) == Position(0, 1)
    assert buffer.step(Position(0, 1), -1) == Position(2, 0)
    assert buffer.step(Position(2, 1), 5) == Position(2, 1)
    assert buffer.step(Position(0, 0), -5) == Position(0, 0)


def test_copy_returns_selected_cells() -> None:
    buffer = make_buffer("abcdefg", cursor=(2, 0))

    buffer.begin_select()
    buffer.set_cursor((5, 0))
    cells = buffer.copy()

    assert cells == [Cell("c"), Cell("d"), Cell("e")]
    assert buffer.selecting


def test_copy_orders_a_backwards_selection() -> None:
    buffer = make_buffer("one\ntwo", cursor=(1, 1))

    buffer.begin_select()
    buffer.set_cursor((1, 0))

    assert cells_to_text(buffer.copy() or []) == "ne\nt"


def test_copy_without_selection_returns_none() -> None:
    buffer = make_buffer("abc")

    assert buffer.copy() is None

    buffer.begin_select()
    buffer.clear_selection()

    assert buffer.copy() is None
    assert buffer.anchor is None


def test_version_increments_on_mutation_only() -> None:
    buffer = make_buffer("abc")
    start = buffer.version

    buffer.move_cursor(1, 0)
    assert buffer.version == start

    buffer.write("x")
    buffer.delete()
    assert buffer.version == start + 2
