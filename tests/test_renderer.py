from __future__ import annotations

import pytest

from zoomedit.buffer import TextBuffer
from zoomedit.geometry import Position, Rect, Vector2
from zoomedit.render import ScreenGrid, StringRenderer, ViewOpts


def make_view(
    x: float = 0.0, y: float = 0.0, width: int = 4, height: int = 3, scale: float = 1.0
) -> ViewOpts:
    return ViewOpts(view=Rect(location=Vector2(x, y), width=width, height=height), scale=scale)


def make_buffer() -> TextBuffer:
    return TextBuffer.from_text("ab\ncde")


def test_full_frame_pads_absent_cells() -> None:
    text = StringRenderer().render(make_buffer(), make_view())

    assert text == "ab  \ncde \n    "


def test_break_on_line_end_stops_after_first_absent_cell() -> None:
    renderer = StringRenderer(break_on_line_end=True)

    assert renderer.render(make_buffer(), make_view()) == "ab\ncde\n "


def test_panned_view_reads_offset_cells() -> None:
    text = StringRenderer().render(make_buffer(), make_view(x=1.0, y=1.0, height=2))

    assert text == "de  \n    "


def test_line_hint_renders_only_that_row() -> None:
    renderer = StringRenderer.with_line_hint(1)

    assert renderer.rows(make_buffer(), make_view()) == [(1, "cde ")]


def test_line_hint_outside_view_renders_nothing() -> None:
    renderer = StringRenderer.with_line_hint(1)

    assert renderer.rows(make_buffer(), make_view(y=2.0)) == []
    assert renderer.render(make_buffer(), make_view(y=-5.0)) == ""


def test_zoomed_in_view_repeats_cells() -> None:
    view = make_view(width=4, height=4, scale=0.5)

    assert StringRenderer().render(make_buffer(), view) == "aabb\naabb\nccdd\nccdd"
    assert view.screen_rows_for(1) == [2, 3]
    assert StringRenderer.with_line_hint(0).rows(make_buffer(), view) == [
        (0, "aabb"),
        (1, "aabb"),
    ]


def test_zoomed_out_view_skips_cells() -> None:
    buffer = TextBuffer.from_text("abcdef\n1\nxyz")
    view = make_view(width=3, height=2, scale=2.0)

    assert StringRenderer().render(buffer, view) == "ace\nxz "


def test_zoom_round_trip_restores_location() -> None:
    view = make_view(x=10.0, y=10.0, width=80, height=24, scale=1.0)

    view.set_scale(2.0)
    assert view.location == Vector2(-15.0, -1.0)

    view.set_scale(1.0)
    assert view.location == Vector2(10.0, 10.0)
    assert view.scale == 1.0


def test_zoom_keeps_center_content() -> None:
    view = make_view(x=10.0, y=10.0, width=80, height=24, scale=1.0)
    before = view.to_buffer(40, 12)

    view.set_scale(0.5)

    assert view.to_buffer(40, 12) == before


def test_scale_is_clamped_at_zero() -> None:
    assert make_view(scale=-2.0).scale == 0.0

    view = make_view(x=3.0, y=4.0, scale=0.1)
    view.set_scale(-0.5)

    assert view.scale == 0.0
    assert view.location == Vector2(3.0, 4.0)
    assert StringRenderer().render(make_buffer(), view) == "aaaa\naaaa\naaaa"


def test_caret_cell_tracks_scale_and_visibility() -> None:
    view = make_view(width=10, height=5)

    assert view.caret_cell(Position(3, 2)) == (3, 2)
    assert view.caret_cell(Position(10, 2)) is None

    view.set_scale(0.5)
    view.location = (0.0, 0.0)
    assert view.caret_cell(Position(3, 2)) == (6, 4)

    view.set_scale(0.0)
    assert view.caret_cell(Position(0, 0)) is None


def test_center_on_puts_row_mid_screen() -> None:
    view = make_view(width=10, height=10)

    view.center_on(Position(0, 42))

    assert view.location == Vector2(0.0, 37.0)
    assert view.screen_rows_for(42) == [5]


@pytest.mark.parametrize("row", [-1, 23, 99])
def test_screen_grid_ignores_rows_outside_text_area(row: int) -> None:
    grid = ScreenGrid(10, 24)
    grid.take_damage()

    grid.paint_row(row, "hello")

    assert grid.take_damage() == []


def test_screen_grid_tracks_damage_and_status() -> None:
    grid = ScreenGrid(10, 4)
    assert grid.take_damage() == [0, 1, 2]

    grid.paint_row(1, "hi\tthere!!!")
    grid.paint_status("status", highlight=2)

    assert grid.take_damage() == [1]
    assert grid.line(1) == "hi there!!"
    assert grid.status_text() == "status    "
    assert grid.status_highlight == 2


def test_zoom_round_trip_leaves_origin_exact() -> None:
    view = make_view(width=60, height=5)

    view.set_scale(1.1)
    view.set_scale(1.0)

    assert view.location == Vector2(0.0, 0.0)
    assert view.caret_cell(Position(0, 0)) == (0, 0)


def test_caret_tolerates_tiny_origin_drift() -> None:
    view = make_view(x=3.5e-15, y=0.0, width=10, height=5)

    assert view.caret_cell(Position(0, 0)) == (0, 0)
