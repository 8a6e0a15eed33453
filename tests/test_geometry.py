from __future__ import annotations

from zoomedit.geometry import Position, Rect, Vector2


def make_rect(x: float = 0.0, y: float = 0.0, width: int = 80, height: int = 24) -> Rect:
    return Rect(location=Vector2(x, y), width=width, height=height)


def test_positions_order_by_row_then_column() -> None:
    assert Position(9, 0) < Position(0, 1)
    assert Position(1, 2) < Position(3, 2)
    assert max(Position(5, 1), Position(0, 2)) == Position(0, 2)
    assert sorted([Position(2, 1), Position(0, 1), Position(7, 0)]) == [
        Position(7, 0),
        Position(0, 1),
        Position(2, 1),
    ]


def test_vector_arithmetic() -> None:
    v = Vector2(2, 3)

    assert v.add((1, 1)) == Vector2(3, 4)
    assert v.sub(Vector2(2, 3)) == Vector2(0, 0)
    assert v.scale(0.5) == Vector2(1.0, 1.5)
    assert tuple(v) == (2, 3)


def test_rect_contains_is_half_open() -> None:
    rect = make_rect(10.0, 10.0, 80, 24)

    assert rect.contains(Vector2(10, 10))
    assert rect.contains(Vector2(89.5, 33.5))
    assert not rect.contains(Vector2(90, 20))
    assert not rect.contains(Vector2(20, 34))
    assert not rect.contains(Vector2(9.5, 20))


def test_rect_center() -> None:
    rect = make_rect(10.0, 10.0, 80, 24)

    assert rect.center() == Vector2(40.0, 12.0)
    assert rect.center_point() == Vector2(50.0, 22.0)
