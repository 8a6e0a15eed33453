"""2D coordinates and viewport rectangles."""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering
from typing import Tuple, Union

Number = Union[int, float]


@total_ordering
@dataclass(frozen=True, slots=True)
class Vector2:
    """Column/row pair ordered like text: rows first, then columns."""

    x: Number
    y: Number

    def add(self, other: "Vector2 | Tuple[Number, Number]") -> "Vector2":
        ox, oy = other
        return Vector2(self.x + ox, self.y + oy)

    def sub(self, other: "Vector2 | Tuple[Number, Number]") -> "Vector2":
        ox, oy = other
        return Vector2(self.x - ox, self.y - oy)

    def scale(self, factor: float) -> "Vector2":
        return Vector2(self.x * factor, self.y * factor)

    def __iter__(self):
        yield self.x
        yield self.y

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Vector2):
            return NotImplemented
        return (self.y, self.x) < (other.y, other.x)


Position = Vector2


@dataclass(slots=True)
class Rect:
    """Viewport rectangle with a (possibly fractional) origin."""

    location: Vector2
    width: int
    height: int

    @property
    def x(self) -> Number:
        return self.location.x

    @property
    def y(self) -> Number:
        return self.location.y

    def contains(self, point: "Vector2 | Tuple[Number, Number]") -> bool:
        px, py = point
        return (
            self.location.x <= px < self.location.x + self.width
            and self.location.y <= py < self.location.y + self.height
        )

    def center(self) -> Vector2:
        """Center of the rectangle relative to its own origin."""

        return Vector2(self.width / 2, self.height / 2)

    def center_point(self) -> Vector2:
        """Center of the rectangle in the coordinate space of ``location``."""

        return self.location.add(self.center())


__all__ = ["Vector2", "Position", "Rect"]
