"""View geometry: which buffer coordinates land on which screen cells."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from zoomedit.geometry import Position, Rect, Vector2

_EPSILON = 1e-6
_SNAP_DIGITS = 6


def _default_rect() -> Rect:
    return Rect(location=Vector2(0.0, 0.0), width=0, height=0)


@dataclass(slots=True)
class ViewOpts:
    """Viewport rectangle plus the scale at which buffer content is shown.

    A screen cell ``(c, r)`` shows buffer cell
    ``(floor((location.x + c) * scale), floor((location.y + r) * scale))``.
    """

    view: Rect = field(default_factory=_default_rect)
    scale: float = 1.0

    def __post_init__(self) -> None:
        self.scale = max(0.0, float(self.scale))

    @property
    def location(self) -> Vector2:
        return self.view.location

    @location.setter
    def location(self, value: Vector2 | Tuple[float, float]) -> None:
        x, y = value
        self.view.location = Vector2(float(x), float(y))

    @property
    def width(self) -> int:
        return self.view.width

    @property
    def height(self) -> int:
        return self.view.height

    def resize(self, width: int, height: int) -> None:
        self.view.width = max(0, int(width))
        self.view.height = max(0, int(height))

    def to_buffer(self, column: int, row: int) -> Position:
        loc = self.view.location
        return Position(
            math.floor((loc.x + column) * self.scale),
            math.floor((loc.y + row) * self.scale),
        )

    def source_row(self, row: int) -> int:
        return math.floor((self.view.location.y + row) * self.scale)

    def screen_rows_for(self, line: int) -> List[int]:
        """Screen rows currently showing buffer row ``line``."""

        return [r for r in range(self.view.height) if self.source_row(r) == line]

    def caret_cell(self, position: Position) -> Optional[Tuple[int, int]]:
        """Screen cell for ``position`` or ``None`` when it is out of view."""

        if self.scale <= 0:
            return None
        point = Vector2(position.x / self.scale, position.y / self.scale)
        if not self.view.contains(point.add((_EPSILON, _EPSILON))):
            return None
        loc = self.view.location
        column = math.ceil(point.x - loc.x - _EPSILON)
        row = math.ceil(point.y - loc.y - _EPSILON)
        return (
            max(0, min(column, self.view.width - 1)),
            max(0, min(row, self.view.height - 1)),
        )

    def pan(self, dx: float, dy: float) -> None:
        self.view.location = self.view.location.add((float(dx), float(dy)))

    def set_scale(self, scale: float) -> None:
        """Change the zoom factor, keeping the view center on the same content."""

        new_scale = max(0.0, round(float(scale), 6))
        if new_scale > 0 and self.scale > 0:
            focus = self.view.center_point().scale(self.scale / new_scale)
            x, y = focus.sub(self.view.center())
            # drop float drift so zooming back restores the old origin
            self.view.location = Vector2(round(x, _SNAP_DIGITS), round(y, _SNAP_DIGITS))
        self.scale = new_scale

    def center_on(self, position: Position) -> None:
        """Scroll vertically so ``position`` sits on the middle screen row."""

        if self.scale <= 0:
            return
        row = position.y / self.scale
        self.view.location = Vector2(
            self.view.location.x, float(math.floor(row) - self.view.height // 2)
        )


__all__ = ["ViewOpts"]
