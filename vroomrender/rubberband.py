"""Rubber-band selection rectangle in pixel coordinates."""

from __future__ import annotations

from dataclasses import dataclass


class RubberBandError(RuntimeError):
    """Raised when a rubber band is used before both points are set."""


@dataclass
class Rect:
    """Integer pixel rectangle; right and bottom are inclusive."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    @property
    def left(self) -> int:
        return self.x

    @property
    def top(self) -> int:
        return self.y

    @property
    def right(self) -> int:
        return self.x + self.width - 1

    @property
    def bottom(self) -> int:
        return self.y + self.height - 1


Point = tuple[int, int]


class RubberBand:
    """Tracks the start and end point of a mouse drag."""

    def __init__(self) -> None:
        self.start: Point | None = None
        self.end: Point | None = None

    def set_point_first(self, point: Point) -> None:
        self.start = (int(point[0]), int(point[1]))

    def set_point_last(self, point: Point) -> None:
        self.end = (int(point[0]), int(point[1]))

    def _raw_rect(self) -> Rect:
        if self.start is None or self.end is None:
            raise RubberBandError("rubber band needs both its first and last point")
        (x0, y0), (x1, y1) = self.start, self.end
        return Rect(x0, y0, x1 - x0 + 1, y1 - y0 + 1)

    def get_rect(self) -> Rect:
        """Return the rectangle with a non-negative width and height."""
        rect = self._raw_rect()
        if rect.width < 0:
            old_right, old_left = rect.right, rect.left
            rect.x = old_right
            rect.width = old_left - rect.x + 1
        if rect.height < 0:
            old_bottom, old_top = rect.bottom, rect.top
            rect.y = old_bottom
            rect.height = old_top - rect.y + 1
        return rect

    def is_positive(self) -> bool:
        """True when the drag went right and down."""
        rect = self._raw_rect()
        return not (rect.width < 0 or rect.height < 0)

    def is_valid(self) -> bool:
        """True when both points are set and span a non-degenerate area."""
        if self.start is None or self.end is None:
            return False
        return not (self.start[0] == self.end[0] or self.start[1] == self.end[1])