"""Floating point rectangles that accept negative widths and heights."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class RealRect:
    """A rectangle in real-world coordinates.

    Map extents usually have a negative height: ``top`` is the larger
    y value and ``bottom = top + height`` the smaller.
    """

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @classmethod
    def from_corners(cls, left: float, top: float, right: float, bottom: float) -> RealRect:
        """Build a rectangle from its top-left and bottom-right corners."""
        return cls(left, top, right - left, bottom - top)

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def _check_orientation(self, other: RealRect) -> None:
        if self.height < 0 and not other.height < 0:
            raise ValueError("both rectangles must have a negative height")

    def intersect(self, other: RealRect) -> RealRect:
        """Return the overlap of two rectangles, or an empty rectangle."""
        self._check_orientation(other)
        left = max(other.left, self.left)
        right = min(other.right, self.right)
        if self.height < 0:
            top = min(other.top, self.top)
            bottom = max(other.bottom, self.bottom)
        else:
            top = max(other.top, self.top)
            bottom = min(other.bottom, self.bottom)
        if right < left or top < bottom:
            return RealRect()
        return RealRect.from_corners(left, top, right, bottom)

    def union(self, other: RealRect) -> RealRect:
        """Return the smallest rectangle holding both, or an empty rectangle."""
        self._check_orientation(other)
        left = min(other.left, self.left)
        right = max(other.right, self.right)
        if self.height < 0:
            top = max(other.top, self.top)
            bottom = min(other.bottom, self.bottom)
        else:
            top = min(other.top, self.top)
            bottom = max(other.bottom, self.bottom)
        if right < left or top < bottom:
            return RealRect()
        return RealRect.from_corners(left, top, right, bottom)

    def contains(self, x: float, y: float) -> bool:
        """Tell whether a point lies inside, edges included, whatever the height sign."""
        if x < self.left or x > self.right:
            return False
        low, high = sorted((self.top, self.bottom))
        return low <= y <= high

    def is_ok(self) -> bool:
        """A rectangle is usable when its width is not zero."""
        return self.width != 0