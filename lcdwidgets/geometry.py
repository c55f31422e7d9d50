"""Points and rectangles in screen coordinates."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Point", "Rect", "NULL_RECT"]


@dataclass
class Point:
    """A position on the screen."""

    x: int
    y: int


@dataclass
class Rect:
    """An axis-aligned rectangle given by its top-left corner and its size."""

    x: int
    y: int
    w: int
    h: int

    def left(self) -> int:
        return self.x

    def right(self) -> int:
        return self.x + self.w

    def top(self) -> int:
        return self.y

    def bottom(self) -> int:
        return self.y + self.h

    def contains_point(self, x: int, y: int) -> bool:
        """Whether (x, y) lies inside; right and bottom edges are excluded."""
        return self.x <= x < self.x + self.w and self.y <= y < self.y + self.h

    def contains(self, other: Rect) -> bool:
        """Whether ``other`` lies entirely inside this rectangle."""
        return (
            self.left() <= other.left()
            and self.right() >= other.right()
            and self.top() <= other.top()
            and self.bottom() >= other.bottom()
        )

    def copy(self) -> Rect:
        return Rect(self.x, self.y, self.w, self.h)


NULL_RECT = Rect(0, 0, 0, 0)