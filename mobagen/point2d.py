"""Integer 2D points used for grid and board coordinates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Point2D:
    """An immutable integer point.

    Points order by the sum of their coordinates, which is what the
    path-finding priority queues rely on to break ties.
    """

    x: int = 0
    y: int = 0

    UP: ClassVar[Point2D]
    DOWN: ClassVar[Point2D]
    LEFT: ClassVar[Point2D]
    RIGHT: ClassVar[Point2D]

    def __add__(self, other: Point2D) -> Point2D:
        if not isinstance(other, Point2D):
            return NotImplemented
        return Point2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point2D) -> Point2D:
        if not isinstance(other, Point2D):
            return NotImplemented
        return Point2D(self.x - other.x, self.y - other.y)

    def __lt__(self, other: Point2D) -> bool:
        if not isinstance(other, Point2D):
            return NotImplemented
        return self.x + self.y < other.x + other.y

    def __gt__(self, other: Point2D) -> bool:
        if not isinstance(other, Point2D):
            return NotImplemented
        return self.x + self.y > other.x + other.y

    def __str__(self) -> str:
        return f"{{{self.x}, {self.y}}}"

    def up(self) -> Point2D:
        """The point one step up (towards negative y)."""
        return self + Point2D.UP

    def down(self) -> Point2D:
        """The point one step down (towards positive y)."""
        return self + Point2D.DOWN

    def left(self) -> Point2D:
        """The point one step to the left."""
        return self + Point2D.LEFT

    def right(self) -> Point2D:
        """The point one step to the right."""
        return self + Point2D.RIGHT


Point2D.UP = Point2D(0, -1)
Point2D.DOWN = Point2D(0, 1)
Point2D.LEFT = Point2D(-1, 0)
Point2D.RIGHT = Point2D(1, 0)