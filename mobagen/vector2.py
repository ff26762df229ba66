"""Floating point 2D vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass

from mobagen.randomness import random_range

DEG2RAD = (math.pi * 2) / 360
_EPSILON = 1.0e-6


@dataclass(frozen=True, eq=False)
class Vector2:
    """An immutable 2D vector; equality is approximate."""

    x: float = 0.0
    y: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    @classmethod
    def up(cls) -> Vector2:
        return cls(0.0, -1.0)

    @classmethod
    def down(cls) -> Vector2:
        return cls(0.0, 1.0)

    @classmethod
    def left(cls) -> Vector2:
        return cls(-1.0, 0.0)

    @classmethod
    def right(cls) -> Vector2:
        return cls(1.0, 0.0)

    @classmethod
    def zero(cls) -> Vector2:
        return cls(0.0, 0.0)

    @classmethod
    def identity(cls) -> Vector2:
        return cls(1.0, 1.0)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __pos__(self) -> Vector2:
        return Vector2(self.x, self.y)

    def __add__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, other) -> Vector2:
        if isinstance(other, Vector2):
            return Vector2(self.x * other.x, self.y * other.y)
        if isinstance(other, (int, float)):
            return Vector2(self.x * other, self.y * other)
        return NotImplemented

    def __rmul__(self, other) -> Vector2:
        if isinstance(other, (int, float)):
            return Vector2(other * self.x, other * self.y)
        return NotImplemented

    def __truediv__(self, other) -> Vector2:
        if isinstance(other, Vector2):
            return Vector2(self.x / other.x, self.y / other.y)
        if isinstance(other, (int, float)):
            return Vector2(self.x / other, self.y / other)
        return NotImplemented

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector2):
            return NotImplemented
        return (self - other).sqr_magnitude() < _EPSILON

    __hash__ = None

    def __getitem__(self, index: int) -> float:
        if index == 0:
            return self.x
        if index == 1:
            return self.y
        raise IndexError("Vector2 index out of range")

    def __iter__(self):
        yield self.x
        yield self.y

    def rotate(self, angle) -> Vector2:
        """Rotate by ``angle`` degrees, or by the angle of a vector."""
        if isinstance(angle, Vector2):
            angle = angle.angle_degree()
        sin = math.sin(angle * DEG2RAD)
        cos = math.cos(angle * DEG2RAD)
        return Vector2(cos * self.x - sin * self.y, sin * self.x + cos * self.y)

    def angle_degree(self) -> float:
        """Angle in degrees, measured clockwise from the up direction."""
        return self.angle_radian() * 180 / math.pi

    def angle_radian(self) -> float:
        """Angle in radians, measured clockwise from the up direction."""
        return math.atan2(self.x, -self.y)

    @classmethod
    def random(cls, start, end) -> Vector2:
        """A vector whose components are drawn uniformly from [start, end]."""
        return cls(random_range(float(start), float(end)), random_range(float(start), float(end)))

    @classmethod
    def from_radian(cls, radian) -> Vector2:
        return cls(math.cos(radian), math.sin(radian))

    @classmethod
    def from_degree(cls, degree) -> Vector2:
        return cls.from_radian(degree * (math.pi / 180))

    def sqr_magnitude(self) -> float:
        return self.x * self.x + self.y * self.y

    def magnitude(self) -> float:
        return math.sqrt(self.sqr_magnitude())

    def distance(self, other: Vector2) -> float:
        return math.sqrt(self.distance_squared(other))

    def distance_squared(self, other: Vector2) -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def normalized(self) -> Vector2:
        """Unit vector in the same direction; the zero vector is returned unchanged."""
        magnitude = self.magnitude()
        if magnitude > 0.0:
            return self / magnitude
        return Vector2(self.x, self.y)