"""Floating point 2D vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

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

    @staticmethod
    def up() -> Vector2:
        return Vector2(0.0, -1.0)

    @staticmethod
    def down() -> Vector2:
        return Vector2(0.0, 1.0)

    @staticmethod
    def left() -> Vector2:
        return Vector2(-1.0, 0.0)

    @staticmethod
    def right() -> Vector2:
        return Vector2(1.0, 0.0)

    @staticmethod
    def zero() -> Vector2:
        return Vector2(0.0, 0.0)

    @staticmethod
    def identity() -> Vector2:
        return Vector2(1.0, 1.0)

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

    def __mul__(self, other: Vector2 | float) -> Vector2:
        if isinstance(other, Vector2):
            return Vector2(self.x * other.x, self.y * other.y)
        if isinstance(other, (int, float)):
            return Vector2(self.x * other, self.y * other)
        return NotImplemented

    def __rmul__(self, other: float) -> Vector2:
        if isinstance(other, (int, float)):
            return Vector2(other * self.x, other * self.y)
        return NotImplemented

    def __truediv__(self, other: Vector2 | float) -> Vector2:
        if isinstance(other, Vector2):
            return Vector2(self.x / other.x, self.y / other.y)
        if isinstance(other, (int, float)):
            return Vector2(self.x / other, self.y / other)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector2):
            return NotImplemented
        return (self - other).sqr_magnitude() < _EPSILON

    __hash__ = None  # type: ignore[assignment]

    def __getitem__(self, index: int) -> float:
        if index == 0:
            return self.x
        if index == 1:
            return self.y
        raise IndexError("Out of Vector2 range")

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def rotate(self, degrees: float) -> Vector2:
        """Rotate by ``degrees`` around the origin."""
        sin = math.sin(degrees * DEG2RAD)
        cos = math.cos(degrees * DEG2RAD)
        return Vector2(cos * self.x - sin * self.y, sin * self.x + cos * self.y)

    def rotate_towards(self, up: Vector2) -> Vector2:
        """Rotate by the angle of ``up`` measured from the up direction."""
        return self.rotate(up.angle_degree())

    def angle_degree(self) -> float:
        return self.angle_radian() * 180 / math.pi

    def angle_radian(self) -> float:
        return math.atan2(self.x, -self.y)

    @staticmethod
    def random(start: float, end: float) -> Vector2:
        return Vector2(random_range(float(start), float(end)), random_range(float(start), float(end)))

    @staticmethod
    def from_radian(radian: float) -> Vector2:
        return Vector2(math.cos(radian), math.sin(radian))

    @staticmethod
    def from_degree(degree: float) -> Vector2:
        return Vector2.from_radian(degree * (math.pi / 180))

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
        """Unit vector in the same direction; the zero vector stays zero."""
        magnitude = self.magnitude()
        if magnitude > 0.0:
            return self / magnitude
        return Vector2(self.x, self.y)