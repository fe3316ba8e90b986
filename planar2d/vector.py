"""Immutable two-dimensional vectors with tolerant equality."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Iterator

EPSILON = 1e-8


@dataclass(frozen=True, eq=False, slots=True)
class Vector2d:
    """A point or direction in the plane."""

    x: float = 0.0
    y: float = 0.0

    ZERO: ClassVar[Vector2d]
    UP: ClassVar[Vector2d]
    DOWN: ClassVar[Vector2d]
    LEFT: ClassVar[Vector2d]
    RIGHT: ClassVar[Vector2d]
    ONE: ClassVar[Vector2d]

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: Vector2d) -> Vector2d:
        if not isinstance(other, Vector2d):
            return NotImplemented
        return Vector2d(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2d) -> Vector2d:
        if not isinstance(other, Vector2d):
            return NotImplemented
        return Vector2d(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2d:
        if isinstance(scalar, Vector2d):
            return NotImplemented
        return Vector2d(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector2d:
        if isinstance(scalar, Vector2d):
            return NotImplemented
        if scalar == 0.0:
            raise ValueError("Division by zero")
        return Vector2d(self.x / scalar, self.y / scalar)

    def __rtruediv__(self, scalar: float) -> Vector2d:
        if abs(self.x) < EPSILON or abs(self.y) < EPSILON:
            raise ValueError("Division by zero component in vector")
        return Vector2d(scalar / self.x, scalar / self.y)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector2d):
            return NotImplemented
        return abs(self.x - other.x) < EPSILON and abs(self.y - other.y) < EPSILON

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return f"Vector2d: {self.x:g}, {self.y:g}"

    def distance(self, other: Vector2d) -> float:
        """Euclidean distance to another point."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def dot(self, other: Vector2d) -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vector2d) -> float:
        """Scalar (z component of the) cross product."""
        return self.x * other.y - self.y * other.x

    def angle_between(self, other: Vector2d) -> float:
        """Unsigned angle to another vector in radians; 0 if either is zero."""
        mag_product = self.magnitude() * other.magnitude()
        if mag_product == 0:
            return 0.0
        cos_theta = max(-1.0, min(1.0, self.dot(other) / mag_product))
        return math.acos(cos_theta)

    def magnitude(self) -> float:
        """Length of the vector."""
        return math.hypot(self.x, self.y)

    def normalized(self) -> Vector2d:
        """Unit vector in the same direction."""
        mag = self.magnitude()
        if mag == 0.0:
            raise ZeroDivisionError("Cannot normalize a zero vector")
        return Vector2d(self.x / mag, self.y / mag)


Vector2d.ZERO = Vector2d(0.0, 0.0)
Vector2d.UP = Vector2d(0.0, 1.0)
Vector2d.DOWN = Vector2d(0.0, -1.0)
Vector2d.LEFT = Vector2d(-1.0, 0.0)
Vector2d.RIGHT = Vector2d(1.0, 0.0)
Vector2d.ONE = Vector2d(1.0, 1.0)