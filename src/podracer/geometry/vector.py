"""2D vector algebra used by the aim, thrust and tracking code."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Integer world coordinates, exactly as delivered by the game.

    Equality is structural, which is how an already-seen checkpoint is
    recognised.
    """

    x: int
    y: int


@dataclass(frozen=True)
class Vector2:
    """Immutable 2D vector.  Every operation returns a new instance.

    Callers must check :meth:`module` is non-zero before calling
    :meth:`get_unitary` or relying on an angle from :meth:`get_angle`.
    """

    x: float
    y: float

    @classmethod
    def zero(cls) -> Vector2:
        return cls(0.0, 0.0)

    @classmethod
    def from_position(cls, pos: Position) -> Vector2:
        return cls(float(pos.x), float(pos.y))

    def is_zero(self) -> bool:
        """Exact zero test on both components."""
        return self.x == 0.0 and self.y == 0.0

    def add(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def subtract(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def multiply(self, factor: float) -> Vector2:
        return Vector2(self.x * factor, self.y * factor)

    def dot_product(self, other: Vector2) -> float:
        return self.x * other.x + self.y * other.y

    def determinant(self, other: Vector2) -> float:
        """Z component of the cross product ``self × other``."""
        return self.x * other.y - self.y * other.x

    def module(self) -> float:
        """Euclidean norm."""
        return math.hypot(self.x, self.y)

    def rotate(self, angle: float) -> Vector2:
        """Rotate by *angle* radians (counter-clockwise in a y-up frame)."""
        cos = math.cos(angle)
        sin = math.sin(angle)
        return Vector2(self.x * cos - self.y * sin, self.x * sin + self.y * cos)

    def get_angle(self, other: Vector2) -> float:
        """Signed angle in radians from *self* to *other*, in (-π, π]."""
        return math.atan2(self.determinant(other), self.dot_product(other))

    def get_unitary(self) -> Vector2:
        """Unit vector in the same direction.  Undefined for the zero vector."""
        norm = self.module()
        return Vector2(self.x / norm, self.y / norm)

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)

    def to_position(self) -> Position:
        """Truncate both coordinates toward zero."""
        return Position(int(self.x), int(self.y))


def intersect_lines(a: Vector2, b: Vector2, c: Vector2, d: Vector2) -> Vector2:
    """Intersection of the lines ``a + t·b`` and ``c + u·d``.

    Solved with Cramer's rule: ``t = ((c - a) × d) / (b × d)``.

    No parallelism guard: when ``b × d == 0`` the result contains NaN or Inf,
    so callers must rule that case out beforehand.
    """
    denom = b.determinant(d)
    num = c.subtract(a).determinant(d)
    try:
        t = num / denom
    except ZeroDivisionError:
        t = math.copysign(math.inf, num) if num else math.nan
    return a.add(b.multiply(t))
