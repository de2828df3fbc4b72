"""A small immutable two-dimensional vector."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vec2:
    """A 2D vector of floats."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __mul__(self, factor: float) -> Vec2:
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return Vec2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def normalize_or_zero(self) -> Vec2:
        """Unit vector in the same direction, or the zero vector when that is undefined."""
        length = self.length()
        if length == 0.0 or not math.isfinite(length):
            return Vec2(0.0, 0.0)
        return Vec2(self.x / length, self.y / length)


ZERO = Vec2(0.0, 0.0)