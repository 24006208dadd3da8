"""Two-dimensional vector used for positions, speeds and offsets."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


@dataclass
class Vec2:
    """A mutable 2D vector with the usual arithmetic."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __iadd__(self, other: Vec2) -> Vec2:
        self.x += other.x
        self.y += other.y
        return self

    def __isub__(self, other: Vec2) -> Vec2:
        self.x -= other.x
        self.y -= other.y
        return self

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def magnitude(self) -> float:
        """Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def normalized(self) -> Vec2:
        """Unit vector in the same direction, or the zero vector if this one is zero."""
        mag = self.magnitude()
        if mag > 0:
            return Vec2(self.x / mag, self.y / mag)
        return Vec2(0.0, 0.0)

    def inclination(self) -> float:
        """Angle to the positive x axis, in radians."""
        return math.atan2(self.y, self.x)

    def distance(self, other: Vec2) -> float:
        """Distance between the points this vector and ``other`` denote."""
        return (self - other).magnitude()

    def rotate(self, angle: float) -> Vec2:
        """Vector rotated counter-clockwise by ``angle`` radians."""
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        return Vec2(
            self.x * cos_a - self.y * sin_a,
            self.x * sin_a + self.y * cos_a,
        )