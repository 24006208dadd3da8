"""Axis-aligned rectangle used as a game object's bounding box."""

from __future__ import annotations

from dataclasses import dataclass

from zombiefield.vec2 import Vec2


@dataclass
class Rect:
    """Rectangle with its top-left corner at (x, y) and size w by h."""

    x: float = 0.0
    y: float = 0.0
    w: float = 0.0
    h: float = 0.0

    def center(self) -> Vec2:
        """Centre point of the rectangle."""
        return Vec2(self.x + self.w / 2, self.y + self.h / 2)

    def contains(self, point: Vec2) -> bool:
        """Whether ``point`` lies inside the rectangle, edges included."""
        return (
            self.x <= point.x <= self.x + self.w
            and self.y <= point.y <= self.y + self.h
        )

    def distance(self, other: Rect) -> float:
        """Distance between the centres of two rectangles."""
        return self.center().distance(other.center())

    def __add__(self, offset: Vec2) -> Rect:
        return Rect(self.x + offset.x, self.y + offset.y, self.w, self.h)