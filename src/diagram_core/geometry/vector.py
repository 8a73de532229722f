"""Two-dimensional vector primitive.

Vector2 is an immutable Pydantic model used both as a point and as a
displacement. Angles are in radians; a positive angle rotates
counter-clockwise when the y axis points up.
"""

from __future__ import annotations

import math
from typing import Self

from pydantic import BaseModel


class Vector2(BaseModel, frozen=True):
    """An immutable 2D point or vector.

    Attributes:
        x: Horizontal component.
        y: Vertical component.
    """

    x: float
    y: float

    @classmethod
    def zero(cls) -> Self:
        """Return the (0, 0) vector."""
        return cls(x=0.0, y=0.0)

    @classmethod
    def from_tuple(cls, coord: tuple[float, float]) -> Self:
        """Create Vector2 from (x, y) tuple."""
        return cls(x=coord[0], y=coord[1])

    def to_tuple(self) -> tuple[float, float]:
        """Convert to (x, y) tuple."""
        return (self.x, self.y)

    def add(self, other: Vector2) -> Vector2:
        return Vector2(x=self.x + other.x, y=self.y + other.y)

    def sub(self, other: Vector2) -> Vector2:
        return Vector2(x=self.x - other.x, y=self.y - other.y)

    def scale(self, factor: float) -> Vector2:
        return Vector2(x=self.x * factor, y=self.y * factor)

    def dot(self, other: Vector2) -> float:
        return self.x * other.x + self.y * other.y

    def length(self) -> float:
        """Euclidean norm of the vector."""
        return math.hypot(self.x, self.y)

    def rotate(self, angle: float) -> Vector2:
        """Rotate about (0, 0).

        Args:
            angle: Rotation angle in radians.

        Returns:
            The rotated vector.
        """
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        return Vector2(
            x=self.x * cos_a - self.y * sin_a,
            y=self.x * sin_a + self.y * cos_a,
        )

    def rotate_about(self, angle: float, pivot: Vector2) -> Vector2:
        """Rotate about an arbitrary pivot point."""
        return self.sub(pivot).rotate(angle).add(pivot)

    def __add__(self, other: Vector2) -> Vector2:
        return self.add(other)

    def __sub__(self, other: Vector2) -> Vector2:
        return self.sub(other)

    def __mul__(self, factor: float) -> Vector2:
        return self.scale(factor)

    def __rmul__(self, factor: float) -> Vector2:
        return self.scale(factor)

    def __neg__(self) -> Vector2:
        return Vector2(x=-self.x, y=-self.y)


def V2(x: float, y: float) -> Vector2:  # noqa: N802
    """Shorthand constructor: ``V2(1, 2) == Vector2(x=1, y=2)``."""
    return Vector2(x=x, y=y)
