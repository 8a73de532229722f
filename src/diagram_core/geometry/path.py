"""Piecewise-linear paths.

A Path is the drawable unit owned by leaf diagrams: an ordered sequence of
at least two points joined by straight segments. Paths are immutable;
every transform returns a new Path.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass

from diagram_core.exceptions import DiagramValidationError, UnsupportedOperationError
from diagram_core.geometry.vector import Vector2


@dataclass(frozen=True)
class Path:
    """An immutable polyline.

    Attributes:
        points: The ordered points of the polyline (at least two).
    """

    points: tuple[Vector2, ...]

    def __init__(self, points: Iterable[Vector2]) -> None:
        pts = tuple(points)
        if len(pts) < 2:
            raise DiagramValidationError(
                f"Path needs at least 2 points, got {len(pts)}"
            )
        object.__setattr__(self, "points", pts)

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Vector2]:
        return iter(self.points)

    @property
    def start(self) -> Vector2:
        return self.points[0]

    @property
    def end(self) -> Vector2:
        return self.points[-1]

    def get_parametric_point(self, t: float) -> Vector2:
        """Evaluate the path at parameter t.

        The path starts at t=0 and ends at t=1. Only straight two-point
        paths are supported; t outside [0, 1] extrapolates along the line.

        Args:
            t: Curve parameter.

        Returns:
            The point ``start + (end - start) * t``.

        Raises:
            UnsupportedOperationError: If the path has more than 2 points.
        """
        if len(self.points) > 2:
            raise UnsupportedOperationError(
                f"Parametric evaluation is only implemented for 2-point paths, "
                f"got {len(self.points)} points"
            )
        return self.start + (self.end - self.start) * t

    def copy(self) -> Path:
        return Path(self.points)

    def translate(self, v: Vector2) -> Path:
        """Shift every point by v."""
        return Path(p + v for p in self.points)

    def rotate(self, angle: float, pivot: Vector2) -> Path:
        """Rotate every point by angle (radians) about pivot."""
        return Path(p.rotate_about(angle, pivot) for p in self.points)

    def transform(self, func: Callable[[Vector2], Vector2]) -> Path:
        """Apply an arbitrary point mapping to every point."""
        return Path(func(p) for p in self.points)
