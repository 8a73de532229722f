"""Axis-aligned bounding boxes and named anchor points.

A BoundingBox is a (min_corner, max_corner) pair and unpacks like a tuple:

    lo, hi = diagram.bounding_box()

Anchor names follow the convention where y grows downward on screen: the
"top" edge is min.y and the "bottom" edge is max.y.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from typing import NamedTuple

from diagram_core.exceptions import AnchorLookupError, EmptyDiagramError
from diagram_core.geometry.vector import Vector2


class Anchor(str, Enum):
    """The nine canonical reference points of a bounding box."""

    TOP_LEFT = "top-left"
    TOP_CENTER = "top-center"
    TOP_RIGHT = "top-right"
    CENTER_LEFT = "center-left"
    CENTER_CENTER = "center-center"
    CENTER_RIGHT = "center-right"
    BOTTOM_LEFT = "bottom-left"
    BOTTOM_CENTER = "bottom-center"
    BOTTOM_RIGHT = "bottom-right"

    @classmethod
    def parse(cls, anchor: Anchor | str) -> Anchor:
        """Resolve an Anchor or its string value.

        Raises:
            AnchorLookupError: If the identifier names no anchor.
        """
        try:
            return cls(anchor)
        except ValueError:
            raise AnchorLookupError(anchor) from None


class BoundingBox(NamedTuple):
    """Axis-aligned box given by its minimum and maximum corners."""

    min_corner: Vector2
    max_corner: Vector2

    @classmethod
    def from_points(cls, points: Iterable[Vector2]) -> BoundingBox:
        """Smallest box enclosing the given points.

        Raises:
            EmptyDiagramError: If no points are given.
        """
        xs: list[float] = []
        ys: list[float] = []
        for p in points:
            xs.append(p.x)
            ys.append(p.y)
        if not xs:
            raise EmptyDiagramError("Cannot compute a bounding box without points")
        return cls(
            Vector2(x=min(xs), y=min(ys)),
            Vector2(x=max(xs), y=max(ys)),
        )

    @classmethod
    def union_all(cls, boxes: Iterable[BoundingBox]) -> BoundingBox:
        """Componentwise union of several boxes.

        Raises:
            EmptyDiagramError: If no boxes are given.
        """
        result: BoundingBox | None = None
        for box in boxes:
            result = box if result is None else result.union(box)
        if result is None:
            raise EmptyDiagramError("Cannot take the union of zero bounding boxes")
        return result

    def union(self, other: BoundingBox) -> BoundingBox:
        lo, hi = self
        other_lo, other_hi = other
        return BoundingBox(
            Vector2(x=min(lo.x, other_lo.x), y=min(lo.y, other_lo.y)),
            Vector2(x=max(hi.x, other_hi.x), y=max(hi.y, other_hi.y)),
        )

    @property
    def width(self) -> float:
        return self.max_corner.x - self.min_corner.x

    @property
    def height(self) -> float:
        return self.max_corner.y - self.min_corner.y

    @property
    def center(self) -> Vector2:
        """Midpoint of the two corners."""
        return self.anchor(Anchor.CENTER_CENTER)

    def contains(self, point: Vector2) -> bool:
        """Check if a point lies inside the box (edges inclusive)."""
        lo, hi = self
        return lo.x <= point.x <= hi.x and lo.y <= point.y <= hi.y

    def anchor(self, anchor: Anchor | str) -> Vector2:
        """Return one of the nine named reference points of the box.

        Args:
            anchor: An Anchor member or its string value (e.g. "top-left").

        Returns:
            The anchor point.

        Raises:
            AnchorLookupError: If the anchor identifier is unknown.
        """
        name = Anchor.parse(anchor)
        lo, hi = self
        midx = (lo.x + hi.x) / 2
        midy = (lo.y + hi.y) / 2

        xs = {"left": lo.x, "center": midx, "right": hi.x}
        ys = {"top": lo.y, "center": midy, "bottom": hi.y}
        vertical, horizontal = name.value.split("-")
        return Vector2(x=xs[horizontal], y=ys[vertical])
