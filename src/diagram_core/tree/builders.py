"""Factories for building diagram trees from raw points.

Polygons and curves are built from ordered point lists; groups are built
by combining existing diagrams. Default path and child names come from
``diagram_core.config.settings``.
"""

from __future__ import annotations

from collections.abc import Sequence

from diagram_core.config import settings
from diagram_core.exceptions import DiagramValidationError
from diagram_core.geometry.path import Path
from diagram_core.geometry.vector import Vector2
from diagram_core.tree.nodes import Curve, Diagram, Group, Polygon
from diagram_core.utils.logging import building, get_logger

logger = get_logger(__name__)


def _default_names(prefix: str, count: int, overrides: Sequence[str] = ()) -> list[str]:
    """Names prefix0..prefixN-1 with a leading slice replaced by overrides."""
    names = [f"{prefix}{i}" for i in range(count)]
    for i, name in enumerate(overrides[:count]):
        names[i] = name
    return names


def points_from_xy(xs: Sequence[float], ys: Sequence[float]) -> list[Vector2]:
    """Zip parallel coordinate arrays into points.

    Raises:
        DiagramValidationError: If the arrays differ in length.
    """
    if len(xs) != len(ys):
        raise DiagramValidationError(
            f"Coordinate arrays differ in length: {len(xs)} x values, {len(ys)} y values"
        )
    return [Vector2(x=x, y=y) for x, y in zip(xs, ys, strict=True)]


def polygon(points: Sequence[Vector2], names: Sequence[str] | None = None) -> Polygon:
    """Create a polygon from a list of points.

    One straight segment is created between each pair of consecutive
    points. The last point is not joined back to the first: pass the
    starting point again at the end to close the outline.

    Args:
        points: Outline points, at least 3.
        names: Optional names for the first segments. Segments without a
            supplied name are called path0, path1, ...

    Returns:
        A Polygon with ``len(points) - 1`` paths.

    Raises:
        DiagramValidationError: If fewer than 3 points are given.

    Example:
        >>> from diagram_core import V2
        >>> tri = polygon([V2(0, 0), V2(1, 0), V2(0, 1), V2(0, 0)])
        >>> sorted(tri.paths)
        ['path0', 'path1', 'path2']
    """
    if len(points) < 3:
        raise DiagramValidationError(
            f"Polygon must have at least 3 points, got {len(points)}"
        )
    paths = [Path((points[i], points[i + 1])) for i in range(len(points) - 1)]
    path_names = _default_names(settings.PATH_NAME_PREFIX, len(paths), names or ())

    with building("polygon"):
        shape = Polygon()
        shape.add_paths(paths, path_names)
        logger.debug("polygon_created", segments=len(paths))
    return shape


def curve(points: Sequence[Vector2]) -> Curve:
    """Create an open curve through the given points.

    Raises:
        DiagramValidationError: If fewer than 2 points are given.
    """
    with building("curve"):
        shape = Curve()
        shape.add_paths([Path(points)], [f"{settings.PATH_NAME_PREFIX}0"])
        logger.debug("curve_created", points=len(points))
    return shape


def line(start: Vector2, end: Vector2) -> Curve:
    """Create a straight two-point curve."""
    return curve([start, end])


def rectangle_corner(bottom_left: Vector2, top_right: Vector2) -> Polygon:
    """Create a closed rectangle from two opposite corners.

    The origin is placed at the rectangle's center.
    """
    x1, y1 = bottom_left.to_tuple()
    x2, y2 = top_right.to_tuple()
    rect = polygon(
        [
            Vector2(x=x1, y=y1),
            Vector2(x=x2, y=y1),
            Vector2(x=x2, y=y2),
            Vector2(x=x1, y=y2),
            Vector2(x=x1, y=y1),
        ]
    )
    return rect.move_origin(Vector2(x=(x1 + x2) / 2, y=(y1 + y2) / 2))


def rectangle(width: float, height: float) -> Polygon:
    """Create a closed rectangle centered on (0, 0)."""
    return rectangle_corner(
        Vector2(x=-width / 2, y=-height / 2),
        Vector2(x=width / 2, y=height / 2),
    )


def combine(*diagrams: Diagram, names: Sequence[str] | None = None) -> Group:
    """Combine diagrams into a single Group.

    The inputs are copied, so the returned group shares nothing with them.
    The group's origin is the center of the combined bounding box, or
    (0, 0) when none of the diagrams has geometry.

    Args:
        *diagrams: Diagrams to become the group's children, in order.
        names: Child names, one per diagram. Defaults to child0, child1, ...

    Returns:
        The combined Group.

    Raises:
        DiagramValidationError: If names does not match the diagram count.
        NameCollisionError: If names contains duplicates.
    """
    child_names = (
        list(names)
        if names is not None
        else _default_names(settings.CHILD_NAME_PREFIX, len(diagrams))
    )
    with building("combine"):
        group = Group()
        group.add_children([d.copy() for d in diagrams], child_names)

        if next(group.iter_points(), None) is not None:
            group.origin = group.bounding_box().center
        logger.debug("diagrams_combined", children=len(diagrams))
    return group
