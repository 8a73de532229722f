"""Diagram trees: nodes and the factories that build them.

Example:
    from diagram_core.geometry import V2, Anchor
    from diagram_core.tree import combine, curve, polygon

    square = polygon([V2(0, 0), V2(1, 0), V2(1, 1), V2(0, 1), V2(0, 0)])
    wave = curve([V2(0, 0), V2(1, 1), V2(2, 0)])
    figure = combine(square, wave, names=["box", "wave"]).stroke("black")

    figure.get_anchor(Anchor.TOP_LEFT)  # Vector2(x=0.0, y=0.0)
"""

from diagram_core.tree.builders import (
    combine,
    curve,
    line,
    points_from_xy,
    polygon,
    rectangle,
    rectangle_corner,
)
from diagram_core.tree.nodes import (
    Curve,
    Diagram,
    DiagramKind,
    Group,
    LeafDiagram,
    Polygon,
)

__all__ = [
    "Curve",
    "Diagram",
    "DiagramKind",
    "Group",
    "LeafDiagram",
    "Polygon",
    "combine",
    "curve",
    "line",
    "points_from_xy",
    "polygon",
    "rectangle",
    "rectangle_corner",
]
