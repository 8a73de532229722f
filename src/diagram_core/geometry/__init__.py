"""Geometry primitives for diagram-core.

Key Components:
    - Vector2: immutable 2D point/vector (and the V2 shorthand)
    - Path: immutable polyline with parametric evaluation
    - BoundingBox / Anchor: axis-aligned extents and their nine anchors

Example:
    from diagram_core.geometry import V2, Path

    segment = Path([V2(0, 0), V2(4, 2)])
    segment.get_parametric_point(0.5)  # Vector2(x=2.0, y=1.0)
"""

from diagram_core.geometry.bbox import Anchor, BoundingBox
from diagram_core.geometry.path import Path
from diagram_core.geometry.vector import V2, Vector2

__all__ = [
    "V2",
    "Anchor",
    "BoundingBox",
    "Path",
    "Vector2",
]
