"""diagram-core: an immutable geometry tree for building figures.

Shapes are polygons, open curves and named groups of other shapes. Every
transform (translate, position, rotate, fill, stroke) returns a new tree,
so diagrams can be shared and recombined freely by higher-level builders.
"""

from diagram_core.exceptions import (
    AnchorLookupError,
    DiagramError,
    DiagramValidationError,
    EmptyDiagramError,
    NameCollisionError,
    StructuralTypeError,
    UnsupportedOperationError,
)
from diagram_core.geometry import V2, Anchor, BoundingBox, Path, Vector2
from diagram_core.tree import (
    Curve,
    Diagram,
    DiagramKind,
    Group,
    Polygon,
    combine,
    curve,
    line,
    points_from_xy,
    polygon,
    rectangle,
    rectangle_corner,
)

__version__ = "0.1.0"

__all__ = [
    "V2",
    "Anchor",
    "AnchorLookupError",
    "BoundingBox",
    "Curve",
    "Diagram",
    "DiagramError",
    "DiagramKind",
    "DiagramValidationError",
    "EmptyDiagramError",
    "Group",
    "NameCollisionError",
    "Path",
    "Polygon",
    "StructuralTypeError",
    "UnsupportedOperationError",
    "Vector2",
    "__version__",
    "combine",
    "curve",
    "line",
    "points_from_xy",
    "polygon",
    "rectangle",
    "rectangle_corner",
]
