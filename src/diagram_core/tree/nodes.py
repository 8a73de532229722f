"""Diagram tree nodes.

A diagram is a tree whose leaves own drawable paths and whose inner nodes
group other diagrams under unique names:

- Polygon: closed shape, owns paths, can be filled and stroked
- Curve: open path, owns paths, can be stroked but never filled
- Group: composite, owns named child diagrams and no paths

The node kind is carried by the concrete class, so a leaf structurally has
no ``children`` and a group structurally has no ``paths``.

Every public operation returns a new tree. Internally each one clones the
receiver with ``copy()`` and then mutates only the clone, so a tree handed
to a caller is never changed afterwards.
"""

from __future__ import annotations

import dataclasses
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator, MutableMapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Self, TypeVar

from diagram_core.exceptions import (
    DiagramValidationError,
    EmptyDiagramError,
    NameCollisionError,
    StructuralTypeError,
)
from diagram_core.geometry.bbox import Anchor, BoundingBox
from diagram_core.geometry.path import Path
from diagram_core.geometry.vector import Vector2
from diagram_core.utils.logging import get_logger

logger = get_logger(__name__)

_T = TypeVar("_T")

PointFunc = Callable[[Vector2], Vector2]


class DiagramKind(str, Enum):
    """Node kind."""

    POLYGON = "polygon"
    CURVE = "curve"
    GROUP = "diagram"


def _attach(
    target: MutableMapping[str, _T],
    items: Sequence[_T],
    names: Sequence[str],
    *,
    container: str,
) -> None:
    """Insert items under names, rejecting length mismatches and collisions.

    Nothing is inserted unless every name is valid.
    """
    if len(items) != len(names):
        raise DiagramValidationError(
            f"Got {len(items)} {container} but {len(names)} names"
        )
    seen: set[str] = set()
    for name in names:
        if name in target or name in seen:
            logger.debug("name_collision", name=name, container=container)
            raise NameCollisionError(name, container=container)
        seen.add(name)
    for name, item in zip(names, items, strict=True):
        target[name] = item


@dataclass
class Diagram(ABC):
    """Base class for all diagram tree nodes.

    Attributes:
        origin: Local reference point, moved by position() and used as the
            default rotation pivot.
        stroke_color: Stroke color, or None when unset.
        fill_color: Fill color, or None when unset.
        tags: Opaque strings consumers use to mark structural roles.
    """

    kind: ClassVar[DiagramKind]

    origin: Vector2 = field(default_factory=Vector2.zero)
    stroke_color: str | None = None
    fill_color: str | None = None
    tags: frozenset[str] = field(default_factory=frozenset)

    @property
    def is_leaf(self) -> bool:
        return self.kind is not DiagramKind.GROUP

    # -- construction ------------------------------------------------------

    def add_paths(self, paths: Sequence[Path], names: Sequence[str]) -> None:
        """Attach paths to a leaf node under the given names.

        Only intended for factories building a fresh node.

        Raises:
            StructuralTypeError: If the node is a Group.
        """
        raise StructuralTypeError("Diagram cannot have paths", kind=self.kind.value)

    def add_children(self, children: Sequence[Diagram], names: Sequence[str]) -> None:
        """Attach child diagrams to a Group under the given names.

        Only intended for factories building a fresh node.

        Raises:
            StructuralTypeError: If the node is a leaf.
        """
        raise StructuralTypeError(
            "Leaf diagrams cannot have children", kind=self.kind.value
        )

    # -- copying -----------------------------------------------------------

    def copy(self) -> Self:
        """Return a deep structural clone sharing no mutable state."""
        return dataclasses.replace(self, **self._cloned_contents())

    @abstractmethod
    def _cloned_contents(self) -> dict[str, Any]:
        """Fresh copies of the kind-specific containers, keyed by field name."""

    # -- styling -----------------------------------------------------------

    def fill(self, color: str) -> Self:
        """Return a copy with fill set on every fillable node.

        Polygons take the fill, curves ignore it, groups pass it to every
        descendant.
        """
        new = self.copy()
        new._set_fill(color)
        return new

    def stroke(self, color: str) -> Self:
        """Return a copy with stroke set on every leaf of the tree."""
        new = self.copy()
        new._set_stroke(color)
        return new

    def _set_fill(self, color: str) -> None:
        raise StructuralTypeError("Node has no fill", kind=self.kind.value)

    def _set_stroke(self, color: str) -> None:
        raise StructuralTypeError("Node has no stroke", kind=self.kind.value)

    # -- tags --------------------------------------------------------------

    def append_tag(self, tag: str) -> Self:
        new = self.copy()
        new.tags = self.tags | {tag}
        return new

    def has_tag(self, tag: str) -> bool:
        return tag in self.tags

    def find_tagged(self, tag: str) -> Diagram | None:
        """Return a copy of the first node carrying tag, depth-first from this node.

        The result is detached from this tree, so changing it never
        affects the receiver.
        """
        found = self._find_tagged(tag)
        return None if found is None else found.copy()

    def _find_tagged(self, tag: str) -> Diagram | None:
        return self if self.has_tag(tag) else None

    # -- measurement -------------------------------------------------------

    @abstractmethod
    def iter_points(self) -> Iterator[Vector2]:
        """Yield every path point in the subtree."""

    @abstractmethod
    def _extent(self) -> BoundingBox | None:
        """Bounding box of the subtree, or None when it has no geometry."""

    def bounding_box(self) -> BoundingBox:
        """Return the axis-aligned box enclosing all geometry of the subtree.

        Returns:
            BoundingBox(min_corner, max_corner).

        Raises:
            EmptyDiagramError: If the subtree contains no points at all.
        """
        box = self._extent()
        if box is None:
            raise EmptyDiagramError(
                f"{self.kind.value} has no geometry to bound"
            )
        return box

    def get_anchor(self, anchor: Anchor | str) -> Vector2:
        """Return a named reference point of the bounding box.

        Args:
            anchor: An Anchor member or its string value.

        Raises:
            AnchorLookupError: If the anchor identifier is unknown.
            EmptyDiagramError: If the subtree has no geometry.
        """
        name = Anchor.parse(anchor)
        return self.bounding_box().anchor(name)

    # -- transforms --------------------------------------------------------

    def translate(self, v: Vector2) -> Self:
        """Return a copy shifted by v.

        The origin of every node and every path point move together.
        """
        return self.transform(lambda p: p + v)

    def position(self, v: Vector2) -> Self:
        """Return a copy moved so that its origin lands on v."""
        return self.translate(v - self.origin)

    def rotate(self, angle: float, pivot: Vector2 | None = None) -> Self:
        """Return a copy rotated rigidly by angle (radians) about pivot.

        Args:
            angle: Rotation angle in radians.
            pivot: Center of rotation. Defaults to this node's origin; the
                same pivot is used for every descendant.
        """
        center = self.origin if pivot is None else pivot
        return self.transform(lambda p: p.rotate_about(angle, center))

    def transform(self, func: PointFunc) -> Self:
        """Return a copy with func applied to every point and origin."""
        new = self.copy()
        new._map_points(func)
        return new

    def move_origin(self, v: Vector2) -> Self:
        """Return a copy whose origin is v, leaving the geometry in place."""
        new = self.copy()
        new.origin = v
        return new

    def move_origin_to_anchor(self, anchor: Anchor | str) -> Self:
        return self.move_origin(self.get_anchor(anchor))

    @abstractmethod
    def _map_points(self, func: PointFunc) -> None:
        """Apply func in place to the origins and paths of the subtree."""


@dataclass
class LeafDiagram(Diagram):
    """A diagram that owns named paths and no children."""

    paths: dict[str, Path] = field(default_factory=dict)

    def add_paths(self, paths: Sequence[Path], names: Sequence[str]) -> None:
        _attach(self.paths, paths, names, container="paths")

    def _cloned_contents(self) -> dict[str, Any]:
        return {"paths": {name: path.copy() for name, path in self.paths.items()}}

    def _set_stroke(self, color: str) -> None:
        self.stroke_color = color

    def iter_points(self) -> Iterator[Vector2]:
        for path in self.paths.values():
            yield from path.points

    def _extent(self) -> BoundingBox | None:
        if not self.paths:
            return None
        return BoundingBox.from_points(self.iter_points())

    def _map_points(self, func: PointFunc) -> None:
        self.origin = func(self.origin)
        self.paths = {name: path.transform(func) for name, path in self.paths.items()}


@dataclass
class Polygon(LeafDiagram):
    """A closed shape made of path segments."""

    kind: ClassVar[DiagramKind] = DiagramKind.POLYGON

    def _set_fill(self, color: str) -> None:
        self.fill_color = color


@dataclass
class Curve(LeafDiagram):
    """An open path. Curves have no fill; fill() leaves them unchanged."""

    kind: ClassVar[DiagramKind] = DiagramKind.CURVE

    def _set_fill(self, color: str) -> None:
        pass

    def _single_path(self) -> tuple[str, Path]:
        if len(self.paths) != 1:
            raise StructuralTypeError(
                f"Operation needs a curve with exactly one path, got {len(self.paths)}",
                kind=self.kind.value,
            )
        return next(iter(self.paths.items()))

    def add_points(self, points: Sequence[Vector2]) -> Curve:
        """Return a copy with points appended to the end of the curve."""
        name, path = self._single_path()
        new = self.copy()
        new.paths[name] = Path((*path.points, *points))
        return new

    def to_polygon(self) -> Polygon:
        """Return a Polygon with this curve's paths, origin, stroke and tags.

        The path is not closed; fill renderers close it implicitly.
        """
        self._single_path()
        clone = self.copy()
        return Polygon(
            origin=clone.origin,
            stroke_color=clone.stroke_color,
            tags=clone.tags,
            paths=clone.paths,
        )


@dataclass
class Group(Diagram):
    """A composite diagram owning named children and no paths."""

    kind: ClassVar[DiagramKind] = DiagramKind.GROUP

    children: dict[str, Diagram] = field(default_factory=dict)

    def add_children(self, children: Sequence[Diagram], names: Sequence[str]) -> None:
        _attach(self.children, children, names, container="children")

    def _cloned_contents(self) -> dict[str, Any]:
        return {
            "children": {name: child.copy() for name, child in self.children.items()}
        }

    def _set_fill(self, color: str) -> None:
        for child in self.children.values():
            child._set_fill(color)

    def _set_stroke(self, color: str) -> None:
        for child in self.children.values():
            child._set_stroke(color)

    def _find_tagged(self, tag: str) -> Diagram | None:
        if self.has_tag(tag):
            return self
        for child in self.children.values():
            found = child._find_tagged(tag)
            if found is not None:
                return found
        return None

    def iter_points(self) -> Iterator[Vector2]:
        for child in self.children.values():
            yield from child.iter_points()

    def _extent(self) -> BoundingBox | None:
        boxes = [
            box for child in self.children.values() if (box := child._extent()) is not None
        ]
        if not boxes:
            return None
        return BoundingBox.union_all(boxes)

    def _map_points(self, func: PointFunc) -> None:
        self.origin = func(self.origin)
        for child in self.children.values():
            child._map_points(func)
