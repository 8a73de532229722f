"""Unit tests for diagram tree nodes.

Covers:
- Fill/stroke propagation and immutability
- Bounding boxes (leaf, group union, empty subtrees)
- Translate, position, rotate (pivot threading), transform
- Anchors, tags, copying, attach-once builders
- Curve-only operations (add_points, to_polygon)
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar

import pytest

from diagram_core import (
    V2,
    Anchor,
    AnchorLookupError,
    Curve,
    DiagramKind,
    DiagramValidationError,
    EmptyDiagramError,
    Group,
    NameCollisionError,
    Path,
    Polygon,
    StructuralTypeError,
    combine,
    curve,
)
from diagram_core.tree import LeafDiagram


def _approx_box(box, lo: tuple[float, float], hi: tuple[float, float]) -> None:
    assert box.min_corner.to_tuple() == pytest.approx(lo, abs=1e-9)
    assert box.max_corner.to_tuple() == pytest.approx(hi, abs=1e-9)


class TestKinds:
    def test_kinds(self, triangle: Polygon, wave: Curve, scene: Group) -> None:
        assert triangle.kind is DiagramKind.POLYGON
        assert wave.kind is DiagramKind.CURVE
        assert scene.kind is DiagramKind.GROUP

    def test_is_leaf(self, triangle: Polygon, wave: Curve, scene: Group) -> None:
        assert triangle.is_leaf
        assert wave.is_leaf
        assert not scene.is_leaf

    def test_leaf_has_no_children_and_group_has_no_paths(
        self, triangle: Polygon, scene: Group
    ) -> None:
        assert not hasattr(triangle, "children")
        assert not hasattr(scene, "paths")


class TestAttach:
    def test_add_paths_to_group_fails(self) -> None:
        group = Group()
        with pytest.raises(StructuralTypeError, match="cannot have paths"):
            group.add_paths([Path([V2(0, 0), V2(1, 1)])], ["p"])

    def test_structural_error_is_type_error(self) -> None:
        with pytest.raises(TypeError):
            Group().add_paths([Path([V2(0, 0), V2(1, 1)])], ["p"])

    def test_add_children_to_leaf_fails(self, triangle: Polygon) -> None:
        with pytest.raises(StructuralTypeError):
            Polygon().add_children([triangle], ["t"])

    def test_path_name_collision_with_existing(self) -> None:
        shape = Polygon()
        shape.add_paths([Path([V2(0, 0), V2(1, 0)])], ["edge"])
        with pytest.raises(NameCollisionError) as exc_info:
            shape.add_paths([Path([V2(1, 0), V2(1, 1)])], ["edge"])
        assert exc_info.value.name == "edge"
        assert shape.paths["edge"].end == V2(1, 0)

    def test_collision_within_call_inserts_nothing(self, triangle: Polygon) -> None:
        group = Group()
        with pytest.raises(NameCollisionError):
            group.add_children([triangle, triangle], ["a", "a"])
        assert group.children == {}

    def test_length_mismatch(self) -> None:
        with pytest.raises(DiagramValidationError):
            Curve().add_paths([Path([V2(0, 0), V2(1, 0)])], ["a", "b"])


class TestCopy:
    def test_copy_is_equal_but_independent(self, scene: Group) -> None:
        clone = scene.copy()
        assert clone == scene
        assert clone is not scene
        assert clone.children["tri"] is not scene.children["tri"]
        assert clone.children["tri"].paths is not scene.children["tri"].paths

    def test_mutating_copy_leaves_source(self, scene: Group) -> None:
        clone = scene.copy()
        clone.children["tri"].paths.clear()
        clone.children["wave"].origin = V2(9, 9)
        assert len(scene.children["tri"].paths) == 3
        assert scene.children["wave"].origin == V2(0, 0)

    def test_tags_are_immutable(self, triangle: Polygon) -> None:
        tagged = triangle.append_tag("cell")
        assert isinstance(tagged.tags, frozenset)
        with pytest.raises(AttributeError):
            tagged.tags.add("scratch")  # type: ignore[attr-defined]


class TestStyling:
    def test_fill_propagation(self, scene: Group) -> None:
        filled = scene.fill("red")
        assert filled.children["tri"].fill_color == "red"
        assert filled.children["wave"].fill_color is None
        assert filled.children["tri"].stroke_color is None
        assert filled.children["wave"].stroke_color is None

    def test_fill_does_not_change_source(self, scene: Group) -> None:
        scene.fill("red")
        assert scene.children["tri"].fill_color is None

    def test_fill_on_curve_is_noop_copy(self, wave: Curve) -> None:
        result = wave.fill("red")
        assert result is not wave
        assert result.fill_color is None

    def test_stroke_reaches_every_leaf(self, scene: Group) -> None:
        stroked = scene.stroke("black")
        assert stroked.children["tri"].stroke_color == "black"
        assert stroked.children["wave"].stroke_color == "black"
        assert scene.children["wave"].stroke_color is None

    def test_nested_group_propagation(self, scene: Group, triangle: Polygon) -> None:
        outer = combine(scene, triangle).fill("blue")
        assert outer.children["child0"].children["tri"].fill_color == "blue"
        assert outer.children["child1"].fill_color == "blue"

    def test_fill_on_kind_without_fill_concept_fails(self) -> None:
        @dataclass
        class Marker(LeafDiagram):
            kind: ClassVar[DiagramKind] = DiagramKind.CURVE

        with pytest.raises(StructuralTypeError, match="no fill"):
            Marker().fill("red")


class TestBoundingBox:
    def test_leaf(self, triangle: Polygon) -> None:
        assert triangle.bounding_box() == (V2(0, 0), V2(4, 3))

    def test_group_union(self, scene: Group) -> None:
        expected = scene.children["tri"].bounding_box().union(
            scene.children["wave"].bounding_box()
        )
        assert scene.bounding_box() == expected
        assert scene.bounding_box() == (V2(0, -1), V2(7, 3))

    def test_empty_group_fails(self) -> None:
        with pytest.raises(EmptyDiagramError):
            Group().bounding_box()

    def test_empty_leaf_fails(self) -> None:
        with pytest.raises(EmptyDiagramError):
            Polygon().bounding_box()

    def test_empty_children_are_skipped(self, triangle: Polygon) -> None:
        group = combine(Group(), triangle)
        assert group.bounding_box() == triangle.bounding_box()


class TestTranslateAndPosition:
    def test_translate_moves_geometry_and_origins(self, scene: Group) -> None:
        moved = scene.translate(V2(1, 2))
        assert moved.bounding_box() == (V2(1, 1), V2(8, 5))
        assert moved.origin == scene.origin + V2(1, 2)
        assert moved.children["tri"].origin == V2(1, 2)

    def test_translate_leaves_source(self, scene: Group) -> None:
        scene.translate(V2(1, 2))
        assert scene.bounding_box() == (V2(0, -1), V2(7, 3))
        assert scene.origin == V2(3.5, 1)

    def test_position_puts_origin_on_target(self, scene: Group) -> None:
        placed = scene.position(V2(0, 0))
        assert placed.origin == V2(0, 0)
        assert placed.bounding_box() == (V2(-3.5, -2), V2(3.5, 2))

    def test_position_twice_is_stable(self, scene: Group) -> None:
        once = scene.position(V2(10, 10))
        twice = once.position(V2(10, 10))
        assert twice == once


class TestRotate:
    def test_quarter_turn_about_origin(self, triangle: Polygon) -> None:
        rotated = triangle.rotate(math.pi / 2)
        _approx_box(rotated.bounding_box(), (-3, 0), (0, 4))

    def test_explicit_pivot(self, scene: Group) -> None:
        rotated = scene.rotate(math.pi, pivot=V2(0, 0))
        _approx_box(rotated.bounding_box(), (-7, -3), (0, 1))
        _approx_box(rotated.children["tri"].bounding_box(), (-4, -3), (0, 0))

    def test_children_use_parent_pivot(self, scene: Group) -> None:
        # Default pivot is the group's origin (3.5, 1), not the child's (0, 0)
        rotated = scene.rotate(math.pi)
        _approx_box(rotated.children["tri"].bounding_box(), (3, -1), (7, 2))
        _approx_box(rotated.bounding_box(), (0, -1), (7, 3))

    def test_origins_rotate_with_geometry(self, scene: Group) -> None:
        rotated = scene.rotate(math.pi / 2, pivot=V2(0, 0))
        assert rotated.origin.to_tuple() == pytest.approx((-1.0, 3.5))

    def test_default_pivot_keeps_origin(self, scene: Group) -> None:
        rotated = scene.rotate(0.7)
        assert rotated.origin.to_tuple() == pytest.approx(scene.origin.to_tuple())

    def test_rotate_leaves_source(self, triangle: Polygon) -> None:
        triangle.rotate(1.0)
        assert triangle.bounding_box() == (V2(0, 0), V2(4, 3))


class TestAnchors:
    @pytest.mark.parametrize(
        ("anchor", "expected"),
        [
            (Anchor.TOP_LEFT, (0, 0)),
            (Anchor.TOP_CENTER, (2, 0)),
            (Anchor.TOP_RIGHT, (4, 0)),
            (Anchor.CENTER_LEFT, (0, 1.5)),
            (Anchor.CENTER_CENTER, (2, 1.5)),
            (Anchor.CENTER_RIGHT, (4, 1.5)),
            (Anchor.BOTTOM_LEFT, (0, 3)),
            (Anchor.BOTTOM_CENTER, (2, 3)),
            (Anchor.BOTTOM_RIGHT, (4, 3)),
        ],
    )
    def test_anchor_points(
        self, triangle: Polygon, anchor: Anchor, expected: tuple[float, float]
    ) -> None:
        assert triangle.get_anchor(anchor).to_tuple() == expected

    def test_string_anchor(self, scene: Group) -> None:
        assert scene.get_anchor("center-center") == V2(3.5, 1)

    def test_unknown_anchor(self, scene: Group) -> None:
        with pytest.raises(AnchorLookupError):
            scene.get_anchor("upper-left")

    def test_move_origin_keeps_geometry(self, triangle: Polygon) -> None:
        moved = triangle.move_origin(V2(9, 9))
        assert moved.origin == V2(9, 9)
        assert moved.paths == triangle.paths
        assert triangle.origin == V2(0, 0)

    def test_move_origin_to_anchor(self, triangle: Polygon) -> None:
        moved = triangle.move_origin_to_anchor(Anchor.CENTER_CENTER)
        assert moved.origin == V2(2, 1.5)
        assert moved.position(V2(0, 0)).bounding_box() == (V2(-2, -1.5), V2(2, 1.5))


class TestTags:
    def test_append_tag_returns_new_tree(self, scene: Group) -> None:
        tagged = scene.append_tag("table")
        assert tagged.has_tag("table")
        assert not scene.has_tag("table")

    def test_tags_survive_transforms(self, triangle: Polygon) -> None:
        tagged = triangle.append_tag("cell")
        result = tagged.translate(V2(1, 1)).rotate(1.0).fill("red").stroke("k")
        assert result.tags == {"cell"}

    def test_find_tagged(self, triangle: Polygon, wave: Curve) -> None:
        grid = triangle.append_tag("grid")
        group = combine(wave, combine(grid))
        found = group.find_tagged("grid")
        assert found is not None
        assert found.bounding_box() == triangle.bounding_box()
        assert group.find_tagged("missing") is None

    def test_find_tagged_on_self(self, scene: Group) -> None:
        tagged = scene.append_tag("contain_table")
        found = tagged.find_tagged("contain_table")
        assert found == tagged
        assert found is not tagged

    def test_changing_found_node_leaves_tree(
        self, triangle: Polygon, wave: Curve
    ) -> None:
        tree = combine(wave, triangle.append_tag("grid"))
        snapshot = tree.copy()
        found = tree.find_tagged("grid")
        assert isinstance(found, Polygon)
        found.tags = found.tags | {"scratch"}
        found.paths.clear()
        found.origin = V2(5, 5)
        assert tree == snapshot
        assert not tree.children["child1"].has_tag("scratch")


class TestTransformAndPoints:
    def test_transform_scales_points_and_origin(self, triangle: Polygon) -> None:
        doubled = triangle.move_origin(V2(1, 1)).transform(lambda p: p * 2)
        assert doubled.bounding_box() == (V2(0, 0), V2(8, 6))
        assert doubled.origin == V2(2, 2)

    def test_transform_with_shift_matches_translate(self, scene: Group) -> None:
        shift = V2(-2, 5)
        assert scene.transform(lambda p: p + shift) == scene.translate(shift)

    def test_iter_points(self, triangle: Polygon, scene: Group) -> None:
        assert len(list(triangle.iter_points())) == 6
        assert len(list(scene.iter_points())) == 9


class TestCurveOperations:
    def test_add_points(self, wave: Curve) -> None:
        extended = wave.add_points([V2(8, 0), V2(9, 1)])
        assert len(extended.paths["path0"]) == 5
        assert len(wave.paths["path0"]) == 3

    def test_to_polygon(self, wave: Curve) -> None:
        shape = wave.stroke("blue").append_tag("area").to_polygon()
        assert isinstance(shape, Polygon)
        assert shape.paths == wave.paths
        assert shape.stroke_color == "blue"
        assert shape.has_tag("area")
        assert shape.fill_color is None
        assert shape.fill("gray").fill_color == "gray"

    def test_multi_path_curve_rejected(self) -> None:
        twin = Curve()
        twin.add_paths(
            [Path([V2(0, 0), V2(1, 0)]), Path([V2(2, 0), V2(3, 0)])],
            ["a", "b"],
        )
        with pytest.raises(StructuralTypeError):
            twin.add_points([V2(4, 0)])
        with pytest.raises(StructuralTypeError):
            twin.to_polygon()

    def test_area_under_curve(self) -> None:
        plotted = curve([V2(0, 1), V2(1, 2), V2(2, 1)])
        area = plotted.add_points([V2(2, 0), V2(0, 0)]).to_polygon().fill("gray")
        assert area.bounding_box() == (V2(0, 0), V2(2, 2))
        assert area.fill_color == "gray"
