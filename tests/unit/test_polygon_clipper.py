"""Unit tests for overlap polygons used to highlight collisions."""

import pytest

from roomlayout.domain.services import polygon_clipper
from roomlayout.domain.value_objects import FurnitureType, Point2D

SQUARE = (Point2D(0, 0), Point2D(10, 0), Point2D(10, 10), Point2D(0, 10))


class TestArea:
    """Tests for signed_area and polygon_area."""

    def test_footprint_order_is_positive(self) -> None:
        """TL, TR, BR, BL with y pointing down has positive signed area."""
        assert polygon_clipper.signed_area(SQUARE) == pytest.approx(100)

    def test_reversed_order_is_negative(self) -> None:
        assert polygon_clipper.signed_area(tuple(reversed(SQUARE))) == pytest.approx(-100)
        assert polygon_clipper.polygon_area(tuple(reversed(SQUARE))) == pytest.approx(100)


class TestLineIntersection:
    """Tests for line_intersection."""

    def test_crossing_lines(self) -> None:
        point = polygon_clipper.line_intersection(
            Point2D(0, 0), Point2D(10, 0), Point2D(5, -5), Point2D(5, 5)
        )
        assert point is not None
        assert point.x == pytest.approx(5)
        assert point.y == pytest.approx(0)

    def test_parallel_lines(self) -> None:
        assert (
            polygon_clipper.line_intersection(
                Point2D(0, 0), Point2D(10, 0), Point2D(0, 5), Point2D(10, 5)
            )
            is None
        )


class TestClipByEdge:
    """Tests for clip_by_edge."""

    def test_keeps_inner_half(self) -> None:
        clipped = polygon_clipper.clip_by_edge(
            SQUARE, (Point2D(5, 0), Point2D(5, 10)), clockwise=False
        )
        assert polygon_clipper.polygon_area(clipped) == pytest.approx(50)
        assert max(p.x for p in clipped) == pytest.approx(5)

    def test_winding_flips_inner_side(self) -> None:
        clipped = polygon_clipper.clip_by_edge(
            SQUARE, (Point2D(5, 0), Point2D(5, 10)), clockwise=True
        )
        assert polygon_clipper.polygon_area(clipped) == pytest.approx(50)
        assert min(p.x for p in clipped) == pytest.approx(5)


class TestIntersection:
    """Tests for intersection and collision_polygons."""

    def test_axis_aligned_overlap(self, item) -> None:
        a = item("a", 100, 100, 200, 120)
        b = item("b", 250, 140, 180, 120)
        polygon = polygon_clipper.intersection(a, b)
        assert polygon_clipper.polygon_area(polygon) == pytest.approx(4000)
        assert min(p.x for p in polygon) == pytest.approx(250)
        assert max(p.x for p in polygon) == pytest.approx(300)
        assert min(p.y for p in polygon) == pytest.approx(140)
        assert max(p.y for p in polygon) == pytest.approx(220)

    def test_disjoint_items_have_no_polygon(self, item) -> None:
        assert polygon_clipper.intersection(
            item("a", 0, 0, 100, 100), item("b", 200, 0, 100, 100)
        ) == ()

    def test_contained_item_yields_its_own_footprint(self, item) -> None:
        outer = item("outer", 0, 0, 1000, 1000)
        inner = item("inner", 200, 300, 100, 50)
        polygon = polygon_clipper.intersection(outer, inner)
        assert polygon_clipper.polygon_area(polygon) == pytest.approx(5000)

    def test_collision_polygons_skip_self_and_clear_items(self, item) -> None:
        a = item("a", 100, 100, 200, 120)
        others = [a, item("b", 250, 140, 180, 120), item("c", 2000, 2000, 100, 100)]
        polygons = polygon_clipper.collision_polygons(a, others)
        assert len(polygons) == 1
        assert polygon_clipper.polygon_area(polygons[0]) == pytest.approx(4000)

    def test_tucked_chair_has_no_polygon(self, item) -> None:
        """The tuck rule decides collision, so no highlight is produced."""
        desk = item("desk", 0, 0, 1200, 600, height=720, type=FurnitureType.DESK)
        chair = item("chair", 375, 300, 450, 450, height=900, type=FurnitureType.CHAIR)
        assert polygon_clipper.collision_polygons(chair, [desk]) == []
