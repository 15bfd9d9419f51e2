"""Tests for floorplan/shapes.py — footprints and center lines."""
import math
import pytest
from roomgeom.types import StructuralElement, ElementKind
from roomgeom.geometry import ElementError, signed_area, poly_centroid, plan_point
from floorplan.config import DEFAULT_CONFIG
from floorplan.constants import WALL_THICKNESS, DOOR_THICKNESS, WINDOW_THICKNESS
from floorplan.shapes import footprint, centerline, element_center, element_width


class TestFootprint:
    def test_identity_wall(self, make_element):
        pts = footprint(make_element("w", 4.0))
        ht = WALL_THICKNESS / 2
        assert len(pts) == 4
        for p, q in zip(pts, [(-2.0, -ht), (2.0, -ht), (2.0, ht), (-2.0, ht)]):
            assert p == pytest.approx(q)

    def test_identity_wall_extent(self, make_element):
        pts = footprint(make_element("w", 4.0))
        us = [p.u for p in pts]; vs = [p.v for p in pts]
        assert max(us) - min(us) == pytest.approx(4.0)
        assert max(vs) - min(vs) == pytest.approx(WALL_THICKNESS)
        assert poly_centroid(pts) == pytest.approx((0.0, 0.0))

    @pytest.mark.parametrize("yaw, pos", [
        (0.0, (0.0, 0.0, 0.0)),
        (37.0, (1.0, 1.2, -2.0)),
        (-120.0, (-3.5, 0.0, 4.25)),
    ])
    def test_midpoint_is_projected_center(self, make_element, yaw_transform, yaw, pos):
        t = yaw_transform(yaw, *pos)
        pts = footprint(make_element("w", 2.7, t))
        assert len(pts) == 4
        assert poly_centroid(pts) == pytest.approx(plan_point(pos), abs=1e-12)

    @pytest.mark.parametrize("mirror", [False, True])
    @pytest.mark.parametrize("yaw", [0.0, 45.0, 180.0, -100.0])
    def test_counter_clockwise(self, make_element, yaw_transform, yaw, mirror):
        config = DEFAULT_CONFIG._replace(mirror=mirror)
        pts = footprint(make_element("w", 3.0, yaw_transform(yaw)), 12.0, config)
        assert signed_area(pts) > 0

    def test_area_is_width_times_thickness(self, make_element, yaw_transform):
        pts = footprint(make_element("w", 3.0, yaw_transform(71.0, 2, 0, 2)), 25.0)
        assert signed_area(pts) == pytest.approx(3.0 * WALL_THICKNESS)

    @pytest.mark.parametrize("kind, t", [
        (ElementKind.WALL, WALL_THICKNESS),
        (ElementKind.DOOR, DOOR_THICKNESS),
        (ElementKind.WINDOW, WINDOW_THICKNESS),
    ])
    def test_thickness_per_kind(self, make_element, kind, t):
        pts = footprint(make_element("e", 1.0, kind=kind))
        assert pts[3].v - pts[0].v == pytest.approx(t)

    def test_thickness_configurable(self, make_element):
        config = DEFAULT_CONFIG._replace(wall_thickness=0.3)
        pts = footprint(make_element("w", 1.0), config=config)
        assert pts[3].v - pts[0].v == pytest.approx(0.3)

    def test_openings_thinner_than_walls(self):
        assert DOOR_THICKNESS < WALL_THICKNESS
        assert WINDOW_THICKNESS < WALL_THICKNESS

    @pytest.mark.parametrize("width", [0.0, -1.5])
    def test_degenerate_width(self, make_element, width):
        pts = footprint(make_element("w", width))
        assert len(pts) == 4
        assert all(math.isfinite(c) for p in pts for c in p)

    def test_rotation_applied(self, make_element):
        pts = footprint(make_element("w", 4.0), 90.0)
        # Width now runs along v
        assert pts[1].v - pts[0].v == pytest.approx(4.0)

    def test_vertical_offset_ignored(self, make_element, identity):
        t = list(identity); t[13] = 5.0
        assert footprint(make_element("w", 2.0, t)) == footprint(make_element("w", 2.0))


class TestMissingFields:
    def test_missing_transform(self):
        with pytest.raises(ElementError, match="w1: missing transform"):
            footprint(StructuralElement("w1", (2.0,), None))

    def test_missing_dimensions(self, identity):
        with pytest.raises(ElementError, match="w2: missing dimensions"):
            footprint(StructuralElement("w2", None, identity))

    def test_empty_dimensions(self, identity):
        with pytest.raises(ElementError, match="empty dimensions"):
            footprint(StructuralElement("w3", (), identity))

    def test_non_numeric_width(self, identity):
        with pytest.raises(ElementError, match="non-numeric width"):
            element_width(StructuralElement("w4", ("wide",), identity))

    @pytest.mark.parametrize("dims", [{"width": 2.0}, "4.0", 4.0])
    def test_dimensions_not_a_list(self, identity, dims):
        with pytest.raises(ElementError, match="dimensions not a list"):
            element_width(StructuralElement("w6", dims, identity))

    def test_non_finite_width(self, identity):
        with pytest.raises(ElementError, match="non-finite width"):
            footprint(StructuralElement("w7", (float("nan"),), identity))

    def test_non_finite_transform(self, identity):
        t = list(identity); t[12] = float("inf")
        with pytest.raises(ElementError, match="w8: Non-finite transform"):
            footprint(StructuralElement("w8", (2.0,), t))

    def test_short_transform(self, identity):
        with pytest.raises(ElementError, match="w5: Transform needs 16 values"):
            footprint(StructuralElement("w5", (2.0,), identity[:15]))


class TestCenterline:
    def test_identity(self, make_element):
        start, end = centerline(make_element("d", 0.9, kind=ElementKind.DOOR))
        assert start == pytest.approx((-0.45, 0.0))
        assert end == pytest.approx((0.45, 0.0))

    def test_inside_footprint(self, make_element, yaw_transform):
        e = make_element("d", 1.1, yaw_transform(63.0, 1, 0, 1), ElementKind.DOOR)
        start, end = centerline(e, 10.0)
        mid = ((start.u + end.u) / 2, (start.v + end.v) / 2)
        assert mid == pytest.approx(poly_centroid(footprint(e, 10.0)))

    def test_element_center(self, make_element, yaw_transform):
        e = make_element("w", 2.0, yaw_transform(20.0, 3.0, 1.0, -1.0))
        assert element_center(e) == pytest.approx((3.0, 1.0))
