"""Tests for geometric primitives."""

import math

import pytest

from simple_test_models.errors import GeometryError
from simple_test_models.models.geometry import Loop3D, Point3D, Polygon3D


def make_loop(*coords) -> Loop3D:
    loop = Loop3D()
    for x, y, z in coords:
        loop = loop.push(Point3D(x=x, y=y, z=z))
    return loop.close()


def square(x0: float, x1: float, z: float = 0.0) -> Loop3D:
    """Square in a horizontal plane, counter-clockwise seen from above."""
    return make_loop((x0, x0, z), (x1, x0, z), (x1, x1, z), (x0, x1, z))


class TestPoint3D:
    def test_create(self):
        p = Point3D(x=1.0, y=2.0, z=3.0)
        assert p.z == 3.0

    def test_distance(self):
        p1 = Point3D(x=0.0, y=0.0, z=0.0)
        p2 = Point3D(x=1.0, y=2.0, z=2.0)
        assert math.isclose(p1.distance_to(p2), 3.0)

    def test_vector_ops(self):
        a = Point3D(x=1, y=0, z=0)
        b = Point3D(x=0, y=1, z=0)
        assert a + b == Point3D(x=1, y=1, z=0)
        assert a - b == Point3D(x=1, y=-1, z=0)
        assert a.cross(b) == Point3D(x=0, y=0, z=1)
        assert a.dot(b) == 0.0
        assert a.scale(3).length == 3.0

    def test_rotate_z_counter_clockwise(self):
        p = Point3D(x=1, y=0, z=5).rotate_z(90)
        assert math.isclose(p.x, 0.0, abs_tol=1e-12)
        assert math.isclose(p.y, 1.0)
        assert p.z == 5

    def test_frozen(self):
        p = Point3D(x=1, y=2, z=3)
        with pytest.raises(ValueError):
            p.x = 5


class TestLoop3D:
    def test_vertical_square(self):
        loop = make_loop((0, 0, 0), (2, 0, 0), (2, 0, 2), (0, 0, 2))
        assert loop.closed
        assert loop.num_vertices == 4
        assert math.isclose(loop.area, 4.0)
        assert math.isclose(loop.perimeter, 8.0)

    def test_normal_follows_vertex_order(self):
        loop = make_loop((0, 0, 0), (2, 0, 0), (2, 0, 2), (0, 0, 2))
        n = loop.normal
        assert math.isclose(n.y, -1.0)
        assert math.isclose(n.x, 0.0, abs_tol=1e-12)
        assert math.isclose(n.z, 0.0, abs_tol=1e-12)

    def test_centroid(self):
        loop = square(0, 2)
        c = loop.centroid
        assert (c.x, c.y, c.z) == (1.0, 1.0, 0.0)

    def test_repeated_first_vertex_is_dropped(self):
        loop = make_loop((0, 0, 0), (1, 0, 0), (1, 1, 0), (0, 1, 0), (0, 0, 0))
        assert loop.num_vertices == 4
        assert math.isclose(loop.area, 1.0)

    def test_too_few_points(self):
        loop = Loop3D().push(Point3D(x=0, y=0, z=0)).push(Point3D(x=1, y=0, z=0))
        with pytest.raises(GeometryError, match="at least 3"):
            loop.close()

    def test_coincident_points_rejected(self):
        loop = Loop3D().push(Point3D(x=0, y=0, z=0))
        with pytest.raises(GeometryError, match="coincide"):
            loop.push(Point3D(x=0, y=0, z=0))

    def test_collinear_points_have_zero_area(self):
        with pytest.raises(GeometryError, match="zero area"):
            make_loop((0, 0, 0), (1, 0, 0), (2, 0, 0))

    def test_non_coplanar_rejected(self):
        with pytest.raises(GeometryError, match="coplanar"):
            make_loop((0, 0, 0), (1, 0, 0), (1, 1, 0), (0, 1, 1))

    def test_self_intersection_rejected(self):
        with pytest.raises(GeometryError, match="intersects itself"):
            make_loop((0, 0, 0), (4, 0, 0), (4, 4, 0), (3, -2, 0))

    def test_fold_back_rejected(self):
        with pytest.raises(GeometryError):
            make_loop((0, 0, 0), (2, 0, 0), (1, 0, 0), (1, 1, 0))

    def test_push_after_close_rejected(self):
        loop = square(0, 1)
        with pytest.raises(GeometryError, match="closed loop"):
            loop.push(Point3D(x=5, y=5, z=0))

    def test_close_twice_rejected(self):
        loop = square(0, 1)
        with pytest.raises(GeometryError, match="already closed"):
            loop.close()

    def test_push_returns_new_loop(self):
        empty = Loop3D()
        one = empty.push(Point3D(x=0, y=0, z=0))
        assert empty.num_vertices == 0
        assert one.num_vertices == 1

    def test_closed_loop_is_immutable(self):
        loop = square(0, 1)
        with pytest.raises(TypeError):
            loop.vertices[2] = Point3D(x=5, y=5, z=0)
        with pytest.raises(ValueError):
            loop.closed = False
        assert math.isclose(loop.area, 1.0)

    @pytest.mark.parametrize("side", [1e-5, 1e-4, 1e3])
    def test_small_and_large_squares_close(self, side):
        loop = square(0, side)
        assert math.isclose(loop.area, side * side)

    def test_thin_sliver_has_zero_area(self):
        with pytest.raises(GeometryError, match="zero area"):
            make_loop((0, 0, 0), (10, 0, 0), (10, 1e-8, 0), (0, 1e-8, 0))

    def test_contains_point(self):
        loop = square(0, 2)
        assert loop.contains_point(Point3D(x=1, y=1, z=0))
        assert not loop.contains_point(Point3D(x=3, y=1, z=0))

    def test_boundary_point_is_not_contained(self):
        loop = square(0, 2)
        assert not loop.contains_point(Point3D(x=0, y=1, z=0))
        assert not loop.contains_point(Point3D(x=2, y=2, z=0))


class TestPolygon3D:
    def test_from_loop(self):
        poly = Polygon3D.from_loop(square(0, 2))
        assert math.isclose(poly.area, 4.0)
        assert not poly.has_hole

    def test_open_loop_rejected(self):
        loop = Loop3D()
        for x, y in [(0, 0), (1, 0), (1, 1)]:
            loop = loop.push(Point3D(x=x, y=y, z=0))
        with pytest.raises(GeometryError, match="closed loop"):
            Polygon3D.from_loop(loop)

    def test_cut_hole(self):
        poly = Polygon3D.from_loop(square(0, 2))
        holed = poly.cut_hole(square(0.5, 1.5))
        assert holed.has_hole
        assert math.isclose(holed.area, 3.0)

    def test_cut_hole_leaves_original_untouched(self):
        poly = Polygon3D.from_loop(square(0, 2))
        poly.cut_hole(square(0.5, 1.5))
        assert poly.inner is None
        assert math.isclose(poly.area, 4.0)

    def test_touching_hole_rejected(self):
        poly = Polygon3D.from_loop(square(0, 2))
        touching = make_loop((0, 0.5, 0), (1, 0.5, 0), (1, 1.5, 0), (0, 1.5, 0))
        with pytest.raises(GeometryError, match="touches or lies outside"):
            poly.cut_hole(touching)

    def test_hole_outside_rejected(self):
        poly = Polygon3D.from_loop(square(0, 2))
        with pytest.raises(GeometryError):
            poly.cut_hole(square(3, 4))

    def test_crossing_hole_rejected(self):
        poly = Polygon3D.from_loop(square(0, 2))
        with pytest.raises(GeometryError):
            poly.cut_hole(square(1, 3))

    def test_hole_in_other_plane_rejected(self):
        poly = Polygon3D.from_loop(square(0, 2))
        with pytest.raises(GeometryError, match="coplanar"):
            poly.cut_hole(square(0.5, 1.5, z=1.0))

    def test_open_hole_rejected(self):
        poly = Polygon3D.from_loop(square(0, 2))
        hole = Loop3D()
        for x, y in [(0.5, 0.5), (1.5, 0.5), (1.5, 1.5)]:
            hole = hole.push(Point3D(x=x, y=y, z=0))
        with pytest.raises(GeometryError, match="closed"):
            poly.cut_hole(hole)

    def test_second_hole_rejected(self):
        poly = Polygon3D.from_loop(square(0, 4)).cut_hole(square(1, 2))
        with pytest.raises(GeometryError, match="already has a hole"):
            poly.cut_hole(square(2.5, 3.5))
