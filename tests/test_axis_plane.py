import math

from structgeom.axis import Axis
from structgeom.intersect import axis_plane
from structgeom.plane import Plane
from structgeom.vector import Vector

## unit tests for structgeom axes and planes


class TestAxis:

    def test_point_at(self):
        ax = Axis(Vector(1, 1, 1), Vector(0, 0, 2))
        assert ax.is_valid()
        assert ax.point_at(1.5) == Vector(1, 1, 4)
        assert not Axis(Vector.ZERO, Vector.ZERO).is_valid()

    def test_intersect_plane(self):
        ax = Axis(Vector(2, 3, 10), Vector(0, 0, -2))
        plane = Plane.xy(Vector(0, 0, 4))
        t = ax.intersect_plane(plane)
        assert math.isclose(t, 3.0)
        assert ax.point_at(t).is_close(Vector(2, 3, 4))
        assert axis_plane(ax, plane).is_close(Vector(2, 3, 4))

    def test_parallel_plane(self):
        ax = Axis(Vector(0, 0, 1), Vector(1, 0, 0))
        assert math.isnan(ax.intersect_plane(Plane.xy()))
        assert axis_plane(ax, Plane.xy()) is None

    def test_closest_point(self):
        ax = Axis(Vector.ZERO, Vector(2, 0, 0))
        assert math.isclose(ax.closest_point(Vector(4, 7, 1)), 2.0)
        assert math.isnan(Axis(Vector.ZERO, Vector.ZERO).closest_point(Vector(1, 1)))

    def test_closest_points(self):
        a = Axis(Vector.ZERO, Vector.UNIT_X)
        b = Axis(Vector(3, -1, 5), Vector.UNIT_Y)
        s, t = a.closest_points(b)
        assert math.isclose(s, 3.0)
        assert math.isclose(t, 1.0)
        s, t = a.closest_points(Axis(Vector(0, 1, 0), Vector(2, 0, 0)))
        assert math.isnan(s) and math.isnan(t)


class TestPlane:

    def test_frame(self):
        p = Plane(Vector(1, 2, 3), Vector(2, 0, 0), Vector(1, 1, 0))
        assert p.x.is_close(Vector.UNIT_X)
        assert p.y.is_close(Vector.UNIT_Y)
        assert p.normal.is_close(Vector.UNIT_Z)
        assert p.is_valid()

    def test_round_trip(self):
        p = Plane.from_normal(Vector(1, -2, 3), Vector(1, 1, 1))
        pt = Vector(4, 5, 6)
        assert p.local_to_global(p.global_to_local(pt)).is_close(pt)

    def test_local_coordinates(self):
        p = Plane.xy(Vector(0, 0, 5))
        assert p.global_to_local(Vector(1, 2, 8)).is_close(Vector(1, 2, 3))
        assert math.isclose(p.signed_distance_to(Vector(0, 0, 2)), -3)
        assert p.project(Vector(1, 1, 1)).is_close(Vector(1, 1, 5))
        assert p.contains(Vector(7, 7, 5))

    def test_from_points(self):
        p = Plane.from_points(Vector(0, 0, 1), Vector(1, 0, 1), Vector(0, 1, 1))
        assert p.normal.is_close(Vector.UNIT_Z)
        assert Plane.from_points(Vector(0, 0), Vector(1, 1), Vector(2, 2)) is None
