import math

import pytest

from structgeom.angle import Angle
from structgeom.arc import Arc, Circle
from structgeom.curve import CurveCollection, Line, PolyLine
from structgeom.vector import Vector

## unit tests for structgeom lines, polylines and arcs


def square(size=10.0, clockwise=False):
    pts = [Vector(0, 0), Vector(size, 0), Vector(size, size), Vector(0, size)]
    if clockwise:
        pts.reverse()
    return PolyLine(pts, closed=True)


class TestLine:

    def test_create(self):
        a = Line(0, 0, 10, 0)
        b = Line(Vector(0, 0), Vector(10, 0))
        c = Line(0, 0, 0, 10, 0, 0)
        assert a.start_point == b.start_point == c.start_point
        assert a.end_point == b.end_point == c.end_point
        with pytest.raises(ValueError):
            Line(1, 2, 3)

    def test_owner(self):
        a = Line(0, 0, 10, 0)
        assert all(v.owner is a for v in a.vertices)

    def test_valid(self):
        assert Line(0, 0, 1, 0).is_valid()
        assert not Line(1, 1, 1, 1).is_valid()

    def test_sample(self):
        a = Line(0, 0, 10, 0)
        assert a.segment_count == 1
        assert a.length == 10
        assert a.point_at(0, 0.25) == Vector(2.5, 0)
        assert a.point_at(1, 0.5) is None
        assert a.point_at_parameter(1.0) == Vector(10, 0)
        assert a.direction == Vector(10, 0)
        assert a.reversed().start_point == Vector(10, 0)

    def test_extract(self):
        part = Line(0, 0, 10, 0).extract(0.8, 0.2)
        assert isinstance(part, Line)
        assert part.start_point.is_close(Vector(2, 0))
        assert part.end_point.is_close(Vector(8, 0))


class TestPolyLine:

    def test_create(self):
        p = PolyLine(Vector(0, 0), Vector(1, 0), Vector(1, 1))
        assert p.segment_count == 2
        assert not p.is_closed()
        assert PolyLine([Vector(0, 0), Vector(1, 0)]).segment_count == 1
        assert not PolyLine(Vector(0, 0)).is_valid()

    def test_close(self):
        p = square()
        assert p.is_closed()
        assert len(p.vertices) == 5
        p.close()
        assert len(p.vertices) == 5

    def test_length_cache(self):
        p = PolyLine(Vector(0, 0), Vector(3, 4))
        assert p.length == 5
        p.add(Vector(3, 10))
        assert p.length == 11

    def test_sample(self):
        p = square()
        assert p.point_at(1, 0.5) == Vector(10, 5)
        assert p.point_at(4, 0.5) is None
        assert p.point_at_parameter(0.5) == Vector(10, 10)
        assert p.span_parameter(0.375) == (1, 0.5)
        assert isinstance(p.segment(2), Line)
        assert len(p.segments()) == 4

    def test_enclosed_area(self):
        area, centroid = square().calculate_enclosed_area()
        assert math.isclose(area, 100)
        assert centroid.is_close(Vector(5, 5))
        area, centroid = square(clockwise=True).calculate_enclosed_area()
        assert math.isclose(area, -100)
        assert centroid.is_close(Vector(5, 5))

    def test_enclosed_area_open(self):
        # an open polyline is closed with a straight chord
        p = PolyLine(Vector(0, 0), Vector(4, 0), Vector(4, 3))
        area, centroid = p.calculate_enclosed_area()
        assert math.isclose(area, 6)
        assert centroid.is_close(Vector(8 / 3, 1))

    def test_enclosed_area_voids(self):
        void = PolyLine([Vector(2, 2), Vector(4, 2), Vector(4, 4), Vector(2, 4)], closed=True)
        area, centroid = square().calculate_enclosed_area([void])
        assert math.isclose(area, 96)
        expected = (Vector(5, 5) * 100 - Vector(3, 3) * 4) / 96
        assert centroid.is_close(expected)

    def test_zero_area(self):
        area, centroid = PolyLine(Vector(0, 0), Vector(1, 0), Vector(2, 0)).calculate_enclosed_area()
        assert area == 0
        assert centroid is None

    def test_extract(self):
        part = square().extract(0.125, 0.625)
        assert isinstance(part, PolyLine)
        assert [v.position for v in part.vertices] == [
            Vector(5, 0), Vector(10, 0), Vector(10, 10), Vector(5, 10)]
        assert math.isclose(part.length, 20)

    def test_plane(self):
        assert square().plane().normal.is_close(Vector.UNIT_Z)
        assert square(clockwise=True).plane().normal.is_close(-Vector.UNIT_Z)
        assert PolyLine(Vector(0, 0), Vector(1, 0), Vector(2, 0)).plane() is None

    def test_bounding_box(self):
        bb = square(4).bounding_box()
        assert bb.min == Vector(0, 0)
        assert bb.max == Vector(4, 4)

    def test_collection(self):
        curves = CurveCollection([Line(0, 0, 3, 4), square()])
        assert math.isclose(curves.total_length(), 45)

    def test_collection_area(self):
        curves = CurveCollection([square(), square(2, clockwise=True)])
        assert math.isclose(curves.total_enclosed_area(), 96)


class TestArc:

    def test_create(self):
        a = Arc(Vector(0, 0), 1, 0, math.pi / 2)
        assert a.is_valid()
        assert a.segment_count == 1
        assert a.start_point.is_close(Vector(1, 0))
        assert a.end_point.is_close(Vector(0, 1))
        assert math.isclose(a.length, math.pi / 2)
        assert math.isclose(a.end_angle.radians, math.pi / 2)
        assert not Arc(Vector(0, 0), 0, 0, 1).is_valid()
        assert not Arc(Vector(0, 0), 1, 0, 0).is_valid()

    def test_sample(self):
        a = Arc(Vector(1, 1, 2), 2, Angle.STRAIGHT, -Angle.STRAIGHT)
        assert a.point_at(0, 0.5).is_close(Vector(1, 3, 2))
        assert a.point_at(1, 0.5) is None
        assert a.tangent_at(0).is_close(Vector(0, 1))

    def test_three_points(self):
        a = Arc.from_three_points(Vector(1, 0), Vector(0, 1), Vector(-1, 0))
        assert a.center.is_close(Vector(0, 0))
        assert math.isclose(a.radius, 1)
        assert math.isclose(a.sweep.radians, math.pi)
        b = Arc.from_three_points(Vector(-1, 0), Vector(0, 1), Vector(1, 0))
        assert math.isclose(b.sweep.radians, -math.pi)
        assert b.point_at(0, 0.5).is_close(Vector(0, 1))
        assert Arc.from_three_points(Vector(0, 0), Vector(1, 1), Vector(2, 2)) is None

    def test_segment_area(self):
        a = Arc(Vector(0, 0), 1, 0, math.pi)
        area, centroid = a.calculate_enclosed_area()
        assert math.isclose(area, math.pi / 2)
        assert centroid.is_close(Vector(0, 4 / (3 * math.pi)))
        area, _ = Arc(Vector(0, 0), 1, math.pi, -math.pi).calculate_enclosed_area()
        assert math.isclose(area, -math.pi / 2)

    def test_facet(self):
        a = Arc(Vector(0, 0), 1, 0, math.pi / 2)
        pts = a.facet()
        assert len(pts) >= 10
        assert pts[0].is_close(a.start_point)
        assert pts[-1].is_close(a.end_point)
        step = Angle.from_degrees(10).radians + 1e-9
        for p, q in zip(pts, pts[1:]):
            assert p.angle_to(q).radians <= step
        assert len(a.facet(angle=Angle(math.pi / 4))) == 3
        assert len(a.facet(angle=Angle.from_degrees(40))) == 4

    def test_extract(self):
        a = Arc(Vector(0, 0), 1, 0, math.pi / 2)
        part = a.extract(0.5, 1.0)
        assert isinstance(part, Arc)
        assert math.isclose(part.start_angle.radians, math.pi / 4)
        assert math.isclose(part.sweep.radians, math.pi / 4)


class TestCircle:

    def test_create(self):
        c = Circle(2, Vector(1, 1))
        assert c.is_closed()
        assert c.is_valid()
        assert math.isclose(c.length, 4 * math.pi)
        assert c.start_point.is_close(Vector(3, 1))

    def test_area(self):
        area, centroid = Circle(2, Vector(1, 1)).calculate_enclosed_area()
        assert math.isclose(area, 4 * math.pi)
        assert centroid.is_close(Vector(1, 1))

    def test_plane(self):
        assert Circle(1).plane().normal.is_close(Vector.UNIT_Z)
