import math

import pytest

from structgeom.angle import Angle
from structgeom.arc import Circle
from structgeom.curve import Line, PolyLine
from structgeom.intersect import (
    Interval,
    circle_circle_xy,
    curve_domain_in_polygon_xy,
    curve_in_polygon_xy,
    line_circle_xy,
    line_in_polygon_xy,
    line_line_params_xy,
    line_line_xy,
    offset_extension_distance,
    polygon_containment_xy,
)
from structgeom.vector import Vector
from structgeom.vertex import Vertex, VertexCollection

## unit tests for structgeom intersections


class TestOffsetExtension:

    def test_acute(self):
        assert offset_extension_distance(Angle.from_degrees(30), 1, 0.5) == pytest.approx(0.732, abs=0.001)

    def test_negative_angle(self):
        assert offset_extension_distance(Angle.from_degrees(-30), 1, 0.5) == pytest.approx(-0.732, abs=0.001)

    def test_negative_offset(self):
        assert offset_extension_distance(Angle.from_degrees(30), 1, -0.5) == pytest.approx(2.732, abs=0.001)

    def test_right_angle(self):
        assert offset_extension_distance(Angle.from_degrees(-90), 1, 0.5) == 0.5

    def test_parallel(self):
        assert math.isnan(offset_extension_distance(Angle.ZERO, 1, 0.5))
        assert math.isnan(offset_extension_distance(Angle.STRAIGHT, 1, 0.5))


class TestLineLine:

    def test_crossing(self):
        pt = line_line_xy(Line(0, 0, 10, 10), Line(0, 10, 10, 0), True)
        assert pt.is_close(Vector(5, 5))
        t, u = line_line_params_xy(Line(0, 0, 10, 10), Line(0, 10, 10, 0))
        assert math.isclose(t, 0.5) and math.isclose(u, 0.5)

    def test_outside_segments(self):
        a = Line(0, 0, 1, 0)
        b = Line(5, -1, 5, 1)
        assert line_line_xy(a, b, True) is None
        assert line_line_xy(a, b).is_close(Vector(5, 0))

    def test_parallel(self):
        assert line_line_xy(Line(0, 0, 1, 0), Line(0, 1, 1, 1)) is None
        assert line_line_params_xy(Line(0, 0, 1, 0), Line(0, 1, 1, 1)) is None

    def test_identical(self):
        assert line_line_xy(Line(0, 0, 1, 0), Line(0, 0, 1, 0), True) is None

    def test_collinear_touching(self):
        # collinear segments meeting end to end are an overlap, not a point
        assert line_line_xy(Line(0, 0, 1, 0), Line(1, 0, 2, 0), True) is None


class TestLineCircle:

    def test_two_points(self):
        pts = line_circle_xy(Line(0, 0, 10, 0), Circle(1, Vector(5, 0)))
        assert len(pts) == 2
        assert pts[0].is_close(Vector(4, 0))
        assert pts[1].is_close(Vector(6, 0))

    def test_tangent(self):
        pts = line_circle_xy(Line(0, 1, 10, 1), Circle(1, Vector(5, 0)))
        assert len(pts) == 1
        assert pts[0].is_close(Vector(5, 1))

    def test_secant(self):
        pts = line_circle_xy(Line(0, 1, 10, 1), Circle(2, Vector(5, 0)))
        assert len(pts) == 2

    def test_through_center(self):
        pts = line_circle_xy(Line(-42, -42, -42, -29.7061), Circle(10, Vector(-42, -42)))
        assert len(pts) == 2

    def test_order_follows_line(self):
        pts = line_circle_xy(Line(10, 0, 0, 0), Circle(1, Vector(5, 0)))
        assert pts[0].is_close(Vector(6, 0))
        assert pts[1].is_close(Vector(4, 0))

    def test_miss(self):
        assert line_circle_xy(Line(0, 5, 10, 5), Circle(1, Vector(5, 0))) == []

    def test_degenerate_line(self):
        assert line_circle_xy(Line(1, 1, 1, 1), Circle(1)) == []


class TestCircleCircle:

    def test_two_points(self):
        pts = circle_circle_xy(Vector(-1, 0), 3, Vector(1, 0), 3)
        assert len(pts) == 2
        for p in pts:
            assert math.isclose(p.x, 0, abs_tol=1e-12)
            assert math.isclose(abs(p.y), math.sqrt(8))

    def test_inside(self):
        assert circle_circle_xy(Vector(0, 0), 3, Vector(0, 0), 4) == []
        assert circle_circle_xy(Vector(0, 0), 5, Vector(1, 0), 1) == []

    def test_apart(self):
        assert circle_circle_xy(Vector(0, 0), 1, Vector(5, 0), 1) == []

    def test_tangent(self):
        pts = circle_circle_xy(Vector(0, 0), 1, Vector(2, 0), 1)
        assert len(pts) == 1
        assert pts[0].is_close(Vector(1, 0))


class TestPolygonContainment:

    def test_edge_extension(self):
        polygon = [Vertex(-10, 0), Vertex(-0.0001, 0), Vertex(-0.0001, -10), Vertex(-10, -10)]
        assert not polygon_containment_xy(polygon, Vector(-20, 0, 0))

    def test_below_square(self):
        polygon = [Vertex(0, 0), Vertex(10, 0), Vertex(10, 10), Vertex(0, 10)]
        assert not polygon_containment_xy(polygon, Vector(0, -5, 0))

    def test_inside_and_on_edge(self):
        polygon = [Vector(0, 0), Vector(10, 0), Vector(10, 10), Vector(0, 10), Vector(0, 0)]
        assert polygon_containment_xy(polygon, Vector(5, 5))
        assert polygon_containment_xy(polygon, Vector(10, 5))
        assert polygon_containment_xy(polygon, Vector(0, 0))
        assert not polygon_containment_xy(polygon, Vector(10.1, 5))

    def test_concave(self):
        polygon = [Vector(0, 0), Vector(10, 0), Vector(10, 10), Vector(5, 2), Vector(0, 10)]
        assert polygon_containment_xy(polygon, Vector(2, 2))
        assert not polygon_containment_xy(polygon, Vector(5, 8))

    def test_degenerate(self):
        assert not polygon_containment_xy([Vector(0, 0), Vector(1, 1)], Vector(0.5, 0.5))


class TestCurveInPolygon:

    def test_line_in_polygon(self):
        line = Line(Vector(50, 34, 0), Vector(21.1496, 34, 0))
        vertices = [
            Vertex(17.5636795786842, -50, 0),
            Vertex(50, -50, 0),
            Vertex(50, -50, 0),
            Vertex(50, 50, 0),
            Vertex(50, 50, 0),
            Vertex(2.57214422843186, 50, 0),
            Vertex(2.57214422843186, 50, 0),
            Vertex(17.5636795786842, -50, 0),
        ]
        curves = line_in_polygon_xy(line, vertices)
        assert len(curves) == 1
        assert curves.total_length() == pytest.approx(line.length)

    def test_curve_starting_on_edge(self):
        pline = PolyLine(
            Vector(38.780081968429, 96.0087129493624, 0),
            Vector(9.49388910671621, 117.597502650573, 0)).to_poly_curve()
        vertices = VertexCollection([
            Vector(29.2861928617128, 83.1298127777882, 0),
            Vector(0, 104.718602478999, 0),
            Vector(0, 104.718602478999, 0),
            Vector(11.9912322411546, 105.197225880402, 0),
            Vector(11.9912322411546, 105.197225880402, 0),
            Vector(39.7366632043587, 97.3063596887607, 0),
            Vector(39.7366632043587, 97.3063596887607, 0),
            Vector(29.2861928617128, 83.1298127777882, 0),
        ])
        curves = curve_in_polygon_xy(pline, vertices)
        assert len(curves) == 1
        assert curves.total_length() == pytest.approx(4.307114218, abs=1e-5)

    @pytest.mark.parametrize('top', [0.001, 0.0])
    def test_domain_in_polygon(self, top):
        pline = PolyLine(Vector(0, 0), Vector(0, 10), Vector(-20, 10), Vector(-20, 0))
        pline.close()
        poly_crv = pline.to_poly_curve()
        polygon = [Vertex(-10, top), Vertex(-0.0001, top), Vertex(-0.0001, -10), Vertex(-10, -10)]
        ints = curve_domain_in_polygon_xy(poly_crv, polygon)
        assert len(ints) == 1
        assert ints[0].start == pytest.approx(0.875)
        assert ints[0].end == pytest.approx(0.99999875)

    def test_domain_merges_across_spans(self):
        pline = PolyLine(Vector(1, 1), Vector(5, 1), Vector(5, 5), Vector(20, 5))
        polygon = [Vector(0, 0), Vector(10, 0), Vector(10, 10), Vector(0, 10)]
        ints = curve_domain_in_polygon_xy(pline, polygon)
        assert len(ints) == 1
        assert ints[0].start == 0.0
        assert ints[0].end == pytest.approx((2 + 1 / 3) / 3)

    def test_circle_in_polygon(self):
        polygon = [Vector(0, -10), Vector(10, -10), Vector(10, 10), Vector(0, 10)]
        ints = curve_domain_in_polygon_xy(Circle(1), polygon)
        assert len(ints) == 2
        assert ints[0].start == 0.0 and ints[0].end == pytest.approx(0.25)
        assert ints[1].start == pytest.approx(0.75) and ints[1].end == 1.0
        curves = curve_in_polygon_xy(Circle(1), polygon)
        assert curves.total_length() == pytest.approx(math.pi)

    def test_outside(self):
        polygon = [Vector(0, 0), Vector(1, 0), Vector(1, 1), Vector(0, 1)]
        assert curve_in_polygon_xy(Line(5, 5, 6, 6), polygon) == []


class TestInterval:

    def test_interval(self):
        iv = Interval(0.25, 0.75)
        assert iv.length == 0.5
        assert iv.mid == 0.5
        assert iv.contains(0.25)
        assert not iv.contains(0.8)
