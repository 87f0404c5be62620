## curve abstraction and straight-segment curves for structgeom

## Copyright (c) 2024 structgeom contributors
## All rights reserved

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
# 
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
# 
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""curves for **structgeom**

=====================
curve parametrization
=====================

Every curve is split into one or more *spans*: stretches of the curve
that can be evaluated on their own.  A line has one span, a polyline
has one span per pair of consecutive vertices, an arc has one span,
and a polycurve has the spans of all of its sub-curves in order.

A point on a curve is addressed either by ``(span, t)``, with ``t`` in
``[0, 1]`` across the span, or by a single normalized parameter ``u``
in ``[0, 1]`` across the whole curve, where ``u = (span + t) / n`` for
a curve of ``n`` spans.  Note that the parameter is uniform per span,
not per unit length.

The capability set shared by all curves is small:

- ``vertices`` -- the defining vertices
- ``segment_count`` -- the number of spans
- ``point_at(span, t)`` -- evaluate a span
- ``length`` -- the (cached) length of the curve

Everything else (areas, facetting, extraction, planes) is built on
those, with ``segment(span)`` exposing each span as a standalone
``Line`` or ``Arc`` for the intersection routines.

"""

from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod

from structgeom.tolerance import resolve
from structgeom.vector import Vector
from structgeom.vertex import Vertex, VertexCollection, position_of

log = logging.getLogger(__name__)


def _project(p, plane):
    """XY coordinates of ``p`` on ``plane`` (the global XY plane if None)"""
    if plane is not None:
        p = plane.global_to_local(p)
    return Vector(p.x, p.y, 0.0)


def signed_area_xy(points):
    """shoelace area of the closed loop through ``points``, in plan"""
    points = list(points)
    return sum(_fan(a, b)[0] for a, b in zip(points, points[1:] + points[:1]))


def _fan(p1, p2):
    """Signed area and first moment of the triangle (origin, p1, p2).

    Summing these over the edges of a closed loop gives the shoelace
    area of the loop and its area-weighted centroid.
    """
    area = 0.5 * (p1.x * p2.y - p2.x * p1.y)
    return area, (p1 + p2) * (area / 3.0)


class CurveCollection(list):
    """a list of curves"""

    def total_length(self):
        return sum(c.length for c in self)

    def total_enclosed_area(self, plane=None):
        """sum of the signed areas enclosed by each curve"""
        return sum(c.calculate_enclosed_area(plane=plane)[0] for c in self)

    def __repr__(self):
        return 'CurveCollection({})'.format(list.__repr__(self))


class Curve(ABC):
    """Abstract base class for all curves.

    Derived geometry such as the length is cached.  Anything that edits
    the defining vertices of a curve in place must call
    ``notify_geometry_updated()`` afterwards.
    """

    def __init__(self):
        self._length = None

    ## capabilities every curve provides
    ## ---------------------------------

    @property
    @abstractmethod
    def vertices(self):
        """the vertices defining this curve"""

    @abstractmethod
    def is_valid(self):
        """is the definition of this curve usable?"""

    @property
    def segment_count(self):
        return max(len(self.vertices) - 1, 0)

    def point_at(self, span, t):
        """Evaluate the point at parameter ``t`` along span ``span``.

        The default treats the curve as straight lines between
        vertices.  Returns None if the span does not exist.
        """
        verts = self.vertices
        if span < 0 or span >= len(verts) - 1:
            return None
        return verts[span].position.interpolate(verts[span + 1].position, t)

    def segment(self, span):
        """span ``span`` of this curve as a standalone Line or Arc"""
        verts = self.vertices
        if span < 0 or span >= len(verts) - 1:
            return None
        return Line(verts[span].position, verts[span + 1].position)

    def segments(self):
        return [self.segment(i) for i in range(self.segment_count)]

    ## end points
    ## ----------

    @property
    def start(self):
        verts = self.vertices
        return verts[0] if len(verts) > 0 else None

    @property
    def end(self):
        verts = self.vertices
        return verts[-1] if len(verts) > 0 else None

    @property
    def start_point(self):
        v = self.start
        return None if v is None else v.position

    @property
    def end_point(self):
        v = self.end
        return None if v is None else v.position

    def is_closed(self, tol=None):
        """does the curve end (within tolerance) where it starts?"""
        s = self.start_point
        e = self.end_point
        if s is None or e is None:
            return False
        return s.is_close(e, tol)

    ## parametrization
    ## ---------------

    def span_parameter(self, u):
        """split normalized parameter ``u`` into ``(span, t)``"""
        n = self.segment_count
        if n == 0:
            return None
        scaled = u * n
        span = min(max(int(math.floor(scaled)), 0), n - 1)
        return span, scaled - span

    def point_at_parameter(self, u):
        """point at normalized parameter ``u`` across the whole curve"""
        st = self.span_parameter(u)
        if st is None:
            return None
        return self.point_at(*st)

    ## length
    ## ------

    @property
    def length(self):
        if self._length is None:
            self._length = self.calculate_length()
        return self._length

    def calculate_length(self):
        return sum(self.calculate_segment_length(i) for i in range(self.segment_count))

    def calculate_segment_length(self, index):
        verts = self.vertices
        if index < 0 or index >= len(verts) - 1:
            return 0.0
        return verts[index].position.distance_to(verts[index + 1].position)

    def notify_geometry_updated(self):
        """discard cached derived geometry after the definition changes"""
        self._length = None

    ## areas
    ## -----

    def _area_moment(self, plane=None):
        """Signed enclosed area and its first moment on ``plane``.

        The loop is closed with a straight chord from the end back to
        the start.  The default implementation treats every span as
        straight.
        """
        pts = [_project(v.position, plane) for v in self.vertices]
        area = 0.0
        moment = Vector.ZERO
        if len(pts) < 2:
            return area, moment
        for p1, p2 in zip(pts, pts[1:] + pts[:1]):
            a, m = _fan(p1, p2)
            area += a
            moment += m
        return area, moment

    def calculate_enclosed_area(self, voids=None, plane=None):
        """Area enclosed by this curve and its area-weighted centroid.

        The curve is treated as closed by a straight chord from its end
        back to its start.  The area is signed (anticlockwise positive)
        and measured on ``plane``, or the global XY plane if ``plane``
        is None; the centroid is returned in that plane's local
        coordinates.  The areas of any ``voids`` are subtracted from
        the total.  Returns ``(area, centroid)``; the centroid is None
        if the total area is zero.
        """
        area, moment = self._area_moment(plane)
        for void in voids or ():
            v_area, v_moment = void._area_moment(plane)
            # voids always count against the perimeter, whatever their winding
            if (v_area > 0) == (area > 0):
                v_area = -v_area
                v_moment = -v_moment
            area += v_area
            moment += v_moment
        if area == 0:
            log.debug('zero enclosed area on %r, centroid undefined', self)
            return 0.0, None
        return area, moment / area

    ## derived geometry
    ## ----------------

    def facet(self, angle=None, tol=None):
        """Polygonal approximation of this curve as a list of points.

        Straight spans contribute their vertices; curved spans are
        subdivided so that no facet turns through more than ``angle``
        (by default the tolerance angle).
        """
        return [v.position for v in self.vertices]

    def extract(self, u0, u1):
        """the part of this curve between normalized parameters u0 and u1"""
        if u1 < u0:
            u0, u1 = u1, u0
        n = self.segment_count
        if n == 0:
            return None
        pts = [self.point_at_parameter(u0)]
        for j in range(1, n):
            if u0 < j / n < u1:
                pts.append(self.vertices[j].position)
        pts.append(self.point_at_parameter(u1))
        if len(pts) == 2:
            return Line(pts[0], pts[1])
        return PolyLine(pts)

    def plane(self, tol=None):
        """Best-fit plane through this curve, or None if it is degenerate.

        The normal is found with Newell's method over the facetted
        points, so it follows the winding of the curve.
        """
        from structgeom.plane import Plane

        pts = self.facet(tol=tol)
        if len(pts) < 3:
            return None
        nx = ny = nz = 0.0
        for p1, p2 in zip(pts, pts[1:] + pts[:1]):
            nx += (p1.y - p2.y) * (p1.z + p2.z)
            ny += (p1.z - p2.z) * (p1.x + p2.x)
            nz += (p1.x - p2.x) * (p1.y + p2.y)
        normal = Vector(nx, ny, nz)
        if normal.is_zero(tol):
            return None
        return Plane.from_normal(pts[0], normal)

    def bounding_box(self):
        from structgeom.vector import BoundingBox
        return BoundingBox.from_points(self.facet())


class Line(Curve):
    """A straight line segment between two points.

    ``Line(start, end)`` takes two vectors or vertices;
    ``Line(x1, y1, x2, y2)`` and ``Line(x1, y1, z1, x2, y2, z2)`` take
    coordinates directly.
    """

    def __init__(self, *args):
        super().__init__()
        if len(args) == 2:
            start, end = position_of(args[0]), position_of(args[1])
        elif len(args) == 4:
            start, end = Vector(args[0], args[1]), Vector(args[2], args[3])
        elif len(args) == 6:
            start, end = Vector(*args[:3]), Vector(*args[3:])
        else:
            raise ValueError('bad arguments to Line constructor: {}'.format(args))
        self._vertices = VertexCollection([Vertex(start), Vertex(end)], owner=self)

    @property
    def vertices(self):
        return self._vertices

    @property
    def direction(self):
        """vector from the start to the end of the line"""
        return self.end_point - self.start_point

    def is_valid(self):
        s, e = self.start_point, self.end_point
        return s.is_valid() and e.is_valid() and not s.is_close(e)

    def calculate_length(self):
        return self.start_point.distance_to(self.end_point)

    def segment(self, span):
        if span != 0:
            return None
        return self

    def reversed(self):
        return Line(self.end_point, self.start_point)

    def __repr__(self):
        return 'Line({!r}, {!r})'.format(self.start_point, self.end_point)


class PolyLine(Curve):
    """A chain of straight segments through a list of points.

    Points may be given as separate arguments or as one sequence.  A
    polyline is closed when its last vertex coincides with its first;
    ``close()`` adds that final vertex.
    """

    def __init__(self, *points, closed=False):
        super().__init__()
        if len(points) == 1 and isinstance(points[0], (list, tuple)):
            points = points[0]
        self._vertices = VertexCollection([Vertex(position_of(p)) for p in points], owner=self)
        if closed:
            self.close()

    @property
    def vertices(self):
        return self._vertices

    def is_valid(self):
        if len(self._vertices) < 2:
            return False
        return all(v.position.is_valid() for v in self._vertices)

    def add(self, point):
        """append a point to the end of the polyline"""
        self._vertices.append(Vertex(position_of(point)))
        self.notify_geometry_updated()

    def close(self, tol=None):
        """Close the polyline by repeating its first vertex at the end.

        Does nothing if the polyline is already closed.
        """
        if len(self._vertices) > 1 and not self.is_closed(tol):
            self.add(self._vertices[0].position)

    def to_poly_curve(self):
        """a PolyCurve of one Line per span"""
        from structgeom.polycurve import PolyCurve
        return PolyCurve(*self.segments())

    def __repr__(self):
        return 'PolyLine({})'.format(', '.join(repr(v.position) for v in self._vertices))
