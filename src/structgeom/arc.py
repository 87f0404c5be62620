## circular arcs and circles for structgeom

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

"""circular arcs and circles

An ``Arc`` is defined by a center, a radius, a start angle and a
signed sweep angle.  Positive sweeps run anticlockwise.  Arcs lie in a
plane parallel to global XY at the height of their center.  A
``Circle`` is simply an arc whose sweep is a complete turn.

Arcs are a single span, parameterized by angle: ``t = 0`` is the point
at the start angle and ``t = 1`` the point at ``start + sweep``.

"""

from __future__ import annotations

import math

from structgeom.angle import Angle
from structgeom.curve import Curve, _project
from structgeom.tolerance import resolve
from structgeom.vector import Vector
from structgeom.vertex import Vertex, VertexCollection


def circumcircle_xy(a, b, c):
    """Center and squared radius of the circle through three points.

    Works on the XY projection of the points.  Returns None when the
    points are collinear and there is no such circle.
    """
    ax, ay = a.x, a.y
    bx, by = b.x - ax, b.y - ay
    cx, cy = c.x - ax, c.y - ay
    d = 2.0 * (bx * cy - by * cx)
    if d == 0:
        return None
    b2 = bx * bx + by * by
    c2 = cx * cx + cy * cy
    ux = (cy * b2 - by * c2) / d
    uy = (bx * c2 - cx * b2) / d
    return Vector(ax + ux, ay + uy, a.z), ux * ux + uy * uy


class Arc(Curve):
    """A circular arc in an XY-parallel plane."""

    def __init__(self, center, radius, start_angle=0.0, sweep=Angle.COMPLETE):
        super().__init__()
        self._center = center
        self._radius = float(radius)
        self._start_angle = Angle(start_angle)
        self._sweep = Angle(sweep)
        self._vertices = VertexCollection(
            [Vertex(self.point_at(0, 0.0)), Vertex(self.point_at(0, 1.0))], owner=self)

    @classmethod
    def from_three_points(cls, start, mid, end, tol=None):
        """Arc that starts at ``start``, passes ``mid`` and ends at ``end``.

        Returns None if the points are collinear.
        """
        cc = circumcircle_xy(start, mid, end)
        if cc is None:
            return None
        center, r2 = cc
        center = center.with_z(start.z)
        if r2 < resolve(tol).distance_squared:
            return None
        a0 = (start - center).angle()
        d_mid = ((mid - center).angle() - a0).normalize_to_2pi()
        d_end = ((end - center).angle() - a0).normalize_to_2pi()
        if d_mid < d_end:
            sweep = d_end
        else:
            sweep = d_end - Angle.COMPLETE
        return cls(center, math.sqrt(r2), a0, sweep)

    @property
    def center(self):
        return self._center

    @property
    def radius(self):
        return self._radius

    @property
    def start_angle(self):
        return self._start_angle

    @property
    def sweep(self):
        return self._sweep

    @property
    def end_angle(self):
        return self._start_angle + self._sweep

    @property
    def vertices(self):
        return self._vertices

    @property
    def segment_count(self):
        return 1

    def is_valid(self):
        return (self._center.is_valid() and math.isfinite(self._radius)
                and self._radius > 0 and self._sweep.is_defined
                and not self._sweep.is_tiny)

    def point_at(self, span, t):
        if span != 0:
            return None
        a = float(self._start_angle) + float(self._sweep) * t
        return Vector(self._center.x + self._radius * math.cos(a),
                      self._center.y + self._radius * math.sin(a),
                      self._center.z)

    def tangent_at(self, t):
        """unit tangent in the direction of travel at parameter ``t``"""
        a = float(self._start_angle) + float(self._sweep) * t
        d = Vector(-math.sin(a), math.cos(a), 0.0)
        return d if self._sweep.sign() > 0 else -d

    def segment(self, span):
        if span != 0:
            return None
        return self

    def calculate_length(self):
        return self._radius * abs(float(self._sweep))

    def calculate_segment_length(self, index):
        return self.calculate_length() if index == 0 else 0.0

    def _area_moment(self, plane=None):
        # area between the arc and its chord; the chord contributions
        # of the closing loop cancel out
        theta = abs(float(self._sweep))
        seg_area = 0.5 * self._radius * self._radius * (theta - math.sin(theta))
        if seg_area == 0:
            return 0.0, Vector.ZERO
        sign = self._sweep.sign()
        if plane is not None and plane.z.z < 0:
            sign = -sign
        center = _project(self._center, plane)
        bisector = (_project(self.point_at(0, 0.5), plane) - center).unitize()
        offset = 4.0 * self._radius * math.sin(theta / 2.0) ** 3 / (3.0 * (theta - math.sin(theta)))
        centroid = center + bisector * offset
        area = sign * seg_area
        return area, centroid * area

    def facet(self, angle=None, tol=None):
        step = abs(float(angle if angle is not None else resolve(tol).angle))
        theta = abs(float(self._sweep))
        n = max(1, int(math.ceil(theta / step))) if step > 0 else 1
        return [self.point_at(0, i / n) for i in range(n + 1)]

    def extract(self, u0, u1):
        if u1 < u0:
            u0, u1 = u1, u0
        return Arc(self._center, self._radius,
                   self._start_angle + self._sweep * u0,
                   self._sweep * (u1 - u0))

    def __repr__(self):
        return 'Arc(center={!r}, radius={}, start={}, sweep={})'.format(
            self._center, self._radius, float(self._start_angle), float(self._sweep))


class Circle(Arc):
    """A full circle, as an arc sweeping a complete turn from angle zero."""

    def __init__(self, radius, center=Vector.ZERO):
        super().__init__(center, radius, Angle.ZERO, Angle.COMPLETE)

    def is_closed(self, tol=None):
        return True

    def __repr__(self):
        return 'Circle(radius={}, center={!r})'.format(self._radius, self._center)
