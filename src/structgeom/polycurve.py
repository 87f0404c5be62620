## composite curves for structgeom

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

"""curves made of a chain of other curves

A ``PolyCurve`` strings together lines, arcs and polylines end to end.
Its spans are the spans of its sub-curves, in order, so a polycurve of
a line and a three-span polyline has four spans.

"""

from __future__ import annotations

import logging

from structgeom.arc import Arc
from structgeom.curve import Curve, CurveCollection, Line, _fan, _project
from structgeom.tolerance import resolve
from structgeom.vector import Vector
from structgeom.vertex import VertexCollection, position_of

log = logging.getLogger(__name__)


class PolyCurve(Curve):
    """A chain of curves joined end to end."""

    def __init__(self, *sub_curves):
        super().__init__()
        if len(sub_curves) == 1 and isinstance(sub_curves[0], (list, tuple)):
            sub_curves = sub_curves[0]
        self._sub_curves = CurveCollection()
        for c in sub_curves:
            self._sub_curves.append(c)

    @property
    def sub_curves(self):
        return self._sub_curves

    @property
    def vertices(self):
        verts = VertexCollection()
        for c in self._sub_curves:
            verts.extend(c.vertices)
        return verts

    @property
    def segment_count(self):
        return sum(c.segment_count for c in self._sub_curves)

    @property
    def start_point(self):
        if not self._sub_curves:
            return None
        return self._sub_curves[0].start_point

    @property
    def end_point(self):
        if not self._sub_curves:
            return None
        return self._sub_curves[-1].end_point

    def is_valid(self):
        return len(self._sub_curves) > 0 and all(c.is_valid() for c in self._sub_curves)

    def _locate(self, span):
        """the sub-curve holding ``span`` and the span index within it"""
        if span < 0:
            return None, None
        for c in self._sub_curves:
            n = c.segment_count
            if span < n:
                return c, span
            span -= n
        return None, None

    def point_at(self, span, t):
        c, local = self._locate(span)
        if c is None:
            return None
        return c.point_at(local, t)

    def segment(self, span):
        c, local = self._locate(span)
        if c is None:
            return None
        return c.segment(local)

    ## building
    ## --------

    def add(self, curve):
        """append a curve to the end of the chain"""
        self._sub_curves.append(curve)
        self.notify_geometry_updated()

    def add_line(self, end):
        """append a straight line from the current end point to ``end``"""
        start = self.end_point
        if start is None:
            raise ValueError("can't add a line to an empty PolyCurve")
        line = Line(start, position_of(end))
        self.add(line)
        return line

    def add_arc_tangent(self, tangent, end, tol=None):
        """Append an arc that leaves the current end point along
        ``tangent`` and finishes at ``end``.

        If ``end`` lies on the tangent line no arc exists, and a
        straight line is added instead.
        """
        start = self.end_point
        if start is None:
            raise ValueError("can't add an arc to an empty PolyCurve")
        end = position_of(end)
        tangent = tangent.unitize()
        chord = end - start
        # perpendicular to the left of the direction of travel
        perp = Vector(-tangent.y, tangent.x, 0.0)
        denom = 2.0 * chord.dot(perp)
        if abs(denom) < resolve(tol).distance:
            log.debug('end point lies on the tangent, adding a line instead of an arc')
            return self.add_line(end)
        s = chord.magnitude_squared() / denom
        center = start + perp * s
        a0 = (start - center).angle()
        a1 = (end - center).angle()
        if s > 0:
            sweep = (a1 - a0).normalize_to_2pi()
        else:
            sweep = -((a0 - a1).normalize_to_2pi())
        arc = Arc(center.with_z(start.z), abs(s), a0, sweep)
        self.add(arc)
        return arc

    ## geometry
    ## --------

    @property
    def length(self):
        """total length, summed afresh from the sub-curves' own cached
        lengths, so edits made directly to a sub-curve show up here"""
        return self.calculate_length()

    def calculate_length(self):
        return sum(c.length for c in self._sub_curves)

    def calculate_segment_length(self, index):
        c, local = self._locate(index)
        if c is None:
            return 0.0
        return c.calculate_segment_length(local)

    def notify_geometry_updated(self):
        super().notify_geometry_updated()
        for c in self._sub_curves:
            c.notify_geometry_updated()

    def _area_moment(self, plane=None):
        area = 0.0
        moment = Vector.ZERO
        if not self._sub_curves:
            return area, moment
        for c in self._sub_curves:
            a, m = _fan(_project(c.start_point, plane), _project(c.end_point, plane))
            ca, cm = c._area_moment(plane)
            area += a + ca
            moment = moment + m + cm
        a, m = _fan(_project(self.end_point, plane), _project(self.start_point, plane))
        return area + a, moment + m

    def facet(self, angle=None, tol=None):
        pts = []
        for c in self._sub_curves:
            sub = c.facet(angle=angle, tol=tol)
            if pts and sub and pts[-1].is_close(sub[0], tol):
                sub = sub[1:]
            pts.extend(sub)
        return pts

    def extract(self, u0, u1):
        if u1 < u0:
            u0, u1 = u1, u0
        n = self.segment_count
        if n == 0:
            return None
        result = PolyCurve()
        offset = 0
        for c in self._sub_curves:
            count = c.segment_count
            if count == 0:
                continue
            lo = (u0 * n - offset) / count
            hi = (u1 * n - offset) / count
            offset += count
            if hi <= 0.0 or lo >= 1.0:
                continue
            part = c.extract(max(lo, 0.0), min(hi, 1.0))
            if part is not None:
                result.add(part)
        return result

    def __repr__(self):
        return 'PolyCurve({})'.format(', '.join(repr(c) for c in self._sub_curves))
