## intersection and containment functions for structgeom

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

"""intersections of curves, circles, planes and polygons

All of the functions in this module are pure: they take geometry and
return new values without modifying their arguments.  Unless noted
otherwise they work on the projection of their arguments onto the
global XY plane.

Degenerate configurations such as parallel lines, concentric circles or
zero-length lines are normal outcomes, not errors.  Functions that
return a single point return None when there is no point; functions
that return several points return a (possibly empty) list.

"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Optional

import mpmath as mpm

from structgeom.angle import Angle
from structgeom.arc import Arc
from structgeom.curve import CurveCollection, Line
from structgeom.tolerance import resolve
from structgeom.vector import Vector
from structgeom.vertex import position_of

log = logging.getLogger(__name__)

# cosines smaller than this are treated as exactly zero
_TINY = 1e-10


@dataclass(frozen=True)
class Interval:
    """a closed interval ``[start, end]`` of curve parameters"""

    start: float
    end: float

    @property
    def length(self) -> float:
        return self.end - self.start

    @property
    def mid(self) -> float:
        return 0.5 * (self.start + self.end)

    def contains(self, value: float) -> bool:
        return self.start <= value <= self.end


## lines
## -----

def line_line_params_xy(a, b, tol=None):
    """Parameters of the intersection of the infinite lines through
    ``a`` and ``b``.

    Returns ``(t, u)`` such that the intersection point lies at ``t``
    along ``a`` and at ``u`` along ``b``, or None if the lines are
    parallel.  Collinear lines are parallel, so they give None too.
    """
    p = a.start_point
    q = b.start_point
    r = a.end_point - p
    s = b.end_point - q
    det = r.x * s.y - r.y * s.x
    # compare the sine of the angle between the lines against the
    # tolerance, so that long lines are judged the same as short ones
    if det * det <= resolve(tol).distance_squared * r.magnitude_squared() * s.magnitude_squared():
        return None
    qp = q - p
    t = (qp.x * s.y - qp.y * s.x) / det
    u = (qp.x * r.y - qp.y * r.x) / det
    return t, u


def line_line_xy(a, b, segments_only=False, tol=None) -> Optional[Vector]:
    """Intersection point of lines ``a`` and ``b``.

    If ``segments_only`` is true the point must lie within both line
    segments; otherwise the lines are treated as infinite.  Returns
    None when there is no single intersection point.  Note that
    collinear overlapping segments count as parallel and also give
    None.
    """
    params = line_line_params_xy(a, b, tol)
    if params is None:
        return None
    t, u = params
    if segments_only and (t < 0.0 or t > 1.0 or u < 0.0 or u > 1.0):
        return None
    p = a.start_point
    return Vector(p.x + t * (a.end_point.x - p.x),
                  p.y + t * (a.end_point.y - p.y),
                  p.z)


def _line_circle_params(start, direction, center, radius, tol):
    """line parameters of the intersections with a circle, in order"""
    ## solve for t in | S + t*D - C | = r
    ##   t^2 (D.D) + 2t D.(S-C) + (S-C).(S-C) - r^2 = 0
    ## in extended precision, since near-tangent lines are common
    dx = mpm.mpf(direction.x)
    dy = mpm.mpf(direction.y)
    px = mpm.mpf(start.x - center.x)
    py = mpm.mpf(start.y - center.y)
    mpr = mpm.mpf(radius)
    a = dx * dx + dy * dy
    eps = mpm.mpf(tol.distance)
    if a < eps * eps:
        log.debug('degenerate line in line-circle intersection')
        return []
    b = 2 * (dx * px + dy * py)
    c = px * px + py * py - mpr * mpr
    d = b * b - 4 * a * c
    ## within epsilon, scaled by the length of the line, is a tangent
    if mpm.fabs(d) < mpm.sqrt(a) * 2 * eps:
        return [float(-b / (2 * a))]
    if d < 0:
        return []
    root = mpm.sqrt(d)
    return [float((-b - root) / (2 * a)), float((-b + root) / (2 * a))]


def line_circle_xy(line, circle, tol=None) -> List[Vector]:
    """Intersections of the infinite line through ``line`` with the
    full circle of ``circle``.

    ``circle`` may be any arc; only its center and radius are used.
    Returns zero, one (tangent) or two points, ordered along the line.
    """
    tol = resolve(tol)
    start = line.start_point
    direction = line.end_point - start
    ts = _line_circle_params(start, direction, circle.center, circle.radius, tol)
    return [Vector(start.x + t * direction.x, start.y + t * direction.y, start.z)
            for t in ts]


## circles
## -------

def circle_circle_xy(center_a, radius_a, center_b, radius_b, tol=None) -> List[Vector]:
    """Intersections of two circles.

    Returns no points for concentric circles, circles too far apart to
    meet or circles that lie wholly inside one another; one point if
    they touch; two otherwise.
    """
    tol = resolve(tol)
    d = center_a.xy_distance_to(center_b)
    if d < tol.distance:
        return []
    if d > radius_a + radius_b + tol.distance:
        return []
    if d < abs(radius_a - radius_b) - tol.distance:
        return []
    # distance from center_a to the chord joining the intersections
    a = (radius_a * radius_a - radius_b * radius_b + d * d) / (2.0 * d)
    h2 = radius_a * radius_a - a * a
    ux = (center_b.x - center_a.x) / d
    uy = (center_b.y - center_a.y) / d
    mid = Vector(center_a.x + a * ux, center_a.y + a * uy, center_a.z)
    if h2 <= tol.distance_squared:
        return [mid]
    h = math.sqrt(h2)
    return [Vector(mid.x - h * uy, mid.y + h * ux, mid.z),
            Vector(mid.x + h * uy, mid.y - h * ux, mid.z)]


## planes
## ------

def axis_plane(axis, plane) -> Optional[Vector]:
    """point where ``axis`` crosses ``plane``, or None if they are parallel"""
    t = axis.intersect_plane(plane)
    if math.isnan(t):
        return None
    return axis.point_at(t)


## offsets
## -------

def offset_extension_distance(angle, offset_a, offset_b) -> float:
    """How far an offset line must be extended to meet the offset of an
    adjoining line.

    Two lines meet at ``angle``.  Each is offset sideways, by
    ``offset_a`` and ``offset_b`` respectively, and the distance along
    the first offset line from the original meeting point to where it
    crosses the second offset line is returned.  The result takes the
    sign of the angle.  Parallel lines never meet again and give NaN.
    """
    angle = Angle(angle)
    sin = angle.sin()
    if abs(sin) < _TINY:
        return math.nan
    cos = angle.cos()
    if abs(cos) < _TINY:
        cos = 0.0
    return (offset_a * cos - offset_b) / sin


## polygons
## --------

def _closest_on_segment_xy(p, a, b):
    abx = b.x - a.x
    aby = b.y - a.y
    l2 = abx * abx + aby * aby
    t = ((p.x - a.x) * abx + (p.y - a.y) * aby) / l2
    t = min(max(t, 0.0), 1.0)
    return Vector(a.x + t * abx, a.y + t * aby, p.z)


def polygon_containment_xy(polygon, point, tol=None) -> bool:
    """Does ``point`` lie inside the polygon with vertices ``polygon``?

    The polygon is taken to be closed whether or not its last vertex
    repeats its first.  Points within the tolerance distance of any
    edge count as inside.  Otherwise the classic crossing-number test
    is applied, casting a ray in the +X direction.
    """
    tol = resolve(tol)
    pts = [position_of(v) for v in polygon]
    if len(pts) < 3:
        return False
    inside = False
    for a, b in zip(pts, pts[1:] + pts[:1]):
        if a.xy_distance_to(b) == 0:
            continue
        if _closest_on_segment_xy(point, a, b).xy_distance_to(point) <= tol.distance:
            return True
        # half-open in y, so a ray through a vertex is counted once
        if (a.y > point.y) != (b.y > point.y):
            x = a.x + (point.y - a.y) * (b.x - a.x) / (b.y - a.y)
            if point.x < x:
                inside = not inside
    return inside


def _arc_parameter(arc, p):
    """parameter of the point ``p`` on ``arc``, or None if off the arc"""
    a = (p - arc.center).angle()
    sweep = float(arc.sweep)
    if sweep >= 0:
        t = float((a - arc.start_angle).normalize_to_2pi()) / sweep
    else:
        t = float((arc.start_angle - a).normalize_to_2pi()) / -sweep
    if t > 1.0:
        # just short of the start, the long way round
        t -= 2.0 * math.pi / abs(sweep)
    return t


def _edge_crossings(span, a, b, tol):
    """local parameters at which ``span`` crosses the edge ``a`` - ``b``"""
    edge = Line(a, b)
    edge_length = a.xy_distance_to(b)
    slack = tol.distance / edge_length
    found = []
    if isinstance(span, Arc):
        for p in line_circle_xy(edge, span, tol):
            u = _closest_param_xy(p, a, b)
            if -slack <= u <= 1.0 + slack:
                found.append(_arc_parameter(span, p))
    else:
        params = line_line_params_xy(span, edge, tol)
        if params is not None:
            t, u = params
            if -slack <= u <= 1.0 + slack:
                found.append(t)
    return found


def _closest_param_xy(p, a, b):
    abx = b.x - a.x
    aby = b.y - a.y
    return ((p.x - a.x) * abx + (p.y - a.y) * aby) / (abx * abx + aby * aby)


def curve_domain_in_polygon_xy(curve, polygon, tol=None) -> List[Interval]:
    """Portions of ``curve`` lying inside ``polygon``.

    Each span of the curve is split wherever it crosses a polygon edge,
    and the pieces whose midpoints are inside the polygon are kept.
    The result is a list of intervals of the normalized curve parameter,
    in order, with touching intervals merged.  Pieces running along an
    edge count as inside.
    """
    tol = resolve(tol)
    pts = [position_of(v) for v in polygon]
    n = curve.segment_count
    edges = [(a, b) for a, b in zip(pts, pts[1:] + pts[:1])
             if a.xy_distance_to(b) > 0]
    result = []
    for span in range(n):
        seg = curve.segment(span)
        seg_length = seg.length
        if seg_length == 0:
            continue
        # parameters closer together than this are the same point
        same = tol.distance / seg_length
        cuts = [0.0, 1.0]
        for a, b in edges:
            cuts.extend(t for t in _edge_crossings(seg, a, b, tol) if 0.0 < t < 1.0)
        cuts.sort()
        params = [cuts[0]]
        for t in cuts[1:]:
            if t - params[-1] > same:
                params.append(t)
        if 1.0 - params[-1] <= same:
            params[-1] = 1.0
        else:
            params.append(1.0)

        for t0, t1 in zip(params, params[1:]):
            mid = seg.point_at(0, 0.5 * (t0 + t1))
            if not polygon_containment_xy(pts, mid, tol):
                continue
            start = (span + t0) / n
            end = (span + t1) / n
            if result and result[-1].end == start:
                result[-1] = Interval(result[-1].start, end)
            else:
                result.append(Interval(start, end))
    return result


def curve_in_polygon_xy(curve, polygon, tol=None) -> CurveCollection:
    """the pieces of ``curve`` that lie inside ``polygon``"""
    return CurveCollection(curve.extract(iv.start, iv.end)
                           for iv in curve_domain_in_polygon_xy(curve, polygon, tol))


def line_in_polygon_xy(line, polygon, tol=None) -> CurveCollection:
    """the pieces of ``line`` that lie inside ``polygon``"""
    return curve_in_polygon_xy(line, polygon, tol)
