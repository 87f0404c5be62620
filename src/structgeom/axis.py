## infinite line primitive for structgeom

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

"""infinite straight lines defined by an origin and a direction"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from structgeom.vector import Vector


@dataclass(frozen=True)
class Axis:
    """An immutable infinite line through ``origin`` along ``direction``.

    Positions along the axis are expressed as a multiple ``t`` of the
    direction vector added to the origin; use ``point_at()`` to turn a
    parameter back into a point.
    """

    origin: Vector
    direction: Vector

    def is_valid(self) -> bool:
        """valid if both vectors are valid and the direction is non-zero"""
        return (self.origin.is_valid() and self.direction.is_valid()
                and not self.direction.is_zero())

    def point_at(self, t: float) -> Vector:
        return self.origin + self.direction * t

    def intersect_plane(self, plane) -> float:
        """Parameter at which this axis crosses ``plane``.

        Returns NaN when the axis is parallel to the plane, in which case
        there is no single crossing point.
        """
        normal = plane.z
        direction_proj = self.direction.dot(normal)
        if direction_proj == 0:
            return math.nan
        origin_proj = self.origin.dot(normal)
        plane_proj = plane.origin.dot(normal)
        return (plane_proj - origin_proj) / direction_proj

    def closest_point(self, point: Vector) -> float:
        """parameter of the point on this axis closest to ``point``"""
        d2 = self.direction.magnitude_squared()
        if d2 == 0:
            return math.nan
        return (point - self.origin).dot(self.direction) / d2

    def closest_points(self, other: Axis) -> Tuple[float, float]:
        """Parameters ``(s, t)`` of the closest approach of two axes.

        ``s`` is measured on this axis and ``t`` on ``other``.  Parallel
        axes have no unique closest pair; ``(nan, nan)`` is returned
        for them and callers must check before using the result.
        """
        w0 = self.origin - other.origin
        a = self.direction.dot(self.direction)
        b = self.direction.dot(other.direction)
        c = other.direction.dot(other.direction)
        d = self.direction.dot(w0)
        e = other.direction.dot(w0)
        denom = a * c - b * b
        if denom == 0:
            return math.nan, math.nan
        s = (b * e - c * d) / denom
        t = (a * e - b * d) / denom
        return s, t
