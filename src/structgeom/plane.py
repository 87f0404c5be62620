## plane primitive for structgeom

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

"""planes with a local coordinate frame

A ``Plane`` is an origin plus an orthonormal frame of ``x``, ``y`` and
``z`` axes, where ``z`` is the plane normal.  Points can be mapped
between global coordinates and the plane's local coordinates, which is
how planar calculations (areas, centroids) are done on planes other
than the global XY plane.

"""

from __future__ import annotations

import numpy as np

from structgeom.tolerance import resolve
from structgeom.vector import Vector


def _vec(arr):
    return Vector(float(arr[0]), float(arr[1]), float(arr[2]))


class Plane:
    """An infinite plane with an orthonormal local frame."""

    def __init__(self, origin=Vector.ZERO, x_axis=Vector.UNIT_X, y_axis=Vector.UNIT_Y):
        self._origin = origin
        x = x_axis.unitize()
        z = x.cross(y_axis).unitize()
        y = z.cross(x)
        self._x = x
        self._y = y
        self._z = z
        # rows are the local axes, so frame @ v maps global to local
        self._frame = np.array([tuple(x), tuple(y), tuple(z)], dtype=float)

    @classmethod
    def xy(cls, origin=Vector.ZERO):
        """the global XY plane, optionally shifted to ``origin``"""
        return cls(origin, Vector.UNIT_X, Vector.UNIT_Y)

    @classmethod
    def from_normal(cls, origin, normal):
        """Plane through ``origin`` perpendicular to ``normal``.

        The local x axis is taken from the projection of global X (or
        global Y, if the normal is close to X) onto the plane.
        """
        n = normal.unitize()
        ref = Vector.UNIT_X if abs(n.x) < 0.9 else Vector.UNIT_Y
        x = (ref - n * ref.dot(n)).unitize()
        return cls(origin, x, n.cross(x))

    @classmethod
    def from_points(cls, a, b, c, tol=None):
        """plane through three points, or None if they are collinear"""
        ab = b - a
        ac = c - a
        n = ab.cross(ac)
        if n.is_zero(tol) or ab.is_zero(tol):
            return None
        return cls(a, ab, n.cross(ab))

    @property
    def origin(self):
        return self._origin

    @property
    def x(self):
        return self._x

    @property
    def y(self):
        return self._y

    @property
    def z(self):
        """the plane normal"""
        return self._z

    normal = z

    def is_valid(self):
        return (self._origin.is_valid() and not self._x.is_zero()
                and not self._z.is_zero())

    def global_to_local(self, point):
        """express a global point in this plane's coordinate frame"""
        rel = np.array(tuple(point - self._origin), dtype=float)
        return _vec(self._frame @ rel)

    def local_to_global(self, point):
        """map a point in this plane's frame back to global coordinates"""
        rel = self._frame.T @ np.array(tuple(point), dtype=float)
        return self._origin + _vec(rel)

    def signed_distance_to(self, point):
        return (point - self._origin).dot(self._z)

    def project(self, point):
        """closest point on this plane to ``point``"""
        return point - self._z * self.signed_distance_to(point)

    def contains(self, point, tol=None):
        return abs(self.signed_distance_to(point)) <= resolve(tol).distance

    def __repr__(self):
        return 'Plane(origin={!r}, normal={!r})'.format(self._origin, self._z)
