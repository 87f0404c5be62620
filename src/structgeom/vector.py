## vector value type for structgeom

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

"""three dimensional vectors for **structgeom**

A ``Vector`` is an immutable triple of floats used both for positions
and for directions.  Arithmetic operators always return new vectors.

``Vector.UNSET`` (all components NaN) is an explicit "no value" marker.
It is distinct from ``Vector.ZERO``: a zero vector is a perfectly good
position, an unset vector is not a position at all.  Operations in this
package that may fail to produce a point return ``None``; ``UNSET``
exists for callers that need a placeholder inside a ``Vector``-typed
slot, and as the result of dividing a vector by zero.

"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

import numpy as np

from structgeom.angle import Angle
from structgeom.tolerance import resolve


def _isgoodnum(n):
    return (not isinstance(n, bool)) and isinstance(n, (int, float))


@dataclass(frozen=True)
class Vector:
    """An immutable 3D vector."""

    x: float
    y: float
    z: float = 0.0

    def __post_init__(self):
        for name in ('x', 'y', 'z'):
            value = getattr(self, name)
            if not _isgoodnum(value):
                raise ValueError('bad {} component for Vector: {!r}'.format(name, value))
            object.__setattr__(self, name, float(value))

    ## construction
    ## ------------

    @classmethod
    def from_angle(cls, angle, magnitude=1.0):
        """vector on the XY plane pointing along ``angle``"""
        r = float(angle)
        return cls(math.cos(r) * magnitude, math.sin(r) * magnitude, 0.0)

    @classmethod
    def from_sequence(cls, seq):
        """build a vector from an ``(x, y[, z])`` sequence"""
        if len(seq) == 2:
            return cls(seq[0], seq[1])
        if len(seq) >= 3:
            return cls(seq[0], seq[1], seq[2])
        raise ValueError('need at least two components to make a Vector')

    ## predicates
    ## ----------

    def is_valid(self) -> bool:
        """true if no component is NaN"""
        return not (math.isnan(self.x) or math.isnan(self.y) or math.isnan(self.z))

    def is_unset(self) -> bool:
        return math.isnan(self.x) and math.isnan(self.y) and math.isnan(self.z)

    def is_zero(self, tol=None) -> bool:
        """is this vector zero length, or too short to divide by safely?"""
        m2 = self.magnitude_squared()
        return m2 == 0.0 or m2 < resolve(tol).distance_squared

    def is_close(self, other: Vector, tol=None) -> bool:
        """are the two vectors coincident to within ``tol.distance``?"""
        return self.distance_squared_to(other) <= resolve(tol).distance_squared

    ## products and magnitudes
    ## -----------------------

    def dot(self, other: Vector) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector) -> Vector:
        return Vector(self.y * other.z - self.z * other.y,
                      self.z * other.x - self.x * other.z,
                      self.x * other.y - self.y * other.x)

    def magnitude_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def magnitude(self) -> float:
        return math.sqrt(self.magnitude_squared())

    def unitize(self) -> Vector:
        """Return a unit vector in the same direction.

        A zero vector has no direction, so ``Vector.ZERO`` is returned
        for it rather than raising.
        """
        mag = self.magnitude()
        if mag == 0.0 or not self.is_valid():
            return Vector.ZERO
        return Vector(self.x / mag, self.y / mag, self.z / mag)

    def distance_squared_to(self, other: Vector) -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        dz = self.z - other.z
        return dx * dx + dy * dy + dz * dz

    def distance_to(self, other: Vector) -> float:
        return math.sqrt(self.distance_squared_to(other))

    def xy_distance_to(self, other: Vector) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    ## angles
    ## ------

    def angle(self) -> Angle:
        """heading of this vector projected on the XY plane"""
        if self.x == 0.0 and self.y == 0.0:
            return Angle.UNDEFINED
        return Angle(math.atan2(self.y, self.x))

    def angle_to(self, other: Vector) -> Angle:
        """unsigned angle between this vector and ``other``"""
        if self.magnitude_squared() == 0.0 or other.magnitude_squared() == 0.0:
            return Angle.UNDEFINED
        return Angle(math.atan2(self.cross(other).magnitude(), self.dot(other)))

    ## derived vectors
    ## ---------------

    def perpendicular_xy(self) -> Vector:
        """this vector rotated a quarter turn anticlockwise about Z"""
        return Vector(-self.y, self.x, self.z)

    def interpolate(self, other: Vector, t: float) -> Vector:
        """the point ``t`` of the way from this vector to ``other``"""
        if t == 0.0:
            return self
        if t == 1.0:
            return other
        return Vector(self.x + (other.x - self.x) * t,
                      self.y + (other.y - self.y) * t,
                      self.z + (other.z - self.z) * t)

    def with_z(self, z: float) -> Vector:
        return Vector(self.x, self.y, z)

    def to_array(self):
        return np.array([self.x, self.y, self.z], dtype=float)

    ## python protocol
    ## ---------------

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __len__(self):
        return 3

    def __getitem__(self, i):
        return (self.x, self.y, self.z)[i]

    def __add__(self, other):
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other):
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar):
        return Vector(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        if scalar == 0:
            return Vector.UNSET
        return Vector(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self):
        return Vector(-self.x, -self.y, -self.z)

    def __repr__(self):
        if self.is_unset():
            return 'Vector.UNSET'
        return 'Vector({}, {}, {})'.format(self.x, self.y, self.z)


Vector.ZERO = Vector(0.0, 0.0, 0.0)
Vector.UNSET = Vector(math.nan, math.nan, math.nan)
Vector.UNIT_X = Vector(1.0, 0.0, 0.0)
Vector.UNIT_Y = Vector(0.0, 1.0, 0.0)
Vector.UNIT_Z = Vector(0.0, 0.0, 1.0)


@dataclass(frozen=True)
class BoundingBox:
    """axis aligned box spanning ``min`` to ``max``"""

    min: Vector
    max: Vector

    @classmethod
    def from_points(cls, points: Iterable[Vector]):
        """bounding box of a collection of points, or None if empty"""
        arr = np.array([tuple(p) for p in points], dtype=float)
        if arr.size == 0:
            return None
        lo = arr.min(axis=0)
        hi = arr.max(axis=0)
        return cls(Vector(*lo.tolist()), Vector(*hi.tolist()))

    @property
    def size(self) -> Vector:
        return self.max - self.min

    @property
    def mid_point(self) -> Vector:
        return (self.min + self.max) * 0.5

    def contains_xy(self, p: Vector, tol=None) -> bool:
        d = resolve(tol).distance
        return (self.min.x - d <= p.x <= self.max.x + d and
                self.min.y - d <= p.y <= self.max.y + d)
