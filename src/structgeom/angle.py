## radial angle value type for structgeom

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

"""radial angle values for **structgeom**

An ``Angle`` wraps a value in radians so that angles are never
confused with the raw lengths and parameters they travel alongside.
Angles are immutable; every operation returns a new value.

Besides ordinary (defined) angles there are two special states:

- ``Angle.UNDEFINED`` -- the result of an operation that has no
  meaningful angle, such as the heading of a zero-length vector.

- ``Angle.MULTI`` -- a placeholder used by higher level code to
  indicate that a value stands for several different angles at once,
  for instance the orientation of a mixed selection of elements.

These are carried as an explicit ``AngleState`` rather than inferred
from the float, although for convenience the ``radians`` of an
undefined angle is NaN and that of a multi angle is negative infinity.

"""

import math
from enum import Enum, auto
from functools import total_ordering

pi2 = 2.0 * math.pi

## angles whose magnitude is below this are treated as zero
_TINY = 1.0e-10


class AngleState(Enum):
    DEFINED = auto()
    UNDEFINED = auto()
    MULTI = auto()


class HandSide(Enum):
    """side of a directed line, seen looking along its direction"""
    LEFT = auto()
    RIGHT = auto()


def _isgoodnum(n):
    return (not isinstance(n, bool)) and isinstance(n, (int, float))


@total_ordering
class Angle:
    """An angle expressed in radians."""

    __slots__ = ('_radians', '_state')

    def __init__(self, radians=0.0):
        if isinstance(radians, Angle):
            value = radians._radians
        elif _isgoodnum(radians):
            value = float(radians)
        else:
            raise ValueError('bad argument to Angle constructor: {}'.format(radians))

        if math.isnan(value):
            state = AngleState.UNDEFINED
        elif value == -math.inf:
            state = AngleState.MULTI
        else:
            state = AngleState.DEFINED
        object.__setattr__(self, '_radians', value)
        object.__setattr__(self, '_state', state)

    def __setattr__(self, name, value):
        raise AttributeError('Angle is immutable')

    ## alternative constructors
    ## ------------------------

    @classmethod
    def from_degrees(cls, degrees):
        """create an angle from a value expressed in degrees"""
        return cls(math.pi * degrees / 180.0)

    @classmethod
    def parse(cls, text):
        """Create an angle from a text description.

        Plain numbers are taken as radians.  A trailing ``π`` denotes a
        multiple of pi and a trailing ``°`` denotes degrees, so that
        ``'0.5π'``, ``'90°'`` and ``'1.5707963'`` all describe (roughly)
        the same right angle.  Raises ``ValueError`` for text that does
        not describe a number.
        """
        if not isinstance(text, str):
            raise ValueError('Angle.parse expects a string, got {}'.format(type(text).__name__))
        text = text.strip()
        if text.endswith('π'):
            return cls(float(text[:-1]) * math.pi)
        if text.endswith('°'):
            return cls.from_degrees(float(text[:-1]))
        return cls(float(text))

    ## properties
    ## ----------

    @property
    def radians(self):
        return self._radians

    @property
    def degrees(self):
        """the angle expressed in degrees"""
        return 180.0 * self._radians / math.pi

    @property
    def state(self):
        return self._state

    @property
    def is_defined(self):
        return self._state is AngleState.DEFINED

    @property
    def is_undefined(self):
        return self._state is AngleState.UNDEFINED

    @property
    def is_multi(self):
        return self._state is AngleState.MULTI

    @property
    def is_acute(self):
        """is the magnitude of this angle less than a right angle?"""
        return self.is_defined and abs(self._radians) < math.pi / 2

    @property
    def is_obtuse(self):
        """is the magnitude between a right angle and a straight angle?"""
        return self.is_defined and math.pi / 2 <= abs(self._radians) <= math.pi

    @property
    def is_reflex(self):
        return self.is_defined and abs(self._radians) > math.pi

    @property
    def is_tiny(self):
        """is this angle so small it can safely be treated as zero?"""
        return self.is_defined and abs(self._radians) < _TINY

    ## operations
    ## ----------

    def normalize(self):
        """Return a copy of this angle mapped into the range (-pi, pi].

        The modulo result is shifted by a full turn and taken modulo
        again so that values that round onto 2pi land back on zero.
        Undefined and multi angles are returned unchanged.
        """
        if not self.is_defined:
            return self
        r = self._radians
        if -math.pi < r <= math.pi:
            return self
        result = r % pi2
        result = (result + pi2) % pi2
        if result > math.pi:
            result -= pi2
        return Angle(result)

    def normalize_to_2pi(self):
        """Return a copy of this angle mapped into the range [0, 2pi)."""
        if not self.is_defined:
            return self
        r = self._radians
        if 0.0 <= r < pi2:
            return self
        result = r % pi2
        result = (result + pi2) % pi2
        return Angle(result)

    def sign(self):
        """Return +1 for positive angles and -1 for negative ones.

        Zero counts as positive here.  Callers that flip or mirror an
        angle according to its sign rely on a zero angle staying put.
        """
        return -1 if self._radians < 0 else 1

    def explement(self):
        """Return the angle which, added to this one, makes a complete
        turn.  The result carries the same sign as this angle."""
        return Angle(self.sign() * pi2 - self._radians)

    def supplement(self):
        """return the angle which together with this one makes a straight line"""
        return Angle.STRAIGHT - self

    def smallest_to_straight(self):
        """return this angle or its supplement, whichever is smaller"""
        if self < Angle.RIGHT:
            return self
        return self.supplement()

    def to_sign(self, sign):
        """Return this angle expressed with the given sign.

        If the signs already agree the angle is returned as-is,
        otherwise the negated explement is returned.  ``sign >= 0``
        is positive and ``sign < 0`` is negative.
        """
        sign = -1 if sign < 0 else 1
        if sign * self.sign() < 0:
            return -self.explement()
        return self

    def relative_to_side(self, side):
        """flip this angle if it is measured from the left hand side"""
        if side is HandSide.LEFT:
            return -self
        return self

    def abs(self):
        return Angle(abs(self._radians))

    def sin(self):
        return math.sin(self._radians)

    def cos(self):
        return math.cos(self._radians)

    def tan(self):
        return math.tan(self._radians)

    def direction(self):
        """unit vector pointing along this angle on the XY plane"""
        from structgeom.vector import Vector
        return Vector.from_angle(self)

    ## python protocol
    ## ---------------

    def __float__(self):
        return self._radians

    def __neg__(self):
        return Angle(-self._radians)

    def __abs__(self):
        return self.abs()

    def __add__(self, other):
        return Angle(self._radians + float(other))

    __radd__ = __add__

    def __sub__(self, other):
        return Angle(self._radians - float(other))

    def __rsub__(self, other):
        return Angle(float(other) - self._radians)

    def __mul__(self, scalar):
        return Angle(self._radians * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        return Angle(self._radians / scalar)

    def __eq__(self, other):
        if isinstance(other, Angle):
            if self._state is not other._state:
                return False
            return self.is_undefined or self._radians == other._radians
        if _isgoodnum(other):
            return self._radians == other
        return NotImplemented

    def __lt__(self, other):
        if isinstance(other, Angle):
            return self._radians < other._radians
        if _isgoodnum(other):
            return self._radians < other
        return NotImplemented

    def __hash__(self):
        if self.is_undefined:
            return hash(AngleState.UNDEFINED)
        return hash(self._radians)

    def __repr__(self):
        if self.is_undefined:
            return 'Angle.UNDEFINED'
        if self.is_multi:
            return 'Angle.MULTI'
        return 'Angle({})'.format(self._radians)

    def __str__(self):
        if self.is_undefined:
            return ''
        if self.is_multi:
            return 'Multi'
        return '{}π ({}°)'.format(self._radians / math.pi, self.degrees)


Angle.UNDEFINED = Angle(math.nan)
Angle.MULTI = Angle(-math.inf)
Angle.ZERO = Angle(0.0)
Angle.RIGHT = Angle(math.pi / 2)
Angle.STRAIGHT = Angle(math.pi)
Angle.COMPLETE = Angle(pi2)
