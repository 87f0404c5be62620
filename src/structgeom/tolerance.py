## numeric tolerances for structgeom

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

"""numeric tolerances for **structgeom**

Every kernel operation that needs a threshold accepts an optional
``tol`` keyword holding a ``Tolerance`` value.  When no tolerance is
passed, the module default is used.  ``Tolerance`` instances are
immutable, so a value handed to a long-running computation can never
change underneath it.

The defaults are:

- ``distance`` -- ``1e-6``, the coincidence threshold for points
- ``angle`` -- 10 degrees, the facetting step for arcs
- ``layer`` -- ``0.5``, the inclusion threshold for levels

A caller that wants different thresholds for a batch of work can either
pass ``tol=`` explicitly, or temporarily swap the default: ::

   with tolerance_override(distance=1e-3):
       pts = line_circle_xy(l, c)

"""

from contextlib import contextmanager
from dataclasses import dataclass, field, replace

from structgeom.angle import Angle


@dataclass(frozen=True)
class Tolerance:
    """Immutable set of thresholds used by the geometry kernel."""

    distance: float = 1.0e-6
    angle: Angle = field(default_factory=lambda: Angle.from_degrees(10))
    layer: float = 0.5

    @property
    def distance_squared(self):
        return self.distance * self.distance

    def with_(self, **changes):
        """return a copy of this tolerance with some fields replaced"""
        return replace(self, **changes)


DEFAULT = Tolerance()

_default = DEFAULT


def get_tolerance():
    """return the tolerance used when none is passed explicitly"""
    return _default


def set_tolerance(tol):
    """Replace the module default tolerance.

    Prefer passing ``tol=`` to individual calls, or
    ``tolerance_override()``; the default is shared by everything in
    the process.
    """
    global _default
    if not isinstance(tol, Tolerance):
        raise ValueError('set_tolerance expects a Tolerance, got {}'.format(type(tol).__name__))
    _default = tol


def resolve(tol=None):
    """return ``tol``, or the current default if ``tol`` is None"""
    if tol is None:
        return _default
    return tol


@contextmanager
def tolerance_override(tol=None, **changes):
    """Temporarily replace the default tolerance.

    Either pass a complete ``Tolerance`` or keyword changes to apply to
    the current default.  The previous default is restored on exit.
    """
    global _default
    previous = _default
    if tol is None:
        tol = previous.with_(**changes)
    elif changes:
        tol = tol.with_(**changes)
    set_tolerance(tol)
    try:
        yield tol
    finally:
        _default = previous
