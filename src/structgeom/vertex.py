## vertices and vertex collections for structgeom

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

"""vertices: positions that belong to a piece of geometry

A ``Vertex`` is a position plus a weak back-reference to the curve,
surface or mesh that owns it.  The reference is for lookup only; a
vertex never keeps its owner alive.  Meshes refer to vertices by
identity, so two vertices at the same position are still different
vertices.

"""

from __future__ import annotations

import weakref

import numpy as np

from structgeom.vector import BoundingBox, Vector


class Vertex:
    """A position belonging to a geometric entity."""

    def __init__(self, *args, owner=None):
        if len(args) == 1 and isinstance(args[0], Vector):
            self.position = args[0]
        elif len(args) == 1 and isinstance(args[0], Vertex):
            self.position = args[0].position
        elif len(args) in (2, 3):
            self.position = Vector(*args)
        else:
            raise ValueError('bad arguments to Vertex constructor: {}'.format(args))
        self._owner = None
        self.owner = owner

    @property
    def owner(self):
        """the owning geometry, or None if unowned or since discarded"""
        if self._owner is None:
            return None
        return self._owner()

    @owner.setter
    def owner(self, value):
        self._owner = None if value is None else weakref.ref(value)

    @property
    def x(self):
        return self.position.x

    @property
    def y(self):
        return self.position.y

    @property
    def z(self):
        return self.position.z

    def __repr__(self):
        return 'Vertex({}, {}, {})'.format(self.position.x, self.position.y, self.position.z)


def position_of(item):
    """the position of a Vertex, or the item itself if already a Vector"""
    if isinstance(item, Vertex):
        return item.position
    return item


class VertexCollection(list):
    """A list of vertices that stamps its owner onto each added vertex."""

    def __init__(self, items=(), owner=None):
        super().__init__()
        self._owner = None if owner is None else weakref.ref(owner)
        for item in items:
            self.append(item)

    @property
    def owner(self):
        return None if self._owner is None else self._owner()

    def _adopt(self, item):
        if isinstance(item, Vector):
            item = Vertex(item)
        elif not isinstance(item, Vertex):
            raise ValueError('VertexCollection only holds vertices, got {!r}'.format(item))
        owner = self.owner
        if owner is not None:
            item.owner = owner
        return item

    def append(self, item):
        super().append(self._adopt(item))

    def extend(self, items):
        for item in items:
            self.append(item)

    def insert(self, index, item):
        super().insert(index, self._adopt(item))

    def __setitem__(self, index, item):
        if isinstance(index, slice):
            super().__setitem__(index, [self._adopt(i) for i in item])
        else:
            super().__setitem__(index, self._adopt(item))

    def __iadd__(self, items):
        self.extend(items)
        return self

    def positions(self):
        return [v.position for v in self]

    def to_array(self):
        """an ``(n, 3)`` numpy array of the vertex positions"""
        return np.array([tuple(v.position) for v in self], dtype=float).reshape(-1, 3)

    def bounding_box(self):
        return BoundingBox.from_points(self.positions())

    def polygon_containment_xy(self, point, tol=None):
        """treat these vertices as a polygon and test ``point`` against it"""
        from structgeom.intersect import polygon_containment_xy
        return polygon_containment_xy(self, point, tol=tol)
