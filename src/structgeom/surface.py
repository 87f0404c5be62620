## surfaces for structgeom

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

"""surfaces and planar regions"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

log = logging.getLogger(__name__)


class Surface(ABC):
    """Abstract base class for surfaces."""

    @property
    @abstractmethod
    def vertices(self):
        """the vertices defining this surface"""

    @abstractmethod
    def is_valid(self):
        """is the definition of this surface usable?"""

    @abstractmethod
    def calculate_area(self):
        """return ``(area, centroid)``; the centroid is None if undefined"""


class PlanarRegion(Surface):
    """A flat region bounded by a closed perimeter curve, optionally
    with holes cut out of it by closed void curves.

    The plane of the region is derived from the perimeter and cached;
    replacing the perimeter or editing the voids discards the cache.
    Callers that edit the perimeter curve in place should call
    ``notify_geometry_updated()``.
    """

    def __init__(self, perimeter=None, voids=None):
        self._perimeter = perimeter
        self._voids = list(voids) if voids else []
        self._plane = None

    @property
    def perimeter(self):
        return self._perimeter

    @perimeter.setter
    def perimeter(self, curve):
        self._perimeter = curve
        self.notify_geometry_updated()

    @property
    def voids(self):
        """a read-only view of the void curves"""
        return tuple(self._voids)

    @property
    def has_voids(self):
        return len(self._voids) > 0

    def add_void(self, curve):
        self._voids.append(curve)
        self.notify_geometry_updated()

    def remove_void(self, curve):
        self._voids.remove(curve)
        self.notify_geometry_updated()

    def clear_voids(self):
        self._voids = []
        self.notify_geometry_updated()

    def notify_geometry_updated(self):
        self._plane = None
        if self._perimeter is not None:
            self._perimeter.notify_geometry_updated()

    @property
    def plane(self):
        """the plane of the perimeter, or None if it doesn't define one"""
        if self._plane is None and self._perimeter is not None:
            self._plane = self._perimeter.plane()
        return self._plane

    @property
    def vertices(self):
        if self._perimeter is None:
            return []
        return self._perimeter.vertices

    def is_valid(self):
        return (self._perimeter is not None and self._perimeter.is_valid()
                and self._perimeter.is_closed() and self.plane is not None)

    def calculate_area(self):
        """Area of the region, less its voids, and its centroid.

        The area is measured in the plane of the region and the
        centroid is returned in global coordinates.
        """
        plane = self.plane
        if self._perimeter is None or plane is None:
            log.debug('area requested for a region without a plane')
            return 0.0, None
        area, centroid = self._perimeter.calculate_enclosed_area(self._voids, plane)
        if centroid is None:
            return area, None
        return area, plane.local_to_global(centroid)

    def __repr__(self):
        return 'PlanarRegion({!r}, voids={!r})'.format(self._perimeter, self._voids)
