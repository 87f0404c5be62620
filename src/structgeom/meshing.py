## mesh building helpers for structgeom

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

"""Building meshes from primitives and planar regions.

Planar regions are triangulated with ``mapbox-earcut`` (the fast ear
clipping implementation used by Mapbox GL).  The helper here
normalises curve outlines into the format earcut expects and converts
the resulting indices back into triangles.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Sequence, Tuple

import numpy as np

try:
    import mapbox_earcut as _earcut
except ImportError as exc:  # pragma: no cover - import guard
    raise ImportError(
        "mapbox-earcut must be installed to triangulate regions with voids"
    ) from exc

from structgeom.curve import signed_area_xy
from structgeom.mesh import Mesh, MeshFace, delaunay_triangulation_xy
from structgeom.tolerance import resolve
from structgeom.vector import Vector
from structgeom.vertex import Vertex

log = logging.getLogger(__name__)

Point2D = Tuple[float, float]


def triangulate_polygon(outer: Sequence,
                        holes: Iterable[Sequence] | None = None,
                        tol=None) -> List[List[Point2D]]:
    """Return triangles covering ``outer`` minus any ``holes``.

    ``outer`` and each entry in ``holes`` is a sequence of XY-like
    points (vectors or pairs).  Degenerate loops, with fewer than three
    distinct points, are ignored.  The returned triangles are lists of
    three ``(x, y)`` pairs wound anticlockwise.
    """
    tol = resolve(tol)
    outer_loop = _prepare_loop(outer, tol, anticlockwise=True)
    if len(outer_loop) < 3:
        return []

    point_map: List[Point2D] = []
    ring_ends: List[int] = []
    for loop in [outer_loop] + [_prepare_loop(h, tol, anticlockwise=False) for h in holes or ()]:
        if len(loop) < 3:
            log.debug('ignoring degenerate hole with %d points', len(loop))
            continue
        point_map.extend((p.x, p.y) for p in loop)
        ring_ends.append(len(point_map))

    indices = _earcut.triangulate_float32(np.asarray(point_map, dtype=np.float32),
                                          np.asarray(ring_ends, dtype=np.uint32))
    triangles: List[List[Point2D]] = []
    for i in range(0, len(indices), 3):
        tri = [point_map[j] for j in indices[i:i + 3]]
        if signed_area_xy(Vector(x, y) for x, y in tri) < 0:
            tri.reverse()
        triangles.append(tri)
    return triangles


def _prepare_loop(points, tol, *, anticlockwise: bool) -> List[Vector]:
    """plan positions of ``points`` with repeats dropped, wound as asked"""
    loop: List[Vector] = []
    for pt in points:
        p = pt if isinstance(pt, Vector) else Vector.from_sequence(pt)
        p = Vector(p.x, p.y)
        if not (loop and loop[-1].is_close(p, tol)):
            loop.append(p)
    if len(loop) > 1 and loop[0].is_close(loop[-1], tol):
        loop.pop()
    if len(loop) >= 3 and (signed_area_xy(loop) > 0) != anticlockwise:
        loop.reverse()
    return loop


class MeshBuilder:
    """Accumulates vertices and faces into a mesh.

    Call ``finalize()`` when done to tidy up the mesh and get it back.
    """

    def __init__(self, mesh: Mesh | None = None):
        self.mesh = mesh if mesh is not None else Mesh()

    def add_vertex(self, point) -> Vertex:
        return self.mesh.add_vertex(point)

    def add_face(self, *vertices) -> MeshFace:
        return self.mesh.add_face(*vertices)

    def add_cuboid(self, x: float, y: float, z: float, origin: Vector | None = None) -> List[MeshFace]:
        """Add a box ``x`` by ``y`` by ``z`` made of six quad faces.

        The box is centred on ``origin`` in plan and sits with its base
        at ``origin.z``.  Faces are wound anticlockwise seen from
        outside.
        """
        if origin is None:
            origin = Vector.ZERO
        hx = 0.5 * x
        hy = 0.5 * y
        corners = [(-hx, -hy), (hx, -hy), (hx, hy), (-hx, hy)]
        b = [self.add_vertex(origin + Vector(cx, cy, 0.0)) for cx, cy in corners]
        t = [self.add_vertex(origin + Vector(cx, cy, z)) for cx, cy in corners]
        faces = [self.add_face(b[0], b[3], b[2], b[1]),
                 self.add_face(t[0], t[1], t[2], t[3])]
        for i in range(4):
            j = (i + 1) % 4
            faces.append(self.add_face(b[i], b[j], t[j], t[i]))
        return faces

    def add_delaunay_xy(self, points, tol=None) -> List[MeshFace]:
        """add ``points`` as vertices, triangulated in plan"""
        vertices = [self.add_vertex(p) for p in points]
        faces = delaunay_triangulation_xy(vertices, tol=tol)
        for face in faces:
            self.add_face(face)
        return list(faces)

    def add_planar_region(self, region, tol=None) -> List[MeshFace]:
        """Triangulate a planar region, voids included, into the mesh.

        Curved edges are facetted first.  The faces are wound
        anticlockwise about the region's plane normal.  Returns no
        faces if the region doesn't define a plane.
        """
        plane = region.plane
        if region.perimeter is None or plane is None:
            log.debug('skipping planar region without a plane: %r', region)
            return []
        outer = [plane.global_to_local(p) for p in region.perimeter.facet(tol=tol)]
        holes = [[plane.global_to_local(p) for p in void.facet(tol=tol)]
                 for void in region.voids]
        lookup = {}
        faces = []
        for tri in triangulate_polygon([(p.x, p.y) for p in outer],
                                       [[(p.x, p.y) for p in h] for h in holes], tol):
            verts = []
            for xy in tri:
                if xy not in lookup:
                    lookup[xy] = self.add_vertex(plane.local_to_global(Vector(xy[0], xy[1], 0.0)))
                verts.append(lookup[xy])
            faces.append(self.add_face(*verts))
        return faces

    def finalize(self) -> Mesh:
        """Drop vertices that no face uses and return the mesh."""
        used = {id(v) for face in self.mesh.faces for v in face}
        unused = [v for v in self.mesh.vertices if id(v) not in used]
        if unused:
            log.debug('removing %d unused vertices', len(unused))
            self.mesh.vertices[:] = [v for v in self.mesh.vertices if id(v) in used]
        return self.mesh
