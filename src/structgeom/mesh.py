## meshes and Delaunay triangulation for structgeom

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

"""Polygon meshes and Delaunay triangulation.

A ``Mesh`` owns a collection of vertices and a collection of faces
that refer to them.  Faces are triangles or quads.  Vertices are
compared by identity throughout: two distinct vertices at the same
position are different vertices.

The triangulation is the incremental Bowyer-Watson algorithm.  All of
the input is first enclosed in a large *super-triangle*; each vertex is
then inserted in turn, removing every face whose circumcircle contains
it and re-filling the hole with a fan of triangles to the new vertex.
When all of the vertices are in, faces still attached to the corners of
the super-triangle are removed.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Iterable, List, Optional

from structgeom.arc import circumcircle_xy
from structgeom.curve import CurveCollection, Line, PolyLine, signed_area_xy
from structgeom.surface import Surface
from structgeom.tolerance import resolve
from structgeom.vector import BoundingBox, Vector
from structgeom.vertex import Vertex, VertexCollection, position_of

log = logging.getLogger(__name__)

_SUPER_SCALE = 1.0e4


class MeshEdge:
    """An undirected edge between two mesh vertices."""

    __slots__ = ('a', 'b')

    def __init__(self, a: Vertex, b: Vertex):
        self.a = a
        self.b = b

    def _key(self):
        return frozenset((id(self.a), id(self.b)))

    def __eq__(self, other):
        if not isinstance(other, MeshEdge):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __repr__(self):
        return 'MeshEdge({!r}, {!r})'.format(self.a, self.b)


class MeshFace:
    """A triangular or quadrilateral face of a mesh."""

    def __init__(self, *vertices: Vertex):
        if len(vertices) == 1 and isinstance(vertices[0], (list, tuple)):
            vertices = tuple(vertices[0])
        if len(vertices) not in (3, 4):
            raise ValueError('a mesh face needs 3 or 4 vertices, got {}'.format(len(vertices)))
        self._vertices = list(vertices)

    @classmethod
    def from_edge(cls, edge: MeshEdge, vertex: Vertex) -> MeshFace:
        """the triangle joining ``edge`` to ``vertex``"""
        return cls(edge.a, edge.b, vertex)

    @classmethod
    def super_triangle_xy(cls, bbox: BoundingBox) -> MeshFace:
        """A triangle, with new vertices, comfortably enclosing ``bbox``
        in plan."""
        size = bbox.size
        dmax = max(size.x, size.y)
        if dmax <= 0:
            dmax = 1.0
        # corners far enough out not to fall inside the circumcircle
        # of a thin triangle along the hull of the points
        d = _SUPER_SCALE * dmax
        mid = bbox.mid_point
        return cls(Vertex(mid.x - d, mid.y - d, mid.z),
                   Vertex(mid.x, mid.y + d, mid.z),
                   Vertex(mid.x + d, mid.y - d, mid.z))

    @property
    def vertices(self) -> List[Vertex]:
        return self._vertices

    def __len__(self):
        return len(self._vertices)

    def __iter__(self):
        return iter(self._vertices)

    def __getitem__(self, i):
        return self._vertices[i]

    @property
    def is_tri(self) -> bool:
        return len(self._vertices) == 3

    @property
    def is_quad(self) -> bool:
        return len(self._vertices) == 4

    def get_edge(self, i: int) -> MeshEdge:
        """the edge from vertex ``i`` to the next vertex round the face"""
        n = len(self._vertices)
        return MeshEdge(self._vertices[i % n], self._vertices[(i + 1) % n])

    def edges(self) -> List[MeshEdge]:
        return [self.get_edge(i) for i in range(len(self._vertices))]

    def contains_any(self, face: MeshFace) -> bool:
        """does this face share any vertex with ``face``?"""
        ids = {id(v) for v in self._vertices}
        return any(id(v) in ids for v in face)

    def positions(self) -> List[Vector]:
        return [v.position for v in self._vertices]

    def area(self) -> float:
        p = self.positions()
        total = 0.5 * (p[1] - p[0]).cross(p[2] - p[0]).magnitude()
        if self.is_quad:
            total += 0.5 * (p[2] - p[0]).cross(p[3] - p[0]).magnitude()
        return total

    def centroid(self) -> Vector:
        p = self.positions()
        return sum(p[1:], p[0]) / len(p)

    def signed_area_xy(self) -> float:
        return signed_area_xy(self.positions())

    def xy_circumcircle_containment_quick_check(self, point: Vector) -> bool:
        """Does ``point`` lie strictly inside the circle through the first
        three vertices of this face, in plan?

        Faces whose vertices are collinear have no circumcircle and
        contain nothing.
        """
        cc = circumcircle_xy(*self.positions()[:3])
        if cc is None:
            return False
        center, r2 = cc
        dx = point.x - center.x
        dy = point.y - center.y
        return dx * dx + dy * dy < r2

    def __repr__(self):
        return 'MeshFace({})'.format(', '.join(repr(v) for v in self._vertices))


class MeshFaceCollection(list):
    """a list of mesh faces"""

    def remove_all_with_vertices(self, face: MeshFace) -> int:
        """Remove every face sharing a vertex with ``face``, ``face``
        included.  Returns the number of faces removed."""
        keep = [f for f in self if not f.contains_any(face)]
        removed = len(self) - len(keep)
        self[:] = keep
        return removed


def delaunay_triangulation_xy(vertices: Iterable[Vertex],
                              faces: Optional[MeshFaceCollection] = None,
                              tol=None) -> MeshFaceCollection:
    """Delaunay triangulation of ``vertices`` in plan.

    New faces are appended to ``faces`` (a fresh collection if None),
    which is returned.  The faces are wound anticlockwise in plan.
    Vertices that coincide in plan with one already inserted are
    skipped.
    """
    tol = resolve(tol)
    if faces is None:
        faces = MeshFaceCollection()
    vertices = list(vertices)
    if len(vertices) < 3:
        log.debug('fewer than three vertices, nothing to triangulate')
        return faces

    bbox = BoundingBox.from_points([v.position for v in vertices])
    st = MeshFace.super_triangle_xy(bbox)
    faces.append(st)

    inserted = []
    for v in vertices:
        p = v.position
        if any(p.xy_distance_to(w.position) <= tol.distance for w in inserted):
            log.debug('skipping vertex coincident in plan with another: %r', v)
            continue
        inserted.append(v)

        edges = []
        for i in range(len(faces) - 1, -1, -1):
            if faces[i].xy_circumcircle_containment_quick_check(p):
                edges.extend(faces[i].edges())
                del faces[i]

        # edges shared by two removed faces are interior to the hole
        counts = Counter(edges)
        for edge in edges:
            if counts[edge] != 1:
                continue
            face = MeshFace.from_edge(edge, v)
            if face.signed_area_xy() < 0:
                face = MeshFace(edge.b, edge.a, v)
            faces.append(face)

    faces.remove_all_with_vertices(st)
    log.debug('triangulated %d vertices into %d faces', len(inserted), len(faces))
    return faces


def _join_segments(segments, tol):
    """Chain line segments into polylines, end to end.

    Chains that come back round to their start are closed exactly.
    """
    remaining = list(segments)
    chains = []
    while remaining:
        first = remaining.pop(0)
        chain = [first.start_point, first.end_point]
        extended = True
        while extended and not chain[-1].is_close(chain[0], tol):
            extended = False
            for i, seg in enumerate(remaining):
                if seg.start_point.is_close(chain[-1], tol):
                    chain.append(seg.end_point)
                elif seg.end_point.is_close(chain[-1], tol):
                    chain.append(seg.start_point)
                elif seg.end_point.is_close(chain[0], tol):
                    chain.insert(0, seg.start_point)
                elif seg.start_point.is_close(chain[0], tol):
                    chain.insert(0, seg.end_point)
                else:
                    continue
                del remaining[i]
                extended = True
                break
        if len(chain) > 2 and chain[-1].is_close(chain[0], tol):
            chain[-1] = chain[0]
        else:
            log.debug('section left open after %d points', len(chain))
        chains.append(PolyLine(chain))
    return chains


class Mesh(Surface):
    """A surface made of triangular and quadrilateral faces."""

    def __init__(self, points=None):
        self._vertices = VertexCollection(owner=self)
        self._faces = MeshFaceCollection()
        for p in points or ():
            self.add_vertex(p)

    @classmethod
    def delaunay_xy(cls, points, tol=None) -> Mesh:
        """a new mesh triangulating ``points`` in plan"""
        mesh = cls(points)
        delaunay_triangulation_xy(mesh.vertices, mesh.faces, tol)
        return mesh

    @property
    def vertices(self) -> VertexCollection:
        return self._vertices

    @property
    def faces(self) -> MeshFaceCollection:
        return self._faces

    def add_vertex(self, point) -> Vertex:
        vertex = point if isinstance(point, Vertex) else Vertex(position_of(point))
        self._vertices.append(vertex)
        return vertex

    def add_face(self, *vertices) -> MeshFace:
        if len(vertices) == 1 and isinstance(vertices[0], MeshFace):
            face = vertices[0]
        else:
            face = MeshFace(*vertices)
        self._faces.append(face)
        return face

    def is_valid(self) -> bool:
        return len(self._faces) > 0

    def calculate_area(self):
        """total face area and the area-weighted centroid of the faces"""
        area = 0.0
        moment = Vector.ZERO
        for face in self._faces:
            a = face.area()
            area += a
            moment = moment + face.centroid() * a
        if area == 0:
            return 0.0, None
        return area, moment / area

    def bounding_box(self) -> Optional[BoundingBox]:
        return self._vertices.bounding_box()

    def intersect_plane(self, z: float, as_curves: bool = True, tol=None) -> CurveCollection:
        """Cut the mesh with the horizontal plane at height ``z``.

        Vertices at or above ``z`` count as above the plane.  Each face
        that straddles the plane contributes a line across it.  If
        ``as_curves`` is true the lines are joined up into polylines,
        closed where the section closes; otherwise the lines are
        returned as they are.
        """
        tol = resolve(tol)
        segments = []
        for face in self._faces:
            pts = face.positions()
            crossings = []
            for a, b in zip(pts, pts[1:] + pts[:1]):
                if (a.z >= z) != (b.z >= z):
                    crossings.append(a.interpolate(b, (z - a.z) / (b.z - a.z)))
            for i in range(0, len(crossings) - 1, 2):
                p, q = crossings[i], crossings[i + 1]
                if not p.is_close(q, tol):
                    segments.append(Line(p, q))
        log.debug('plane at z=%g cuts %d faces', z, len(segments))
        if not as_curves:
            return CurveCollection(segments)
        return CurveCollection(_join_segments(segments, tol))

    def __repr__(self):
        return 'Mesh({} vertices, {} faces)'.format(len(self._vertices), len(self._faces))
