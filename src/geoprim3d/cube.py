## cubes, vertex topology and rigid transforms for geoprim3d
## Copyright (c) geoprim3d contributors

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

"""cubes in three dimensions

A :class:`Cube` is a center, a positive side length, and exactly eight
vertices.  Vertex ``i`` sits at the corner selected by the bits of
``i``: bit 0 picks +x or -x, bit 1 picks +y or -y, bit 2 picks +z or
-z, each offset by ``side/2`` from the center.  Two vertices share an
edge exactly when their indices differ in one bit, which gives the 12
edges.

Cubes made with :meth:`Cube.from_center_and_side` are axis aligned.
:meth:`Cube.from_vertices` takes any eight points and infers the center
(centroid) and side (smallest positive pairwise distance).  It does not
check that the points really form a cube; for anything else the
center/side it reports are meaningless.

Rotations are about the cube's own center.
"""

from __future__ import annotations

from dataclasses import dataclass
from itertools import combinations
from typing import Sequence, Tuple

from geoprim3d import diagnostics as diag
from geoprim3d.errors import InvalidArgument
from geoprim3d.line import Line
from geoprim3d.result import Result, attempt
from geoprim3d.tolerance import VERTEX_EPSILON
from geoprim3d.vector import Vector3, fmtnum, require_finite, require_vector

_COMPONENT = __name__

NVERTS = 8
NEDGES = 12


def vertex_offset(index: int, half: float) -> Tuple[float, float, float]:
    """signed corner offset of vertex ``index`` for half-side ``half``"""
    return (half if index & 1 else -half,
            half if index & 2 else -half,
            half if index & 4 else -half)


def edge_pairs() -> Tuple[Tuple[int, int], ...]:
    """vertex index pairs at Hamming distance one, each listed once"""
    pairs = []
    for i in range(NVERTS):
        for bit in range(3):
            j = i ^ (1 << bit)
            if i < j:
                pairs.append((i, j))
    return tuple(pairs)


_EDGE_PAIRS = edge_pairs()


@dataclass(frozen=True, repr=False)
class Cube:
    """Immutable cube: center, side and eight bit-indexed vertices."""

    center: Vector3
    side: float
    vertices: Tuple[Vector3, ...]

    def __post_init__(self):
        require_vector(self.center, 'center', _COMPONENT)
        side = require_finite(self.side, 'side', _COMPONENT)
        if side <= 0.0:
            diag.severe(_COMPONENT, 'side must be positive, got %r', side)
            raise InvalidArgument('side must be positive and finite, got {!r}'.format(side))
        object.__setattr__(self, 'side', side)
        object.__setattr__(self, 'vertices', _checked_vertices(self.vertices))

    ## factories
    ## ---------

    @classmethod
    def from_center_and_side(cls, center: Vector3, side) -> Result['Cube']:
        """Axis-aligned cube; fails on a non-positive or non-finite side."""
        return attempt(cls._axis_aligned, center, side)

    @classmethod
    def _axis_aligned(cls, center, side):
        require_vector(center, 'center', _COMPONENT)
        s = require_finite(side, 'side', _COMPONENT)
        if s <= 0.0:
            diag.severe(_COMPONENT, 'from_center_and_side called with non-positive side %r', s)
            raise InvalidArgument('side must be positive and finite, got {!r}'.format(s))
        h = s/2.0
        verts = tuple(Vector3(center.x + ox, center.y + oy, center.z + oz)
                      for ox, oy, oz in (vertex_offset(i, h) for i in range(NVERTS)))
        cube = cls(center, s, verts)
        diag.info(_COMPONENT, 'created axis-aligned %s', cube)
        return cube

    @classmethod
    def from_vertices(cls, vertices: Sequence[Vector3]) -> Result['Cube']:
        """Cube from eight vertices, inferring center and side."""
        return attempt(cls._inferred, vertices)

    @classmethod
    def _inferred(cls, vertices):
        verts = _checked_vertices(vertices)

        sx = sy = sz = 0.0
        for v in verts:
            sx += v.x
            sy += v.y
            sz += v.z
        center = Vector3(sx/NVERTS, sy/NVERTS, sz/NVERTS)

        ## edges < face diagonals < space diagonal, so the smallest
        ## positive distance of the 28 pairs is the side of a true cube
        side = None
        for a, b in combinations(verts, 2):
            d = a.distance_to(b)
            if d > VERTEX_EPSILON and (side is None or d < side):
                side = d
        if side is None:
            diag.severe(_COMPONENT, 'from_vertices could not infer a side length from %r', verts)
            raise InvalidArgument('could not infer a valid side length from vertices')

        cube = cls(center, side, verts)
        diag.info(_COMPONENT, 'created %s from vertices', cube)
        return cube

    def __repr__(self) -> str:
        return 'Cube(center={!r}, side={})'.format(self.center, fmtnum(self.side))

    ## topology
    ## --------

    def vertex(self, index: int) -> Vector3:
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < NVERTS:
            diag.severe(_COMPONENT, 'vertex index %r out of range', index)
            raise InvalidArgument('vertex index must be an int in 0..7, got {!r}'.format(index))
        return self.vertices[index]

    def edges(self) -> Tuple[Line, ...]:
        """The 12 edges as lines between bit-adjacent vertices.

        An edge that cannot be built is skipped with a warning and the
        rest are still returned.
        """
        edges = []
        for i, j in _EDGE_PAIRS:
            try:
                edges.append(Line(self.vertices[i], self.vertices[j]))
            except InvalidArgument:
                diag.warning(_COMPONENT, 'skipping edge %d-%d of %s: invalid vertices', i, j, self)
        diag.info(_COMPONENT, 'built %d edges for %s', len(edges), self)
        return tuple(edges)

    ## metrics
    ## -------

    def perimeter_length(self) -> float:
        """sum of the edge lengths"""
        total = 0.0
        for edge in self.edges():
            total += edge.length()
        diag.info(_COMPONENT, 'perimeter length of %s = %f', self, total)
        return total

    def volume(self) -> float:
        vol = self.side**3
        diag.info(_COMPONENT, 'volume of %s = %f', self, vol)
        return vol

    def surface_area(self) -> float:
        area = 6.0*self.side*self.side
        diag.info(_COMPONENT, 'surface area of %s = %f', self, area)
        return area

    def axis_aligned_bounds(self) -> Tuple[Vector3, Vector3]:
        """``(min, max)`` corners of the box enclosing all vertices"""
        xs = [v.x for v in self.vertices]
        ys = [v.y for v in self.vertices]
        zs = [v.z for v in self.vertices]
        lo = Vector3(min(xs), min(ys), min(zs))
        hi = Vector3(max(xs), max(ys), max(zs))
        diag.info(_COMPONENT, 'bounds of %s = (%s, %s)', self, lo, hi)
        return (lo, hi)

    ## transforms
    ## ----------

    def translate(self, dx, dy, dz) -> 'Cube':
        center = self.center.translate(dx, dy, dz)
        verts = tuple(v.translate(dx, dy, dz) for v in self.vertices)
        cube = Cube(center, self.side, verts)
        diag.info(_COMPONENT, 'translated %s -> %s', self, cube)
        return cube

    def rotate_x(self, radians) -> 'Cube':
        """rotate about the X axis through the cube's center"""
        return self._about_center('x', radians)

    def rotate_y(self, radians) -> 'Cube':
        """rotate about the Y axis through the cube's center"""
        return self._about_center('y', radians)

    def rotate_z(self, radians) -> 'Cube':
        """rotate about the Z axis through the cube's center"""
        return self._about_center('z', radians)

    def _about_center(self, axis, radians):
        ang = require_finite(radians, 'radians', _COMPONENT)
        verts = []
        for v in self.vertices:
            rel = v.subtract(self.center)
            rotated = getattr(rel, 'rotate_' + axis)(ang)
            verts.append(self.center.add(rotated))
        cube = Cube(self.center, self.side, tuple(verts))
        diag.info(_COMPONENT, 'rotated %s about %s by %f radians', self, axis.upper(), ang)
        return cube

    def scale(self, factor) -> 'Cube':
        """uniform scale about the cube's center"""
        k = require_finite(factor, 'factor', _COMPONENT)
        if k <= 0.0:
            diag.severe(_COMPONENT, 'scale factor must be positive, got %r', k)
            raise InvalidArgument('scale factor must be positive, got {!r}'.format(k))
        verts = tuple(self.center.add(v.subtract(self.center).scale(k)) for v in self.vertices)
        cube = Cube(self.center, self.side*k, verts)
        diag.info(_COMPONENT, 'scaled %s by %f -> %s', self, k, cube)
        return cube


def _checked_vertices(vertices) -> Tuple[Vector3, ...]:
    if vertices is None or isinstance(vertices, (str, bytes)):
        diag.severe(_COMPONENT, 'vertices must be a sequence of eight Vector3, got %r', vertices)
        raise InvalidArgument('vertices must be a sequence of eight Vector3')
    try:
        verts = tuple(vertices)
    except TypeError:
        diag.severe(_COMPONENT, 'vertices must be a sequence of eight Vector3, got %r', vertices)
        raise InvalidArgument('vertices must be a sequence of eight Vector3') from None
    if len(verts) != NVERTS:
        diag.severe(_COMPONENT, 'expected %d vertices, got %d', NVERTS, len(verts))
        raise InvalidArgument('expected {} vertices, got {}'.format(NVERTS, len(verts)))
    for i, v in enumerate(verts):
        require_vector(v, 'vertex {}'.format(i), _COMPONENT)
    return verts


__all__ = [
    'Cube',
    'NVERTS',
    'NEDGES',
    'vertex_offset',
    'edge_pairs',
]
