## infinite 3D lines and the closest-point solver for geoprim3d
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

"""infinite lines in three dimensions

A :class:`Line` is stored as two defining points ``p1`` and ``p2`` but
describes the whole infinite line through them.  Lines are
parameterized as ``p1 + t*(p2 - p1)``, so `0 <= t <= 1` covers the
segment between the defining points and every other finite ``t`` lands
on the line outside the segment.

If ``p1 == p2`` the line is *degenerate*.  Holding a degenerate line
is legal; operations that need a direction (:meth:`Line.direction`,
:meth:`Line.distance_to_point`, :meth:`Line.closest_points_with`)
raise :class:`~geoprim3d.errors.DegenerateState` when called on one.

closest points between two lines
================================

For ``P(s) = p1 + s*d1`` and ``Q(t) = q1 + t*d2`` the squared distance
``|P(s) - Q(t)|^2`` is minimized by the normal equations

    a*s - b*t = -d
    b*s - c*t = -e

with ``a = d1.d1``, ``b = d1.d2``, ``c = d2.d2``, ``d = d1.r``,
``e = d2.r`` and ``r = p1 - q1``.  The Gram determinant
``a*c - b*b`` vanishes exactly when the lines are parallel.  The Gram
terms are evaluated with mpmath at ``GRAM_DPS`` digits so the
cancellation in ``a*c - b*b`` does not eat the float mantissa.

When the determinant is within ``PARALLEL_EPSILON`` of zero, there is
no unique answer.  The solver then projects ``p1`` onto the other line
and projects that point back, giving one consistent closest pair, and
reports a warning.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import mpmath as mpm

from geoprim3d import diagnostics as diag
from geoprim3d.errors import DegenerateState, InvalidArgument
from geoprim3d.result import Result, attempt
from geoprim3d.tolerance import GRAM_DPS, PARALLEL_EPSILON
from geoprim3d.vector import Vector3, require_finite, require_vector

_COMPONENT = __name__

## private working context for the Gram terms; never touches mpmath.mp
_GRAM = mpm.MPContext()
_GRAM.dps = GRAM_DPS


@dataclass(frozen=True, repr=False)
class Line:
    """Infinite line through two points."""

    p1: Vector3
    p2: Vector3

    def __post_init__(self):
        require_vector(self.p1, 'p1', _COMPONENT)
        require_vector(self.p2, 'p2', _COMPONENT)

    ## factories
    ## ---------

    @classmethod
    def create(cls, p1: Vector3, p2: Vector3) -> Result['Line']:
        """Validating factory.

        Coincident points give a degenerate line; that is reported as a
        warning but is not a failure.
        """
        res = attempt(cls, p1, p2)
        if res:
            if p1 == p2:
                diag.warning(_COMPONENT, 'creating Line with identical points %s; line is degenerate', p1)
            else:
                diag.info(_COMPONENT, 'created Line through %s and %s', p1, p2)
        return res

    @classmethod
    def from_point_and_direction(cls, point: Vector3, direction: Vector3) -> Result['Line']:
        """Line through ``point`` with the second point at ``point + direction``."""
        return attempt(cls._through, point, direction)

    @classmethod
    def _through(cls, point, direction):
        require_vector(point, 'point', _COMPONENT)
        require_vector(direction, 'direction', _COMPONENT)
        if direction.magnitude() == 0.0:
            diag.severe(_COMPONENT, 'from_point_and_direction called with zero-length direction')
            raise DegenerateState('direction must be non-zero')
        line = cls(point, point.add(direction))
        diag.info(_COMPONENT, 'created Line from point %s with direction %s', point, direction)
        return line

    def __repr__(self) -> str:
        return 'Line({!r} -> {!r})'.format(self.p1, self.p2)

    ## queries
    ## -------

    @property
    def is_degenerate(self) -> bool:
        return self.p1 == self.p2

    def length(self) -> float:
        """distance between the defining points, zero for a degenerate line"""
        seglen = self.p1.distance_to(self.p2)
        diag.info(_COMPONENT, 'segment length of %s = %f', self, seglen)
        return seglen

    def direction(self) -> Vector3:
        """unit vector from ``p1`` towards ``p2``"""
        delta = self.p2.subtract(self.p1)
        if delta.magnitude() == 0.0:
            diag.severe(_COMPONENT, 'direction() called on degenerate line %s', self)
            raise DegenerateState('line is degenerate; direction is undefined')
        unit = delta.normalize()
        diag.info(_COMPONENT, 'direction of %s = %s', self, unit)
        return unit

    def point_at(self, t) -> Vector3:
        """sample the line at parameter ``t``"""
        u = require_finite(t, 't', _COMPONENT)
        pnt = self.p1.add(self.p2.subtract(self.p1).scale(u))
        diag.info(_COMPONENT, 'point_at(%f) on %s -> %s', u, self, pnt)
        return pnt

    def distance_to_point(self, point: Vector3) -> float:
        """perpendicular distance from ``point`` to the infinite line"""
        require_vector(point, 'point', _COMPONENT)
        d = self.p2.subtract(self.p1)
        dmag = d.magnitude()
        if dmag == 0.0:
            diag.severe(_COMPONENT, 'distance_to_point called on degenerate line %s', self)
            raise DegenerateState('line is degenerate; distance is undefined')
        dist = d.cross(self.p1.subtract(point)).magnitude() / dmag
        diag.info(_COMPONENT, 'distance from %s to %s = %f', self, point, dist)
        return dist

    def is_parallel(self, other: 'Line') -> bool:
        """True if the direction cross product is within ``PARALLEL_EPSILON``.

        A degenerate line is parallel to everything.
        """
        _require_line(other, 'other')
        d1 = self.p2.subtract(self.p1)
        d2 = other.p2.subtract(other.p1)
        crossmag = d1.cross(d2).magnitude()
        parallel = crossmag <= PARALLEL_EPSILON
        diag.info(_COMPONENT, 'is_parallel(%s, %s) = %s (cross magnitude %e)', self, other, parallel, crossmag)
        return parallel

    def closest_points_with(self, other: 'Line') -> Tuple[Vector3, Vector3]:
        """Return ``(on_self, on_other)``, the closest pair between two lines."""
        _require_line(other, 'other')
        d1 = self.p2.subtract(self.p1)
        d2 = other.p2.subtract(other.p1)
        r = self.p1.subtract(other.p1)

        a = _GRAM.fdot(d1, d1)
        c = _GRAM.fdot(d2, d2)
        if a == 0 or c == 0:
            diag.severe(_COMPONENT, 'closest_points_with called on degenerate line(s): %s, %s', self, other)
            raise DegenerateState('one of the lines has zero direction')
        b = _GRAM.fdot(d1, d2)
        d = _GRAM.fdot(d1, r)
        e = _GRAM.fdot(d2, r)
        denom = a*c - b*b

        if _GRAM.fabs(denom) <= PARALLEL_EPSILON:
            diag.warning(_COMPONENT, 'lines %s and %s are nearly parallel; using projection fallback',
                         self, other)
            t = float(e / c)
            on_other = other.p1.add(d2.scale(t))
            s = float(_GRAM.fdot(d1, on_other.subtract(self.p1)) / a)
            on_self = self.p1.add(d1.scale(s))
            diag.info(_COMPONENT, 'closest (parallel fallback) points: %s (self), %s (other)',
                      on_self, on_other)
            return (on_self, on_other)

        s = float((b*e - c*d) / denom)
        t = float((a*e - b*d) / denom)
        on_self = self.p1.add(d1.scale(s))
        on_other = other.p1.add(d2.scale(t))
        diag.info(_COMPONENT, 'closest points: %s (self), %s (other), s=%f t=%f',
                  on_self, on_other, s, t)
        return (on_self, on_other)

    def shortest_distance_to(self, other: 'Line') -> float:
        on_self, on_other = self.closest_points_with(other)
        dist = on_self.distance_to(on_other)
        diag.info(_COMPONENT, 'shortest distance between %s and %s = %f', self, other, dist)
        return dist

    ## transforms
    ## ----------

    def translate(self, dx, dy, dz) -> 'Line':
        return Line(self.p1.translate(dx, dy, dz), self.p2.translate(dx, dy, dz))

    def rotate_x(self, radians) -> 'Line':
        """rotate both defining points about the X axis through the origin"""
        return Line(self.p1.rotate_x(radians), self.p2.rotate_x(radians))

    def rotate_y(self, radians) -> 'Line':
        return Line(self.p1.rotate_y(radians), self.p2.rotate_y(radians))

    def rotate_z(self, radians) -> 'Line':
        return Line(self.p1.rotate_z(radians), self.p2.rotate_z(radians))


def _require_line(value, what):
    if not isinstance(value, Line):
        diag.severe(_COMPONENT, '%s must be a Line, got %r', what, value)
        raise InvalidArgument('{} must be a Line, got {!r}'.format(what, value))
    return value


__all__ = [
    'Line',
]
