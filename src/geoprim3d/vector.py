## immutable 3D point/vector kernel for geoprim3d
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

"""immutable three-component vectors for **geoprim3d**

A :class:`Vector3` stands for a point or a free vector interchangeably.
All three components are finite floats; this is checked every time a
vector is built, so no operation can ever produce a NaN or an infinity
that survives.  Every operation returns a new value.

Equality is exact component-wise floating point equality.  If you need
a tolerance, compare ``a.distance_to(b)`` against your own epsilon.

Rotations are about the coordinate axes through the *origin*.  To
rotate about some other pivot, subtract the pivot, rotate, and add it
back (this is what :meth:`geoprim3d.cube.Cube.rotate_x` does).
"""

from __future__ import annotations

from dataclasses import dataclass
from math import cos, hypot, isfinite, sin
from numbers import Real
from typing import Iterator, Tuple

from geoprim3d import diagnostics as diag
from geoprim3d.errors import DegenerateState, InvalidArgument
from geoprim3d.result import Result, attempt
from geoprim3d.tolerance import DISPLAY_DIGITS, STABILITY_EPSILON

_COMPONENT = __name__


## utility function to determine if argument is a "real" python
## number, since booleans are considered ints but are not numbers
## for our purposes
def isgoodnum(n) -> bool:
    """is ``n`` a real scalar, and not a boolean?"""
    return (not isinstance(n, bool)) and isinstance(n, Real)


def tofloat(n):
    """``n`` as a finite float, or ``None`` if it is not a finite real number

    Reals too large for a float (``10**400``) overflow and count as
    non-finite.
    """
    if not isgoodnum(n):
        return None
    try:
        f = float(n)
    except OverflowError:
        return None
    return f if isfinite(f) else None


def require_finite(value, what: str, component: str = _COMPONENT) -> float:
    """Return ``value`` as a float, or raise :class:`InvalidArgument`.

    ``what`` names the argument in the error message and ``component``
    is the module reported to the diagnostic sink.
    """

    f = tofloat(value)
    if f is None:
        diag.severe(component, '%s must be a finite number, got %r', what, value)
        raise InvalidArgument('{} must be a finite number, got {!r}'.format(what, value))
    return f


def require_vector(value, what: str, component: str = _COMPONENT) -> 'Vector3':
    """Raise :class:`InvalidArgument` unless ``value`` is a Vector3."""

    if not isinstance(value, Vector3):
        diag.severe(component, '%s must be a Vector3, got %r', what, value)
        raise InvalidArgument('{} must be a Vector3, got {!r}'.format(what, value))
    return value


def fmtnum(x: float) -> str:
    """fixed-precision rendering; negative zero prints as zero"""
    return '{:.{}f}'.format(x + 0.0, DISPLAY_DIGITS)


@dataclass(frozen=True, repr=False)
class Vector3:
    """Immutable finite 3 vector, also used as a point."""

    x: float
    y: float
    z: float

    def __post_init__(self):
        coords = (tofloat(self.x), tofloat(self.y), tofloat(self.z))
        if None in coords:
            diag.severe(_COMPONENT, 'attempted to create Vector3 with non-finite coordinate(s): (%r, %r, %r)',
                        self.x, self.y, self.z)
            raise InvalidArgument('coordinates must be finite numbers, got ({!r}, {!r}, {!r})'.format(
                self.x, self.y, self.z))
        object.__setattr__(self, 'x', coords[0])
        object.__setattr__(self, 'y', coords[1])
        object.__setattr__(self, 'z', coords[2])

    ## factories
    ## ---------

    @classmethod
    def create(cls, x, y, z) -> Result['Vector3']:
        """Validating factory; returns a :class:`Result` instead of raising."""

        res = attempt(cls, x, y, z)
        if res:
            diag.info(_COMPONENT, 'created %s', res.value)
        return res

    @classmethod
    def origin(cls) -> 'Vector3':
        return cls(0.0, 0.0, 0.0)

    ## representation
    ## --------------

    def __repr__(self) -> str:
        return 'Vector3({}, {}, {})'.format(fmtnum(self.x), fmtnum(self.y), fmtnum(self.z))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    ## metrics
    ## -------

    def magnitude(self) -> float:
        """Euclidean norm; exactly 0.0 only for the zero vector."""
        mag = hypot(self.x, self.y, self.z)
        diag.info(_COMPONENT, 'magnitude of %s = %f', self, mag)
        return mag

    def distance_to(self, other: 'Vector3') -> float:
        """Euclidean distance between two points."""
        require_vector(other, 'other')
        dx = other.x - self.x
        dy = other.y - self.y
        dz = other.z - self.z
        dist = hypot(dx, dy, dz)
        diag.info(_COMPONENT, 'distance from %s to %s = %f', self, other, dist)
        return dist

    def normalize(self) -> 'Vector3':
        """Unit vector in the same direction.

        Raises :class:`DegenerateState` for the zero vector.  A vector
        shorter than ``STABILITY_EPSILON`` is still normalized, but a
        warning is reported first since the result may be inaccurate.
        """
        mag = self.magnitude()
        if mag == 0.0:
            diag.severe(_COMPONENT, 'normalize called on zero-length vector')
            raise DegenerateState('cannot normalize a zero-length vector')
        if mag < STABILITY_EPSILON:
            diag.warning(_COMPONENT, 'normalizing %r with magnitude %e may be numerically unstable',
                         self, mag)
        unit = Vector3(self.x/mag, self.y/mag, self.z/mag)
        diag.info(_COMPONENT, 'normalized %s -> %s', self, unit)
        return unit

    ## arithmetic
    ## ----------

    def scale(self, factor) -> 'Vector3':
        k = require_finite(factor, 'factor')
        result = Vector3(self.x*k, self.y*k, self.z*k)
        diag.info(_COMPONENT, 'scaled %s by %f -> %s', self, k, result)
        return result

    def add(self, other: 'Vector3') -> 'Vector3':
        require_vector(other, 'other')
        result = Vector3(self.x + other.x, self.y + other.y, self.z + other.z)
        diag.info(_COMPONENT, 'added %s + %s = %s', self, other, result)
        return result

    def subtract(self, other: 'Vector3') -> 'Vector3':
        require_vector(other, 'other')
        result = Vector3(self.x - other.x, self.y - other.y, self.z - other.z)
        diag.info(_COMPONENT, 'subtracted %s - %s = %s', self, other, result)
        return result

    def dot(self, other: 'Vector3') -> float:
        require_vector(other, 'other')
        dp = self.x*other.x + self.y*other.y + self.z*other.z
        diag.info(_COMPONENT, 'dot(%s, %s) = %f', self, other, dp)
        return dp

    def cross(self, other: 'Vector3') -> 'Vector3':
        """right-handed cross product ``self x other``"""
        require_vector(other, 'other')
        result = Vector3(self.y*other.z - self.z*other.y,
                         self.z*other.x - self.x*other.z,
                         self.x*other.y - self.y*other.x)
        diag.info(_COMPONENT, 'cross(%s, %s) = %s', self, other, result)
        return result

    def __add__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self) -> 'Vector3':
        return Vector3(-self.x, -self.y, -self.z)

    def __mul__(self, factor):
        if not isgoodnum(factor):
            return NotImplemented
        return self.scale(factor)

    __rmul__ = __mul__

    ## rigid transforms about the origin
    ## ---------------------------------

    def rotate_x(self, radians) -> 'Vector3':
        """rotate about the X axis through the origin"""
        ang = require_finite(radians, 'radians')
        c = cos(ang)
        s = sin(ang)
        result = Vector3(self.x,
                         self.y*c - self.z*s,
                         self.y*s + self.z*c)
        diag.info(_COMPONENT, 'rotate_x(%f) of %s -> %s', ang, self, result)
        return result

    def rotate_y(self, radians) -> 'Vector3':
        """rotate about the Y axis through the origin"""
        ang = require_finite(radians, 'radians')
        c = cos(ang)
        s = sin(ang)
        result = Vector3(self.x*c + self.z*s,
                         self.y,
                         -self.x*s + self.z*c)
        diag.info(_COMPONENT, 'rotate_y(%f) of %s -> %s', ang, self, result)
        return result

    def rotate_z(self, radians) -> 'Vector3':
        """rotate about the Z axis through the origin"""
        ang = require_finite(radians, 'radians')
        c = cos(ang)
        s = sin(ang)
        result = Vector3(self.x*c - self.y*s,
                         self.x*s + self.y*c,
                         self.z)
        diag.info(_COMPONENT, 'rotate_z(%f) of %s -> %s', ang, self, result)
        return result

    def translate(self, dx, dy, dz) -> 'Vector3':
        ddx = require_finite(dx, 'dx')
        ddy = require_finite(dy, 'dy')
        ddz = require_finite(dz, 'dz')
        result = Vector3(self.x + ddx, self.y + ddy, self.z + ddz)
        diag.info(_COMPONENT, 'translate(%f, %f, %f) of %s -> %s', ddx, ddy, ddz, self, result)
        return result


__all__ = [
    'Vector3',
    'isgoodnum',
    'tofloat',
    'require_finite',
    'require_vector',
    'fmtnum',
]
