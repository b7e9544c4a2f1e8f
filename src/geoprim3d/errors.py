"""Exception types raised by geoprim3d."""

from __future__ import annotations


class GeometryError(ValueError):
    """Base class for every error raised by geoprim3d."""


class InvalidArgument(GeometryError):
    """A numeric input was non-finite, missing, of the wrong type or out of range."""


class DegenerateState(GeometryError):
    """An operation needed a non-zero vector or line direction and did not get one."""


__all__ = [
    'GeometryError',
    'InvalidArgument',
    'DegenerateState',
]
