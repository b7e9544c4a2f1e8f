# -*- coding: utf-8 -*-
"""Immutable 3D points/vectors, infinite lines and cubes."""

import logging
from importlib.metadata import PackageNotFoundError, version

from geoprim3d.cube import Cube
from geoprim3d.diagnostics import (
    LoggingSink,
    NullSink,
    RecordingSink,
    Severity,
    get_sink,
    set_sink,
    use_sink,
)
from geoprim3d.errors import DegenerateState, GeometryError, InvalidArgument
from geoprim3d.line import Line
from geoprim3d.result import Result, attempt
from geoprim3d.vector import Vector3

try:
    __version__ = version("geoprim3d")
except PackageNotFoundError:  # pragma: no cover - handled when package not installed
    __version__ = "unknown"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Vector3",
    "Line",
    "Cube",
    "Result",
    "attempt",
    "GeometryError",
    "InvalidArgument",
    "DegenerateState",
    "Severity",
    "LoggingSink",
    "NullSink",
    "RecordingSink",
    "get_sink",
    "set_sink",
    "use_sink",
    "__version__",
]
