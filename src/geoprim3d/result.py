"""Success/failure values returned by the validating factories."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

from geoprim3d.errors import GeometryError

T = TypeVar('T')


@dataclass(frozen=True)
class Result(Generic[T]):
    """Either a constructed ``value`` or the ``error`` that prevented it."""

    value: Optional[T] = None
    error: Optional[GeometryError] = None

    @classmethod
    def success(cls, value: T) -> 'Result[T]':
        return cls(value=value)

    @classmethod
    def failure(cls, error: GeometryError) -> 'Result[T]':
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def __bool__(self) -> bool:
        return self.ok

    def unwrap(self) -> T:
        """Return the value, or raise the captured error."""

        if self.error is not None:
            raise self.error
        return self.value

    def unwrap_or(self, default: T) -> T:
        return default if self.error is not None else self.value


def attempt(fn: Callable[..., T], *args: Any, **kwargs: Any) -> Result[T]:
    """Call ``fn`` and capture a :class:`GeometryError` as a failed result.

    Any other exception propagates unchanged.
    """

    try:
        return Result.success(fn(*args, **kwargs))
    except GeometryError as err:
        return Result.failure(err)


__all__ = [
    'Result',
    'attempt',
]
