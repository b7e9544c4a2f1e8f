"""Observation sink for geoprim3d.

The geometry modules never talk to a logging framework directly.  They
report conditions through :func:`notify`, which hands them to whichever
sink is active in the current context.  A sink is any callable with the
signature ``sink(severity, component, message, *args)`` where
``message`` is a %-style template and ``args`` its (lazily formatted)
arguments.

The default sink forwards to the standard :mod:`logging` module, one
logger per emitting module.  Tests and applications can swap it out::

    with use_sink(RecordingSink()) as sink:
        Vector3(0, 0, 0).normalize()
    sink.messages(Severity.SEVERE)
"""

from __future__ import annotations

import contextlib
import logging
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Iterator, List, Optional


class Severity(Enum):
    """How serious a reported condition is."""

    INFO = 'info'
    WARNING = 'warning'
    SEVERE = 'severe'


DiagnosticSink = Callable[..., None]

_LEVELS = {
    Severity.INFO: logging.INFO,
    Severity.WARNING: logging.WARNING,
    Severity.SEVERE: logging.ERROR,
}


class LoggingSink:
    """Forward diagnostics to :mod:`logging`, one logger per component."""

    def __call__(self, severity: Severity, component: str, message: str, *args: Any) -> None:
        logger = logging.getLogger(component)
        level = _LEVELS[severity]
        if logger.isEnabledFor(level):
            logger.log(level, message, *args)

    def __repr__(self) -> str:
        return 'LoggingSink()'


class NullSink:
    """Discard every diagnostic."""

    def __call__(self, severity: Severity, component: str, message: str, *args: Any) -> None:
        return None

    def __repr__(self) -> str:
        return 'NullSink()'


@dataclass(frozen=True)
class Diagnostic:
    severity: Severity
    component: str
    message: str


@dataclass
class RecordingSink:
    """Keep every diagnostic in memory, rendered."""

    records: List[Diagnostic] = field(default_factory=list)

    def __call__(self, severity: Severity, component: str, message: str, *args: Any) -> None:
        text = message % args if args else message
        self.records.append(Diagnostic(severity, component, text))

    def messages(self, severity: Optional[Severity] = None) -> List[str]:
        """Rendered messages, optionally restricted to one severity."""

        return [rec.message for rec in self.records
                if severity is None or rec.severity is severity]

    def clear(self) -> None:
        self.records.clear()


_DEFAULT_SINK = LoggingSink()
_current_sink: ContextVar[DiagnosticSink] = ContextVar('geoprim3d_sink', default=_DEFAULT_SINK)


def get_sink() -> DiagnosticSink:
    """Return the sink active in the current context."""

    return _current_sink.get()


def set_sink(sink: DiagnosticSink) -> Token:
    """Install ``sink`` for the current context and return a reset token."""

    if not callable(sink):
        raise TypeError('diagnostic sink must be callable, got {!r}'.format(sink))
    return _current_sink.set(sink)


def reset_sink(token: Token) -> None:
    """Restore the sink that was active before ``set_sink`` returned ``token``."""

    _current_sink.reset(token)


@contextlib.contextmanager
def use_sink(sink: DiagnosticSink) -> Iterator[DiagnosticSink]:
    """Temporarily route diagnostics to ``sink``."""

    token = set_sink(sink)
    try:
        yield sink
    finally:
        reset_sink(token)


def notify(severity: Severity, component: str, message: str, *args: Any) -> None:
    """Hand one diagnostic to the active sink."""

    _current_sink.get()(severity, component, message, *args)


def info(component: str, message: str, *args: Any) -> None:
    """Report normal successful operation."""
    notify(Severity.INFO, component, message, *args)


def warning(component: str, message: str, *args: Any) -> None:
    """Report a numerically risky but non-fatal condition."""
    notify(Severity.WARNING, component, message, *args)


def severe(component: str, message: str, *args: Any) -> None:
    """Report a failure about to be raised."""
    notify(Severity.SEVERE, component, message, *args)


__all__ = [
    'Severity',
    'DiagnosticSink',
    'Diagnostic',
    'LoggingSink',
    'NullSink',
    'RecordingSink',
    'get_sink',
    'set_sink',
    'reset_sink',
    'use_sink',
    'notify',
    'info',
    'warning',
    'severe',
]
