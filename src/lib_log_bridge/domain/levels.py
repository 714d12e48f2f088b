"""Severity abstraction and its translation onto the backend level set.

Purpose
-------
Give callers a closed, ordered set of severities and pin down, in one table,
which backend level each of them lands on.

Contents
--------
* :class:`Severity` - caller-facing levels (``TRACE`` .. ``CRITICAL``).
* :class:`BackendLevel` - the five levels the hierarchical backend knows.
* :class:`SeverityOutOfRangeError` - raised for values outside :class:`Severity`.
* :func:`to_backend_level` - strict translation used by the adapters.

System Role
-----------
The only place where severities are mapped. ``TRACE`` and ``DEBUG`` both land
on :attr:`BackendLevel.DEBUG` because the backend has nothing finer.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Mapping


class SeverityOutOfRangeError(ValueError):
    """Raised when a value is not one of the recognised severities."""

    def __init__(self, severity: object) -> None:
        super().__init__(f"Severity out of range: {severity!r}")
        self.severity = severity


class BackendLevel(Enum):
    """Levels exposed by the backend, ordered from most to least severe."""

    FATAL = logging.CRITICAL
    ERROR = logging.ERROR
    WARN = logging.WARNING
    INFO = logging.INFO
    DEBUG = logging.DEBUG

    def to_python_level(self) -> int:
        """Return the :mod:`logging` constant matching this level."""

        return self.value


class Severity(Enum):
    """Severities used by application code, ordered from least to most severe."""

    TRACE = 0
    DEBUG = 1
    INFORMATION = 2
    WARNING = 3
    ERROR = 4
    CRITICAL = 5

    @property
    def backend_level(self) -> BackendLevel:
        """Return the backend level this severity is written at."""

        return _BACKEND_TABLE[self]

    @classmethod
    def from_name(cls, name: str) -> "Severity":
        normalized = name.strip().upper()
        try:
            return cls[normalized]
        except KeyError as exc:
            raise SeverityOutOfRangeError(name) from exc

    @classmethod
    def from_numeric(cls, value: int) -> "Severity":
        """Return the :class:`Severity` whose ordinal is ``value``."""
        try:
            return cls(value)
        except ValueError as exc:
            raise SeverityOutOfRangeError(value) from exc


_BACKEND_TABLE: Mapping[Severity, BackendLevel] = {
    Severity.CRITICAL: BackendLevel.FATAL,
    Severity.DEBUG: BackendLevel.DEBUG,
    Severity.TRACE: BackendLevel.DEBUG,
    Severity.ERROR: BackendLevel.ERROR,
    Severity.INFORMATION: BackendLevel.INFO,
    Severity.WARNING: BackendLevel.WARN,
}
# Every Severity member must appear exactly once.


def to_backend_level(severity: object) -> BackendLevel:
    """Translate ``severity`` or raise :class:`SeverityOutOfRangeError`.

    Only :class:`Severity` members are accepted; plain integers and strings
    are rejected even when they happen to match an ordinal or a name.

    Examples
    --------
    >>> to_backend_level(Severity.TRACE)
    <BackendLevel.DEBUG: 10>
    >>> to_backend_level(6)
    Traceback (most recent call last):
    ...
    lib_log_bridge.domain.levels.SeverityOutOfRangeError: Severity out of range: 6
    """
    if not isinstance(severity, Severity):
        raise SeverityOutOfRangeError(severity)
    return _BACKEND_TABLE[severity]


__all__ = ["BackendLevel", "Severity", "SeverityOutOfRangeError", "to_backend_level"]
