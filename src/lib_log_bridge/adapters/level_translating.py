"""Adapter translating the generic logging contract onto a backend handle.

Purpose
-------
Let code written against :class:`~lib_log_bridge.application.ports.LoggerPort`
write through a hierarchical backend without knowing it exists.

Contents
--------
* :class:`LevelTranslatingAdapter` - concrete :class:`LoggerPort`.
* ``_ENABLED_CHECKS`` / ``_EMITTERS`` - backend level to handle capability.

System Role
-----------
Checks enablement before rendering so disabled severities never pay for
message construction, and forwards attached errors even when the rendered
message is empty. Holds nothing but the resolved handle; concurrent use is as
safe as the handle itself.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping

from lib_log_bridge.application.ports.backend import BackendLoggerPort, LoggerResolver
from lib_log_bridge.application.ports.logger import LoggerPort, MessageFormatter
from lib_log_bridge.domain.levels import BackendLevel, Severity, to_backend_level
from lib_log_bridge.domain.scope import NULL_SCOPE, NullScope

from .stdlib_backend import resolve_logger

_ENABLED_CHECKS: Mapping[BackendLevel, Callable[[BackendLoggerPort], bool]] = {
    BackendLevel.FATAL: lambda handle: handle.is_fatal_enabled,
    BackendLevel.ERROR: lambda handle: handle.is_error_enabled,
    BackendLevel.WARN: lambda handle: handle.is_warn_enabled,
    BackendLevel.INFO: lambda handle: handle.is_info_enabled,
    BackendLevel.DEBUG: lambda handle: handle.is_debug_enabled,
}

_EMITTERS: Mapping[BackendLevel, Callable[[BackendLoggerPort], Callable[[str | None, BaseException | None], None]]] = {
    BackendLevel.FATAL: lambda handle: handle.fatal,
    BackendLevel.ERROR: lambda handle: handle.error,
    BackendLevel.WARN: lambda handle: handle.warn,
    BackendLevel.INFO: lambda handle: handle.info,
    BackendLevel.DEBUG: lambda handle: handle.debug,
}


class LevelTranslatingAdapter(LoggerPort):
    """Write generic log calls through a named backend logger.

    Parameters
    ----------
    repository:
        Backend repository the logger is resolved from.
    name:
        Logical logger name, usually the category of the calling component.
    resolver:
        ``(repository, name) -> handle`` lookup; defaults to the stdlib
        binding. Resolution errors propagate unchanged.

    Examples
    --------
    >>> import logging
    >>> from lib_log_bridge.adapters.stdlib_backend import create_repository
    >>> root = create_repository("docs-adapter", level=logging.INFO)
    >>> adapter = LevelTranslatingAdapter("docs-adapter", "svc.http")
    >>> adapter.name
    'svc.http'
    >>> adapter.is_enabled(Severity.DEBUG), adapter.is_enabled(Severity.WARNING)
    (False, True)
    """

    __slots__ = ("_handle",)

    def __init__(self, repository: str, name: str, *, resolver: LoggerResolver | None = None) -> None:
        resolve = resolver if resolver is not None else resolve_logger
        self._handle = resolve(repository, name)

    @property
    def name(self) -> str:
        """Return the name reported by the backend handle."""

        return self._handle.name

    @property
    def handle(self) -> BackendLoggerPort:
        """Return the backend handle resolved at construction."""

        return self._handle

    def begin_scope(self, state: Any) -> NullScope:
        """Return a scope token that does nothing; ``state`` is discarded."""

        return NULL_SCOPE

    def is_enabled(self, severity: Severity) -> bool:
        """Return the backend's enablement flag for ``severity``.

        Raises
        ------
        SeverityOutOfRangeError
            When ``severity`` is not a :class:`Severity` member.
        """
        return bool(_ENABLED_CHECKS[to_backend_level(severity)](self._handle))

    def log(
        self,
        severity: Severity,
        event_id: int,
        state: Any,
        error: BaseException | None,
        formatter: MessageFormatter | None,
    ) -> None:
        """Render ``state`` with ``formatter`` and forward it with ``error``.

        Nothing happens when ``severity`` is disabled: the formatter is not
        called and a missing formatter goes unnoticed. A record with neither
        message text nor an error is dropped. ``event_id`` is accepted for
        contract compatibility and not forwarded.

        Raises
        ------
        SeverityOutOfRangeError
            When ``severity`` is not a :class:`Severity` member.
        TypeError
            When ``severity`` is enabled and ``formatter`` is ``None``.
        """
        level = to_backend_level(severity)
        if not _ENABLED_CHECKS[level](self._handle):
            return

        if formatter is None:
            raise TypeError("formatter must not be None")

        message = formatter(state, error)
        if not message and error is None:
            return

        _EMITTERS[level](self._handle)(message, error)

    def __repr__(self) -> str:
        return f"LevelTranslatingAdapter({self._handle.name!r})"


__all__ = ["LevelTranslatingAdapter"]
