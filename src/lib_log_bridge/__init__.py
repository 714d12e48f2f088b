"""Public package surface of the logging bridge.

Application code talks to a :class:`LoggerPort` (``name``, ``begin_scope``,
``is_enabled``, ``log``) while records land in Python's hierarchical
:mod:`logging` backend, resolved by repository and logger name.
"""

from __future__ import annotations

from .adapters import (
    DEFAULT_REPOSITORY,
    BridgeLoggerProvider,
    LevelTranslatingAdapter,
    RepositoryNotFoundError,
    RichConsoleHandler,
    create_repository,
    resolve_logger,
)
from .application.ports import BackendLoggerPort, LoggerPort, LoggerResolver, MessageFormatter
from .domain import BackendLevel, NullScope, Severity, SeverityOutOfRangeError
from .lib_log_bridge import BridgeLoggerProxy, get, logdemo, summary_info

__all__ = [
    "BackendLevel",
    "BackendLoggerPort",
    "BridgeLoggerProvider",
    "BridgeLoggerProxy",
    "DEFAULT_REPOSITORY",
    "LevelTranslatingAdapter",
    "LoggerPort",
    "LoggerResolver",
    "MessageFormatter",
    "NullScope",
    "RepositoryNotFoundError",
    "RichConsoleHandler",
    "Severity",
    "SeverityOutOfRangeError",
    "create_repository",
    "get",
    "logdemo",
    "resolve_logger",
    "summary_info",
]
