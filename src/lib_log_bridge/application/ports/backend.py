"""Backend port describing the hierarchical logging engine we write into.

Purpose
-------
Narrow the backend down to the capabilities the bridge actually uses: a
resolved name, five enablement flags, and five emit methods.

Contents
--------
* :class:`BackendLoggerPort` - per-name logger handle.
* :class:`LoggerResolver` - ``(repository, name) -> handle`` lookup.

System Role
-----------
Keeps :mod:`lib_log_bridge.adapters.level_translating` independent of the
concrete engine so tests can substitute recording doubles.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class BackendLoggerPort(Protocol):
    """Named logger handle resolved from a backend repository.

    Examples
    --------
    >>> class Silent:
    ...     name = "svc"
    ...     is_fatal_enabled = is_error_enabled = is_warn_enabled = False
    ...     is_info_enabled = is_debug_enabled = False
    ...     def fatal(self, message, error=None): pass
    ...     def error(self, message, error=None): pass
    ...     def warn(self, message, error=None): pass
    ...     def info(self, message, error=None): pass
    ...     def debug(self, message, error=None): pass
    >>> isinstance(Silent(), BackendLoggerPort)
    True
    """

    __slots__ = ()

    @property
    def name(self) -> str: ...

    @property
    def is_fatal_enabled(self) -> bool: ...

    @property
    def is_error_enabled(self) -> bool: ...

    @property
    def is_warn_enabled(self) -> bool: ...

    @property
    def is_info_enabled(self) -> bool: ...

    @property
    def is_debug_enabled(self) -> bool: ...

    def fatal(self, message: str | None, error: BaseException | None = None) -> None: ...

    def error(self, message: str | None, error: BaseException | None = None) -> None: ...

    def warn(self, message: str | None, error: BaseException | None = None) -> None: ...

    def info(self, message: str | None, error: BaseException | None = None) -> None: ...

    def debug(self, message: str | None, error: BaseException | None = None) -> None: ...


@runtime_checkable
class LoggerResolver(Protocol):
    """Resolve a backend logger handle by repository and logical name."""

    def __call__(self, repository: str, name: str) -> BackendLoggerPort: ...


__all__ = ["BackendLoggerPort", "LoggerResolver"]
