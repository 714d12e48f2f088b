"""Caller-facing façade over the bridge adapters.

Purpose
-------
Offer an ergonomic entry point for host code that does not want to spell out
``log(severity, event_id, state, error, formatter)`` at every call site.

Contents
--------
* :class:`BridgeLoggerProxy` - per-severity helpers over a :class:`LoggerPort`.
* :func:`get` - proxy for a named logger in the configured repository.
* :func:`logdemo` - writes one record per severity to a Rich console.
* :func:`summary_info` - metadata banner used by the CLI.

System Role
-----------
Sits at the edge of the package: it wires configuration and adapters together
while the translation policy stays in
:mod:`lib_log_bridge.adapters.level_translating`.
"""

from __future__ import annotations

from typing import Any, Callable

from rich.console import Console

from .adapters.console.rich_console import RichConsoleHandler
from .adapters.level_translating import LevelTranslatingAdapter
from .adapters.stdlib_backend import StdlibRepositorySelector
from .application.ports.logger import LoggerPort
from .config import BridgeSettings
from .domain.levels import Severity
from .domain.scope import NullScope


def _render_message(state: Any, error: BaseException | None) -> str | None:
    """Formatter used by the proxy: the state already is the message."""
    return state


class BridgeLoggerProxy:
    """Per-severity convenience methods over a :class:`LoggerPort`.

    Examples
    --------
    >>> import logging
    >>> from lib_log_bridge.adapters.stdlib_backend import create_repository
    >>> _ = create_repository("docs-proxy", level=logging.INFO)
    >>> proxy = BridgeLoggerProxy(LevelTranslatingAdapter("docs-proxy", "svc"))
    >>> proxy.is_enabled(Severity.TRACE)
    False
    """

    def __init__(self, logger: LoggerPort) -> None:
        self._logger = logger

    @property
    def name(self) -> str:
        return self._logger.name

    @property
    def logger(self) -> LoggerPort:
        """Return the wrapped :class:`LoggerPort`."""
        return self._logger

    def is_enabled(self, severity: Severity) -> bool:
        return self._logger.is_enabled(severity)

    def begin_scope(self, state: Any) -> NullScope:
        return self._logger.begin_scope(state)

    def trace(self, message: str | None, *, error: BaseException | None = None, event_id: int = 0) -> None:
        self._log(Severity.TRACE, message, error, event_id)

    def debug(self, message: str | None, *, error: BaseException | None = None, event_id: int = 0) -> None:
        self._log(Severity.DEBUG, message, error, event_id)

    def information(self, message: str | None, *, error: BaseException | None = None, event_id: int = 0) -> None:
        self._log(Severity.INFORMATION, message, error, event_id)

    def warning(self, message: str | None, *, error: BaseException | None = None, event_id: int = 0) -> None:
        self._log(Severity.WARNING, message, error, event_id)

    def error(self, message: str | None, *, error: BaseException | None = None, event_id: int = 0) -> None:
        self._log(Severity.ERROR, message, error, event_id)

    def critical(self, message: str | None, *, error: BaseException | None = None, event_id: int = 0) -> None:
        self._log(Severity.CRITICAL, message, error, event_id)

    def _log(self, severity: Severity, message: str | None, error: BaseException | None, event_id: int) -> None:
        self._logger.log(severity, event_id, message, error, _render_message)


def get(name: str, *, repository: str | None = None) -> BridgeLoggerProxy:
    """Return a proxy for ``name`` resolved from ``repository``.

    ``repository`` defaults to :attr:`BridgeSettings.repository` as read from
    the environment.

    Raises
    ------
    RepositoryNotFoundError
        If the repository has not been created.
    """
    target = repository if repository is not None else BridgeSettings.from_env().repository
    return BridgeLoggerProxy(LevelTranslatingAdapter(target, name))


def _coerce_severity(level: str | Severity) -> Severity:
    if isinstance(level, Severity):
        return level
    return Severity.from_name(level)


def logdemo(
    *,
    theme: str = "classic",
    level: str | Severity = Severity.TRACE,
    console: Console | None = None,
    force_color: bool = False,
) -> dict[str, Any]:
    """Write one sample record per severity through the bridge.

    A throwaway ``"logdemo"`` repository is created in a private
    :class:`StdlibRepositorySelector` with a :class:`RichConsoleHandler`
    attached to its root logger, so repositories registered by the host are
    never touched. Records below ``level`` are filtered by the backend, which
    the returned payload reports per severity.

    Returns
    -------
    dict[str, Any]
        ``theme``, ``level``, ``logger`` name, and ``events``: one
        ``{"severity", "backend_level", "enabled"}`` entry per severity.

    Raises
    ------
    ValueError
        When ``theme`` or ``level`` is unknown.
    """
    threshold = _coerce_severity(level)
    handler = RichConsoleHandler(console=console, theme=theme, force_color=force_color)
    selector = StdlibRepositorySelector()
    root = selector.create_repository("logdemo")
    root.setLevel(threshold.backend_level.to_python_level())
    root.addHandler(handler)

    events: list[dict[str, Any]] = []
    try:
        proxy = BridgeLoggerProxy(LevelTranslatingAdapter("logdemo", "logdemo", resolver=selector))
        emitters: dict[Severity, Callable[[str], None]] = {
            Severity.TRACE: proxy.trace,
            Severity.DEBUG: proxy.debug,
            Severity.INFORMATION: proxy.information,
            Severity.WARNING: proxy.warning,
            Severity.ERROR: proxy.error,
            Severity.CRITICAL: proxy.critical,
        }
        for severity in Severity:
            enabled = proxy.is_enabled(severity)
            emitters[severity](f"[{handler.theme}] {severity.name.title()} message")
            events.append(
                {
                    "severity": severity.name.lower(),
                    "backend_level": severity.backend_level.name,
                    "enabled": enabled,
                }
            )
        try:
            raise RuntimeError("sample failure")
        except RuntimeError as exc:
            proxy.error("", error=exc)
    finally:
        root.removeHandler(handler)
        selector.remove_repository("logdemo")

    return {
        "theme": handler.theme,
        "level": threshold.name.lower(),
        "logger": proxy.name,
        "events": events,
    }


def summary_info() -> str:
    """Return the metadata banner used by the CLI entry point.

    Examples
    --------
    >>> "version" in summary_info()
    True
    """
    from . import __init__conf__

    lines: list[str] = []
    __init__conf__.print_info(writer=lines.append)
    return "".join(lines)


__all__ = ["BridgeLoggerProxy", "get", "logdemo", "summary_info"]
