"""Rich-powered :class:`logging.Handler` for bridge repositories.

Purpose
-------
Give the stdlib backend a human-facing sink so records written through the
bridge can be seen on a terminal, styled per backend level.

Contents
--------
* :data:`CONSOLE_STYLE_THEMES` - built-in palettes keyed by theme name.
* :class:`RichConsoleHandler` - handler attached by :func:`lib_log_bridge.logdemo`.

System Role
-----------
Output routing belongs to the backend; this handler is just one destination a
host may attach to a repository's root logger.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Mapping

from rich.console import Console

from lib_log_bridge.domain.levels import BackendLevel

CONSOLE_STYLE_THEMES: dict[str, dict[str, str]] = {
    "classic": {
        "DEBUG": "dim",
        "INFO": "cyan",
        "WARN": "yellow",
        "ERROR": "red",
        "FATAL": "bold red",
    },
    "dark": {
        "DEBUG": "grey42",
        "INFO": "bright_white",
        "WARN": "bold gold3",
        "ERROR": "bold red3",
        "FATAL": "bold white on red3",
    },
    "neon": {
        "DEBUG": "#00ffd5",
        "INFO": "#39ff14",
        "WARN": "#fff700",
        "ERROR": "#ff073a",
        "FATAL": "bold #ff00ff on black",
    },
}
"""Palettes keyed by theme name, then by :class:`BackendLevel` name."""

_ICON_TABLE: Mapping[BackendLevel, str] = {
    BackendLevel.DEBUG: "🐞",
    BackendLevel.INFO: "ℹ",
    BackendLevel.WARN: "⚠",
    BackendLevel.ERROR: "✖",
    BackendLevel.FATAL: "☠",
}


def _backend_level(levelno: int) -> BackendLevel:
    """Return the backend level covering ``levelno`` (custom levels round down)."""
    for level in BackendLevel:
        if levelno >= level.value:
            return level
    return BackendLevel.DEBUG


class RichConsoleHandler(logging.Handler):
    """Print log records as single styled lines using Rich."""

    def __init__(
        self,
        *,
        console: Console | None = None,
        theme: str = "classic",
        force_color: bool = False,
        no_color: bool = False,
        level: int = logging.NOTSET,
    ) -> None:
        super().__init__(level)
        key = theme.strip().lower()
        try:
            palette = CONSOLE_STYLE_THEMES[key]
        except KeyError as exc:
            raise ValueError(f"Unknown console theme: {theme!r}") from exc
        if console is not None:
            self._console = console
        else:
            self._console = Console(force_terminal=force_color, no_color=no_color)
        self._no_color = no_color
        self._theme = key
        self._style_map = {BackendLevel[name]: style for name, style in palette.items()}
        self._exception_formatter = logging.Formatter()

    @property
    def theme(self) -> str:
        return self._theme

    @property
    def console(self) -> Console:
        return self._console

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = _backend_level(record.levelno)
            style = "" if self._no_color else self._style_map.get(level, "")
            self._console.print(self.format_line(record), style=style, markup=False, highlight=False)
            if record.exc_info:
                text = self._exception_formatter.formatException(record.exc_info)
                self._console.print(text, markup=False, highlight=False)
        except Exception:
            self.handleError(record)

    @staticmethod
    def format_line(record: logging.LogRecord) -> str:
        """Return the console line for ``record``.

        Examples
        --------
        >>> record = logging.LogRecord("svc", logging.WARNING, __file__, 1, "disk low", None, None)
        >>> record.created = 0.0
        >>> RichConsoleHandler.format_line(record)
        '1970-01-01T00:00:00+00:00 ⚠     WARN svc - disk low'
        """
        level = _backend_level(record.levelno)
        timestamp = datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat()
        return f"{timestamp} {_ICON_TABLE[level]} {level.name:>8} {record.name} - {record.getMessage()}"


__all__ = ["CONSOLE_STYLE_THEMES", "RichConsoleHandler"]
