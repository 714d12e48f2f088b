"""Generic logging contract consumed by application code."""

from __future__ import annotations

from typing import Any, Callable, Optional, Protocol, runtime_checkable

from lib_log_bridge.domain.levels import Severity
from lib_log_bridge.domain.scope import NullScope

MessageFormatter = Callable[[Any, Optional[BaseException]], Optional[str]]
"""Renders ``(state, error)`` into the message text handed to the backend."""


@runtime_checkable
class LoggerPort(Protocol):
    """Severity-leveled logger as seen by callers."""

    __slots__ = ()

    @property
    def name(self) -> str: ...

    def begin_scope(self, state: Any) -> NullScope:
        """Open a logical operation scope."""

    def is_enabled(self, severity: Severity) -> bool:
        """Return ``True`` when records at ``severity`` would be written."""

    def log(
        self,
        severity: Severity,
        event_id: int,
        state: Any,
        error: BaseException | None,
        formatter: MessageFormatter | None,
    ) -> None:
        """Render and forward a single record."""


__all__ = ["LoggerPort", "MessageFormatter"]
