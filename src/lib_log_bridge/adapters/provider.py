"""Provider handing out one bridge adapter per logger name.

Host applications register a provider once per repository and ask it for a
logger per component. Adapters are cached so the backend lookup happens once
per name; disposing the provider releases every adapter it created.
"""

from __future__ import annotations

import logging
from threading import RLock
from types import TracebackType

from lib_log_bridge.application.ports.backend import LoggerResolver

from .level_translating import LevelTranslatingAdapter
from .stdlib_backend import DEFAULT_REPOSITORY

LOGGER = logging.getLogger(__name__)


class BridgeLoggerProvider:
    """Create and cache :class:`LevelTranslatingAdapter` instances by name."""

    def __init__(self, repository: str = DEFAULT_REPOSITORY, *, resolver: LoggerResolver | None = None) -> None:
        self._repository = repository
        self._resolver = resolver
        self._lock = RLock()
        self._loggers: dict[str, LevelTranslatingAdapter] = {}
        self._disposed = False

    @property
    def repository(self) -> str:
        return self._repository

    @property
    def disposed(self) -> bool:
        return self._disposed

    def create_logger(self, name: str) -> LevelTranslatingAdapter:
        """Return the cached adapter for ``name``, creating it on first use.

        Raises
        ------
        RuntimeError
            When the provider has already been disposed.
        """
        with self._lock:
            if self._disposed:
                raise RuntimeError("BridgeLoggerProvider has been disposed")
            adapter = self._loggers.get(name)
            if adapter is None:
                adapter = LevelTranslatingAdapter(self._repository, name, resolver=self._resolver)
                self._loggers[name] = adapter
                LOGGER.debug("Created bridge logger %r in repository %r", name, self._repository)
            return adapter

    def dispose(self) -> None:
        """Release all cached adapters; repeated calls are harmless."""
        with self._lock:
            count = len(self._loggers)
            self._loggers.clear()
            self._disposed = True
        LOGGER.debug("Disposed provider for repository %r (%d loggers released)", self._repository, count)

    def __len__(self) -> int:
        with self._lock:
            return len(self._loggers)

    def __enter__(self) -> "BridgeLoggerProvider":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.dispose()


__all__ = ["BridgeLoggerProvider"]
