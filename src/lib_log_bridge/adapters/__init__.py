"""Adapters binding the bridge to the stdlib backend and to terminals."""

from __future__ import annotations

from .console import CONSOLE_STYLE_THEMES, RichConsoleHandler
from .level_translating import LevelTranslatingAdapter
from .provider import BridgeLoggerProvider
from .stdlib_backend import (
    DEFAULT_REPOSITORY,
    RepositoryNotFoundError,
    StdlibLoggerHandle,
    StdlibRepositorySelector,
    create_repository,
    default_selector,
    resolve_logger,
)

__all__ = [
    "BridgeLoggerProvider",
    "CONSOLE_STYLE_THEMES",
    "DEFAULT_REPOSITORY",
    "LevelTranslatingAdapter",
    "RepositoryNotFoundError",
    "RichConsoleHandler",
    "StdlibLoggerHandle",
    "StdlibRepositorySelector",
    "create_repository",
    "default_selector",
    "resolve_logger",
]
