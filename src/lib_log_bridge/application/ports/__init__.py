"""Protocols at the boundary between callers, the bridge, and the backend."""

from __future__ import annotations

from .backend import BackendLoggerPort, LoggerResolver
from .logger import LoggerPort, MessageFormatter

__all__ = ["BackendLoggerPort", "LoggerPort", "LoggerResolver", "MessageFormatter"]
