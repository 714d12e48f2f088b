"""Domain value objects shared by the bridge adapters."""

from __future__ import annotations

from .levels import BackendLevel, Severity, SeverityOutOfRangeError, to_backend_level
from .scope import NULL_SCOPE, NullScope

__all__ = [
    "BackendLevel",
    "NULL_SCOPE",
    "NullScope",
    "Severity",
    "SeverityOutOfRangeError",
    "to_backend_level",
]
