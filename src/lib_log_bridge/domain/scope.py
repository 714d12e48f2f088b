"""No-op logical scope returned by the bridge adapters.

The backend has no notion of nested contextual scopes, so the scope token
accepted by callers carries nothing and releasing it does nothing.
"""

from __future__ import annotations

from types import TracebackType


class NullScope:
    """Scope token whose release has no observable effect."""

    __slots__ = ()

    def close(self) -> None:
        """Release the scope (no-op)."""

    def __enter__(self) -> "NullScope":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        return "NullScope()"


NULL_SCOPE = NullScope()


__all__ = ["NULL_SCOPE", "NullScope"]
