"""Environment-driven settings and optional ``.env`` loading.

Purpose
-------
Resolve the few knobs the bridge itself owns (which repository loggers are
resolved from by default) from the environment, optionally seeded from the
nearest ``.env`` file.

Contents
--------
* :data:`DOTENV_ENV_VAR` / :data:`REPOSITORY_ENV_VAR` - recognised variables.
* :func:`should_use_dotenv` - CLI flag vs environment toggle precedence.
* :func:`enable_dotenv` - load the nearest ``.env`` without overriding.
* :class:`BridgeSettings` - resolved settings snapshot.

System Role
-----------
Backend configuration (handlers, levels, layouts) is deliberately absent; only
the repository name reaches the backend.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from dotenv import find_dotenv, load_dotenv

from lib_log_bridge.adapters.stdlib_backend import DEFAULT_REPOSITORY

DOTENV_ENV_VAR = "LIB_LOG_BRIDGE_USE_DOTENV"
REPOSITORY_ENV_VAR = "LOG_BRIDGE_REPOSITORY"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}

_DOTENV_PATH: Path | None = None


def _env_bool(value: str | None, default: bool) -> bool:
    """Interpret ``1/true/yes/on`` style strings.

    Examples
    --------
    >>> _env_bool("ON", False), _env_bool("0", True), _env_bool(None, True)
    (True, False, True)
    """
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in _TRUTHY:
        return True
    if normalized in _FALSY:
        return False
    return default


def should_use_dotenv(*, explicit: bool | None, env_value: str | None) -> bool:
    """Return whether ``.env`` loading is requested.

    An explicit CLI flag wins; otherwise the environment toggle decides.
    """
    if explicit is not None:
        return explicit
    return _env_bool(env_value, False)


def enable_dotenv() -> Path | None:
    """Load the nearest ``.env`` (searching upwards from the working directory).

    Existing environment variables keep precedence. Returns the resolved path
    of the loaded file, or ``None`` when none was found. Subsequent calls
    return the first result without reloading.
    """
    global _DOTENV_PATH
    if _DOTENV_PATH is not None:
        return _DOTENV_PATH
    found = find_dotenv(usecwd=True)
    if not found:
        return None
    path = Path(found).resolve()
    load_dotenv(path, override=False)
    _DOTENV_PATH = path
    return path


def _reset_dotenv_state_for_testing() -> None:
    global _DOTENV_PATH
    _DOTENV_PATH = None


@dataclass(frozen=True)
class BridgeSettings:
    """Settings snapshot used by :func:`lib_log_bridge.get` and the CLI."""

    repository: str = DEFAULT_REPOSITORY

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "BridgeSettings":
        """Build settings from ``environ`` (defaults to :data:`os.environ`).

        Examples
        --------
        >>> BridgeSettings.from_env({"LOG_BRIDGE_REPOSITORY": " orders "}).repository
        'orders'
        >>> BridgeSettings.from_env({}).repository
        'default'
        """
        source = os.environ if environ is None else environ
        repository = (source.get(REPOSITORY_ENV_VAR) or "").strip()
        return cls(repository=repository or DEFAULT_REPOSITORY)


__all__ = [
    "BridgeSettings",
    "DOTENV_ENV_VAR",
    "REPOSITORY_ENV_VAR",
    "enable_dotenv",
    "should_use_dotenv",
]
