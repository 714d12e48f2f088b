"""Standard-library :mod:`logging` binding for :class:`BackendLoggerPort`.

Purpose
-------
Use Python's own hierarchical logging engine as the backend. Named
repositories are modelled as independent :class:`logging.Manager` hierarchies,
each with its own root logger, so two repositories never share handlers or
levels.

Contents
--------
* :data:`DEFAULT_REPOSITORY` - name under which the process-wide hierarchy is
  registered.
* :class:`RepositoryNotFoundError` - raised for unknown repository names.
* :class:`StdlibLoggerHandle` - adapter from :class:`logging.Logger` to the port.
* :class:`StdlibRepositorySelector` - thread-safe repository registry.
* :func:`resolve_logger` / :func:`create_repository` - helpers bound to the
  shared default selector.

System Role
-----------
Default resolver of :class:`lib_log_bridge.adapters.LevelTranslatingAdapter`.
Output routing and formatting stay with whatever handlers the host attaches
to the repository's loggers.
"""

from __future__ import annotations

import logging
import sys
from threading import RLock
from types import FrameType

from lib_log_bridge.application.ports.backend import BackendLoggerPort
from lib_log_bridge.domain.levels import BackendLevel

DEFAULT_REPOSITORY = "default"

LOGGER = logging.getLogger(__name__)

_PACKAGE = __name__.partition(".")[0]


class RepositoryNotFoundError(LookupError):
    """Raised when a repository name has not been registered."""

    def __init__(self, repository: str) -> None:
        super().__init__(f"Logger repository {repository!r} is not defined")
        self.repository = repository


def _is_bridge_frame(frame: FrameType) -> bool:
    module = frame.f_globals.get("__name__", "")
    return module == _PACKAGE or module.startswith(_PACKAGE + ".")


def _caller_stacklevel() -> int:
    """Return the ``stacklevel`` that points at the first frame outside the package.

    Level ``1`` is the frame that called this helper, matching what
    :meth:`logging.Logger.log` expects when called from that same frame.
    """
    frame: FrameType | None = sys._getframe(1)
    level = 1
    while frame is not None and _is_bridge_frame(frame):
        frame = frame.f_back
        level += 1
    return level


class StdlibLoggerHandle(BackendLoggerPort):
    """Expose a :class:`logging.Logger` through :class:`BackendLoggerPort`.

    Messages are handed to :meth:`logging.Logger.log` without arguments so a
    literal ``%`` in pre-rendered text is never interpreted. Records carry the
    call site of the first caller outside ``lib_log_bridge``, so ``%(funcName)s``
    and ``%(lineno)d`` name host code rather than this module.

    Examples
    --------
    >>> handle = StdlibLoggerHandle(logging.getLogger("docs.handle"))
    >>> handle.name
    'docs.handle'
    """

    __slots__ = ("_logger",)

    def __init__(self, logger: logging.Logger) -> None:
        self._logger = logger

    @property
    def logger(self) -> logging.Logger:
        """Return the wrapped :class:`logging.Logger`."""

        return self._logger

    @property
    def name(self) -> str:
        return self._logger.name

    @property
    def is_fatal_enabled(self) -> bool:
        return self._logger.isEnabledFor(BackendLevel.FATAL.to_python_level())

    @property
    def is_error_enabled(self) -> bool:
        return self._logger.isEnabledFor(BackendLevel.ERROR.to_python_level())

    @property
    def is_warn_enabled(self) -> bool:
        return self._logger.isEnabledFor(BackendLevel.WARN.to_python_level())

    @property
    def is_info_enabled(self) -> bool:
        return self._logger.isEnabledFor(BackendLevel.INFO.to_python_level())

    @property
    def is_debug_enabled(self) -> bool:
        return self._logger.isEnabledFor(BackendLevel.DEBUG.to_python_level())

    def fatal(self, message: str | None, error: BaseException | None = None) -> None:
        self._emit(BackendLevel.FATAL, message, error)

    def error(self, message: str | None, error: BaseException | None = None) -> None:
        self._emit(BackendLevel.ERROR, message, error)

    def warn(self, message: str | None, error: BaseException | None = None) -> None:
        self._emit(BackendLevel.WARN, message, error)

    def info(self, message: str | None, error: BaseException | None = None) -> None:
        self._emit(BackendLevel.INFO, message, error)

    def debug(self, message: str | None, error: BaseException | None = None) -> None:
        self._emit(BackendLevel.DEBUG, message, error)

    def _emit(self, level: BackendLevel, message: str | None, error: BaseException | None) -> None:
        text = message if message is not None else ""
        self._logger.log(level.to_python_level(), text, exc_info=error, stacklevel=_caller_stacklevel())

    def __repr__(self) -> str:
        return f"StdlibLoggerHandle({self._logger.name!r})"


class StdlibRepositorySelector:
    """Registry mapping repository names to isolated logger hierarchies."""

    def __init__(self) -> None:
        self._lock = RLock()
        self._managers: dict[str, logging.Manager] = {DEFAULT_REPOSITORY: logging.root.manager}

    def create_repository(self, repository: str, *, level: int = logging.WARNING) -> logging.Logger:
        """Register ``repository`` and return its root logger.

        Calling it again for an existing name returns the existing root and
        leaves its level untouched.
        """
        with self._lock:
            manager = self._managers.get(repository)
            if manager is None:
                root = logging.RootLogger(level)
                manager = logging.Manager(root)
                root.manager = manager
                self._managers[repository] = manager
                LOGGER.debug("Created logger repository %r", repository)
            return manager.root

    def get_repository(self, repository: str) -> logging.Manager:
        with self._lock:
            try:
                return self._managers[repository]
            except KeyError as exc:
                raise RepositoryNotFoundError(repository) from exc

    def has_repository(self, repository: str) -> bool:
        with self._lock:
            return repository in self._managers

    def repositories(self) -> tuple[str, ...]:
        with self._lock:
            return tuple(sorted(self._managers))

    def remove_repository(self, repository: str) -> None:
        """Forget ``repository``; the default hierarchy cannot be removed."""
        if repository == DEFAULT_REPOSITORY:
            raise ValueError("The default logger repository cannot be removed")
        with self._lock:
            if self._managers.pop(repository, None) is None:
                raise RepositoryNotFoundError(repository)
        LOGGER.debug("Removed logger repository %r", repository)

    def resolve(self, repository: str, name: str) -> StdlibLoggerHandle:
        """Return the handle for ``name`` inside ``repository``.

        An empty name resolves to the repository's root logger, whose name is
        ``"root"``.
        """
        manager = self.get_repository(repository)
        logger = manager.root if not name else manager.getLogger(name)
        return StdlibLoggerHandle(logger)

    __call__ = resolve


_DEFAULT_SELECTOR = StdlibRepositorySelector()


def default_selector() -> StdlibRepositorySelector:
    """Return the process-wide repository selector."""

    return _DEFAULT_SELECTOR


def create_repository(repository: str, *, level: int = logging.WARNING) -> logging.Logger:
    return _DEFAULT_SELECTOR.create_repository(repository, level=level)


def resolve_logger(repository: str, name: str) -> StdlibLoggerHandle:
    """Resolve ``name`` in ``repository`` using the process-wide selector."""

    return _DEFAULT_SELECTOR.resolve(repository, name)


__all__ = [
    "DEFAULT_REPOSITORY",
    "RepositoryNotFoundError",
    "StdlibLoggerHandle",
    "StdlibRepositorySelector",
    "create_repository",
    "default_selector",
    "resolve_logger",
]
