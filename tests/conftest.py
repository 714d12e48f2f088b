from __future__ import annotations

import logging
from io import StringIO
from typing import Iterator
from uuid import uuid4

import pytest
from rich.console import Console

from lib_log_bridge.adapters.stdlib_backend import StdlibRepositorySelector


class RecordingHandle:
    """Backend double recording enablement queries and emit calls."""

    def __init__(self, name: str = "tests", **enabled: bool) -> None:
        self._name = name
        self.flags = {level: True for level in ("fatal", "error", "warn", "info", "debug")}
        self.flags.update(enabled)
        self.queries: list[str] = []
        self.calls: list[tuple[str, str | None, BaseException | None]] = []

    @property
    def name(self) -> str:
        return self._name

    def _query(self, level: str) -> bool:
        self.queries.append(level)
        return self.flags[level]

    @property
    def is_fatal_enabled(self) -> bool:
        return self._query("fatal")

    @property
    def is_error_enabled(self) -> bool:
        return self._query("error")

    @property
    def is_warn_enabled(self) -> bool:
        return self._query("warn")

    @property
    def is_info_enabled(self) -> bool:
        return self._query("info")

    @property
    def is_debug_enabled(self) -> bool:
        return self._query("debug")

    def fatal(self, message: str | None, error: BaseException | None = None) -> None:
        self.calls.append(("fatal", message, error))

    def error(self, message: str | None, error: BaseException | None = None) -> None:
        self.calls.append(("error", message, error))

    def warn(self, message: str | None, error: BaseException | None = None) -> None:
        self.calls.append(("warn", message, error))

    def info(self, message: str | None, error: BaseException | None = None) -> None:
        self.calls.append(("info", message, error))

    def debug(self, message: str | None, error: BaseException | None = None) -> None:
        self.calls.append(("debug", message, error))


class RecordingResolver:
    """Resolver double handing out one :class:`RecordingHandle` per name."""

    def __init__(self, **enabled: bool) -> None:
        self._enabled = enabled
        self.lookups: list[tuple[str, str]] = []
        self.handles: dict[str, RecordingHandle] = {}

    def __call__(self, repository: str, name: str) -> RecordingHandle:
        self.lookups.append((repository, name))
        handle = self.handles.get(name)
        if handle is None:
            handle = RecordingHandle(name, **self._enabled)
            self.handles[name] = handle
        return handle


class ListHandler(logging.Handler):
    """Collect records emitted into a stdlib repository."""

    def __init__(self) -> None:
        super().__init__()
        self.records: list[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


@pytest.fixture
def recording_resolver() -> RecordingResolver:
    return RecordingResolver()


@pytest.fixture
def selector() -> StdlibRepositorySelector:
    return StdlibRepositorySelector()


@pytest.fixture
def repository(selector: StdlibRepositorySelector) -> Iterator[tuple[str, ListHandler]]:
    """Isolated DEBUG-level repository with a collecting handler on its root."""

    name = f"tests-{uuid4().hex}"
    root = selector.create_repository(name, level=logging.DEBUG)
    handler = ListHandler()
    root.addHandler(handler)
    yield name, handler
    root.removeHandler(handler)


@pytest.fixture
def record_console() -> Console:
    return Console(file=StringIO(), record=True, width=200, color_system=None)


@pytest.fixture
def make_handle() -> type[RecordingHandle]:
    return RecordingHandle
