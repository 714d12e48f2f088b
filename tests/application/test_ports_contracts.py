from __future__ import annotations

from typing import Any

import pytest

from lib_log_bridge.application.ports.backend import BackendLoggerPort, LoggerResolver
from lib_log_bridge.application.ports.logger import LoggerPort, MessageFormatter
from lib_log_bridge.domain.levels import Severity
from lib_log_bridge.domain.scope import NULL_SCOPE, NullScope


class _FakeLogger:
    def __init__(self) -> None:
        self.records: list[tuple[Severity, int, str | None, BaseException | None]] = []

    @property
    def name(self) -> str:
        return "fake"

    def begin_scope(self, state: Any) -> NullScope:
        return NULL_SCOPE

    def is_enabled(self, severity: Severity) -> bool:
        return severity is not Severity.TRACE

    def log(
        self,
        severity: Severity,
        event_id: int,
        state: Any,
        error: BaseException | None,
        formatter: MessageFormatter | None,
    ) -> None:
        assert formatter is not None
        self.records.append((severity, event_id, formatter(state, error), error))


class _Incomplete:
    name = "incomplete"

    def is_enabled(self, severity: Severity) -> bool:
        return True


def test_recording_handle_satisfies_backend_port(make_handle) -> None:
    assert isinstance(make_handle(), BackendLoggerPort)


def test_plain_callable_satisfies_resolver_port(make_handle) -> None:
    class _Resolver:
        def __call__(self, repository: str, name: str):
            return make_handle(name)

    resolver: LoggerResolver = _Resolver()
    assert isinstance(resolver, LoggerResolver)
    assert resolver("repo", "svc").name == "svc"


def test_fake_logger_satisfies_logger_port() -> None:
    logger = _FakeLogger()
    assert isinstance(logger, LoggerPort)

    logger.log(Severity.WARNING, 9, {"n": 1}, None, lambda state, error: f"n={state['n']}")

    assert logger.records == [(Severity.WARNING, 9, "n=1", None)]


@pytest.mark.parametrize("candidate", [_Incomplete(), object()])
def test_incomplete_objects_are_not_logger_ports(candidate: object) -> None:
    assert not isinstance(candidate, LoggerPort)
