from __future__ import annotations

import threading

import pytest

from lib_log_bridge.adapters.level_translating import LevelTranslatingAdapter
from lib_log_bridge.adapters.provider import BridgeLoggerProvider
from lib_log_bridge.adapters.stdlib_backend import DEFAULT_REPOSITORY


def test_create_logger_caches_per_name(recording_resolver) -> None:
    provider = BridgeLoggerProvider("orders", resolver=recording_resolver)

    first = provider.create_logger("orders.api")
    again = provider.create_logger("orders.api")
    other = provider.create_logger("orders.db")

    assert first is again
    assert first is not other
    assert isinstance(first, LevelTranslatingAdapter)
    assert recording_resolver.lookups == [("orders", "orders.api"), ("orders", "orders.db")]
    assert len(provider) == 2


def test_default_repository() -> None:
    assert BridgeLoggerProvider().repository == DEFAULT_REPOSITORY


def test_dispose_releases_loggers_and_blocks_new_ones(recording_resolver) -> None:
    provider = BridgeLoggerProvider("orders", resolver=recording_resolver)
    provider.create_logger("orders.api")

    provider.dispose()
    provider.dispose()

    assert provider.disposed
    assert len(provider) == 0
    with pytest.raises(RuntimeError, match="disposed"):
        provider.create_logger("orders.api")


def test_context_manager_disposes(recording_resolver) -> None:
    with BridgeLoggerProvider("orders", resolver=recording_resolver) as provider:
        provider.create_logger("orders.api")

    assert provider.disposed


def test_concurrent_create_logger_resolves_once(recording_resolver) -> None:
    provider = BridgeLoggerProvider("orders", resolver=recording_resolver)
    results: list[LevelTranslatingAdapter] = []
    barrier = threading.Barrier(8)

    def _worker() -> None:
        barrier.wait()
        results.append(provider.create_logger("orders.api"))

    threads = [threading.Thread(target=_worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len({id(adapter) for adapter in results}) == 1
    assert recording_resolver.lookups == [("orders", "orders.api")]
