"""Pytest configuration for deckcache tests."""

from collections.abc import Callable
from typing import Any

import httpx
import pytest

from deckcache.config import clear_settings_cache
from deckcache.core.services.cache_gateway import CacheGateway
from deckcache.core.services.refresh_orchestrator import RefreshOrchestrator
from deckcache.infrastructure.backends.memory import InMemoryCacheBackend
from deckcache.infrastructure.http import OriginClient
from deckcache.infrastructure.locks.store import StoreLockService
from deckcache.infrastructure.serializers.json import JsonSerializer


class FakeClock:
    """Manually advanced clock for TTL tests."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture(autouse=True)
def reset_settings_cache():
    """Drop cached settings before and after each test."""
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def backend(clock: FakeClock) -> InMemoryCacheBackend:
    return InMemoryCacheBackend(maxsize=100, timer=clock)


@pytest.fixture
def gateway(backend: InMemoryCacheBackend) -> CacheGateway:
    return CacheGateway(backend, JsonSerializer())


@pytest.fixture
def orchestrator(gateway: CacheGateway, backend: InMemoryCacheBackend) -> RefreshOrchestrator:
    return RefreshOrchestrator(gateway, StoreLockService(backend))


@pytest.fixture
def make_origin() -> Callable[[Callable[[httpx.Request], Any]], OriginClient]:
    """Build an OriginClient whose requests are answered by ``handler``."""

    def factory(handler: Callable[[httpx.Request], Any]) -> OriginClient:
        return OriginClient(transport=httpx.MockTransport(handler))

    return factory
