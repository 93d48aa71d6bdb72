"""Tests for CacheGateway."""

from datetime import timedelta

import pytest

from deckcache.core.entities import CacheConfig, EntryKind
from deckcache.core.services.cache_gateway import CacheGateway
from deckcache.infrastructure.backends.memory import InMemoryCacheBackend
from deckcache.infrastructure.serializers.json import JsonSerializer


class BrokenBackend(InMemoryCacheBackend):
    """Backend whose reads fail like an unreachable Redis."""

    async def get(self, key: str) -> bytes | None:
        raise ConnectionError("store unreachable")


class TestCacheGateway:
    """Tests for CacheGateway."""

    @pytest.mark.asyncio
    async def test_set_and_get(self, gateway: CacheGateway) -> None:
        await gateway.set("steam:app_details:620", {"name": "Portal 2"}, 3600)

        entry = await gateway.get_entry("steam:app_details:620")

        assert entry is not None
        assert entry.kind is EntryKind.POSITIVE
        assert entry.value == {"name": "Portal 2"}
        assert await gateway.get("steam:app_details:620") == {"name": "Portal 2"}

    @pytest.mark.asyncio
    async def test_negative_entry(self, gateway: CacheGateway) -> None:
        await gateway.set_negative("itad:lookup:appid:1", {"found": False}, 3600)

        entry = await gateway.get_entry("itad:lookup:appid:1")

        assert entry is not None
        assert entry.is_negative
        assert entry.value == {"found": False}

    @pytest.mark.asyncio
    async def test_miss(self, gateway: CacheGateway) -> None:
        assert await gateway.get_entry("missing") is None
        assert gateway.stats["misses"] == 1

    @pytest.mark.asyncio
    async def test_entry_expires(self, gateway: CacheGateway, clock) -> None:
        await gateway.set("k", [1, 2], 60)

        clock.advance(59)
        assert await gateway.get("k") == [1, 2]

        clock.advance(2)
        assert await gateway.get("k") is None

    @pytest.mark.asyncio
    async def test_overwrite_replaces_kind_and_ttl(self, gateway: CacheGateway, clock) -> None:
        await gateway.set_negative("k", [], 60)
        await gateway.set("k", ["fresh"], 3600)

        clock.advance(120)
        entry = await gateway.get_entry("k")

        assert entry is not None
        assert entry.kind is EntryKind.POSITIVE
        assert entry.value == ["fresh"]

    @pytest.mark.asyncio
    async def test_corrupt_entry_is_a_miss(
        self, gateway: CacheGateway, backend: InMemoryCacheBackend
    ) -> None:
        await backend.set("corrupt", b"\xff\xfenot json")
        await backend.set("foreign", b'{"some": "other format"}')

        assert await gateway.get_entry("corrupt") is None
        assert await gateway.get_entry("foreign") is None
        assert gateway.stats["misses"] == 2
        assert gateway.stats["hits"] == 0

    @pytest.mark.asyncio
    async def test_backend_error_is_a_miss(self) -> None:
        gateway = CacheGateway(BrokenBackend(), JsonSerializer())

        assert await gateway.get_entry("k") is None
        assert gateway.stats["errors"] == 1
        assert gateway.stats["misses"] == 1

    @pytest.mark.asyncio
    async def test_disabled_cache(self, backend: InMemoryCacheBackend) -> None:
        gateway = CacheGateway(backend, JsonSerializer(), CacheConfig(enabled=False))

        await gateway.set("k", 1, 60)

        assert await gateway.get("k") is None
        assert len(backend) == 0

    @pytest.mark.asyncio
    async def test_default_ttl(self, backend: InMemoryCacheBackend, clock) -> None:
        gateway = CacheGateway(
            backend, JsonSerializer(), CacheConfig(default_ttl=timedelta(minutes=5))
        )
        entry = await gateway.set("k", 1)

        assert entry.ttl == timedelta(minutes=5)
        clock.advance(301)
        assert await gateway.get("k") is None

    @pytest.mark.asyncio
    async def test_delete_and_clear(self, gateway: CacheGateway) -> None:
        await gateway.set("a", 1, 60)
        await gateway.set("b", 2, 60)
        await gateway.get("a")

        assert await gateway.delete("a") is True
        await gateway.clear()

        assert await gateway.get("b") is None
        assert gateway.stats["hits"] == 0
