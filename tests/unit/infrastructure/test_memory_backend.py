"""Tests for InMemoryCacheBackend."""

from datetime import timedelta

import pytest

from deckcache.infrastructure.backends.memory import InMemoryCacheBackend


class TestInMemoryCacheBackend:
    """Tests for InMemoryCacheBackend."""

    @pytest.mark.asyncio
    async def test_set_and_get(self, backend: InMemoryCacheBackend) -> None:
        await backend.set("key1", b"value1")
        assert await backend.get("key1") == b"value1"

    @pytest.mark.asyncio
    async def test_get_missing_key(self, backend: InMemoryCacheBackend) -> None:
        assert await backend.get("nonexistent") is None

    @pytest.mark.asyncio
    async def test_per_item_ttl(self, backend: InMemoryCacheBackend, clock) -> None:
        await backend.set("short", b"s", timedelta(seconds=10))
        await backend.set("long", b"l", timedelta(hours=1))

        clock.advance(11)

        assert await backend.get("short") is None
        assert await backend.exists("short") is False
        assert await backend.get("long") == b"l"

    @pytest.mark.asyncio
    async def test_default_ttl(self, clock) -> None:
        backend = InMemoryCacheBackend(default_ttl=30.0, timer=clock)
        await backend.set("k", b"v")

        clock.advance(31)

        assert await backend.get("k") is None

    @pytest.mark.asyncio
    async def test_add_only_when_absent(self, backend: InMemoryCacheBackend) -> None:
        assert await backend.add("lock:a", b"1", timedelta(seconds=60)) is True
        assert await backend.add("lock:a", b"2", timedelta(seconds=60)) is False
        assert await backend.get("lock:a") == b"1"

    @pytest.mark.asyncio
    async def test_add_after_expiry(self, backend: InMemoryCacheBackend, clock) -> None:
        await backend.add("lock:a", b"1", timedelta(seconds=60))
        clock.advance(61)

        assert await backend.add("lock:a", b"2", timedelta(seconds=60)) is True

    @pytest.mark.asyncio
    async def test_delete(self, backend: InMemoryCacheBackend) -> None:
        await backend.set("key1", b"value1")

        assert await backend.delete("key1") is True
        assert await backend.get("key1") is None
        assert await backend.delete("key1") is False

    @pytest.mark.asyncio
    async def test_clear(self, backend: InMemoryCacheBackend) -> None:
        await backend.set("key1", b"value1")
        await backend.set("key2", b"value2")

        await backend.clear()

        assert len(backend) == 0

    @pytest.mark.asyncio
    async def test_delete_pattern(self, backend: InMemoryCacheBackend) -> None:
        await backend.set("github:game_reports:recent:5:updated", b"1")
        await backend.set("github:game_reports:popular:5", b"2")
        await backend.set("steam:app_details:620", b"3")

        deleted = await backend.delete_pattern("github:*")

        assert deleted == 2
        assert await backend.get("steam:app_details:620") == b"3"

    @pytest.mark.asyncio
    async def test_maxsize_eviction(self, clock) -> None:
        backend = InMemoryCacheBackend(maxsize=2, timer=clock)
        await backend.set("a", b"1")
        await backend.set("b", b"2")
        await backend.set("c", b"3")

        assert len(backend) == 2
        assert backend.maxsize == 2
