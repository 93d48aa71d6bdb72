"""Shared store on Redis, used when ``REDIS_URL`` is set."""

import logging
from collections.abc import AsyncIterator
from datetime import timedelta

import redis.asyncio as redis

logger = logging.getLogger(__name__)

SCAN_BATCH = 100


def _whole_seconds(ttl: timedelta) -> int:
    # Redis rejects a zero expiry
    return max(int(ttl.total_seconds()), 1)


class RedisCacheBackend:
    """Namespaced store that every worker process can share.

    All keys are written under ``<key_prefix>:``. :meth:`add` maps onto
    ``SET NX EX``, which makes refresh locks hold across processes.
    :meth:`clear` only removes keys inside the namespace.

    Args:
        redis_url: Connection URL, ignored when ``client`` is given.
        key_prefix: Namespace for every key.
        default_ttl: Lifetime in seconds for writes without a TTL; None
            stores such writes without expiry.
        client: Existing ``redis.asyncio`` client to reuse.
    """

    def __init__(
        self,
        redis_url: str = "redis://localhost:6379",
        key_prefix: str = "deckcache",
        default_ttl: int | None = 86_400,
        client: redis.Redis | None = None,
    ) -> None:
        self._redis: redis.Redis = client or redis.from_url(redis_url)  # type: ignore
        self._namespace = f"{key_prefix}:"
        self._default_ttl = default_ttl

    def _key(self, key: str) -> str:
        return key if key.startswith(self._namespace) else self._namespace + key

    async def get(self, key: str) -> bytes | None:
        return await self._redis.get(self._key(key))

    async def set(self, key: str, value: bytes, ttl: timedelta | None = None) -> None:
        expiry = _whole_seconds(ttl) if ttl is not None else self._default_ttl
        if expiry is None:
            await self._redis.set(self._key(key), value)
        else:
            await self._redis.setex(self._key(key), expiry, value)

    async def add(self, key: str, value: bytes, ttl: timedelta) -> bool:
        stored = await self._redis.set(
            self._key(key), value, nx=True, ex=_whole_seconds(ttl)
        )
        return bool(stored)

    async def delete(self, key: str) -> bool:
        return await self._redis.delete(self._key(key)) > 0

    async def exists(self, key: str) -> bool:
        return await self._redis.exists(self._key(key)) > 0

    async def clear(self) -> None:
        removed = await self.delete_pattern("*")
        logger.info("Cleared %d keys under %s", removed, self._namespace)

    async def _scan(self, match: str) -> AsyncIterator[list[str]]:
        # SCAN rather than KEYS keeps a large keyspace from blocking the server
        cursor = 0
        while True:
            cursor, batch = await self._redis.scan(cursor, match=match, count=SCAN_BATCH)
            if batch:
                yield batch
            if cursor == 0:
                return

    async def delete_pattern(self, pattern: str) -> int:
        """Delete namespaced keys matching ``pattern`` (relative to the prefix)."""
        removed = 0
        async for batch in self._scan(self._key(pattern)):
            removed += await self._redis.delete(*batch)
        return removed

    async def close(self) -> None:
        await self._redis.aclose()

    async def __aenter__(self) -> "RedisCacheBackend":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()
