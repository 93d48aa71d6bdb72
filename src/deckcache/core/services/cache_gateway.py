"""Typed reads and writes of positive and negative entries."""

import logging
from collections import Counter
from datetime import timedelta
from typing import Any

from deckcache.core.entities.cache_config import CacheConfig
from deckcache.core.entities.cache_entry import CacheEntry, EntryKind
from deckcache.core.interfaces.cache_backend import ICacheBackend
from deckcache.core.interfaces.serializer import ISerializer

logger = logging.getLogger(__name__)


class CacheGateway:
    """Wraps every stored value in a ``{kind, value, stored_at}`` envelope.

    Lookups never raise. An absent key, bytes that do not decode, an
    envelope of another shape and a store that errors on read all come
    back as a miss. Writes do raise, and callers decide what a failed
    write means for them.

    Args:
        backend: Store holding the encoded envelopes.
        serializer: Codec between envelopes and bytes.
        config: Store-level options; defaults apply when omitted.
    """

    def __init__(
        self,
        backend: ICacheBackend,
        serializer: ISerializer,
        config: CacheConfig | None = None,
    ) -> None:
        self._store = backend
        self._codec = serializer
        self._options = config if config is not None else CacheConfig()
        self._counts: Counter[str] = Counter()

    @property
    def config(self) -> CacheConfig:
        return self._options

    @property
    def backend(self) -> ICacheBackend:
        return self._store

    @property
    def stats(self) -> dict[str, int]:
        """Lookup counters since creation or the last :meth:`clear`.

        ``errors`` counts failed store reads, which are also misses.
        """
        hits, misses = self._counts["hits"], self._counts["misses"]
        return {
            "hits": hits,
            "misses": misses,
            "errors": self._counts["errors"],
            "total": hits + misses,
        }

    async def get(self, key: str) -> Any | None:
        """Stored value for ``key``, or None on a miss.

        Negative entries return their stored value too; :meth:`get_entry`
        exposes the kind.
        """
        entry = await self.get_entry(key)
        return None if entry is None else entry.value

    async def get_entry(self, key: str) -> CacheEntry | None:
        if not self._options.enabled:
            return None

        try:
            raw = await self._store.get(key)
        except Exception:
            self._counts.update(("errors", "misses"))
            logger.exception("Store read failed for %s", key)
            return None

        if raw is None:
            self._counts["misses"] += 1
            return None

        try:
            entry = CacheEntry.from_envelope(key, self._codec.deserialize(raw))
        except Exception as exc:
            self._counts["misses"] += 1
            logger.warning("Ignoring undecodable entry %s: %s", key, exc)
            return None

        self._counts["hits"] += 1
        logger.debug("Hit %s (%s)", key, entry.kind.value)
        return entry

    async def set(
        self,
        key: str,
        value: Any,
        ttl_seconds: int | None = None,
        kind: EntryKind = EntryKind.POSITIVE,
    ) -> CacheEntry:
        """Write ``value`` under ``key``, replacing any earlier entry.

        Args:
            key: Resource key.
            value: Anything the serializer can encode.
            ttl_seconds: Entry lifetime; ``config.default_ttl`` when None.
            kind: Whether the entry is a real result or a no-result marker.

        Returns:
            The entry as written. When caching is disabled nothing is
            stored but the entry is still returned.

        Raises:
            SerializationError: ``value`` cannot be encoded.
            Exception: The store rejected the write.
        """
        if ttl_seconds is not None:
            ttl = timedelta(seconds=ttl_seconds)
        else:
            ttl = self._options.default_ttl or timedelta(hours=24)
        entry = CacheEntry(key=key, value=value, ttl=ttl, kind=kind)
        if self._options.enabled:
            await self._store.set(key, self._codec.serialize(entry.to_envelope()), ttl)
            logger.debug("Stored %s %s for %ds", kind.value, key, ttl.total_seconds())
        return entry

    async def set_negative(self, key: str, value: Any, ttl_seconds: int) -> CacheEntry:
        """Record that ``key`` currently has no result."""
        return await self.set(key, value, ttl_seconds, kind=EntryKind.NEGATIVE)

    async def delete(self, key: str) -> bool:
        return await self._store.delete(key)

    async def clear(self) -> None:
        """Empty the store and reset :attr:`stats`."""
        await self._store.clear()
        self._counts.clear()
