"""Refresh lock backed by the cache store."""

import logging
from datetime import timedelta

from deckcache.core.interfaces.cache_backend import ICacheBackend

logger = logging.getLogger(__name__)

_LOCK_TOKEN = b"1"


class StoreLockService:
    """Short-lived set-if-absent lock living in the cache store.

    Locks are never released explicitly; they expire with their TTL. If
    the store cannot be reached the lock is reported as not acquired, so
    callers fall back to serving the empty value instead of piling
    refreshes onto a struggling upstream.
    """

    def __init__(self, backend: ICacheBackend) -> None:
        self._backend = backend

    async def acquire(self, key: str, ttl_seconds: int) -> bool:
        """Try to take the lock.

        Args:
            key: The lock key, e.g. ``lock:steam:app_details:620``.
            ttl_seconds: How long the lock is held before it expires.

        Returns:
            True if this caller now holds the lock.
        """
        try:
            acquired = await self._backend.add(
                key, _LOCK_TOKEN, timedelta(seconds=ttl_seconds)
            )
        except Exception:
            logger.exception("Failed to acquire refresh lock %s", key)
            return False

        if not acquired:
            logger.debug("Refresh lock %s already held", key)
        return acquired
