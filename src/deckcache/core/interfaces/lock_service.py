"""Refresh lock interface."""

from typing import Protocol


class ILockService(Protocol):
    """Contract for short-lived, auto-expiring mutual exclusion markers.

    There is no release operation: a lock lives until its TTL expires.
    """

    async def acquire(self, key: str, ttl_seconds: int) -> bool:
        """Try to take the lock for ``key``.

        Args:
            key: The lock key.
            ttl_seconds: Seconds until the lock expires on its own.

        Returns:
            True if this caller now holds the lock, False if it was held.
        """
        ...
