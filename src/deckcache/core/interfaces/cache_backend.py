"""Key-value store contract shared by cache entries and refresh locks."""

from datetime import timedelta
from typing import Protocol


class ICacheBackend(Protocol):
    """Async byte store with per-key expiry.

    Entries live under ``source:resource[:qualifier]`` keys and locks under
    ``lock:`` keys of the same store. An expired key must behave exactly
    like an absent one in every method.
    """

    async def get(self, key: str) -> bytes | None:
        """Stored bytes, or None when absent or expired."""
        ...

    async def set(self, key: str, value: bytes, ttl: timedelta | None = None) -> None:
        """Unconditional write; replaces both the value and its expiry.

        A ``ttl`` of None means the store's own default lifetime.
        """
        ...

    async def add(self, key: str, value: bytes, ttl: timedelta) -> bool:
        """Atomic set-if-absent.

        Returns:
            False when a live value already holds ``key``. Two concurrent
            callers never both get True.
        """
        ...

    async def delete(self, key: str) -> bool:
        """Remove ``key``; True only if something live was removed."""
        ...

    async def exists(self, key: str) -> bool: ...

    async def clear(self) -> None:
        """Drop every key this store owns."""
        ...
