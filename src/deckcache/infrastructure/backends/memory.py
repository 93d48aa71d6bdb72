"""Process-local store built on cachetools."""

import fnmatch
import time
from collections.abc import Callable
from datetime import timedelta
from typing import NamedTuple

from cachetools import TLRUCache  # type: ignore[import-untyped]


class _Slot(NamedTuple):
    data: bytes
    lifetime: float


def _slot_deadline(_key: str, slot: _Slot, now: float) -> float:
    return now + slot.lifetime


class InMemoryCacheBackend:
    """Store used when no Redis URL is configured, and in tests.

    Entries are bounded by ``maxsize`` with least-recently-used eviction.
    Each slot expires on its own lifetime, so a one-hour negative entry
    and a two-week positive one can sit side by side. ``timer`` replaces
    the monotonic clock, which lets tests move time forward.
    """

    def __init__(
        self,
        maxsize: int = 10_000,
        default_ttl: float = 86_400.0,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        self._maxsize = maxsize
        self._default_ttl = default_ttl
        self._slots: TLRUCache[str, _Slot] = TLRUCache(
            maxsize=maxsize, ttu=_slot_deadline, timer=timer
        )

    @property
    def maxsize(self) -> int:
        return self._maxsize

    def __len__(self) -> int:
        return len(self._slots)

    def _lifetime(self, ttl: timedelta | None) -> float:
        return self._default_ttl if ttl is None else max(ttl.total_seconds(), 0.0)

    async def get(self, key: str) -> bytes | None:
        slot = self._slots.get(key)
        return slot.data if slot is not None else None

    async def set(self, key: str, value: bytes, ttl: timedelta | None = None) -> None:
        self._slots[key] = _Slot(value, self._lifetime(ttl))

    async def add(self, key: str, value: bytes, ttl: timedelta) -> bool:
        # No await between the check and the write: atomic on one event loop.
        if key in self._slots:
            return False
        self._slots[key] = _Slot(value, self._lifetime(ttl))
        return True

    async def delete(self, key: str) -> bool:
        return self._slots.pop(key, None) is not None

    async def exists(self, key: str) -> bool:
        return key in self._slots

    async def clear(self) -> None:
        self._slots.clear()

    async def delete_pattern(self, pattern: str) -> int:
        """Drop every live key matching the glob ``pattern``; returns how many."""
        doomed = fnmatch.filter(list(self._slots), pattern)
        return sum(1 for key in doomed if self._slots.pop(key, None) is not None)
