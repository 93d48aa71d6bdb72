"""Outcome of one origin load."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from deckcache.core.entities.cache_entry import EntryKind


class RefreshPolicy(Enum):
    """How a cache miss is refreshed."""

    # Caller awaits the origin fetch and gets fresh data
    SYNCHRONOUS = "synchronous"
    # Caller gets the empty value at once; one detached task refreshes
    BACKGROUND = "background"


@dataclass(frozen=True)
class LoadResult:
    """What an adapter produced for one identity.

    ``value`` is what gets written to the cache: the normalized result for
    a positive load, the adapter's negative marker otherwise.
    """

    value: Any
    kind: EntryKind = EntryKind.POSITIVE

    @property
    def is_negative(self) -> bool:
        return self.kind is EntryKind.NEGATIVE

    @classmethod
    def positive(cls, value: Any) -> "LoadResult":
        return cls(value=value, kind=EntryKind.POSITIVE)

    @classmethod
    def negative(cls, value: Any) -> "LoadResult":
        return cls(value=value, kind=EntryKind.NEGATIVE)
