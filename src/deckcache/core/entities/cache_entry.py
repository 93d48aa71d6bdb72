"""Stored entries and their envelope format."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any


class EntryKind(Enum):
    """Whether an entry holds a real result or records the absence of one."""

    POSITIVE = "positive"
    NEGATIVE = "negative"


@dataclass(frozen=True)
class CacheEntry:
    """One stored result, positive or negative, with its lifetime.

    Entries are always written whole; nothing in deckcache mutates part
    of a stored entry.
    """

    key: str
    value: Any
    # None for entries read back from a store, which keeps expiry to itself
    ttl: timedelta | None
    kind: EntryKind = EntryKind.POSITIVE
    stored_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_negative(self) -> bool:
        """Check if this entry records a failed or empty fetch."""
        return self.kind is EntryKind.NEGATIVE

    def to_envelope(self) -> dict[str, Any]:
        """Build the JSON envelope persisted in the store."""
        return {
            "kind": self.kind.value,
            "value": self.value,
            "stored_at": self.stored_at.isoformat(),
        }

    @classmethod
    def from_envelope(
        cls,
        key: str,
        envelope: Any,
        ttl: timedelta | None = None,
    ) -> "CacheEntry":
        """Rebuild an entry from a stored envelope.

        Args:
            key: The cache key the envelope was read from.
            envelope: The deserialized payload.
            ttl: TTL to attach, if known. Stores do not report it back.

        Returns:
            The rebuilt CacheEntry.

        Raises:
            ValueError: If the payload is not a recognised envelope.
        """
        if not isinstance(envelope, dict) or "kind" not in envelope or "value" not in envelope:
            raise ValueError(f"Not a cache envelope: {type(envelope).__name__}")

        kind = EntryKind(envelope["kind"])
        stored_at_raw = envelope.get("stored_at")
        stored_at = (
            datetime.fromisoformat(stored_at_raw)
            if isinstance(stored_at_raw, str)
            else datetime.now(timezone.utc)
        )
        return cls(
            key=key,
            value=envelope["value"],
            ttl=ttl,
            kind=kind,
            stored_at=stored_at,
        )
