"""Store-level options."""

from dataclasses import dataclass
from datetime import timedelta


@dataclass
class CacheConfig:
    """Cache configuration.

    Store-level options shared by the gateway, the lock service and the
    refresh orchestrator. Per-source lifetimes live on each adapter's
    TTLPolicy.
    """

    enabled: bool = True
    key_prefix: str = "deckcache"
    max_size: int = 10_000

    # Store default when a write carries no TTL
    default_ttl: timedelta | None = None

    # Lock lifetime used when an adapter does not declare its own
    default_lock_ttl: int = 60

    def __post_init__(self) -> None:
        """Fill in the store default lifetime and bound the lock lifetime."""
        if self.default_ttl is None:
            self.default_ttl = timedelta(hours=24)
        if not 60 <= self.default_lock_ttl <= 120:
            raise ValueError("default_lock_ttl must be between 60 and 120 seconds")
