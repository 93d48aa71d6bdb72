"""Domain entities for deckcache."""

from deckcache.core.entities.cache_config import CacheConfig
from deckcache.core.entities.cache_entry import CacheEntry, EntryKind
from deckcache.core.entities.load_result import LoadResult, RefreshPolicy
from deckcache.core.entities.pagination import PaginationState
from deckcache.core.entities.resource_identity import ResourceIdentity
from deckcache.core.entities.ttl_policy import DAY, HOUR, MINUTE, TTLPolicy

__all__ = [
    "CacheConfig",
    "CacheEntry",
    "EntryKind",
    "LoadResult",
    "RefreshPolicy",
    "PaginationState",
    "ResourceIdentity",
    "TTLPolicy",
    "MINUTE",
    "HOUR",
    "DAY",
]
