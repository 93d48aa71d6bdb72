"""deckcache - cached access to flaky, rate-limited game data upstreams.

Serves issue-tracker reports, storefront details, compatibility ratings,
prices, reviews and FX rates from a key-value cache, refreshing each
source synchronously or in a deduplicated background task.
"""

from deckcache.client import DeckCacheClient
from deckcache.config import Settings, clear_settings_cache, get_settings
from deckcache.core.entities import (
    CacheConfig,
    CacheEntry,
    EntryKind,
    LoadResult,
    PaginationState,
    RefreshPolicy,
    ResourceIdentity,
    TTLPolicy,
)
from deckcache.core.services import CacheGateway, PaginationEngine, RefreshOrchestrator
from deckcache.exceptions import (
    Ambiguous,
    ConfigurationMissing,
    DeckCacheError,
    MalformedResponse,
    MissingIdentifier,
    OriginUnavailable,
    ResultCapped,
)
from deckcache.infrastructure import (
    InMemoryCacheBackend,
    JsonSerializer,
    OriginClient,
    RedisCacheBackend,
    ResourceKeyBuilder,
    StoreLockService,
)

__version__ = "0.1.0"

__all__ = [
    # Client
    "DeckCacheClient",
    # Config
    "Settings",
    "get_settings",
    "clear_settings_cache",
    # Entities
    "CacheConfig",
    "CacheEntry",
    "EntryKind",
    "LoadResult",
    "PaginationState",
    "RefreshPolicy",
    "ResourceIdentity",
    "TTLPolicy",
    # Services
    "CacheGateway",
    "PaginationEngine",
    "RefreshOrchestrator",
    # Infrastructure
    "InMemoryCacheBackend",
    "RedisCacheBackend",
    "JsonSerializer",
    "OriginClient",
    "ResourceKeyBuilder",
    "StoreLockService",
    # Errors
    "DeckCacheError",
    "OriginUnavailable",
    "MalformedResponse",
    "ConfigurationMissing",
    "MissingIdentifier",
    "Ambiguous",
    "ResultCapped",
]
