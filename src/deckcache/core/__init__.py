"""Core domain layer for deckcache."""

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

__all__ = [
    "CacheConfig",
    "CacheEntry",
    "EntryKind",
    "LoadResult",
    "PaginationState",
    "RefreshPolicy",
    "ResourceIdentity",
    "TTLPolicy",
    "CacheGateway",
    "PaginationEngine",
    "RefreshOrchestrator",
]
