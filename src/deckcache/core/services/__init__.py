"""Domain services for deckcache."""

from deckcache.core.services.cache_gateway import CacheGateway
from deckcache.core.services.pagination import PaginationEngine
from deckcache.core.services.refresh_orchestrator import RefreshOrchestrator

__all__ = ["CacheGateway", "PaginationEngine", "RefreshOrchestrator"]
