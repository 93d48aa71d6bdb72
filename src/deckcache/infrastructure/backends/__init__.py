"""Cache backend implementations."""

from deckcache.infrastructure.backends.memory import InMemoryCacheBackend
from deckcache.infrastructure.backends.redis import RedisCacheBackend

__all__ = ["InMemoryCacheBackend", "RedisCacheBackend"]
