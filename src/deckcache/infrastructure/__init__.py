"""Infrastructure implementations for deckcache."""

from deckcache.infrastructure.backends import InMemoryCacheBackend, RedisCacheBackend
from deckcache.infrastructure.http import OriginClient
from deckcache.infrastructure.key_builders import ResourceKeyBuilder
from deckcache.infrastructure.locks import StoreLockService
from deckcache.infrastructure.serializers import JsonSerializer, SerializationError

__all__ = [
    "InMemoryCacheBackend",
    "RedisCacheBackend",
    "OriginClient",
    "ResourceKeyBuilder",
    "StoreLockService",
    "JsonSerializer",
    "SerializationError",
]
