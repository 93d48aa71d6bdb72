"""Core interfaces (protocols) for deckcache."""

from deckcache.core.interfaces.cache_backend import ICacheBackend
from deckcache.core.interfaces.key_builder import IKeyBuilder
from deckcache.core.interfaces.lock_service import ILockService
from deckcache.core.interfaces.serializer import ISerializer
from deckcache.core.interfaces.source_adapter import ISourceAdapter

__all__ = [
    "ICacheBackend",
    "IKeyBuilder",
    "ILockService",
    "ISerializer",
    "ISourceAdapter",
]
