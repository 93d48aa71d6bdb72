"""Key builder implementations."""

from deckcache.infrastructure.key_builders.resource import ResourceKeyBuilder

__all__ = ["ResourceKeyBuilder"]
