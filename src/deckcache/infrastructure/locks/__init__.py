"""Refresh lock implementations."""

from deckcache.infrastructure.locks.store import StoreLockService

__all__ = ["StoreLockService"]
