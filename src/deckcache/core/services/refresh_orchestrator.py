"""Refresh orchestrator - serve from cache or refresh from the origin."""

import asyncio
import logging
from collections.abc import Mapping
from typing import Any

from deckcache.core.entities.cache_entry import EntryKind
from deckcache.core.entities.load_result import LoadResult, RefreshPolicy
from deckcache.core.entities.resource_identity import ResourceIdentity
from deckcache.core.interfaces.lock_service import ILockService
from deckcache.core.interfaces.source_adapter import ISourceAdapter
from deckcache.core.services.cache_gateway import CacheGateway

logger = logging.getLogger(__name__)

BG = "(BG TASK)"


class RefreshOrchestrator:
    """Decides, per call, how a resource is served.

    A cache hit is returned as-is (a negative hit as the adapter's empty
    value). On a miss the adapter's refresh policy applies:

    - ``SYNCHRONOUS``: load inline, write the entry, return the result.
    - ``BACKGROUND``: take the refresh lock and, if it was free, spawn
      one detached task to load and write. The caller always gets the
      empty value immediately.

    Background tasks are held by strong reference until they finish.
    Locks are not released; they expire on their own TTL.
    """

    def __init__(self, gateway: CacheGateway, locks: ILockService) -> None:
        """Initialize the orchestrator.

        Args:
            gateway: Cache gateway used for reads and writes.
            locks: Lock service guarding background refreshes.
        """
        self._gateway = gateway
        self._locks = locks
        self._tasks: set[asyncio.Task[EntryKind]] = set()
        self._failures = 0

    @property
    def gateway(self) -> CacheGateway:
        return self._gateway

    @property
    def pending(self) -> int:
        """Number of background refreshes still running."""
        return len(self._tasks)

    @property
    def failures(self) -> int:
        """Number of background refreshes whose negative write also failed."""
        return self._failures

    async def fetch(
        self,
        adapter: ISourceAdapter,
        params: Mapping[str, Any] | None = None,
        *,
        force_refresh: bool = False,
        policy: RefreshPolicy | None = None,
    ) -> Any:
        """Return the resource described by ``params``.

        Args:
            adapter: Adapter of the upstream holding the resource.
            params: Request parameters handed to ``adapter.identify``.
            force_refresh: Skip the cache read and go to the origin.
            policy: Override of the adapter's refresh policy.

        Returns:
            The cached or fresh value, or the adapter's empty value.

        Raises:
            MissingIdentifier: If a required parameter is absent.
            ConfigurationMissing: If the origin needs absent credentials.
        """
        identity = adapter.identify(params or {})
        key = identity.cache_key

        if not force_refresh:
            entry = await self._gateway.get_entry(key)
            if entry is not None:
                if entry.is_negative:
                    logger.debug("Negative cache hit for %s", key)
                    return adapter.empty_value()
                logger.debug("Serving %s from cache", key)
                return entry.value

        adapter.ensure_configured()

        effective = policy or adapter.policy
        if effective is RefreshPolicy.BACKGROUND:
            await self._schedule(adapter, identity)
            return adapter.empty_value()

        return await self._refresh_inline(adapter, identity)

    async def drain(self) -> None:
        """Wait for every pending background refresh to finish."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    async def _refresh_inline(
        self, adapter: ISourceAdapter, identity: ResourceIdentity
    ) -> Any:
        result = await adapter.load(identity)
        try:
            await self._write(adapter, identity, result)
        except Exception:
            logger.exception("Failed to cache fresh result for %s", identity.cache_key)

        if result.is_negative:
            return adapter.empty_value()
        return result.value

    async def _schedule(self, adapter: ISourceAdapter, identity: ResourceIdentity) -> None:
        key = identity.cache_key
        lock_ttl = adapter.lock_ttl or self._gateway.config.default_lock_ttl
        acquired = await self._locks.acquire(identity.lock_key, lock_ttl)
        if not acquired:
            logger.info("Refresh of %s already in progress; serving empty value", key)
            return

        logger.info("Scheduling background refresh of %s", key)
        task = asyncio.create_task(
            self._guarded_refresh(adapter, identity),
            name=f"refresh:{key}",
        )
        self._tasks.add(task)
        task.add_done_callback(self._on_task_done)

    async def _guarded_refresh(
        self, adapter: ISourceAdapter, identity: ResourceIdentity
    ) -> EntryKind:
        try:
            return await self._background_refresh(adapter, identity)
        except Exception as e:
            # The inner handler failed, usually on its own negative write
            logger.error(
                "%s Refresh handler for %s failed: %s", BG, identity.cache_key, e
            )
            await self._write_negative_quietly(adapter, identity)
            raise

    async def _background_refresh(
        self, adapter: ISourceAdapter, identity: ResourceIdentity
    ) -> EntryKind:
        try:
            result = await adapter.load(identity)
            await self._write(adapter, identity, result)
            return result.kind
        except Exception as e:
            logger.error("%s Refresh of %s failed: %s", BG, identity.cache_key, e)
            await self._write_negative(adapter, identity)
            return EntryKind.NEGATIVE

    async def _write(
        self,
        adapter: ISourceAdapter,
        identity: ResourceIdentity,
        result: LoadResult,
    ) -> None:
        if result.is_negative:
            await self._write_negative(adapter, identity)
            return
        await self._gateway.set(
            identity.cache_key,
            result.value,
            adapter.ttl.positive,
            kind=EntryKind.POSITIVE,
        )

    async def _write_negative(
        self, adapter: ISourceAdapter, identity: ResourceIdentity
    ) -> None:
        await self._gateway.set(
            identity.cache_key,
            adapter.negative_value(),
            adapter.ttl.negative,
            kind=EntryKind.NEGATIVE,
        )

    async def _write_negative_quietly(
        self, adapter: ISourceAdapter, identity: ResourceIdentity
    ) -> None:
        try:
            await self._write_negative(adapter, identity)
        except Exception as e:
            logger.error(
                "%s Negative cache write for %s failed: %s", BG, identity.cache_key, e
            )

    def _on_task_done(self, task: "asyncio.Task[EntryKind]") -> None:
        self._tasks.discard(task)
        name = task.get_name()

        if task.cancelled():
            logger.warning("%s %s was cancelled", BG, name)
            return

        exc = task.exception()
        if exc is not None:
            self._failures += 1
            logger.error("%s %s ended with an error", BG, name, exc_info=exc)
            return

        logger.info("%s %s finished (%s)", BG, name, task.result().value)
