"""Base class shared by every upstream adapter."""

import logging
from collections.abc import Mapping, Sequence
from typing import Any, ClassVar

from deckcache.core.entities.load_result import LoadResult, RefreshPolicy
from deckcache.core.entities.resource_identity import ResourceIdentity
from deckcache.core.entities.ttl_policy import TTLPolicy
from deckcache.core.interfaces.key_builder import IKeyBuilder
from deckcache.exceptions import (
    Ambiguous,
    MalformedResponse,
    MissingIdentifier,
    OriginUnavailable,
    ResultCapped,
)
from deckcache.infrastructure.http import OriginClient
from deckcache.infrastructure.key_builders.resource import ResourceKeyBuilder

logger = logging.getLogger(__name__)


class ExternalSourceAdapter:
    """One upstream resource: how to key it, fetch it and normalize it.

    Subclasses declare ``source``, ``resource`` and ``ttl`` and implement
    :meth:`identify`, :meth:`fetch_from_origin` and :meth:`normalize`.
    :meth:`load` is the failure boundary: origin errors and malformed
    payloads never escape it, they become a negative result.

    ``ConfigurationMissing`` and ``MissingIdentifier`` are never absorbed;
    there is no sane default to return when the caller did not give us
    enough to make a request at all.
    """

    source: ClassVar[str] = ""
    resource: ClassVar[str] = ""
    ttl: TTLPolicy
    policy: RefreshPolicy = RefreshPolicy.SYNCHRONOUS
    lock_ttl: int | None = None

    def __init__(
        self,
        origin: OriginClient,
        key_builder: IKeyBuilder | None = None,
    ) -> None:
        """Initialize the adapter.

        Args:
            origin: Shared HTTP client.
            key_builder: Builder for resource identities.
        """
        self._origin = origin
        self._keys = key_builder or ResourceKeyBuilder()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.source}:{self.resource})"

    # --- Identity ---

    def identify(self, params: Mapping[str, Any]) -> ResourceIdentity:
        """Resolve request parameters to a resource identity.

        The default is a single, parameterless resource.
        """
        return self._keys.build(self.source, self.resource)

    def build_cache_key(self, params: Mapping[str, Any]) -> str:
        """Return the cache key for ``params``."""
        return self.identify(params).cache_key

    def ensure_configured(self) -> None:
        """Raise ``ConfigurationMissing`` if the origin needs absent credentials."""
        return None

    # --- Values ---

    def empty_value(self) -> Any:
        """Value returned to callers when there is no result."""
        return None

    def negative_value(self) -> Any:
        """Value written into negative entries."""
        return self.empty_value()

    # --- Origin ---

    async def fetch_from_origin(self, identity: ResourceIdentity) -> Any:
        """Fetch the raw payload for ``identity``."""
        raise NotImplementedError

    def normalize(self, raw: Any) -> Any | None:
        """Map a raw payload to the cached shape, or None for no result."""
        raise NotImplementedError

    async def load(self, identity: ResourceIdentity) -> LoadResult:
        """Fetch and normalize ``identity``, absorbing origin failures.

        Returns:
            A positive LoadResult with the normalized value, or a negative
            one carrying :meth:`negative_value`.
        """
        try:
            raw = await self.fetch_from_origin(identity)
        except ResultCapped as e:
            logger.warning("Partial result for %s: %s", identity, e)
            return self._normalized(identity, e.partial)
        except OriginUnavailable as e:
            logger.error(
                "Fetching %s failed (status=%s): %s %s",
                identity,
                e.status_code,
                e,
                e.body or "",
            )
            return LoadResult.negative(self.negative_value())
        except MalformedResponse as e:
            logger.error("Unexpected response for %s: %s", identity, e)
            return LoadResult.negative(self.negative_value())

        return self._normalized(identity, raw)

    def _normalized(self, identity: ResourceIdentity, raw: Any) -> LoadResult:
        try:
            value = self.normalize(raw)
        except (MalformedResponse, KeyError, TypeError, ValueError, AttributeError) as e:
            logger.error("Could not normalize response for %s: %s", identity, e)
            return LoadResult.negative(self.negative_value())

        if value is None:
            logger.info("No result for %s; caching negative entry", identity)
            return LoadResult.negative(self.negative_value())

        return LoadResult.positive(value)

    # --- Helpers ---

    def first_candidate(
        self,
        candidates: Sequence[Any],
        identity: ResourceIdentity,
    ) -> Any | None:
        """Pick the first of several records that should have been one.

        Extra candidates are logged, never merged.
        """
        if len(candidates) > 1:
            logger.warning(
                "%s",
                Ambiguous(
                    f"{len(candidates)} upstream records matched one entity; using the first",
                    candidates=len(candidates),
                    context={"key": identity.cache_key},
                ),
            )
        return candidates[0] if candidates else None

    @staticmethod
    def require(params: Mapping[str, Any], name: str) -> str:
        """Return ``params[name]`` as a stripped, non-empty string.

        Raises:
            MissingIdentifier: If the parameter is absent or blank.
        """
        value = params.get(name)
        text = str(value).strip() if value is not None else ""
        if not text:
            raise MissingIdentifier(f"Missing required parameter: {name}")
        return text

    @staticmethod
    def numeric_id(value: Any) -> int | None:
        """Parse a positive integer id, returning None for anything else."""
        if isinstance(value, bool):
            return None
        if isinstance(value, int):
            return value if value > 0 else None
        text = str(value).strip() if value is not None else ""
        return int(text) if text.isdigit() and int(text) > 0 else None
