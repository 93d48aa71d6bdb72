"""Source adapter interface."""

from collections.abc import Mapping
from typing import Any, Protocol

from deckcache.core.entities.load_result import LoadResult, RefreshPolicy
from deckcache.core.entities.resource_identity import ResourceIdentity
from deckcache.core.entities.ttl_policy import TTLPolicy


class ISourceAdapter(Protocol):
    """What the refresh orchestrator needs from an upstream adapter."""

    ttl: TTLPolicy
    policy: RefreshPolicy
    lock_ttl: int | None

    def identify(self, params: Mapping[str, Any]) -> ResourceIdentity:
        """Resolve request parameters to a resource identity.

        Raises:
            MissingIdentifier: If a required parameter is absent.
        """
        ...

    def ensure_configured(self) -> None:
        """Check that credentials the origin needs are present.

        Raises:
            ConfigurationMissing: If they are not.
        """
        ...

    async def load(self, identity: ResourceIdentity) -> LoadResult:
        """Fetch and normalize, absorbing origin failures."""
        ...

    def empty_value(self) -> Any:
        """Value handed to callers when no result is available."""
        ...

    def negative_value(self) -> Any:
        """Value stored inside negative entries."""
        ...
