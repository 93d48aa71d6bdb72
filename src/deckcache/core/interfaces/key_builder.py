"""Key builder interface."""

from typing import Any, Protocol

from deckcache.core.entities.resource_identity import ResourceIdentity


class IKeyBuilder(Protocol):
    """Contract for building resource identities from request parameters.

    Keys must be derived from parameters only, never from time or
    randomness, so a warm cache survives process restarts.
    """

    def build(
        self,
        source: str,
        resource: str,
        *qualifiers: Any,
        params: dict[str, Any] | None = None,
    ) -> ResourceIdentity:
        """Build the identity for one upstream resource.

        Args:
            source: Upstream name, e.g. ``github``.
            resource: Resource name within the source.
            *qualifiers: Parameter values that distinguish entries.
            params: Normalized parameters carried to the adapter.

        Returns:
            A ResourceIdentity with sanitized qualifiers.
        """
        ...

    def sanitize(self, value: Any) -> str:
        """Normalize one free-form value for use as a key segment."""
        ...
