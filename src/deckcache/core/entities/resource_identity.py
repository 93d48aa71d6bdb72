"""Resource identity value object."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

LOCK_NAMESPACE = "lock"


@dataclass(frozen=True)
class ResourceIdentity:
    """Composite identity of one cacheable upstream resource.

    The qualifiers are already sanitized by the key builder. ``params``
    carries the normalized request parameters the adapter needs to call
    its origin; they are not part of equality.
    """

    source: str
    resource: str
    qualifiers: tuple[str, ...] = ()
    params: Mapping[str, Any] = field(default_factory=dict, compare=False)

    @property
    def cache_key(self) -> str:
        """Return ``source:resource[:qualifier...]``."""
        return ":".join((self.source, self.resource, *self.qualifiers))

    @property
    def lock_key(self) -> str:
        """Return the refresh-lock key guarding this identity's cache entry."""
        return f"{LOCK_NAMESPACE}:{self.cache_key}"

    def __str__(self) -> str:
        return self.cache_key
