"""Resource key builder implementation."""

import re
from typing import Any
from urllib.parse import quote

from deckcache.core.entities.resource_identity import ResourceIdentity
from deckcache.utils.hashing import hash_value

_WHITESPACE = re.compile(r"\s+")

# Characters left as-is in a qualifier; everything else is percent-encoded
_SAFE_CHARS = "-_.~+@="


class ResourceKeyBuilder:
    """Builds ``source:resource[:qualifier...]`` identities.

    Qualifiers are lower-cased, trimmed, whitespace-collapsed and
    percent-encoded, so free text (game names, search terms) maps to the
    same key regardless of casing or spacing and can never introduce an
    extra ``:`` segment. Over-long qualifiers are replaced by a hash.
    """

    def __init__(self, max_qualifier_length: int = 120) -> None:
        """Initialize the key builder.

        Args:
            max_qualifier_length: Qualifiers longer than this are hashed.
        """
        self._max_qualifier_length = max_qualifier_length

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
        return ResourceIdentity(
            source=source,
            resource=resource,
            qualifiers=tuple(self.sanitize(q) for q in qualifiers),
            params=dict(params or {}),
        )

    def sanitize(self, value: Any) -> str:
        """Normalize one qualifier value for use in a key.

        Args:
            value: Raw qualifier (str, int, bool or None).

        Returns:
            The sanitized qualifier string.
        """
        if value is None:
            return "none"
        if isinstance(value, bool):
            return "true" if value else "false"

        text = _WHITESPACE.sub(" ", str(value).strip().lower())
        encoded = quote(text, safe=_SAFE_CHARS)
        if len(encoded) > self._max_qualifier_length:
            return f"h:{hash_value(text)}"
        return encoded
