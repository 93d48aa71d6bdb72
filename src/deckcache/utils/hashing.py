"""Short stable digests for values too long or too odd to sit in a key."""

import hashlib
import json
from typing import Any

DIGEST_LENGTH = 16


def hash_value(value: Any, length: int = DIGEST_LENGTH) -> str:
    """Digest ``value`` so that equal mappings hash equally whatever their key order.

    ``None`` maps to the literal ``"none"`` so that absent qualifiers stay
    readable in keys.
    """
    if value is None:
        return "none"
    canonical = json.dumps(value, sort_keys=True, separators=(",", ":"), default=str)
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()[:length]
