"""Compact JSON codec for store envelopes."""

import json
from datetime import date, datetime
from enum import Enum
from typing import Any

from deckcache.exceptions import DeckCacheError

_SEPARATORS = (",", ":")


class SerializationError(DeckCacheError):
    """An envelope could not be turned into bytes, or bytes back into one."""


def _to_json_compatible(obj: Any) -> Any:
    if isinstance(obj, (datetime, date)):
        return obj.isoformat()
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, (set, frozenset)):
        return sorted(obj, key=str)
    raise TypeError(f"{type(obj).__name__} values cannot be stored")


class JsonSerializer:
    """Encodes envelopes as compact UTF-8 JSON.

    Dates are stored as ISO 8601 strings, enums by value and sets as
    sorted lists. Decoding does not convert them back.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    def serialize(self, value: Any) -> bytes:
        try:
            text = json.dumps(
                value,
                default=_to_json_compatible,
                ensure_ascii=False,
                separators=_SEPARATORS,
            )
        except (TypeError, ValueError) as exc:
            raise SerializationError(
                "Value is not storable as JSON", context={"reason": str(exc)}
            ) from exc
        return text.encode(self._encoding)

    def deserialize(self, data: bytes) -> Any:
        try:
            return json.loads(data.decode(self._encoding))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise SerializationError(
                "Stored bytes are not valid JSON", context={"size": len(data)}
            ) from exc
