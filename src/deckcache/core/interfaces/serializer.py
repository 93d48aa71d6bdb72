"""Envelope codec contract."""

from typing import Any, Protocol


class ISerializer(Protocol):
    """Turns store envelopes into bytes and back.

    Both directions raise ``SerializationError`` on failure. The gateway
    treats a decode failure as a miss and lets encode failures propagate.
    """

    def serialize(self, value: Any) -> bytes: ...

    def deserialize(self, data: bytes) -> Any: ...
