"""Tests for JsonSerializer."""

from datetime import date, datetime, timezone

import pytest

from deckcache.core.entities.cache_entry import EntryKind
from deckcache.exceptions import DeckCacheError
from deckcache.infrastructure.serializers.json import JsonSerializer, SerializationError


class TestJsonSerializer:
    """Tests for JsonSerializer."""

    @pytest.fixture
    def serializer(self) -> JsonSerializer:
        return JsonSerializer()

    def test_envelope_roundtrip(self, serializer: JsonSerializer) -> None:
        envelope = {"kind": "positive", "value": [{"app_id": 620}], "stored_at": "2024-01-01"}

        assert serializer.deserialize(serializer.serialize(envelope)) == envelope

    def test_dates_become_iso_strings(self, serializer: JsonSerializer) -> None:
        value = {
            "at": datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc),
            "on": date(2024, 5, 1),
        }

        decoded = serializer.deserialize(serializer.serialize(value))

        assert decoded == {"at": "2024-05-01T12:00:00+00:00", "on": "2024-05-01"}

    def test_unserializable_value(self, serializer: JsonSerializer) -> None:
        with pytest.raises(SerializationError):
            serializer.serialize({"x": object()})

    @pytest.mark.parametrize("data", [b"not json", b"\xff\xfe"])
    def test_invalid_bytes(self, serializer: JsonSerializer, data: bytes) -> None:
        with pytest.raises(SerializationError):
            serializer.deserialize(data)

    def test_enums_and_sets(self, serializer: JsonSerializer) -> None:
        decoded = serializer.deserialize(
            serializer.serialize({"kind": EntryKind.NEGATIVE, "tags": {"b", "a"}})
        )

        assert decoded == {"kind": "negative", "tags": ["a", "b"]}

    def test_output_is_compact_utf8(self, serializer: JsonSerializer) -> None:
        assert serializer.serialize({"name": "Pokémon", "n": [1, 2]}) == (
            '{"name":"Pokémon","n":[1,2]}'.encode("utf-8")
        )

    def test_error_carries_context(self, serializer: JsonSerializer) -> None:
        with pytest.raises(SerializationError) as exc_info:
            serializer.deserialize(b"{")

        assert isinstance(exc_info.value, DeckCacheError)
        assert exc_info.value.context == {"size": 1}
