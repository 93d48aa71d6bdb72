"""Tests for domain entities."""

from datetime import timedelta

import pytest

from deckcache.core.entities import (
    DAY,
    HOUR,
    CacheConfig,
    CacheEntry,
    EntryKind,
    LoadResult,
    ResourceIdentity,
    TTLPolicy,
)


class TestTTLPolicy:
    """Tests for TTLPolicy."""

    def test_negative_defaults_to_an_hour(self) -> None:
        policy = TTLPolicy(positive=DAY)
        assert policy.negative == HOUR
        assert policy.positive_ttl == timedelta(days=1)

    def test_negative_must_be_shorter_than_positive(self) -> None:
        with pytest.raises(ValueError):
            TTLPolicy(positive=HOUR, negative=HOUR)

    def test_negative_must_be_positive(self) -> None:
        with pytest.raises(ValueError):
            TTLPolicy(positive=HOUR, negative=0)

    @pytest.mark.parametrize("positive", [2, 3, 600, 3600, 7200])
    def test_listing_policy_keeps_ordering(self, positive: int) -> None:
        policy = TTLPolicy.for_listing(positive)
        assert 0 < policy.negative < policy.positive
        assert policy.negative <= HOUR

    def test_listing_policy_rejects_tiny_ttl(self) -> None:
        with pytest.raises(ValueError):
            TTLPolicy.for_listing(1)


class TestCacheEntry:
    """Tests for CacheEntry."""

    def test_envelope_roundtrip_keeps_kind(self) -> None:
        entry = CacheEntry(
            key="itad:lookup:appid:620",
            value={"found": False},
            ttl=timedelta(hours=1),
            kind=EntryKind.NEGATIVE,
        )

        rebuilt = CacheEntry.from_envelope(entry.key, entry.to_envelope())

        assert rebuilt.is_negative
        assert rebuilt.value == {"found": False}
        assert rebuilt.stored_at == entry.stored_at

    @pytest.mark.parametrize("payload", [[1, 2], {"value": 1}, "text", None])
    def test_from_envelope_rejects_foreign_payloads(self, payload: object) -> None:
        with pytest.raises(ValueError):
            CacheEntry.from_envelope("k", payload)

    def test_read_back_entry_has_no_known_ttl(self) -> None:
        entry = CacheEntry(key="k", value=1, ttl=timedelta(minutes=5))

        assert CacheEntry.from_envelope("k", entry.to_envelope()).ttl is None


class TestResourceIdentity:
    """Tests for ResourceIdentity."""

    def test_cache_and_lock_keys(self) -> None:
        identity = ResourceIdentity("steam", "app_details", ("620",))
        assert identity.cache_key == "steam:app_details:620"
        assert identity.lock_key == "lock:steam:app_details:620"

    def test_params_are_not_part_of_equality(self) -> None:
        a = ResourceIdentity("steam", "app_details", ("620",), params={"app_id": 620})
        b = ResourceIdentity("steam", "app_details", ("620",), params={"app_id": "620"})
        assert a == b
        assert hash(a) == hash(b)


class TestLoadResult:
    def test_constructors(self) -> None:
        assert not LoadResult.positive([1]).is_negative
        assert LoadResult.negative({}).kind is EntryKind.NEGATIVE


class TestCacheConfig:
    def test_defaults(self) -> None:
        config = CacheConfig()
        assert config.default_ttl == timedelta(hours=24)
        assert config.default_lock_ttl == 60

    def test_lock_ttl_bounds(self) -> None:
        with pytest.raises(ValueError):
            CacheConfig(default_lock_ttl=30)
        with pytest.raises(ValueError):
            CacheConfig(default_lock_ttl=300)
