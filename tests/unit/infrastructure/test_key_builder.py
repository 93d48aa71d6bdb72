"""Tests for ResourceKeyBuilder."""

import pytest

from deckcache.infrastructure.key_builders.resource import ResourceKeyBuilder


class TestResourceKeyBuilder:
    """Tests for ResourceKeyBuilder."""

    @pytest.fixture
    def builder(self) -> ResourceKeyBuilder:
        return ResourceKeyBuilder()

    def test_build_key(self, builder: ResourceKeyBuilder) -> None:
        identity = builder.build("steam", "app_details", 620, params={"app_id": 620})

        assert identity.cache_key == "steam:app_details:620"
        assert identity.params == {"app_id": 620}

    def test_parameterless_key(self, builder: ResourceKeyBuilder) -> None:
        assert builder.build("fx", "rates").cache_key == "fx:rates"

    def test_free_text_is_normalized(self, builder: ResourceKeyBuilder) -> None:
        a = builder.build("itad", "lookup", "title", "  Hollow   Knight ")
        b = builder.build("itad", "lookup", "title", "hollow knight")

        assert a == b
        assert a.cache_key == "itad:lookup:title:hollow%20knight"

    def test_separator_cannot_be_injected(self, builder: ResourceKeyBuilder) -> None:
        identity = builder.build("github", "project_details", "name", "a:b")

        assert identity.cache_key.count(":") == 3
        assert identity.qualifiers[-1] == "a%3Ab"

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(None, "none"), (True, "true"), (False, "false"), (42, "42"), ("a+b@c=d", "a+b@c=d")],
    )
    def test_sanitize(self, builder: ResourceKeyBuilder, value: object, expected: str) -> None:
        assert builder.sanitize(value) == expected

    def test_long_qualifier_is_hashed(self) -> None:
        builder = ResourceKeyBuilder(max_qualifier_length=10)

        qualifier = builder.sanitize("x" * 50)

        assert qualifier.startswith("h:")
        assert qualifier == builder.sanitize("X" * 50)
