"""Tests for hashing, metrics and exceptions."""

import logging

import pytest

from deckcache.exceptions import Ambiguous, DeckCacheError, OriginUnavailable
from deckcache.utils.hashing import hash_value
from deckcache.utils.metrics import log_metric


def test_hash_value_is_order_independent() -> None:
    assert hash_value({"a": 1, "b": 2}) == hash_value({"b": 2, "a": 1})
    assert len(hash_value([1, 2, 3])) == 16
    assert hash_value(None) == "none"


def test_log_metric(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="deckcache.metrics")

    payload = log_metric("github_fetch_project_query_rate_limit_cost", 3, page=1)

    assert payload["log_type"] == "METRIC"
    assert payload["metric_value"] == 3
    assert payload["page"] == 1
    record = caplog.records[-1]
    assert record.name == "deckcache.metrics"
    assert record.metric == payload


def test_error_context_in_message() -> None:
    error = OriginUnavailable("HTTP 503", status_code=503, context={"url": "https://x.test"})

    assert isinstance(error, DeckCacheError)
    assert str(error) == "HTTP 503 (url='https://x.test')"
    assert Ambiguous("two matches", candidates=2).candidates == 2
