"""Tests for the background-refreshed sources: SDHQ, FX rates, summaries."""

import asyncio
import json
from typing import Any

import httpx
import pytest

from deckcache.adapters.blogger import ReportsSummaryAdapter, summary_hash
from deckcache.adapters.fxrates import FxRatesAdapter
from deckcache.adapters.sdhq import SdhqReviewsAdapter
from deckcache.core.entities import RefreshPolicy
from deckcache.core.services.cache_gateway import CacheGateway
from deckcache.core.services.refresh_orchestrator import RefreshOrchestrator
from deckcache.exceptions import ConfigurationMissing, MissingIdentifier

REVIEW = {
    "id": 9,
    "title": {"rendered": "Celeste Steam Deck review"},
    "link": "https://steamdeckhq.com/game-reviews/celeste/",
    "excerpt": {"rendered": "<p>Great</p>"},
    "content": {"rendered": "<p>Long</p>"},
    "date": "2024-01-01T00:00:00",
    "modified": "2024-01-02T00:00:00",
    "acf": {"sdhq_rating": 5},
}

GAME = {
    "app_id": 504230,
    "game_name": "Celeste",
    "reports": [
        {"id": 1, "updated_at": "2024-02-01T00:00:00Z"},
        {"id": 2, "updated_at": "2024-03-01T00:00:00Z"},
    ],
    "external_reviews": [],
}


class TestSdhqReviews:
    """Background refresh of SDHQ reviews."""

    def test_policy(self) -> None:
        assert SdhqReviewsAdapter.policy is RefreshPolicy.BACKGROUND
        assert 60 <= SdhqReviewsAdapter.lock_ttl <= 120

    @pytest.mark.asyncio
    async def test_concurrent_cold_calls_fetch_once(
        self, make_origin, orchestrator: RefreshOrchestrator, clock
    ) -> None:
        release = asyncio.Event()
        requests: list[httpx.Request] = []

        async def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            await release.wait()
            return httpx.Response(200, json=[REVIEW])

        adapter = SdhqReviewsAdapter(make_origin(handler))

        first, second = await asyncio.gather(
            orchestrator.fetch(adapter, {"app_id": 504230}),
            orchestrator.fetch(adapter, {"app_id": 504230}),
        )
        assert first == second == []
        assert orchestrator.pending == 1

        # Still inside the lock TTL while the refresh is running
        clock.advance(0.2)
        assert await orchestrator.fetch(adapter, {"app_id": 504230}) == []
        assert orchestrator.pending == 1

        release.set()
        await orchestrator.drain()

        reviews = await orchestrator.fetch(adapter, {"app_id": 504230})
        assert len(requests) == 1
        assert reviews[0]["title"] == "Celeste Steam Deck review"
        assert reviews[0]["acf"] == {"sdhq_rating": 5}

    @pytest.mark.asyncio
    async def test_no_reviews_is_negative(
        self, make_origin, orchestrator: RefreshOrchestrator, gateway: CacheGateway
    ) -> None:
        adapter = SdhqReviewsAdapter(make_origin(lambda r: httpx.Response(200, json=[])))

        await orchestrator.fetch(adapter, {"app_id": 1})
        await orchestrator.drain()

        entry = await gateway.get_entry("sdhq:reviews:1")
        assert entry is not None and entry.is_negative
        assert await orchestrator.fetch(adapter, {"app_id": 1}) == []


class TestFxRates:
    """Background refresh of FX rates."""

    @pytest.mark.asyncio
    async def test_rates(self, make_origin, orchestrator: RefreshOrchestrator) -> None:
        payload = {
            "success": True,
            "base": "USD",
            "date": "2024-06-01T00:00:00.000Z",
            "rates": {"EUR": 0.92, "GBP": 0.78, "BAD": "n/a"},
        }
        adapter = FxRatesAdapter(make_origin(lambda r: httpx.Response(200, json=payload)))

        assert await orchestrator.fetch(adapter) is None
        await orchestrator.drain()

        rates = await orchestrator.fetch(adapter)
        assert rates["rates"] == {"EUR": 0.92, "GBP": 0.78}
        assert adapter.build_cache_key({}) == "fxrates:latest"

    @pytest.mark.asyncio
    async def test_failure_writes_negative(
        self, make_origin, orchestrator: RefreshOrchestrator, gateway: CacheGateway
    ) -> None:
        adapter = FxRatesAdapter(make_origin(lambda r: httpx.Response(500)))

        await orchestrator.fetch(adapter)
        await orchestrator.drain()

        entry = await gateway.get_entry("fxrates:latest")
        assert entry is not None and entry.is_negative
        assert entry.value == {}
        assert await orchestrator.fetch(adapter) is None


class TestReportsSummary:
    """Background refresh of report summaries."""

    def test_key_changes_with_reports(self, make_origin) -> None:
        adapter = ReportsSummaryAdapter(make_origin(lambda r: httpx.Response(200)), api_key="k")
        updated = {**GAME, "reports": [*GAME["reports"], {"id": 3, "updated_at": "2024-04-01"}]}

        before = adapter.identify(GAME)
        after = adapter.identify(updated)

        assert before.cache_key.startswith("reports_summary_blog:504230:")
        assert before != after
        assert summary_hash(GAME) == summary_hash(dict(GAME))

    def test_name_is_used_without_app_id(self, make_origin) -> None:
        adapter = ReportsSummaryAdapter(make_origin(lambda r: httpx.Response(200)), api_key="k")

        identity = adapter.identify({"game_name": "Hollow Knight"})

        assert identity.cache_key.startswith("reports_summary_blog:hollow%20knight:")

    def test_identifier_required(self, make_origin) -> None:
        adapter = ReportsSummaryAdapter(make_origin(lambda r: httpx.Response(200)), api_key="k")

        with pytest.raises(MissingIdentifier):
            adapter.identify({"reports": []})

    @pytest.mark.asyncio
    async def test_requires_api_key(self, make_origin, orchestrator: RefreshOrchestrator) -> None:
        adapter = ReportsSummaryAdapter(make_origin(lambda r: httpx.Response(200)))

        with pytest.raises(ConfigurationMissing):
            await orchestrator.fetch(adapter, GAME)
        assert orchestrator.pending == 0

    @pytest.mark.asyncio
    async def test_summary_posted_and_cached(
        self, make_origin, orchestrator: RefreshOrchestrator
    ) -> None:
        bodies: list[dict[str, Any]] = []

        def handler(request: httpx.Request) -> httpx.Response:
            assert request.headers["x-api-key"] == "k"
            bodies.append(json.loads(request.content))
            return httpx.Response(200, json={"reports_summary": "  Runs great.  "})

        adapter = ReportsSummaryAdapter(make_origin(handler), api_key="k")

        assert await orchestrator.fetch(adapter, GAME) is None
        await orchestrator.drain()

        assert await orchestrator.fetch(adapter, GAME) == {"reports_summary": "Runs great."}
        assert bodies[0]["game_name"] == "Celeste"

    @pytest.mark.asyncio
    async def test_explicit_null_is_positive(
        self, make_origin, orchestrator: RefreshOrchestrator, gateway: CacheGateway
    ) -> None:
        adapter = ReportsSummaryAdapter(
            make_origin(lambda r: httpx.Response(200, json={"reports_summary": None})),
            api_key="k",
        )

        await orchestrator.fetch(adapter, GAME)
        await orchestrator.drain()

        entry = await gateway.get_entry(adapter.build_cache_key(GAME))
        assert entry is not None and not entry.is_negative

    @pytest.mark.asyncio
    async def test_empty_summary_is_negative(
        self, make_origin, orchestrator: RefreshOrchestrator, gateway: CacheGateway
    ) -> None:
        adapter = ReportsSummaryAdapter(
            make_origin(lambda r: httpx.Response(200, json={"reports_summary": " "})),
            api_key="k",
        )

        await orchestrator.fetch(adapter, GAME)
        await orchestrator.drain()

        entry = await gateway.get_entry(adapter.build_cache_key(GAME))
        assert entry is not None and entry.is_negative

    @pytest.mark.asyncio
    async def test_timeout_is_negative(
        self, make_origin, orchestrator: RefreshOrchestrator, gateway: CacheGateway
    ) -> None:
        async def handler(request: httpx.Request) -> httpx.Response:
            await asyncio.sleep(1)
            return httpx.Response(200, json={"reports_summary": "late"})

        adapter = ReportsSummaryAdapter(make_origin(handler), api_key="k", timeout=0.01)

        await orchestrator.fetch(adapter, GAME)
        await orchestrator.drain()

        entry = await gateway.get_entry(adapter.build_cache_key(GAME))
        assert entry is not None and entry.is_negative
