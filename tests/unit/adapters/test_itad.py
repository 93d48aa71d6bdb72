"""Tests for the IsThereAnyDeal adapters."""

import json

import httpx
import pytest

from deckcache.adapters.itad import ItadLookupAdapter, ItadPricesAdapter, is_uuid
from deckcache.core.services.cache_gateway import CacheGateway
from deckcache.core.services.refresh_orchestrator import RefreshOrchestrator
from deckcache.exceptions import ConfigurationMissing, MissingIdentifier

GAME_ID = "018d937f-21e1-728e-86d7-9acb3c59f2bb"


class TestItadLookup:
    """Tests for ItadLookupAdapter."""

    @pytest.mark.asyncio
    async def test_not_found_is_cached_for_an_hour(
        self,
        make_origin,
        orchestrator: RefreshOrchestrator,
        gateway: CacheGateway,
        clock,
    ) -> None:
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json={"found": False})

        adapter = ItadLookupAdapter(make_origin(handler), api_key="k")

        assert await orchestrator.fetch(adapter, {"app_id": 620}) is None
        assert requests[0].url.path == "/games/lookup/v1"
        assert requests[0].url.params["appid"] == "620"
        assert requests[0].url.params["key"] == "k"

        entry = await gateway.get_entry("itad:lookup:appid:620")
        assert entry is not None and entry.is_negative
        assert entry.value == {"found": False}

        clock.advance(3599)
        assert await orchestrator.fetch(adapter, {"app_id": 620}) is None
        assert len(requests) == 1

        clock.advance(2)
        await orchestrator.fetch(adapter, {"app_id": 620})
        assert len(requests) == 2

    @pytest.mark.asyncio
    async def test_found(self, make_origin, orchestrator: RefreshOrchestrator) -> None:
        payload = {
            "found": True,
            "game": {"id": GAME_ID, "slug": "portal-ii", "title": "Portal 2", "type": "game"},
        }
        adapter = ItadLookupAdapter(
            make_origin(lambda r: httpx.Response(200, json=payload)), api_key="k"
        )

        assert await orchestrator.fetch(adapter, {"title": "Portal 2"}) == {
            "found": True,
            "game": {"id": GAME_ID, "slug": "portal-ii", "title": "Portal 2"},
        }

    def test_app_id_wins_over_title(self, make_origin) -> None:
        adapter = ItadLookupAdapter(make_origin(lambda r: httpx.Response(200)), api_key="k")

        identity = adapter.identify({"app_id": "620", "title": "Portal 2"})

        assert identity.cache_key == "itad:lookup:appid:620"
        assert identity.params == {"appid": 620}

    def test_requires_app_id_or_title(self, make_origin) -> None:
        adapter = ItadLookupAdapter(make_origin(lambda r: httpx.Response(200)), api_key="k")

        with pytest.raises(MissingIdentifier):
            adapter.identify({})

    @pytest.mark.asyncio
    async def test_requires_api_key(self, make_origin, orchestrator: RefreshOrchestrator) -> None:
        adapter = ItadLookupAdapter(make_origin(lambda r: httpx.Response(200)))

        with pytest.raises(ConfigurationMissing):
            await orchestrator.fetch(adapter, {"app_id": 620})


class TestItadPrices:
    """Tests for ItadPricesAdapter."""

    @pytest.mark.asyncio
    async def test_current_deal_or_historical_low(
        self, make_origin, orchestrator: RefreshOrchestrator
    ) -> None:
        requests: list[httpx.Request] = []
        overview = {
            "prices": [
                {
                    "id": GAME_ID,
                    "current": {
                        "shop": {"id": 61, "name": "Steam"},
                        "price": {"amount": 1.99, "currency": "USD"},
                        "regular": {"amount": 9.99, "currency": "USD"},
                        "cut": 80,
                        "voucher": " ",
                        "url": "https://itad.link/deal",
                        "timestamp": "2024-06-01T00:00:00+00:00",
                    },
                    "lowest": None,
                },
                {
                    "id": GAME_ID,
                    "current": None,
                    "lowest": {
                        "shop": {"id": 35, "name": "GOG"},
                        "price": {"amount": 0.99, "currency": "USD"},
                        "regular": {"amount": 9.99, "currency": "USD"},
                        "cut": 90,
                        "timestamp": "2023-01-01T00:00:00+00:00",
                    },
                },
            ]
        }

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json=overview)

        adapter = ItadPricesAdapter(make_origin(handler), api_key="k", country="GB")
        result = await orchestrator.fetch(adapter, {"game_id": GAME_ID.upper()})

        assert requests[0].method == "POST"
        assert requests[0].url.params["country"] == "GB"
        assert json.loads(requests[0].content) == [GAME_ID]

        current, lowest = result["deals"]
        assert result["game_id"] == GAME_ID
        assert current["shop"] == {"id": "61", "name": "Steam"}
        assert current["price_new"] == 1.99
        assert current["voucher"] is None
        assert current["url"] == "https://itad.link/deal"
        assert lowest["url"] is None
        assert lowest["price_cut"] == 90

    def test_rejects_invalid_game_id(self, make_origin) -> None:
        adapter = ItadPricesAdapter(make_origin(lambda r: httpx.Response(200)), api_key="k")

        with pytest.raises(MissingIdentifier):
            adapter.identify({"game_id": "portal-ii"})

    def test_is_uuid(self) -> None:
        assert is_uuid(GAME_ID)
        assert not is_uuid("nope")
        assert not is_uuid(None)
