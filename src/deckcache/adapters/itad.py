"""IsThereAnyDeal game lookup and price overview."""

import logging
import re
from collections.abc import Mapping
from typing import Any

from deckcache.adapters.base import ExternalSourceAdapter
from deckcache.core.entities.resource_identity import ResourceIdentity
from deckcache.core.entities.ttl_policy import HOUR, TTLPolicy
from deckcache.core.interfaces.key_builder import IKeyBuilder
from deckcache.exceptions import ConfigurationMissing, MalformedResponse, MissingIdentifier
from deckcache.infrastructure.http import OriginClient

logger = logging.getLogger(__name__)

ITAD_URL = "https://api.isthereanydeal.com"

_UUID = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$", re.IGNORECASE
)


def is_uuid(value: Any) -> bool:
    return isinstance(value, str) and bool(_UUID.match(value.strip()))


class ItadAdapter(ExternalSourceAdapter):
    source = "itad"
    ttl = TTLPolicy(positive=6 * HOUR, negative=HOUR)

    def __init__(
        self,
        origin: OriginClient,
        *,
        api_key: str | None = None,
        country: str = "US",
        key_builder: IKeyBuilder | None = None,
    ) -> None:
        super().__init__(origin, key_builder)
        self._api_key = api_key
        self._country = country

    def ensure_configured(self) -> None:
        if not self._api_key:
            raise ConfigurationMissing(
                "An IsThereAnyDeal API key is required",
                context={"setting": "ITAD_API_KEY"},
            )


class ItadLookupAdapter(ItadAdapter):
    """Resolve a Steam app id, or a title, to an IsThereAnyDeal game.

    A miss is cached as ``{"found": false}`` and returned as None.
    """

    resource = "lookup"

    def identify(self, params: Mapping[str, Any]) -> ResourceIdentity:
        app_id = self.numeric_id(params.get("app_id"))
        if app_id is not None:
            return self._keys.build(
                self.source, self.resource, "appid", app_id, params={"appid": app_id}
            )

        title = str(params.get("title") or "").strip()
        if not title:
            raise MissingIdentifier("Either app_id or title must be provided")
        return self._keys.build(
            self.source, self.resource, "title", title, params={"title": title}
        )

    async def fetch_from_origin(self, identity: ResourceIdentity) -> Any:
        return await self._origin.get_json(
            f"{ITAD_URL}/games/lookup/v1",
            params={"key": self._api_key, **identity.params},
        )

    def normalize(self, raw: Any) -> dict[str, Any] | None:
        if not isinstance(raw, dict):
            raise MalformedResponse("Lookup response is not an object")
        game = raw.get("game")
        if not raw.get("found") or not isinstance(game, dict):
            return None
        return {
            "found": True,
            "game": {
                "id": (game.get("id") or "").strip(),
                "slug": game.get("slug"),
                "title": game.get("title"),
            },
        }

    def negative_value(self) -> dict[str, Any]:
        return {"found": False}


class ItadPricesAdapter(ItadAdapter):
    """Current best deal (or historical low) for one IsThereAnyDeal game."""

    resource = "prices"

    def identify(self, params: Mapping[str, Any]) -> ResourceIdentity:
        game_id = str(params.get("game_id") or "").strip()
        if not is_uuid(game_id):
            raise MissingIdentifier(f"Invalid IsThereAnyDeal game id: {game_id!r}")
        game_id = game_id.lower()
        return self._keys.build(
            self.source, self.resource, "id", game_id, params={"game_id": game_id}
        )

    async def fetch_from_origin(self, identity: ResourceIdentity) -> Any:
        overview = await self._origin.post_json(
            f"{ITAD_URL}/games/overview/v2",
            [identity.params["game_id"]],
            params={"key": self._api_key, "country": self._country},
        )
        if not isinstance(overview, dict):
            raise MalformedResponse("Overview response is not an object")
        return {"game_id": identity.params["game_id"], "overview": overview}

    def normalize(self, raw: Any) -> dict[str, Any] | None:
        deals = []
        for entry in raw["overview"].get("prices") or []:
            current = entry.get("current")
            if current:
                deals.append(_deal(current, url=current.get("url"), voucher=current.get("voucher")))
            elif entry.get("lowest"):
                deals.append(_deal(entry["lowest"], url=None, voucher=None))
        return {"game_id": raw["game_id"], "deals": deals}

    def negative_value(self) -> dict[str, Any]:
        return {}


def _deal(entry: dict[str, Any], url: str | None, voucher: str | None) -> dict[str, Any]:
    price = entry.get("price") or {}
    regular = entry.get("regular") or {}
    shop = entry.get("shop") or {}
    cut = entry.get("cut")
    return {
        "price_new": _number(price.get("amount")),
        "price_old": _number(regular.get("amount")),
        "price_cut": _number(cut),
        "currency": price.get("currency"),
        "recorded": entry.get("timestamp"),
        "url": url or None,
        "shop": {
            "id": str(shop["id"]) if shop.get("id") is not None else None,
            "name": shop.get("name"),
        },
        "voucher": voucher.strip() if isinstance(voucher, str) and voucher.strip() else None,
    }


def _number(value: Any) -> float | int | None:
    if isinstance(value, bool):
        return None
    return value if isinstance(value, (int, float)) else None
