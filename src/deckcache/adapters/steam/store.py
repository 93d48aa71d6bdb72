"""Steam storefront lookups."""

from collections.abc import Mapping
from typing import Any

from deckcache.adapters.base import ExternalSourceAdapter
from deckcache.core.entities.resource_identity import ResourceIdentity
from deckcache.core.entities.ttl_policy import DAY, HOUR, TTLPolicy
from deckcache.exceptions import MalformedResponse, MissingIdentifier

STORE_URL = "https://store.steampowered.com"


class SteamAdapter(ExternalSourceAdapter):
    source = "steam"

    def app_identity(self, params: Mapping[str, Any]) -> ResourceIdentity:
        app_id = self.numeric_id(params.get("app_id"))
        if app_id is None:
            raise MissingIdentifier("A numeric Steam app_id is required")
        return self._keys.build(self.source, self.resource, app_id, params={"app_id": app_id})


class SteamAppDetailsAdapter(SteamAdapter):
    """Store page details for one app."""

    resource = "app_details"
    ttl = TTLPolicy(positive=2 * DAY, negative=HOUR)

    def identify(self, params: Mapping[str, Any]) -> ResourceIdentity:
        return self.app_identity(params)

    async def fetch_from_origin(self, identity: ResourceIdentity) -> Any:
        app_id = identity.params["app_id"]
        payload = await self._origin.get_json(
            f"{STORE_URL}/api/appdetails", params={"appids": app_id}
        )
        if not isinstance(payload, dict):
            raise MalformedResponse("App details response is not an object")
        return payload.get(str(app_id))

    def normalize(self, raw: Any) -> dict[str, Any] | None:
        if not isinstance(raw, dict) or not raw.get("success"):
            return None
        data = raw.get("data")
        if not isinstance(data, dict):
            return None

        release = data.get("release_date") or {}
        return {
            "steam_appid": data.get("steam_appid"),
            "name": data.get("name") or "",
            "type": data.get("type") or "",
            "is_free": bool(data.get("is_free")),
            "short_description": data.get("short_description") or "",
            "header_image": data.get("header_image") or "",
            "developers": list(data.get("developers") or []),
            "publishers": list(data.get("publishers") or []),
            "platforms": dict(data.get("platforms") or {}),
            "genres": [g.get("description", "") for g in data.get("genres") or []],
            "categories": [c.get("description", "") for c in data.get("categories") or []],
            "release_date": {
                "coming_soon": bool(release.get("coming_soon")),
                "date": release.get("date") or "",
            },
        }

    def empty_value(self) -> dict[str, Any]:
        return {}


class SteamSuggestionsAdapter(SteamAdapter):
    """Store search suggestions, games only."""

    resource = "search_suggestions"
    ttl = TTLPolicy(positive=DAY, negative=HOUR)

    def identify(self, params: Mapping[str, Any]) -> ResourceIdentity:
        term = self.require(params, "term")
        return self._keys.build(self.source, self.resource, term, params={"term": term})

    async def fetch_from_origin(self, identity: ResourceIdentity) -> Any:
        return await self._origin.get_json(
            f"{STORE_URL}/search/suggest",
            params={
                "f": "json",
                "cc": "US",
                "use_store_query": 1,
                "category1": 998,
                "ndl": 1,
                "term": identity.params["term"],
            },
        )

    def normalize(self, raw: Any) -> list[dict[str, Any]] | None:
        if not isinstance(raw, list):
            raise MalformedResponse("Suggestions response is not a list")
        return [
            {"app_id": item.get("id"), "name": item.get("name") or ""}
            for item in raw
            if isinstance(item, dict) and item.get("type") == "game"
        ]

    def empty_value(self) -> list[dict[str, Any]]:
        return []
