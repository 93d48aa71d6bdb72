"""SteamDeckHQ game reviews."""

from collections.abc import Mapping
from typing import Any

from deckcache.adapters.base import ExternalSourceAdapter
from deckcache.core.entities.load_result import RefreshPolicy
from deckcache.core.entities.resource_identity import ResourceIdentity
from deckcache.core.entities.ttl_policy import DAY, HOUR, TTLPolicy
from deckcache.exceptions import MalformedResponse, MissingIdentifier

SDHQ_URL = "https://steamdeckhq.com"


def _rendered(field: Any) -> str:
    if isinstance(field, dict):
        return field.get("rendered") or ""
    return ""


class SdhqReviewsAdapter(ExternalSourceAdapter):
    """Reviews for one Steam app, refreshed in the background."""

    source = "sdhq"
    resource = "reviews"
    ttl = TTLPolicy(positive=2 * DAY, negative=HOUR)
    policy = RefreshPolicy.BACKGROUND
    lock_ttl = 60

    def identify(self, params: Mapping[str, Any]) -> ResourceIdentity:
        app_id = self.numeric_id(params.get("app_id"))
        if app_id is None:
            raise MissingIdentifier("A numeric Steam app_id is required")
        return self._keys.build(self.source, self.resource, app_id, params={"app_id": app_id})

    async def fetch_from_origin(self, identity: ResourceIdentity) -> Any:
        return await self._origin.get_json(
            f"{SDHQ_URL}/wp-json/wp/v2/game-reviews/",
            params={"meta_key": "steam_app_id", "meta_value": identity.params["app_id"]},
        )

    def normalize(self, raw: Any) -> list[dict[str, Any]] | None:
        if not isinstance(raw, list):
            raise MalformedResponse("Review listing is not a list")
        reviews = [
            {
                "id": review.get("id"),
                "title": _rendered(review.get("title")),
                "link": review.get("link") or "",
                "excerpt": _rendered(review.get("excerpt")),
                "content": _rendered(review.get("content")),
                "date": review.get("date") or "",
                "modified": review.get("modified") or "",
                "acf": review.get("acf") if isinstance(review.get("acf"), dict) else {},
            }
            for review in raw
            if isinstance(review, dict)
        ]
        return reviews or None

    def empty_value(self) -> list[dict[str, Any]]:
        return []
