"""Steam Deck and SteamOS compatibility reports."""

from collections.abc import Mapping
from typing import Any

from deckcache.adapters.steam.store import STORE_URL, SteamAdapter
from deckcache.adapters.steam.strings import describe
from deckcache.core.entities.resource_identity import ResourceIdentity
from deckcache.core.entities.ttl_policy import DAY, HOUR, TTLPolicy


class SteamCompatibilityAdapter(SteamAdapter):
    """Valve's compatibility rating for one app.

    Deck and SteamOS result items are merged into one list, de-duplicated
    by report token and translated to display text.
    """

    resource = "app_compatibility"
    ttl = TTLPolicy(positive=2 * DAY, negative=HOUR)

    def identify(self, params: Mapping[str, Any]) -> ResourceIdentity:
        return self.app_identity(params)

    async def fetch_from_origin(self, identity: ResourceIdentity) -> Any:
        return await self._origin.get_json(
            f"{STORE_URL}/saleaction/ajaxgetdeckappcompatibilityreport",
            params={"nAppID": identity.params["app_id"], "l": "en", "cc": "US"},
        )

    def normalize(self, raw: Any) -> dict[str, Any] | None:
        if not isinstance(raw, dict) or not raw.get("success"):
            return None
        results = raw.get("results")
        if not isinstance(results, dict) or not results:
            return None

        items: list[dict[str, Any]] = []
        seen: set[str] = set()
        for item in [
            *(results.get("resolved_items") or []),
            *(results.get("steamos_resolved_items") or []),
        ]:
            token = item.get("loc_token") if isinstance(item, dict) else None
            if not token or token in seen:
                continue
            seen.add(token)
            display_type = item.get("display_type")
            items.append(
                {
                    "code": display_type if isinstance(display_type, int) else None,
                    "description": describe(token),
                }
            )

        return {
            "compatibility_code": _int_or_none(results.get("resolved_category")),
            "steamos_compatibility_code": _int_or_none(
                results.get("steamos_resolved_category")
            ),
            "compatibility_items": items,
            "blog_url": results.get("steam_deck_blog_url") or None,
        }


def _int_or_none(value: Any) -> int | None:
    return value if isinstance(value, int) and not isinstance(value, bool) else None
