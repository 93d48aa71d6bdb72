"""ProtonDB community rating summaries."""

from collections.abc import Mapping
from typing import Any

from deckcache.adapters.base import ExternalSourceAdapter
from deckcache.core.entities.resource_identity import ResourceIdentity
from deckcache.core.entities.ttl_policy import DAY, HOUR, TTLPolicy
from deckcache.exceptions import MissingIdentifier

PROTONDB_URL = "https://www.protondb.com"


class ProtonDbSummaryAdapter(ExternalSourceAdapter):
    """Rating tier and report counts for one Steam app.

    Apps ProtonDB has never heard of answer 404, which is cached as a
    negative entry like any other origin failure.
    """

    source = "protondb"
    resource = "summary"
    ttl = TTLPolicy(positive=DAY, negative=HOUR)

    def identify(self, params: Mapping[str, Any]) -> ResourceIdentity:
        app_id = self.numeric_id(params.get("app_id"))
        if app_id is None:
            raise MissingIdentifier("A numeric Steam app_id is required")
        return self._keys.build(self.source, self.resource, app_id, params={"app_id": app_id})

    async def fetch_from_origin(self, identity: ResourceIdentity) -> Any:
        app_id = identity.params["app_id"]
        return await self._origin.get_json(
            f"{PROTONDB_URL}/api/v1/reports/summaries/{app_id}.json"
        )

    def normalize(self, raw: Any) -> dict[str, Any] | None:
        if not isinstance(raw, dict) or not raw:
            return None
        score = raw.get("score")
        total = raw.get("total")
        return {
            "tier": raw.get("tier"),
            "score": score if isinstance(score, (int, float)) else None,
            "confidence": raw.get("confidence"),
            "total_reports": total if isinstance(total, int) else None,
            "trending_tier": raw.get("trendingTier") or raw.get("bestReportedTier") or None,
        }
