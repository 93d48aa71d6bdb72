"""Latest foreign exchange rates."""

from typing import Any

from deckcache.adapters.base import ExternalSourceAdapter
from deckcache.core.entities.load_result import RefreshPolicy
from deckcache.core.entities.resource_identity import ResourceIdentity
from deckcache.core.entities.ttl_policy import DAY, HOUR, TTLPolicy

FXRATES_URL = "https://api.fxratesapi.com/latest"


class FxRatesAdapter(ExternalSourceAdapter):
    """Daily FX rates, refreshed in the background behind a 2 minute lock."""

    source = "fxrates"
    resource = "latest"
    ttl = TTLPolicy(positive=DAY, negative=HOUR)
    policy = RefreshPolicy.BACKGROUND
    lock_ttl = 120

    async def fetch_from_origin(self, identity: ResourceIdentity) -> Any:
        return await self._origin.get_json(FXRATES_URL)

    def normalize(self, raw: Any) -> dict[str, Any] | None:
        if not isinstance(raw, dict) or raw.get("success") is False:
            return None
        rates = raw.get("rates")
        if not isinstance(rates, dict) or not rates:
            return None
        return {
            "base": raw.get("base") if isinstance(raw.get("base"), str) else "USD",
            "date": raw.get("date") if isinstance(raw.get("date"), str) else None,
            "rates": {
                code: rate
                for code, rate in rates.items()
                if isinstance(rate, (int, float)) and not isinstance(rate, bool)
            },
        }

    def negative_value(self) -> dict[str, Any]:
        return {}
