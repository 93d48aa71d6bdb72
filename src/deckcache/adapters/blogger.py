"""Narrative summaries of a game's reports, written by the blogger worker."""

import asyncio
import logging
from collections.abc import Mapping
from typing import Any

from deckcache.adapters.base import ExternalSourceAdapter
from deckcache.core.entities.load_result import RefreshPolicy
from deckcache.core.entities.resource_identity import ResourceIdentity
from deckcache.core.entities.ttl_policy import DAY, HOUR, TTLPolicy
from deckcache.core.interfaces.key_builder import IKeyBuilder
from deckcache.exceptions import (
    ConfigurationMissing,
    MalformedResponse,
    MissingIdentifier,
    OriginUnavailable,
)
from deckcache.infrastructure.http import OriginClient
from deckcache.utils.hashing import hash_value

logger = logging.getLogger(__name__)

DEFAULT_BLOGGER_URL = "https://blogger.deckverified.games"
REQUEST_TIMEOUT_SECONDS = 30.0


def summary_hash(game: Mapping[str, Any]) -> str:
    """Hash of what the summary depends on; changes when reports do."""
    reports = game.get("reports") or []
    updated = sorted(r.get("updated_at") for r in reports if isinstance(r, dict) and r.get("updated_at"))
    return hash_value(
        {
            "app_id": game.get("app_id"),
            "reports_len": len(reports),
            "ext_len": len(game.get("external_reviews") or []),
            "latest_report_updated_at": updated[-1] if updated else None,
        }
    )


class ReportsSummaryAdapter(ExternalSourceAdapter):
    """Summary text for a game's reports.

    The key carries a hash of the report set, so new or edited reports
    produce a new entry. An explicit ``null`` summary from the worker is
    a real answer and is cached for the full TTL.
    """

    source = "reports_summary_blog"
    ttl = TTLPolicy(positive=182 * DAY, negative=HOUR)
    policy = RefreshPolicy.BACKGROUND
    lock_ttl = 60

    def __init__(
        self,
        origin: OriginClient,
        *,
        api_key: str | None = None,
        url: str | None = None,
        timeout: float = REQUEST_TIMEOUT_SECONDS,
        key_builder: IKeyBuilder | None = None,
    ) -> None:
        super().__init__(origin, key_builder)
        self._api_key = api_key
        self._url = url or DEFAULT_BLOGGER_URL
        self._timeout = timeout

    def identify(self, params: Mapping[str, Any]) -> ResourceIdentity:
        game = dict(params)
        base = str(game.get("app_id") or game.get("game_name") or "").strip()
        if not base:
            raise MissingIdentifier("Either app_id or game_name must be provided")
        return ResourceIdentity(
            source=self.source,
            resource=self._keys.sanitize(base),
            qualifiers=(summary_hash(game),),
            params=game,
        )

    def ensure_configured(self) -> None:
        if not self._api_key:
            raise ConfigurationMissing(
                "A blogger API key is required for report summaries",
                context={"setting": "BLOGGER_API_KEY"},
            )

    async def fetch_from_origin(self, identity: ResourceIdentity) -> Any:
        try:
            return await asyncio.wait_for(
                self._origin.post_json(
                    self._url,
                    dict(identity.params),
                    headers={"x-api-key": self._api_key or ""},
                ),
                timeout=self._timeout,
            )
        except asyncio.TimeoutError as e:
            raise OriginUnavailable(
                f"Blogger worker did not answer within {self._timeout:.0f}s",
                context={"key": identity.cache_key},
            ) from e

    def normalize(self, raw: Any) -> dict[str, Any] | None:
        if not isinstance(raw, dict) or "reports_summary" not in raw:
            raise MalformedResponse("Summary response has no reports_summary field")
        summary = raw["reports_summary"]
        if summary is None:
            return {"reports_summary": None}
        text = str(summary).strip()
        if not text:
            logger.warning("Blogger worker returned an empty summary")
            return None
        return {"reports_summary": text}

    def negative_value(self) -> dict[str, Any]:
        return {"reports_summary": None}
