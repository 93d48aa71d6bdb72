"""Game report listings from the GitHub issue tracker.

Listings that are not scoped to an author use the search API. Author
scoped listings always use the REST issue listing instead, because the
search API silently drops issues opened by restricted accounts.
"""

import logging
from collections.abc import Mapping
from typing import Any

from deckcache.adapters.github.common import (
    DUPLICATE_REPORT_LABEL,
    INVALID_TEMPLATE_LABEL,
    GitHubAdapter,
    has_label,
)
from deckcache.core.entities.pagination import PaginationState
from deckcache.core.entities.resource_identity import ResourceIdentity
from deckcache.core.entities.ttl_policy import HOUR, MINUTE, TTLPolicy
from deckcache.exceptions import MalformedResponse, MissingIdentifier, ResultCapped

logger = logging.getLogger(__name__)

DEFAULT_CACHE_TIME = 10 * MINUTE
DEFAULT_COUNT = 5
MAX_COUNT = 100
SORT_OPTIONS = ("updated", "created")
STATE_OPTIONS = ("open", "closed", "all")


def _quote_label(label: str) -> str:
    label = label.replace('"', "").strip()
    return f'"{label}"' if (" " in label or ":" in label) else label


class _IssueSearchAdapter(GitHubAdapter):
    """Shared pieces of the search API backed listings."""

    resource = "game_reports"

    def search_query(
        self,
        *,
        state: str | None = "open",
        labels: tuple[str, ...] = (),
        exclude_labels: tuple[str, ...] = (),
    ) -> str:
        parts = [f"repo:{self.repo_path}", "is:issue"]
        if state and state != "all":
            parts.append(f"state:{state}")
        parts.extend(f"label:{_quote_label(label)}" for label in labels if label.strip())
        parts.extend(
            f"-label:{_quote_label(label)}" for label in exclude_labels if label.strip()
        )
        parts.append(f"-label:{INVALID_TEMPLATE_LABEL}")
        return " ".join(parts)

    async def search(self, params: dict[str, Any]) -> dict[str, Any]:
        payload = await self._origin.get_json(
            f"{self._api_url}/search/issues",
            params=params,
            headers=self.headers(),
        )
        if not isinstance(payload, dict):
            raise MalformedResponse("Search response is not an object")
        return payload

    def normalize_items(self, items: Any) -> list[dict[str, Any]]:
        if not isinstance(items, list):
            raise MalformedResponse("Search response has no item list")
        return [self.normalize_issue(item) for item in items]

    @staticmethod
    def parse_count(params: Mapping[str, Any]) -> int:
        raw = params.get("count", DEFAULT_COUNT)
        try:
            count = int(raw)
        except (TypeError, ValueError):
            count = DEFAULT_COUNT
        return max(1, min(count, MAX_COUNT))


class RecentReportsAdapter(_IssueSearchAdapter):
    """Most recently updated (or created) open reports."""

    def __init__(self, *args: Any, cache_time: int = DEFAULT_CACHE_TIME, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.ttl = TTLPolicy.for_listing(cache_time)

    def identify(self, params: Mapping[str, Any]) -> ResourceIdentity:
        count = self.parse_count(params)
        sort = params.get("sort") if params.get("sort") in SORT_OPTIONS else "updated"
        return self._keys.build(
            self.source,
            self.resource,
            "recent",
            count,
            sort,
            params={"count": count, "sort": sort},
        )

    async def fetch_from_origin(self, identity: ResourceIdentity) -> Any:
        return await self.search(
            {
                "q": self.search_query(exclude_labels=(DUPLICATE_REPORT_LABEL,)),
                "sort": identity.params["sort"],
                "order": "desc",
                "per_page": identity.params["count"],
            }
        )

    def normalize(self, raw: Any) -> list[dict[str, Any]] | None:
        reports = self.normalize_items(raw.get("items"))
        return reports or None

    def empty_value(self) -> list[dict[str, Any]]:
        return []


class PopularReportsAdapter(_IssueSearchAdapter):
    """Open reports with the most thumbs-up reactions."""

    def __init__(self, *args: Any, cache_time: int = DEFAULT_CACHE_TIME, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.ttl = TTLPolicy.for_listing(cache_time)

    def identify(self, params: Mapping[str, Any]) -> ResourceIdentity:
        count = self.parse_count(params)
        return self._keys.build(
            self.source, self.resource, "popular", count, params={"count": count}
        )

    async def fetch_from_origin(self, identity: ResourceIdentity) -> Any:
        return await self.search(
            {
                "q": self.search_query(),
                "sort": "reactions-+1",
                "order": "desc",
                "per_page": identity.params["count"],
            }
        )

    def normalize(self, raw: Any) -> list[dict[str, Any]] | None:
        reports = self.normalize_items(raw.get("items"))
        return reports or None

    def empty_value(self) -> list[dict[str, Any]]:
        return []


class ReportSearchAdapter(_IssueSearchAdapter):
    """Every report matching a state and a set of labels.

    The search API stops at 1000 results; a query matching more comes
    back flagged ``incomplete`` and is still cached.
    """

    ttl = TTLPolicy(positive=30 * MINUTE, negative=5 * MINUTE)

    def identify(self, params: Mapping[str, Any]) -> ResourceIdentity:
        state = params.get("state") or "open"
        if state not in STATE_OPTIONS:
            state = "open"
        raw_labels = params.get("labels") or ()
        if isinstance(raw_labels, str):
            raw_labels = raw_labels.split(",")
        labels = tuple(sorted({str(label).strip() for label in raw_labels if str(label).strip()}))
        return self._keys.build(
            self.source,
            self.resource,
            "search",
            state,
            ",".join(labels) or "any",
            params={"state": state, "labels": labels},
        )

    async def fetch_from_origin(self, identity: ResourceIdentity) -> PaginationState:
        query = self.search_query(
            state=identity.params["state"], labels=identity.params["labels"]
        )

        async def fetch_page(page: int, per_page: int) -> dict[str, Any]:
            return await self.search(
                {
                    "q": query,
                    "sort": "updated",
                    "order": "desc",
                    "per_page": per_page,
                    "page": page,
                }
            )

        state = await self._pagination.capped_search(fetch_page)
        if state.capped:
            raise ResultCapped(
                f"Search for {identity} stopped at the result ceiling",
                partial=state,
                context={"total_count": state.total_count, "collected": len(state)},
            )
        return state

    def normalize(self, raw: Any) -> dict[str, Any] | None:
        if not isinstance(raw, PaginationState):
            raise MalformedResponse("Expected a pagination result")
        return {
            "items": self.normalize_items(raw.items),
            "total_count": raw.total_count if raw.total_count is not None else len(raw),
            "incomplete": raw.incomplete,
        }

    def empty_value(self) -> dict[str, Any]:
        return {"items": [], "total_count": 0, "incomplete": False}


class AuthorReportsAdapter(GitHubAdapter):
    """Open reports created by one author, via the REST issue listing."""

    resource = "game_reports"
    ttl = TTLPolicy(positive=4 * HOUR, negative=HOUR)

    qualifier = "author"

    def identify(self, params: Mapping[str, Any]) -> ResourceIdentity:
        author = self.require(params, "author")
        if any(ch.isspace() for ch in author):
            raise MissingIdentifier(f"Invalid author login: {author!r}")
        return self._keys.build(
            self.source, self.resource, self.qualifier, author, params={"author": author}
        )

    async def fetch_from_origin(self, identity: ResourceIdentity) -> PaginationState:
        author = identity.params["author"]

        async def fetch_page(page: int, per_page: int) -> list[Any]:
            payload = await self._origin.get_json(
                f"{self._api_url}/repos/{self.repo_path}/issues",
                params={
                    "creator": author,
                    "state": "open",
                    "per_page": per_page,
                    "page": page,
                },
                headers=self.headers(),
            )
            if not isinstance(payload, list):
                raise MalformedResponse("Issue listing is not a list")
            return payload

        return await self._pagination.page_numbers(fetch_page, exclude=_is_not_a_report)

    def normalize(self, raw: Any) -> Any | None:
        if not isinstance(raw, PaginationState):
            raise MalformedResponse("Expected a pagination result")
        return [self.normalize_issue(item) for item in raw.items]

    def empty_value(self) -> Any:
        return []


class AuthorReportCountAdapter(AuthorReportsAdapter):
    """Number of open reports created by one author."""

    qualifier = "author_count"

    def normalize(self, raw: Any) -> int | None:
        if not isinstance(raw, PaginationState):
            raise MalformedResponse("Expected a pagination result")
        return len(raw.items)

    def empty_value(self) -> int:
        return 0


def _is_not_a_report(item: Any) -> bool:
    if not isinstance(item, dict):
        return True
    return "pull_request" in item or has_label(item, INVALID_TEMPLATE_LABEL)
