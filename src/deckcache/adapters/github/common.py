"""Shared GitHub plumbing: auth headers and issue normalization."""

import logging
from collections.abc import Callable
from typing import Any

from deckcache.adapters.base import ExternalSourceAdapter
from deckcache.core.interfaces.key_builder import IKeyBuilder
from deckcache.core.services.pagination import PaginationEngine
from deckcache.infrastructure.http import OriginClient

logger = logging.getLogger(__name__)

GITHUB_API_URL = "https://api.github.com"
GITHUB_RAW_URL = "https://raw.githubusercontent.com"
DEFAULT_OWNER = "DeckSettings"
DEFAULT_REPO = "game-reports-steamos"
DEFAULT_BRANCH = "master"

INVALID_TEMPLATE_LABEL = "invalid:template-incomplete"
DUPLICATE_REPORT_LABEL = "community:duplicate-report"

BodyParser = Callable[[str], dict[str, Any]]


class GitHubAdapter(ExternalSourceAdapter):
    """Base for adapters talking to the game reports repository."""

    source = "github"

    def __init__(
        self,
        origin: OriginClient,
        *,
        owner: str = DEFAULT_OWNER,
        repo: str = DEFAULT_REPO,
        token: str | None = None,
        api_url: str = GITHUB_API_URL,
        raw_url: str = GITHUB_RAW_URL,
        body_parser: BodyParser | None = None,
        pagination: PaginationEngine | None = None,
        key_builder: IKeyBuilder | None = None,
    ) -> None:
        """Initialize the adapter.

        Args:
            origin: Shared HTTP client.
            owner: Repository owner.
            repo: Repository name.
            token: Optional GitHub token; raises rate limits when present.
            api_url: REST and GraphQL base URL.
            raw_url: Raw file host.
            body_parser: Turns an issue body into structured report data.
            pagination: Engine used for multi-page endpoints.
            key_builder: Builder for resource identities.
        """
        super().__init__(origin, key_builder)
        self.owner = owner
        self.repo = repo
        self._token = token
        self._api_url = api_url.rstrip("/")
        self._raw_url = raw_url.rstrip("/")
        self._body_parser = body_parser
        self._pagination = pagination or PaginationEngine()

    @property
    def repo_path(self) -> str:
        return f"{self.owner}/{self.repo}"

    def headers(self) -> dict[str, str]:
        """REST headers, with bearer auth when a token is configured."""
        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        }
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        return headers

    def raw_file_url(self, path: str) -> str:
        return f"{self._raw_url}/{self.repo_path}/refs/heads/{DEFAULT_BRANCH}/{path}"

    def parse_body(self, body: str, number: Any = None) -> dict[str, Any]:
        """Structured fields of a report body; ``{}`` when the parser fails."""
        if self._body_parser is None or not body:
            return {}
        try:
            parsed = self._body_parser(body)
        except Exception:
            logger.exception("Body parser failed for issue #%s", number)
            return {}
        return parsed

    def normalize_issue(self, issue: dict[str, Any]) -> dict[str, Any]:
        """Map a REST or search API issue to the report shape."""
        reactions = issue.get("reactions") or {}
        user = issue.get("user") or {}
        body = issue.get("body") or ""
        return {
            "id": issue.get("id"),
            "number": issue.get("number"),
            "title": issue.get("title") or "",
            "html_url": issue.get("html_url") or "",
            "body": body,
            "data": self.parse_body(body, issue.get("number")),
            "labels": [normalize_label(label) for label in issue.get("labels") or []],
            "reactions": {
                "reactions_thumbs_up": reactions.get("+1") or 0,
                "reactions_thumbs_down": reactions.get("-1") or 0,
            },
            "user": {
                "login": user.get("login") or "",
                "avatar_url": user.get("avatar_url") or "",
            },
            "created_at": issue.get("created_at"),
            "updated_at": issue.get("updated_at"),
        }


def normalize_label(label: Any) -> dict[str, str]:
    if isinstance(label, str):
        return {"name": label, "color": "", "description": ""}
    return {
        "name": label.get("name") or "",
        "color": label.get("color") or "",
        "description": label.get("description") or "",
    }


def has_label(issue: dict[str, Any], name: str) -> bool:
    for label in issue.get("labels") or []:
        label_name = label if isinstance(label, str) else label.get("name")
        if label_name == name:
            return True
    return False
