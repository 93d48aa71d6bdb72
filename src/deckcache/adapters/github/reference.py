"""Near-static reference data kept in the game reports repository."""

import logging
from typing import Any

import yaml

from deckcache.adapters.github.common import GitHubAdapter, normalize_label
from deckcache.core.entities.resource_identity import ResourceIdentity
from deckcache.core.entities.ttl_policy import DAY, HOUR, TTLPolicy
from deckcache.exceptions import MalformedResponse

logger = logging.getLogger(__name__)

HARDWARE_PATH = ".github/scripts/config/hardware.json"
BODY_SCHEMA_PATH = ".github/scripts/config/game-report-validation.json"
REPORT_TEMPLATE_PATH = ".github/ISSUE_TEMPLATE/GAME-REPORT.yml"


class IssueLabelsAdapter(GitHubAdapter):
    """Every label defined on the reports repository."""

    resource = "issue_labels"
    ttl = TTLPolicy(positive=DAY, negative=HOUR)

    async def fetch_from_origin(self, identity: ResourceIdentity) -> Any:
        async def fetch_page(page: int, per_page: int) -> list[Any]:
            payload = await self._origin.get_json(
                f"{self._api_url}/repos/{self.repo_path}/labels",
                params={"per_page": per_page, "page": page},
                headers=self.headers(),
            )
            if not isinstance(payload, list):
                raise MalformedResponse("Label listing is not a list")
            return payload

        state = await self._pagination.page_numbers(fetch_page)
        return state.items

    def normalize(self, raw: Any) -> list[dict[str, str]] | None:
        labels = [normalize_label(label) for label in raw if isinstance(label, dict)]
        return labels or None

    def empty_value(self) -> list[dict[str, str]]:
        return []


class HardwareInfoAdapter(GitHubAdapter):
    """Handheld device specifications."""

    resource = "hardware_info"
    ttl = TTLPolicy(positive=3 * DAY, negative=HOUR)

    async def fetch_from_origin(self, identity: ResourceIdentity) -> Any:
        return await self._origin.get_json(self.raw_file_url(HARDWARE_PATH))

    def normalize(self, raw: Any) -> list[dict[str, Any]] | None:
        if not isinstance(raw, dict):
            raise MalformedResponse("Hardware file is not an object")
        devices = raw.get("devices")
        if not isinstance(devices, list):
            return None
        return [device for device in devices if isinstance(device, dict)]

    def empty_value(self) -> list[dict[str, Any]]:
        return []


class ReportBodySchemaAdapter(GitHubAdapter):
    """JSON schema the report issue bodies are validated against."""

    resource = "game_reports_body_schema"
    ttl = TTLPolicy(positive=3 * DAY, negative=HOUR)

    async def fetch_from_origin(self, identity: ResourceIdentity) -> Any:
        return await self._origin.get_json(self.raw_file_url(BODY_SCHEMA_PATH))

    def normalize(self, raw: Any) -> dict[str, Any] | None:
        if not isinstance(raw, dict) or not raw:
            return None
        return raw

    def empty_value(self) -> dict[str, Any]:
        return {}


class GameReportTemplateAdapter(GitHubAdapter):
    """The issue form used to submit game reports, parsed from YAML."""

    resource = "game_report_template"
    ttl = TTLPolicy(positive=3 * DAY, negative=HOUR)

    async def fetch_from_origin(self, identity: ResourceIdentity) -> Any:
        text = await self._origin.get_text(self.raw_file_url(REPORT_TEMPLATE_PATH))
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise MalformedResponse(f"Report template is not valid YAML: {e}") from e

    def normalize(self, raw: Any) -> dict[str, Any] | None:
        if not isinstance(raw, dict):
            return None
        body = raw.get("body")
        return {
            "name": raw.get("name") or "",
            "description": raw.get("description") or "",
            "title": raw.get("title") or "",
            "labels": list(raw.get("labels") or []),
            "body": body if isinstance(body, list) else [],
        }

    def empty_value(self) -> dict[str, Any]:
        return {}
