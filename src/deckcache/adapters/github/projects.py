"""Per-game project details from the organization's GitHub Projects."""

import logging
import shlex
from collections.abc import Mapping
from typing import Any

from deckcache.adapters.github.common import INVALID_TEMPLATE_LABEL, GitHubAdapter
from deckcache.core.entities.resource_identity import ResourceIdentity
from deckcache.core.entities.ttl_policy import DAY, HOUR, TTLPolicy
from deckcache.exceptions import ConfigurationMissing, MalformedResponse, MissingIdentifier

logger = logging.getLogger(__name__)

DEFAULT_ORG_NODE_ID = "O_kgDOC35waw"
PROJECTS_PER_PAGE = 10
ITEMS_PER_PROJECT = 10

PROJECTS_QUERY = f"""
query fetchOrgProjects($orgId: ID!, $cursor: String, $searchTerm: String!) {{
  rateLimit {{
    limit
    cost
    remaining
    resetAt
  }}
  node(id: $orgId) {{
    ... on Organization {{
      projectsV2(first: {PROJECTS_PER_PAGE}, after: $cursor, query: $searchTerm) {{
        nodes {{
          id
          title
          number
          shortDescription
          readme
          url
          items(first: {ITEMS_PER_PROJECT}) {{
            nodes {{
              content {{
                __typename
                ... on Issue {{
                  databaseId
                  number
                  title
                  url
                  body
                  labels(first: 10) {{
                    nodes {{
                      name
                      color
                      description
                    }}
                  }}
                  reactions_thumbs_up: reactions(content: THUMBS_UP) {{
                    totalCount
                  }}
                  reactions_thumbs_down: reactions(content: THUMBS_DOWN) {{
                    totalCount
                  }}
                  author {{
                    login
                    avatar_url: avatarUrl
                  }}
                  closed
                  createdAt
                  updatedAt
                  comments {{
                    totalCount
                  }}
                }}
              }}
            }}
          }}
        }}
        pageInfo {{
          endCursor
          hasNextPage
        }}
      }}
    }}
  }}
}}
"""


def parse_title_fields(title: str) -> dict[str, str]:
    """Parse a logfmt style project title such as ``name="Celeste" appid=504230``."""
    try:
        tokens = shlex.split(title)
    except ValueError:
        tokens = title.split()
    fields: dict[str, str] = {}
    for token in tokens:
        key, sep, value = token.partition("=")
        if sep:
            fields[key.strip().lower()] = value.strip()
    return fields


class ProjectDetailsAdapter(GitHubAdapter):
    """Project details looked up by Steam app id or, failing that, by name.

    Requires a GitHub token: the Projects API is GraphQL only.
    """

    resource = "project_details"
    ttl = TTLPolicy(positive=14 * DAY, negative=HOUR)

    def __init__(
        self,
        *args: Any,
        org_node_id: str = DEFAULT_ORG_NODE_ID,
        abort_on_partial_errors: bool = False,
        **kwargs: Any,
    ) -> None:
        super().__init__(*args, **kwargs)
        self._org_node_id = org_node_id
        self._abort_on_partial_errors = abort_on_partial_errors

    def identify(self, params: Mapping[str, Any]) -> ResourceIdentity:
        app_id = self.numeric_id(params.get("app_id"))
        if app_id is not None:
            return self._keys.build(
                self.source, self.resource, "appid", app_id, params={"app_id": app_id}
            )

        name = str(params.get("game_name") or "").strip()
        if not name:
            raise MissingIdentifier("Either app_id or game_name must be provided")
        return self._keys.build(
            self.source, self.resource, "name", name, params={"game_name": name}
        )

    def identity_for_project(self, project: dict[str, Any]) -> list[ResourceIdentity]:
        """Identities a parsed project is reachable under."""
        identities = []
        if project.get("app_id"):
            identities.append(self.identify({"app_id": project["app_id"]}))
        if project.get("game_name"):
            identities.append(self.identify({"game_name": project["game_name"]}))
        return identities

    def ensure_configured(self) -> None:
        if not self._token:
            raise ConfigurationMissing(
                "A GitHub token is required to query project details",
                context={"setting": "GH_TOKEN"},
            )

    def search_term(self, identity: ResourceIdentity) -> str:
        if "app_id" in identity.params:
            return f'appid="{identity.params["app_id"]}"'
        name = identity.params["game_name"].replace('"', "")
        return f'name="{name}"'

    async def fetch_from_origin(self, identity: ResourceIdentity) -> dict[str, Any] | None:
        nodes = await self.walk_projects(self.search_term(identity))
        return self.first_candidate(nodes, identity)

    async def walk_projects(self, search_term: str = "") -> list[dict[str, Any]]:
        """Return every raw project node matching ``search_term``."""
        self.ensure_configured()
        headers = {**self.headers(), "Authorization": f"bearer {self._token}"}

        async def fetch_page(cursor: str | None) -> dict[str, Any]:
            payload = await self._origin.post_json(
                f"{self._api_url}/graphql",
                {
                    "query": PROJECTS_QUERY,
                    "variables": {
                        "orgId": self._org_node_id,
                        "cursor": cursor,
                        "searchTerm": search_term,
                    },
                },
                headers=headers,
            )
            if not isinstance(payload, dict):
                raise MalformedResponse("GraphQL response is not an object")
            return payload

        state = await self._pagination.graphql_cursor(
            fetch_page,
            connection=("node", "projectsV2"),
            metric_name="github_fetch_project_query",
            abort_on_partial_errors=self._abort_on_partial_errors,
            metric_context={"search_term": search_term or "_"},
        )
        return [node for node in state.items if isinstance(node, dict)]

    def normalize(self, raw: Any) -> dict[str, Any] | None:
        if raw is None:
            return None
        if not isinstance(raw, dict):
            raise MalformedResponse("Project node is not an object")
        return self.normalize_project(raw)

    def normalize_project(self, node: dict[str, Any]) -> dict[str, Any]:
        fields = parse_title_fields(node.get("title") or "")
        reports = [
            self.normalize_project_issue(item["content"])
            for item in (node.get("items") or {}).get("nodes") or []
            if _is_open_report(item)
        ]
        reports.sort(
            key=lambda r: (
                r["reactions"]["reactions_thumbs_up"],
                r["updated_at"] or r["created_at"] or "",
            ),
            reverse=True,
        )
        return {
            "project_number": node.get("number"),
            "game_name": fields.get("name", ""),
            "app_id": self.numeric_id(fields.get("appid")),
            "short_description": node.get("shortDescription") or "",
            "readme": node.get("readme") or "",
            "url": node.get("url") or "",
            "reports": reports,
        }

    def normalize_project_issue(self, content: dict[str, Any]) -> dict[str, Any]:
        author = content.get("author") or {}
        body = content.get("body") or ""
        return {
            "id": content.get("databaseId"),
            "number": content.get("number"),
            "title": content.get("title") or "",
            "html_url": content.get("url") or "",
            "body": body,
            "data": self.parse_body(body, content.get("number")),
            "labels": [
                {
                    "name": label.get("name") or "",
                    "color": label.get("color") or "",
                    "description": label.get("description") or "",
                }
                for label in (content.get("labels") or {}).get("nodes") or []
            ],
            "reactions": {
                "reactions_thumbs_up": (content.get("reactions_thumbs_up") or {}).get("totalCount") or 0,
                "reactions_thumbs_down": (content.get("reactions_thumbs_down") or {}).get("totalCount") or 0,
            },
            "comments": (content.get("comments") or {}).get("totalCount") or 0,
            "user": {
                "login": author.get("login") or "",
                "avatar_url": author.get("avatar_url") or "",
            },
            "created_at": content.get("createdAt"),
            "updated_at": content.get("updatedAt"),
        }

    def empty_value(self) -> dict[str, Any]:
        return {}


def _is_open_report(item: Any) -> bool:
    content = item.get("content") if isinstance(item, dict) else None
    if not isinstance(content, dict) or content.get("__typename") != "Issue":
        return False
    if not content.get("body") or content.get("closed"):
        return False
    labels = (content.get("labels") or {}).get("nodes") or []
    return not any(label.get("name") == INVALID_TEMPLATE_LABEL for label in labels)
