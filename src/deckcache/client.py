"""High-level client wiring the store, orchestrator and adapters together."""

import logging
from datetime import datetime, timezone
from typing import Any

from deckcache.adapters import (
    AuthorReportCountAdapter,
    AuthorReportsAdapter,
    ExternalSourceAdapter,
    FxRatesAdapter,
    GameReportTemplateAdapter,
    HardwareInfoAdapter,
    IssueLabelsAdapter,
    ItadLookupAdapter,
    ItadPricesAdapter,
    PopularReportsAdapter,
    ProjectDetailsAdapter,
    ProtonDbSummaryAdapter,
    RecentReportsAdapter,
    ReportBodySchemaAdapter,
    ReportSearchAdapter,
    ReportsSummaryAdapter,
    SdhqReviewsAdapter,
    SteamAppDetailsAdapter,
    SteamCompatibilityAdapter,
    SteamSuggestionsAdapter,
)
from deckcache.adapters.github.common import BodyParser
from deckcache.adapters.itad import is_uuid
from deckcache.config import Settings, get_settings
from deckcache.core.entities.cache_config import CacheConfig
from deckcache.core.entities.cache_entry import EntryKind
from deckcache.core.interfaces.cache_backend import ICacheBackend
from deckcache.core.services.cache_gateway import CacheGateway
from deckcache.core.services.pagination import PaginationEngine
from deckcache.core.services.refresh_orchestrator import RefreshOrchestrator
from deckcache.exceptions import MalformedResponse, OriginUnavailable
from deckcache.infrastructure.backends.memory import InMemoryCacheBackend
from deckcache.infrastructure.backends.redis import RedisCacheBackend
from deckcache.infrastructure.http import OriginClient
from deckcache.infrastructure.key_builders.resource import ResourceKeyBuilder
from deckcache.infrastructure.locks.store import StoreLockService
from deckcache.infrastructure.serializers.json import JsonSerializer

logger = logging.getLogger(__name__)


def store_config(settings: Settings) -> CacheConfig:
    """Store-level options taken from the environment."""
    return CacheConfig(
        key_prefix=settings.CACHE_KEY_PREFIX,
        max_size=settings.CACHE_MAX_SIZE,
    )


class DeckCacheClient:
    """Entry point for applications.

    Every ``fetch_*`` method returns cached data when present and
    otherwise refreshes according to the source's policy. None of them
    raise for upstream trouble; they return the source's empty value.

    Example:
        >>> client = DeckCacheClient.create()
        >>> reports = await client.fetch_recent_reports(count=5)
        >>> await client.aclose()
    """

    def __init__(
        self,
        settings: Settings,
        backend: ICacheBackend,
        origin: OriginClient,
        body_parser: BodyParser | None = None,
        config: CacheConfig | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            settings: Application settings.
            backend: Store holding cache entries and refresh locks.
            origin: Shared HTTP client for every upstream.
            body_parser: Optional parser for report issue bodies.
            config: Store-level options; derived from ``settings`` when omitted.
        """
        self.settings = settings
        self._backend = backend
        self._origin = origin

        config = config or store_config(settings)
        self.gateway = CacheGateway(backend, JsonSerializer(), config)
        self.orchestrator = RefreshOrchestrator(self.gateway, StoreLockService(backend))

        keys = ResourceKeyBuilder()
        github: dict[str, Any] = {
            "owner": settings.GITHUB_REPO_OWNER,
            "repo": settings.GITHUB_REPORTS_REPO,
            "token": settings.GH_TOKEN,
            "api_url": settings.GITHUB_API_URL,
            "raw_url": settings.GITHUB_RAW_URL,
            "body_parser": body_parser,
            "pagination": PaginationEngine(),
            "key_builder": keys,
        }
        itad: dict[str, Any] = {
            "api_key": settings.ITAD_API_KEY,
            "country": settings.ITAD_COUNTRY,
            "key_builder": keys,
        }

        self.recent_reports = RecentReportsAdapter(
            origin, cache_time=settings.DEFAULT_CACHE_TIME, **github
        )
        self.popular_reports = PopularReportsAdapter(
            origin, cache_time=settings.DEFAULT_CACHE_TIME, **github
        )
        self.report_search = ReportSearchAdapter(origin, **github)
        self.author_reports = AuthorReportsAdapter(origin, **github)
        self.author_report_count = AuthorReportCountAdapter(origin, **github)
        self.project_details = ProjectDetailsAdapter(
            origin,
            org_node_id=settings.GITHUB_ORG_NODE_ID,
            abort_on_partial_errors=settings.GRAPHQL_ABORT_ON_PARTIAL_ERRORS,
            **github,
        )
        self.issue_labels = IssueLabelsAdapter(origin, **github)
        self.hardware_info = HardwareInfoAdapter(origin, **github)
        self.report_body_schema = ReportBodySchemaAdapter(origin, **github)
        self.game_report_template = GameReportTemplateAdapter(origin, **github)
        self.steam_app_details = SteamAppDetailsAdapter(origin, keys)
        self.steam_compatibility = SteamCompatibilityAdapter(origin, keys)
        self.steam_suggestions = SteamSuggestionsAdapter(origin, keys)
        self.protondb_summary = ProtonDbSummaryAdapter(origin, keys)
        self.itad_lookup = ItadLookupAdapter(origin, **itad)
        self.itad_prices = ItadPricesAdapter(origin, **itad)
        self.sdhq_reviews = SdhqReviewsAdapter(origin, keys)
        self.fx_rates = FxRatesAdapter(origin, keys)
        self.reports_summary = ReportsSummaryAdapter(
            origin,
            api_key=settings.BLOGGER_API_KEY,
            url=settings.BLOGGER_URL,
            key_builder=keys,
        )

    @classmethod
    def create(
        cls,
        settings: Settings | None = None,
        body_parser: BodyParser | None = None,
    ) -> "DeckCacheClient":
        """Build a client from settings.

        Uses Redis when ``REDIS_URL`` is set and an in-memory store
        otherwise.
        """
        settings = settings or get_settings()
        config = store_config(settings)
        backend: ICacheBackend
        if settings.REDIS_URL:
            logger.info("Using Redis cache store")
            backend = RedisCacheBackend(
                redis_url=settings.REDIS_URL,
                key_prefix=config.key_prefix,
            )
        else:
            logger.info("REDIS_URL not set; using in-memory cache store")
            backend = InMemoryCacheBackend(maxsize=config.max_size)

        origin = OriginClient(
            timeout=settings.HTTP_TIMEOUT_SECONDS,
            user_agent=settings.USER_AGENT,
        )
        return cls(settings, backend, origin, body_parser=body_parser, config=config)

    async def fetch(
        self,
        adapter: ExternalSourceAdapter,
        params: dict[str, Any] | None = None,
        *,
        force_refresh: bool = False,
    ) -> Any:
        """Fetch through any adapter, including ones not wired here."""
        return await self.orchestrator.fetch(adapter, params, force_refresh=force_refresh)

    # --- GitHub ---

    async def fetch_recent_reports(
        self, count: int = 5, sort: str = "updated", force_refresh: bool = False
    ) -> list[dict[str, Any]]:
        return await self.fetch(
            self.recent_reports, {"count": count, "sort": sort}, force_refresh=force_refresh
        )

    async def fetch_popular_reports(
        self, count: int = 5, force_refresh: bool = False
    ) -> list[dict[str, Any]]:
        return await self.fetch(
            self.popular_reports, {"count": count}, force_refresh=force_refresh
        )

    async def search_reports(
        self, state: str = "open", labels: list[str] | None = None
    ) -> dict[str, Any]:
        return await self.fetch(self.report_search, {"state": state, "labels": labels or []})

    async def fetch_author_reports(self, author: str) -> list[dict[str, Any]]:
        return await self.fetch(self.author_reports, {"author": author})

    async def fetch_author_report_count(self, author: str) -> int:
        return await self.fetch(self.author_report_count, {"author": author})

    async def fetch_project_details(
        self,
        app_id: int | str | None = None,
        game_name: str | None = None,
        force_refresh: bool = False,
    ) -> dict[str, Any]:
        return await self.fetch(
            self.project_details,
            {"app_id": app_id, "game_name": game_name},
            force_refresh=force_refresh,
        )

    async def fetch_issue_labels(self, force_refresh: bool = False) -> list[dict[str, str]]:
        return await self.fetch(self.issue_labels, force_refresh=force_refresh)

    async def fetch_hardware_info(self, force_refresh: bool = False) -> list[dict[str, Any]]:
        return await self.fetch(self.hardware_info, force_refresh=force_refresh)

    async def fetch_report_body_schema(self, force_refresh: bool = False) -> dict[str, Any]:
        return await self.fetch(self.report_body_schema, force_refresh=force_refresh)

    async def fetch_game_report_template(self, force_refresh: bool = False) -> dict[str, Any]:
        return await self.fetch(self.game_report_template, force_refresh=force_refresh)

    async def refresh_project_index(self) -> int:
        """Re-read every project and overwrite its cache entries.

        Each project is written under its app id key and its name key.
        An unreachable or malformed upstream leaves the index untouched, and
        a failed store write only skips that project.

        Returns:
            The number of projects written under every identity.
        """
        adapter = self.project_details
        try:
            nodes = await adapter.walk_projects("")
        except (OriginUnavailable, MalformedResponse) as e:
            logger.error("Project index refresh failed: %s", e)
            return 0

        written = 0
        for node in nodes:
            project = adapter.normalize_project(node)
            identities = adapter.identity_for_project(project)
            if not identities:
                logger.warning("Skipping project %s without app id or name", node.get("number"))
                continue
            try:
                for identity in identities:
                    await self.gateway.set(
                        identity.cache_key,
                        project,
                        adapter.ttl.positive,
                        kind=EntryKind.POSITIVE,
                    )
            except Exception:
                logger.exception("Could not store project %s", project.get("project_number"))
                continue
            written += 1

        logger.info("Refreshed %s projects in the project index", written)
        return written

    # --- Steam, ProtonDB ---

    async def fetch_steam_app_details(self, app_id: int | str) -> dict[str, Any]:
        return await self.fetch(self.steam_app_details, {"app_id": app_id})

    async def fetch_steam_compatibility(self, app_id: int | str) -> dict[str, Any] | None:
        return await self.fetch(self.steam_compatibility, {"app_id": app_id})

    async def fetch_steam_suggestions(self, term: str) -> list[dict[str, Any]]:
        return await self.fetch(self.steam_suggestions, {"term": term})

    async def fetch_protondb_summary(self, app_id: int | str) -> dict[str, Any] | None:
        return await self.fetch(self.protondb_summary, {"app_id": app_id})

    # --- Pricing ---

    async def lookup_itad_game(
        self, app_id: int | str | None = None, title: str | None = None
    ) -> dict[str, Any] | None:
        """Return the IsThereAnyDeal game record, or None when there is none."""
        result = await self.fetch(self.itad_lookup, {"app_id": app_id, "title": title})
        if not result or not result.get("found"):
            return None
        return result.get("game")

    async def fetch_price_overview(
        self, app_id: int | str | None = None, game_name: str | None = None
    ) -> dict[str, Any] | None:
        """Look up the game, then its prices, both through the cache."""
        game = await self.lookup_itad_game(app_id=app_id, title=game_name)
        if game is None:
            logger.info("IsThereAnyDeal lookup did not return a game record")
            return None

        game_id = game.get("id")
        if not is_uuid(game_id):
            logger.warning("IsThereAnyDeal lookup returned an invalid game id: %r", game_id)
            return None

        prices = await self.fetch(self.itad_prices, {"game_id": game_id})
        if not prices:
            return None

        return {
            "app_id": ExternalSourceAdapter.numeric_id(app_id),
            "game_name": game.get("title") or game_name,
            "itad_slug": game.get("slug"),
            "last_checked": datetime.now(timezone.utc).isoformat(),
            "deals": prices.get("deals", []),
        }

    # --- Background sources ---

    async def fetch_sdhq_reviews(self, app_id: int | str) -> list[dict[str, Any]]:
        return await self.fetch(self.sdhq_reviews, {"app_id": app_id})

    async def fetch_fx_rates(self, force_refresh: bool = False) -> dict[str, Any] | None:
        return await self.fetch(self.fx_rates, force_refresh=force_refresh)

    async def fetch_reports_summary(self, game: dict[str, Any]) -> str | None:
        """Return the summary text, or None while it is being written."""
        result = await self.fetch(self.reports_summary, game)
        if not result:
            return None
        return result.get("reports_summary")

    # --- Lifecycle ---

    async def aclose(self) -> None:
        """Wait for background refreshes, then release the HTTP client and store."""
        await self.orchestrator.drain()
        await self._origin.close()
        close = getattr(self._backend, "close", None)
        if close is not None:
            await close()

    async def __aenter__(self) -> "DeckCacheClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()
