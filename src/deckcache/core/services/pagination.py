"""Page-walking strategies shared by the upstream adapters."""

import logging
from collections.abc import Awaitable, Callable, Sequence
from typing import Any

from deckcache.core.entities.pagination import PaginationState
from deckcache.exceptions import MalformedResponse
from deckcache.utils.metrics import log_metric

logger = logging.getLogger(__name__)

# GitHub search never returns more than this many results for one query
SEARCH_RESULT_CEILING = 1000
DEFAULT_MAX_PAGES = 50

SearchPageFetcher = Callable[[int, int], Awaitable[dict[str, Any]]]
ListPageFetcher = Callable[[int, int], Awaitable[list[Any]]]
CursorPageFetcher = Callable[[str | None], Awaitable[dict[str, Any]]]


class PaginationEngine:
    """Walks paginated upstreams until a termination condition holds.

    Three strategies are provided:

    - :meth:`capped_search` for search endpoints that declare a total and
      silently stop at a result ceiling.
    - :meth:`page_numbers` for plain REST listings paged by number.
    - :meth:`graphql_cursor` for GraphQL connections, with rate-limit
      cost accounting.

    Every walk is bounded by ``max_pages`` so a misbehaving upstream can
    never keep a loop alive.
    """

    def __init__(
        self,
        search_ceiling: int = SEARCH_RESULT_CEILING,
        max_pages: int = DEFAULT_MAX_PAGES,
    ) -> None:
        """Initialize the engine.

        Args:
            search_ceiling: Hard result ceiling of search endpoints.
            max_pages: Hard cap on requests per walk.
        """
        if max_pages < 1:
            raise ValueError("max_pages must be at least 1")
        self._search_ceiling = search_ceiling
        self._max_pages = max_pages

    @property
    def search_ceiling(self) -> int:
        return self._search_ceiling

    @property
    def max_pages(self) -> int:
        return self._max_pages

    async def capped_search(
        self,
        fetch_page: SearchPageFetcher,
        *,
        page_size: int = 100,
        max_items: int | None = None,
    ) -> PaginationState:
        """Collect search results page by page.

        ``fetch_page(page, per_page)`` must return the raw search payload
        (``total_count``, ``incomplete_results``, ``items``). Pages are
        1-based.

        The walk stops at the first of: an empty page, the declared total,
        the result ceiling, ``max_items``, a short page, or the page cap.
        A declared total above the ceiling marks the result incomplete
        even when no page said so.

        Args:
            fetch_page: Coroutine function returning one search page.
            page_size: Items requested per page.
            max_items: Optional caller limit on collected items.

        Returns:
            The accumulated PaginationState.
        """
        state = PaginationState()
        limit = self._search_ceiling
        if max_items is not None:
            limit = min(limit, max_items)

        page = 1
        while state.requests < self._max_pages:
            payload = await fetch_page(page, page_size)
            state.requests += 1
            state.cursor = page

            items = payload.get("items") or []
            total = payload.get("total_count")
            if isinstance(total, int):
                state.total_count = total
            if payload.get("incomplete_results"):
                state.incomplete = True

            if not items:
                break

            state.items.extend(items)

            if state.total_count is not None and len(state.items) >= state.total_count:
                break
            if len(state.items) >= limit:
                if len(state.items) >= self._search_ceiling:
                    state.capped = True
                break
            if len(items) < page_size:
                break

            page += 1
        else:
            logger.warning(
                "Search pagination hit the page cap (%s) with %s items",
                self._max_pages,
                len(state.items),
            )
            state.incomplete = True

        if len(state.items) > limit:
            del state.items[limit:]

        if state.total_count is not None and state.total_count > self._search_ceiling:
            state.incomplete = True
            if len(state.items) >= self._search_ceiling:
                state.capped = True

        if state.capped:
            logger.warning(
                "Search results capped at %s of %s declared",
                len(state.items),
                state.total_count,
            )

        return state

    async def page_numbers(
        self,
        fetch_page: ListPageFetcher,
        *,
        page_size: int = 100,
        exclude: Callable[[Any], bool] | None = None,
    ) -> PaginationState:
        """Collect a REST listing by page number.

        ``fetch_page(page, per_page)`` returns the list of items on one
        page. The walk stops on the first page shorter than ``page_size``.
        Exclusion filtering runs after the whole listing is assembled.

        Args:
            fetch_page: Coroutine function returning one page of items.
            page_size: Items requested per page.
            exclude: Optional predicate; matching items are dropped.

        Returns:
            The accumulated PaginationState.
        """
        state = PaginationState()

        page = 1
        while True:
            if state.requests >= self._max_pages:
                logger.warning(
                    "Listing pagination hit the page cap (%s) with %s items",
                    self._max_pages,
                    len(state.items),
                )
                state.incomplete = True
                break

            items = await fetch_page(page, page_size)
            state.requests += 1
            state.cursor = page
            state.items.extend(items)

            if len(items) < page_size:
                break
            page += 1

        if exclude is not None:
            state.items = [item for item in state.items if not exclude(item)]

        return state

    async def graphql_cursor(
        self,
        fetch_page: CursorPageFetcher,
        *,
        connection: Sequence[str],
        metric_name: str,
        abort_on_partial_errors: bool = False,
        metric_context: dict[str, Any] | None = None,
    ) -> PaginationState:
        """Follow a GraphQL connection to its end.

        ``fetch_page(cursor)`` returns the full GraphQL response
        (``data`` and optional ``errors``). ``connection`` is the key path
        from ``data`` to the connection node holding ``nodes`` and
        ``pageInfo``.

        The ``rateLimit.cost`` of each page is accumulated and emitted as
        ``{metric_name}_rate_limit_cost``; the sum is emitted once more as
        ``{metric_name}_rate_limit_total_cost`` when the walk ends.

        Args:
            fetch_page: Coroutine function returning one GraphQL response.
            connection: Key path to the connection node.
            metric_name: Prefix of the emitted cost metrics.
            abort_on_partial_errors: Raise instead of continuing when a
                page carries ``errors`` next to usable data.
            metric_context: Extra fields attached to every metric.

        Returns:
            The accumulated PaginationState.

        Raises:
            MalformedResponse: If the connection node is absent, or a page
                has partial errors and ``abort_on_partial_errors`` is set.
        """
        state = PaginationState()
        context = dict(metric_context or {})
        cursor: str | None = None
        seen: set[str] = set()

        try:
            while True:
                if state.requests >= self._max_pages:
                    logger.warning(
                        "GraphQL pagination hit the page cap (%s) for %s",
                        self._max_pages,
                        metric_name,
                    )
                    state.incomplete = True
                    break

                response = await fetch_page(cursor)
                state.requests += 1

                data = response.get("data") if isinstance(response, dict) else None
                errors = response.get("errors") if isinstance(response, dict) else None

                cost, limits = _rate_limit(data)
                state.cost += cost
                log_metric(
                    f"{metric_name}_rate_limit_cost",
                    cost,
                    page=state.requests,
                    **limits,
                    **context,
                )

                node = _resolve(data, connection)
                if node is None:
                    raise MalformedResponse(
                        "GraphQL response is missing its primary data node",
                        context={"path": ".".join(connection), "errors": errors},
                    )

                if errors:
                    if abort_on_partial_errors:
                        raise MalformedResponse(
                            "GraphQL response carried partial errors",
                            context={"path": ".".join(connection), "errors": errors},
                        )
                    logger.warning(
                        "GraphQL partial errors for %s (continuing): %s",
                        metric_name,
                        errors,
                    )

                state.items.extend(node.get("nodes") or [])
                if isinstance(node.get("totalCount"), int):
                    state.total_count = node["totalCount"]

                page_info = node.get("pageInfo") or {}
                next_cursor = page_info.get("endCursor")
                if not page_info.get("hasNextPage") or not next_cursor:
                    break
                if next_cursor in seen:
                    logger.warning(
                        "GraphQL cursor %s repeated for %s; stopping",
                        next_cursor,
                        metric_name,
                    )
                    state.incomplete = True
                    break

                seen.add(next_cursor)
                cursor = next_cursor
                state.cursor = cursor
        finally:
            log_metric(
                f"{metric_name}_rate_limit_total_cost",
                state.cost,
                pages=state.requests,
                **context,
            )

        return state


def _resolve(data: Any, path: Sequence[str]) -> dict[str, Any] | None:
    """Follow ``path`` through nested dicts, returning None if any hop is missing."""
    node = data
    for key in path:
        if not isinstance(node, dict):
            return None
        node = node.get(key)
    return node if isinstance(node, dict) else None


def _rate_limit(data: Any) -> tuple[int, dict[str, Any]]:
    """Query cost and the quota fields GitHub reports alongside it."""
    rate_limit = data.get("rateLimit") if isinstance(data, dict) else None
    if not isinstance(rate_limit, dict):
        return 0, {}
    cost = rate_limit.get("cost")
    return (cost if isinstance(cost, int) else 0), {
        "rate_limit": rate_limit.get("limit"),
        "rate_limit_remaining": rate_limit.get("remaining"),
        "rate_limit_reset": rate_limit.get("resetAt"),
    }
