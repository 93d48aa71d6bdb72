"""Shared HTTP client for upstream origins."""

import json
import logging
from typing import Any

import httpx

from deckcache.exceptions import MalformedResponse, OriginUnavailable

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "deckcache/0.1 (+https://github.com/DeckSettings)"

# Error bodies are logged and attached to exceptions; keep them readable
MAX_BODY_LOG_CHARS = 500


class OriginClient:
    """Thin wrapper over ``httpx.AsyncClient`` used by every adapter.

    Network failures and non-2xx responses become ``OriginUnavailable``;
    bodies that are not valid JSON become ``MalformedResponse``. Adapters
    never see raw httpx exceptions.

    Example:
        >>> async with OriginClient() as origin:
        ...     data = await origin.get_json("https://api.github.com/rate_limit")
    """

    def __init__(
        self,
        timeout: float = 20.0,
        user_agent: str = DEFAULT_USER_AGENT,
        transport: httpx.AsyncBaseTransport | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the origin client.

        Args:
            timeout: Per-request timeout in seconds.
            user_agent: User-Agent header sent with every request.
            transport: Optional transport, e.g. ``httpx.MockTransport`` in tests.
            client: Pre-built client. Takes precedence over the other options.
        """
        self._client = client or httpx.AsyncClient(
            timeout=timeout,
            follow_redirects=True,
            headers={"User-Agent": user_agent},
            transport=transport,
        )

    async def request(
        self,
        method: str,
        url: str,
        *,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        json_body: Any = None,
    ) -> httpx.Response:
        """Send a request and return the successful response.

        Raises:
            OriginUnavailable: On transport errors or a non-2xx status.
        """
        try:
            response = await self._client.request(
                method, url, params=params, headers=headers, json=json_body
            )
        except httpx.HTTPError as e:
            logger.error("%s %s failed: %s", method, url, e)
            raise OriginUnavailable(
                f"Request to origin failed: {e}",
                context={"method": method, "url": url},
            ) from e

        if not response.is_success:
            body = response.text[:MAX_BODY_LOG_CHARS]
            logger.error(
                "%s %s returned HTTP %s: %s",
                method,
                url,
                response.status_code,
                body,
            )
            raise OriginUnavailable(
                f"Origin returned HTTP {response.status_code}",
                status_code=response.status_code,
                body=body,
                context={"method": method, "url": url},
            )

        return response

    async def get_json(
        self,
        url: str,
        *,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """GET ``url`` and decode the JSON body."""
        response = await self.request("GET", url, params=params, headers=headers)
        return self._decode(response)

    async def post_json(
        self,
        url: str,
        body: Any,
        *,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """POST a JSON body to ``url`` and decode the JSON response."""
        response = await self.request(
            "POST", url, params=params, headers=headers, json_body=body
        )
        return self._decode(response)

    async def get_text(
        self,
        url: str,
        *,
        headers: dict[str, str] | None = None,
    ) -> str:
        """GET ``url`` and return the body as text."""
        response = await self.request("GET", url, headers=headers)
        return response.text

    def _decode(self, response: httpx.Response) -> Any:
        try:
            return response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            body = response.text[:MAX_BODY_LOG_CHARS]
            logger.error("Invalid JSON from %s: %s", response.url, body)
            raise MalformedResponse(
                "Origin returned invalid JSON",
                context={"url": str(response.url)},
            ) from e

    async def close(self) -> None:
        """Close the underlying httpx client."""
        await self._client.aclose()

    async def __aenter__(self) -> "OriginClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()
