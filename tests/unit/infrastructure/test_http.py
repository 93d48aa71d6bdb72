"""Tests for OriginClient."""

import httpx
import pytest

from deckcache.exceptions import MalformedResponse, OriginUnavailable


class TestOriginClient:
    """Tests for OriginClient."""

    @pytest.mark.asyncio
    async def test_get_json(self, make_origin) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"ok": True})

        origin = make_origin(handler)
        result = await origin.get_json("https://example.test/x", params={"a": 1})

        assert result == {"ok": True}
        assert seen[0].url.params["a"] == "1"
        assert "deckcache" in seen[0].headers["User-Agent"]

    @pytest.mark.asyncio
    async def test_post_json_sends_body(self, make_origin) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.method == "POST"
            return httpx.Response(200, content=request.content)

        origin = make_origin(handler)

        assert await origin.post_json("https://example.test/x", ["id-1"]) == ["id-1"]

    @pytest.mark.asyncio
    async def test_error_status(self, make_origin) -> None:
        origin = make_origin(lambda request: httpx.Response(503, text="x" * 2000))

        with pytest.raises(OriginUnavailable) as exc_info:
            await origin.get_json("https://example.test/x")

        assert exc_info.value.status_code == 503
        assert len(exc_info.value.body or "") == 500

    @pytest.mark.asyncio
    async def test_transport_error(self, make_origin) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        origin = make_origin(handler)

        with pytest.raises(OriginUnavailable) as exc_info:
            await origin.get_json("https://example.test/x")

        assert exc_info.value.status_code is None

    @pytest.mark.asyncio
    async def test_invalid_json(self, make_origin) -> None:
        origin = make_origin(lambda request: httpx.Response(200, text="<html>"))

        with pytest.raises(MalformedResponse):
            await origin.get_json("https://example.test/x")

    @pytest.mark.asyncio
    async def test_get_text(self, make_origin) -> None:
        origin = make_origin(lambda request: httpx.Response(200, text="name: Report"))

        assert await origin.get_text("https://example.test/t.yml") == "name: Report"
