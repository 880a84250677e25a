"""Tests for HTTP utilities module."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from how_awesome.exceptions import FetchError
from how_awesome.http_utils import HttpResponse, http_get


def _mock_response(status_code: int, text: str = "", headers: dict | None = None) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    response.headers = httpx.Headers(headers or {})
    return response


class TestHttpResponse:
    """Tests for HttpResponse."""

    @pytest.mark.parametrize(("status_code", "ok"), [(200, True), (204, True), (301, False), (404, False)])
    def test_ok(self, status_code: int, ok: bool) -> None:
        assert HttpResponse(status_code, "", httpx.Headers()).ok is ok

    def test_json_or_none_decodes(self) -> None:
        assert HttpResponse(200, '{"a": 1}', httpx.Headers()).json_or_none() == {"a": 1}

    @pytest.mark.parametrize("text", ["", "<html>", "{broken"])
    def test_json_or_none_on_invalid_body(self, text: str) -> None:
        assert HttpResponse(200, text, httpx.Headers()).json_or_none() is None


class TestHttpGet:
    """Tests for http_get function."""

    @pytest.mark.asyncio
    async def test_returns_status_body_and_headers(self) -> None:
        mock_response = _mock_response(200, "# Awesome", {"X-RateLimit-Remaining": "5"})

        with patch("how_awesome.http_utils.httpx.AsyncClient") as mock_client_class:
            mock_client = AsyncMock()
            mock_client.get = AsyncMock(return_value=mock_response)
            mock_client.__aenter__ = AsyncMock(return_value=mock_client)
            mock_client.__aexit__ = AsyncMock(return_value=None)
            mock_client_class.return_value = mock_client

            result = await http_get("https://example.com")

        assert result.status_code == 200
        assert result.text == "# Awesome"
        assert result.headers["x-ratelimit-remaining"] == "5"

    @pytest.mark.asyncio
    async def test_non_success_is_returned_not_raised(self) -> None:
        mock_client = AsyncMock()
        mock_client.get = AsyncMock(return_value=_mock_response(404, "Not Found"))

        result = await http_get("https://example.com/missing", client=mock_client)

        assert result.status_code == 404
        assert not result.ok
        mock_client.get.assert_called_once()

    @pytest.mark.asyncio
    async def test_passes_request_headers(self) -> None:
        mock_client = AsyncMock()
        mock_client.get = AsyncMock(return_value=_mock_response(200))

        await http_get("https://example.com", client=mock_client, headers={"Accept": "application/json"})

        mock_client.get.assert_called_once_with("https://example.com", headers={"Accept": "application/json"})

    @pytest.mark.asyncio
    async def test_wraps_transport_errors(self) -> None:
        mock_client = AsyncMock()
        mock_client.get = AsyncMock(side_effect=httpx.ConnectError("Connection failed"))

        with pytest.raises(FetchError, match="Failed to fetch https://example.com"):
            await http_get("https://example.com", client=mock_client)

        mock_client.get.assert_called_once()
