"""HTTP GET helper shared by README and GitHub API fetching."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Final, Mapping

import httpx

from how_awesome.config import HOW_AWESOME_FETCH_TIMEOUT_S, HOW_AWESOME_USER_AGENT
from how_awesome.exceptions import FetchError

_MAX_REDIRECTS: Final[int] = 5


@dataclass
class HttpResponse:
    """Status, body and headers of a completed GET request."""

    status_code: int
    text: str
    headers: httpx.Headers

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def json_or_none(self) -> Any:
        """Decode the body as JSON; a body that is not JSON is None."""
        try:
            return json.loads(self.text)
        except ValueError:
            return None


async def http_get(
    url: str,
    *,
    client: httpx.AsyncClient | None = None,
    headers: Mapping[str, str] | None = None,
) -> HttpResponse:
    """Perform a single GET request.

    No retries are attempted and non-success statuses are returned, not
    raised; callers decide what a failure means.

    Args:
        url: The URL to fetch.
        client: Optional httpx.AsyncClient for connection pooling. If not
            provided, a new client is created for this request.
        headers: Extra request headers.

    Raises:
        FetchError: If the request could not be completed.
    """

    async def do_fetch(http_client: httpx.AsyncClient) -> HttpResponse:
        try:
            response = await http_client.get(url, headers=dict(headers or {}))
        except httpx.RequestError as exc:
            raise FetchError(f"Failed to fetch {url}: {exc}") from exc
        return HttpResponse(
            status_code=response.status_code,
            text=response.text,
            headers=httpx.Headers(response.headers),
        )

    if client is not None:
        return await do_fetch(client)

    async with httpx.AsyncClient(
        timeout=httpx.Timeout(HOW_AWESOME_FETCH_TIMEOUT_S),
        headers={"User-Agent": HOW_AWESOME_USER_AGENT},
        follow_redirects=True,
        max_redirects=_MAX_REDIRECTS,
    ) as new_client:
        return await do_fetch(new_client)
