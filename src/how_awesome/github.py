"""GitHub REST API access feeding the rate-limit state."""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from how_awesome.config import HOW_AWESOME_GITHUB_API_URL
from how_awesome.exceptions import GitHubApiError, RateLimitError
from how_awesome.http_utils import HttpResponse, http_get
from how_awesome.ratelimit import extract_rate_limit, ingest_rate_limit
from how_awesome.repository import normalize_repo_path
from how_awesome.schemas import ApiState, RateLimitSnapshot, RepoInfo

logger = logging.getLogger(__name__)

GITHUB_ACCEPT = "application/vnd.github+json"


class GitHubClient:
    """Query the GitHub API while keeping ``ApiState`` current.

    Every response, successful or not, is passed through
    ``extract_rate_limit`` and ``ingest_rate_limit``.

    Example:
        client = GitHubClient(ApiState(token="..."))
        info = await client.fetch_repo_info("owner/name")
    """

    def __init__(
        self,
        state: ApiState | None = None,
        *,
        client: httpx.AsyncClient | None = None,
        api_url: str = HOW_AWESOME_GITHUB_API_URL,
    ) -> None:
        self.state = state if state is not None else ApiState()
        self.client = client
        self.api_url = api_url.rstrip("/")

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": GITHUB_ACCEPT}
        if self.state.token:
            headers["Authorization"] = f"Bearer {self.state.token}"
        return headers

    async def query(self, endpoint: str) -> tuple[HttpResponse, Any]:
        """GET an API endpoint and ingest its rate-limit information.

        Returns:
            The response and its decoded JSON body (None if not JSON).
        """
        url = endpoint if endpoint.startswith("http") else f"{self.api_url}/{endpoint.lstrip('/')}"
        logger.debug("Querying GitHub API", extra={"url": url})
        response = await http_get(url, client=self.client, headers=self._headers())
        data = response.json_or_none()

        snapshot = extract_rate_limit(data, response.headers)
        ingest_rate_limit(self.state, snapshot, response.status_code)
        if self.state.token:
            self.state.is_authenticated = response.status_code != 401
        return response, data

    async def refresh_rate_limit(self) -> RateLimitSnapshot | None:
        """Read ``/rate_limit``; this call does not consume budget and is never gated."""
        await self.query("/rate_limit")
        return self.state.ratelimit

    async def fetch_repo_info(self, repo_path: str) -> RepoInfo:
        """Fetch metadata for one repository.

        Raises:
            RateLimitError: If the budget is known to be exhausted.
            GitHubApiError: If ``repo_path`` does not name a repository, the API
                answers with a non-success status, or the body is not a
                repository.
        """
        if self.state.has_hit_rate_limit:
            reset = self.state.ratelimit.reset if self.state.ratelimit else None
            raise RateLimitError(f"GitHub API rate limit exhausted until {reset}", reset=reset)

        try:
            path = normalize_repo_path(repo_path)
        except ValueError as exc:
            raise GitHubApiError(str(exc)) from exc

        response, data = await self.query(f"/repos/{path}")
        if not response.ok or not isinstance(data, dict):
            raise GitHubApiError(
                f"GitHub API returned {response.status_code} for {path}",
                status_code=response.status_code,
                rate_limit_remaining=response.headers.get("x-ratelimit-remaining"),
            )
        try:
            return RepoInfo.from_api_response(data)
        except ValidationError as exc:
            raise GitHubApiError(
                f"GitHub API returned an invalid repository for {path}",
                status_code=response.status_code,
            ) from exc
