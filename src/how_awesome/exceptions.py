"""Custom exceptions for how-awesome."""

from __future__ import annotations

from datetime import datetime


class HowAwesomeError(Exception):
    """Base exception for how-awesome operations."""


class FetchError(HowAwesomeError):
    """Error during content fetching."""


class ReadmeNotFoundError(FetchError):
    """No README could be retrieved for an awesome list repository."""

    def __init__(self, message: str, repo_path: str) -> None:
        super().__init__(message)
        self.repo_path = repo_path

    @property
    def repo_url(self) -> str:
        return f"https://github.com/{self.repo_path.strip('/')}"


class GitHubApiError(FetchError):
    """The GitHub API answered with a non-success status."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        rate_limit_remaining: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.rate_limit_remaining = rate_limit_remaining

    @property
    def is_rate_limited(self) -> bool:
        return self.status_code in (403, 429) and self.rate_limit_remaining == "0"


class RateLimitError(GitHubApiError):
    """The API budget is exhausted for the current window."""

    def __init__(self, message: str, *, reset: datetime | None = None) -> None:
        super().__init__(message, status_code=403, rate_limit_remaining="0")
        self.reset = reset
