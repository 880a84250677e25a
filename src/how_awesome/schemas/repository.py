"""Repository metadata and cache entry models."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel

RepoStatus = Literal["idle", "loading", "loaded", "error"]


class RepoInfo(BaseModel):
    """Repository metadata shown next to an awesome list entry."""

    stars: int | None = None
    created_at: datetime | None = None
    archived: bool | None = None
    open_issues: int | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any]) -> RepoInfo:
        """Build from a ``GET /repos/{owner}/{name}`` response body."""
        return cls(
            stars=data.get("stargazers_count"),
            created_at=data.get("created_at"),
            archived=data.get("archived"),
            open_issues=data.get("open_issues_count"),
            updated_at=data.get("updated_at"),
        )


class RepoState(BaseModel):
    """Per-repository fetch cache entry."""

    status: RepoStatus = "idle"
    info: RepoInfo | None = None
    error: str | None = None
