"""Pydantic models for the API responses."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from how_awesome.schemas import RateLimitSnapshot, RepoState


class RepoModel(BaseModel):
    """A repository referenced by an awesome list entry."""

    path: str = Field(..., description="owner/name")
    url: str = Field(..., description="Canonical github.com URL")


class SectionModel(BaseModel):
    """A section heading and the repositories listed under it.

    Attributes
    ----------
    title : str
        Plain text of the heading.
    slug : str
        Id of the rendered heading element.
    level : int
        Heading level.
    repos : list[RepoModel]
        Repositories annotated in the section's entries.

    """

    title: str
    slug: str
    level: int = Field(..., ge=1, le=6)
    repos: list[RepoModel] = Field(default_factory=list)


class AwesomeListResponse(BaseModel):
    """Success response for ``GET /api/awesome/{owner}/{name}``."""

    repo_path: str = Field(..., description="owner/name of the awesome list")
    repo_url: str = Field(..., description="URL of the awesome list repository")
    html: str = Field(..., description="Annotated HTML")
    cropped: bool = Field(default=False, description="Whether html was cropped")
    sections: list[SectionModel] = Field(default_factory=list)


class SectionMetadataResponse(BaseModel):
    """Metadata fetched for one section's repositories."""

    repo_path: str
    slug: str
    repos: dict[str, RepoState] = Field(default_factory=dict)
    has_hit_rate_limit: bool = False


class RateLimitResponse(BaseModel):
    """Current API budget as tracked for this session."""

    has_hit_rate_limit: bool
    is_authenticated: bool
    ratelimit: RateLimitSnapshot | None = None
    reset: datetime | None = None


class ErrorResponse(BaseModel):
    """Error response model.

    Attributes
    ----------
    error : str
        Error message describing what went wrong.
    repo_path : str | None
        Repository the error relates to, when known.

    """

    error: str = Field(..., description="Error message")
    repo_path: str | None = Field(default=None, description="Repository path")
