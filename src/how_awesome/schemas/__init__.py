"""Shared schemas for how-awesome."""

from how_awesome.schemas.ratelimit import ApiState, RateLimitSnapshot
from how_awesome.schemas.repository import RepoInfo, RepoState, RepoStatus

__all__ = ["ApiState", "RateLimitSnapshot", "RepoInfo", "RepoState", "RepoStatus"]
