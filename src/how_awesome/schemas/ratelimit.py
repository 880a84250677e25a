"""Rate-limit models."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class RateLimitSnapshot(BaseModel):
    """Point-in-time reading of the API request budget.

    Every field is optional. An observation without any field is represented
    as ``None`` rather than an empty snapshot.
    """

    model_config = ConfigDict(frozen=True)

    limit: int | None = None
    remaining: int | None = None
    used: int | None = None
    reset: datetime | None = None
    resource: str | None = None


class ApiState(BaseModel):
    """Session-scoped GitHub API state.

    Attributes:
        token: Optional personal access token sent as a bearer token.
        has_hit_rate_limit: Sticky exhaustion flag used to gate metadata calls.
        is_authenticated: Whether ``token`` has been accepted by the API.
        ratelimit: Latest merged rate-limit snapshot.
    """

    token: str | None = None
    has_hit_rate_limit: bool = False
    is_authenticated: bool = False
    ratelimit: RateLimitSnapshot | None = None
