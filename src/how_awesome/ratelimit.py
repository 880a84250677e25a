"""Track the GitHub API request budget across responses.

Responses may complete in any order. ``merge_snapshots`` orders observations
by reset window and combines readings of the same window conservatively, so
the merged view never overestimates the remaining budget regardless of
arrival order. ``ingest_rate_limit`` is the only writer of ``ApiState``'s
rate-limit fields and contains no ``await``, so each call is applied
atomically with respect to other asyncio tasks.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Callable, Final, Mapping

from how_awesome.schemas.ratelimit import ApiState, RateLimitSnapshot

logger = logging.getLogger(__name__)

FORBIDDEN_STATUS: Final[int] = 403


def _parse_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        text = value.strip()
        if text.lstrip("-").isdigit():
            return int(text)
    return None


def _parse_epoch(value: Any) -> datetime | None:
    if isinstance(value, datetime):
        return value
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return None
    if not isinstance(value, (int, float)):
        return None
    try:
        return datetime.fromtimestamp(value, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return None


def _parse_str(value: Any) -> str | None:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


# Field -> (key in the body's rate block, response header, parser).
# Each field is taken from the body first and from the header otherwise.
RATE_LIMIT_FIELDS: Final[tuple[tuple[str, str, str, Callable[[Any], Any]], ...]] = (
    ("limit", "limit", "x-ratelimit-limit", _parse_int),
    ("remaining", "remaining", "x-ratelimit-remaining", _parse_int),
    ("used", "used", "x-ratelimit-used", _parse_int),
    ("reset", "reset", "x-ratelimit-reset", _parse_epoch),
    ("resource", "resource", "x-ratelimit-resource", _parse_str),
)


def _body_rate_block(body: Any) -> Mapping[str, Any] | None:
    """Find the rate block in a ``/rate_limit``-style body.

    Checked in order: ``resources.core``, then ``rate``.
    """
    if not isinstance(body, Mapping):
        return None
    resources = body.get("resources")
    if isinstance(resources, Mapping) and isinstance(resources.get("core"), Mapping):
        return resources["core"]
    if isinstance(body.get("rate"), Mapping):
        return body["rate"]
    return None


def extract_rate_limit(body: Any, headers: Mapping[str, str] | None) -> RateLimitSnapshot | None:
    """Derive a rate-limit snapshot from a response body and headers.

    Args:
        body: Decoded JSON body, or None when the body was not JSON.
        headers: Response headers; names are matched case-insensitively.

    Returns:
        The snapshot, or None when no field could be read.
    """
    block = _body_rate_block(body) or {}
    header_values = {name.lower(): value for name, value in (headers or {}).items()}

    fields: dict[str, Any] = {}
    for field_name, body_key, header_name, parse in RATE_LIMIT_FIELDS:
        value = parse(block.get(body_key))
        if value is None:
            value = parse(header_values.get(header_name))
        fields[field_name] = value

    if all(value is None for value in fields.values()):
        return None
    return RateLimitSnapshot(**fields)


def _min_present(first: int | None, second: int | None) -> int | None:
    if first is not None and second is not None:
        return min(first, second)
    return first if first is not None else second


def _max_present(first: int | None, second: int | None) -> int | None:
    if first is not None and second is not None:
        return max(first, second)
    return first if first is not None else second


def merge_snapshots(
    previous: RateLimitSnapshot | None,
    candidate: RateLimitSnapshot | None,
) -> RateLimitSnapshot | None:
    """Combine a new observation with the stored snapshot.

    A later reset window replaces the stored snapshot, an earlier one is
    discarded as stale. Readings of the same window (or with an unknown reset)
    are combined field by field: the lowest ``remaining`` and highest ``used``
    win; ``limit``, ``reset`` and ``resource`` prefer the candidate.
    """
    if candidate is None:
        return previous
    if previous is None:
        return candidate

    if previous.reset is not None and candidate.reset is not None:
        if candidate.reset > previous.reset:
            return candidate
        if candidate.reset < previous.reset:
            return previous

    return RateLimitSnapshot(
        limit=candidate.limit if candidate.limit is not None else previous.limit,
        remaining=_min_present(candidate.remaining, previous.remaining),
        used=_max_present(candidate.used, previous.used),
        reset=candidate.reset if candidate.reset is not None else previous.reset,
        resource=candidate.resource if candidate.resource is not None else previous.resource,
    )


def _window_advanced(previous: RateLimitSnapshot | None, merged: RateLimitSnapshot | None) -> bool:
    if previous is None or merged is None:
        return False
    if previous.reset is None or merged.reset is None:
        return False
    return merged.reset > previous.reset


def ingest_rate_limit(
    state: ApiState,
    candidate: RateLimitSnapshot | None,
    status_code: int,
) -> ApiState:
    """Fold one response's rate-limit observation into ``state``.

    The exhaustion flag clears when the window moves forward with budget left,
    and is set when the response is a 403 reporting zero remaining or the
    merged view reports zero remaining. Setting is evaluated after clearing,
    so a fresh exhaustion signal wins.

    Returns:
        The same ``state`` object, updated in place.
    """
    previous = state.ratelimit
    merged = merge_snapshots(previous, candidate)
    if merged is not None:
        state.ratelimit = merged

    if (
        state.has_hit_rate_limit
        and _window_advanced(previous, merged)
        and merged is not None
        and merged.remaining != 0
    ):
        logger.info("Rate limit window advanced", extra={"reset": merged.reset, "remaining": merged.remaining})
        state.has_hit_rate_limit = False

    exhausted_response = (
        status_code == FORBIDDEN_STATUS and candidate is not None and candidate.remaining == 0
    )
    if exhausted_response or (merged is not None and merged.remaining == 0):
        if not state.has_hit_rate_limit:
            logger.warning(
                "GitHub API rate limit exhausted",
                extra={"reset": merged.reset if merged else None, "status_code": status_code},
            )
        state.has_hit_rate_limit = True

    return state
