"""Process API requests against the how-awesome pipeline."""

from __future__ import annotations

import re

from how_awesome.exceptions import HowAwesomeError, ReadmeNotFoundError
from how_awesome.github import GitHubClient
from how_awesome.ingestion import AwesomeListResult, process_awesome_list
from how_awesome.metadata import fetch_section_metadata
from how_awesome.repo_cache import RepoCache
from how_awesome.sections import find_section
from how_awesome.session import SessionStore
from how_awesome.utils.logging_config import get_logger
from server.models import (
    AwesomeListResponse,
    ErrorResponse,
    RateLimitResponse,
    RepoModel,
    SectionMetadataResponse,
    SectionModel,
)
from server.server_config import MAX_DISPLAY_SIZE

logger = get_logger(__name__)

_BLOCK_END = re.compile(r"</(?:li|p|ul|ol|table|blockquote|pre|h[1-6])>")


def _crop_html(html: str, limit: int) -> str:
    """Cut ``html`` to at most ``limit`` characters after a closing block tag."""
    end = 0
    for match in _BLOCK_END.finditer(html, 0, limit):
        end = match.end()
    if end == 0:
        # No block ends in range; cut after the last complete tag.
        end = html.rfind(">", 0, limit) + 1
    return html[:end]


def _to_response(result: AwesomeListResult) -> AwesomeListResponse:
    html = result.html
    cropped = len(html) > MAX_DISPLAY_SIZE
    if cropped:
        html = _crop_html(html, MAX_DISPLAY_SIZE)
    return AwesomeListResponse(
        repo_path=result.repo_path,
        repo_url=f"https://github.com/{result.repo_path}",
        html=html,
        cropped=cropped,
        sections=[
            SectionModel(
                title=section.title,
                slug=section.slug,
                level=section.level,
                repos=[RepoModel(path=repo.path, url=repo.url) for repo in section.repos],
            )
            for section in result.sections
        ],
    )


async def process_awesome_query(repo_path: str) -> AwesomeListResponse | ErrorResponse:
    """Fetch and annotate an awesome list, mapping failures to an error model."""
    logger.info("Processing awesome list", extra={"repo": repo_path})
    try:
        result = await process_awesome_list(repo_path)
    except ReadmeNotFoundError as exc:
        logger.warning("README not found", extra={"repo": exc.repo_path})
        return ErrorResponse(error=str(exc), repo_path=exc.repo_path)
    except HowAwesomeError as exc:
        logger.error("Awesome list processing failed", extra={"repo": repo_path, "error": str(exc)})
        return ErrorResponse(error=str(exc), repo_path=repo_path)
    return _to_response(result)


async def process_section_metadata(
    repo_path: str,
    slug: str,
    *,
    session: SessionStore,
) -> SectionMetadataResponse | ErrorResponse:
    """Fetch repository metadata for one section of an awesome list."""
    try:
        result = await process_awesome_list(repo_path)
    except HowAwesomeError as exc:
        return ErrorResponse(error=str(exc), repo_path=repo_path)

    section = find_section(result.sections, slug)
    if section is None:
        return ErrorResponse(error=f"No section {slug!r} in {result.repo_path}", repo_path=result.repo_path)

    client = GitHubClient(session.api_state())
    states = await fetch_section_metadata(section, client=client, cache=RepoCache(session))
    return SectionMetadataResponse(
        repo_path=result.repo_path,
        slug=slug,
        repos=states,
        has_hit_rate_limit=client.state.has_hit_rate_limit,
    )


async def process_rate_limit(*, session: SessionStore, refresh: bool = False) -> RateLimitResponse:
    """Report the tracked rate-limit state, optionally re-reading ``/rate_limit``."""
    state = session.api_state()
    if refresh:
        try:
            await GitHubClient(state).refresh_rate_limit()
        except HowAwesomeError as exc:
            logger.warning("Rate limit refresh failed", extra={"error": str(exc)})
    return RateLimitResponse(
        has_hit_rate_limit=state.has_hit_rate_limit,
        is_authenticated=state.is_authenticated,
        ratelimit=state.ratelimit,
        reset=state.ratelimit.reset if state.ratelimit else None,
    )
