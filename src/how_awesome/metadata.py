"""Fetch repository metadata for annotated entries through the repo cache."""

from __future__ import annotations

import asyncio
import logging

from how_awesome.exceptions import FetchError
from how_awesome.github import GitHubClient
from how_awesome.repo_cache import RepoCache
from how_awesome.repository import RepoIdentity
from how_awesome.schemas import RepoState
from how_awesome.sections import AwesomeSection

logger = logging.getLogger(__name__)


async def fetch_repo_metadata(
    repo: RepoIdentity,
    *,
    client: GitHubClient,
    cache: RepoCache,
) -> RepoState:
    """Fetch metadata for one repository unless it is already cached.

    Failures are recorded in the cache entry rather than raised.
    """
    cached = cache.get(repo.path)
    if cached.status == "loaded":
        return cached

    cache.update(repo.path, status="loading", error=None)
    try:
        info = await client.fetch_repo_info(repo.path)
    except FetchError as exc:
        logger.info("Repository metadata unavailable", extra={"repo": repo.path, "error": str(exc)})
        return cache.update(repo.path, status="error", error=str(exc))
    return cache.update(repo.path, status="loaded", info=info, error=None)


async def fetch_section_metadata(
    section: AwesomeSection,
    *,
    client: GitHubClient,
    cache: RepoCache,
) -> dict[str, RepoState]:
    """Fetch all repositories of a section concurrently."""
    unique = list({repo.path: repo for repo in section.repos}.values())
    states = await asyncio.gather(
        *(fetch_repo_metadata(repo, client=client, cache=cache) for repo in unique)
    )
    return {repo.path: state for repo, state in zip(unique, states)}
