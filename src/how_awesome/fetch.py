"""Fetch the README of an awesome list repository."""

from __future__ import annotations

import logging

import httpx

from how_awesome.config import HOW_AWESOME_RAW_URL, HOW_AWESOME_README_BRANCH, README_FILENAMES
from how_awesome.exceptions import FetchError, ReadmeNotFoundError
from how_awesome.http_utils import http_get
from how_awesome.repository import normalize_repo_path

logger = logging.getLogger(__name__)


def readme_url(repo_path: str, filename: str, *, branch: str = HOW_AWESOME_README_BRANCH) -> str:
    return f"{HOW_AWESOME_RAW_URL}/{normalize_repo_path(repo_path)}/{branch}/{filename}"


async def fetch_awesome_list(
    repo_path: str,
    *,
    client: httpx.AsyncClient | None = None,
) -> str:
    """Fetch the markdown text of an awesome list.

    Tries ``README.md`` first, then ``readme.md``.

    Args:
        repo_path: ``owner/name``, ``/owner/name`` or a github.com URL.
        client: Optional shared httpx client.

    Returns:
        The README text.

    Raises:
        ReadmeNotFoundError: If neither casing could be fetched, or
            ``repo_path`` does not name a repository.
    """
    try:
        urls = [readme_url(repo_path, filename) for filename in README_FILENAMES]
    except ValueError as exc:
        raise ReadmeNotFoundError(str(exc), repo_path) from exc

    for url in urls:
        try:
            response = await http_get(url, client=client)
        except FetchError as exc:
            logger.debug("README request failed", extra={"url": url, "error": str(exc)})
            continue
        if not response.ok:
            logger.debug("README not available", extra={"url": url, "status_code": response.status_code})
            continue
        return response.text

    raise ReadmeNotFoundError(f"Failed to fetch README.md for {repo_path}", repo_path)
