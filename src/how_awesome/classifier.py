"""Select the canonical repository link of an awesome list entry."""

from __future__ import annotations

from urllib.parse import urlsplit

from how_awesome.nodes import Link, ListItem, walk
from how_awesome.repository import GITHUB_HOST, path_segments


def is_repository_link(url: str, own_repo_segments: list[str] | None) -> bool:
    """Check whether ``url`` points at a GitHub repository other than the list's own.

    A link qualifies when its host is exactly ``github.com``, its path is not
    the root, and its path is not a prefix of the list's own repository path.
    With ``own_repo_segments`` of None the self-reference check never excludes.
    """
    try:
        parsed = urlsplit(url)
    except ValueError:
        return False
    if parsed.hostname != GITHUB_HOST:
        return False

    segments = path_segments(parsed.path)
    if not segments:
        return False

    # Prefix of whole path segments, ignoring case: github.com/sindre is not a
    # prefix of sindresorhus/awesome, github.com/SindreSorhus is.
    if own_repo_segments is not None:
        own = [segment.lower() for segment in own_repo_segments]
        link = [segment.lower() for segment in segments]
        if own[: len(link)] == link:
            return False
    return True


def find_canonical_link(item: ListItem, own_repo_segments: list[str] | None) -> Link | None:
    """Return the first qualifying ``Link`` below ``item`` in document order.

    The search descends into nested lists as well, so an entry without a
    repository link of its own picks up the first one from its sub-items.
    """
    for node in walk(item):
        if isinstance(node, Link) and is_repository_link(node.url, own_repo_segments):
            return node
    return None
