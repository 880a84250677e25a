"""GitHub repository identity derived from links and user input."""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import urlsplit

GITHUB_HOST = "github.com"


@dataclass(frozen=True)
class RepoIdentity:
    """Canonical identity of a GitHub repository.

    Attributes:
        path: ``owner/name``, the first two non-empty path segments.
        url: ``https://github.com/owner/name``.
    """

    path: str
    url: str

    @property
    def owner(self) -> str:
        return self.path.split("/")[0]

    @property
    def name(self) -> str | None:
        parts = self.path.split("/")
        return parts[1] if len(parts) > 1 else None


def path_segments(path: str) -> list[str]:
    """Split a URL path into its non-empty segments."""
    return [segment for segment in path.split("/") if segment]


def repo_identity_from_url(url: str) -> RepoIdentity:
    """Derive the repository identity for a github.com URL.

    Query string, fragment and path segments beyond owner/name are dropped.

    Raises:
        ValueError: If the URL cannot be parsed or has no path segments.
    """
    parsed = urlsplit(url)
    segments = path_segments(parsed.path)[:2]
    if not segments:
        raise ValueError(f"URL has no repository path: {url!r}")
    host = (parsed.hostname or GITHUB_HOST).lower()
    path = "/".join(segments)
    return RepoIdentity(path=path, url=f"https://{host}/{path}")


def repo_path_segments(repo: str) -> list[str] | None:
    """Return the owner/name segments of a repository URL or path.

    Accepts ``https://github.com/owner/name``, ``/owner/name`` or
    ``owner/name``. Returns None when the value cannot be parsed.
    """
    value = repo.strip()
    if not value:
        return None
    try:
        parsed = urlsplit(value)
    except ValueError:
        return None
    if parsed.scheme or parsed.netloc:
        path = parsed.path
    else:
        # A bare "github.com/owner/name" parses as a path.
        path = value.split("?", 1)[0].split("#", 1)[0]
        if path.lower().startswith(GITHUB_HOST + "/"):
            path = path[len(GITHUB_HOST) :]
    segments = path_segments(path)
    return segments or None


def normalize_repo_path(repo: str) -> str:
    """Normalize a repository URL or path into ``owner/name``.

    Raises:
        ValueError: If the value does not name an owner and a repository.
    """
    segments = repo_path_segments(repo)
    if not segments or len(segments) < 2:
        raise ValueError(f"Not a GitHub repository path: {repo!r}")
    return "/".join(segments[:2])
