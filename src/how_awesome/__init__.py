"""how-awesome: annotate awesome lists and track the GitHub API budget."""

from how_awesome.exceptions import (
    FetchError,
    GitHubApiError,
    HowAwesomeError,
    RateLimitError,
    ReadmeNotFoundError,
)
from how_awesome.github import GitHubClient
from how_awesome.ingestion import (
    AwesomeListResult,
    annotate_awesome_markdown,
    annotate_awesome_tree,
    process_awesome_list,
)
from how_awesome.ratelimit import extract_rate_limit, ingest_rate_limit, merge_snapshots
from how_awesome.repository import RepoIdentity
from how_awesome.schemas import ApiState, RateLimitSnapshot, RepoInfo, RepoState

__all__ = [
    "ApiState",
    "AwesomeListResult",
    "FetchError",
    "GitHubApiError",
    "GitHubClient",
    "HowAwesomeError",
    "RateLimitError",
    "RateLimitSnapshot",
    "ReadmeNotFoundError",
    "RepoIdentity",
    "RepoInfo",
    "RepoState",
    "annotate_awesome_markdown",
    "annotate_awesome_tree",
    "extract_rate_limit",
    "ingest_rate_limit",
    "merge_snapshots",
    "process_awesome_list",
]
