"""Per-repository metadata fetch cache kept in the session store."""

from __future__ import annotations

from typing import Any

from how_awesome.schemas import RepoState
from how_awesome.session import REPO_CACHE_KEY, SessionStore


class RepoCache:
    """``{status, info, error}`` per repository path.

    Entries are replaced, never mutated, so a state read earlier is not
    changed behind the reader's back.
    """

    def __init__(self, store: SessionStore) -> None:
        self.store = store

    def _entries(self) -> dict[str, RepoState]:
        return self.store.get(REPO_CACHE_KEY) or {}

    def get(self, repo_path: str) -> RepoState:
        return self._entries().get(repo_path) or RepoState()

    def set(self, repo_path: str, state: RepoState) -> None:
        self.store.set(REPO_CACHE_KEY, {**self._entries(), repo_path: state})

    def update(self, repo_path: str, **changes: Any) -> RepoState:
        state = self.get(repo_path).model_copy(update=changes)
        self.set(repo_path, state)
        return state

    def clear(self, repo_path: str) -> None:
        entries = self._entries()
        if repo_path not in entries:
            return
        self.store.set(REPO_CACHE_KEY, {path: state for path, state in entries.items() if path != repo_path})

    def __contains__(self, repo_path: str) -> bool:
        return repo_path in self._entries()
