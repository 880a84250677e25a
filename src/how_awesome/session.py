"""Session-scoped key/value store with an explicit serialization boundary.

Values are plain Python objects while the process runs. They are converted
to JSON only in ``dumps``/``save`` and validated back in ``loads``/``load``,
using a pydantic ``TypeAdapter`` per key so timestamps and nested models
round-trip. Nothing is propagated implicitly: readers call ``get`` again.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping

from pydantic import TypeAdapter, ValidationError

from how_awesome.cache_utils import mkdir_async, read_text_async, write_text_async
from how_awesome.schemas import ApiState, RepoState

logger = logging.getLogger(__name__)

API_STATE_KEY = "api-state"
REPO_CACHE_KEY = "repo-cache-v1"

SESSION_SCHEMA: dict[str, Any] = {
    API_STATE_KEY: ApiState,
    REPO_CACHE_KEY: dict[str, RepoState],
}


class SessionStore:
    """Named values that live for one session."""

    def __init__(self, schema: Mapping[str, Any] | None = None) -> None:
        self._adapters = {
            name: TypeAdapter(value_type) for name, value_type in (schema or SESSION_SCHEMA).items()
        }
        self._values: dict[str, Any] = {}

    def get(self, name: str, default: Any = None) -> Any:
        return self._values.get(name, default)

    def set(self, name: str, value: Any) -> None:
        if name not in self._adapters:
            raise KeyError(f"Unknown session key: {name!r}")
        self._values[name] = value

    def setdefault(self, name: str, default: Any) -> Any:
        if name not in self._values:
            self.set(name, default)
        return self._values[name]

    def clear(self) -> None:
        self._values.clear()

    def dumps(self) -> str:
        payload = {
            name: self._adapters[name].dump_python(value, mode="json")
            for name, value in self._values.items()
        }
        return json.dumps(payload, sort_keys=True)

    def loads(self, raw: str) -> None:
        """Replace the stored values with those serialized in ``raw``.

        Unknown keys and values that fail validation are dropped with a
        warning; an unreadable payload leaves the store empty.
        """
        self._values.clear()
        try:
            payload = json.loads(raw)
        except ValueError:
            logger.warning("Discarding unreadable session payload")
            return
        if not isinstance(payload, dict):
            logger.warning("Discarding session payload that is not an object")
            return

        for name, value in payload.items():
            adapter = self._adapters.get(name)
            if adapter is None:
                logger.warning("Ignoring unknown session key", extra={"key": name})
                continue
            try:
                self._values[name] = adapter.validate_python(value)
            except ValidationError as exc:
                logger.warning("Ignoring invalid session value", extra={"key": name, "error": str(exc)})

    async def save(self, path: Path) -> None:
        await mkdir_async(path.parent, parents=True, exist_ok=True)
        await write_text_async(path, self.dumps())

    async def load(self, path: Path) -> None:
        if not path.exists():
            self._values.clear()
            return
        self.loads(await read_text_async(path))

    def api_state(self) -> ApiState:
        """Return the stored ``ApiState``, creating the initial one if absent."""
        return self.setdefault(API_STATE_KEY, ApiState())
