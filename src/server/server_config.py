"""Configuration for the how-awesome server."""

from __future__ import annotations

import os

from how_awesome.config import HOW_AWESOME_SESSION_PATH

# Rendered HTML longer than this is cropped in API responses.
MAX_DISPLAY_SIZE = int(os.getenv("HOW_AWESOME_MAX_DISPLAY_SIZE", str(2_000_000)))
SESSION_PATH = HOW_AWESOME_SESSION_PATH
PERSIST_SESSION = os.getenv("HOW_AWESOME_PERSIST_SESSION", "true").lower() == "true"
