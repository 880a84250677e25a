"""Local configuration for how-awesome."""

from __future__ import annotations

import os
from pathlib import Path


DEFAULT_GITHUB_API_URL = "https://api.github.com"
DEFAULT_RAW_URL = "https://raw.githubusercontent.com"
DEFAULT_README_BRANCH = "main"
DEFAULT_FETCH_TIMEOUT_S = 10.0
DEFAULT_USER_AGENT = "how-awesome/0.1 (+https://github.com/how-awesome/how-awesome)"
DEFAULT_SESSION_FILE = ".how_awesome_session.json"
DEFAULT_LOG_LEVEL = "INFO"

HOW_AWESOME_GITHUB_API_URL = os.getenv("HOW_AWESOME_GITHUB_API_URL", DEFAULT_GITHUB_API_URL).rstrip("/")
HOW_AWESOME_RAW_URL = os.getenv("HOW_AWESOME_RAW_URL", DEFAULT_RAW_URL).rstrip("/")
HOW_AWESOME_README_BRANCH = os.getenv("HOW_AWESOME_README_BRANCH", DEFAULT_README_BRANCH)
HOW_AWESOME_GITHUB_TOKEN = os.getenv("HOW_AWESOME_GITHUB_TOKEN") or None
HOW_AWESOME_FETCH_TIMEOUT_S = float(os.getenv("HOW_AWESOME_FETCH_TIMEOUT_S", str(DEFAULT_FETCH_TIMEOUT_S)))
HOW_AWESOME_USER_AGENT = os.getenv("HOW_AWESOME_USER_AGENT", DEFAULT_USER_AGENT)
# Session file lives only as long as the serving process keeps reusing it.
HOW_AWESOME_SESSION_PATH = Path(os.getenv("HOW_AWESOME_SESSION_PATH", DEFAULT_SESSION_FILE)).expanduser().resolve()
HOW_AWESOME_LOG_LEVEL = os.getenv("HOW_AWESOME_LOG_LEVEL", DEFAULT_LOG_LEVEL)

README_FILENAMES = ("README.md", "readme.md")
