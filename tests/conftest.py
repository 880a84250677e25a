"""Test setup for how-awesome."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for pytest.

    This allows running integration tests selectively:
        pytest -m integration       # run only integration tests
        pytest -m "not integration" # skip integration tests
    """
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests (make real network calls)",
    )


OWN_REPO = "https://github.com/example/awesome-things"


@pytest.fixture
def own_repo() -> str:
    """URL of the awesome list under test."""
    return OWN_REPO


@pytest.fixture
def awesome_markdown() -> str:
    """A small awesome list exercising the annotation rules."""
    return """# Awesome Things

A curated list. See [contributing](https://github.com/example/awesome-things/blob/main/CONTRIBUTING.md).

## Tools

- [Alpha](https://github.com/alice/alpha?tab=readme#usage) - First tool.
- [Docs](https://alpha.dev) and [Beta](https://github.com/bob/beta/tree/main/src) - Second tool.
- [Home](https://github.com/) - Root link.
- [Self](https://github.com/example/awesome-things) - Self reference.

## Libraries

| Name | Link |
| ---- | ---- |
| gamma | [gamma](https://github.com/carol/gamma) |

- [x] [Delta](https://github.com/dave/delta) ~~old~~
- Plain entry without links.

## Tools

- [Epsilon](https://github.com/erin/epsilon) and [Zeta](https://github.com/zed/zeta)
"""
