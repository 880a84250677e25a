"""Awesome list pipeline: README markdown -> annotated HTML."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import httpx

from how_awesome.annotator import annotate_tree
from how_awesome.fetch import fetch_awesome_list
from how_awesome.markdown_tree import build_markdown_parser, parse_markdown
from how_awesome.nodes import Document
from how_awesome.renderer import render_tree
from how_awesome.repository import normalize_repo_path
from how_awesome.sections import AwesomeSection, collect_sections

logger = logging.getLogger(__name__)


@dataclass
class AwesomeListResult:
    """Rendered awesome list.

    Attributes:
        repo_path: ``owner/name`` of the awesome list.
        html: Annotated HTML.
        sections: Sections in document order with their repositories.
    """

    repo_path: str
    html: str
    sections: list[AwesomeSection] = field(default_factory=list)

    @property
    def repo_count(self) -> int:
        return sum(len(section.repos) for section in self.sections)


def annotate_awesome_tree(markdown_text: str, repo_url: str) -> Document:
    """Parse and annotate an awesome list without rendering it."""
    return annotate_tree(parse_markdown(markdown_text), repo_url)


def annotate_awesome_markdown(markdown_text: str, repo_url: str) -> str:
    """Render an awesome list to HTML with sections and repository links marked.

    Pure and deterministic: no network access and no shared state.

    Args:
        markdown_text: The README markdown.
        repo_url: The list's own repository URL or path, used to ignore
            links back into the list itself.

    Returns:
        HTML where headings carry class ``awesome-section`` and a unique id,
        and each entry's canonical repository link carries class
        ``awesome-link`` with ``data-repo-path``/``data-repo-url``.
    """
    md = build_markdown_parser()
    document = annotate_tree(parse_markdown(markdown_text, md=md), repo_url)
    return render_tree(document, md=md)


async def process_awesome_list(
    repo_path: str,
    *,
    client: httpx.AsyncClient | None = None,
) -> AwesomeListResult:
    """Fetch an awesome list README and annotate it.

    Raises:
        ReadmeNotFoundError: If no README could be fetched.
    """
    markdown_text = await fetch_awesome_list(repo_path, client=client)
    normalized = normalize_repo_path(repo_path)

    md = build_markdown_parser()
    document = annotate_tree(parse_markdown(markdown_text, md=md), normalized)
    result = AwesomeListResult(
        repo_path=normalized,
        html=render_tree(document, md=md),
        sections=collect_sections(document),
    )
    logger.info(
        "Processed awesome list",
        extra={"repo": normalized, "sections": len(result.sections), "repos": result.repo_count},
    )
    return result
