"""Group annotated repositories under their section headings."""

from __future__ import annotations

from dataclasses import dataclass, field

from how_awesome.nodes import AwesomeLink, Document, ListItem, Section, plain_text, walk
from how_awesome.renderer import Slugger
from how_awesome.repository import RepoIdentity


@dataclass
class AwesomeSection:
    """A section heading with the entries that follow it.

    Attributes:
        heading: The ``Section`` node.
        title: Plain text of the heading.
        slug: The id the renderer gives the heading.
        items: List items up to the next heading, in document order.
        repos: Repository identities annotated within those items.
    """

    heading: Section
    title: str
    slug: str
    items: list[ListItem] = field(default_factory=list)
    repos: list[RepoIdentity] = field(default_factory=list)

    @property
    def level(self) -> int:
        return self.heading.level


def collect_sections(document: Document) -> list[AwesomeSection]:
    """Split an annotated tree into sections.

    Entries before the first heading belong to no section and are skipped.
    Slugs are assigned in document order with the renderer's rules, so they
    match the rendered heading ids.
    """
    slugger = Slugger()
    sections: list[AwesomeSection] = []
    current: AwesomeSection | None = None

    for node in walk(document):
        if isinstance(node, Section):
            title = plain_text(node)
            current = AwesomeSection(heading=node, title=title, slug=slugger.slug(title))
            sections.append(current)
        elif current is None:
            continue
        elif isinstance(node, ListItem):
            current.items.append(node)
        elif isinstance(node, AwesomeLink):
            current.repos.append(node.repo)

    return sections


def find_section(sections: list[AwesomeSection], slug: str) -> AwesomeSection | None:
    """Look up a section by its slug."""
    for section in sections:
        if section.slug == slug:
            return section
    return None
