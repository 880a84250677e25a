"""Document tree for awesome list markdown.

The node kinds form a closed set. Annotation never changes a node's kind in
place: a heading becomes a new ``Section`` value and a link becomes a new
``AwesomeLink`` value, each carrying the original's fields.

Every node keeps the ``markdown_it`` token(s) it was built from so that kinds
without a custom rendering fall back to markdown-it's CommonMark renderer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Union

from markdown_it.token import Token

from how_awesome.repository import RepoIdentity


@dataclass
class Text:
    token: Token

    @property
    def content(self) -> str:
        return self.token.content


@dataclass
class Leaf:
    """Any childless token without a dedicated kind (code, image, break, html)."""

    token: Token

    @property
    def type(self) -> str:
        return self.token.type


@dataclass
class Inline:
    """A run of inline content inside a block (paragraph, heading, cell)."""

    token: Token
    children: list[Node] = field(default_factory=list)


@dataclass
class Element:
    """Any container without a dedicated kind (paragraph, table, emphasis)."""

    opening: Token
    closing: Token
    children: list[Node] = field(default_factory=list)

    @property
    def type(self) -> str:
        return self.opening.type.removesuffix("_open")


@dataclass
class Heading:
    level: int
    opening: Token
    closing: Token
    children: list[Node] = field(default_factory=list)


@dataclass
class Section:
    """A heading marked as the start of an awesome list section."""

    level: int
    opening: Token
    closing: Token
    children: list[Node] = field(default_factory=list)


@dataclass
class List:
    ordered: bool
    opening: Token
    closing: Token
    children: list[Node] = field(default_factory=list)


@dataclass
class ListItem:
    opening: Token
    closing: Token
    children: list[Node] = field(default_factory=list)


@dataclass
class Link:
    url: str
    title: str | None
    opening: Token
    closing: Token
    children: list[Node] = field(default_factory=list)


@dataclass
class AwesomeLink:
    """A link chosen as the canonical repository of its list item."""

    url: str
    title: str | None
    repo: RepoIdentity
    opening: Token
    closing: Token
    children: list[Node] = field(default_factory=list)


@dataclass
class Document:
    children: list[Node] = field(default_factory=list)


Node = Union[Text, Leaf, Inline, Element, Heading, Section, List, ListItem, Link, AwesomeLink]


def children_of(node: Node | Document) -> list[Node]:
    """Return a node's children, or an empty list for leaves."""
    if isinstance(node, (Text, Leaf)):
        return []
    return node.children


def walk(node: Node | Document) -> Iterator[Node | Document]:
    """Yield ``node`` and its descendants in document (pre-)order."""
    yield node
    for child in children_of(node):
        yield from walk(child)


def plain_text(node: Node | Document) -> str:
    """Concatenate the visible text below ``node``."""
    parts: list[str] = []
    for descendant in walk(node):
        if isinstance(descendant, Text):
            parts.append(descendant.content)
        elif isinstance(descendant, Leaf):
            if descendant.type == "code_inline":
                parts.append(descendant.token.content)
            elif descendant.type in ("softbreak", "hardbreak"):
                parts.append(" ")
    return "".join(parts)
