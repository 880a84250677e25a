"""Render an annotated awesome list tree to HTML."""

from __future__ import annotations

import re
from collections import defaultdict
from typing import Callable

from markdown_it import MarkdownIt
from markdown_it.token import Token

from how_awesome.markdown_tree import build_markdown_parser
from how_awesome.nodes import (
    AwesomeLink,
    Document,
    Inline,
    Leaf,
    Node,
    Section,
    Text,
    children_of,
    plain_text,
)

SECTION_CLASS = "awesome-section"
LINK_CLASS = "awesome-link"
DEFAULT_SLUG = "section"

_NON_ALNUM_RE = re.compile(r"[\W_]+")


def slugify(text: str) -> str:
    """Lower-case ``text`` and collapse runs of non-alphanumerics into ``-``."""
    return _NON_ALNUM_RE.sub("-", text.lower()).strip("-")


class Slugger:
    """Hand out unique slugs within one document.

    Repeated slugs get a numeric suffix in order of appearance:
    ``tools``, ``tools-1``, ``tools-2``.
    """

    def __init__(self) -> None:
        self._seen: set[str] = set()
        self._counts: defaultdict[str, int] = defaultdict(int)

    def slug(self, text: str) -> str:
        base = slugify(text) or DEFAULT_SLUG
        candidate = base
        while candidate in self._seen:
            self._counts[base] += 1
            candidate = f"{base}-{self._counts[base]}"
        self._seen.add(candidate)
        return candidate


class AwesomeRenderer:
    """Turn a node tree back into markdown-it tokens and render them.

    ``Section`` and ``AwesomeLink`` have dedicated handlers that decorate the
    opening tag; every other kind is emitted as its original tokens and
    rendered by markdown-it's CommonMark HTML renderer.
    """

    def __init__(self, md: MarkdownIt | None = None) -> None:
        self.md = md or build_markdown_parser()
        self._handlers: dict[type, Callable[[Node, Slugger], list[Token]]] = {
            Section: self._section_tokens,
            AwesomeLink: self._awesome_link_tokens,
            Inline: self._inline_tokens,
            Text: self._leaf_tokens,
            Leaf: self._leaf_tokens,
        }

    def render(self, document: Document) -> str:
        tokens = self.to_tokens(document)
        return self.md.renderer.render(tokens, self.md.options, {})

    def to_tokens(self, document: Document) -> list[Token]:
        slugger = Slugger()
        tokens: list[Token] = []
        for child in document.children:
            tokens.extend(self._node_tokens(child, slugger))
        return tokens

    def _node_tokens(self, node: Node, slugger: Slugger) -> list[Token]:
        handler = self._handlers.get(type(node), self._container_tokens)
        return handler(node, slugger)

    def _children_tokens(self, node: Node, slugger: Slugger) -> list[Token]:
        tokens: list[Token] = []
        for child in children_of(node):
            tokens.extend(self._node_tokens(child, slugger))
        return tokens

    def _container_tokens(self, node: Node, slugger: Slugger) -> list[Token]:
        return [node.opening, *self._children_tokens(node, slugger), node.closing]  # type: ignore[union-attr]

    def _leaf_tokens(self, node: Node, slugger: Slugger) -> list[Token]:
        return [node.token]  # type: ignore[union-attr]

    def _inline_tokens(self, node: Node, slugger: Slugger) -> list[Token]:
        assert isinstance(node, Inline)
        return [node.token.copy(children=self._children_tokens(node, slugger))]

    def _section_tokens(self, node: Node, slugger: Slugger) -> list[Token]:
        assert isinstance(node, Section)
        attrs = dict(node.opening.attrs)
        attrs["class"] = _add_class(attrs.get("class"), SECTION_CLASS)
        attrs["id"] = slugger.slug(plain_text(node))
        opening = node.opening.copy(attrs=attrs)
        return [opening, *self._children_tokens(node, slugger), node.closing]

    def _awesome_link_tokens(self, node: Node, slugger: Slugger) -> list[Token]:
        assert isinstance(node, AwesomeLink)
        attrs = dict(node.opening.attrs)
        attrs["class"] = _add_class(attrs.get("class"), LINK_CLASS)
        attrs["data-repo-path"] = node.repo.path
        attrs["data-repo-url"] = node.repo.url
        opening = node.opening.copy(attrs=attrs)
        return [opening, *self._children_tokens(node, slugger), node.closing]


def _add_class(existing: str | int | float | None, name: str) -> str:
    classes = str(existing).split() if existing else []
    if name not in classes:
        classes.append(name)
    return " ".join(classes)


def render_tree(document: Document, *, md: MarkdownIt | None = None) -> str:
    """Render an annotated tree to an HTML string."""
    return AwesomeRenderer(md).render(document)
