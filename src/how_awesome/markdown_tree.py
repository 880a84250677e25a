"""Parse markdown into the how-awesome document tree."""

from __future__ import annotations

from typing import Sequence

from markdown_it import MarkdownIt
from markdown_it.token import Token
from mdit_py_plugins.tasklists import tasklists_plugin

from how_awesome.nodes import (
    Document,
    Element,
    Heading,
    Inline,
    Leaf,
    Link,
    List,
    ListItem,
    Node,
    Text,
)


def build_markdown_parser() -> MarkdownIt:
    """Create a CommonMark parser with the GitHub flavoured extensions.

    The ``gfm-like`` preset enables tables, strikethrough, raw HTML and bare
    URL autolinks; task list checkboxes come from ``mdit-py-plugins``.
    """
    return MarkdownIt("gfm-like").use(tasklists_plugin)


def parse_markdown(markdown_text: str, *, md: MarkdownIt | None = None) -> Document:
    """Parse ``markdown_text`` into a ``Document`` tree.

    Any text is accepted; markdown-it never rejects input.
    """
    parser = md or build_markdown_parser()
    tokens = parser.parse(markdown_text, {})
    return Document(children=build_nodes(tokens))


def build_nodes(tokens: Sequence[Token]) -> list[Node]:
    """Fold a flat markdown-it token stream into nested nodes."""
    roots: list[Node] = []
    stack: list[tuple[Token, list[Node]]] = []

    for token in tokens:
        siblings = stack[-1][1] if stack else roots
        if token.nesting == 1:
            stack.append((token, []))
        elif token.nesting == -1 and stack:
            opening, children = stack.pop()
            parent = stack[-1][1] if stack else roots
            parent.append(_container(opening, token, children))
        else:
            siblings.append(_leaf(token))

    return roots


def _container(opening: Token, closing: Token, children: list[Node]) -> Node:
    kind = opening.type
    if kind == "heading_open":
        return Heading(level=int(opening.tag[1:]), opening=opening, closing=closing, children=children)
    if kind in ("bullet_list_open", "ordered_list_open"):
        return List(
            ordered=kind == "ordered_list_open",
            opening=opening,
            closing=closing,
            children=children,
        )
    if kind == "list_item_open":
        return ListItem(opening=opening, closing=closing, children=children)
    if kind == "link_open":
        href = opening.attrGet("href")
        title = opening.attrGet("title")
        return Link(
            url=str(href) if href is not None else "",
            title=str(title) if title is not None else None,
            opening=opening,
            closing=closing,
            children=children,
        )
    return Element(opening=opening, closing=closing, children=children)


def _leaf(token: Token) -> Node:
    if token.type == "inline":
        return Inline(token=token, children=build_nodes(token.children or []))
    if token.type == "text":
        return Text(token=token)
    return Leaf(token=token)
