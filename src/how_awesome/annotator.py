"""Annotate an awesome list tree with sections and canonical repository links."""

from __future__ import annotations

from dataclasses import replace

from how_awesome.classifier import find_canonical_link
from how_awesome.nodes import (
    AwesomeLink,
    Document,
    Heading,
    Leaf,
    Link,
    ListItem,
    Node,
    Section,
    Text,
)
from how_awesome.repository import repo_identity_from_url, repo_path_segments


def annotate_tree(document: Document, repo_url: str) -> Document:
    """Return a new tree with headings as sections and repository links marked.

    Args:
        document: Parsed awesome list.
        repo_url: The awesome list's own repository URL or ``owner/name`` path.
            Links into this repository are never treated as entries. If it
            cannot be parsed, no link is excluded as a self-reference.

    The input tree is left untouched.
    """
    own_segments = repo_path_segments(repo_url)
    return Document(children=[_annotate(child, own_segments) for child in document.children])


def to_section(heading: Heading) -> Section:
    return Section(
        level=heading.level,
        opening=heading.opening,
        closing=heading.closing,
        children=heading.children,
    )


def to_awesome_link(link: Link) -> AwesomeLink:
    return AwesomeLink(
        url=link.url,
        title=link.title,
        repo=repo_identity_from_url(link.url),
        opening=link.opening,
        closing=link.closing,
        children=link.children,
    )


def _annotate(node: Node, own_segments: list[str] | None) -> Node:
    if isinstance(node, (Text, Leaf)):
        return node

    if isinstance(node, Heading):
        node = to_section(node)
    elif isinstance(node, ListItem):
        link = find_canonical_link(node, own_segments)
        if link is not None:
            node = _replace_node(node, link, to_awesome_link(link))

    # Pre-order: the item is annotated before its nested items are visited,
    # so a link claimed by an outer item is no longer a Link below it.
    return replace(node, children=[_annotate(child, own_segments) for child in node.children])


def _replace_node(node: Node, target: Node, replacement: Node) -> Node:
    if node is target:
        return replacement
    if isinstance(node, (Text, Leaf)):
        return node
    return replace(
        node,
        children=[_replace_node(child, target, replacement) for child in node.children],
    )
