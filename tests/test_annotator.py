"""Tests for link classification and tree annotation."""

from __future__ import annotations

import pytest

from how_awesome.annotator import annotate_tree
from how_awesome.classifier import find_canonical_link, is_repository_link
from how_awesome.ingestion import annotate_awesome_tree
from how_awesome.markdown_tree import parse_markdown
from how_awesome.nodes import AwesomeLink, Heading, Link, ListItem, Section, walk
from how_awesome.repository import repo_path_segments


def _awesome_links(document) -> list[AwesomeLink]:
    return [node for node in walk(document) if isinstance(node, AwesomeLink)]


class TestIsRepositoryLink:
    """Tests for is_repository_link."""

    OWN = ["example", "awesome-things"]

    @pytest.mark.parametrize(
        "url",
        [
            "https://github.com/alice/alpha",
            "https://github.com/alice/alpha/issues?q=1#top",
            "http://github.com/alice",
            "https://github.com/example/awesome-things/blob/main/README.md",
        ],
    )
    def test_accepts_github_paths(self, url: str) -> None:
        assert is_repository_link(url, self.OWN)

    @pytest.mark.parametrize(
        "url",
        [
            "https://github.com/",
            "https://github.com",
            "https://gitlab.com/alice/alpha",
            "https://www.github.com/alice/alpha",
            "https://gist.github.com/alice/123",
            "#tools",
            "/relative/path",
            "http://[broken",
        ],
    )
    def test_rejects_non_repository_links(self, url: str) -> None:
        assert not is_repository_link(url, self.OWN)

    @pytest.mark.parametrize(
        "url",
        [
            "https://github.com/example/awesome-things",
            "https://github.com/example/awesome-things/",
            "https://github.com/example",
            "https://github.com/Example/Awesome-Things",
        ],
    )
    def test_rejects_prefixes_of_own_repository(self, url: str) -> None:
        assert not is_repository_link(url, self.OWN)

    @pytest.mark.parametrize("url", ["https://github.com/exam", "https://github.com/example/awesome"])
    def test_partial_segment_is_not_a_prefix(self, url: str) -> None:
        assert is_repository_link(url, self.OWN)

    def test_unparseable_own_repository_never_excludes(self) -> None:
        assert is_repository_link("https://github.com/example/awesome-things", None)


class TestFindCanonicalLink:
    """Tests for find_canonical_link."""

    def _item(self, markdown: str) -> ListItem:
        document = parse_markdown(markdown)
        return next(node for node in walk(document) if isinstance(node, ListItem))

    def test_first_qualifying_link_wins(self) -> None:
        item = self._item("- [a](https://github.com/a/one) [b](https://github.com/b/two)\n")
        link = find_canonical_link(item, None)
        assert link is not None
        assert link.url == "https://github.com/a/one"

    def test_skips_non_qualifying_links_before_match(self) -> None:
        item = self._item("- [site](https://a.dev) [root](https://github.com/) [b](https://github.com/b/two)\n")
        link = find_canonical_link(item, None)
        assert link is not None
        assert link.url == "https://github.com/b/two"

    def test_returns_none_without_qualifying_link(self) -> None:
        item = self._item("- [site](https://a.dev) plain text\n")
        assert find_canonical_link(item, None) is None

    def test_descends_into_nested_lists(self) -> None:
        item = self._item("- Group\n  - [child](https://github.com/c/child)\n")
        link = find_canonical_link(item, None)
        assert link is not None
        assert link.url == "https://github.com/c/child"


class TestAnnotateTree:
    """Tests for annotate_tree."""

    def test_headings_become_sections(self, awesome_markdown: str, own_repo: str) -> None:
        parsed = parse_markdown(awesome_markdown)
        headings = [node for node in walk(parsed) if isinstance(node, Heading)]

        document = annotate_tree(parsed, own_repo)
        sections = [node for node in walk(document) if isinstance(node, Section)]

        assert not [node for node in walk(document) if isinstance(node, Heading)]
        assert [section.level for section in sections] == [heading.level for heading in headings]
        assert [section.children for section in sections] == [heading.children for heading in headings]

    def test_input_tree_is_not_modified(self, awesome_markdown: str, own_repo: str) -> None:
        parsed = parse_markdown(awesome_markdown)
        annotate_tree(parsed, own_repo)
        assert not _awesome_links(parsed)
        assert not [node for node in walk(parsed) if isinstance(node, Section)]

    def test_annotates_one_link_per_qualifying_item(self, awesome_markdown: str, own_repo: str) -> None:
        document = annotate_awesome_tree(awesome_markdown, own_repo)
        paths = [link.repo.path for link in _awesome_links(document)]
        assert paths == ["alice/alpha", "bob/beta", "dave/delta", "erin/epsilon"]

    def test_repository_identity_is_normalized(self, own_repo: str) -> None:
        document = annotate_awesome_tree("- [x](https://github.com/alice/alpha/tree/main?tab=1#usage)\n", own_repo)
        (link,) = _awesome_links(document)
        assert link.repo.path == "alice/alpha"
        assert link.repo.url == "https://github.com/alice/alpha"
        assert link.repo.owner == "alice"
        assert link.repo.name == "alpha"
        assert link.url == "https://github.com/alice/alpha/tree/main?tab=1#usage"

    def test_links_outside_lists_are_not_annotated(self, own_repo: str) -> None:
        document = annotate_awesome_tree("See [alpha](https://github.com/alice/alpha).\n", own_repo)
        assert not _awesome_links(document)

    def test_self_reference_is_never_annotated(self, own_repo: str) -> None:
        document = annotate_awesome_tree("- [me](https://github.com/example/awesome-things)\n", own_repo)
        assert not _awesome_links(document)

    def test_root_link_is_never_annotated(self, own_repo: str) -> None:
        document = annotate_awesome_tree("- [GitHub](https://github.com/)\n", own_repo)
        assert not _awesome_links(document)

    def test_only_first_of_two_qualifying_links(self, own_repo: str) -> None:
        document = annotate_awesome_tree(
            "- [one](https://github.com/a/one) vs [two](https://github.com/b/two)\n", own_repo
        )
        links = [node for node in walk(document) if isinstance(node, (Link, AwesomeLink))]
        assert [type(link) for link in links] == [AwesomeLink, Link]

    def test_accepts_bare_repository_path(self) -> None:
        document = annotate_awesome_tree(
            "- [me](https://github.com/example/awesome-things)\n- [a](https://github.com/a/one)\n",
            "example/awesome-things",
        )
        assert [link.repo.path for link in _awesome_links(document)] == ["a/one"]

    def test_unparseable_repository_url_excludes_nothing(self) -> None:
        document = annotate_awesome_tree("- [me](https://github.com/example/awesome-things)\n", "http://[")
        assert [link.repo.path for link in _awesome_links(document)] == ["example/awesome-things"]

    def test_nested_link_is_claimed_by_outer_item_once(self, own_repo: str) -> None:
        markdown = "- Group\n  - [child](https://github.com/c/child)\n  - [other](https://github.com/d/other)\n"
        document = annotate_awesome_tree(markdown, own_repo)
        assert [link.repo.path for link in _awesome_links(document)] == ["c/child", "d/other"]

    def test_autolinks_are_classified(self, own_repo: str) -> None:
        document = annotate_awesome_tree("- https://github.com/alice/alpha\n", own_repo)
        assert [link.repo.path for link in _awesome_links(document)] == ["alice/alpha"]


def test_repo_path_segments_forms() -> None:
    assert repo_path_segments("https://github.com/example/awesome-things") == ["example", "awesome-things"]
    assert repo_path_segments("/example/awesome-things") == ["example", "awesome-things"]
    assert repo_path_segments("github.com/example/awesome-things") == ["example", "awesome-things"]
    assert repo_path_segments("") is None
    assert repo_path_segments("http://[") is None
