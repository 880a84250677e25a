"""Inspect how an awesome list README is annotated."""

from __future__ import annotations

import argparse
import asyncio
from collections import Counter
from pathlib import Path

from bs4 import BeautifulSoup

from how_awesome.fetch import fetch_awesome_list
from how_awesome.ingestion import annotate_awesome_markdown


def main() -> None:
    parser = argparse.ArgumentParser(description="Show sections and repository links found in an awesome list.")
    parser.add_argument("--repo", required=True, help="Awesome list repository (owner/name or GitHub URL)")
    parser.add_argument("--file", help="Local markdown file to use instead of fetching the README")
    parser.add_argument("--html", action="store_true", help="Print the annotated HTML")
    args = parser.parse_args()

    markdown = load_markdown(repo=args.repo, file_path=args.file)
    html = annotate_awesome_markdown(markdown, args.repo)
    if args.html:
        print(html)
        return

    soup = BeautifulSoup(html, "html.parser")
    sections, owners = collect_stats(soup)

    print("Sections:")
    for slug, count in sections.items():
        print(f"{slug}: {count}")

    print("\nOwners:")
    for owner, count in owners.most_common():
        print(f"{owner}: {count}")


def load_markdown(*, repo: str, file_path: str | None) -> str:
    if file_path is None:
        return asyncio.run(fetch_awesome_list(repo))

    path = Path(file_path)
    if not path.is_file():
        raise FileNotFoundError(f"Markdown file not found: {path}")
    return path.read_text(encoding="utf-8")


def collect_stats(soup: BeautifulSoup) -> tuple[dict[str, int], Counter]:
    sections: dict[str, int] = {}
    owners = Counter()
    current = None

    for tag in soup.find_all(True):
        if "awesome-section" in tag.get("class", []):
            current = tag["id"]
            sections[current] = 0
        elif "awesome-link" in tag.get("class", []):
            owners[tag["data-repo-path"].split("/")[0]] += 1
            if current is not None:
                sections[current] += 1
    return sections, owners


if __name__ == "__main__":
    main()
