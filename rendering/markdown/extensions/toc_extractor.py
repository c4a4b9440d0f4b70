from __future__ import annotations

from typing import TypedDict

from bs4 import BeautifulSoup, Tag

from .heading_ids import slugify_heading


class HeadingNode(TypedDict):
    level: int
    id: str
    title: str
    children: list["HeadingNode"]


def _heading_title(heading: Tag) -> str:
    # Highlighted or decorated headings may nest spans; only the words matter.
    return heading.get_text(separator=" ", strip=True)


def extract_outline(html: str) -> list[HeadingNode]:
    """
    Given rendered HTML, return a hierarchical list of its headings.

    Each entry contains:
        - level: Heading level (1-6)
        - id: the heading's id, or its slug when it has none
        - title: Plain-text version of the heading
        - children: Nested list of deeper headings that follow it

    Headings with no text are skipped. Skipped levels are allowed: an h4
    directly under an h2 becomes the h2's child.
    """
    soup = BeautifulSoup(html, "html.parser")
    outline: list[HeadingNode] = []
    stack: list[HeadingNode] = []
    for heading in soup.find_all(["h1", "h2", "h3", "h4", "h5", "h6"]):
        level = int(heading.name[1])  # "h2" -> 2
        title = _heading_title(heading)
        if not title:
            continue

        node: HeadingNode = {
            "level": level,
            "id": heading.get("id") or slugify_heading(title),
            "title": title,
            "children": [],
        }

        while stack and stack[-1]["level"] >= level:
            stack.pop()

        if stack:
            stack[-1]["children"].append(node)
        else:
            outline.append(node)

        stack.append(node)

    return outline
