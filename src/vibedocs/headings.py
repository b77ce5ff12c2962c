"""Heading extraction, heading-section trees and outlines."""

from __future__ import annotations

from typing import Iterable

from vibedocs.parser import iter_headings, parse_tokens
from vibedocs.schemas import HeadingNode, TocItem
from vibedocs.slugs import HeadingSlugger


def extract_headings(markdown: str) -> list[TocItem]:
    """Table of contents of a markdown body.

    Lines starting with ``#`` inside fenced code are not headings. Line numbers
    are 1-based.
    """
    slugger = HeadingSlugger()
    return [
        TocItem(
            id=slugger.slug(heading.text),
            title=heading.text,
            level=heading.level,
            line=heading.start_line + 1,
        )
        for heading in iter_headings(parse_tokens(markdown))
    ]


def build_heading_tree(markdown: str) -> list[HeadingNode]:
    """Split a document into heading-delimited sections nested by level.

    Text before the first heading belongs to no section.
    """
    lines = markdown.splitlines()
    headings = list(iter_headings(parse_tokens(markdown)))
    slugger = HeadingSlugger()

    roots: list[HeadingNode] = []
    stack: list[HeadingNode] = []
    for index, heading in enumerate(headings):
        body_end = headings[index + 1].start_line if index + 1 < len(headings) else len(lines)
        body = "\n".join(lines[heading.end_line : body_end]).strip()
        node = HeadingNode(
            title=heading.text,
            level=heading.level,
            anchor=slugger.slug(heading.text),
            markdown=body or None,
        )
        while stack and stack[-1].level >= node.level:
            stack.pop()
        if stack:
            stack[-1].children.append(node)
        else:
            roots.append(node)
        stack.append(node)
    return roots


def count_sections(sections: Iterable[HeadingNode]) -> int:
    """Count total sections in the tree."""
    total = 0
    for section in sections:
        total += 1
        total += count_sections(section.children)
    return total


def render_heading_tree(sections: list[HeadingNode], indent: int = 0) -> str:
    lines: list[str] = []
    for section in sections:
        lines.append(" " * (indent * 4) + section.title)
        if section.children:
            lines.append(render_heading_tree(section.children, indent + 1))
    return "\n".join(lines)
