"""Tests for cross-reference extraction and resolution."""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from vibedocs.links import (
    classify_href,
    extract_links,
    navigation_role,
    reader_href,
    resolve_link,
    split_fragment,
)


@pytest.mark.parametrize(
    ("href", "kind"),
    [
        ("https://flutter.dev", "external"),
        ("mailto:team@example.com", "external"),
        ("//cdn.example.com/x.js", "external"),
        ("#setup", "anchor"),
        ("../05-mobile/overview.md", "relative"),
        ("guide.md#install", "relative"),
    ],
)
def test_classify_href(href: str, kind: str) -> None:
    assert classify_href(href) == kind


def test_split_fragment() -> None:
    assert split_fragment("guide.md#set%20up") == ("guide.md", "set up")
    assert split_fragment("guide.md") == ("guide.md", None)


@pytest.mark.parametrize(
    ("line", "role"),
    [
        ("Next: [Frontend](frontend.md)", "next"),
        ("**Next:** [Frontend](frontend.md)", "next"),
        ("*Previous*: [Intro](intro.md)", "previous"),
        ("Prev: [Intro](intro.md)", "previous"),
        ("up: [Index](../index.md)", "up"),
        ("See [Frontend](frontend.md) next", None),
    ],
)
def test_navigation_role(line: str, role: str | None) -> None:
    assert navigation_role(line) == role


class TestExtractLinks:
    """Tests for extract_links."""

    def test_collects_links_with_lines_and_roles(self) -> None:
        markdown = textwrap.dedent(
            """\
            # Title

            Read the [guide](guide.md) and [docs](https://example.com).

            Next: [Frontend](frontend.md#intro)
            Up: [Index](../README.md)
            """
        )
        links = extract_links(markdown)

        assert [(link.href, link.text, link.line, link.kind, link.role) for link in links] == [
            ("guide.md", "guide", 3, "relative", None),
            ("https://example.com", "docs", 3, "external", None),
            ("frontend.md#intro", "Frontend", 5, "relative", "next"),
            ("../README.md", "Index", 6, "relative", "up"),
        ]

    def test_ignores_links_in_code(self) -> None:
        markdown = "Use `[x](y.md)` literally.\n\n```md\n[z](w.md)\n```\n"
        assert extract_links(markdown) == []

    def test_includes_images(self) -> None:
        links = extract_links("![Diagram](img/arch.png)\n")
        assert len(links) == 1
        assert links[0].is_image
        assert links[0].text == "Diagram"
        assert links[0].role is None

    def test_reference_style_links(self) -> None:
        links = extract_links("See [the guide][g].\n\n[g]: guide.md\n")
        assert [link.href for link in links] == ["guide.md"]


class TestResolveLink:
    """Tests for resolve_link and reader_href."""

    def test_resolves_relative_to_source(self, docs_root: Path) -> None:
        source = docs_root / "01-getting-started" / "installation.md"
        target = resolve_link(source, "../04-web-development/overview.md#top", docs_root)
        assert target == (docs_root / "04-web-development" / "overview.md").resolve()

    def test_anchor_only_resolves_to_source(self, docs_root: Path) -> None:
        source = docs_root / "GLOSSARY.md"
        assert resolve_link(source, "#glossary", docs_root) == source.resolve()

    def test_root_relative_paths(self, docs_root: Path) -> None:
        source = docs_root / "04-web-development" / "overview.md"
        assert resolve_link(source, "/GLOSSARY.md", docs_root) == (docs_root / "GLOSSARY.md").resolve()

    def test_percent_encoded_paths_are_decoded(self, docs_root: Path) -> None:
        source = docs_root / "GLOSSARY.md"
        target = resolve_link(source, "my%20notes.md", docs_root)
        assert target == (docs_root / "my notes.md").resolve()

    def test_outside_docs_root_is_none(self, docs_root: Path) -> None:
        source = docs_root / "GLOSSARY.md"
        assert resolve_link(source, "../../etc/passwd", docs_root) is None

    def test_external_is_none(self, docs_root: Path) -> None:
        assert resolve_link(docs_root / "GLOSSARY.md", "https://x.dev", docs_root) is None

    def test_reader_href(self, docs_root: Path) -> None:
        nested = docs_root / "04-web-development" / "frontend" / "react.md"
        assert reader_href(nested, docs_root) == "/docs/web-development/frontend/react"
        assert reader_href(docs_root / "GLOSSARY.md", docs_root) is None
        assert reader_href(docs_root / "04-web-development" / "diagram.png", docs_root) is None
