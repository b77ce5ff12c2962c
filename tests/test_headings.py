"""Tests for heading extraction and heading-section trees."""

from __future__ import annotations

import textwrap

from vibedocs.headings import build_heading_tree, count_sections, extract_headings, render_heading_tree

DOCUMENT = textwrap.dedent(
    """\
    Intro text before any heading.

    # Mobile Development

    Overview paragraph.

    ## Cross-Platform

    Flutter and React Native.

    ```bash
    # install flutter
    brew install flutter
    ```

    ### Flutter *Basics*

    Widgets.

    ## Native

    Swift and Kotlin.

    Setext Heading
    --------------

    Under setext.
    """
)


class TestExtractHeadings:
    """Tests for extract_headings."""

    def test_skips_lines_inside_code_fences(self) -> None:
        titles = [item.title for item in extract_headings(DOCUMENT)]
        assert "install flutter" not in titles

    def test_returns_levels_ids_and_lines(self) -> None:
        items = extract_headings(DOCUMENT)

        assert [(item.level, item.title, item.id) for item in items] == [
            (1, "Mobile Development", "mobile-development"),
            (2, "Cross-Platform", "cross-platform"),
            (3, "Flutter Basics", "flutter-basics"),
            (2, "Native", "native"),
            (2, "Setext Heading", "setext-heading"),
        ]
        assert items[0].line == 3

    def test_duplicate_titles_get_unique_ids(self) -> None:
        items = extract_headings("# A\n\n## Usage\n\n## Usage\n")
        assert [item.id for item in items] == ["a", "usage", "usage-1"]

    def test_inline_code_is_kept_as_text(self) -> None:
        items = extract_headings("# Using `npm` scripts\n")
        assert items[0].title == "Using npm scripts"


class TestBuildHeadingTree:
    """Tests for build_heading_tree."""

    def test_nests_by_level(self) -> None:
        tree = build_heading_tree(DOCUMENT)

        assert [node.title for node in tree] == ["Mobile Development"]
        top = tree[0]
        assert [child.title for child in top.children] == [
            "Cross-Platform",
            "Native",
            "Setext Heading",
        ]
        assert [child.title for child in top.children[0].children] == ["Flutter Basics"]
        assert count_sections(tree) == 5

    def test_section_markdown_stops_at_next_heading(self) -> None:
        cross_platform = build_heading_tree(DOCUMENT)[0].children[0]

        assert cross_platform.markdown is not None
        assert cross_platform.markdown.startswith("Flutter and React Native.")
        assert "brew install flutter" in cross_platform.markdown
        assert "Widgets" not in cross_platform.markdown

    def test_heading_without_body_has_no_markdown(self) -> None:
        tree = build_heading_tree("# Title\n## Empty\n## Full\n\nText\n")
        assert tree[0].children[0].markdown is None
        assert tree[0].children[1].markdown == "Text"

    def test_render_outline(self) -> None:
        tree = build_heading_tree("# A\n## B\n### C\n## D\n")
        assert render_heading_tree(tree) == "A\n    B\n        C\n    D"
