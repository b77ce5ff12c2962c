"""Tests for frontmatter splitting and defaults."""

from __future__ import annotations

import pytest

from vibedocs.exceptions import FrontMatterError
from vibedocs.frontmatter import build_front_matter, split_frontmatter


class TestSplitFrontmatter:
    """Tests for split_frontmatter."""

    def test_no_frontmatter_returns_text_unchanged(self) -> None:
        text = "# Title\n\nBody\n"
        data, body = split_frontmatter(text)
        assert data == {}
        assert body == text

    def test_parses_yaml_block(self) -> None:
        data, body = split_frontmatter("---\ntitle: Hello\ntags: [a, b]\n---\n# Hello\n")
        assert data == {"title": "Hello", "tags": ["a", "b"]}
        assert body == "# Hello\n"

    def test_empty_block_is_empty_mapping(self) -> None:
        data, body = split_frontmatter("---\n---\nBody\n")
        assert data == {}
        assert body == "Body\n"

    def test_dots_close_the_block(self) -> None:
        data, body = split_frontmatter("---\ntitle: X\n...\nBody\n")
        assert data == {"title": "X"}
        assert body == "Body\n"

    def test_ignores_byte_order_mark(self) -> None:
        data, _ = split_frontmatter("\ufeff---\ntitle: X\n---\nBody\n")
        assert data == {"title": "X"}

    def test_unclosed_fence_is_not_frontmatter(self) -> None:
        text = "---\nJust a rule\n"
        data, body = split_frontmatter(text)
        assert data == {}
        assert body == text

    def test_invalid_yaml_raises(self) -> None:
        with pytest.raises(FrontMatterError, match="Invalid YAML"):
            split_frontmatter("---\ntitle: [unclosed\n---\nBody\n")

    def test_non_mapping_raises(self) -> None:
        with pytest.raises(FrontMatterError, match="mapping"):
            split_frontmatter("---\n- a\n- b\n---\nBody\n")


class TestBuildFrontMatter:
    """Tests for build_front_matter defaults."""

    def test_title_defaults_to_slug_words(self) -> None:
        front_matter = build_front_matter({}, "cross-platform-apps")
        assert front_matter.title == "cross platform apps"
        assert front_matter.tags == []
        assert front_matter.order == 0
        assert front_matter.published is True

    def test_published_only_false_when_explicit(self) -> None:
        assert build_front_matter({"published": False}, "x").published is False
        assert build_front_matter({"published": None}, "x").published is True
        assert build_front_matter({"published": "no"}, "x").published is True

    def test_single_tag_string_becomes_list(self) -> None:
        assert build_front_matter({"tags": "web"}, "x").tags == ["web"]

    def test_yaml_date_becomes_iso_string(self) -> None:
        data, _ = split_frontmatter("---\ndate: 2024-01-15\n---\n")
        assert build_front_matter(data, "x").date == "2024-01-15"

    def test_order_must_be_integer(self) -> None:
        with pytest.raises(FrontMatterError, match="order"):
            build_front_matter({"order": "first"}, "x")
