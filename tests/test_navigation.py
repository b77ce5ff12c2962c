"""Tests for reading order, neighbours, breadcrumbs and the sidebar."""

from __future__ import annotations

from pathlib import Path

import pytest

from vibedocs.content import get_all_doc_sections
from vibedocs.navigation import (
    build_breadcrumbs,
    build_sidebar,
    flatten_sections,
    get_page_neighbors,
)
from vibedocs.schemas import DocSection


@pytest.fixture
def sections(docs_root: Path) -> list[DocSection]:
    return get_all_doc_sections(docs_root)


class TestFlattenSections:
    """Tests for flatten_sections."""

    def test_reading_order(self, sections: list[DocSection]) -> None:
        assert [item.href for item in flatten_sections(sections)] == [
            "/docs/getting-started/overview",
            "/docs/getting-started/installation",
            "/docs/web-development/overview",
            "/docs/web-development/frontend/react",
        ]

    def test_empty(self) -> None:
        assert flatten_sections([]) == []


class TestGetPageNeighbors:
    """Tests for get_page_neighbors."""

    def test_middle_document(self, sections: list[DocSection]) -> None:
        neighbors = get_page_neighbors(sections, "getting-started", "installation")

        assert neighbors.previous is not None
        assert neighbors.previous.document == "overview"
        assert neighbors.previous.section == "getting-started"
        assert neighbors.next is not None
        assert neighbors.next.href == "/docs/web-development/overview"

    def test_crosses_into_subsections(self, sections: list[DocSection]) -> None:
        neighbors = get_page_neighbors(sections, "web-development", "overview")
        assert neighbors.next is not None
        assert neighbors.next.section == "web-development/frontend"

    def test_ends_of_the_order(self, sections: list[DocSection]) -> None:
        assert get_page_neighbors(sections, "getting-started", "overview").previous is None
        assert get_page_neighbors(sections, "web-development/frontend", "react").next is None

    def test_unknown_document(self, sections: list[DocSection]) -> None:
        neighbors = get_page_neighbors(sections, "web-development", "draft")
        assert neighbors.previous is None
        assert neighbors.next is None


class TestBuildBreadcrumbs:
    """Tests for build_breadcrumbs."""

    def test_document_trail(self) -> None:
        crumbs = build_breadcrumbs(
            "web-development/frontend", "react", document_title="React Patterns"
        )

        assert [(crumb.title, crumb.href) for crumb in crumbs] == [
            ("Home", "/"),
            ("Documentation", "/docs"),
            ("Web Development", "/docs/web-development"),
            ("Frontend", "/docs/web-development/frontend"),
            ("React Patterns", None),
        ]

    def test_section_trail_ends_without_link(self) -> None:
        crumbs = build_breadcrumbs("ai-development")
        assert [(crumb.title, crumb.href) for crumb in crumbs][-1] == ("Ai Development", None)

    def test_document_title_falls_back_to_slug(self) -> None:
        crumbs = build_breadcrumbs("getting-started", "quick-start")
        assert crumbs[-1].title == "Quick Start"


def test_build_sidebar(sections: list[DocSection]) -> None:
    sidebar = build_sidebar(sections)

    assert [node.title for node in sidebar] == ["Getting Started", "Web Development"]
    web = sidebar[1]
    assert web.href == "/docs/web-development"
    assert [item.title for item in web.items] == [
        "overview",
        "Frontend",
    ]
    assert [item.title for item in web.items[1].items] == ["React Patterns"]
