"""Tests for corpus search."""

from __future__ import annotations

from pathlib import Path

from conftest import write_corpus
from vibedocs.content import get_all_doc_sections
from vibedocs.search import extract_snippets, iter_section_documents, search_documents


class TestSearchDocuments:
    """Tests for search_documents."""

    def test_title_matches_rank_first(self, docs_root: Path) -> None:
        results = search_documents(get_all_doc_sections(docs_root), "react")

        assert [result.href for result in results] == [
            "/docs/web-development/frontend/react",
            "/docs/web-development/overview",
        ]
        assert results[0].score > results[1].score

    def test_case_insensitive_and_reading_order_on_ties(self, docs_root: Path) -> None:
        results = search_documents(get_all_doc_sections(docs_root), "CONTEXT engineering")

        assert [(result.section, result.document) for result in results] == [
            ("getting-started", "overview"),
            ("web-development", "overview"),
        ]
        assert results[0].matches
        assert "Context Engineering" in results[0].matches[0]

    def test_matches_tags(self, docs_root: Path) -> None:
        results = search_documents(get_all_doc_sections(docs_root), "basics")

        assert len(results) == 1
        assert results[0].title == "Getting Started"
        assert results[0].tags == ["basics", "introduction"]
        assert results[0].matches == []

    def test_matches_description(self, docs_root: Path) -> None:
        results = search_documents(get_all_doc_sections(docs_root), "methodology")
        assert [result.document for result in results] == ["overview"]
        assert results[0].description == "Learn the fundamentals of VibeCode methodology"

    def test_unpublished_documents_are_not_found(self, docs_root: Path) -> None:
        assert search_documents(get_all_doc_sections(docs_root), "not ready") == []

        sections = get_all_doc_sections(docs_root, include_unpublished=True)
        assert [result.document for result in search_documents(sections, "not ready")] == ["draft"]

    def test_title_hit_outranks_other_fields_combined(self, tmp_path: Path) -> None:
        root = write_corpus(
            tmp_path,
            {
                "01-ops/alpha.md": "---\ntitle: Kubernetes\n---\n# Cluster basics\n",
                "01-ops/beta.md": (
                    "---\ntitle: Deploying\ndescription: Rolling out to kubernetes\n"
                    "tags: [kubernetes]\n---\n# Deploying\n\nUse kubernetes manifests.\n"
                ),
                "01-ops/gamma.md": "---\ntitle: Notes\n---\n# Notes\n\nkubernetes aside.\n",
            },
        )
        results = search_documents(get_all_doc_sections(root), "kubernetes")

        assert [result.document for result in results] == ["alpha", "beta", "gamma"]

    def test_description_hit_outranks_body_hit(self, tmp_path: Path) -> None:
        root = write_corpus(
            tmp_path,
            {
                "01-ops/a-body.md": "# A\n\nHelm charts here.\n",
                "01-ops/b-description.md": "---\ndescription: About helm\n---\n# B\n",
            },
        )
        results = search_documents(get_all_doc_sections(root), "helm")

        assert [result.document for result in results] == ["b-description", "a-body"]

    def test_blank_query(self, docs_root: Path) -> None:
        assert search_documents(get_all_doc_sections(docs_root), "   ") == []

    def test_limit(self, docs_root: Path) -> None:
        results = search_documents(get_all_doc_sections(docs_root), "react", limit=1)
        assert len(results) == 1


def test_iter_section_documents_includes_subsections(docs_root: Path) -> None:
    slugs = [doc.slug for doc in iter_section_documents(get_all_doc_sections(docs_root))]
    assert slugs == ["overview", "installation", "overview", "react"]


class TestExtractSnippets:
    """Tests for extract_snippets."""

    def test_context_and_ellipses(self) -> None:
        content = "a" * 100 + "needle" + "b" * 100
        assert extract_snippets(content, "needle") == ["..." + "a" * 40 + "needle" + "b" * 40 + "..."]

    def test_no_ellipsis_at_edges(self) -> None:
        assert extract_snippets("needle in text", "NEEDLE") == ["needle in text"]

    def test_whitespace_is_collapsed(self) -> None:
        assert extract_snippets("line one\n\nneedle\nline two", "needle") == [
            "line one needle line two"
        ]

    def test_caps_number_of_snippets(self) -> None:
        content = " ".join(["needle" + "x" * 100] * 5)
        assert len(extract_snippets(content, "needle")) == 3
        assert extract_snippets("nothing here", "needle") == []
