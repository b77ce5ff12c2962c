"""Linear-scan search over a loaded corpus."""

from __future__ import annotations

import re
from typing import Iterator

from vibedocs.content import document_href
from vibedocs.schemas import DocContent, DocSection, SearchResult

# Tiers: one title hit outranks any mix of description, tag and body hits.
TITLE_WEIGHT = 100
DESCRIPTION_WEIGHT = 10
TAG_WEIGHT = 10
CONTENT_WEIGHT = 1

MAX_SNIPPETS = 3
SNIPPET_CONTEXT_CHARS = 40


def iter_section_documents(sections: list[DocSection]) -> Iterator[DocContent]:
    """Documents of every section and nested subsection, in reading order."""
    for section in sections:
        yield from section.items
        yield from iter_section_documents(section.subsections)


def search_documents(
    sections: list[DocSection],
    query: str,
    *,
    limit: int | None = None,
) -> list[SearchResult]:
    """Find documents whose title, description, tags or body contain ``query``.

    Matching is case-insensitive substring matching. Results are ranked by
    where the term matched (title first, body last); equal scores keep reading
    order.
    """
    term = query.strip().lower()
    if not term:
        return []

    results: list[SearchResult] = []
    for doc in iter_section_documents(sections):
        score = _score(doc, term)
        if not score:
            continue
        section = doc.section or ""
        results.append(
            SearchResult(
                title=doc.front_matter.title,
                description=doc.front_matter.description,
                section=section,
                document=doc.slug,
                href=document_href(section, doc.slug),
                tags=doc.front_matter.tags,
                matches=extract_snippets(doc.content, term),
                score=score,
            )
        )

    results.sort(key=lambda result: -result.score)
    if limit is not None:
        return results[: max(limit, 0)]
    return results


def _score(doc: DocContent, term: str) -> int:
    front_matter = doc.front_matter
    score = 0
    if term in front_matter.title.lower():
        score += TITLE_WEIGHT
    if front_matter.description and term in front_matter.description.lower():
        score += DESCRIPTION_WEIGHT
    if any(term in tag.lower() for tag in front_matter.tags):
        score += TAG_WEIGHT
    if term in doc.content.lower():
        score += CONTENT_WEIGHT
    return score


def extract_snippets(
    content: str,
    term: str,
    *,
    max_snippets: int = MAX_SNIPPETS,
    context: int = SNIPPET_CONTEXT_CHARS,
) -> list[str]:
    """Short excerpts of ``content`` around the first few occurrences of ``term``."""
    lowered = content.lower()
    term = term.lower()
    snippets: list[str] = []
    start = 0
    while len(snippets) < max_snippets:
        position = lowered.find(term, start)
        if position == -1:
            break
        left = max(position - context, 0)
        right = min(position + len(term) + context, len(content))
        excerpt = re.sub(r"\s+", " ", content[left:right]).strip()
        if left > 0:
            excerpt = "..." + excerpt
        if right < len(content):
            excerpt = excerpt + "..."
        snippets.append(excerpt)
        start = right
    return snippets
