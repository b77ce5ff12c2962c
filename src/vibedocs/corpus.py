"""In-memory corpus snapshot with time-based reloading."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterator

from vibedocs.config import VIBEDOCS_CORPUS_TTL_SECONDS
from vibedocs.content import get_all_doc_sections, resolve_docs_path
from vibedocs.exceptions import DocumentNotFoundError, SectionNotFoundError
from vibedocs.schemas import DocContent, DocSection
from vibedocs.search import iter_section_documents

logger = logging.getLogger(__name__)


@dataclass
class Corpus:
    """Sections loaded from one docs root at one point in time."""

    docs_path: Path
    sections: list[DocSection]
    loaded_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def iter_documents(self) -> Iterator[DocContent]:
        return iter_section_documents(self.sections)

    @property
    def document_count(self) -> int:
        return sum(1 for _ in self.iter_documents())

    def find_section(self, slug: str) -> DocSection:
        """Look up a section by slug path (``web-development/frontend``).

        Raises:
            SectionNotFoundError: If no loaded section matches.
        """
        parts = [part for part in slug.strip("/").split("/") if part]
        candidates = self.sections
        section: DocSection | None = None
        for part in parts:
            section = next((item for item in candidates if item.slug == part), None)
            if section is None:
                break
            candidates = section.subsections
        if section is None:
            raise SectionNotFoundError(f"Section {slug!r} not found")
        return section

    def find_document(self, section: str, document: str) -> DocContent:
        """Raises SectionNotFoundError or DocumentNotFoundError."""
        found = self.find_section(section)
        for doc in found.items:
            if doc.slug == document:
                return doc
        raise DocumentNotFoundError(
            f"Document {document!r} not found in section {section!r}"
        )


def load_corpus(
    docs_path: Path | str | None = None, *, include_unpublished: bool = False
) -> Corpus:
    root = resolve_docs_path(docs_path)
    sections = get_all_doc_sections(root, include_unpublished=include_unpublished)
    corpus = Corpus(docs_path=root, sections=sections)
    logger.info(
        "Loaded corpus from %s: %d sections, %d documents",
        root,
        len(sections),
        corpus.document_count,
    )
    return corpus


def is_corpus_fresh(corpus: Corpus | None, ttl_seconds: int) -> bool:
    """Check whether a loaded corpus can still be served.

    Args:
        corpus: The cached snapshot, if any.
        ttl_seconds: Time-to-live in seconds. If <= 0, a loaded corpus is
            fresh indefinitely.
    """
    if corpus is None:
        return False
    if ttl_seconds <= 0:
        return True
    age_seconds = (datetime.now(timezone.utc) - corpus.loaded_at).total_seconds()
    return age_seconds <= ttl_seconds


class CorpusCache:
    """Serve one corpus snapshot, reloading it once it is older than the TTL."""

    def __init__(
        self,
        docs_path: Path | str | None = None,
        *,
        ttl_seconds: int = VIBEDOCS_CORPUS_TTL_SECONDS,
    ) -> None:
        self.docs_path = resolve_docs_path(docs_path)
        self.ttl_seconds = ttl_seconds
        self._corpus: Corpus | None = None
        self._lock = asyncio.Lock()

    async def get(self) -> Corpus:
        if is_corpus_fresh(self._corpus, self.ttl_seconds):
            return self._corpus  # type: ignore[return-value]
        async with self._lock:
            if not is_corpus_fresh(self._corpus, self.ttl_seconds):
                self._corpus = await asyncio.to_thread(load_corpus, self.docs_path)
        return self._corpus  # type: ignore[return-value]

    def invalidate(self) -> None:
        self._corpus = None
