"""Load markdown documents and numbered topic sections from the docs root."""

from __future__ import annotations

import logging
import math
from datetime import datetime, timezone
from pathlib import Path

from vibedocs.config import VIBEDOCS_DOCS_PATH, VIBEDOCS_WORDS_PER_MINUTE
from vibedocs.exceptions import (
    ContentError,
    DocumentNotFoundError,
    SectionNotFoundError,
    UnreadableDocumentError,
)
from vibedocs.frontmatter import build_front_matter, split_frontmatter
from vibedocs.schemas import DocContent, DocSection, DocumentSlug
from vibedocs.slugs import (
    is_section_dir_name,
    split_section_path,
    strip_order_prefix,
    title_from_slug,
    validate_slug,
)

logger = logging.getLogger(__name__)

MARKDOWN_SUFFIX = ".md"


def resolve_docs_path(docs_path: Path | str | None = None) -> Path:
    """Return the docs root, falling back to ``VIBEDOCS_DOCS_PATH``."""
    if docs_path is None:
        return VIBEDOCS_DOCS_PATH
    return Path(docs_path).expanduser().resolve()


def count_words(content: str) -> int:
    stripped = content.strip()
    if not stripped:
        return 0
    return len(stripped.split())


def calculate_reading_time(
    content: str, words_per_minute: int = VIBEDOCS_WORDS_PER_MINUTE
) -> int:
    """Estimate reading time in whole minutes, rounded up."""
    return math.ceil(count_words(content) / max(words_per_minute, 1))


def document_href(section: str, document: str) -> str:
    return f"/docs/{section}/{document}"


def get_markdown_files(dir_path: Path) -> list[str]:
    """List markdown file names in a directory, sorted by name."""
    if not dir_path.is_dir():
        return []
    return sorted(
        entry.name
        for entry in dir_path.iterdir()
        if entry.is_file() and entry.name.endswith(MARKDOWN_SUFFIX)
    )


def read_markdown_text(file_path: Path) -> str:
    """Read a markdown file as UTF-8 without its byte order mark.

    Raises:
        UnreadableDocumentError: If the file cannot be read or decoded.
    """
    try:
        text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise UnreadableDocumentError(f"Cannot read {file_path}: {exc}") from exc
    return text.lstrip("\ufeff")


def parse_markdown_file(
    file_path: Path,
    *,
    docs_path: Path | str | None = None,
    section: str | None = None,
) -> DocContent | None:
    """Parse a single markdown file.

    Args:
        file_path: Path to the ``.md`` file.
        docs_path: Docs root used to compute ``source_path``.
        section: Slug path of the section holding the file, if any.

    Returns:
        The parsed document, or None when the file does not exist.

    Raises:
        FrontMatterError: If the frontmatter block is malformed.
        UnreadableDocumentError: If the file cannot be read as UTF-8.
    """
    if not file_path.is_file():
        return None

    root = resolve_docs_path(docs_path)
    text = read_markdown_text(file_path)
    data, body = split_frontmatter(text)

    slug = file_path.stem
    try:
        source_path = file_path.resolve().relative_to(root).as_posix()
    except ValueError:
        source_path = file_path.name

    mtime = datetime.fromtimestamp(file_path.stat().st_mtime, tz=timezone.utc)

    return DocContent(
        slug=slug,
        section=section,
        source_path=source_path,
        front_matter=build_front_matter(data, slug),
        content=body,
        reading_time=calculate_reading_time(body),
        word_count=count_words(body),
        last_modified=mtime,
    )


def get_all_doc_sections(
    docs_path: Path | str | None = None,
    *,
    include_unpublished: bool = False,
) -> list[DocSection]:
    """Load every numbered topic directory under the docs root.

    Sections are ordered by directory name, so the two-digit prefix sets the
    reading order.
    """
    root = resolve_docs_path(docs_path)
    if not root.is_dir():
        logger.warning("Docs directory not found: %s", root)
        return []

    sections: list[DocSection] = []
    for entry in sorted(root.iterdir(), key=lambda p: p.name):
        if entry.is_dir() and is_section_dir_name(entry.name):
            sections.append(
                _parse_doc_section(
                    entry,
                    root=root,
                    parent_slug=None,
                    include_unpublished=include_unpublished,
                )
            )
    return sections


def _parse_doc_section(
    section_path: Path,
    *,
    root: Path,
    parent_slug: str | None,
    include_unpublished: bool,
) -> DocSection:
    slug = strip_order_prefix(section_path.name)
    slug_path = f"{parent_slug}/{slug}" if parent_slug else slug

    items: list[DocContent] = []
    subsections: list[DocSection] = []
    for entry in sorted(section_path.iterdir(), key=lambda p: p.name):
        if entry.is_file() and entry.name.endswith(MARKDOWN_SUFFIX):
            try:
                doc = parse_markdown_file(entry, docs_path=root, section=slug_path)
            except ContentError as exc:
                logger.warning("Skipping %s: %s", entry, exc)
                continue
            if doc is None:
                continue
            if not doc.front_matter.published and not include_unpublished:
                continue
            items.append(doc)
        elif entry.is_dir() and not entry.name.startswith("."):
            subsections.append(
                _parse_doc_section(
                    entry,
                    root=root,
                    parent_slug=slug_path,
                    include_unpublished=include_unpublished,
                )
            )

    items.sort(key=lambda doc: (doc.front_matter.order, doc.slug))

    return DocSection(
        title=title_from_slug(slug),
        slug=slug,
        path=section_path.relative_to(root).as_posix(),
        items=items,
        subsections=subsections,
    )


def find_section_dir(section_slug: str, docs_path: Path | str | None = None) -> Path:
    """Locate the directory for a (possibly nested) section slug.

    Raises:
        InvalidSlugError: If any part of the slug is unsafe.
        SectionNotFoundError: If no directory matches.
    """
    root = resolve_docs_path(docs_path)
    parts = split_section_path(section_slug)
    if not root.is_dir():
        raise SectionNotFoundError(f"Section {section_slug!r} not found")

    current = root
    for depth, part in enumerate(parts):
        match = None
        for entry in sorted(current.iterdir(), key=lambda p: p.name):
            if not entry.is_dir():
                continue
            if depth == 0 and not is_section_dir_name(entry.name):
                continue
            if strip_order_prefix(entry.name) == part:
                match = entry
                break
        if match is None:
            raise SectionNotFoundError(f"Section {section_slug!r} not found")
        current = match
    return current


def get_document_by_slug(
    section_slug: str,
    document_slug: str,
    docs_path: Path | str | None = None,
) -> DocContent:
    """Load one document by its route key.

    Raises:
        InvalidSlugError: If either slug is unsafe.
        SectionNotFoundError: If the section does not exist.
        DocumentNotFoundError: If the section has no such document.
        FrontMatterError: If the document's frontmatter is malformed.
    """
    validate_slug(document_slug)
    root = resolve_docs_path(docs_path)
    section_dir = find_section_dir(section_slug, root)
    section = "/".join(split_section_path(section_slug))

    doc = parse_markdown_file(
        section_dir / f"{document_slug}{MARKDOWN_SUFFIX}",
        docs_path=root,
        section=section,
    )
    if doc is None:
        raise DocumentNotFoundError(
            f"Document {document_slug!r} not found in section {section_slug!r}"
        )
    return doc


def get_all_document_slugs(docs_path: Path | str | None = None) -> list[DocumentSlug]:
    """List route keys for every listed document, nested sections included.

    Follows ``get_all_doc_sections``: unpublished documents and files that
    fail to parse have no route.
    """
    slugs: list[DocumentSlug] = []

    def _walk(section: DocSection, section_path: str) -> None:
        for doc in section.items:
            slugs.append(DocumentSlug(section=section_path, document=doc.slug))
        for subsection in section.subsections:
            _walk(subsection, f"{section_path}/{subsection.slug}")

    for section in get_all_doc_sections(docs_path):
        _walk(section, section.slug)
    return slugs
