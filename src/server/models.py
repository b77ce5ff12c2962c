"""Pydantic models for the reader API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from vibedocs.config import VIBEDOCS_DEFAULT_AUTHOR, VIBEDOCS_SITE_NAME
from vibedocs.content import document_href
from vibedocs.schemas import Breadcrumb, DocContent, DocSection, PageNeighbors, SearchResult, TocItem


class DocumentSummary(BaseModel):
    """Listing entry for a document.

    Attributes
    ----------
    slug : str
        Document slug (file stem).
    section : str
        Slug path of the containing section.
    title : str
        Title from frontmatter, or derived from the slug.
    href : str
        Reader URL of the document.

    """

    slug: str
    section: str
    title: str
    href: str
    description: str | None = None
    author: str | None = None
    date: str | None = None
    tags: list[str] = Field(default_factory=list)
    order: int = 0
    reading_time: int
    word_count: int
    last_modified: datetime | None = None

    @classmethod
    def from_doc(cls, doc: DocContent) -> DocumentSummary:
        section = doc.section or ""
        front_matter = doc.front_matter
        return cls(
            slug=doc.slug,
            section=section,
            title=front_matter.title,
            href=document_href(section, doc.slug),
            description=front_matter.description,
            author=front_matter.author,
            date=front_matter.date,
            tags=front_matter.tags,
            order=front_matter.order,
            reading_time=doc.reading_time,
            word_count=doc.word_count,
            last_modified=doc.last_modified,
        )


class SectionSummary(BaseModel):
    """A section in the section listing."""

    slug: str
    section: str = Field(..., description="Slug path, e.g. web-development/frontend")
    title: str
    href: str
    document_count: int
    subsections: list["SectionSummary"] = Field(default_factory=list)

    @classmethod
    def from_section(cls, section: DocSection, section_path: str | None = None) -> SectionSummary:
        path = section_path or section.slug
        return cls(
            slug=section.slug,
            section=path,
            title=section.title,
            href=f"/docs/{path}",
            document_count=len(section.items),
            subsections=[
                cls.from_section(child, f"{path}/{child.slug}") for child in section.subsections
            ],
        )


class SectionDetailResponse(BaseModel):
    """Response for ``/api/sections/{section}``."""

    section: SectionSummary
    documents: list[DocumentSummary]
    breadcrumbs: list[Breadcrumb]
    metadata: PageMetadata


class PageMetadata(BaseModel):
    """Title, description and keywords for a reader page."""

    title: str
    description: str
    keywords: list[str] = Field(default_factory=list)
    authors: list[str] = Field(default_factory=list)
    url: str

    @classmethod
    def for_document(cls, doc: DocContent) -> PageMetadata:
        front_matter = doc.front_matter
        section = doc.section or ""
        return cls(
            title=f"{front_matter.title} - {VIBEDOCS_SITE_NAME}",
            description=front_matter.description
            or f"Learn about {front_matter.title} in the {VIBEDOCS_SITE_NAME} documentation.",
            keywords=[VIBEDOCS_SITE_NAME, "documentation", front_matter.title, *front_matter.tags],
            authors=[front_matter.author or VIBEDOCS_DEFAULT_AUTHOR],
            url=document_href(section, doc.slug),
        )

    @classmethod
    def for_section(cls, section: DocSection, section_path: str) -> PageMetadata:
        return cls(
            title=f"{section.title} - {VIBEDOCS_SITE_NAME} Documentation",
            description=f"Explore {section.title} documentation in the {VIBEDOCS_SITE_NAME} guide.",
            keywords=[VIBEDOCS_SITE_NAME, "documentation", section.title],
            url=f"/docs/{section_path}",
        )


class DocumentResponse(BaseModel):
    """Response for ``/api/docs/{section}/{document}``.

    Attributes
    ----------
    document : DocumentSummary
        Metadata of the document.
    content : str
        Markdown body, cropped to ``MAX_DISPLAY_SIZE`` characters.
    html : str
        Rendered HTML fragment with anchored headings.
    toc : list[TocItem]
        Headings of the document; ids match the HTML.
    breadcrumbs : list[Breadcrumb]
        Home > Documentation > section > document.
    neighbors : PageNeighbors
        Previous and next documents in reading order.

    """

    document: DocumentSummary
    metadata: PageMetadata
    content: str
    content_truncated: bool = False
    html: str
    toc: list[TocItem]
    breadcrumbs: list[Breadcrumb]
    neighbors: PageNeighbors


class SearchResponse(BaseModel):
    """Response for ``/api/search``."""

    query: str
    total: int
    results: list[SearchResult]


class ErrorResponse(BaseModel):
    """Error payload.

    Attributes
    ----------
    error : str
        Error message describing what went wrong.

    """

    error: str = Field(..., description="Error message")


class HealthResponse(BaseModel):
    status: str = "ok"
    documents: int
    loaded_at: datetime


SectionDetailResponse.model_rebuild()
