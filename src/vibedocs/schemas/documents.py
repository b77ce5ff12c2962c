"""Document and directory-section models."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class DocFrontMatter(BaseModel):
    """Metadata block at the top of a markdown document."""

    title: str
    description: str | None = None
    date: str | None = None
    author: str | None = None
    tags: list[str] = Field(default_factory=list)
    order: int = 0
    published: bool = True


class DocContent(BaseModel):
    """A parsed markdown document.

    Attributes:
        slug: File stem of the document (``frontend`` for ``frontend.md``).
        section: Slug path of the containing section, or None for files
            outside a numbered section (``TOC.md``, the glossary).
        source_path: Path relative to the docs root, in POSIX form.
        front_matter: Parsed frontmatter with defaults applied.
        content: Markdown body without the frontmatter block.
        reading_time: Estimated reading time in whole minutes.
        word_count: Whitespace-separated token count of the body.
        last_modified: File modification time (UTC).
    """

    slug: str
    section: str | None = None
    source_path: str
    front_matter: DocFrontMatter
    content: str
    reading_time: int
    word_count: int
    last_modified: datetime | None = None

    @property
    def title(self) -> str:
        return self.front_matter.title


class DocSection(BaseModel):
    """A numbered topic directory and its documents."""

    title: str
    slug: str
    path: str
    description: str | None = None
    items: list[DocContent] = Field(default_factory=list)
    subsections: list["DocSection"] = Field(default_factory=list)


class DocumentSlug(BaseModel):
    """Route key of a document: section slug path plus document slug."""

    section: str
    document: str
