"""Heading models: table-of-contents entries and heading-delimited sections."""

from __future__ import annotations

from pydantic import BaseModel, Field


class TocItem(BaseModel):
    """One heading in a document's table of contents."""

    id: str
    title: str
    level: int = Field(..., ge=1, le=6)
    line: int | None = None


class HeadingNode(BaseModel):
    """A heading-delimited block of a document."""

    title: str
    level: int = Field(..., ge=1, le=6)
    anchor: str | None = None
    markdown: str | None = None
    children: list["HeadingNode"] = Field(default_factory=list)
