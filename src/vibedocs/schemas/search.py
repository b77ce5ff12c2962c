"""Search result model."""

from __future__ import annotations

from pydantic import BaseModel, Field


class SearchResult(BaseModel):
    """A document matching a search query."""

    title: str
    description: str | None = None
    section: str
    document: str
    href: str
    tags: list[str] = Field(default_factory=list)
    matches: list[str] = Field(default_factory=list)
    score: int = 0
