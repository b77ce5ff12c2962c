"""Reader navigation models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class NavItem(BaseModel):
    """An entry in the reading order or the sidebar tree."""

    title: str
    href: str | None = None
    section: str | None = None
    document: str | None = None
    items: list["NavItem"] = Field(default_factory=list)


class Breadcrumb(BaseModel):
    """One step of a breadcrumb trail; the last step has no href."""

    title: str
    href: str | None = None


class PageNeighbors(BaseModel):
    """Previous and next documents in reading order."""

    previous: NavItem | None = None
    next: NavItem | None = None
