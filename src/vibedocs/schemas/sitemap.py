"""Sitemap entry model."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

ChangeFrequency = Literal["always", "hourly", "daily", "weekly", "monthly", "yearly", "never"]


class SitemapEntry(BaseModel):
    """One ``<url>`` element of a sitemap."""

    url: str
    last_modified: datetime | None = None
    change_frequency: ChangeFrequency = "weekly"
    priority: float = Field(default=0.5, ge=0.0, le=1.0)
