"""Cross-reference model."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

LinkKind = Literal["relative", "anchor", "external"]
NavRole = Literal["next", "previous", "up"]


class CrossReference(BaseModel):
    """A link found in a markdown document."""

    href: str
    text: str = ""
    line: int | None = None
    kind: LinkKind
    role: NavRole | None = None
    is_image: bool = False
