"""Slug helpers for section directories, documents and headings."""

from __future__ import annotations

import re

from vibedocs.exceptions import InvalidSlugError

_ORDER_PREFIX_RE = re.compile(r"^\d{2}-")
_HEADING_STRIP_RE = re.compile(r"[^a-z0-9\s-]")
_SAFE_SLUG_RE = re.compile(r"^[A-Za-z0-9._-]+$")


def is_section_dir_name(name: str) -> bool:
    """Return True for numbered topic directories such as ``04-web-development``."""
    return bool(_ORDER_PREFIX_RE.match(name))


def strip_order_prefix(name: str) -> str:
    return _ORDER_PREFIX_RE.sub("", name, count=1)


def title_from_slug(slug: str) -> str:
    """Turn ``web-development`` into ``Web Development``."""
    words = slug.replace("-", " ").split()
    return " ".join(word[:1].upper() + word[1:] for word in words)


def slugify_heading(text: str) -> str:
    """Slug a heading the way the reader anchors it."""
    slug = _HEADING_STRIP_RE.sub("", text.strip().lower())
    slug = re.sub(r"\s+", "-", slug)
    slug = re.sub(r"-+", "-", slug)
    return slug.strip("-")


class HeadingSlugger:
    """Hand out unique heading ids within one document.

    The first ``Setup`` heading gets ``setup``, the second ``setup-1`` and so on.
    """

    def __init__(self) -> None:
        self._seen: dict[str, int] = {}

    def slug(self, text: str) -> str:
        base = slugify_heading(text)
        count = self._seen.get(base)
        if count is None:
            self._seen[base] = 0
            return base
        count += 1
        while f"{base}-{count}" in self._seen:
            count += 1
        self._seen[base] = count
        candidate = f"{base}-{count}"
        self._seen[candidate] = 0
        return candidate


def validate_slug(value: str) -> str:
    """Reject slugs that are empty or could walk outside the docs root."""
    if not value or value in {".", ".."} or not _SAFE_SLUG_RE.match(value):
        raise InvalidSlugError(f"Invalid slug: {value!r}")
    return value


def split_section_path(section: str) -> list[str]:
    """Split a nested section slug (``web-development/frontend``) and validate each part."""
    parts = section.strip("/").split("/")
    if not parts or parts == [""]:
        raise InvalidSlugError(f"Invalid section slug: {section!r}")
    return [validate_slug(part) for part in parts]
