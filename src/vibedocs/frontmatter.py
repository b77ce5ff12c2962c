"""Split and interpret YAML frontmatter blocks."""

from __future__ import annotations

import datetime as dt
from typing import Any

import yaml

from vibedocs.exceptions import FrontMatterError
from vibedocs.schemas import DocFrontMatter

_OPEN_FENCE = "---"
_CLOSE_FENCES = ("---", "...")


def split_frontmatter(text: str) -> tuple[dict[str, Any], str]:
    """Separate a leading ``---`` YAML block from the markdown body.

    Returns:
        Tuple of (frontmatter mapping, body). Text without a frontmatter block
        yields an empty mapping and the text unchanged.

    Raises:
        FrontMatterError: If the block is not valid YAML or not a mapping.
    """
    text = text.lstrip("\ufeff")
    lines = text.splitlines(keepends=True)
    if not lines or lines[0].rstrip() != _OPEN_FENCE:
        return {}, text

    for index in range(1, len(lines)):
        if lines[index].rstrip() in _CLOSE_FENCES:
            block = "".join(lines[1:index])
            body = "".join(lines[index + 1 :])
            break
    else:
        # An opening fence with no close is a horizontal rule, not frontmatter.
        return {}, text

    try:
        data = yaml.safe_load(block)
    except yaml.YAMLError as exc:
        raise FrontMatterError(f"Invalid YAML frontmatter: {exc}") from exc

    if data is None:
        return {}, body
    if not isinstance(data, dict):
        raise FrontMatterError(
            f"Frontmatter must be a mapping, got {type(data).__name__}"
        )
    return data, body


def build_front_matter(data: dict[str, Any], slug: str) -> DocFrontMatter:
    """Apply defaults to raw frontmatter values."""
    title = data.get("title")
    tags = data.get("tags") or []
    if isinstance(tags, str):
        tags = [tags]

    order = data.get("order") or 0
    try:
        order = int(order)
    except (TypeError, ValueError) as exc:
        raise FrontMatterError(f"order must be an integer, got {order!r}") from exc

    return DocFrontMatter(
        title=str(title) if title else slug.replace("-", " "),
        description=_as_optional_str(data.get("description")),
        date=_as_date_str(data.get("date")),
        author=_as_optional_str(data.get("author")),
        tags=[str(tag) for tag in tags],
        order=order,
        published=data.get("published") is not False,
    )


def _as_optional_str(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)


def _as_date_str(value: Any) -> str | None:
    if isinstance(value, (dt.date, dt.datetime)):
        return value.isoformat()
    return _as_optional_str(value)
