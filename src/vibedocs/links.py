"""Cross-reference extraction and resolution."""

from __future__ import annotations

import re
from pathlib import Path
from urllib.parse import unquote, urlsplit

from markdown_it.token import Token

from vibedocs.content import MARKDOWN_SUFFIX, document_href
from vibedocs.parser import inline_text, parse_tokens
from vibedocs.schemas import CrossReference
from vibedocs.schemas.links import LinkKind, NavRole
from vibedocs.slugs import is_section_dir_name, strip_order_prefix

_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*:")
_ROLE_RE = re.compile(r"^[\s>*_]*(next|previous|prev|up)\s*[*_]*\s*:", re.IGNORECASE)
_ROLE_ALIASES: dict[str, NavRole] = {
    "next": "next",
    "previous": "previous",
    "prev": "previous",
    "up": "up",
}


def classify_href(href: str) -> LinkKind:
    if href.startswith("//") or _SCHEME_RE.match(href):
        return "external"
    if href.startswith("#"):
        return "anchor"
    return "relative"


def split_fragment(href: str) -> tuple[str, str | None]:
    """Split ``guide.md#setup`` into (``guide.md``, ``setup``)."""
    path, sep, fragment = href.partition("#")
    return path, (unquote(fragment) if sep else None)


def navigation_role(line: str) -> NavRole | None:
    """Role of a ``Next:`` / ``Previous:`` / ``Up:`` line, if it is one."""
    match = _ROLE_RE.match(line)
    if not match:
        return None
    return _ROLE_ALIASES[match.group(1).lower()]


def extract_links(markdown: str) -> list[CrossReference]:
    """Every link and image in a markdown body, in source order.

    Links inside code spans and fenced code are not links.
    """
    references: list[CrossReference] = []
    for token in parse_tokens(markdown):
        if token.type == "inline" and token.children:
            references.extend(_links_in_inline(token))
    return references


def _links_in_inline(inline: Token) -> list[CrossReference]:
    source_lines = inline.content.splitlines() or [""]
    first_line = inline.map[0] + 1 if inline.map else None

    references: list[CrossReference] = []
    line_offset = 0
    open_link: dict | None = None
    for child in inline.children or []:
        if child.type in {"softbreak", "hardbreak"}:
            line_offset += 1
            continue

        if child.type == "link_open":
            open_link = {
                "href": str(child.attrGet("href") or ""),
                "text": [],
                "offset": line_offset,
            }
        elif child.type == "link_close" and open_link is not None:
            references.append(
                _make_reference(
                    href=open_link["href"],
                    text="".join(open_link["text"]).strip(),
                    offset=open_link["offset"],
                    source_lines=source_lines,
                    first_line=first_line,
                )
            )
            open_link = None
        elif child.type == "image":
            references.append(
                _make_reference(
                    href=str(child.attrGet("src") or ""),
                    text=inline_text(child),
                    offset=line_offset,
                    source_lines=source_lines,
                    first_line=first_line,
                    is_image=True,
                )
            )
        elif open_link is not None and child.type in {"text", "code_inline"}:
            open_link["text"].append(child.content)
    return references


def _make_reference(
    *,
    href: str,
    text: str,
    offset: int,
    source_lines: list[str],
    first_line: int | None,
    is_image: bool = False,
) -> CrossReference:
    line_text = source_lines[min(offset, len(source_lines) - 1)]
    return CrossReference(
        href=href,
        text=text,
        line=first_line + offset if first_line is not None else None,
        kind=classify_href(href),
        role=None if is_image else navigation_role(line_text),
        is_image=is_image,
    )


def resolve_link(source_file: Path, href: str, docs_root: Path) -> Path | None:
    """On-disk target of a relative or anchor link.

    Returns None for external links and for targets outside the docs root.
    The returned path may not exist.
    """
    kind = classify_href(href)
    if kind == "external":
        return None

    path_part, _ = split_fragment(href)
    path_part = urlsplit(path_part).path
    root = docs_root.resolve()
    if not path_part:
        return source_file.resolve()

    decoded = unquote(path_part)
    if decoded.startswith("/"):
        target = (root / decoded.lstrip("/")).resolve()
    else:
        target = (source_file.resolve().parent / decoded).resolve()

    if target != root and root not in target.parents:
        return None
    return target


def reader_href(target: Path, docs_root: Path) -> str | None:
    """Reader URL (``/docs/<section>/<document>``) for a markdown file, if it has one."""
    if target.suffix != MARKDOWN_SUFFIX:
        return None
    try:
        relative = target.resolve().relative_to(docs_root.resolve())
    except ValueError:
        return None

    directories = relative.parts[:-1]
    if not directories or not is_section_dir_name(directories[0]):
        return None
    section = "/".join(strip_order_prefix(part) for part in directories)
    return document_href(section, target.stem)
