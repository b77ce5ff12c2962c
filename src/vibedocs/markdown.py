"""Render a markdown document to an HTML fragment."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path

try:
    from bs4 import BeautifulSoup
    from bs4.element import Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML post-processing (pip install beautifulsoup4)."
    ) from exc

from vibedocs.exceptions import RenderError
from vibedocs.headings import extract_headings
from vibedocs.links import classify_href, reader_href, resolve_link, split_fragment
from vibedocs.parser import create_parser
from vibedocs.schemas import TocItem
from vibedocs.slugs import HeadingSlugger

_HEADING_TAGS = ["h1", "h2", "h3", "h4", "h5", "h6"]
_EXTERNAL_HTTP_RE = re.compile(r"^https?://", re.IGNORECASE)


@dataclass
class RenderedDocument:
    """HTML fragment plus the table of contents its heading ids belong to."""

    html: str
    toc: list[TocItem] = field(default_factory=list)


def render_markdown(
    content: str,
    *,
    source_path: Path | None = None,
    docs_root: Path | None = None,
    allow_html: bool = True,
) -> RenderedDocument:
    """Render markdown to HTML with anchored headings and reader links.

    Parameters
    ----------
    content : str
        Markdown body (frontmatter already removed).
    source_path : Path | None
        Absolute path of the source file. With ``docs_root`` it lets relative
        ``.md`` links be rewritten to ``/docs/...`` reader URLs.
    docs_root : Path | None
        Root of the corpus.
    allow_html : bool
        Pass raw HTML in the markdown through. When False it is escaped.
    """
    try:
        html = create_parser(allow_html=allow_html).render(content)
    except Exception as exc:
        raise RenderError(f"Failed to render markdown: {exc}") from exc

    toc = extract_headings(content)
    soup = BeautifulSoup(html, "html.parser")
    _anchor_headings(soup, toc)
    _decorate_links(soup, source_path=source_path, docs_root=docs_root)
    return RenderedDocument(html=str(soup).strip(), toc=toc)


def _anchor_headings(soup: BeautifulSoup, toc: list[TocItem]) -> None:
    headings = soup.find_all(_HEADING_TAGS)
    if len(headings) == len(toc):
        for heading, item in zip(headings, toc):
            heading["id"] = item.id
        return

    # Raw HTML headings make the counts differ; slug from rendered text instead.
    slugger = HeadingSlugger()
    for heading in headings:
        heading["id"] = slugger.slug(heading.get_text(" ", strip=True))


def _decorate_links(
    soup: BeautifulSoup, *, source_path: Path | None, docs_root: Path | None
) -> None:
    for link in soup.find_all("a", href=True):
        href = link["href"]
        if _EXTERNAL_HTTP_RE.match(href):
            link["target"] = "_blank"
            link["rel"] = "noopener noreferrer"
            continue
        if source_path is None or docs_root is None:
            continue
        if classify_href(href) != "relative":
            continue
        _rewrite_relative_link(link, source_path=source_path, docs_root=docs_root)


def _rewrite_relative_link(link: Tag, *, source_path: Path, docs_root: Path) -> None:
    href = link["href"]
    target = resolve_link(source_path, href, docs_root)
    if target is None:
        return
    url = reader_href(target, docs_root)
    if url is None:
        return
    _, fragment = split_fragment(href)
    link["href"] = f"{url}#{fragment}" if fragment else url
