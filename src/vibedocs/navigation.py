"""Reading order, previous/next links, breadcrumbs and the sidebar tree."""

from __future__ import annotations

from vibedocs.content import document_href
from vibedocs.schemas import Breadcrumb, DocSection, NavItem, PageNeighbors
from vibedocs.slugs import title_from_slug

HOME_HREF = "/"
DOCS_HREF = "/docs"


def flatten_sections(sections: list[DocSection]) -> list[NavItem]:
    """Every document in reading order.

    A section's own documents come first, then its subsections depth first.
    """
    result: list[NavItem] = []

    def _walk(section: DocSection, section_path: str) -> None:
        for doc in section.items:
            result.append(
                NavItem(
                    title=doc.front_matter.title,
                    href=document_href(section_path, doc.slug),
                    section=section_path,
                    document=doc.slug,
                )
            )
        for subsection in section.subsections:
            _walk(subsection, f"{section_path}/{subsection.slug}")

    for section in sections:
        _walk(section, section.slug)
    return result


def get_page_neighbors(
    sections: list[DocSection], section: str, document: str
) -> PageNeighbors:
    """Previous and next documents around ``section/document``.

    Both are None when the document is not part of the reading order.
    """
    items = flatten_sections(sections)
    index = next(
        (
            position
            for position, item in enumerate(items)
            if item.section == section and item.document == document
        ),
        None,
    )
    if index is None:
        return PageNeighbors()
    return PageNeighbors(
        previous=items[index - 1] if index > 0 else None,
        next=items[index + 1] if index < len(items) - 1 else None,
    )


def build_breadcrumbs(
    section: str,
    document: str | None = None,
    *,
    document_title: str | None = None,
) -> list[Breadcrumb]:
    """Home > Documentation > section levels > document."""
    crumbs = [
        Breadcrumb(title="Home", href=HOME_HREF),
        Breadcrumb(title="Documentation", href=DOCS_HREF),
    ]
    parts = [part for part in section.strip("/").split("/") if part]
    for depth, part in enumerate(parts):
        href = f"{DOCS_HREF}/{'/'.join(parts[: depth + 1])}"
        is_last = depth == len(parts) - 1 and not document
        crumbs.append(Breadcrumb(title=title_from_slug(part), href=None if is_last else href))
    if document:
        crumbs.append(Breadcrumb(title=document_title or title_from_slug(document)))
    return crumbs


def build_sidebar(sections: list[DocSection]) -> list[NavItem]:
    """Nested navigation tree: one node per section with its documents and subsections."""

    def _node(section: DocSection, section_path: str) -> NavItem:
        children = [
            NavItem(
                title=doc.front_matter.title,
                href=document_href(section_path, doc.slug),
                section=section_path,
                document=doc.slug,
            )
            for doc in section.items
        ]
        children.extend(
            _node(subsection, f"{section_path}/{subsection.slug}")
            for subsection in section.subsections
        )
        return NavItem(
            title=section.title,
            href=f"{DOCS_HREF}/{section_path}",
            section=section_path,
            items=children,
        )

    return [_node(section, section.slug) for section in sections]
