"""Shared schemas for vibedocs."""

from vibedocs.schemas.documents import DocContent, DocFrontMatter, DocSection, DocumentSlug
from vibedocs.schemas.headings import HeadingNode, TocItem
from vibedocs.schemas.links import CrossReference
from vibedocs.schemas.lint import LintIssue, LintReport, LintSeverity
from vibedocs.schemas.navigation import Breadcrumb, NavItem, PageNeighbors
from vibedocs.schemas.search import SearchResult
from vibedocs.schemas.sitemap import SitemapEntry

__all__ = [
    "Breadcrumb",
    "CrossReference",
    "DocContent",
    "DocFrontMatter",
    "DocSection",
    "DocumentSlug",
    "HeadingNode",
    "LintIssue",
    "LintReport",
    "LintSeverity",
    "NavItem",
    "PageNeighbors",
    "SearchResult",
    "SitemapEntry",
    "TocItem",
]
