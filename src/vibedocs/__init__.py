"""vibedocs: read, check and serve a markdown documentation corpus."""

from vibedocs.content import (
    calculate_reading_time,
    get_all_doc_sections,
    get_all_document_slugs,
    get_document_by_slug,
    get_markdown_files,
    parse_markdown_file,
)
from vibedocs.corpus import Corpus, CorpusCache, load_corpus
from vibedocs.exceptions import (
    ContentError,
    CorpusNotFoundError,
    DocumentNotFoundError,
    FrontMatterError,
    InvalidSlugError,
    RenderError,
    SectionNotFoundError,
    UnreadableDocumentError,
    VibedocsError,
)
from vibedocs.headings import build_heading_tree, extract_headings
from vibedocs.lint import lint_corpus
from vibedocs.links import extract_links, resolve_link
from vibedocs.markdown import RenderedDocument, render_markdown
from vibedocs.navigation import build_breadcrumbs, build_sidebar, flatten_sections, get_page_neighbors
from vibedocs.schemas import DocContent, DocFrontMatter, DocSection, LintReport, SearchResult
from vibedocs.search import search_documents
from vibedocs.sitemap import build_sitemap, render_robots_txt, render_sitemap_xml

__all__ = [
    "ContentError",
    "Corpus",
    "CorpusCache",
    "CorpusNotFoundError",
    "DocContent",
    "DocFrontMatter",
    "DocSection",
    "DocumentNotFoundError",
    "FrontMatterError",
    "InvalidSlugError",
    "LintReport",
    "RenderError",
    "RenderedDocument",
    "SearchResult",
    "SectionNotFoundError",
    "UnreadableDocumentError",
    "VibedocsError",
    "build_breadcrumbs",
    "build_heading_tree",
    "build_sidebar",
    "build_sitemap",
    "calculate_reading_time",
    "extract_headings",
    "extract_links",
    "flatten_sections",
    "get_all_doc_sections",
    "get_all_document_slugs",
    "get_document_by_slug",
    "get_markdown_files",
    "get_page_neighbors",
    "lint_corpus",
    "load_corpus",
    "parse_markdown_file",
    "render_markdown",
    "render_robots_txt",
    "render_sitemap_xml",
    "resolve_link",
    "search_documents",
]
