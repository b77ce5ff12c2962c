"""Command-line interface for vibedocs."""

from __future__ import annotations

import argparse
import json
import os
import sys
from typing import Sequence

from vibedocs.config import VIBEDOCS_SITE_URL, VIBEDOCS_TOC_FILENAME
from vibedocs.content import get_all_doc_sections, get_document_by_slug, resolve_docs_path
from vibedocs.exceptions import VibedocsError
from vibedocs.headings import build_heading_tree, count_sections, render_heading_tree
from vibedocs.lint import lint_corpus
from vibedocs.markdown import render_markdown
from vibedocs.schemas import DocContent, DocSection
from vibedocs.search import search_documents
from vibedocs.sitemap import build_sitemap, render_sitemap_xml
from vibedocs.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FINDINGS = 1
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vibedocs", description="Read, check and serve a markdown documentation corpus."
    )
    parser.add_argument("--log-level", default=None, help="Override VIBEDOCS_LOG_LEVEL")
    parser.add_argument("--log-format", choices=["text", "json"], default=None)
    subparsers = parser.add_subparsers(dest="command", required=True)

    def add_docs_option(sub: argparse.ArgumentParser) -> None:
        sub.add_argument("--docs", default=None, help="Docs root (default: VIBEDOCS_DOCS_PATH)")

    lint = subparsers.add_parser("lint", help="Check links, titles, code fences and the TOC")
    add_docs_option(lint)
    lint.add_argument("--toc", default=VIBEDOCS_TOC_FILENAME, help="Table of contents file name")
    lint.add_argument("--format", choices=["text", "json"], default="text")
    lint.add_argument("--strict", action="store_true", help="Fail on warnings too")
    lint.add_argument(
        "--language",
        action="append",
        default=[],
        help="Extra code fence language to accept (repeatable)",
    )

    sections = subparsers.add_parser("sections", help="Print the section tree")
    add_docs_option(sections)
    sections.add_argument("--all", action="store_true", help="Include unpublished documents")

    show = subparsers.add_parser("show", help="Print one document's metadata and outline")
    add_docs_option(show)
    show.add_argument("section")
    show.add_argument("document")
    show.add_argument("--html", action="store_true", help="Print rendered HTML instead")

    search = subparsers.add_parser("search", help="Search titles, descriptions, tags and bodies")
    add_docs_option(search)
    search.add_argument("query")
    search.add_argument("--limit", type=int, default=None)

    sitemap = subparsers.add_parser("sitemap", help="Print sitemap XML")
    add_docs_option(sitemap)
    sitemap.add_argument("--site-url", default=VIBEDOCS_SITE_URL)

    serve = subparsers.add_parser("serve", help="Run the HTTP reader")
    add_docs_option(serve)
    serve.add_argument("--host", default=os.getenv("HOST", "127.0.0.1"))
    serve.add_argument("--port", type=int, default=int(os.getenv("PORT", "8000")))
    serve.add_argument("--reload", action="store_true")

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging_kwargs = {}
    if args.log_level:
        logging_kwargs["level"] = args.log_level.upper()
    if args.log_format:
        logging_kwargs["fmt"] = args.log_format
    configure_logging(**logging_kwargs)

    handlers = {
        "lint": _cmd_lint,
        "sections": _cmd_sections,
        "show": _cmd_show,
        "search": _cmd_search,
        "sitemap": _cmd_sitemap,
        "serve": _cmd_serve,
    }
    try:
        return handlers[args.command](args)
    except VibedocsError as exc:
        logger.error("Command failed", extra={"command": args.command, "error": str(exc)})
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_ERROR


def _cmd_lint(args: argparse.Namespace) -> int:
    report = lint_corpus(args.docs, toc_filename=args.toc, extra_languages=args.language)
    if args.format == "json":
        print(report.model_dump_json(indent=2))
    else:
        for issue in report.issues:
            print(issue.format())
        print(
            f"{report.files_checked} files checked: "
            f"{len(report.errors)} errors, {len(report.warnings)} warnings"
        )

    if report.errors or (args.strict and report.warnings):
        return EXIT_FINDINGS
    return EXIT_OK


def _cmd_sections(args: argparse.Namespace) -> int:
    sections = get_all_doc_sections(args.docs, include_unpublished=args.all)
    for section in sections:
        _print_section(section, indent=0)
    return EXIT_OK


def _print_section(section: DocSection, indent: int) -> None:
    pad = "  " * indent
    print(f"{pad}{section.title} ({section.path})")
    for doc in section.items:
        draft = "" if doc.front_matter.published else " (unpublished)"
        print(f"{pad}  - {doc.front_matter.title} [{doc.slug}]{draft}")
    for subsection in section.subsections:
        _print_section(subsection, indent + 1)


def _cmd_show(args: argparse.Namespace) -> int:
    root = resolve_docs_path(args.docs)
    doc = get_document_by_slug(args.section, args.document, root)
    if args.html:
        rendered = render_markdown(
            doc.content, source_path=root / doc.source_path, docs_root=root
        )
        print(rendered.html)
        return EXIT_OK
    print(format_summary(doc))
    return EXIT_OK


def format_summary(doc: DocContent) -> str:
    front_matter = doc.front_matter
    tree = build_heading_tree(doc.content)
    lines = [f"Title: {front_matter.title}"]
    if front_matter.description:
        lines.append(f"Description: {front_matter.description}")
    if doc.section:
        lines.append(f"Section: {doc.section}")
    lines.append(f"Source: {doc.source_path}")
    if front_matter.author:
        lines.append(f"Author: {front_matter.author}")
    if front_matter.date:
        lines.append(f"Date: {front_matter.date}")
    if front_matter.tags:
        lines.append(f"Tags: {', '.join(front_matter.tags)}")
    lines.append(f"Words: {doc.word_count}")
    lines.append(f"Reading time: {doc.reading_time} min")
    lines.append(f"Sections: {count_sections(tree)}")
    outline = render_heading_tree(tree)
    if outline:
        lines.append("")
        lines.append(outline)
    return "\n".join(lines)


def _cmd_search(args: argparse.Namespace) -> int:
    sections = get_all_doc_sections(args.docs)
    results = search_documents(sections, args.query, limit=args.limit)
    for result in results:
        print(f"{result.href}  {result.title}")
        for match in result.matches:
            print(f"    {match}")
    if not results:
        print(f"No documents match {args.query!r}")
    return EXIT_OK


def _cmd_sitemap(args: argparse.Namespace) -> int:
    sections = get_all_doc_sections(args.docs)
    print(render_sitemap_xml(build_sitemap(sections, args.site_url)), end="")
    return EXIT_OK


def _cmd_serve(args: argparse.Namespace) -> int:
    import uvicorn

    logger.info("Starting vibedocs server", extra={"host": args.host, "port": args.port})
    if args.reload:
        # The reloader imports the app by name, so the docs root travels by env var.
        if args.docs:
            os.environ["VIBEDOCS_DOCS_PATH"] = str(resolve_docs_path(args.docs))
        uvicorn.run("server.main:app", host=args.host, port=args.port, reload=True, log_config=None)
        return EXIT_OK

    from server.main import create_app

    uvicorn.run(create_app(args.docs), host=args.host, port=args.port, log_config=None)
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
