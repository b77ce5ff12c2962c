"""Structural checks over the markdown corpus."""

from __future__ import annotations

import logging
import re
from collections import Counter
from pathlib import Path
from typing import Iterable

from vibedocs.config import VIBEDOCS_EXTRA_CODE_LANGUAGES, VIBEDOCS_TOC_FILENAME
from vibedocs.content import MARKDOWN_SUFFIX, read_markdown_text, resolve_docs_path
from vibedocs.exceptions import (
    ContentError,
    CorpusNotFoundError,
    FrontMatterError,
    UnreadableDocumentError,
)
from vibedocs.frontmatter import split_frontmatter
from vibedocs.headings import extract_headings
from vibedocs.links import extract_links, resolve_link, split_fragment
from vibedocs.parser import iter_fences, parse_tokens
from vibedocs.schemas import CrossReference, LintIssue, LintReport, LintSeverity

logger = logging.getLogger(__name__)

UNREADABLE_FILE = "unreadable-file"
INVALID_FRONTMATTER = "invalid-frontmatter"
EMPTY_DOCUMENT = "empty-document"
MISSING_H1 = "missing-h1"
EMPTY_H1 = "empty-h1"
BROKEN_LINK = "broken-link"
BROKEN_ANCHOR = "broken-anchor"
UNKNOWN_CODE_LANGUAGE = "unknown-code-language"
TOC_DANGLING_ENTRY = "toc-dangling-entry"
TOC_MISSING_ENTRY = "toc-missing-entry"
TOC_DUPLICATE_ENTRY = "toc-duplicate-entry"

KNOWN_CODE_LANGUAGES = frozenset(
    {
        "bash", "sh", "shell", "zsh", "console", "shellsession", "powershell", "ps1", "bat", "cmd",
        "typescript", "ts", "tsx", "javascript", "js", "jsx", "mjs", "cjs", "json", "jsonc", "json5",
        "dart", "swift", "kotlin", "kt", "kts", "java", "groovy", "gradle", "scala",
        "rust", "rs", "go", "golang", "c", "h", "cpp", "c++", "cc", "hpp", "csharp", "cs", "c#", "fsharp",
        "objectivec", "objc", "objective-c", "python", "py", "ruby", "rb", "php", "perl", "lua", "r",
        "elixir", "erlang", "haskell", "clojure", "julia", "zig", "solidity", "sol",
        "sql", "plsql", "postgresql", "mysql", "graphql", "gql", "prisma",
        "yaml", "yml", "toml", "ini", "xml", "csv", "properties", "env", "dotenv",
        "html", "css", "scss", "sass", "less", "vue", "svelte", "astro",
        "markdown", "md", "mdx", "text", "txt", "plaintext", "plain", "diff", "patch", "log",
        "dockerfile", "docker", "makefile", "make", "cmake", "nginx", "apache",
        "hcl", "terraform", "tf", "protobuf", "proto", "http", "mermaid", "latex", "tex",
        "regex", "wasm", "vim", "nix", "jinja", "handlebars", "cypher", "kusto",
    }
)

_LANGUAGE_RE = re.compile(r"^[A-Za-z0-9_+#.-]+")


def lint_corpus(
    docs_path: Path | str | None = None,
    *,
    toc_filename: str | None = None,
    extra_languages: Iterable[str] = (),
) -> LintReport:
    """Check every markdown file under the docs root.

    Raises:
        CorpusNotFoundError: If the docs root does not exist.
    """
    root = resolve_docs_path(docs_path)
    if not root.is_dir():
        raise CorpusNotFoundError(f"Docs directory not found: {root}")

    languages = KNOWN_CODE_LANGUAGES | VIBEDOCS_EXTRA_CODE_LANGUAGES | {
        language.lower() for language in extra_languages
    }
    linter = _CorpusLinter(root, languages)
    files = list_markdown_files(root)
    for path in files:
        linter.check_file(path)

    toc_path = root / (toc_filename or VIBEDOCS_TOC_FILENAME)
    if toc_path.is_file():
        linter.check_toc(toc_path, files)
    else:
        logger.debug("No table of contents at %s; skipping TOC checks", toc_path)

    report = LintReport(docs_path=str(root), files_checked=len(files), issues=linter.issues)
    logger.info(
        "Linted %d files: %d errors, %d warnings",
        report.files_checked,
        len(report.errors),
        len(report.warnings),
    )
    return report


def list_markdown_files(root: Path) -> list[Path]:
    """Every ``.md`` file under ``root``, skipping hidden directories."""
    return sorted(
        path
        for path in root.rglob(f"*{MARKDOWN_SUFFIX}")
        if path.is_file()
        and not any(part.startswith(".") for part in path.relative_to(root).parts[:-1])
    )


def normalize_code_language(language: str) -> str | None:
    """``ts{1,3}`` -> ``ts``; None for tags with no identifier."""
    match = _LANGUAGE_RE.match(language)
    return match.group(0).lower() if match else None


class _CorpusLinter:
    def __init__(self, root: Path, languages: frozenset[str]) -> None:
        self.root = root
        self.languages = languages
        self.issues: list[LintIssue] = []
        self._anchors: dict[Path, set[str]] = {}
        self._unparsed: set[Path] = set()

    def _add(
        self,
        rule: str,
        severity: LintSeverity,
        path: Path,
        message: str,
        line: int | None = None,
    ) -> None:
        self.issues.append(
            LintIssue(
                rule=rule,
                severity=severity,
                path=self._relative(path),
                line=line,
                message=message,
            )
        )

    def _relative(self, path: Path) -> str:
        try:
            return path.resolve().relative_to(self.root).as_posix()
        except ValueError:
            return str(path)

    def _read_body(self, path: Path) -> tuple[str, int] | None:
        resolved = path.resolve()
        if resolved in self._unparsed:
            return None
        try:
            text = read_markdown_text(path)
            _, body = split_frontmatter(text)
        except UnreadableDocumentError as exc:
            self._unparsed.add(resolved)
            self._add(UNREADABLE_FILE, LintSeverity.ERROR, path, str(exc))
            return None
        except FrontMatterError as exc:
            self._unparsed.add(resolved)
            self._add(INVALID_FRONTMATTER, LintSeverity.ERROR, path, str(exc), line=1)
            return None
        offset = text.count("\n") - body.count("\n")
        return body, offset

    def anchors_for(self, path: Path) -> set[str]:
        resolved = path.resolve()
        if resolved not in self._anchors:
            try:
                _, body = split_frontmatter(read_markdown_text(resolved))
            except ContentError:
                body = ""
            self._anchors[resolved] = {item.id for item in extract_headings(body)}
        return self._anchors[resolved]

    def check_file(self, path: Path) -> None:
        loaded = self._read_body(path)
        if loaded is None:
            return
        body, offset = loaded

        if not body.strip():
            self._add(EMPTY_DOCUMENT, LintSeverity.ERROR, path, "Document has no content")
            return

        self._check_title(path, body, offset)
        for reference in extract_links(body):
            self._check_link(path, reference, offset)
        self._check_fences(path, body, offset)

    def _check_title(self, path: Path, body: str, offset: int) -> None:
        headings = extract_headings(body)
        if not headings:
            self._add(MISSING_H1, LintSeverity.ERROR, path, "Document has no headings")
            return
        first = headings[0]
        line = (first.line or 0) + offset or None
        if first.level != 1:
            self._add(
                MISSING_H1,
                LintSeverity.ERROR,
                path,
                f"First heading is H{first.level}, expected H1: {first.title!r}",
                line=line,
            )
        elif not first.title.strip():
            self._add(EMPTY_H1, LintSeverity.ERROR, path, "Title heading is empty", line=line)

    def _check_link(self, path: Path, reference: CrossReference, offset: int) -> None:
        if reference.kind == "external":
            return
        line = reference.line + offset if reference.line is not None else None
        target = resolve_link(path, reference.href, self.root)
        if target is None:
            self._add(
                BROKEN_LINK,
                LintSeverity.ERROR,
                path,
                f"Link {reference.href!r} points outside the docs root",
                line=line,
            )
            return
        if not target.exists():
            self._add(
                BROKEN_LINK,
                LintSeverity.ERROR,
                path,
                f"Link target does not exist: {reference.href!r}",
                line=line,
            )
            return

        _, fragment = split_fragment(reference.href)
        if fragment and target.is_file() and target.suffix == MARKDOWN_SUFFIX:
            if fragment not in self.anchors_for(target):
                self._add(
                    BROKEN_ANCHOR,
                    LintSeverity.WARNING,
                    path,
                    f"No heading {fragment!r} in {self._relative(target)}",
                    line=line,
                )

    def _check_fences(self, path: Path, body: str, offset: int) -> None:
        for fence in iter_fences(parse_tokens(body)):
            if fence.language is None:
                continue
            language = normalize_code_language(fence.language)
            if language is None or language not in self.languages:
                self._add(
                    UNKNOWN_CODE_LANGUAGE,
                    LintSeverity.WARNING,
                    path,
                    f"Unrecognised code block language {fence.language!r}",
                    line=fence.line + 1 + offset,
                )

    def check_toc(self, toc_path: Path, files: list[Path]) -> None:
        loaded = self._read_body(toc_path)
        if loaded is None:
            return
        body, offset = loaded

        listed: Counter[Path] = Counter()
        for reference in extract_links(body):
            if reference.kind != "relative" or reference.is_image:
                continue
            line = reference.line + offset if reference.line is not None else None
            target = resolve_link(toc_path, reference.href, self.root)
            if target is None or not target.is_file():
                self._add(
                    TOC_DANGLING_ENTRY,
                    LintSeverity.ERROR,
                    toc_path,
                    f"Entry {reference.href!r} does not match a file on disk",
                    line=line,
                )
                continue
            listed[target] += 1
            if listed[target] == 2:
                self._add(
                    TOC_DUPLICATE_ENTRY,
                    LintSeverity.WARNING,
                    toc_path,
                    f"{self._relative(target)} is listed more than once",
                    line=line,
                )

        toc_resolved = toc_path.resolve()
        for path in files:
            resolved = path.resolve()
            if resolved == toc_resolved or resolved in listed:
                continue
            self._add(
                TOC_MISSING_ENTRY,
                LintSeverity.ERROR,
                toc_path,
                f"{self._relative(path)} is not listed in the table of contents",
            )
