"""Shared markdown-it parser and token helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from markdown_it import MarkdownIt
from markdown_it.token import Token

_INLINE_TEXT_TYPES = frozenset({"text", "code_inline", "html_inline"})


def create_parser(*, allow_html: bool = True) -> MarkdownIt:
    """CommonMark plus GitHub-style tables and strikethrough."""
    return MarkdownIt("commonmark", {"html": allow_html}).enable(["table", "strikethrough"])


_DEFAULT_PARSER = create_parser()


def parse_tokens(markdown: str) -> list[Token]:
    return _DEFAULT_PARSER.parse(markdown)


def inline_text(token: Token) -> str:
    """Plain text of an inline token, markup stripped."""
    if not token.children:
        return token.content.strip()
    parts: list[str] = []
    for child in token.children:
        if child.type in _INLINE_TEXT_TYPES:
            parts.append(child.content)
        elif child.type in {"softbreak", "hardbreak"}:
            parts.append(" ")
        elif child.type == "image":
            parts.append(inline_text(child))
    return "".join(parts).strip()


@dataclass(frozen=True)
class HeadingToken:
    """A heading located in the source."""

    level: int
    text: str
    start_line: int
    end_line: int


def iter_headings(tokens: list[Token]) -> Iterator[HeadingToken]:
    for index, token in enumerate(tokens):
        if token.type != "heading_open":
            continue
        inline = tokens[index + 1] if index + 1 < len(tokens) else None
        text = inline_text(inline) if inline is not None and inline.type == "inline" else ""
        start, end = token.map or (0, 0)
        yield HeadingToken(level=int(token.tag[1]), text=text, start_line=start, end_line=end)


@dataclass(frozen=True)
class FenceToken:
    """A fenced code block and its declared language, if any."""

    language: str | None
    info: str
    line: int


def iter_fences(tokens: list[Token]) -> Iterator[FenceToken]:
    for token in tokens:
        if token.type != "fence":
            continue
        info = token.info.strip()
        language = info.split()[0] if info else None
        line = token.map[0] if token.map else 0
        yield FenceToken(language=language, info=info, line=line)
