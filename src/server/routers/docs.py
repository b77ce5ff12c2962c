"""Read-only endpoints over the documentation corpus."""

from __future__ import annotations

import asyncio

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from fastapi.responses import JSONResponse

from server.models import (
    DocumentResponse,
    DocumentSummary,
    ErrorResponse,
    PageMetadata,
    SearchResponse,
    SectionDetailResponse,
    SectionSummary,
)
from server.server_config import DEFAULT_SEARCH_LIMIT, MAX_DISPLAY_SIZE, MAX_SEARCH_RESULTS
from vibedocs.corpus import Corpus
from vibedocs.exceptions import (
    CorpusNotFoundError,
    DocumentNotFoundError,
    InvalidSlugError,
    RenderError,
    SectionNotFoundError,
)
from vibedocs.lint import lint_corpus
from vibedocs.markdown import render_markdown
from vibedocs.navigation import build_breadcrumbs, get_page_neighbors
from vibedocs.schemas import LintReport
from vibedocs.search import search_documents
from vibedocs.slugs import split_section_path, validate_slug
from vibedocs.utils.logging_config import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api")

NOT_FOUND_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"description": "Invalid slug"},
    status.HTTP_404_NOT_FOUND: {"description": "Section or document not found"},
}


async def get_corpus(request: Request) -> Corpus:
    return await request.app.state.corpus_cache.get()


def _normalize_section(section: str) -> str:
    try:
        return "/".join(split_section_path(section))
    except InvalidSlugError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc


@router.get("/sections", response_model=list[SectionSummary])
async def list_sections(corpus: Corpus = Depends(get_corpus)) -> list[SectionSummary]:
    """List every numbered section with its nested subsections."""
    return [SectionSummary.from_section(section) for section in corpus.sections]


@router.get(
    "/sections/{section:path}",
    response_model=SectionDetailResponse,
    responses=NOT_FOUND_RESPONSES,
)
async def get_section(section: str, corpus: Corpus = Depends(get_corpus)) -> SectionDetailResponse:
    """Return one section and its documents in reading order."""
    section_path = _normalize_section(section)
    try:
        found = corpus.find_section(section_path)
    except SectionNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc

    return SectionDetailResponse(
        section=SectionSummary.from_section(found, section_path),
        documents=[DocumentSummary.from_doc(doc) for doc in found.items],
        breadcrumbs=build_breadcrumbs(section_path),
        metadata=PageMetadata.for_section(found, section_path),
    )


@router.get(
    "/docs/{section:path}/{document}",
    response_model=DocumentResponse,
    responses={
        **NOT_FOUND_RESPONSES,
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
async def get_document(
    section: str,
    document: str,
    corpus: Corpus = Depends(get_corpus),
) -> DocumentResponse | JSONResponse:
    """Return a document with rendered HTML, its table of contents and navigation.

    **Raises**

    - **HTTPException**: **400** - a slug contains unsafe characters
    - **HTTPException**: **404** - the section or document does not exist
    """
    section_path = _normalize_section(section)
    try:
        validate_slug(document)
        doc = corpus.find_document(section_path, document)
    except InvalidSlugError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except (SectionNotFoundError, DocumentNotFoundError) as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc

    try:
        rendered = render_markdown(
            doc.content,
            source_path=corpus.docs_path / doc.source_path,
            docs_root=corpus.docs_path,
        )
    except RenderError as exc:
        logger.error(
            "Rendering failed",
            extra={"section": section_path, "document": document, "error": str(exc)},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(error=str(exc)).model_dump(),
        )

    content = doc.content
    truncated = len(content) > MAX_DISPLAY_SIZE
    if truncated:
        content = content[:MAX_DISPLAY_SIZE]

    return DocumentResponse(
        document=DocumentSummary.from_doc(doc),
        metadata=PageMetadata.for_document(doc),
        content=content,
        content_truncated=truncated,
        html=rendered.html,
        toc=rendered.toc,
        breadcrumbs=build_breadcrumbs(
            section_path, document, document_title=doc.front_matter.title
        ),
        neighbors=get_page_neighbors(corpus.sections, section_path, document),
    )


@router.get("/search", response_model=SearchResponse)
async def search(
    q: str = Query(..., description="Text to look for"),
    limit: int = Query(DEFAULT_SEARCH_LIMIT, ge=1, le=MAX_SEARCH_RESULTS),
    corpus: Corpus = Depends(get_corpus),
) -> SearchResponse:
    """Search titles, descriptions, tags and bodies (case-insensitive)."""
    results = search_documents(corpus.sections, q)
    logger.info("Search", extra={"query": q, "matches": len(results)})
    return SearchResponse(query=q, total=len(results), results=results[:limit])


@router.get("/lint", response_model=LintReport)
async def lint(corpus: Corpus = Depends(get_corpus)) -> LintReport:
    """Run the structural checks against the served corpus."""
    try:
        return await asyncio.to_thread(lint_corpus, corpus.docs_path)
    except CorpusNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
