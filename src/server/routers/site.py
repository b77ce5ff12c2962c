"""Health, sitemap and robots endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse, Response

from server.models import HealthResponse
from server.routers.docs import get_corpus
from vibedocs.corpus import Corpus
from vibedocs.sitemap import build_sitemap, render_robots_txt, render_sitemap_xml

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(corpus: Corpus = Depends(get_corpus)) -> HealthResponse:
    return HealthResponse(documents=corpus.document_count, loaded_at=corpus.loaded_at)


@router.get("/sitemap.xml", response_class=Response)
async def sitemap(request: Request, corpus: Corpus = Depends(get_corpus)) -> Response:
    entries = build_sitemap(corpus.sections, request.app.state.site_url)
    return Response(content=render_sitemap_xml(entries), media_type="application/xml")


@router.get("/robots.txt", response_class=PlainTextResponse)
async def robots(request: Request) -> PlainTextResponse:
    return PlainTextResponse(render_robots_txt(request.app.state.site_url))
