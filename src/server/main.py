"""FastAPI application for the documentation reader."""

from __future__ import annotations

import time
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from server.routers import docs_router, site_router
from server.server_config import APP_DESCRIPTION, APP_TITLE, APP_VERSION
from vibedocs.config import VIBEDOCS_CORPUS_TTL_SECONDS, VIBEDOCS_SITE_URL
from vibedocs.corpus import CorpusCache
from vibedocs.utils.logging_config import get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Load the corpus once at startup so the first request is not slow."""
    corpus = await app.state.corpus_cache.get()
    logger.info(
        "Corpus ready",
        extra={"docs_path": str(corpus.docs_path), "sections": len(corpus.sections)},
    )
    yield


def create_app(
    docs_path: Path | str | None = None,
    *,
    ttl_seconds: int = VIBEDOCS_CORPUS_TTL_SECONDS,
    site_url: str = VIBEDOCS_SITE_URL,
) -> FastAPI:
    app = FastAPI(
        title=APP_TITLE,
        description=APP_DESCRIPTION,
        version=APP_VERSION,
        lifespan=lifespan,
    )
    app.state.corpus_cache = CorpusCache(docs_path, ttl_seconds=ttl_seconds)
    app.state.site_url = site_url.rstrip("/")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "Request completed",
            extra={
                "method": request.method,
                "path": request.url.path,
                "status": response.status_code,
                "duration_ms": round(duration_ms, 2),
            },
        )
        return response

    app.include_router(site_router)
    app.include_router(docs_router)
    return app


app = create_app()
