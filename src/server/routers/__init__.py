"""API routers."""

from server.routers.docs import router as docs_router
from server.routers.site import router as site_router

__all__ = ["docs_router", "site_router"]
