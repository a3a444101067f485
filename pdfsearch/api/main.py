"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.

Dependencies: fastapi, pdfsearch.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pdfsearch import __version__
from pdfsearch.api.deps import ServiceCache
from pdfsearch.boundary.db import create_tables
from pdfsearch.configs import get_settings
from pdfsearch.observability import configure_logging

from .routers import chat_router, documents_router, health_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown events.
    """
    logger = logging.getLogger("uvicorn")

    # Startup
    await create_tables()
    logger.info("Pre-warming service cache...")
    cache: ServiceCache = app.state.service_cache
    _ = cache.vector_store
    logger.info(f"Service cache pre-warmed (vector store: {cache.vector_store.name})")

    yield

    # Shutdown
    cache.clear()
    logger.info("Service cache cleared")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    settings = get_settings()
    configure_logging(settings.log_level, with_context=settings.log_context)

    app = FastAPI(
        title="PDF Search RAG API",
        description="Document search and grounded chat over a user's own documents",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.service_cache = ServiceCache()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register all routers with /api/v1 prefix for versioning
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(documents_router, prefix="/api/v1")
    app.include_router(chat_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "pdfsearch.api.main:app",
        host="0.0.0.0",
        port=8000,
    )
