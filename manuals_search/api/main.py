# manuals_search/api/main.py
"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import Config
from .dependencies import get_config_sync, cleanup_dependencies
from .errors import register_error_handlers
from .routes import manuals, pages
from .schemas import HealthResponse

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan manager."""
    yield
    await cleanup_dependencies()


def create_app(config: Optional[Config] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        config: Settings for CORS and debug mode. Loaded from
            configs/settings.yaml and the environment when omitted.

    Returns:
        Configured FastAPI application instance with routes, middleware, and error handlers.
    """
    config = config or get_config_sync()

    app = FastAPI(
        title="Manuals Search API",
        description="Lists PDF service manuals stored in a Google Drive folder tree",
        version=__version__,
        lifespan=lifespan,
        debug=config.api.debug,
    )

    register_error_handlers(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.api.cors_origins,
        allow_credentials=True,
        allow_methods=config.api.cors_methods,
        allow_headers=config.api.cors_headers,
    )

    app.include_router(manuals.router, prefix="/api/manuals", tags=["manuals"])
    app.include_router(pages.router, tags=["pages"])

    @app.get("/health", tags=["health"], response_model=HealthResponse)
    async def health_check():
        """Health check endpoint."""
        return HealthResponse(status="healthy", version=__version__)

    @app.get("/api", tags=["root"])
    async def api_root():
        """API root endpoint."""
        return {
            "name": "Manuals Search API",
            "version": __version__,
            "endpoints": {
                "manuals": "/api/manuals",
                "search_page": "/",
                "health": "/health",
            },
        }

    return app


# Default app instance for uvicorn
app = create_app()
