# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the App Catalog API.
# create_app() wires settings, the store, middleware, routers and handlers;
# the module-level `app` is built from environment settings and a Supabase
# store.
#
# Usage:
#   uvicorn app.main:app --reload
#   app-catalog            (console script, see run())
# =============================================================================

import logging
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.auth import routes as auth_routes
from app.config import Settings, get_settings
from app.exceptions import (
    CatalogException,
    catalog_exception_handler,
    http_exception_handler,
    store_exception_handler,
    unexpected_exception_handler,
    validation_exception_handler,
)
from app.routers import apps, health, pages, reviews
from lib.catalog_store import CatalogStore, StoreError
from lib.supabase_client import SupabaseCatalogStore

logger = logging.getLogger(__name__)

DESCRIPTION = """
## App Catalog API

Backend for an app catalog with ratings and moderated reviews.

### Key Features

- **Catalog**: list, search, create, update and delete apps
- **Ratings**: replace an app's star breakdown; the average is recomputed
- **Reviews**: submissions stay hidden until approved, except to their author
- **Admin**: shared-password check for the admin panel
"""


def _configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=logging.DEBUG if settings.DEBUG else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Logs startup configuration and shutdown. The store connects lazily on
    first query.
    """
    settings: Settings = app.state.settings
    logger.info(f"Starting App Catalog API in {settings.ENVIRONMENT} mode")
    logger.info(f"Store: {type(app.state.store).__name__}")
    if not settings.ADMIN_AUTH_REQUIRED:
        logger.warning("ADMIN_AUTH_REQUIRED is off: admin routes accept requests without a password")

    yield

    logger.info("Shutting down App Catalog API")


def create_app(
    settings: Settings | None = None,
    store: CatalogStore | None = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Configuration; defaults to environment settings
        store: Persistence backend; defaults to Supabase

    Returns:
        FastAPI: Configured application
    """
    settings = settings or get_settings()
    _configure_logging(settings)

    app = FastAPI(
        title="App Catalog API",
        description=DESCRIPTION,
        version=health.VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
        openapi_tags=[
            {"name": "Auth", "description": "Admin password check"},
            {"name": "Apps", "description": "Catalog apps, search and ratings"},
            {"name": "Reviews", "description": "Review submission and moderation"},
            {"name": "Health", "description": "API health and readiness checks"},
        ],
    )
    app.state.settings = settings
    app.state.store = store or SupabaseCatalogStore(settings)

    # =========================================================================
    # Middleware
    # =========================================================================

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # =========================================================================
    # Exception Handlers
    # =========================================================================

    app.add_exception_handler(CatalogException, catalog_exception_handler)
    app.add_exception_handler(StoreError, store_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(ValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unexpected_exception_handler)

    # =========================================================================
    # Routers
    # =========================================================================

    app.include_router(auth_routes.router, prefix="/api/auth", tags=["Auth"])
    app.include_router(health.router, prefix="/api", tags=["Health"])
    app.include_router(apps.router, prefix="/api/apps", tags=["Apps"])
    app.include_router(reviews.router, prefix="/api", tags=["Reviews"])
    app.include_router(pages.router)

    # Frontend assets; mounted last so API routes win
    frontend_dir = Path(settings.FRONTEND_DIR)
    if frontend_dir.is_dir():
        app.mount("/", StaticFiles(directory=frontend_dir), name="frontend")
    else:
        logger.warning(f"Frontend directory not found: {frontend_dir}")

    return app


def run() -> None:
    """Serve the application with uvicorn on API_HOST:API_PORT."""
    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG,
    )


app = create_app()


if __name__ == "__main__":
    run()
