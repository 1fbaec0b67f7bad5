# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# The store and settings live on app.state (set by create_app), so a test
# app built around a fake store needs no dependency overrides.
# =============================================================================

from typing import Annotated

from fastapi import Depends, Request

from app.config import Settings
from core.services import AppService, ReviewService
from lib.catalog_store import CatalogStore


def get_store(request: Request) -> CatalogStore:
    """Return the store the application was created with."""
    return request.app.state.store


def get_app_settings(request: Request) -> Settings:
    """Return the settings the application was created with."""
    return request.app.state.settings


StoreDep = Annotated[CatalogStore, Depends(get_store)]
SettingsDep = Annotated[Settings, Depends(get_app_settings)]


def get_app_service(store: StoreDep) -> AppService:
    return AppService(store)


def get_review_service(store: StoreDep) -> ReviewService:
    return ReviewService(store)


# Type aliases for dependency injection
AppServiceDep = Annotated[AppService, Depends(get_app_service)]
ReviewServiceDep = Annotated[ReviewService, Depends(get_review_service)]
