# =============================================================================
# app/routers/apps.py - App Catalog Endpoints
# =============================================================================
# CRUD, search and rating aggregation for catalog apps.
# Static paths (/trending, /search/...) are declared before /{app_id}.
# Admin routes carry require_admin, which only checks when enabled.
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Depends, Path, status
from pydantic import BaseModel, Field

from app.auth import require_admin
from app.dependencies import AppServiceDep
from core.models.app import AppCreate, AppRecord, AppUpdate, RatingBreakdown

router = APIRouter()

AppId = Annotated[str, Path(description="App ID")]


# =============================================================================
# Request/Response Models
# =============================================================================

class RatingsRequest(BaseModel):
    """Full star-count snapshot replacing an app's breakdown."""
    ratings: RatingBreakdown = Field(
        ...,
        description="Counts per star level; missing levels count as 0"
    )

    model_config = {
        "json_schema_extra": {
            "example": {"ratings": {"five": 2, "four": 1, "three": 0, "two": 0, "one": 1}}
        }
    }


class MessageResponse(BaseModel):
    """Confirmation for deletes."""
    message: str


# =============================================================================
# Queries
# =============================================================================

@router.get("", response_model=list[AppRecord])
def list_apps(service: AppServiceDep):
    """List all apps, ascending by ``order``."""
    return service.list_apps()


@router.get("/trending", response_model=list[AppRecord])
def list_trending_apps(service: AppServiceDep):
    """List apps flagged as trending, ascending by ``order``."""
    return service.list_trending()


@router.get("/search/{query}", response_model=list[AppRecord])
def search_apps(
    query: Annotated[str, Path(description="Substring to look for")],
    service: AppServiceDep,
):
    """
    Search apps.

    Case-insensitive substring match on name, category or short
    description. Returns an empty list when nothing matches.
    """
    return service.search_apps(query)


@router.get("/{app_id}", response_model=AppRecord)
def get_app(app_id: AppId, service: AppServiceDep):
    """Get one app."""
    return service.get_app(app_id)


# =============================================================================
# Mutations
# =============================================================================

@router.post(
    "",
    response_model=AppRecord,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
def create_app(request: AppCreate, service: AppServiceDep):
    """
    Create an app.

    Only ``name`` is required; every other field gets its default.
    """
    return service.create_app(request)


@router.put("/{app_id}", response_model=AppRecord, dependencies=[Depends(require_admin)])
def update_app(app_id: AppId, request: AppUpdate, service: AppServiceDep):
    """
    Update an app.

    Only fields present in the body are changed.
    """
    return service.update_app(app_id, request)


@router.delete("/{app_id}", response_model=MessageResponse, dependencies=[Depends(require_admin)])
def delete_app(app_id: AppId, service: AppServiceDep):
    """
    Delete an app.

    Reviews of the app are kept.
    """
    service.delete_app(app_id)
    return MessageResponse(message="App deleted successfully")


@router.post("/{app_id}/ratings", response_model=AppRecord, dependencies=[Depends(require_admin)])
def set_ratings(app_id: AppId, request: RatingsRequest, service: AppServiceDep):
    """
    Replace an app's rating breakdown.

    The counts overwrite the stored ones; ``totalRatings`` and ``rating``
    are recomputed from them.
    """
    return service.set_rating_breakdown(app_id, request.ratings)
