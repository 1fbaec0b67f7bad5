# =============================================================================
# app/routers/reviews.py - Review Endpoints
# =============================================================================
# Public:
# - GET  /apps/{id}/reviews   visible reviews (x-user-id header optional)
# - POST /apps/{id}/reviews   submit, returns the review with its new token
# Moderation:
# - GET    /reviews           every review with its app's name
# - PUT    /reviews/{id}      approve / reject
# - DELETE /reviews/{id}
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Depends, Header, Path, status

from app.auth import require_admin
from app.dependencies import ReviewServiceDep
from app.routers.apps import MessageResponse
from core.models.review import ModerationReview, ReviewCreate, ReviewRecord, ReviewUpdate

router = APIRouter()

USER_TOKEN_HEADER = "x-user-id"

AppId = Annotated[str, Path(description="App ID")]
ReviewId = Annotated[str, Path(description="Review ID")]


# =============================================================================
# Public Endpoints
# =============================================================================

@router.get("/apps/{app_id}/reviews", response_model=list[ReviewRecord])
def list_app_reviews(
    app_id: AppId,
    service: ReviewServiceDep,
    x_user_id: Annotated[str | None, Header(alias=USER_TOKEN_HEADER)] = None,
):
    """
    List the reviews of an app visible to the caller, newest first.

    Approved reviews are always included. Pending reviews are included only
    when the ``x-user-id`` header carries the token returned at submission.
    """
    return service.list_visible_reviews(app_id, x_user_id)


@router.post(
    "/apps/{app_id}/reviews",
    response_model=ReviewRecord,
    status_code=status.HTTP_201_CREATED,
)
def submit_review(app_id: AppId, request: ReviewCreate, service: ReviewServiceDep):
    """
    Submit a review.

    The review is stored unapproved. The response's ``userId`` is a new
    token; send it back as ``x-user-id`` to see the pending review.
    """
    return service.submit_review(app_id, request)


# =============================================================================
# Moderation Endpoints
# =============================================================================

@router.get(
    "/reviews",
    response_model=list[ModerationReview],
    dependencies=[Depends(require_admin)],
)
def list_all_reviews(service: ReviewServiceDep):
    """List every review across all apps, newest first, approved or not."""
    return service.list_all_reviews()


@router.put("/reviews/{review_id}", response_model=ReviewRecord, dependencies=[Depends(require_admin)])
def moderate_review(review_id: ReviewId, request: ReviewUpdate, service: ReviewServiceDep):
    """Approve (``approved: true``) or reject (``approved: false``) a review."""
    return service.set_approval(review_id, request.approved)


@router.delete("/reviews/{review_id}", response_model=MessageResponse, dependencies=[Depends(require_admin)])
def delete_review(review_id: ReviewId, service: ReviewServiceDep):
    """Delete a review."""
    service.delete_review(review_id)
    return MessageResponse(message="Review deleted successfully")
