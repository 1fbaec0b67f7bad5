# =============================================================================
# core/models/review.py - Review Schemas
# =============================================================================
# A review is a star rating plus optional text left on one app.
# Reviews start unapproved; only the submitter (identified by the token
# issued at submission) sees them until a moderator approves them.
# =============================================================================

from datetime import datetime

from pydantic import Field

from .base import CatalogModel


class ReviewCreate(CatalogModel):
    """
    Schema for submitting a review.

    ``userId`` and ``approved`` are assigned by the server, so they are not
    part of the input.

    Example:
        {"name": "Ann", "rating": 5, "text": "Works great"}
    """

    name: str = Field(..., min_length=1, description="Reviewer display name")
    rating: int = Field(..., ge=1, le=5)
    text: str | None = None


class ReviewUpdate(CatalogModel):
    """Moderation decision for one review."""
    approved: bool


class ReviewRecord(CatalogModel):
    """A review as stored and returned to clients."""

    id: str
    app_id: str

    name: str
    rating: int = Field(..., ge=1, le=5)
    text: str | None = None

    # Gates public visibility
    approved: bool = False

    # Opaque token issued at submission; correlates, doesn't authenticate
    user_id: str

    created_at: datetime


class ModerationReview(ReviewRecord):
    """Review annotated with its app's name for the moderation listing."""

    # None when the app has been deleted
    app_name: str | None = None
