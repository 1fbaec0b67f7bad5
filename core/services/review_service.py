# =============================================================================
# core/services/review_service.py - Review Business Logic
# =============================================================================
# Handles review submission, the public per-app listing (filtered by the
# visibility rule) and moderation.
# =============================================================================

import logging
from datetime import datetime, timezone

from app.exceptions import ReviewNotFoundError
from core.models.review import ModerationReview, ReviewCreate, ReviewRecord
from core.services.visibility import issue_user_token, newest_first, visible
from lib.catalog_store import APPS, REVIEWS, CatalogStore

logger = logging.getLogger(__name__)


class ReviewService:
    """
    Service for review operations.

    The app id on a review is a plain reference: it isn't checked on
    submission and deleting the app doesn't delete its reviews.
    """

    def __init__(self, store: CatalogStore):
        self.store = store

    def submit_review(self, app_id: str, payload: ReviewCreate) -> ReviewRecord:
        """
        Store a new, unapproved review under a freshly issued token.

        Returns:
            The stored review; its ``user_id`` is the token the submitter
            presents later to see the review while it is pending
        """
        data = payload.to_row()
        data.update({
            "app_id": app_id,
            "approved": False,
            "user_id": issue_user_token(),
            "created_at": datetime.now(timezone.utc).isoformat(),
        })

        row = self.store.insert(REVIEWS, data)
        logger.info(f"Review {row['id']} submitted for app {app_id}")
        return ReviewRecord.model_validate(row)

    def list_visible_reviews(
        self,
        app_id: str,
        caller_token: str | None = None,
    ) -> list[ReviewRecord]:
        """
        Reviews of one app the caller may see, newest first.

        Approved reviews plus the caller's own pending ones.
        """
        rows = self.store.find(REVIEWS, {"app_id": app_id}, order_by="created_at", descending=True)
        reviews = (ReviewRecord.model_validate(row) for row in rows)
        return newest_first(review for review in reviews if visible(review, caller_token))

    def list_all_reviews(self) -> list[ModerationReview]:
        """Every review across all apps with its app's name, newest first."""
        rows = self.store.find(REVIEWS, order_by="created_at", descending=True)
        app_names = {
            str(app["id"]): app.get("name")
            for app in self.store.find(APPS, fields=("id", "name"))
        }

        reviews = [
            ModerationReview.model_validate({**row, "app_name": app_names.get(str(row["app_id"]))})
            for row in rows
        ]
        return newest_first(reviews)

    def set_approval(self, review_id: str, approved: bool) -> ReviewRecord:
        """
        Approve or reject a review.

        Raises:
            ReviewNotFoundError: If the id doesn't resolve
        """
        row = self.store.update(REVIEWS, review_id, {"approved": approved})
        if not row:
            raise ReviewNotFoundError(review_id)

        logger.info(f"Review {review_id} {'approved' if approved else 'rejected'}")
        return ReviewRecord.model_validate(row)

    def delete_review(self, review_id: str) -> None:
        """
        Delete a review.

        Raises:
            ReviewNotFoundError: If the id doesn't resolve
        """
        if not self.store.delete(REVIEWS, review_id):
            raise ReviewNotFoundError(review_id)
        logger.info(f"Deleted review: {review_id}")
