# =============================================================================
# core/services/app_service.py - App Catalog Business Logic
# =============================================================================
# Handles app CRUD, search and rating aggregation.
# Separates HTTP concerns from database/business logic.
# =============================================================================

import logging
from datetime import datetime, timezone
from typing import Any

from app.exceptions import AppNotFoundError
from core.models.app import AppCreate, AppRecord, AppUpdate, RatingBreakdown
from lib.catalog_store import APPS, CatalogStore

logger = logging.getLogger(__name__)

# Columns matched by search_apps
SEARCH_FIELDS = ("name", "category", "short_description")

ORDER_COLUMN = "sort_order"


class AppService:
    """
    Service for catalog app operations.

    Provides a clean interface between API routes and the store.
    """

    def __init__(self, store: CatalogStore):
        self.store = store

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def list_apps(self) -> list[AppRecord]:
        """Return every app, ascending by ``order``."""
        rows = self.store.find(APPS, order_by=ORDER_COLUMN)
        return [AppRecord.model_validate(row) for row in rows]

    def list_trending(self) -> list[AppRecord]:
        """Return trending apps, ascending by ``order``."""
        rows = self.store.find(APPS, {"is_trending": True}, order_by=ORDER_COLUMN)
        return [AppRecord.model_validate(row) for row in rows]

    def get_app(self, app_id: str) -> AppRecord:
        """
        Get an app by ID.

        Raises:
            AppNotFoundError: If the id doesn't resolve
        """
        row = self.store.find_by_id(APPS, app_id)
        if not row:
            raise AppNotFoundError(app_id)
        return AppRecord.model_validate(row)

    def search_apps(self, query: str) -> list[AppRecord]:
        """
        Case-insensitive substring search over name, category and short
        description. No match is an empty list.
        """
        rows = self.store.search(APPS, query, SEARCH_FIELDS, order_by=ORDER_COLUMN)
        logger.debug(f"Search {query!r} matched {len(rows)} apps")
        return [AppRecord.model_validate(row) for row in rows]

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def create_app(self, payload: AppCreate) -> AppRecord:
        """
        Create an app with defaults for every field not supplied.

        Returns:
            The stored app, including its generated id
        """
        data: dict[str, Any] = payload.to_row()
        data.update(payload.rating_breakdown.aggregate())
        data["created_at"] = datetime.now(timezone.utc).isoformat()

        row = self.store.insert(APPS, data)
        logger.info(f"Created app: {row['id']} ({payload.name})")
        return AppRecord.model_validate(row)

    def update_app(self, app_id: str, payload: AppUpdate) -> AppRecord:
        """
        Merge the supplied fields into an app; others are left untouched.

        Raises:
            AppNotFoundError: If the id doesn't resolve
        """
        changes = payload.changes()
        if not changes:
            return self.get_app(app_id)

        row = self.store.update(APPS, app_id, changes)
        if not row:
            raise AppNotFoundError(app_id)

        logger.info(f"Updated app: {app_id} ({', '.join(sorted(changes))})")
        return AppRecord.model_validate(row)

    def delete_app(self, app_id: str) -> None:
        """
        Delete an app. Its reviews are left in place.

        Raises:
            AppNotFoundError: If the id doesn't resolve
        """
        if not self.store.delete(APPS, app_id):
            raise AppNotFoundError(app_id)
        logger.info(f"Deleted app: {app_id}")

    def set_rating_breakdown(self, app_id: str, breakdown: RatingBreakdown) -> AppRecord:
        """
        Replace an app's star counts and recompute its aggregate rating.

        The counts overwrite the stored ones; callers send a full snapshot,
        which makes resubmitting the same snapshot idempotent.

        Raises:
            AppNotFoundError: If the id doesn't resolve
        """
        self.get_app(app_id)

        row = self.store.update(APPS, app_id, breakdown.aggregate())
        if not row:
            raise AppNotFoundError(app_id)

        logger.info(
            f"Set ratings for app {app_id}: {breakdown.total} ratings, average {breakdown.average}"
        )
        return AppRecord.model_validate(row)
