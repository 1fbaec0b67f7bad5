# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - base.py: shared config (snake_case fields, camelCase JSON)
# - app.py: catalog app schemas and rating aggregation
# - review.py: review schemas
#
# These models define the "contract" between API and clients.
# =============================================================================

from .base import CatalogModel

# -----------------------------------------------------------------------------
# App Models - Catalog entries
# -----------------------------------------------------------------------------
from .app import (
    AppCreate,
    AppRecord,
    AppUpdate,
    CustomField,
    InputField,
    InputFieldType,
    RatingBreakdown,
)

# -----------------------------------------------------------------------------
# Review Models - Ratings and moderation
# -----------------------------------------------------------------------------
from .review import (
    ModerationReview,
    ReviewCreate,
    ReviewRecord,
    ReviewUpdate,
)

__all__ = [
    "CatalogModel",
    # App
    "AppCreate",
    "AppRecord",
    "AppUpdate",
    "CustomField",
    "InputField",
    "InputFieldType",
    "RatingBreakdown",
    # Review
    "ModerationReview",
    "ReviewCreate",
    "ReviewRecord",
    "ReviewUpdate",
]
