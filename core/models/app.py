# =============================================================================
# core/models/app.py - Catalog App Schemas
# =============================================================================
# These models define the API contract for catalog entries:
# - InputField / InputFieldType: optional guided-input form on an app page
# - CustomField: free-form label/value/icon triples
# - RatingBreakdown: star counts and the aggregate derived from them
# - AppCreate: input for creating an app (defaults applied here)
# - AppUpdate: partial update, only the fields sent are merged
# - AppRecord: an app as stored and returned to clients
# =============================================================================

from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Any

from pydantic import Field, field_validator

from .base import CatalogModel


class InputFieldType(str, Enum):
    """Kinds of input an app's guided-input flow can ask for."""
    TEXT = "text"
    EMAIL = "email"
    PHONE = "phone"
    TEXTAREA = "textarea"
    RADIO = "radio"
    CHECKBOX = "checkbox"
    SELECT = "select"
    OTHER = "other"


class InputField(CatalogModel):
    """
    One entry of an app's input form.

    Example:
        {"title": "Email", "type": "email", "required": true}
    """

    title: str = Field(..., description="Label shown above the input")
    placeholder: str | None = None
    type: InputFieldType = Field(default=InputFieldType.TEXT)
    required: bool = False

    # Only meaningful for radio, checkbox and select
    options: list[str] = Field(default_factory=list)


class CustomField(CatalogModel):
    """Free-form detail row shown on an app page."""
    label: str | None = None
    value: str | None = None
    icon: str | None = None


class RatingBreakdown(CatalogModel):
    """
    Number of ratings received at each star level.

    The aggregate values (total and average) are always derived from these
    counts, never stored independently of them.

    Example:
        >>> RatingBreakdown(five=2, four=1, one=1).average
        3.8
    """

    five: int = Field(default=0, ge=0)
    four: int = Field(default=0, ge=0)
    three: int = Field(default=0, ge=0)
    two: int = Field(default=0, ge=0)
    one: int = Field(default=0, ge=0)

    @property
    def total(self) -> int:
        return self.five + self.four + self.three + self.two + self.one

    @property
    def weighted_sum(self) -> int:
        return 5 * self.five + 4 * self.four + 3 * self.three + 2 * self.two + self.one

    @property
    def average(self) -> float:
        """
        Weighted mean rounded half-up to one decimal; 0 with no ratings.

        The tie is decided on the float quotient, so 23 / 20 (stored as
        1.14999...) gives 1.1 while 13 / 4 (exactly 3.25) gives 3.3.
        """
        total = self.total
        if total == 0:
            return 0.0
        mean = Decimal(self.weighted_sum / total)
        return float(mean.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))

    def aggregate(self) -> dict[str, Any]:
        """
        Column values to persist when this breakdown replaces an app's.

        The breakdown is written wholesale, not added to existing counts.
        """
        return {
            "rating_breakdown": self.to_row(),
            "total_ratings": self.total,
            "rating": self.average,
        }


class AppBase(CatalogModel):
    """Fields a client may set on an app, with their defaults."""

    # Display
    name: str = Field(..., min_length=1)
    category: str | None = None
    short_description: str | None = None
    long_description: str | None = None
    icon: str | None = None
    images: list[str] = Field(default_factory=list)

    # Call to action
    button_text: str = "GET"
    button_link: str | None = None

    # Loading-steps animation, interval in milliseconds
    has_loading_steps: bool = False
    loading_steps: list[str] = Field(default_factory=list)
    step_interval: int = 2000

    # Guided input form
    allow_input: bool = False
    input_fields: list[InputField] = Field(default_factory=list)
    input_button_text: str = "Submit"

    custom_fields: list[CustomField] = Field(default_factory=list)
    users: str = "0"
    sort_order: int = Field(default=0, alias="order")
    is_trending: bool = False


class AppCreate(AppBase):
    """
    Schema for creating an app.

    Only ``name`` is required. A ``ratingBreakdown`` may be supplied and is
    aggregated the same way as POST /apps/{id}/ratings.
    """

    rating_breakdown: RatingBreakdown = Field(default_factory=RatingBreakdown)


class AppUpdate(CatalogModel):
    """
    Partial update of an app.

    Every field is optional; only fields present in the request body are
    written. ``id``, ``createdAt``, ``rating`` and ``totalRatings`` can't be
    set here.
    """

    name: str | None = Field(default=None, min_length=1)
    category: str | None = None
    short_description: str | None = None
    long_description: str | None = None
    icon: str | None = None
    images: list[str] | None = None
    button_text: str | None = None
    button_link: str | None = None
    has_loading_steps: bool | None = None
    loading_steps: list[str] | None = None
    step_interval: int | None = None
    allow_input: bool | None = None
    input_fields: list[InputField] | None = None
    input_button_text: str | None = None
    custom_fields: list[CustomField] | None = None
    users: str | None = None
    sort_order: int | None = Field(default=None, alias="order")
    is_trending: bool | None = None
    rating_breakdown: RatingBreakdown | None = None

    @field_validator(
        "name", "images", "button_text", "has_loading_steps", "loading_steps",
        "step_interval", "allow_input", "input_fields", "input_button_text",
        "custom_fields", "users", "sort_order", "is_trending", "rating_breakdown",
        mode="before",
    )
    @classmethod
    def reject_null(cls, value: Any) -> Any:
        # Omit a field to leave it unchanged; these columns can't be cleared
        if value is None:
            raise ValueError("may be omitted but not null")
        return value

    def changes(self) -> dict[str, Any]:
        """Columns to write: exactly the fields the client sent."""
        changes = self.to_row(exclude_unset=True)
        if self.rating_breakdown is not None:
            changes.update(self.rating_breakdown.aggregate())
        return changes


class AppRecord(AppBase):
    """
    Schema for returning an app to clients.

    Returned by every /apps endpoint that yields an app.
    """

    id: str = Field(..., description="Store-generated app identifier")

    # Aggregate rating, see RatingBreakdown
    rating: float = Field(default=0, ge=0, le=5)
    total_ratings: int = Field(default=0, ge=0)
    rating_breakdown: RatingBreakdown = Field(default_factory=RatingBreakdown)

    created_at: datetime | None = Field(
        default=None,
        description="Set once at insert"
    )
