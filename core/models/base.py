# =============================================================================
# core/models/base.py - Shared Model Configuration
# =============================================================================
# Field names match database columns (snake_case); aliases match the JSON
# wire format (camelCase). Either form is accepted on input.
# =============================================================================

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CatalogModel(BaseModel):
    """Base for every record exchanged with clients or the store."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        # Clients send "users": 1200 as often as "users": "1.2K"
        coerce_numbers_to_str=True,
    )

    def to_row(self, **kwargs) -> dict:
        """Serialize to a JSON-safe dict keyed by column name."""
        return self.model_dump(mode="json", **kwargs)
