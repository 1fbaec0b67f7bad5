# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains framework-agnostic business logic:
# - models/: Pydantic schemas for apps and reviews
# - services/: catalog, rating and review operations over a CatalogStore
#
# Code in this package should NOT import from FastAPI.
# This keeps the logic testable and reusable.
# =============================================================================
