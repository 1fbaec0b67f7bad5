# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the App Catalog API:
# - test_models.py: Pydantic model validation and rating aggregation
# - test_visibility.py: Review visibility rule and tokens
# - test_services.py: AppService / ReviewService on the in-memory store
# - test_supabase_store.py: PostgREST query building with a mocked client
# - test_api.py: HTTP endpoints through TestClient
#
# Run tests with: pytest
# =============================================================================
