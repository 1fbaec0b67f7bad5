# =============================================================================
# lib/ - Persistence Modules
# =============================================================================
# This package contains the store layer:
# - catalog_store.py: CatalogStore interface, collection names, StoreError
# - supabase_client.py: Supabase-backed CatalogStore and client singleton
#
# Services depend on CatalogStore only, so tests can pass in a fake.
# =============================================================================

from lib.catalog_store import APPS, REVIEWS, CatalogStore, StoreError
from lib.supabase_client import (
    SupabaseCatalogStore,
    SupabaseClient,
    SupabaseClientError,
)

__all__ = [
    # Store interface
    "APPS",
    "REVIEWS",
    "CatalogStore",
    "StoreError",
    # Supabase
    "SupabaseCatalogStore",
    "SupabaseClient",
    "SupabaseClientError",
]
