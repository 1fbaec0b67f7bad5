# =============================================================================
# tests/test_supabase_store.py - Supabase Store Tests
# =============================================================================
# The PostgREST query builder is replaced by a MagicMock whose methods return
# the mock itself, so each test can check which filters were applied.
# =============================================================================

from unittest.mock import MagicMock, patch

import pytest

from app.config import Settings
from lib.catalog_store import APPS, REVIEWS, StoreError
from lib.supabase_client import SupabaseCatalogStore, SupabaseClient, SupabaseClientError

BUILDER_METHODS = ("select", "eq", "order", "limit", "or_", "insert", "update", "delete")


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def supabase_settings():
    return Settings(ADMIN_PASSWORD="pw", REVIEWS_TABLE="app_reviews")


@pytest.fixture
def query():
    """Chainable stand-in for a PostgREST request builder."""
    query = MagicMock()
    for method in BUILDER_METHODS:
        getattr(query, method).return_value = query
    query.execute.return_value = MagicMock(data=[])
    return query


@pytest.fixture
def supabase_client(query):
    client = MagicMock()
    client.table.return_value = query
    return client


@pytest.fixture
def supabase_store(supabase_settings, supabase_client):
    return SupabaseCatalogStore(settings=supabase_settings, client=supabase_client)


# =============================================================================
# Reads
# =============================================================================

class TestFind:
    """Tests for find() and find_by_id()."""

    def test_filters_and_order(self, supabase_store, supabase_client, query):
        query.execute.return_value = MagicMock(data=[{"id": "a"}])

        rows = supabase_store.find(APPS, {"is_trending": True}, order_by="sort_order")

        assert rows == [{"id": "a"}]
        supabase_client.table.assert_called_with("apps")
        query.select.assert_called_with("*")
        query.eq.assert_called_with("is_trending", "true")
        query.order.assert_called_with("sort_order", desc=False)

    def test_descending_with_fields(self, supabase_store, query):
        supabase_store.find(APPS, order_by="created_at", descending=True, fields=("id", "name"))

        query.select.assert_called_with("id, name")
        query.order.assert_called_with("created_at", desc=True)

    def test_configured_table_name(self, supabase_store, supabase_client):
        supabase_store.find(REVIEWS, {"app_id": "app-1"})

        supabase_client.table.assert_called_with("app_reviews")

    def test_none_data_is_empty_list(self, supabase_store, query):
        query.execute.return_value = MagicMock(data=None)

        assert supabase_store.find(APPS) == []

    def test_find_by_id(self, supabase_store, query):
        query.execute.return_value = MagicMock(data=[{"id": "a", "name": "Notes"}])

        assert supabase_store.find_by_id(APPS, "a") == {"id": "a", "name": "Notes"}
        query.eq.assert_called_with("id", "a")
        query.limit.assert_called_with(1)

    def test_find_by_id_missing(self, supabase_store):
        assert supabase_store.find_by_id(APPS, "missing") is None

    def test_unknown_collection(self, supabase_store):
        with pytest.raises(SupabaseClientError):
            supabase_store.find("users")


class TestSearch:
    """Tests for the ilike OR filter."""

    def test_or_filter_over_fields(self, supabase_store, query):
        supabase_store.search(APPS, "photo", ("name", "category"), order_by="sort_order")

        query.or_.assert_called_with('name.ilike."%photo%",category.ilike."%photo%"')
        query.order.assert_called_with("sort_order")

    def test_like_wildcards_escaped(self, supabase_store, query):
        supabase_store.search(APPS, "50%_off", ("name",))

        query.or_.assert_called_with('name.ilike."%50\\\\%\\\\_off%"')

    def test_reserved_characters_quoted(self, supabase_store, query):
        supabase_store.search(APPS, 'Pro, "Max"', ("name",))

        query.or_.assert_called_with('name.ilike."%Pro, \\"Max\\"%"')


# =============================================================================
# Writes
# =============================================================================

class TestWrites:
    """Tests for insert(), update() and delete()."""

    def test_insert_returns_stored_row(self, supabase_store, query):
        query.execute.return_value = MagicMock(data=[{"id": "new", "name": "Notes"}])

        row = supabase_store.insert(APPS, {"name": "Notes"})

        assert row["id"] == "new"
        query.insert.assert_called_with({"name": "Notes"})

    def test_insert_without_data_fails(self, supabase_store):
        with pytest.raises(SupabaseClientError, match="Insert returned no data"):
            supabase_store.insert(APPS, {"name": "Notes"})

    def test_update(self, supabase_store, query):
        query.execute.return_value = MagicMock(data=[{"id": "a", "approved": True}])

        row = supabase_store.update(REVIEWS, "a", {"approved": True})

        assert row == {"id": "a", "approved": True}
        query.update.assert_called_with({"approved": True})
        query.eq.assert_called_with("id", "a")

    def test_update_missing(self, supabase_store):
        assert supabase_store.update(REVIEWS, "missing", {"approved": True}) is None

    def test_delete_missing(self, supabase_store, query):
        assert supabase_store.delete(APPS, "missing") is None
        query.delete.assert_called_once()


# =============================================================================
# Errors and Client
# =============================================================================

class TestErrors:
    def test_query_failure_wrapped(self, supabase_store, query):
        query.execute.side_effect = RuntimeError('invalid input syntax for type uuid: "abc"')

        with pytest.raises(StoreError) as exc_info:
            supabase_store.find_by_id(APPS, "abc")

        assert isinstance(exc_info.value, SupabaseClientError)
        assert "invalid input syntax" in exc_info.value.message
        assert exc_info.value.code == "FETCH_FAILED"

    def test_ping_failure(self, supabase_store, query):
        query.execute.side_effect = ConnectionError("refused")

        with pytest.raises(SupabaseClientError):
            supabase_store.ping()


class TestSupabaseClient:
    """Tests for the lazily created client singleton."""

    @pytest.fixture(autouse=True)
    def reset_singleton(self):
        SupabaseClient.reset()
        yield
        SupabaseClient.reset()

    def test_created_on_first_use(self, supabase_settings):
        with patch("lib.supabase_client.create_client") as create_client:
            store = SupabaseCatalogStore(settings=supabase_settings)
            create_client.assert_not_called()

            store.find(APPS)
            store.find(REVIEWS)

        create_client.assert_called_once_with(
            supabase_settings.SUPABASE_URL,
            supabase_settings.SUPABASE_SERVICE_KEY,
        )

    def test_creation_failure(self, supabase_settings):
        with patch("lib.supabase_client.create_client", side_effect=ValueError("Invalid URL")):
            with pytest.raises(SupabaseClientError, match="Invalid URL"):
                SupabaseClient.get_client(supabase_settings)
