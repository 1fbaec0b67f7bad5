# =============================================================================
# lib/supabase_client.py - Supabase Client Wrapper
# =============================================================================
# This module provides the Supabase implementation of CatalogStore.
# It implements the singleton pattern to reuse a single client connection
# and translates the store's document-style calls into PostgREST queries:
# - equality filters -> .eq()
# - substring search -> .or_() over ilike filters
# - sort -> .order()
#
# Every PostgREST failure is re-raised as SupabaseClientError so the API can
# report it as a 500 with the underlying message.
#
# Usage:
#   from lib.supabase_client import SupabaseCatalogStore
#   store = SupabaseCatalogStore(settings)
#   apps = store.find(APPS, order_by="sort_order")
# =============================================================================

from __future__ import annotations

import logging
from typing import Any, Sequence

from supabase import Client, create_client

from app.config import Settings, get_settings
from lib.catalog_store import APPS, REVIEWS, CatalogStore, StoreError

# Set up logging for this module
logger = logging.getLogger(__name__)


class SupabaseClientError(StoreError):
    """Error during Supabase operations."""


class SupabaseClient:
    """
    Process-wide Supabase client.

    One client instance is shared across the application and created on
    first use, so importing the app never opens a connection.
    """

    _instance: Client | None = None

    @classmethod
    def get_client(cls, settings: Settings | None = None) -> Client:
        """
        Get or create the singleton Supabase client.

        Uses service_role key which bypasses Row Level Security (RLS).
        This is appropriate for server-side operations.

        Raises:
            SupabaseClientError: If client creation fails
        """
        if cls._instance is None:
            settings = settings or get_settings()
            try:
                cls._instance = create_client(
                    settings.SUPABASE_URL,
                    settings.SUPABASE_SERVICE_KEY
                )
                logger.info("Supabase client initialized successfully")
            except Exception as e:
                raise SupabaseClientError(
                    message=f"Failed to create Supabase client: {e}",
                    code="CLIENT_INIT_FAILED",
                ) from e
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Drop the cached client (used when settings change)."""
        cls._instance = None


def _filter_value(value: Any) -> Any:
    """PostgREST expects lowercase boolean literals."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return value


def _ilike_value(term: str) -> str:
    """
    Build a quoted ilike operand matching ``term`` as a literal substring.

    LIKE wildcards are escaped first, then the value is double-quoted so
    commas, dots and parentheses survive PostgREST's or=() syntax.
    """
    literal = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    quoted = literal.replace("\\", "\\\\").replace('"', '\\"')
    return f'"%{quoted}%"'


class SupabaseCatalogStore(CatalogStore):
    """
    CatalogStore backed by two Supabase tables.

    Example:
        store = SupabaseCatalogStore(settings)
        review = store.insert(REVIEWS, {"app_id": "...", "name": "Ann", ...})
    """

    def __init__(
        self,
        settings: Settings | None = None,
        client: Client | None = None,
    ):
        self._settings = settings or get_settings()
        self._client = client
        self._tables = {
            APPS: self._settings.APPS_TABLE,
            REVIEWS: self._settings.REVIEWS_TABLE,
        }

    @property
    def client(self) -> Client:
        if self._client is None:
            self._client = SupabaseClient.get_client(self._settings)
        return self._client

    def _table(self, collection: str):
        if collection not in self._tables:
            raise SupabaseClientError(
                message=f"Unknown collection: {collection}",
                code="UNKNOWN_COLLECTION",
            )
        return self.client.table(self._tables[collection])

    def _execute(self, query, action: str, collection: str, **details: Any) -> list[dict[str, Any]]:
        try:
            response = query.execute()
        except Exception as e:
            logger.error(f"Failed to {action} {collection}: {e}")
            raise SupabaseClientError(
                message=str(e),
                code=f"{action.upper()}_FAILED",
                details={"collection": collection, **details},
            ) from e
        return response.data or []

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    def find(
        self,
        collection: str,
        filters: dict[str, Any] | None = None,
        order_by: str | None = None,
        descending: bool = False,
        fields: Sequence[str] | None = None,
    ) -> list[dict[str, Any]]:
        query = self._table(collection).select(", ".join(fields) if fields else "*")
        for column, value in (filters or {}).items():
            query = query.eq(column, _filter_value(value))
        if order_by:
            query = query.order(order_by, desc=descending)

        rows = self._execute(query, "find", collection)
        logger.debug(f"Fetched {len(rows)} rows from {collection}")
        return rows

    def find_by_id(self, collection: str, record_id: str) -> dict[str, Any] | None:
        query = self._table(collection).select("*").eq("id", record_id).limit(1)
        rows = self._execute(query, "fetch", collection, id=record_id)
        return rows[0] if rows else None

    def search(
        self,
        collection: str,
        term: str,
        fields: Sequence[str],
        order_by: str | None = None,
    ) -> list[dict[str, Any]]:
        operand = _ilike_value(term)
        condition = ",".join(f"{field}.ilike.{operand}" for field in fields)
        query = self._table(collection).select("*").or_(condition)
        if order_by:
            query = query.order(order_by)
        return self._execute(query, "search", collection, term=term)

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------

    def insert(self, collection: str, data: dict[str, Any]) -> dict[str, Any]:
        rows = self._execute(self._table(collection).insert(data), "insert", collection)
        if not rows:
            raise SupabaseClientError(
                message="Insert returned no data",
                code="INSERT_FAILED",
                details={"collection": collection},
            )
        return rows[0]

    def update(
        self,
        collection: str,
        record_id: str,
        changes: dict[str, Any],
    ) -> dict[str, Any] | None:
        query = self._table(collection).update(changes).eq("id", record_id)
        rows = self._execute(query, "update", collection, id=record_id)
        return rows[0] if rows else None

    def delete(self, collection: str, record_id: str) -> dict[str, Any] | None:
        query = self._table(collection).delete().eq("id", record_id)
        rows = self._execute(query, "delete", collection, id=record_id)
        return rows[0] if rows else None

    def ping(self) -> None:
        self._execute(self._table(APPS).select("id").limit(1), "ping", APPS)
