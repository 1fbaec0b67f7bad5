# =============================================================================
# lib/catalog_store.py - Document Store Interface
# =============================================================================
# The services talk to persistence only through CatalogStore: find / insert /
# update / delete on a named collection with equality filters and one sort key.
#
# Two collections exist:
# - APPS: catalog entries
# - REVIEWS: user reviews, referencing an app by app_id
#
# Records cross this boundary as plain dicts keyed by column name
# (snake_case). Ids are generated by the store and returned as strings.
#
# Usage:
#   from lib.catalog_store import APPS, CatalogStore
#   rows = store.find(APPS, {"is_trending": True}, order_by="sort_order")
# =============================================================================

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Sequence

APPS = "apps"
REVIEWS = "reviews"


class StoreError(Exception):
    """
    Error raised when the backing store rejects or fails a query.

    Callers never retry; the API reports these as 500 with the message.
    """

    def __init__(
        self,
        message: str,
        code: str = "STORE_ERROR",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class CatalogStore(ABC):
    """
    Minimal document-query interface over the two catalog collections.

    Implementations must return fresh dicts on every call; callers are free
    to mutate what they get back.
    """

    @abstractmethod
    def find(
        self,
        collection: str,
        filters: dict[str, Any] | None = None,
        order_by: str | None = None,
        descending: bool = False,
        fields: Sequence[str] | None = None,
    ) -> list[dict[str, Any]]:
        """
        Return every record matching all equality ``filters``.

        Args:
            collection: APPS or REVIEWS
            filters: column -> value, combined with AND
            order_by: optional column to sort on
            descending: sort direction for ``order_by``
            fields: optional subset of columns to return
        """

    @abstractmethod
    def find_by_id(self, collection: str, record_id: str) -> dict[str, Any] | None:
        """Return one record, or None when the id doesn't resolve."""

    @abstractmethod
    def search(
        self,
        collection: str,
        term: str,
        fields: Sequence[str],
        order_by: str | None = None,
    ) -> list[dict[str, Any]]:
        """
        Return records where ``term`` is a case-insensitive substring of any
        of ``fields`` (OR across fields).
        """

    @abstractmethod
    def insert(self, collection: str, data: dict[str, Any]) -> dict[str, Any]:
        """Persist a new record and return it with its generated id."""

    @abstractmethod
    def update(
        self,
        collection: str,
        record_id: str,
        changes: dict[str, Any],
    ) -> dict[str, Any] | None:
        """Merge ``changes`` into a record. Returns the new state or None."""

    @abstractmethod
    def delete(self, collection: str, record_id: str) -> dict[str, Any] | None:
        """Remove a record. Returns the removed record or None."""

    @abstractmethod
    def ping(self) -> None:
        """Raise StoreError if the store can't be reached."""
