"""Data store gateway interface.

A gateway answers queries against a named collection with equality and
greater-than filters, ordering, a row window and an exact count. The
query object is immutable; each builder method returns a new query, so
a base query can be shared between a count query and a row query.

Example usage:
    query = (
        StoreQuery("products")
        .eq("is_active", True)
        .order("created_at", ascending=False)
        .range(0, 11)
    )
    rows = await store.fetch(query)
    total = await store.count(query)
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Protocol


class StoreError(Exception):
    """Error raised by a gateway when a query cannot be executed."""

    def __init__(self, collection: str, message: str) -> None:
        self.collection = collection
        self.message = message
        super().__init__(f"[{collection}] {message}")


class FilterOp(str, Enum):
    """Supported filter operators."""

    EQ = "eq"
    GT = "gt"


@dataclass(frozen=True)
class Filter:
    """Single column predicate."""

    column: str
    op: FilterOp
    value: Any


@dataclass(frozen=True)
class Ordering:
    """Sort key."""

    column: str
    ascending: bool = True


@dataclass(frozen=True)
class Embed:
    """Related row embedded into each result row.

    Attributes:
        collection: Related collection, also the key the embedded row
            is stored under.
        columns: Columns of the related row to include.
        foreign_key: Column of the queried row referencing the related
            row's ``id``.
    """

    collection: str
    columns: tuple[str, ...]
    foreign_key: str


@dataclass(frozen=True)
class StoreQuery:
    """Immutable query against one collection."""

    collection: str
    filters: tuple[Filter, ...] = ()
    orderings: tuple[Ordering, ...] = ()
    embeds: tuple[Embed, ...] = ()
    offset: int | None = None
    limit: int | None = None

    def eq(self, column: str, value: Any) -> "StoreQuery":
        """Restrict to rows where ``column == value``."""
        return replace(self, filters=self.filters + (Filter(column, FilterOp.EQ, value),))

    def gt(self, column: str, value: Any) -> "StoreQuery":
        """Restrict to rows where ``column > value``."""
        return replace(self, filters=self.filters + (Filter(column, FilterOp.GT, value),))

    def order(self, column: str, ascending: bool = True) -> "StoreQuery":
        """Append a sort key."""
        return replace(self, orderings=self.orderings + (Ordering(column, ascending),))

    def embed(self, collection: str, columns: tuple[str, ...], foreign_key: str) -> "StoreQuery":
        """Embed columns of a related row under ``collection``."""
        return replace(self, embeds=self.embeds + (Embed(collection, columns, foreign_key),))

    def range(self, start: int, end: int) -> "StoreQuery":
        """Restrict to rows ``start`` through ``end`` inclusive.

        Args:
            start: Zero-based index of the first row. Negative values are
                clamped to zero.
            end: Zero-based index of the last row.

        Returns:
            New query with offset and limit set.
        """
        start = max(0, start)
        return replace(self, offset=start, limit=max(0, end - start + 1))

    def take(self, limit: int) -> "StoreQuery":
        """Cap the number of returned rows."""
        return replace(self, limit=limit)

    def unpaged(self) -> "StoreQuery":
        """Drop ordering and row window, keeping filters.

        Used to derive a count query from a row query.
        """
        return replace(self, orderings=(), embeds=(), offset=None, limit=None)


class DataStore(Protocol):
    """Gateway over a managed relational store."""

    async def fetch(self, query: StoreQuery) -> list[dict[str, Any]]:
        """Return rows matching the query.

        Raises:
            StoreError: If the query fails.
        """
        ...

    async def count(self, query: StoreQuery) -> int:
        """Return the number of rows matching the query's filters.

        Ordering and row window are ignored.

        Raises:
            StoreError: If the query fails.
        """
        ...
