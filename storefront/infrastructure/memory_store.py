"""In-memory data store.

Holds rows as plain dicts keyed by collection. Used as the substitute
gateway in tests and for local experiments without a database.
"""

from typing import Any

from storefront.infrastructure.store import Filter, FilterOp, StoreError, StoreQuery


class InMemoryStore:
    """Dict-backed implementation of the DataStore protocol."""

    def __init__(self, collections: dict[str, list[dict[str, Any]]] | None = None) -> None:
        self._collections: dict[str, list[dict[str, Any]]] = {
            name: [dict(row) for row in rows] for name, rows in (collections or {}).items()
        }

    def add(self, collection: str, *rows: dict[str, Any]) -> None:
        """Insert rows into a collection."""
        self._collections.setdefault(collection, []).extend(dict(row) for row in rows)

    async def fetch(self, query: StoreQuery) -> list[dict[str, Any]]:
        """Return rows matching the query."""
        rows = self._matching(query)

        # Stable sorts applied from the least significant key
        for ordering in reversed(query.orderings):
            present = [r for r in rows if r.get(ordering.column) is not None]
            missing = [r for r in rows if r.get(ordering.column) is None]
            present.sort(key=lambda r: r[ordering.column], reverse=not ordering.ascending)
            rows = present + missing

        start = query.offset or 0
        end = start + query.limit if query.limit is not None else None
        rows = rows[start:end]

        result = [dict(row) for row in rows]
        for embed in query.embeds:
            related = {
                row["id"]: row for row in self._collections.get(embed.collection, [])
            }
            for row in result:
                target = related.get(row.get(embed.foreign_key))
                row[embed.collection] = (
                    {column: target.get(column) for column in embed.columns}
                    if target is not None
                    else None
                )
        return result

    async def count(self, query: StoreQuery) -> int:
        """Return the number of rows matching the query's filters."""
        return len(self._matching(query))

    def _matching(self, query: StoreQuery) -> list[dict[str, Any]]:
        if query.collection not in self._collections:
            raise StoreError(query.collection, "Unknown collection")
        return [
            row
            for row in self._collections[query.collection]
            if all(self._test(row, f) for f in query.filters)
        ]

    @staticmethod
    def _test(row: dict[str, Any], predicate: Filter) -> bool:
        value = row.get(predicate.column)
        if predicate.op == FilterOp.EQ:
            return value == predicate.value
        if predicate.op == FilterOp.GT:
            return value is not None and value > predicate.value
        raise StoreError("", f"Unsupported operator: {predicate.op}")
