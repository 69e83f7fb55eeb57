"""SQLAlchemy-backed data store.

Translates StoreQuery objects into SQLAlchemy selects against the
storefront models.
"""

from typing import Any

import structlog
from sqlalchemy import and_, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.infrastructure.models import COLLECTION_MODELS
from storefront.infrastructure.store import Embed, FilterOp, StoreError, StoreQuery

logger = structlog.get_logger()


class SqlAlchemyStore:
    """Data store over an async SQLAlchemy session.

    Example usage:
        async with async_session_factory() as session:
            store = SqlAlchemyStore(session)
            rows = await store.fetch(StoreQuery("categories").order("name"))
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize store with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session

    async def fetch(self, query: StoreQuery) -> list[dict[str, Any]]:
        """Return rows matching the query.

        Args:
            query: Store query.

        Returns:
            Matching rows as dicts.

        Raises:
            StoreError: On unknown collection/column or database error.
        """
        model = self._get_model(query.collection)
        statement = select(model)

        conditions = self._build_conditions(model, query)
        if conditions:
            statement = statement.where(and_(*conditions))

        for ordering in query.orderings:
            column = self._get_column(model, query.collection, ordering.column)
            statement = statement.order_by(column.asc() if ordering.ascending else column.desc())

        if query.offset:
            statement = statement.offset(query.offset)
        if query.limit is not None:
            statement = statement.limit(query.limit)

        try:
            result = await self.session.execute(statement)
            rows = [record.to_dict() for record in result.scalars().all()]
            for embed in query.embeds:
                await self._attach(rows, embed)
        except SQLAlchemyError as e:
            logger.error(
                "Store query failed",
                collection=query.collection,
                error=str(e),
            )
            raise StoreError(query.collection, f"Query failed: {e}") from e

        return rows

    async def count(self, query: StoreQuery) -> int:
        """Return the number of rows matching the query's filters.

        Args:
            query: Store query; ordering and row window are ignored.

        Returns:
            Count of matching rows.

        Raises:
            StoreError: On unknown collection/column or database error.
        """
        model = self._get_model(query.collection)
        statement = select(func.count()).select_from(model)

        conditions = self._build_conditions(model, query)
        if conditions:
            statement = statement.where(and_(*conditions))

        try:
            result = await self.session.execute(statement)
            return result.scalar_one()
        except SQLAlchemyError as e:
            logger.error(
                "Store count failed",
                collection=query.collection,
                error=str(e),
            )
            raise StoreError(query.collection, f"Count failed: {e}") from e

    async def _attach(self, rows: list[dict[str, Any]], embed: Embed) -> None:
        """Embed related rows fetched with a single IN query."""
        related_model = self._get_model(embed.collection)
        keys = {row[embed.foreign_key] for row in rows if row.get(embed.foreign_key)}

        related: dict[Any, dict[str, Any]] = {}
        if keys:
            id_column = self._get_column(related_model, embed.collection, "id")
            result = await self.session.execute(
                select(related_model).where(id_column.in_(keys))
            )
            related = {record.id: record.to_dict() for record in result.scalars().all()}

        for row in rows:
            target = related.get(row.get(embed.foreign_key))
            row[embed.collection] = (
                {column: target.get(column) for column in embed.columns}
                if target is not None
                else None
            )

    def _build_conditions(self, model: Any, query: StoreQuery) -> list[Any]:
        conditions = []
        for predicate in query.filters:
            column = self._get_column(model, query.collection, predicate.column)
            if predicate.op == FilterOp.EQ:
                conditions.append(column == predicate.value)
            elif predicate.op == FilterOp.GT:
                conditions.append(column > predicate.value)
            else:
                raise StoreError(query.collection, f"Unsupported operator: {predicate.op}")
        return conditions

    @staticmethod
    def _get_model(collection: str) -> Any:
        model = COLLECTION_MODELS.get(collection)
        if model is None:
            raise StoreError(collection, "Unknown collection")
        return model

    @staticmethod
    def _get_column(model: Any, collection: str, name: str) -> Any:
        column = model.__table__.columns.get(name)
        if column is None:
            raise StoreError(collection, f"Unknown column: {name}")
        return column
