"""Shared API dependencies.

The data store is injected per request through ``get_store``; tests
replace it with ``app.dependency_overrides[get_store]``.
"""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends

from storefront.catalog.service import CatalogService
from storefront.infrastructure.config import settings
from storefront.infrastructure.database import async_session_factory
from storefront.infrastructure.postgrest_store import PostgrestStore
from storefront.infrastructure.sql_store import SqlAlchemyStore
from storefront.infrastructure.store import DataStore

# Global PostgREST client (connection pool shared across requests)
_postgrest_store: PostgrestStore | None = None


def get_postgrest_store() -> PostgrestStore:
    """Get the PostgREST store singleton.

    Returns:
        PostgrestStore instance.
    """
    global _postgrest_store
    if _postgrest_store is None:
        _postgrest_store = PostgrestStore(
            base_url=settings.postgrest_url,
            api_key=settings.postgrest_api_key,
            timeout=settings.store_timeout,
        )
    return _postgrest_store


async def close_stores() -> None:
    """Release shared store resources on shutdown."""
    global _postgrest_store
    if _postgrest_store is not None:
        await _postgrest_store.close()
        _postgrest_store = None


async def get_store() -> AsyncGenerator[DataStore, None]:
    """Get the configured data store for one request.

    Yields:
        SQL store bound to a fresh session, or the shared PostgREST store.
    """
    if settings.store_backend == "postgrest":
        yield get_postgrest_store()
        return

    async with async_session_factory() as session:
        yield SqlAlchemyStore(session)


def get_catalog_service(
    store: Annotated[DataStore, Depends(get_store)],
) -> CatalogService:
    """Get catalog service bound to the request's data store."""
    return CatalogService(
        store,
        default_page_size=settings.default_page_size,
        featured_stock_threshold=settings.featured_stock_threshold,
    )
