"""Catalog service for storefront read operations.

High-level service that combines the listing query builder with the
data store gateway and maps store failures to catalog errors.
"""

from typing import Any

import structlog

from storefront.catalog.exceptions import NotFoundError, RetrievalError
from storefront.catalog.listing import (
    DEFAULT_PAGE_SIZE,
    FEATURED_STOCK_THRESHOLD,
    ListingOptions,
    ListingQueryBuilder,
    PaginatedResult,
)
from storefront.infrastructure.store import DataStore, StoreError, StoreQuery

logger = structlog.get_logger()

Row = dict[str, Any]


class CatalogService:
    """Service for catalog reads.

    Example usage:
        service = CatalogService(store)
        categories = await service.list_categories()
        page = await service.list_products(ListingOptions(page=1))
    """

    def __init__(
        self,
        store: DataStore,
        default_page_size: int = DEFAULT_PAGE_SIZE,
        featured_stock_threshold: int = FEATURED_STOCK_THRESHOLD,
    ) -> None:
        """Initialize service with a data store.

        Args:
            store: Data store gateway.
            default_page_size: Page size when a page is requested without one.
            featured_stock_threshold: Stock above which a product is featured.
        """
        self.store = store
        self.products = ListingQueryBuilder(
            "products",
            default_page_size=default_page_size,
            featured_stock_threshold=featured_stock_threshold,
        )

    async def list_categories(self) -> list[Row]:
        """Get all categories sorted by name.

        Raises:
            RetrievalError: If the store query fails.
        """
        query = (
            StoreQuery("categories")
            .order("name", ascending=True)
            .order("id", ascending=True)
        )
        return await self._fetch(query)

    async def get_category_by_slug(self, slug: str) -> Row:
        """Get a single category by slug.

        Args:
            slug: Category slug (exact match).

        Returns:
            Category row.

        Raises:
            NotFoundError: If no category has this slug.
            RetrievalError: If the store query fails or the slug is
                not unique.
        """
        rows = await self._fetch(StoreQuery("categories").eq("slug", slug).take(2))

        if not rows:
            raise NotFoundError("Category", "slug", slug)
        if len(rows) > 1:
            raise RetrievalError("categories", "fetch", f"slug {slug!r} is not unique")
        return rows[0]

    async def list_products(
        self,
        options: ListingOptions,
    ) -> list[Row] | PaginatedResult[Row]:
        """List active products.

        Args:
            options: Listing options.

        Returns:
            A PaginatedResult when a page was requested, otherwise the
            list of matching products.

        Raises:
            RetrievalError: If the row or count query fails.
        """
        items = await self._fetch(self.products.rows_query(options))

        if not options.paginated:
            return items

        total = await self._count(self.products.count_query(options))
        return self.products.paginate(options, items, total)

    async def list_feedbacks(self) -> list[Row]:
        """Get active feedback, newest first, with product name and image.

        Raises:
            RetrievalError: If the store query fails.
        """
        query = (
            StoreQuery("user_feedbacks")
            .eq("is_active", True)
            .order("created_at", ascending=False)
            .order("id", ascending=True)
            .embed("products", ("name", "image_url"), foreign_key="product_id")
        )
        return await self._fetch(query)

    async def _fetch(self, query: StoreQuery) -> list[Row]:
        try:
            return await self.store.fetch(query)
        except StoreError as e:
            logger.error(
                "Catalog fetch failed",
                collection=query.collection,
                error=e.message,
            )
            raise RetrievalError(query.collection, "fetch", e.message) from e

    async def _count(self, query: StoreQuery) -> int:
        try:
            return await self.store.count(query)
        except StoreError as e:
            logger.error(
                "Catalog count failed",
                collection=query.collection,
                error=e.message,
            )
            raise RetrievalError(query.collection, "count", e.message) from e
