"""Listing query builder.

Turns product listing options (category, featured, limit, page, sort)
into data store queries and assembles paginated results.
"""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

import structlog

from storefront.infrastructure.store import StoreQuery

T = TypeVar("T")

logger = structlog.get_logger()

ALL_CATEGORIES = "all"
DEFAULT_PAGE_SIZE = 12
# Upper bounds keep offsets well inside a Postgres bigint
MAX_PAGE = 100_000
MAX_PAGE_SIZE = 1_000
FEATURED_STOCK_THRESHOLD = 10

# sort option -> (column, ascending)
SORT_COLUMNS: dict[str, tuple[str, bool]] = {
    "newest": ("created_at", False),
    "oldest": ("created_at", True),
    "price_asc": ("price", True),
    "price_desc": ("price", False),
    "name": ("name", True),
}
DEFAULT_SORT = "newest"


@dataclass
class ListingOptions:
    """Recognized listing options.

    Attributes:
        category: Category ID, or "all"/None for no restriction.
        featured: Restrict to well-stocked products.
        limit: Result cap, or page size when ``page`` is set.
        page: Page number (1-indexed); enables paginated mode.
        page_size: Explicit page size; overrides ``limit`` in paginated mode.
        sort: Sort option name (see SORT_COLUMNS).
    """

    category: str | None = None
    featured: bool = False
    limit: int | None = None
    page: int | None = None
    page_size: int | None = None
    sort: str = DEFAULT_SORT

    @property
    def paginated(self) -> bool:
        """Whether a page was requested."""
        return self.page is not None

    @property
    def category_filter(self) -> str | None:
        """Category ID to filter on, or None for all categories."""
        if not self.category or self.category == ALL_CATEGORIES:
            return None
        return self.category

    def effective_page_size(self, default: int = DEFAULT_PAGE_SIZE) -> int:
        """Page size in paginated mode.

        An explicit page size wins, then ``limit``, then the default.
        """
        return self.page_size or self.limit or default

    def offset(self, default_page_size: int = DEFAULT_PAGE_SIZE) -> int:
        """Row offset of the requested page, clamped to non-negative."""
        page = self.page or 1
        return max(0, (page - 1) * self.effective_page_size(default_page_size))


@dataclass
class PaginatedResult(Generic[T]):
    """Paginated result container.

    Attributes:
        items: List of items.
        total: Total count.
        page: Current page.
        page_size: Items per page.
    """

    items: list[T]
    total: int
    page: int
    page_size: int

    @property
    def total_pages(self) -> int:
        """Calculate total pages (ceil of total / page_size)."""
        return (self.total + self.page_size - 1) // self.page_size


class ListingQueryBuilder:
    """Builds store queries for active-item listings.

    Example usage:
        builder = ListingQueryBuilder("products")
        options = ListingOptions(category="cat1", page=2, limit=12)
        rows_query = builder.rows_query(options)
        count_query = builder.count_query(options)
    """

    def __init__(
        self,
        collection: str,
        default_page_size: int = DEFAULT_PAGE_SIZE,
        featured_stock_threshold: int = FEATURED_STOCK_THRESHOLD,
    ) -> None:
        """Initialize builder.

        Args:
            collection: Collection to list.
            default_page_size: Page size when none is given.
            featured_stock_threshold: Stock above which a product counts
                as featured.
        """
        self.collection = collection
        self.default_page_size = default_page_size
        self.featured_stock_threshold = featured_stock_threshold

    def filtered_query(self, options: ListingOptions) -> StoreQuery:
        """Base query with filters only: active, category, featured."""
        query = StoreQuery(self.collection).eq("is_active", True)

        category = options.category_filter
        if category is not None:
            query = query.eq("category_id", category)

        if options.featured:
            query = query.gt("stock_quantity", self.featured_stock_threshold)

        return query

    def count_query(self, options: ListingOptions) -> StoreQuery:
        """Query counting all rows matching the filters."""
        return self.rows_query(options).unpaged()

    def rows_query(self, options: ListingOptions) -> StoreQuery:
        """Sorted query for the requested rows.

        In paginated mode the query covers rows
        ``offset .. offset + page_size - 1``; otherwise ``limit`` caps
        the result if given.
        """
        column, ascending = self._get_sort(options.sort)
        # id breaks ties so pages are stable under LIMIT/OFFSET
        query = (
            self.filtered_query(options)
            .order(column, ascending=ascending)
            .order("id", ascending=True)
        )

        if options.paginated:
            page_size = options.effective_page_size(self.default_page_size)
            offset = options.offset(self.default_page_size)
            return query.range(offset, offset + page_size - 1)

        if options.limit is not None:
            return query.take(options.limit)

        return query

    def paginate(
        self,
        options: ListingOptions,
        items: list[dict[str, Any]],
        total: int,
    ) -> PaginatedResult[dict[str, Any]]:
        """Wrap a page of rows with its pagination metadata."""
        return PaginatedResult(
            items=items,
            total=total,
            page=options.page or 1,
            page_size=options.effective_page_size(self.default_page_size),
        )

    def _get_sort(self, sort: str | None) -> tuple[str, bool]:
        """Get sort column and direction for a sort option.

        Unknown options fall back to newest first.
        """
        if sort and sort not in SORT_COLUMNS:
            logger.debug("Unknown sort option, using default", sort=sort)
        return SORT_COLUMNS.get(sort or DEFAULT_SORT, SORT_COLUMNS[DEFAULT_SORT])
