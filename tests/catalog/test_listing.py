"""Tests for the listing query builder."""

import pytest

from storefront.catalog.listing import (
    ListingOptions,
    ListingQueryBuilder,
    PaginatedResult,
)
from storefront.infrastructure.store import Filter, FilterOp, Ordering


class TestListingOptions:
    """Tests for ListingOptions."""

    def test_defaults(self) -> None:
        """No options means unpaginated, unfiltered, newest first."""
        options = ListingOptions()
        assert options.paginated is False
        assert options.category_filter is None
        assert options.sort == "newest"

    @pytest.mark.parametrize("category", [None, "", "all"])
    def test_no_category_filter(self, category: str | None) -> None:
        """Absent, empty and "all" categories do not filter."""
        assert ListingOptions(category=category).category_filter is None

    def test_category_filter(self) -> None:
        """A category ID is used as filter."""
        assert ListingOptions(category="cat1").category_filter == "cat1"

    @pytest.mark.parametrize(
        "page,page_size,expected",
        [(1, 12, 0), (2, 12, 12), (3, 5, 10), (10, 1, 9)],
    )
    def test_offset(self, page: int, page_size: int, expected: int) -> None:
        """offset = (page - 1) * pageSize."""
        options = ListingOptions(page=page, page_size=page_size)
        assert options.offset() == expected

    def test_offset_clamped(self) -> None:
        """Offset never goes negative."""
        assert ListingOptions(page=0, page_size=12).offset() == 0

    def test_page_size_precedence(self) -> None:
        """Explicit page size wins over limit, limit over default."""
        assert ListingOptions(page=1, page_size=4, limit=8).effective_page_size() == 4
        assert ListingOptions(page=1, limit=8).effective_page_size() == 8
        assert ListingOptions(page=1).effective_page_size() == 12
        assert ListingOptions(page=1).effective_page_size(default=20) == 20


class TestPaginatedResult:
    """Tests for PaginatedResult."""

    @pytest.mark.parametrize(
        "total,page_size,expected",
        [(0, 12, 0), (1, 12, 1), (12, 12, 1), (13, 12, 2), (15, 12, 2), (100, 7, 15)],
    )
    def test_total_pages(self, total: int, page_size: int, expected: int) -> None:
        """total_pages = ceil(total / page_size)."""
        result = PaginatedResult(items=[], total=total, page=1, page_size=page_size)
        assert result.total_pages == expected


class TestListingQueryBuilder:
    """Tests for ListingQueryBuilder."""

    @pytest.fixture
    def builder(self) -> ListingQueryBuilder:
        """Create builder for products."""
        return ListingQueryBuilder("products")

    def test_always_active_only(self, builder: ListingQueryBuilder) -> None:
        """Every query filters is_active = true."""
        query = builder.rows_query(ListingOptions())
        assert query.collection == "products"
        assert query.filters == (Filter("is_active", FilterOp.EQ, True),)

    def test_category_and_featured_filters(self, builder: ListingQueryBuilder) -> None:
        """Category and featured add their predicates."""
        query = builder.filtered_query(ListingOptions(category="cat1", featured=True))
        assert Filter("category_id", FilterOp.EQ, "cat1") in query.filters
        assert Filter("stock_quantity", FilterOp.GT, 10) in query.filters

    def test_featured_threshold_configurable(self) -> None:
        """The featured threshold comes from the builder."""
        builder = ListingQueryBuilder("products", featured_stock_threshold=3)
        query = builder.filtered_query(ListingOptions(featured=True))
        assert Filter("stock_quantity", FilterOp.GT, 3) in query.filters

    def test_default_sort_newest_first(self, builder: ListingQueryBuilder) -> None:
        """Rows are sorted by created_at descending, then id."""
        query = builder.rows_query(ListingOptions())
        assert query.orderings == (
            Ordering("created_at", ascending=False),
            Ordering("id", ascending=True),
        )

    @pytest.mark.parametrize("sort", ["newest", "oldest", "price_asc", "price_desc", "name"])
    def test_id_breaks_ties(self, builder: ListingQueryBuilder, sort: str) -> None:
        """Every sort option ends with id so paged rows have a total order."""
        query = builder.rows_query(ListingOptions(page=2, limit=12, sort=sort))
        assert len(query.orderings) == 2
        assert query.orderings[-1] == Ordering("id", ascending=True)

    def test_unbounded_without_limit_or_page(self, builder: ListingQueryBuilder) -> None:
        """No limit and no page means no row window."""
        query = builder.rows_query(ListingOptions())
        assert query.offset is None
        assert query.limit is None

    def test_limit_caps_rows(self, builder: ListingQueryBuilder) -> None:
        """limit without page is a plain cap."""
        query = builder.rows_query(ListingOptions(limit=3))
        assert query.offset is None
        assert query.limit == 3

    def test_page_range(self, builder: ListingQueryBuilder) -> None:
        """page=2 with limit=12 covers rows 12..23."""
        query = builder.rows_query(ListingOptions(page=2, limit=12))
        assert query.offset == 12
        assert query.limit == 12

    def test_count_query_has_no_window(self, builder: ListingQueryBuilder) -> None:
        """The count query keeps filters but no sort or window."""
        options = ListingOptions(category="cat1", page=3, limit=5)
        count_query = builder.count_query(options)
        assert count_query.filters == builder.rows_query(options).filters
        assert count_query.orderings == ()
        assert count_query.embeds == ()
        assert count_query.offset is None
        assert count_query.limit is None

    def test_paginate(self, builder: ListingQueryBuilder) -> None:
        """paginate wraps rows with page metadata."""
        result = builder.paginate(ListingOptions(page=2, limit=12), [{"id": "x"}], 15)
        assert result.items == [{"id": "x"}]
        assert result.total == 15
        assert result.page == 2
        assert result.page_size == 12
        assert result.total_pages == 2
