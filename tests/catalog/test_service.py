"""Tests for the catalog service."""

from unittest.mock import AsyncMock

import pytest

from storefront.catalog.exceptions import NotFoundError, RetrievalError
from storefront.catalog.listing import ListingOptions, PaginatedResult
from storefront.catalog.service import CatalogService
from storefront.infrastructure.memory_store import InMemoryStore
from storefront.infrastructure.store import StoreError


@pytest.fixture
def service(store: InMemoryStore) -> CatalogService:
    """Create service over the shared in-memory store."""
    return CatalogService(store)


class TestCategories:
    """Tests for category reads."""

    @pytest.mark.asyncio
    async def test_list_sorted(self, service: CatalogService, make_category) -> None:
        """Categories come back sorted by name."""
        make_category(name="Stationery")
        make_category(name="Baby")

        rows = await service.list_categories()
        assert [r["name"] for r in rows] == ["Baby", "Stationery"]

    @pytest.mark.asyncio
    async def test_get_by_slug(self, service: CatalogService, make_category) -> None:
        """Lookup returns the single matching row."""
        make_category(id="k", slug="kitchen")

        row = await service.get_category_by_slug("kitchen")
        assert row["id"] == "k"

    @pytest.mark.asyncio
    async def test_get_by_slug_not_found(self, service: CatalogService) -> None:
        """Missing slug raises NotFoundError."""
        with pytest.raises(NotFoundError) as exc_info:
            await service.get_category_by_slug("nope")
        assert exc_info.value.message == "Category not found"
        assert exc_info.value.details["slug"] == "nope"

    @pytest.mark.asyncio
    async def test_get_by_slug_duplicate(self, service: CatalogService, make_category) -> None:
        """A non-unique slug raises RetrievalError."""
        make_category(slug="dup")
        make_category(slug="dup")

        with pytest.raises(RetrievalError):
            await service.get_category_by_slug("dup")


class TestProducts:
    """Tests for product listings."""

    @pytest.mark.asyncio
    async def test_plain_list(self, service: CatalogService, make_product) -> None:
        """Without a page the result is a plain list."""
        make_product()
        make_product()

        result = await service.list_products(ListingOptions())
        assert isinstance(result, list)
        assert len(result) == 2

    @pytest.mark.asyncio
    async def test_paginated(self, service: CatalogService, make_product) -> None:
        """With a page the result carries the total."""
        for _ in range(5):
            make_product()

        result = await service.list_products(ListingOptions(page=2, limit=2))
        assert isinstance(result, PaginatedResult)
        assert len(result.items) == 2
        assert result.total == 5
        assert result.total_pages == 3

    @pytest.mark.asyncio
    async def test_custom_default_page_size(self, store: InMemoryStore, make_product) -> None:
        """The default page size is configurable."""
        for _ in range(5):
            make_product()

        service = CatalogService(store, default_page_size=4)
        result = await service.list_products(ListingOptions(page=1))
        assert len(result.items) == 4
        assert result.total_pages == 2

    @pytest.mark.asyncio
    async def test_no_count_without_page(self) -> None:
        """The count query only runs in paginated mode."""
        store = AsyncMock()
        store.fetch.return_value = []

        await CatalogService(store).list_products(ListingOptions(limit=5))
        store.count.assert_not_called()

    @pytest.mark.asyncio
    async def test_fetch_failure(self) -> None:
        """StoreError on fetch becomes RetrievalError."""
        store = AsyncMock()
        store.fetch.side_effect = StoreError("products", "connection reset")

        with pytest.raises(RetrievalError) as exc_info:
            await CatalogService(store).list_products(ListingOptions())
        assert exc_info.value.operation == "fetch"
        assert "connection reset" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_count_failure(self) -> None:
        """StoreError on count becomes RetrievalError."""
        store = AsyncMock()
        store.fetch.return_value = []
        store.count.side_effect = StoreError("products", "timeout")

        with pytest.raises(RetrievalError) as exc_info:
            await CatalogService(store).list_products(ListingOptions(page=1))
        assert exc_info.value.operation == "count"


class TestFeedbacks:
    """Tests for feedback reads."""

    @pytest.mark.asyncio
    async def test_embeds_product(
        self, service: CatalogService, make_product, make_feedback
    ) -> None:
        """Feedback rows embed product name and image."""
        make_product(id="p", name="Mug Set", image_url="https://img.example.com/mug.jpg")
        make_feedback(product_id="p")

        rows = await service.list_feedbacks()
        assert rows[0]["products"] == {
            "name": "Mug Set",
            "image_url": "https://img.example.com/mug.jpg",
        }

    @pytest.mark.asyncio
    async def test_excludes_inactive(self, service: CatalogService, make_feedback) -> None:
        """Inactive feedback is hidden."""
        make_feedback(is_active=False)

        assert await service.list_feedbacks() == []
