"""Tests for the PostgREST data store."""

from typing import Callable

import httpx
import pytest

from storefront.infrastructure.postgrest_store import PostgrestStore
from storefront.infrastructure.store import StoreError, StoreQuery

Handler = Callable[[httpx.Request], httpx.Response]


def make_store(handler: Handler, requests: list[httpx.Request]) -> PostgrestStore:
    """Create a store whose HTTP calls are answered by ``handler``."""

    def recording(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return handler(request)

    return PostgrestStore(
        "https://project.example.co/",
        api_key="anon-key",
        transport=httpx.MockTransport(recording),
    )


class TestFetch:
    """Tests for PostgrestStore.fetch."""

    @pytest.mark.asyncio
    async def test_request_shape(self) -> None:
        """Filters, ordering and window are sent as query parameters."""
        requests: list[httpx.Request] = []
        store = make_store(lambda r: httpx.Response(200, json=[{"id": "p1"}]), requests)

        query = (
            StoreQuery("products")
            .eq("is_active", True)
            .eq("category_id", "cat1")
            .gt("stock_quantity", 10)
            .order("created_at", ascending=False)
            .range(12, 23)
        )
        rows = await store.fetch(query)
        await store.close()

        assert rows == [{"id": "p1"}]
        request = requests[0]
        assert request.method == "GET"
        assert request.url.path == "/rest/v1/products"
        params = request.url.params
        assert params["select"] == "*"
        assert params["is_active"] == "eq.true"
        assert params["category_id"] == "eq.cat1"
        assert params["stock_quantity"] == "gt.10"
        assert params["order"] == "created_at.desc"
        assert params["offset"] == "12"
        assert params["limit"] == "12"

    @pytest.mark.asyncio
    async def test_auth_headers(self) -> None:
        """The API key is sent as apikey and bearer token."""
        requests: list[httpx.Request] = []
        store = make_store(lambda r: httpx.Response(200, json=[]), requests)

        await store.fetch(StoreQuery("categories"))
        await store.close()

        assert requests[0].headers["apikey"] == "anon-key"
        assert requests[0].headers["Authorization"] == "Bearer anon-key"

    @pytest.mark.asyncio
    async def test_embed_in_select(self) -> None:
        """Embedded resources are requested through select."""
        requests: list[httpx.Request] = []
        store = make_store(lambda r: httpx.Response(200, json=[]), requests)

        query = StoreQuery("user_feedbacks").embed(
            "products", ("name", "image_url"), foreign_key="product_id"
        )
        await store.fetch(query)
        await store.close()

        assert requests[0].url.params["select"] == "*,products(name,image_url)"

    @pytest.mark.asyncio
    async def test_no_window_params_when_unbounded(self) -> None:
        """No offset or limit is sent for an unbounded query."""
        requests: list[httpx.Request] = []
        store = make_store(lambda r: httpx.Response(200, json=[]), requests)

        await store.fetch(StoreQuery("categories").order("name"))
        await store.close()

        params = requests[0].url.params
        assert params["order"] == "name.asc"
        assert "offset" not in params
        assert "limit" not in params

    @pytest.mark.asyncio
    async def test_error_status(self) -> None:
        """Non-2xx responses raise StoreError."""
        store = make_store(
            lambda r: httpx.Response(500, json={"message": "boom"}), []
        )

        with pytest.raises(StoreError) as exc_info:
            await store.fetch(StoreQuery("products"))
        await store.close()
        assert exc_info.value.collection == "products"

    @pytest.mark.asyncio
    async def test_transport_failure(self) -> None:
        """Connection failures raise StoreError."""

        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        store = make_store(refuse, [])
        with pytest.raises(StoreError):
            await store.fetch(StoreQuery("products"))
        await store.close()

    @pytest.mark.asyncio
    async def test_unexpected_body(self) -> None:
        """A non-list body raises StoreError."""
        store = make_store(lambda r: httpx.Response(200, json={"rows": []}), [])

        with pytest.raises(StoreError):
            await store.fetch(StoreQuery("products"))
        await store.close()


class TestCount:
    """Tests for PostgrestStore.count."""

    @pytest.mark.asyncio
    async def test_exact_count(self) -> None:
        """Count is read from Content-Range with Prefer: count=exact."""
        requests: list[httpx.Request] = []
        store = make_store(
            lambda r: httpx.Response(200, headers={"Content-Range": "0-11/15"}),
            requests,
        )

        query = StoreQuery("products").eq("is_active", True).order("price").range(0, 11)
        assert await store.count(query) == 15
        await store.close()

        request = requests[0]
        assert request.method == "HEAD"
        assert request.headers["Prefer"] == "count=exact"
        assert request.url.params["is_active"] == "eq.true"
        assert "order" not in request.url.params
        assert "limit" not in request.url.params

    @pytest.mark.asyncio
    async def test_empty_count(self) -> None:
        """An empty result reports */0."""
        store = make_store(
            lambda r: httpx.Response(200, headers={"Content-Range": "*/0"}), []
        )
        assert await store.count(StoreQuery("products")) == 0
        await store.close()

    @pytest.mark.asyncio
    async def test_missing_content_range(self) -> None:
        """A response without an exact count raises StoreError."""
        store = make_store(lambda r: httpx.Response(200), [])

        with pytest.raises(StoreError):
            await store.count(StoreQuery("products"))
        await store.close()
