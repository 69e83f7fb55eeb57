"""Storefront API client.

Thin HTTP client for the storefront REST API. Handles request
correlation, error handling and response parsing.
"""

from dataclasses import dataclass
from typing import Any

import httpx
import structlog

logger = structlog.get_logger()


@dataclass
class APIError:
    """Represents an API error response.

    ``status_code`` is None when the request never got a response.
    """

    message: str
    status_code: int | None = None


@dataclass
class APIResponse:
    """Represents an API response."""

    success: bool
    data: dict[str, Any] | None = None
    error: APIError | None = None


class StorefrontClient:
    """HTTP client for the storefront REST API.

    Example usage:
        client = StorefrontClient("http://localhost:8000")
        result = await client.list_products(category="all", page=1, limit=12)
        if result.success:
            print(result.data["totalPages"])
        await client.close()
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the API client.

        Args:
            base_url: Storefront API base URL.
            timeout: Request timeout in seconds.
            transport: Optional httpx transport (used by tests).
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
                headers={"Accept": "application/json"},
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def _get(self, path: str, params: dict[str, Any] | None = None) -> APIResponse:
        """Make a GET request.

        Args:
            path: API endpoint path.
            params: Query parameters; None values are dropped.

        Returns:
            APIResponse with success status and data or error.
        """
        client = await self._get_client()

        if params:
            params = {k: v for k, v in params.items() if v is not None}

        try:
            logger.debug("Making API request", path=path, params=params)
            response = await client.get(path, params=params)
        except httpx.TimeoutException as e:
            logger.error("API request timeout", path=path, error=str(e))
            return APIResponse(
                success=False,
                error=APIError(message=f"Request timed out: {path}"),
            )
        except httpx.RequestError as e:
            logger.error("API request failed", path=path, error=str(e))
            return APIResponse(
                success=False,
                error=APIError(message=f"Request failed: {e}"),
            )

        try:
            body = response.json()
        except ValueError:
            body = {}

        if response.status_code >= 400:
            message = body.get("error") if isinstance(body, dict) else None
            return APIResponse(
                success=False,
                error=APIError(
                    message=message or f"HTTP {response.status_code}",
                    status_code=response.status_code,
                ),
            )

        return APIResponse(success=True, data=body)

    # =========================================================================
    # Catalog Endpoints
    # =========================================================================

    async def list_categories(self) -> APIResponse:
        """Get all categories, sorted by name."""
        return await self._get("/api/categories")

    async def get_category(self, slug: str) -> APIResponse:
        """Get a category by slug.

        Args:
            slug: Category slug.

        Returns:
            APIResponse with ``{"category": ...}``, or a 404 error.
        """
        return await self._get("/api/categories", params={"slug": slug})

    async def list_products(
        self,
        category: str | None = None,
        featured: bool = False,
        limit: int | None = None,
        page: int | None = None,
        page_size: int | None = None,
        sort: str | None = None,
    ) -> APIResponse:
        """List products.

        Args:
            category: Category ID or "all".
            featured: Restrict to featured products.
            limit: Result cap, or page size when ``page`` is given.
            page: Page number.
            page_size: Page size; takes precedence over ``limit`` when paginating.
            sort: Sort option.

        Returns:
            APIResponse with ``{"products": ...}`` plus pagination fields
            when a page was requested.
        """
        return await self._get(
            "/api/products",
            params={
                "category": category,
                "featured": "true" if featured else None,
                "limit": limit,
                "page": page,
                "pageSize": page_size,
                "sort": sort,
            },
        )

    async def list_feedbacks(self) -> APIResponse:
        """Get active customer feedback, newest first."""
        return await self._get("/api/feedbacks")
