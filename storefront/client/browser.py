"""Product browsing state.

Tracks the selected category, current page and the last fetched page of
products. Every fetch takes a generation number; a response that comes
back after a newer fetch has started is dropped, so a slow response for
an old category or page can never overwrite a newer one.
"""

from typing import Any

import structlog

from storefront.client.api_client import StorefrontClient

logger = structlog.get_logger()

ALL_CATEGORIES = "all"


class ProductBrowser:
    """Paginated, category-filtered product browsing.

    Example usage:
        browser = ProductBrowser(client)
        browser.select_category(category_id)
        await browser.refresh()
        print(browser.products, browser.total_pages)
    """

    def __init__(self, client: StorefrontClient, page_size: int = 12) -> None:
        self.client = client
        self.page_size = page_size

        self.category = ALL_CATEGORIES
        self.page = 1

        self.products: list[dict[str, Any]] = []
        self.total = 0
        self.total_pages = 0
        self.loading = False
        self.error: str | None = None

        self._generation = 0

    @property
    def generation(self) -> int:
        """Number of the most recently started fetch."""
        return self._generation

    def select_category(self, category: str | None) -> None:
        """Switch category and go back to the first page."""
        self.category = category or ALL_CATEGORIES
        self.page = 1

    def go_to_page(self, page: int) -> None:
        """Switch to another page of the current category."""
        if page < 1:
            raise ValueError(f"Page must be >= 1, got {page}")
        self.page = page

    async def refresh(self) -> bool:
        """Fetch the current page.

        Returns:
            True if the response was applied, False if it failed or was
            superseded by a newer refresh.
        """
        self._generation += 1
        generation = self._generation
        self.loading = True

        result = await self.client.list_products(
            category=None if self.category == ALL_CATEGORIES else self.category,
            page=self.page,
            page_size=self.page_size,
        )

        if generation != self._generation:
            logger.debug(
                "Discarding superseded product response",
                generation=generation,
                current=self._generation,
            )
            return False

        self.loading = False

        if not result.success or result.data is None:
            self.error = result.error.message if result.error else "Failed to fetch products"
            return False

        self.error = None
        self.products = result.data.get("products", [])
        self.total = result.data.get("total", len(self.products))
        self.total_pages = result.data.get("totalPages", 0)
        return True
