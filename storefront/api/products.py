"""Product API endpoints.

Provides the product listing with category/featured filters, an
optional result cap and optional pagination.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from storefront.api.dependencies import get_catalog_service
from storefront.api.schemas import (
    ErrorResponse,
    PaginatedProductListResponse,
    ProductListResponse,
    ProductSchema,
    ValidationErrorResponse,
)
from storefront.catalog.exceptions import RetrievalError
from storefront.catalog.listing import (
    DEFAULT_SORT,
    MAX_PAGE,
    MAX_PAGE_SIZE,
    ListingOptions,
    PaginatedResult,
)
from storefront.catalog.service import CatalogService

router = APIRouter(prefix="/api/products", tags=["Products"])


# ============================================================================
# Endpoints
# ============================================================================


@router.get(
    "",
    response_model=PaginatedProductListResponse | ProductListResponse,
    responses={
        400: {"model": ValidationErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="List products",
    description=(
        "List active products, newest first. Supplying `page` switches to "
        "paginated mode, in which `limit` is the page size."
    ),
)
async def list_products(
    service: Annotated[CatalogService, Depends(get_catalog_service)],
    category: Annotated[
        str | None, Query(description="Category ID, or 'all' for every category")
    ] = None,
    featured: Annotated[
        bool, Query(description="Only products with stock above the featured threshold")
    ] = False,
    limit: Annotated[
        int | None,
        Query(ge=1, le=MAX_PAGE_SIZE, description="Result cap, or page size when paginating"),
    ] = None,
    page: Annotated[
        int | None, Query(ge=1, le=MAX_PAGE, description="Page number (1-based)")
    ] = None,
    page_size: Annotated[
        int | None,
        Query(alias="pageSize", ge=1, le=MAX_PAGE_SIZE, description="Items per page"),
    ] = None,
    sort: Annotated[
        str, Query(description="newest, oldest, price_asc, price_desc or name")
    ] = DEFAULT_SORT,
) -> PaginatedProductListResponse | ProductListResponse:
    """List active products.

    Args:
        service: Catalog service.
        category: Category filter.
        featured: Featured filter.
        limit: Result cap, or page size in paginated mode.
        page: Page number; enables paginated mode.
        page_size: Explicit page size.
        sort: Sort option.

    Returns:
        ``{products}``, or ``{products, total, page, totalPages}`` when
        a page was requested.

    Raises:
        HTTPException: 500 if the row or count query fails.
    """
    options = ListingOptions(
        category=category,
        featured=featured,
        limit=limit,
        page=page,
        page_size=page_size,
        sort=sort,
    )

    try:
        result = await service.list_products(options)
    except RetrievalError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch products",
        )

    if isinstance(result, PaginatedResult):
        return PaginatedProductListResponse(
            products=[ProductSchema.model_validate(p) for p in result.items],
            total=result.total,
            page=result.page,
            total_pages=result.total_pages,
        )

    return ProductListResponse(
        products=[ProductSchema.model_validate(p) for p in result]
    )
