"""Category API endpoints.

Provides the category list and single-category lookup by slug.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from storefront.api.dependencies import get_catalog_service
from storefront.api.schemas import (
    CategoryListResponse,
    CategoryResponse,
    CategorySchema,
    ErrorResponse,
)
from storefront.catalog.exceptions import NotFoundError, RetrievalError
from storefront.catalog.service import CatalogService

router = APIRouter(prefix="/api/categories", tags=["Categories"])


# ============================================================================
# Endpoints
# ============================================================================


@router.get(
    "",
    response_model=CategoryResponse | CategoryListResponse,
    responses={
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="List categories",
    description="List all categories sorted by name, or look one up by slug.",
)
async def get_categories(
    service: Annotated[CatalogService, Depends(get_catalog_service)],
    slug: Annotated[str | None, Query(description="Exact category slug")] = None,
) -> CategoryResponse | CategoryListResponse:
    """Get one category by slug, or all categories.

    Args:
        service: Catalog service.
        slug: Optional slug for a single-category lookup.

    Returns:
        ``{category}`` when a slug is given, otherwise ``{categories}``.

    Raises:
        HTTPException: 404 if the slug is unknown, 500 on query failure.
    """
    if slug:
        try:
            category = await service.get_category_by_slug(slug)
        except NotFoundError:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Category not found",
            )
        except RetrievalError:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to fetch categories",
            )
        return CategoryResponse(category=CategorySchema.model_validate(category))

    try:
        categories = await service.list_categories()
    except RetrievalError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch categories",
        )

    return CategoryListResponse(
        categories=[CategorySchema.model_validate(c) for c in categories]
    )
