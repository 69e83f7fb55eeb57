"""Feedback API endpoints.

Provides customer testimonials joined with the reviewed product.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from storefront.api.dependencies import get_catalog_service
from storefront.api.schemas import ErrorResponse, FeedbackListResponse, FeedbackSchema
from storefront.catalog.exceptions import RetrievalError
from storefront.catalog.service import CatalogService

router = APIRouter(prefix="/api/feedbacks", tags=["Feedbacks"])


@router.get(
    "",
    response_model=FeedbackListResponse,
    responses={500: {"model": ErrorResponse}},
    summary="List feedback",
    description="Active customer feedback, newest first, with product name and image.",
)
async def list_feedbacks(
    service: Annotated[CatalogService, Depends(get_catalog_service)],
) -> FeedbackListResponse:
    """List active feedback.

    Raises:
        HTTPException: 500 on query failure.
    """
    try:
        feedbacks = await service.list_feedbacks()
    except RetrievalError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch feedbacks",
        )

    return FeedbackListResponse(
        feedbacks=[FeedbackSchema.model_validate(f) for f in feedbacks]
    )
