"""API schemas for the storefront.

Pydantic models for response validation and serialization.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# Common Schemas
# ============================================================================


class ErrorDetail(BaseModel):
    """Detailed error information."""

    field: str | None = Field(default=None, description="Field that caused the error")
    message: str = Field(..., description="Error message")


class ErrorResponse(BaseModel):
    """Standard error response.

    All API errors carry an ``error`` message.
    """

    error: str = Field(..., description="Human-readable error message")


class ValidationErrorResponse(ErrorResponse):
    """Error response for malformed query parameters."""

    details: list[ErrorDetail] = Field(
        default_factory=list, description="Per-parameter problems"
    )


# ============================================================================
# Category Schemas
# ============================================================================


class CategorySchema(BaseModel):
    """Product category."""

    id: str
    name: str
    slug: str
    created_at: datetime


class CategoryListResponse(BaseModel):
    """All categories, sorted by name."""

    categories: list[CategorySchema]


class CategoryResponse(BaseModel):
    """Single category looked up by slug."""

    category: CategorySchema


# ============================================================================
# Product Schemas
# ============================================================================


class ProductSchema(BaseModel):
    """Product as listed in the storefront."""

    id: str
    name: str
    slug: str
    description: str | None = None
    price: float = Field(..., ge=0, description="Price in major currency units")
    image_url: str | None = None
    category_id: str | None = None
    stock_quantity: int = Field(..., ge=0)
    is_active: bool
    created_at: datetime


class ProductListResponse(BaseModel):
    """Unpaginated product listing."""

    products: list[ProductSchema]


class PaginatedProductListResponse(ProductListResponse):
    """Paginated product listing."""

    model_config = ConfigDict(populate_by_name=True)

    total: int = Field(..., description="Total number of matching products")
    page: int = Field(..., description="Current page number")
    total_pages: int = Field(..., alias="totalPages", description="Total number of pages")


# ============================================================================
# Feedback Schemas
# ============================================================================


class FeedbackProductSchema(BaseModel):
    """Product fields embedded in a feedback entry."""

    name: str
    image_url: str | None = None


class FeedbackSchema(BaseModel):
    """Customer feedback (testimonial)."""

    id: str
    user_name: str
    user_email: str
    rating: int
    comment: str
    created_at: datetime
    product_id: str | None = None
    products: FeedbackProductSchema | None = None


class FeedbackListResponse(BaseModel):
    """Active feedback, newest first."""

    feedbacks: list[FeedbackSchema]
