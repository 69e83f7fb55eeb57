"""API layer module.

Contains FastAPI routers and response schemas.
"""

from storefront.api.categories import router as categories_router
from storefront.api.feedbacks import router as feedbacks_router
from storefront.api.health import router as health_router
from storefront.api.products import router as products_router

__all__ = [
    "categories_router",
    "feedbacks_router",
    "health_router",
    "products_router",
]
