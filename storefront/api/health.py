"""Health check endpoints.

Provides endpoints for monitoring service health and readiness.
"""

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from storefront.api.dependencies import get_store
from storefront.infrastructure.config import settings
from storefront.infrastructure.store import DataStore, StoreError, StoreQuery

router = APIRouter()

logger = structlog.get_logger()


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str
    service: str
    version: str


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Check service health.

    Returns:
        Health status with service name and version.
    """
    return HealthResponse(
        status="healthy",
        service="storefront-api",
        version=settings.api_version,
    )


@router.get("/ready")
async def readiness_check(
    store: Annotated[DataStore, Depends(get_store)],
) -> dict[str, str]:
    """Check if the data store answers queries.

    Returns:
        Readiness status.

    Raises:
        HTTPException: 503 if the store query fails.
    """
    try:
        await store.count(StoreQuery("categories"))
    except StoreError as e:
        logger.warning("Readiness check failed", error=e.message)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Data store unavailable",
        )
    return {"status": "ready"}
