"""Database seeding with generated sample data."""

from decimal import Decimal
from typing import Any

import structlog
from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.catalog.generator import CatalogGenerator, GeneratorConfig
from storefront.infrastructure.database import Base, engine
from storefront.infrastructure.models import CategoryModel, FeedbackModel, ProductModel

logger = structlog.get_logger()


async def create_tables() -> None:
    """Create database tables if they don't exist."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def seed_sample_catalog(
    session: AsyncSession,
    config: GeneratorConfig,
    clear_existing: bool = True,
) -> dict[str, Any]:
    """Insert a generated sample catalog.

    Args:
        session: Async SQLAlchemy session; committed on success.
        config: Generator configuration.
        clear_existing: Whether to delete existing rows first.

    Returns:
        Seeding result with counts.
    """
    if clear_existing:
        # Children first (foreign keys)
        await session.execute(delete(FeedbackModel))
        await session.execute(delete(ProductModel))
        await session.execute(delete(CategoryModel))

    catalog = CatalogGenerator(config).generate()

    session.add_all(CategoryModel(**row) for row in catalog.categories)
    await session.flush()
    session.add_all(
        ProductModel(**{**row, "price": Decimal(str(row["price"]))})
        for row in catalog.products
    )
    await session.flush()
    session.add_all(FeedbackModel(**row) for row in catalog.feedbacks)
    await session.commit()

    result = {
        "categories_created": len(catalog.categories),
        "products_created": len(catalog.products),
        "active_products": sum(1 for p in catalog.products if p["is_active"]),
        "feedbacks_created": len(catalog.feedbacks),
    }
    logger.info("Sample catalog seeded", seed=config.seed, **result)
    return result
