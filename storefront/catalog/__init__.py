"""Storefront catalog.

Provides the listing query builder, the catalog read service and the
sample data generator.
"""

from storefront.catalog.exceptions import CatalogError, NotFoundError, RetrievalError
from storefront.catalog.generator import CatalogGenerator, GeneratorConfig, SampleCatalog
from storefront.catalog.listing import ListingOptions, ListingQueryBuilder, PaginatedResult
from storefront.catalog.service import CatalogService

__all__ = [
    # Errors
    "CatalogError",
    "NotFoundError",
    "RetrievalError",
    # Generator
    "CatalogGenerator",
    "GeneratorConfig",
    "SampleCatalog",
    # Listing
    "ListingOptions",
    "ListingQueryBuilder",
    "PaginatedResult",
    # Service
    "CatalogService",
]
