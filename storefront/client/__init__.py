"""Storefront API client and browsing state."""

from storefront.client.api_client import APIError, APIResponse, StorefrontClient
from storefront.client.browser import ProductBrowser

__all__ = [
    "APIError",
    "APIResponse",
    "ProductBrowser",
    "StorefrontClient",
]
