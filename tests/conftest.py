"""Shared test fixtures."""

from datetime import datetime, timedelta, timezone
from itertools import count
from typing import Any, Callable, Generator

import pytest
from fastapi.testclient import TestClient

from storefront.api.dependencies import get_store
from storefront.infrastructure.memory_store import InMemoryStore
from storefront.main import app

BASE_TIME = datetime(2025, 6, 1, tzinfo=timezone.utc)


@pytest.fixture
def store() -> InMemoryStore:
    """Create an empty in-memory store with all storefront collections."""
    return InMemoryStore({"categories": [], "products": [], "user_feedbacks": []})


@pytest.fixture
def client(store: InMemoryStore) -> Generator[TestClient, None, None]:
    """Create test client backed by the in-memory store."""
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_category(store: InMemoryStore) -> Callable[..., dict[str, Any]]:
    """Factory adding a category to the store."""
    sequence = count(1)

    def factory(**overrides: Any) -> dict[str, Any]:
        n = next(sequence)
        row = {
            "id": f"cat{n}",
            "name": f"Category {n}",
            "slug": f"category-{n}",
            "created_at": BASE_TIME + timedelta(days=n),
        }
        row.update(overrides)
        store.add("categories", row)
        return row

    return factory


@pytest.fixture
def make_product(store: InMemoryStore) -> Callable[..., dict[str, Any]]:
    """Factory adding a product to the store.

    Each product is created one minute after the previous one, so later
    products sort first under the default newest-first order.
    """
    sequence = count(1)

    def factory(**overrides: Any) -> dict[str, Any]:
        n = next(sequence)
        row = {
            "id": f"prod{n}",
            "name": f"Product {n}",
            "slug": f"product-{n}",
            "description": None,
            "price": 10.0 + n,
            "image_url": f"https://img.example.com/{n}.jpg",
            "category_id": None,
            "stock_quantity": 5,
            "is_active": True,
            "created_at": BASE_TIME + timedelta(minutes=n),
        }
        row.update(overrides)
        store.add("products", row)
        return row

    return factory


@pytest.fixture
def make_feedback(store: InMemoryStore) -> Callable[..., dict[str, Any]]:
    """Factory adding a feedback entry to the store."""
    sequence = count(1)

    def factory(**overrides: Any) -> dict[str, Any]:
        n = next(sequence)
        row = {
            "id": f"fb{n}",
            "user_name": f"Reviewer {n}",
            "user_email": f"reviewer{n}@example.com",
            "rating": 5,
            "comment": "Lovely gift.",
            "is_active": True,
            "product_id": None,
            "created_at": BASE_TIME + timedelta(minutes=n),
        }
        row.update(overrides)
        store.add("user_feedbacks", row)
        return row

    return factory
