"""Sample storefront data generator with deterministic seeding.

Generates categories, products and customer feedback as plain rows.
Used by the seed script to populate a development database. Uses
seeded random for reproducibility.
"""

import hashlib
import random
import re
import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Any


# ============================================================================
# Constants
# ============================================================================

CATEGORIES = [
    "Wellness",
    "Gourmet",
    "Home Decor",
    "Kitchen",
    "Stationery",
    "Baby",
]

# Price ranges by category (in cents)
PRICE_RANGES: dict[str, tuple[int, int]] = {
    "Wellness": (1499, 8999),
    "Gourmet": (999, 5999),
    "Home Decor": (2499, 19999),
    "Kitchen": (1999, 14999),
    "Stationery": (499, 3999),
    "Baby": (1299, 9999),
}

ADJECTIVES = [
    "Classic",
    "Organic",
    "Handmade",
    "Premium",
    "Rustic",
    "Modern",
    "Cozy",
    "Artisan",
    "Essential",
]

NOUNS: dict[str, list[str]] = {
    "Wellness": ["Candle", "Bath Set", "Tea Blend", "Essential Oil"],
    "Gourmet": ["Chocolate Box", "Olive Oil", "Honey Jar", "Coffee Beans"],
    "Home Decor": ["Vase", "Throw Pillow", "Wall Print", "Planter"],
    "Kitchen": ["Cutting Board", "Mug Set", "Apron", "Spice Rack"],
    "Stationery": ["Notebook", "Pen Set", "Planner", "Card Pack"],
    "Baby": ["Blanket", "Plush Toy", "Bib Set", "Rattle"],
}

REVIEWERS = [
    ("Ava Martin", "ava.martin@example.com"),
    ("Noah Chen", "noah.chen@example.com"),
    ("Mia Rossi", "mia.rossi@example.com"),
    ("Liam Novak", "liam.novak@example.com"),
    ("Zoe Haddad", "zoe.haddad@example.com"),
]

COMMENTS = [
    "Arrived quickly and looks even better in person.",
    "Lovely quality, bought a second one as a gift.",
    "Good value for the price.",
    "Packaging was beautiful, the recipient loved it.",
    "Exactly as described.",
]


def slugify(value: str) -> str:
    """Lowercase, hyphen-separated slug."""
    return re.sub(r"[^a-z0-9]+", "-", value.lower()).strip("-")


# ============================================================================
# Generator Configuration
# ============================================================================


@dataclass
class GeneratorConfig:
    """Configuration for sample data generation.

    Attributes:
        seed: Random seed for reproducibility.
        products_per_category: Number of products per category.
        feedback_count: Number of feedback rows.
        inactive_ratio: Share of products and feedback marked inactive.
    """

    seed: int = 42
    products_per_category: int = 10
    feedback_count: int = 12
    inactive_ratio: float = 0.1

    @classmethod
    def small(cls) -> "GeneratorConfig":
        """Create config for a small catalog (~30 products)."""
        return cls(seed=42, products_per_category=5, feedback_count=8)

    @classmethod
    def full(cls) -> "GeneratorConfig":
        """Create config for a full catalog (~120 products)."""
        return cls(seed=42, products_per_category=20, feedback_count=40)


@dataclass
class SampleCatalog:
    """Generated rows, keyed like the store collections."""

    categories: list[dict[str, Any]]
    products: list[dict[str, Any]]
    feedbacks: list[dict[str, Any]]

    def as_collections(self) -> dict[str, list[dict[str, Any]]]:
        """Rows keyed by collection name."""
        return {
            "categories": self.categories,
            "products": self.products,
            "user_feedbacks": self.feedbacks,
        }


# ============================================================================
# Generator
# ============================================================================


class CatalogGenerator:
    """Generates storefront rows with deterministic seeding.

    Example usage:
        catalog = CatalogGenerator(GeneratorConfig.small()).generate()
        print(len(catalog.products))
    """

    def __init__(self, config: GeneratorConfig) -> None:
        """Initialize generator with configuration.

        Args:
            config: Generator configuration.
        """
        self.config = config
        self.rng = random.Random(config.seed)
        self.epoch = datetime(2025, 1, 1, tzinfo=timezone.utc)

    def _deterministic_id(self, *args: str | int) -> str:
        """Create a deterministic UUID from arguments."""
        data = "|".join(str(a) for a in (self.config.seed, *args))
        return str(uuid.UUID(bytes=hashlib.md5(data.encode()).digest()))

    def _generate_category(self, index: int, name: str) -> dict[str, Any]:
        return {
            "id": self._deterministic_id("category", name),
            "name": name,
            "slug": slugify(name),
            "created_at": self.epoch + timedelta(days=index),
        }

    def _generate_product(self, category: dict[str, Any], index: int) -> dict[str, Any]:
        adj = self.rng.choice(ADJECTIVES)
        noun = self.rng.choice(NOUNS[category["name"]])
        name = f"{adj} {noun} {index + 1}"
        low, high = PRICE_RANGES[category["name"]]

        product_id = self._deterministic_id("product", category["name"], index)
        return {
            "id": product_id,
            "name": name,
            "slug": slugify(f"{category['slug']} {name}"),
            "description": f"{adj} {noun.lower()} from our {category['name'].lower()} collection.",
            "price": float(Decimal(self.rng.randint(low, high)) / 100),
            "image_url": f"https://picsum.photos/seed/{product_id[:8]}/400/400",
            "category_id": category["id"],
            "stock_quantity": self.rng.randint(0, 40),
            "is_active": self.rng.random() >= self.config.inactive_ratio,
            "created_at": self.epoch + timedelta(hours=self.rng.randint(0, 24 * 365)),
        }

    def _generate_feedback(self, index: int, products: list[dict[str, Any]]) -> dict[str, Any]:
        user_name, user_email = self.rng.choice(REVIEWERS)
        return {
            "id": self._deterministic_id("feedback", index),
            "user_name": user_name,
            "user_email": user_email,
            "rating": self.rng.randint(3, 5),
            "comment": self.rng.choice(COMMENTS),
            "is_active": self.rng.random() >= self.config.inactive_ratio,
            "product_id": self.rng.choice(products)["id"] if products else None,
            "created_at": self.epoch + timedelta(hours=self.rng.randint(0, 24 * 365)),
        }

    def generate(self) -> SampleCatalog:
        """Generate the full sample catalog."""
        categories = [
            self._generate_category(i, name) for i, name in enumerate(CATEGORIES)
        ]
        products = [
            self._generate_product(category, i)
            for category in categories
            for i in range(self.config.products_per_category)
        ]
        feedbacks = [
            self._generate_feedback(i, products) for i in range(self.config.feedback_count)
        ]
        return SampleCatalog(categories=categories, products=products, feedbacks=feedbacks)
