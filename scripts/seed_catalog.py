#!/usr/bin/env python3
"""Seed storefront catalog script.

Generates and seeds categories, products and customer feedback using
deterministic generation.

Usage:
    python scripts/seed_catalog.py --mode small
    python scripts/seed_catalog.py --mode full --seed 7
    python scripts/seed_catalog.py --mode small --no-clear
"""

import argparse
import asyncio
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from storefront.catalog.generator import GeneratorConfig
from storefront.infrastructure.config import settings
from storefront.infrastructure.database import async_session_factory
from storefront.infrastructure.logging_config import configure_logging
from storefront.infrastructure.seed import create_tables, seed_sample_catalog


async def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Seed storefront catalog with sample data",
    )
    parser.add_argument(
        "--mode",
        choices=["small", "full"],
        default="small",
        help="Catalog size: small (~30 products) or full (~120 products)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Override the random seed",
    )
    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Don't clear existing rows before seeding",
    )

    args = parser.parse_args()
    configure_logging(settings.log_level, debug=settings.debug)

    config = GeneratorConfig.full() if args.mode == "full" else GeneratorConfig.small()
    if args.seed is not None:
        config.seed = args.seed

    print("=" * 60)
    print("Storefront Catalog Seeder")
    print("=" * 60)
    print(f"Mode: {args.mode}")
    print(f"Seed: {config.seed}")
    print(f"Clear existing: {not args.no_clear}")
    print()

    print("Creating database tables...")
    await create_tables()
    print("Tables ready.")
    print()

    async with async_session_factory() as session:
        result = await seed_sample_catalog(
            session,
            config,
            clear_existing=not args.no_clear,
        )

    print(f"  ✓ Categories: {result['categories_created']}")
    print(f"  ✓ Products: {result['products_created']} ({result['active_products']} active)")
    print(f"  ✓ Feedbacks: {result['feedbacks_created']}")
    print()
    print("=" * 60)
    print("Seeding complete!")
    print("=" * 60)


if __name__ == "__main__":
    asyncio.run(main())
