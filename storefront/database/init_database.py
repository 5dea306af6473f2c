"""
Schema bootstrap and sample catalog data.

Usage:
    python -m storefront.database.init_database [--seed]
"""

import argparse
import asyncio
import logging

from sqlalchemy import func, select

from storefront.config.settings import get_settings
from storefront.database.async_db import Database
from storefront.models.db import Category, Product

logger = logging.getLogger(__name__)

SAMPLE_CATALOG = {
    ("Electronics", "Phones, laptops and accessories"): [
        {
            "name": "Wireless Headphones",
            "price": 199.0,
            "original_price": 249.0,
            "short_description": "Noise cancelling over-ear headphones",
            "stock_quantity": 25,
            "sku": "ELEC-HP-001",
            "is_featured": True,
        },
        {
            "name": "Smart Watch",
            "price": 299.0,
            "short_description": "Fitness tracking and notifications",
            "stock_quantity": 15,
            "sku": "ELEC-SW-002",
        },
    ],
    ("Home", "Furniture and decoration"): [
        {
            "name": "Arabic Coffee Set",
            "price": 89.5,
            "original_price": 120.0,
            "short_description": "Dallah with six cups",
            "stock_quantity": 40,
            "sku": "HOME-CS-001",
            "is_featured": True,
        },
    ],
}


async def seed_catalog(database: Database) -> int:
    """Insert the sample catalog when the products table is empty. Returns inserted products."""
    async with database.session() as session:
        existing = await session.scalar(select(func.count()).select_from(Product))
        if existing:
            logger.info(f"Catalog already has {existing} products, skipping seed")
            return 0

        inserted = 0
        for (category_name, description), products in SAMPLE_CATALOG.items():
            category = Category(name=category_name, description=description)
            session.add(category)
            await session.flush()
            for data in products:
                session.add(Product(category_id=category.id, **data))
                inserted += 1

    logger.info(f"Seeded {inserted} sample products")
    return inserted


async def init_database(database: Database, seed: bool = False) -> None:
    await database.create_tables()
    logger.info("Database schema is ready")
    if seed:
        await seed_catalog(database)


async def _run(seed: bool) -> None:
    database = Database.from_settings(get_settings())
    try:
        await init_database(database, seed=seed)
    finally:
        await database.dispose()


def main() -> None:
    parser = argparse.ArgumentParser(description="Create the storefront schema")
    parser.add_argument("--seed", action="store_true", help="insert sample catalog data")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO)
    asyncio.run(_run(args.seed))


if __name__ == "__main__":
    main()
