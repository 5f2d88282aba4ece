"""Seed the demo catalog.

The app seeds on startup when the products table is empty (SEED_PRODUCTS).
It can also be run by hand:

Usage:
    python -m services.store_service.seed_store_data
"""

import asyncio
from decimal import Decimal

from libs.common.logging import configure_logging, get_logger
from libs.db.base import Base
from libs.db.config import AsyncSessionLocal, engine
from services.store_service.models import Product
from services.store_service.services.catalog import count_products
from sqlalchemy.ext.asyncio import AsyncSession

logger = get_logger(__name__)

UNSPLASH = "https://images.unsplash.com/photo-{}?q=80&w=800&auto=format&fit=crop"

# (name, category, price, image id, hover image id, best seller)
SEED_PRODUCTS = [
    ("Velvet Ease", "Sandals", 180, "1543163521-1bf539c55dd2", None, True),
    ("Summer Breeze", "Sandals", 150, "1562273138-f46be4ebdf6c", None, False),
    ("Golden Hour", "Sandals", 220, "1535043934128-cf0b28d52f95", None, False),
    ("Cozy Night", "Slippers", 90, "1516478177764-9fe5bd7e9717", None, False),
    ("Luxe Slide", "Slippers", 120, "1560769619-37e7745814e5", None, False),
    ("Home Comfort", "Slippers", 85, "1595341888016-a392ef81b7de", None, False),
    ("Urban Runner", "Sneakers", 250, "1560769629-975e127dfc17", None, True),
    ("Street King", "Sneakers", 280, "1549298916-b41d501d3772", None, False),
    ("Retro High", "Sneakers", 280, "1607522370275-f14bc3a5d288", "1595950653106-6c9ebd614d3a", False),
    ("Oxford Classic", "Formal", 350, "1614252369475-531eba835eb1", None, True),
    ("Derby Elite", "Formal", 320, "1478146896981-b80c463e4381", None, False),
    ("Monk Strap Pro", "Formal", 380, "1449505278894-297fdb3edbc1", "1560343090-f0409e92791a", False),
]


def build_seed_products() -> list[Product]:
    products = []
    for name, category, price, image_id, hover_id, best_seller in SEED_PRODUCTS:
        image = UNSPLASH.format(image_id)
        products.append(
            Product(
                name=name,
                category=category,
                price=Decimal(price),
                image=image,
                hover_image=UNSPLASH.format(hover_id) if hover_id else image,
                best_seller=best_seller,
            )
        )
    return products


async def seed_products(db: AsyncSession) -> int:
    """Insert the demo catalog if the products table is empty. Returns rows added."""
    existing = await count_products(db)
    if existing:
        logger.debug("Catalog already has %d products, skipping seed", existing)
        return 0

    products = build_seed_products()
    db.add_all(products)
    await db.commit()
    logger.info("Seeded %d products", len(products))
    return len(products)


async def main():
    configure_logging()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    async with AsyncSessionLocal() as db:
        await seed_products(db)
    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())
