"""Catalog operations: filtered listing and admin product writes."""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field
from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from libs.common.errors import NotFound
from libs.common.logging import get_logger
from libs.db.session import commit_or_raise
from services.store_service.models import (
    CatalogView,
    PriceBand,
    Product,
    ProductCategory,
    ProductSort,
)
from services.store_service.schemas import ProductFilters

logger = get_logger(__name__)


class ProductInput(BaseModel):
    """Scalar product fields. Updates resupply all of them."""

    name: str = Field(..., min_length=1, max_length=255)
    category: ProductCategory
    price: Decimal = Field(..., ge=0)
    description: Optional[str] = None
    stock: int = Field(100, ge=0)
    best_seller: bool = False
    hover_image: Optional[str] = None


def build_product_query(filters: ProductFilters):
    """
    Compose the listing query. Unknown filter values are ignored so no
    combination fails; an empty result is a valid answer.
    """
    query = select(Product)
    default_order = [Product.id.asc()]

    if filters.category == CatalogView.NEW_ARRIVALS.value:
        default_order = [Product.created_at.desc(), Product.id.desc()]
    elif filters.category == CatalogView.BEST_SELLERS.value:
        query = query.where(Product.best_seller.is_(True))
    elif filters.category:
        query = query.where(Product.category == filters.category)

    if filters.best_seller is not None:
        query = query.where(Product.best_seller.is_(filters.best_seller))

    if filters.price == PriceBand.UNDER_100.value:
        query = query.where(Product.price < 100)
    elif filters.price == PriceBand.FROM_100_TO_200.value:
        query = query.where(Product.price >= 100, Product.price <= 200)
    elif filters.price == PriceBand.OVER_200.value:
        query = query.where(Product.price > 200)

    if filters.sort == ProductSort.NEWEST.value:
        order = [Product.created_at.desc(), Product.id.desc()]
    elif filters.sort == ProductSort.PRICE_LOW.value:
        order = [Product.price.asc(), Product.id.asc()]
    elif filters.sort == ProductSort.PRICE_HIGH.value:
        order = [Product.price.desc(), Product.id.asc()]
    else:
        order = default_order

    return query.order_by(*order)


async def list_products(db: AsyncSession, filters: ProductFilters) -> list[Product]:
    result = await db.execute(build_product_query(filters))
    return list(result.scalars().all())


async def count_products(db: AsyncSession) -> int:
    result = await db.execute(select(func.count()).select_from(Product))
    return result.scalar() or 0


async def create_product(
    db: AsyncSession,
    fields: ProductInput,
    image: Optional[str],
    *,
    performed_by: str,
) -> Product:
    """Insert a product. The hover image falls back to the primary image."""
    product = Product(
        name=fields.name,
        category=fields.category.value,
        price=fields.price,
        image=image,
        hover_image=fields.hover_image or image,
        description=fields.description,
        stock=fields.stock,
        best_seller=fields.best_seller,
    )
    db.add(product)
    await commit_or_raise(db, "creating product")
    await db.refresh(product)

    logger.info("Product %s created by %s", product.id, performed_by)
    return product


async def get_product(db: AsyncSession, product_id: int) -> Product:
    product = await db.get(Product, product_id)
    if product is None:
        raise NotFound("Product not found")
    return product


async def update_product(
    db: AsyncSession,
    product_id: int,
    fields: ProductInput,
    image: Optional[str],
    *,
    performed_by: str,
) -> Product:
    """
    Replace every scalar field of a product.

    `image` is written as given: when no new file or URL is supplied the
    stored image becomes empty rather than keeping the previous one.
    """
    product = await get_product(db, product_id)

    product.name = fields.name
    product.category = fields.category.value
    product.price = fields.price
    product.description = fields.description
    product.stock = fields.stock
    product.best_seller = fields.best_seller
    product.image = image
    product.hover_image = fields.hover_image or image

    await commit_or_raise(db, "updating product")
    await db.refresh(product)

    logger.info("Product %s updated by %s", product.id, performed_by)
    return product


async def delete_product(db: AsyncSession, product_id: int, *, performed_by: str) -> bool:
    """
    Delete a product. Idempotent: a missing id is not an error.

    Returns whether a row was removed.
    """
    result = await db.execute(delete(Product).where(Product.id == product_id))
    await commit_or_raise(db, "deleting product")

    removed = bool(result.rowcount)
    if removed:
        logger.info("Product %s deleted by %s", product_id, performed_by)
    else:
        logger.info("Delete of missing product %s by %s ignored", product_id, performed_by)
    return removed
