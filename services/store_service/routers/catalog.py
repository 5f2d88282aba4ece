"""Store catalog router: public product listing."""

from typing import Optional

from fastapi import APIRouter, Depends
from libs.db.session import get_async_db
from services.store_service.schemas import ProductFilters, ProductResponse
from services.store_service.services import catalog as catalog_store
from sqlalchemy.ext.asyncio import AsyncSession

router = APIRouter(tags=["store"])

TRUE_FLAGS = {"1", "true", "yes", "on"}
FALSE_FLAGS = {"0", "false", "no", "off"}


def parse_flag(value: Optional[str]) -> Optional[bool]:
    """Lenient boolean query flag; anything unrecognised means "no filter"."""
    if value is None:
        return None
    value = value.strip().lower()
    if value in TRUE_FLAGS:
        return True
    if value in FALSE_FLAGS:
        return False
    return None


@router.get("/products", response_model=list[ProductResponse])
async def list_products(
    category: Optional[str] = None,
    best_seller: Optional[str] = None,
    price: Optional[str] = None,
    sort: Optional[str] = None,
    db: AsyncSession = Depends(get_async_db),
):
    """Browse products. Filters compose; unknown values are ignored."""
    filters = ProductFilters(
        category=category or None,
        best_seller=parse_flag(best_seller),
        price=price or None,
        sort=sort or None,
    )
    return await catalog_store.list_products(db, filters)
