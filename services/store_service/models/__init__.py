"""Store Service models package."""

from services.store_service.models.catalog import Product
from services.store_service.models.commerce import Order
from services.store_service.models.enums import (
    CatalogView,
    OrderStatus,
    PriceBand,
    ProductCategory,
    ProductSort,
)

__all__ = [
    "CatalogView",
    "Order",
    "OrderStatus",
    "PriceBand",
    "Product",
    "ProductCategory",
    "ProductSort",
]
