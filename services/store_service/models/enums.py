"""Enum definitions for store service models."""

import enum


class ProductCategory(str, enum.Enum):
    SANDALS = "Sandals"
    SLIPPERS = "Slippers"
    SNEAKERS = "Sneakers"
    FORMAL = "Formal"


class CatalogView(str, enum.Enum):
    """Pseudo-categories used by the storefront pages, never stored."""

    NEW_ARRIVALS = "new-arrivals"
    BEST_SELLERS = "best-sellers"


class PriceBand(str, enum.Enum):
    UNDER_100 = "0-100"
    FROM_100_TO_200 = "100-200"
    OVER_200 = "200-above"


class ProductSort(str, enum.Enum):
    NEWEST = "newest"
    PRICE_LOW = "price-low"
    PRICE_HIGH = "price-high"


class OrderStatus(str, enum.Enum):
    PENDING = "Pending"
    PROCESSING = "Processing"
    SHIPPED = "Shipped"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"
