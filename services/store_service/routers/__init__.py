"""Store service routers package."""

from services.store_service.routers.admin_auth import router as admin_auth_router
from services.store_service.routers.admin_catalog import router as admin_catalog_router
from services.store_service.routers.admin_orders import router as admin_orders_router
from services.store_service.routers.catalog import router as catalog_router
from services.store_service.routers.contact import router as contact_router
from services.store_service.routers.orders import router as orders_router
from services.store_service.routers.pages import router as pages_router

__all__ = [
    "admin_auth_router",
    "admin_catalog_router",
    "admin_orders_router",
    "catalog_router",
    "contact_router",
    "orders_router",
    "pages_router",
]
