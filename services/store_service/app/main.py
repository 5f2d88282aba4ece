"""FastAPI application for the Store Service."""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from libs.auth.passwords import get_admin_password_hash
from libs.common.config import get_settings
from libs.common.emails.client import get_mail_transport
from libs.common.emails.core import MailTransport
from libs.common.error_handler import add_exception_handlers
from libs.common.logging import get_logger
from libs.common.middleware import add_observability_middleware
from libs.common.rate_limit import limiter, rate_limit_exceeded_handler
from libs.db.base import Base
from libs.db.config import AsyncSessionLocal, engine
from services.store_service.routers import (
    admin_auth_router,
    admin_catalog_router,
    admin_orders_router,
    catalog_router,
    contact_router,
    orders_router,
    pages_router,
)
from services.store_service.seed_store_data import seed_products
from services.store_service.storage import UPLOADS_ROUTE_NAME, get_upload_storage
from slowapi.errors import RateLimitExceeded

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    if settings.SEED_PRODUCTS:
        async with AsyncSessionLocal() as db:
            await seed_products(db)

    if settings.ENVIRONMENT != "local" and settings.JWT_SECRET == "dev-secret-change-me":
        logger.warning("JWT_SECRET is the development default; set a real secret")
    # Resolves and caches the admin password hash at startup
    if not settings.ADMIN_EMAIL or get_admin_password_hash() is None:
        logger.warning("Admin credentials not set; admin login is disabled")
    if get_mail_transport() is None:
        logger.warning("SMTP credentials not set; notification emails will be skipped")

    yield

    await engine.dispose()


def create_app() -> FastAPI:
    """Create and configure the Store Service FastAPI app."""
    settings = get_settings()

    app = FastAPI(
        title="Veloce Store Service",
        version="0.1.0",
        description="Storefront API - catalog, checkout, contact form and admin panel.",
        lifespan=lifespan,
    )

    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    app.add_middleware(
        CORSMiddleware,
        allow_origin_regex=settings.CORS_ORIGIN_REGEX,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    add_observability_middleware(app)
    add_exception_handlers(app)

    @app.get("/health", tags=["system"])
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "ok", "service": "store"}

    @app.get("/api/_smtp", tags=["system"])
    async def smtp_status(
        transport: Optional[MailTransport] = Depends(get_mail_transport),
    ) -> dict[str, bool]:
        """Non-sensitive mail configuration diagnostics."""
        return {
            "hasUser": bool(settings.SMTP_USER),
            "hasPass": bool(settings.SMTP_PASS),
            "transporterActive": transport is not None,
        }

    # Public store routes
    app.include_router(catalog_router, prefix="/api")
    app.include_router(orders_router, prefix="/api")
    app.include_router(contact_router, prefix="/api")

    # Admin routes
    app.include_router(admin_auth_router, prefix="/api")
    app.include_router(admin_catalog_router, prefix="/api")
    app.include_router(admin_orders_router, prefix="/api")

    storage = get_upload_storage()
    storage.ensure_root()
    app.mount(
        "/uploads", StaticFiles(directory=storage.root), name=UPLOADS_ROUTE_NAME
    )

    app.include_router(pages_router)

    return app


app = create_app()
