import os
import tempfile
from pathlib import Path
from typing import AsyncGenerator, Optional

from tests.stubs import ADMIN_EMAIL, ADMIN_PASSWORD, FakeMailTransport

# Settings are cached on first import, so the test environment goes first
_tmp_root = Path(tempfile.mkdtemp(prefix="veloce-tests-"))
_frontend_dir = _tmp_root / "frontend"
(_frontend_dir / "admin" / "login").mkdir(parents=True)
(_frontend_dir / "admin.html").write_text("<h1>Admin dashboard</h1>")
(_frontend_dir / "admin" / "orders.html").write_text("<h1>Orders</h1>")
(_frontend_dir / "admin" / "login" / "index.html").write_text("<h1>Admin login</h1>")

os.environ.update(
    {
        "ENVIRONMENT": "local",
        "DATABASE_URL": "sqlite+aiosqlite:///:memory:",
        "ADMIN_EMAIL": ADMIN_EMAIL,
        "ADMIN_PASSWORD": ADMIN_PASSWORD,
        "ADMIN_PASSWORD_HASH": "",
        "JWT_SECRET": "test-signing-secret",
        "TOKEN_FORMAT": "hmac",
        "SMTP_USER": "",
        "SMTP_PASS": "",
        "ORDER_NOTIFY_EMAIL": "orders@veloce.test",
        "UPLOAD_DIR": str(_tmp_root / "uploads"),
        "FRONTEND_DIR": str(_frontend_dir),
        "RATE_LIMIT_ENABLED": "false",
        "SEED_PRODUCTS": "false",
    }
)

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from libs.auth.tokens import issue_session_token  # noqa: E402
from libs.common.config import get_settings  # noqa: E402
from libs.common.emails.client import get_mail_transport  # noqa: E402
from libs.db.base import Base  # noqa: E402
from libs.db.session import get_async_db  # noqa: E402
from services.store_service.app.main import app  # noqa: E402
from services.store_service import models as _store_models  # noqa: E402,F401

settings = get_settings()


@pytest_asyncio.fixture
async def test_engine():
    """
    A fresh in-memory SQLite database per test. StaticPool keeps every
    connection on the same memory database.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        future=True,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    session_factory = async_sessionmaker(
        bind=test_engine, class_=AsyncSession, expire_on_commit=False
    )
    async with session_factory() as session:
        yield session


@pytest.fixture
def mail_transport() -> Optional[FakeMailTransport]:
    """No mail configured by default; tests override this fixture to inject one."""
    return None


@pytest_asyncio.fixture
async def client(db_session, mail_transport) -> AsyncGenerator[AsyncClient, None]:
    """
    Yield an AsyncClient with the DB and mail transport dependencies overridden.
    """
    app.dependency_overrides[get_async_db] = lambda: db_session
    app.dependency_overrides[get_mail_transport] = lambda: mail_transport

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://testserver"
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def admin_token() -> str:
    return issue_session_token(ADMIN_EMAIL)


@pytest_asyncio.fixture
async def admin_client(client, admin_token) -> AsyncClient:
    """The same client carrying a valid admin session cookie."""
    client.cookies.set(settings.SESSION_COOKIE_NAME, admin_token)
    return client
