"""Admin session router: login, logout and identity check."""

from fastapi import APIRouter, Depends, Request, Response
from libs.auth.dependencies import require_admin
from libs.auth.models import AdminIdentity
from libs.auth.passwords import get_admin_password_hash, verify_password
from libs.auth.tokens import issue_session_token
from libs.common.config import get_settings
from libs.common.errors import Unauthorized
from libs.common.logging import get_logger
from libs.common.rate_limit import limiter, login_limit
from services.store_service.schemas import (
    AdminLoginRequest,
    AdminMeResponse,
    MessageResponse,
)
from starlette.concurrency import run_in_threadpool

router = APIRouter(prefix="/admin", tags=["admin-auth"])

logger = get_logger(__name__)


def _set_session_cookie(response: Response, value: str, max_age: int) -> None:
    settings = get_settings()
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=value,
        max_age=max_age,
        path="/",
        httponly=True,
        samesite="lax",
        secure=settings.ENVIRONMENT == "production",
    )


@router.post("/login", response_model=MessageResponse)
@limiter.limit(login_limit)
async def login(request: Request, credentials: AdminLoginRequest, response: Response):
    """Check the admin credentials and set the session cookie."""
    settings = get_settings()
    password_hash = get_admin_password_hash()
    if not settings.ADMIN_EMAIL or not password_hash:
        logger.error("Admin login attempted but admin credentials are not configured")
        raise Unauthorized("Admin credentials not configured")

    if credentials.email != settings.ADMIN_EMAIL:
        logger.warning("Admin login rejected for %s", credentials.email)
        raise Unauthorized("Invalid credentials")

    if not await run_in_threadpool(verify_password, credentials.password, password_hash):
        logger.warning("Admin login rejected for %s: bad password", credentials.email)
        raise Unauthorized("Invalid credentials")

    token = issue_session_token(credentials.email, settings.SESSION_TTL_SECONDS)
    _set_session_cookie(response, token, settings.SESSION_TTL_SECONDS)

    logger.info("Admin %s logged in", credentials.email)
    return MessageResponse(message="Login successful")


@router.post("/logout", response_model=MessageResponse)
async def logout(response: Response):
    """Expire the session cookie."""
    _set_session_cookie(response, "", 0)
    return MessageResponse(message="Logged out")


@router.get("/me", response_model=AdminMeResponse)
async def me(current_admin: AdminIdentity = Depends(require_admin)):
    return AdminMeResponse(email=current_admin.email)
