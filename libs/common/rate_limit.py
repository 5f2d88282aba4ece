"""Rate limiting for the public write endpoints (admin login, contact form).

Uses slowapi with in-process storage; a single instance serves the store.
"""

from functools import lru_cache

from fastapi import Request, Response
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.responses import JSONResponse

from libs.common.config import get_settings


def _get_client_ip(request: Request) -> str:
    """
    Get client IP from request.

    X-Forwarded-For is client-controlled, so its first hop is used only when
    TRUST_FORWARDED_FOR says a proxy in front of the app sets it. Otherwise
    the direct connection IP is the key.
    """
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded and get_settings().TRUST_FORWARDED_FOR:
        return forwarded.split(",")[0].strip()
    return get_remote_address(request)


@lru_cache
def get_limiter() -> Limiter:
    """Create and return a cached Limiter instance."""
    settings = get_settings()
    return Limiter(
        key_func=_get_client_ip,
        storage_uri="memory://",
        strategy="fixed-window",
        enabled=settings.RATE_LIMIT_ENABLED,
    )


limiter = get_limiter()


def login_limit() -> str:
    return get_settings().LOGIN_RATE_LIMIT


def contact_limit() -> str:
    return get_settings().CONTACT_RATE_LIMIT


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> Response:
    """
    Return a JSON 429 with a Retry-After header.
    """
    return JSONResponse(
        status_code=429,
        content={
            "detail": f"Rate limit exceeded: {exc.detail}",
            "code": "RATE_LIMIT_EXCEEDED",
        },
        headers={"Retry-After": "60"},
    )
