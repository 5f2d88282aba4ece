from typing import Optional

from fastapi import Depends, Request

from libs.auth.models import AdminIdentity
from libs.auth.tokens import get_token_codec
from libs.common.config import get_settings
from libs.common.errors import Unauthorized


def get_admin_from_request(request: Request) -> Optional[AdminIdentity]:
    """
    Resolve the administrator from the session cookie.

    Returns None when the cookie is missing, the credential does not verify,
    or it was issued for anyone other than the configured ADMIN_EMAIL.
    """
    settings = get_settings()
    token = request.cookies.get(settings.SESSION_COOKIE_NAME)
    if not token:
        return None

    claims = get_token_codec().verify(token)
    if claims is None or not settings.ADMIN_EMAIL or claims.email != settings.ADMIN_EMAIL:
        return None
    return AdminIdentity(email=claims.email)


async def require_admin(
    admin: Optional[AdminIdentity] = Depends(get_admin_from_request),
) -> AdminIdentity:
    """API guard: 401 unless the request carries a valid admin session."""
    if admin is None:
        raise Unauthorized()
    return admin
