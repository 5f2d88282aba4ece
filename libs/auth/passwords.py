"""bcrypt password hashing for the administrator credential."""

from functools import lru_cache
from typing import Optional

import bcrypt

from libs.common.config import get_settings
from libs.common.logging import get_logger

logger = get_logger(__name__)

BCRYPT_ROUNDS = 10


def hash_password(password: str) -> str:
    hashed = bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(BCRYPT_ROUNDS))
    return hashed.decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Slow salted comparison. A malformed hash or oversize password never matches."""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        return False


@lru_cache
def get_admin_password_hash() -> Optional[str]:
    """
    Return the configured admin password hash.

    ADMIN_PASSWORD_HASH wins; a plaintext ADMIN_PASSWORD is hashed once and
    cached. None means no administrator password is configured.
    """
    settings = get_settings()
    if settings.ADMIN_PASSWORD_HASH:
        return settings.ADMIN_PASSWORD_HASH
    if settings.ADMIN_PASSWORD:
        logger.warning("ADMIN_PASSWORD_HASH not set, hashing plaintext ADMIN_PASSWORD")
        return hash_password(settings.ADMIN_PASSWORD)
    return None
