"""Signed, stateless session credentials for the admin panel.

Two codecs share one contract (`issue` / `verify`):

- `HmacTokenCodec` produces `<payload>.<signature>` where payload is the
  base64url canonical JSON of the claims and signature is the base64url
  HMAC-SHA256 of the payload segment.
- `JwtTokenCodec` produces an HS256 JWT via python-jose.

`verify` never raises: any malformed, tampered or expired token yields None.
Nothing is stored server side, so a token stays valid until it expires or the
secret is rotated.
"""

import base64
import hashlib
import hmac
import json
from functools import lru_cache
from typing import Optional, Protocol

from jose import JWTError, jwt

from libs.auth.models import SessionClaims
from libs.common.config import get_settings
from libs.common.datetime_utils import utc_timestamp

SEPARATOR = "."


def _b64encode(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def _b64decode(segment: str) -> bytes:
    padding = "=" * (-len(segment) % 4)
    return base64.urlsafe_b64decode(segment + padding)


class TokenCodec(Protocol):
    def issue(self, claims: SessionClaims) -> str: ...

    def verify(self, token: str) -> Optional[SessionClaims]: ...


class HmacTokenCodec:
    def __init__(self, secret: str):
        self._secret = secret.encode("utf-8")

    def _sign(self, payload: str) -> str:
        digest = hmac.new(self._secret, payload.encode("ascii"), hashlib.sha256)
        return _b64encode(digest.digest())

    def issue(self, claims: SessionClaims) -> str:
        body = json.dumps(claims.model_dump(), sort_keys=True, separators=(",", ":"))
        payload = _b64encode(body.encode("utf-8"))
        return f"{payload}{SEPARATOR}{self._sign(payload)}"

    def verify(self, token: str) -> Optional[SessionClaims]:
        parts = token.split(SEPARATOR)
        if len(parts) != 2 or not all(parts):
            return None
        payload, signature = parts

        try:
            expected = self._sign(payload)
            if not hmac.compare_digest(signature.encode("utf-8"), expected.encode("utf-8")):
                return None
            claims = SessionClaims.model_validate_json(_b64decode(payload))
        except (ValueError, TypeError):
            # ValueError covers binascii, unicode, JSON and pydantic failures
            return None

        if utc_timestamp() > claims.exp:
            return None
        return claims


class JwtTokenCodec:
    algorithm = "HS256"

    def __init__(self, secret: str):
        self._secret = secret

    def issue(self, claims: SessionClaims) -> str:
        return jwt.encode(claims.model_dump(), self._secret, algorithm=self.algorithm)

    def verify(self, token: str) -> Optional[SessionClaims]:
        try:
            payload = jwt.decode(token, self._secret, algorithms=[self.algorithm])
            return SessionClaims(**payload)
        except (JWTError, ValueError, TypeError):
            return None


@lru_cache
def get_token_codec() -> TokenCodec:
    """Return the codec selected by TOKEN_FORMAT, cached."""
    settings = get_settings()
    if settings.TOKEN_FORMAT == "jwt":
        return JwtTokenCodec(settings.JWT_SECRET)
    return HmacTokenCodec(settings.JWT_SECRET)


def issue_session_token(email: str, ttl_seconds: Optional[int] = None) -> str:
    """Issue a credential for `email` expiring `ttl_seconds` from now."""
    ttl = ttl_seconds if ttl_seconds is not None else get_settings().SESSION_TTL_SECONDS
    claims = SessionClaims(email=email, exp=utc_timestamp() + ttl)
    return get_token_codec().issue(claims)
