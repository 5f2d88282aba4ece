from pydantic import BaseModel


class SessionClaims(BaseModel):
    """
    Claims carried by an admin session credential.

    `exp` is an absolute expiry in epoch seconds.
    """

    email: str
    exp: int


class AdminIdentity(BaseModel):
    """The verified administrator behind a request."""

    email: str
