"""
Test doubles and shared constants.

Nothing here reads settings at import time, so conftest can import it before
the test environment variables are in place.
"""

from libs.common.emails.core import EmailMessage
from libs.common.errors import NotificationError

ADMIN_EMAIL = "admin@veloce.test"
ADMIN_PASSWORD = "correct horse battery staple"


class FakeMailTransport:
    """Records messages instead of sending; optionally fails every send."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.sent: list[EmailMessage] = []
        self.attempts = 0

    async def send(self, message: EmailMessage) -> None:
        self.attempts += 1
        if self.fail:
            raise NotificationError("Email send failed")
        self.sent.append(message)


class ExplodingTransport:
    """A transport whose underlying socket dies mid-send."""

    async def send(self, message: EmailMessage) -> None:
        raise ConnectionResetError("socket closed")
