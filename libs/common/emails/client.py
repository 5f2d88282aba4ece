"""
Process-wide mail transport, built lazily from settings.

Route handlers receive it through the `get_mail_transport` dependency so
tests can swap in a fake via `app.dependency_overrides`.

Usage:
    from libs.common.emails.client import get_mail_transport

    transport = get_mail_transport()
    if transport is not None:
        await transport.send(EmailMessage(...))
"""

from typing import Optional

from libs.common.config import get_settings
from libs.common.emails.core import MailTransport, SmtpMailTransport
from libs.common.logging import get_logger

logger = get_logger(__name__)

_transport: Optional[MailTransport] = None


def create_mail_transport() -> Optional[MailTransport]:
    """Build an SMTP transport, or None when SMTP credentials are not set."""
    settings = get_settings()
    if not settings.smtp_configured:
        return None
    return SmtpMailTransport(
        host=settings.SMTP_HOST,
        port=settings.SMTP_PORT,
        username=settings.SMTP_USER,
        password=settings.SMTP_PASS,
        secure=settings.SMTP_SECURE,
        default_sender=settings.SMTP_USER or settings.DEFAULT_FROM_EMAIL,
    )


def get_mail_transport() -> Optional[MailTransport]:
    """Get or create the shared transport; retried on each call while unset."""
    global _transport
    if _transport is None:
        _transport = create_mail_transport()
        if _transport is not None:
            logger.info("SMTP transport initialised for %s", get_settings().SMTP_HOST)
    return _transport
