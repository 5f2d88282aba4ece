"""Unit tests for best-effort order mail and the contact mail policy."""

import pytest
from libs.common.emails.core import EmailMessage, build_mime
from libs.common.emails.store import (
    build_contact_message,
    send_contact_email,
    send_order_notification_email,
)
from libs.common.errors import NotificationError
from tests.stubs import ExplodingTransport, FakeMailTransport


def _message() -> EmailMessage:
    return EmailMessage(to_email="orders@veloce.test", subject="New Order #1", body="hi")


@pytest.mark.asyncio
@pytest.mark.unit
async def test_order_mail_without_transport_is_skipped():
    assert await send_order_notification_email(None, _message()) is False


@pytest.mark.asyncio
@pytest.mark.unit
async def test_order_mail_failures_are_swallowed():
    failing = FakeMailTransport(fail=True)

    assert await send_order_notification_email(failing, _message()) is False
    assert await send_order_notification_email(ExplodingTransport(), _message()) is False
    assert failing.attempts == 1


@pytest.mark.asyncio
@pytest.mark.unit
async def test_order_mail_is_delivered():
    transport = FakeMailTransport()

    assert await send_order_notification_email(transport, _message()) is True
    assert transport.sent[0].subject == "New Order #1"


@pytest.mark.asyncio
@pytest.mark.unit
async def test_contact_mail_without_transport_reports_not_configured():
    message = build_contact_message("Sam", "sam@example.com", "Hello")

    assert await send_contact_email(None, message) == (
        "Message received (email not configured)"
    )


@pytest.mark.asyncio
@pytest.mark.unit
async def test_contact_mail_failure_is_raised():
    message = build_contact_message("Sam", "sam@example.com", "Hello")

    with pytest.raises(NotificationError):
        await send_contact_email(FakeMailTransport(fail=True), message)
    with pytest.raises(NotificationError):
        await send_contact_email(ExplodingTransport(), message)


@pytest.mark.unit
def test_contact_message_replies_to_sender_and_escapes_html():
    message = build_contact_message("Sam", "sam@example.com", "<script>x</script>")

    assert message.reply_to == "sam@example.com"
    assert message.subject == "Contact Form: Sam"
    assert "<script>" not in message.html_body
    assert "<script>x</script>" in message.body


@pytest.mark.unit
def test_mime_message_carries_both_bodies_and_reply_to():
    message = build_contact_message("Sam", "sam@example.com", "Hello")

    mime = build_mime(message, "shop@veloce.test")

    assert mime["Reply-To"] == "sam@example.com"
    assert mime["From"] == "shop@veloce.test"
    assert mime.is_multipart()
