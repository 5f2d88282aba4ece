"""
Store notification emails: new-order alerts and contact-form messages.

Order alerts are best effort: failures are logged and never reach the
customer. Contact messages surface a send failure to the caller.
"""

from decimal import Decimal
from html import escape
from typing import Optional

from libs.common.config import get_settings
from libs.common.emails.core import EmailMessage, MailTransport
from libs.common.errors import NotificationError
from libs.common.logging import get_logger

logger = get_logger(__name__)


def _money(value) -> str:
    return f"${Decimal(str(value)):,.2f}"


def build_order_notification(
    order_id: int,
    customer_name: str,
    email: Optional[str],
    phone: str,
    address: str,
    items: list[dict],  # [{"name": str, "price": number, "qty": int}]
    total_amount,
) -> EmailMessage:
    """Operator alert for a newly placed order."""
    settings = get_settings()
    lines = [
        f"{item['qty']}x {item['name']} - {_money(Decimal(str(item['price'])) * item['qty'])}"
        for item in items
    ]
    items_text = "\n".join(lines)
    items_html = "".join(f"<li>{escape(line)}</li>" for line in lines)

    body = f"""Order #{order_id}

Customer: {customer_name}
Email: {email or "-"}
Phone: {phone}
Address: {address}

Items:
{items_text}

Total: {_money(total_amount)}
"""

    html_body = f"""<h2>Order #{order_id}</h2>
<p><strong>Customer:</strong> {escape(customer_name)}</p>
<p><strong>Email:</strong> {escape(email or "-")}</p>
<p><strong>Phone:</strong> {escape(phone)}</p>
<p><strong>Address:</strong> {escape(address)}</p>
<h3>Items</h3>
<ul>{items_html}</ul>
<p><strong>Total:</strong> {_money(total_amount)}</p>
"""

    return EmailMessage(
        to_email=settings.ORDER_NOTIFY_EMAIL,
        subject=f"New Order #{order_id} - {customer_name}",
        body=body,
        html_body=html_body,
        from_email=settings.SMTP_USER or settings.DEFAULT_FROM_EMAIL,
    )


def build_contact_message(name: str, email: str, message: str) -> EmailMessage:
    settings = get_settings()
    body = f"Name: {name}\nEmail: {email}\n\nMessage:\n{message}"
    html_body = f"""<h2>New Contact Form Submission</h2>
<p><strong>Name:</strong> {escape(name)}</p>
<p><strong>Email:</strong> {escape(email)}</p>
<p><strong>Message:</strong></p>
<p>{escape(message)}</p>
"""
    return EmailMessage(
        to_email=settings.ORDER_NOTIFY_EMAIL,
        subject=f"Contact Form: {name}",
        body=body,
        html_body=html_body,
        from_email=settings.SMTP_USER or settings.DEFAULT_FROM_EMAIL,
        reply_to=email,
    )


async def send_order_notification_email(
    transport: Optional[MailTransport], message: EmailMessage
) -> bool:
    """
    Deliver an order alert. Never raises.

    Returns True only when the transport accepted the message.
    """
    if transport is None:
        logger.info(
            "[EMAIL NOTICE] SMTP credentials not set. Skipping email send: %s",
            message.subject,
        )
        return False

    try:
        await transport.send(message)
    except NotificationError as e:
        logger.error(f"Order email send failed: {e}")
        return False
    except Exception as e:
        logger.error(f"Order email send failed: {type(e).__name__}: {e}")
        return False
    return True


async def send_contact_email(
    transport: Optional[MailTransport], message: EmailMessage
) -> str:
    """
    Deliver a contact-form message and return the user-facing status text.

    Raises NotificationError when a configured transport fails to send.
    """
    if transport is None:
        logger.info(
            "[EMAIL NOTICE] SMTP credentials not set. Contact message from %s not sent",
            message.reply_to,
        )
        return "Message received (email not configured)"

    try:
        await transport.send(message)
    except NotificationError:
        raise
    except Exception as e:
        logger.error(f"Contact email send failed: {type(e).__name__}: {e}")
        raise NotificationError("Email send failed") from e
    return "Message sent successfully"
