"""
Core email sending over SMTP.
"""

import smtplib
from dataclasses import dataclass
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from typing import Optional, Protocol

from starlette.concurrency import run_in_threadpool

from libs.common.errors import NotificationError
from libs.common.logging import get_logger

logger = get_logger(__name__)


@dataclass
class EmailMessage:
    to_email: str
    subject: str
    body: str
    html_body: Optional[str] = None
    from_email: Optional[str] = None
    reply_to: Optional[str] = None


class MailTransport(Protocol):
    """Anything that can deliver an EmailMessage; raises NotificationError on failure."""

    async def send(self, message: EmailMessage) -> None: ...


def build_mime(message: EmailMessage, sender: str) -> MIMEText:
    if message.html_body:
        msg = MIMEMultipart("alternative")
        msg.attach(MIMEText(message.body, "plain"))
        msg.attach(MIMEText(message.html_body, "html"))
    else:
        msg = MIMEText(message.body, "plain")

    msg["Subject"] = message.subject
    msg["From"] = sender
    msg["To"] = message.to_email
    if message.reply_to:
        msg["Reply-To"] = message.reply_to
    return msg


class SmtpMailTransport:
    """
    SMTP transport. `secure=True` uses implicit TLS (port 465 style),
    otherwise the connection is upgraded with STARTTLS.
    """

    def __init__(
        self,
        host: str,
        port: int,
        username: str,
        password: str,
        secure: bool = False,
        default_sender: Optional[str] = None,
        timeout: float = 30.0,
    ):
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.secure = secure
        self.default_sender = default_sender or username
        self.timeout = timeout

    def _connect(self) -> smtplib.SMTP:
        if self.secure:
            return smtplib.SMTP_SSL(self.host, self.port, timeout=self.timeout)
        server = smtplib.SMTP(self.host, self.port, timeout=self.timeout)
        server.starttls()
        return server

    def _send_sync(self, message: EmailMessage) -> None:
        sender = message.from_email or self.default_sender
        msg = build_mime(message, sender)
        with self._connect() as server:
            server.login(self.username, self.password)
            server.sendmail(sender, [message.to_email], msg.as_string())

    def verify_sync(self) -> None:
        """Open a session and authenticate without sending anything."""
        with self._connect() as server:
            server.login(self.username, self.password)

    async def send(self, message: EmailMessage) -> None:
        logger.info(f"Sending email to {message.to_email}: {message.subject}")
        try:
            await run_in_threadpool(self._send_sync, message)
        except smtplib.SMTPAuthenticationError as e:
            logger.error(f"SMTP authentication failed: {e}")
            raise NotificationError("Email send failed") from e
        except (smtplib.SMTPException, OSError) as e:
            logger.error(f"SMTP error sending email: {type(e).__name__}: {e}")
            raise NotificationError("Email send failed") from e
        logger.info(f"Email sent successfully to {message.to_email}")
