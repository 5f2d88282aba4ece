"""Contact form router."""

from typing import Optional

from fastapi import APIRouter, Depends, Request
from libs.common.emails.client import get_mail_transport
from libs.common.emails.core import MailTransport
from libs.common.emails.store import build_contact_message, send_contact_email
from libs.common.rate_limit import contact_limit, limiter
from services.store_service.schemas import ContactSubmission, MessageResponse

router = APIRouter(tags=["store"])


@router.post("/contact", response_model=MessageResponse)
@limiter.limit(contact_limit)
async def submit_contact(
    request: Request,
    submission: ContactSubmission,
    transport: Optional[MailTransport] = Depends(get_mail_transport),
):
    """
    Forward a contact message to the store operator.

    Succeeds without sending when mail is not configured; a configured
    transport that fails to send yields a 500.
    """
    message = build_contact_message(
        submission.name, submission.email, submission.message
    )
    result = await send_contact_email(transport, message)
    return MessageResponse(message=result)
