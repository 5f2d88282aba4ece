"""Store orders router: cash-on-delivery checkout."""

from typing import Optional

from fastapi import APIRouter, BackgroundTasks, Depends
from libs.common.emails.client import get_mail_transport
from libs.common.emails.core import MailTransport
from libs.common.emails.store import send_order_notification_email
from libs.db.session import get_async_db
from services.store_service.schemas import OrderCreate, OrderPlacedResponse
from services.store_service.services import orders as order_store
from sqlalchemy.ext.asyncio import AsyncSession

router = APIRouter(tags=["store"])


@router.post("/orders", response_model=OrderPlacedResponse)
async def place_order(
    order_in: OrderCreate,
    background_tasks: BackgroundTasks,
    transport: Optional[MailTransport] = Depends(get_mail_transport),
    db: AsyncSession = Depends(get_async_db),
):
    """Place an order. The operator email goes out after the response."""
    order = await order_store.place_order(db, order_in)

    background_tasks.add_task(
        send_order_notification_email,
        transport,
        order_store.order_notification(order),
    )

    return OrderPlacedResponse(message="Order placed successfully!", orderId=order.id)
