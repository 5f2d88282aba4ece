"""Order operations: checkout placement, admin listing and status changes."""

from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from libs.common.emails.core import EmailMessage
from libs.common.emails.store import build_order_notification
from libs.common.errors import NotFound, ValidationError
from libs.common.logging import get_logger
from libs.db.session import commit_or_raise
from services.store_service.models import Order, OrderStatus
from services.store_service.schemas import OrderCreate

logger = get_logger(__name__)


def parse_order_status(value: Any) -> OrderStatus:
    if not isinstance(value, str):
        raise ValidationError("Invalid status")
    try:
        return OrderStatus(value)
    except ValueError:
        raise ValidationError("Invalid status")


async def place_order(db: AsyncSession, order_in: OrderCreate) -> Order:
    """
    Persist a checkout submission as a Pending order.

    The total is stored as submitted; it is not recomputed from catalog
    prices.
    """
    order = Order(
        customer_name=order_in.customer_name,
        email=order_in.email,
        phone=order_in.phone,
        address=order_in.address,
        total_amount=order_in.total_amount,
        items=[item.model_dump(exclude_none=True) for item in order_in.items],
        status=OrderStatus.PENDING.value,
    )
    db.add(order)
    await commit_or_raise(db, "placing order")
    await db.refresh(order)

    logger.info(
        "Order %s placed by %s (%d items, total %s)",
        order.id,
        order.customer_name,
        len(order.items),
        order.total_amount,
    )
    return order


def order_notification(order: Order) -> EmailMessage:
    return build_order_notification(
        order_id=order.id,
        customer_name=order.customer_name,
        email=order.email,
        phone=order.phone,
        address=order.address,
        items=order.items,
        total_amount=order.total_amount,
    )


async def list_orders(db: AsyncSession) -> list[Order]:
    """All orders, newest first."""
    result = await db.execute(
        select(Order).order_by(Order.created_at.desc(), Order.id.desc())
    )
    return list(result.scalars().all())


async def set_order_status(
    db: AsyncSession, order_id: int, status: Any, *, performed_by: str
) -> Order:
    """
    Overwrite an order's status.

    Any of the five statuses may replace any other; only the value itself is
    validated, before the order is loaded.
    """
    new_status = parse_order_status(status)

    order = await db.get(Order, order_id)
    if order is None:
        raise NotFound("Order not found")

    old_status = order.status
    order.status = new_status.value
    await commit_or_raise(db, "updating order status")

    logger.info(
        "Order %s status %s -> %s by %s",
        order_id,
        old_status,
        new_status.value,
        performed_by,
    )
    return order
