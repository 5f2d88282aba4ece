"""Admin orders router: order listing and status management."""

from fastapi import APIRouter, Depends
from libs.auth.dependencies import require_admin
from libs.auth.models import AdminIdentity
from libs.db.session import get_async_db
from services.store_service.schemas import (
    OrderResponse,
    OrderStatusResponse,
    OrderStatusUpdate,
)
from services.store_service.services import orders as order_store
from sqlalchemy.ext.asyncio import AsyncSession

router = APIRouter(tags=["admin-store"])


@router.get("/orders", response_model=list[OrderResponse])
async def list_orders(
    current_admin: AdminIdentity = Depends(require_admin),
    db: AsyncSession = Depends(get_async_db),
):
    """List all orders, newest first, with line items expanded."""
    return await order_store.list_orders(db)


@router.put("/orders/{order_id}/status", response_model=OrderStatusResponse)
async def update_order_status(
    order_id: int,
    status_in: OrderStatusUpdate,
    current_admin: AdminIdentity = Depends(require_admin),
    db: AsyncSession = Depends(get_async_db),
):
    """Set an order's status to any of the five known values."""
    order = await order_store.set_order_status(
        db, order_id, status_in.status, performed_by=current_admin.email
    )
    return OrderStatusResponse(message="Status updated", id=order.id, status=order.status)
