"""Store commerce model: orders."""

from datetime import datetime
from typing import Optional

from libs.common.datetime_utils import utc_now
from libs.db.base import Base
from services.store_service.models.enums import OrderStatus
from sqlalchemy import JSON, DateTime, Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column


class Order(Base):
    """Orders. Line items are stored denormalized as a JSON list."""

    __tablename__ = "orders"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Customer
    customer_name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    phone: Mapped[str] = mapped_column(String(50), nullable=False)
    address: Mapped[str] = mapped_column(Text, nullable=False)

    # Taken as submitted by the storefront, not recomputed
    total_amount: Mapped[float] = mapped_column(Float, nullable=False)
    items: Mapped[list] = mapped_column(JSON, nullable=False)

    # Plain string column so any status may overwrite any other
    status: Mapped[str] = mapped_column(
        String(20),
        default=OrderStatus.PENDING.value,
        server_default=OrderStatus.PENDING.value,
        nullable=False,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now, nullable=False, index=True
    )

    __table_args__ = ({"sqlite_autoincrement": True},)

    def __repr__(self):
        return f"<Order {self.id} status={self.status}>"
