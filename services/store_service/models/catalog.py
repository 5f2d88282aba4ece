"""Store catalog model."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from libs.common.datetime_utils import utc_now
from libs.db.base import Base
from sqlalchemy import Boolean, CheckConstraint, DateTime, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column


class Product(Base):
    """Products."""

    __tablename__ = "products"

    # sqlite_autoincrement keeps ids from being reused after deletes
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    category: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)

    image: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    hover_image: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    stock: Mapped[int] = mapped_column(
        Integer, default=100, server_default="100", nullable=False
    )
    best_seller: Mapped[bool] = mapped_column(
        Boolean, default=False, server_default="0", nullable=False
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now, nullable=False
    )

    __table_args__ = (
        CheckConstraint("price >= 0", name="non_negative_price"),
        {"sqlite_autoincrement": True},
    )

    def __repr__(self):
        return f"<Product {self.id} {self.name!r}>"
