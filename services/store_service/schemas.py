"""Pydantic schemas for store service."""

from datetime import datetime
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

# ============================================================================
# PRODUCT SCHEMAS
# ============================================================================


class ProductResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    category: str
    price: float
    image: Optional[str] = None
    hover_image: Optional[str] = None
    description: Optional[str] = None
    stock: int
    best_seller: bool
    created_at: datetime


class ProductCreatedResponse(BaseModel):
    message: str
    id: int
    product: ProductResponse


class ProductFilters(BaseModel):
    """Query filters for the public product listing. Every field is optional."""

    category: Optional[str] = None
    best_seller: Optional[bool] = None
    price: Optional[str] = None
    sort: Optional[str] = None


# ============================================================================
# ORDER SCHEMAS
# ============================================================================


class OrderLineItem(BaseModel):
    """
    One cart line. Storefront carts send the whole product card plus `qty`,
    so unknown keys are kept and stored with the order.
    """

    model_config = ConfigDict(extra="allow")

    id: Optional[Union[int, str]] = None
    name: str
    price: float = Field(..., ge=0)
    qty: int = Field(..., ge=1)


class OrderCreate(BaseModel):
    customer_name: str = Field(..., min_length=1, max_length=255)
    email: Optional[str] = Field(None, max_length=255)
    phone: str = Field(..., min_length=1, max_length=50)
    address: str = Field(..., min_length=1)
    total_amount: float = Field(..., ge=0)
    items: list[OrderLineItem] = Field(..., min_length=1)


class OrderPlacedResponse(BaseModel):
    message: str
    orderId: int


class OrderResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    customer_name: str
    email: Optional[str] = None
    phone: str
    address: str
    total_amount: float
    items: list[dict[str, Any]]
    status: str
    created_at: datetime


class OrderStatusUpdate(BaseModel):
    # Checked by the order store so missing or malformed values get a 400
    status: Optional[Any] = None


class OrderStatusResponse(BaseModel):
    message: str
    id: int
    status: str


# ============================================================================
# CONTACT / ADMIN SCHEMAS
# ============================================================================


class ContactSubmission(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., min_length=3, max_length=255)
    message: str = Field(..., min_length=1)


class AdminLoginRequest(BaseModel):
    email: str
    password: str


class AdminMeResponse(BaseModel):
    email: str


class MessageResponse(BaseModel):
    message: str
