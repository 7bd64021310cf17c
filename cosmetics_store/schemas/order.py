# ==============================================================================
# ORDER SCHEMAS - Customer Orders
# ==============================================================================
# Request/Response schemas for order management
# ==============================================================================

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import Field, field_validator

from cosmetics_store.core.constants import OrderConstants
from cosmetics_store.schemas.base import BaseSchema, RecordSchema, TimestampSchema


_ORDER_STATUS_PATTERN = "^(pending|processing|completed|cancelled)$"
_PAYMENT_STATUS_PATTERN = "^(unpaid|paid|failed)$"


# ==============================================================================
# EMBEDDED DOCUMENTS
# ==============================================================================

class OrderLine(BaseSchema):
    """Frozen snapshot of a purchased line."""

    product_id: str
    quantity: int
    price: float
    subtotal: float
    product_name: Optional[str] = None
    product_image: Optional[str] = None


class Payment(BaseSchema):
    """Payment sub-record embedded in an order."""

    status: str = OrderConstants.PAYMENT_UNPAID
    method: Optional[str] = None
    amount: float = 0
    paid_at: Optional[datetime] = None


# ==============================================================================
# RECORD
# ==============================================================================

class OrderInDB(RecordSchema):
    """Order record as stored by the order store."""

    user_id: str
    receiver_name: str
    receiver_phone: str
    receiver_address: str
    order_notes: Optional[str] = None
    items: List[OrderLine] = Field(default_factory=list)
    total_amount: float = 0
    total_items: int = 0
    status: str = OrderConstants.STATUS_PENDING
    payment: Payment = Field(default_factory=Payment)
    # Records written before the flag existed had their stock applied at checkout
    stock_applied: bool = True


# ==============================================================================
# REQUESTS
# ==============================================================================

class OrderItemCreate(BaseSchema):
    """Schema for one requested order line."""

    product_id: str = Field(
        ...,
        min_length=1,
        description="Product ID to order",
    )
    quantity: int = Field(
        ...,
        ge=OrderConstants.LINE_QUANTITY_MIN,
        le=OrderConstants.LINE_QUANTITY_MAX,
        description="Quantity to order",
    )
    price: float = Field(
        ...,
        ge=0,
        description="Unit price shown at checkout",
    )


class OrderCreate(BaseSchema):
    """Schema for creating an order."""

    receiver_name: str = Field(
        ...,
        min_length=OrderConstants.RECEIVER_NAME_MIN,
        max_length=OrderConstants.RECEIVER_NAME_MAX,
        description="Receiver full name",
    )
    receiver_phone: str = Field(
        ...,
        pattern=OrderConstants.PHONE_PATTERN,
        description="Receiver phone number (10-11 digits)",
    )
    receiver_address: str = Field(
        ...,
        min_length=OrderConstants.RECEIVER_ADDRESS_MIN,
        max_length=OrderConstants.RECEIVER_ADDRESS_MAX,
        description="Delivery address",
    )
    order_notes: Optional[str] = Field(
        None,
        max_length=OrderConstants.ORDER_NOTES_MAX,
        description="Order notes",
    )
    items: List[OrderItemCreate] = Field(
        ...,
        min_length=1,
        description="Order items",
    )
    payment_method: Optional[str] = Field(
        None,
        max_length=20,
        description="Payment method, cash on delivery when omitted",
    )

    @field_validator("receiver_name", "receiver_address")
    @classmethod
    def strip_text(cls, v: str) -> str:
        """Trim surrounding whitespace."""
        return v.strip()

    @field_validator("payment_method")
    @classmethod
    def normalize_method(cls, v: Optional[str]) -> Optional[str]:
        """Payment method codes are upper case."""
        return v.strip().upper() if v else None


class PaymentUpdate(BaseSchema):
    """Partial payment change sent with an order update."""

    status: Optional[str] = Field(
        None,
        pattern=_PAYMENT_STATUS_PATTERN,
    )
    method: Optional[str] = Field(None, max_length=20)
    amount: Optional[float] = Field(None, ge=0)
    paid_at: Optional[datetime] = None


class OrderUpdate(BaseSchema):
    """Schema for updating an order (admin)."""

    status: Optional[str] = Field(
        None,
        pattern=_ORDER_STATUS_PATTERN,
        description="Order status",
    )
    receiver_name: Optional[str] = Field(
        None,
        min_length=OrderConstants.RECEIVER_NAME_MIN,
        max_length=OrderConstants.RECEIVER_NAME_MAX,
    )
    receiver_phone: Optional[str] = Field(
        None,
        pattern=OrderConstants.PHONE_PATTERN,
    )
    receiver_address: Optional[str] = Field(
        None,
        min_length=OrderConstants.RECEIVER_ADDRESS_MIN,
        max_length=OrderConstants.RECEIVER_ADDRESS_MAX,
    )
    order_notes: Optional[str] = Field(
        None,
        max_length=OrderConstants.ORDER_NOTES_MAX,
    )
    payment: Optional[PaymentUpdate] = None


# ==============================================================================
# RESPONSES
# ==============================================================================

class OrderResponse(TimestampSchema):
    """Schema for order response."""

    id: str = Field(
        ...,
        description="Order unique identifier",
    )
    user_id: str = Field(
        ...,
        description="Customer ID",
    )
    receiver_name: str
    receiver_phone: str
    receiver_address: str
    order_notes: Optional[str] = None
    items: List[OrderLine]
    total_amount: float
    total_items: int
    status: str = Field(
        ...,
        description="Order status",
    )
    payment: Payment
