# ==============================================================================
# CART SCHEMAS - Shopping Cart
# ==============================================================================
# Record, request and response schemas for the per-user cart
# ==============================================================================

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from cosmetics_store.core.constants import OrderConstants
from cosmetics_store.schemas.base import BaseSchema, RecordSchema
from cosmetics_store.schemas.product import ProductSummary


class CartLine(BaseSchema):
    """Stored cart line: price is the snapshot taken when first added."""

    product_id: str
    quantity: int = Field(..., ge=1)
    price: float = Field(..., ge=0)
    subtotal: float = Field(..., ge=0)


class CartInDB(RecordSchema):
    """Cart record as stored by the cart store."""

    user_id: str
    items: List[CartLine] = Field(default_factory=list)
    total_amount: float = 0
    total_items: int = 0


class CartItemAdd(BaseSchema):
    """Schema for adding a product to the cart."""

    product_id: str = Field(
        ...,
        min_length=1,
        description="Product to add",
    )
    quantity: int = Field(
        1,
        ge=OrderConstants.LINE_QUANTITY_MIN,
        le=OrderConstants.LINE_QUANTITY_MAX,
        description="Units to add",
    )


class CartItemUpdate(BaseSchema):
    """Schema for setting a cart line quantity; zero or less removes it."""

    product_id: str = Field(
        ...,
        min_length=1,
        description="Product in the cart",
    )
    quantity: int = Field(
        ...,
        le=OrderConstants.LINE_QUANTITY_MAX,
        description="New quantity",
    )


class CartLineResponse(BaseSchema):
    """Cart line with current product details."""

    product_id: str
    quantity: int
    price: float
    subtotal: float
    product: Optional[ProductSummary] = None


class CartResponse(BaseSchema):
    """Schema for cart response."""

    id: Optional[str] = Field(
        None,
        description="Cart identifier, empty when the user has no cart yet",
    )
    user_id: str
    items: List[CartLineResponse] = Field(default_factory=list)
    total_amount: float = 0
    total_items: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
