# ==============================================================================
# ORDER MODEL - Customer Orders
# ==============================================================================
# Order entity; line items and payment live in JSON columns
# ==============================================================================

from __future__ import annotations

from typing import Any, Dict, List, Optional

from sqlalchemy import JSON, Boolean, Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from cosmetics_store.domain_models.base import SQLBase, SoftDeleteMixin, TimestampMixin


class Order(SQLBase, TimestampMixin, SoftDeleteMixin):
    """
    Order model representing a customer purchase.

    Attributes:
        user_id: Customer who placed the order
        receiver_name: Delivery contact name
        receiver_phone: Delivery contact phone
        receiver_address: Delivery address
        order_notes: Free-text notes
        items: Line snapshots with product name and image
        total_amount: Sum of line subtotals
        total_items: Sum of line quantities
        status: pending, processing, completed or cancelled
        payment: ``{status, method, amount, paid_at}``
        stock_applied: Catalog currently reflects this order's quantities
    """

    __tablename__ = "orders"

    user_id: Mapped[str] = mapped_column(
        String(64),
        index=True,
        nullable=False,
    )

    # Delivery
    receiver_name: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
    )
    receiver_phone: Mapped[str] = mapped_column(
        String(11),
        nullable=False,
    )
    receiver_address: Mapped[str] = mapped_column(
        String(200),
        nullable=False,
    )
    order_notes: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
    )

    # Lines and totals
    items: Mapped[List[Dict[str, Any]]] = mapped_column(
        JSON,
        default=list,
        nullable=False,
    )
    total_amount: Mapped[float] = mapped_column(
        Float,
        default=0,
        nullable=False,
    )
    total_items: Mapped[int] = mapped_column(
        Integer,
        default=0,
        nullable=False,
    )

    status: Mapped[str] = mapped_column(
        String(20),
        default="pending",
        index=True,
        nullable=False,
    )
    payment: Mapped[Dict[str, Any]] = mapped_column(
        JSON,
        default=dict,
        nullable=False,
    )
    stock_applied: Mapped[bool] = mapped_column(
        Boolean,
        default=True,
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Order(id={self.id}, status={self.status})>"
