# ==============================================================================
# CART MODEL - Shopping Cart
# ==============================================================================
# One cart per user; lines are stored as a JSON document
# ==============================================================================

from __future__ import annotations

from typing import Any, Dict, List

from sqlalchemy import JSON, Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from cosmetics_store.domain_models.base import SQLBase, SoftDeleteMixin, TimestampMixin


class Cart(SQLBase, TimestampMixin, SoftDeleteMixin):
    """
    Cart model.

    ``items`` holds ``{product_id, quantity, price, subtotal}`` lines;
    the totals are always recomputed from them.
    """

    __tablename__ = "carts"

    user_id: Mapped[str] = mapped_column(
        String(64),
        index=True,
        nullable=False,
    )
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
