# ==============================================================================
# PRODUCT MODEL - Cosmetics Catalog
# ==============================================================================
# Product entity backing the catalog store on SQLite
# ==============================================================================

from __future__ import annotations

from typing import Optional

from sqlalchemy import Boolean, Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from cosmetics_store.domain_models.base import SQLBase, SoftDeleteMixin, TimestampMixin


class Product(SQLBase, TimestampMixin, SoftDeleteMixin):
    """
    Product model for the cosmetics catalog.

    Attributes:
        name: Product display name
        slug: URL slug derived from the name
        brand: Manufacturer brand
        category: Catalog category
        quantity: Units in stock, never negative
        original_price: List price
        discount_price: Selling price used for new cart lines
        rating: Average rating (0-5)
        is_new: Flagged as a new arrival
        is_sale_off: Flagged as on sale
        image_url: Product image location
    """

    __tablename__ = "products"

    # Basic info
    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )
    slug: Mapped[str] = mapped_column(
        String(300),
        index=True,
        nullable=False,
    )
    brand: Mapped[Optional[str]] = mapped_column(
        String(100),
        nullable=True,
        index=True,
    )
    category: Mapped[Optional[str]] = mapped_column(
        String(100),
        nullable=True,
        index=True,
    )
    description: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
    )

    # Inventory
    quantity: Mapped[int] = mapped_column(
        Integer,
        default=0,
        nullable=False,
    )

    # Pricing
    original_price: Mapped[float] = mapped_column(
        Float,
        default=0,
        nullable=False,
    )
    discount_price: Mapped[float] = mapped_column(
        Float,
        default=0,
        nullable=False,
    )

    rating: Mapped[float] = mapped_column(
        Float,
        default=0,
        nullable=False,
    )
    is_new: Mapped[bool] = mapped_column(
        Boolean,
        default=True,
        nullable=False,
    )
    is_sale_off: Mapped[bool] = mapped_column(
        Boolean,
        default=False,
        nullable=False,
    )

    # Media
    image_url: Mapped[Optional[str]] = mapped_column(
        String(500),
        nullable=True,
    )

    def __repr__(self) -> str:
        return f"<Product(id={self.id}, slug={self.slug}, quantity={self.quantity})>"
