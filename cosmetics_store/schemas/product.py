# ==============================================================================
# PRODUCT SCHEMAS - Cosmetics Catalog
# ==============================================================================
# Request/Response schemas for product management
# ==============================================================================

from __future__ import annotations

from typing import Optional

from pydantic import Field, field_validator

from cosmetics_store.schemas.base import BaseSchema, RecordSchema, TimestampSchema


class ProductInDB(RecordSchema):
    """Product record as stored by the catalog store."""

    name: str
    slug: str
    brand: Optional[str] = None
    category: Optional[str] = None
    description: Optional[str] = None
    quantity: int = 0
    original_price: float = 0
    discount_price: float = 0
    rating: float = 0
    is_new: bool = True
    is_sale_off: bool = False
    image_url: Optional[str] = None


class ProductCreate(BaseSchema):
    """Schema for creating a product."""

    name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Product name",
    )
    brand: Optional[str] = Field(
        None,
        max_length=100,
        description="Brand name",
    )
    category: Optional[str] = Field(
        None,
        max_length=100,
        description="Product category",
    )
    description: Optional[str] = Field(
        None,
        max_length=5000,
        description="Product description",
    )
    quantity: int = Field(
        0,
        ge=0,
        description="Units in stock",
    )
    original_price: float = Field(
        ...,
        ge=0,
        description="List price",
    )
    discount_price: float = Field(
        ...,
        ge=0,
        description="Selling price",
    )
    rating: float = Field(
        0,
        ge=0,
        le=5,
        description="Average rating",
    )
    is_new: bool = Field(
        True,
        description="New arrival flag",
    )
    is_sale_off: bool = Field(
        False,
        description="On sale flag",
    )
    image_url: Optional[str] = Field(
        None,
        max_length=500,
        description="Product image URL",
    )

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        """Trim surrounding whitespace from the name."""
        v = v.strip()
        if not v:
            raise ValueError("Name must not be blank")
        return v


class ProductUpdate(BaseSchema):
    """Schema for updating a product."""

    name: Optional[str] = Field(
        None,
        min_length=1,
        max_length=255,
        description="Product name",
    )
    brand: Optional[str] = Field(
        None,
        max_length=100,
        description="Brand name",
    )
    category: Optional[str] = Field(
        None,
        max_length=100,
        description="Product category",
    )
    description: Optional[str] = Field(
        None,
        max_length=5000,
        description="Product description",
    )
    quantity: Optional[int] = Field(
        None,
        ge=0,
        description="Units in stock",
    )
    original_price: Optional[float] = Field(
        None,
        ge=0,
        description="List price",
    )
    discount_price: Optional[float] = Field(
        None,
        ge=0,
        description="Selling price",
    )
    rating: Optional[float] = Field(
        None,
        ge=0,
        le=5,
        description="Average rating",
    )
    is_new: Optional[bool] = Field(
        None,
        description="New arrival flag",
    )
    is_sale_off: Optional[bool] = Field(
        None,
        description="On sale flag",
    )
    image_url: Optional[str] = Field(
        None,
        max_length=500,
        description="Product image URL",
    )


class ProductResponse(TimestampSchema):
    """Schema for product response."""

    id: str = Field(
        ...,
        description="Product unique identifier",
    )
    name: str = Field(
        ...,
        description="Product name",
    )
    slug: str = Field(
        ...,
        description="URL slug",
    )
    brand: Optional[str] = None
    category: Optional[str] = None
    description: Optional[str] = None
    quantity: int = Field(
        ...,
        description="Units in stock",
    )
    original_price: float
    discount_price: float
    rating: float
    is_new: bool
    is_sale_off: bool
    image_url: Optional[str] = None


class ProductSummary(BaseSchema):
    """Product details attached to cart lines."""

    id: str
    name: str
    slug: str
    image_url: Optional[str] = None
    quantity: int
    discount_price: float
