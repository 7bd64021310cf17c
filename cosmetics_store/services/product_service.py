# ==============================================================================
# PRODUCT SERVICE - Catalog Management
# ==============================================================================
# Admin catalog operations; slugs are derived from product names
# ==============================================================================

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from cosmetics_store.core.constants import ErrorMessages
from cosmetics_store.core.exceptions import ConflictError, NotFoundError, ValidationError
from cosmetics_store.database.adapters.base_adapter import BaseDatabaseAdapter
from cosmetics_store.database.repositories.product_repository import ProductRepository
from cosmetics_store.schemas.product import (
    ProductCreate,
    ProductInDB,
    ProductResponse,
    ProductUpdate,
)
from cosmetics_store.services.base_service import BaseService
from cosmetics_store.utils.helpers import slugify

logger = logging.getLogger(__name__)


class ProductService(BaseService[ProductInDB, ProductResponse]):
    """
    Product service for the cosmetics catalog.

    Products are never hard-deleted; deletion sets the soft-delete
    flag so historical orders keep their snapshots and the slug is
    freed for reuse.
    """

    def __init__(self, adapter: BaseDatabaseAdapter) -> None:
        """Initialize product service."""
        self._products = ProductRepository(adapter)
        super().__init__(self._products, "product")

    def _to_response(self, entity: ProductInDB) -> ProductResponse:
        """Convert product record to response."""
        return ProductResponse.model_validate(entity.model_dump())

    async def _unique_slug(
        self,
        name: str,
        exclude_id: Optional[str] = None,
    ) -> str:
        slug = slugify(name)
        if not slug:
            raise ValidationError(
                message="Product name must contain letters or digits",
                errors={"name": name},
            )
        existing = await self._products.get_by_slug(slug)
        if existing is not None and existing.id != exclude_id:
            raise ConflictError(
                message=ErrorMessages.SLUG_EXISTS,
                resource_type="product",
                details={"slug": slug},
            )
        return slug

    # ==========================================================================
    # PRODUCT OPERATIONS
    # ==========================================================================

    async def create_product(self, schema: ProductCreate) -> ProductResponse:
        """
        Create a product.

        Raises:
            ConflictError: If another active product has the same slug
        """
        data = schema.model_dump()
        data["slug"] = await self._unique_slug(schema.name)

        product = await self._products.create(data)
        logger.info(f"Product created: {product.id} ({product.slug})")
        return self._to_response(product)

    async def get_by_slug(self, slug: str) -> ProductResponse:
        """Get an active product by slug."""
        product = await self._products.get_by_slug(slug)
        if product is None:
            raise NotFoundError(
                message=ErrorMessages.PRODUCT_NOT_FOUND,
                resource_type="product",
                resource_id=slug,
            )
        return self._to_response(product)

    async def list_products(
        self,
        page: int = 1,
        page_size: int = 10,
        category: Optional[str] = None,
        brand: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Active products, newest first, optionally filtered."""
        filters: Dict[str, Any] = {}
        if category:
            filters["category"] = category
        if brand:
            filters["brand"] = brand

        return await self.get_paginated(
            page=page,
            page_size=page_size,
            filters=filters,
            sort_by="created_at",
            sort_order="desc",
        )

    async def update_product(
        self,
        product_id: str,
        schema: ProductUpdate,
    ) -> ProductResponse:
        """
        Update a product.

        A new name re-derives the slug; stock edits go through the
        catalog store's ``set_stock``.
        """
        await self._get_or_404(product_id)

        data = {
            k: v for k, v in schema.model_dump(exclude_unset=True).items()
            if v is not None
        }
        if "name" in data:
            data["slug"] = await self._unique_slug(data["name"], exclude_id=product_id)

        quantity = data.pop("quantity", None)
        if quantity is not None:
            await self._products.set_stock(product_id, quantity)

        if data:
            await self._products.update(product_id, data)

        logger.info(f"Product updated: {product_id}")
        return await self.get_by_id(product_id)

    async def delete_product(self, product_id: str) -> None:
        """Soft-delete a product."""
        await self._get_or_404(product_id)
        await self._products.update(product_id, {"is_deleted": True})
        logger.info(f"Product soft-deleted: {product_id}")
