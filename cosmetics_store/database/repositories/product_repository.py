# ==============================================================================
# PRODUCT REPOSITORY - Catalog Store
# ==============================================================================

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from cosmetics_store.core.constants import DatabaseConstants
from cosmetics_store.database.adapters.base_adapter import BaseDatabaseAdapter
from cosmetics_store.database.repositories.base_repository import (
    ACTIVE_FILTER,
    BaseRepository,
)
from cosmetics_store.schemas.product import ProductInDB
from cosmetics_store.utils.helpers import utc_now

logger = logging.getLogger(__name__)


class ProductRepository(BaseRepository[ProductInDB]):
    """
    Catalog store.

    Stock changes made by the order workflow go through
    :meth:`adjust_stock`, a single conditional write, so concurrent
    checkouts cannot drive a quantity below zero.
    """

    def __init__(self, adapter: BaseDatabaseAdapter) -> None:
        super().__init__(adapter, DatabaseConstants.PRODUCTS_COLLECTION)

    def _to_entity(self, data: Dict[str, Any]) -> ProductInDB:
        return ProductInDB.model_validate(data)

    async def get_by_slug(self, slug: str) -> Optional[ProductInDB]:
        """Find the active product owning a slug."""
        return await self.find_one({"slug": slug})

    async def set_stock(
        self,
        product_id: str,
        quantity: int,
    ) -> Optional[ProductInDB]:
        """Overwrite the stock quantity of an active product."""
        if await self.get_by_id(product_id) is None:
            return None
        return await self.update(product_id, {"quantity": quantity})

    async def adjust_stock(
        self,
        product_id: str,
        delta: int,
        floor: Optional[int] = 0,
    ) -> Optional[ProductInDB]:
        """
        Add ``delta`` to a product's stock in one guarded write.

        Args:
            product_id: Product to change
            delta: Negative to take units, positive to restock
            floor: Lowest quantity the write may leave, ``None`` for no guard

        Returns:
            The updated product, or None when the product is missing,
            soft-deleted, or the floor guard rejected the write
        """
        result = await self._adapter.increment(
            self._collection_name,
            filters={"id": product_id, **ACTIVE_FILTER},
            field="quantity",
            amount=delta,
            floor=floor,
            data={"updated_at": utc_now()},
        )
        if result is None:
            logger.debug(
                f"Stock adjustment rejected: product={product_id} delta={delta}"
            )
            return None
        return self._to_entity(result)
