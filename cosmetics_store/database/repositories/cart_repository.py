# ==============================================================================
# CART REPOSITORY - Cart Store
# ==============================================================================

from __future__ import annotations

from typing import Any, Dict, List, Optional

from cosmetics_store.core.constants import DatabaseConstants
from cosmetics_store.database.adapters.base_adapter import BaseDatabaseAdapter
from cosmetics_store.database.repositories.base_repository import BaseRepository
from cosmetics_store.schemas.cart import CartInDB, CartLine


class CartRepository(BaseRepository[CartInDB]):
    """Cart store: at most one active cart per user."""

    def __init__(self, adapter: BaseDatabaseAdapter) -> None:
        super().__init__(adapter, DatabaseConstants.CARTS_COLLECTION)

    def _to_entity(self, data: Dict[str, Any]) -> CartInDB:
        return CartInDB.model_validate(data)

    async def get_by_user(self, user_id: str) -> Optional[CartInDB]:
        return await self.find_one({"user_id": user_id})

    async def create_for_user(self, user_id: str) -> CartInDB:
        return await self.create(
            {
                "user_id": user_id,
                "items": [],
                "total_amount": 0,
                "total_items": 0,
            }
        )

    async def replace_items(
        self,
        cart_id: str,
        items: List[CartLine],
        total_amount: float,
        total_items: int,
    ) -> Optional[CartInDB]:
        """Write the whole line list together with its totals."""
        return await self.update(
            cart_id,
            {
                "items": [item.model_dump() for item in items],
                "total_amount": total_amount,
                "total_items": total_items,
            },
        )
