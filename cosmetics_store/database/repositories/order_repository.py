# ==============================================================================
# ORDER REPOSITORY - Order Store
# ==============================================================================

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict

from cosmetics_store.core.constants import DatabaseConstants, OrderConstants
from cosmetics_store.database.adapters.base_adapter import BaseDatabaseAdapter
from cosmetics_store.database.repositories.base_repository import BaseRepository
from cosmetics_store.schemas.order import OrderInDB


class OrderRepository(BaseRepository[OrderInDB]):
    """
    Order store.

    Orders are soft-deleted by the workflow; :meth:`delete` is only
    used to undo an insert whose checkout failed afterwards.
    """

    def __init__(self, adapter: BaseDatabaseAdapter) -> None:
        super().__init__(adapter, DatabaseConstants.ORDERS_COLLECTION)

    def _to_entity(self, data: Dict[str, Any]) -> OrderInDB:
        return OrderInDB.model_validate(data)

    # ==========================================================================
    # ROLLUPS
    # ==========================================================================

    async def count_by_status(self, status: str) -> int:
        """Orders in a status, soft-deleted ones included."""
        return await self.count({"status": status}, include_deleted=True)

    async def count_created_between(
        self,
        start: datetime,
        end: datetime,
    ) -> int:
        """Orders created in ``[start, end)``, soft-deleted ones included."""
        return await self.count(
            {"created_at": {"$gte": start, "$lt": end}},
            include_deleted=True,
        )

    async def completed_revenue_between(
        self,
        start: datetime,
        end: datetime,
    ) -> float:
        """Sum of ``total_amount`` over completed orders created in ``[start, end)``."""
        total = await self._adapter.sum_field(
            self._collection_name,
            "total_amount",
            filters={
                "status": OrderConstants.STATUS_COMPLETED,
                "created_at": {"$gte": start, "$lt": end},
            },
        )
        return float(total or 0)
