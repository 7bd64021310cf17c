# ==============================================================================
# DASHBOARD SERVICE - Admin Rollups
# ==============================================================================
# Read-only counts and revenue over the account, catalog and order stores
# ==============================================================================

from __future__ import annotations

import logging

from cosmetics_store.core.constants import OrderConstants
from cosmetics_store.database.adapters.base_adapter import BaseDatabaseAdapter
from cosmetics_store.database.repositories.order_repository import OrderRepository
from cosmetics_store.database.repositories.product_repository import ProductRepository
from cosmetics_store.database.repositories.user_repository import UserRepository
from cosmetics_store.schemas.dashboard import (
    DashboardSummary,
    MonthlyOrders,
    OrderStatusCounts,
    Revenue,
)
from cosmetics_store.utils.helpers import month_window, year_window

logger = logging.getLogger(__name__)


class DashboardService:
    """
    Dashboard aggregator.

    Order counts include soft-deleted orders; product and user counts
    cover active records only. Revenue sums ``total_amount`` of
    completed orders whose ``created_at`` falls in the window.
    """

    def __init__(self, adapter: BaseDatabaseAdapter) -> None:
        self._orders = OrderRepository(adapter)
        self._products = ProductRepository(adapter)
        self._users = UserRepository(adapter)

    async def status_counts(self) -> OrderStatusCounts:
        counts = {
            status: await self._orders.count_by_status(status)
            for status in OrderConstants.all_statuses()
        }
        return OrderStatusCounts(**counts)

    async def summary(self) -> DashboardSummary:
        """Headline counts."""
        return DashboardSummary(
            total_users=await self._users.count(),
            total_products=await self._products.count(),
            total_orders=await self._orders.count(include_deleted=True),
            orders_by_status=await self.status_counts(),
        )

    async def orders_in_month(self, year: int, month: int) -> MonthlyOrders:
        start, end = month_window(year, month)
        total = await self._orders.count_created_between(start, end)
        return MonthlyOrders(year=year, month=month, total_orders=total)

    async def revenue_by_year(self, year: int) -> Revenue:
        start, end = year_window(year)
        revenue = await self._orders.completed_revenue_between(start, end)
        logger.debug(f"Revenue for {year}: {revenue}")
        return Revenue(year=year, revenue=revenue)

    async def revenue_by_month(self, year: int, month: int) -> Revenue:
        start, end = month_window(year, month)
        revenue = await self._orders.completed_revenue_between(start, end)
        return Revenue(year=year, month=month, revenue=revenue)
