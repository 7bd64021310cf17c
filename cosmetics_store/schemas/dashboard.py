# ==============================================================================
# DASHBOARD SCHEMAS - Admin Rollups
# ==============================================================================

from __future__ import annotations

from typing import Optional

from pydantic import Field

from cosmetics_store.schemas.base import BaseSchema


class OrderStatusCounts(BaseSchema):
    """Number of orders in each status."""

    pending: int = 0
    processing: int = 0
    completed: int = 0
    cancelled: int = 0


class DashboardSummary(BaseSchema):
    """Headline counts for the admin dashboard."""

    total_users: int = Field(..., description="Active accounts")
    total_products: int = Field(..., description="Active products")
    total_orders: int = Field(..., description="Orders ever placed")
    orders_by_status: OrderStatusCounts


class MonthlyOrders(BaseSchema):
    """Orders created in one calendar month."""

    year: int
    month: int
    total_orders: int


class Revenue(BaseSchema):
    """Sum of completed order totals over a year or month."""

    year: int
    month: Optional[int] = None
    revenue: float
