# ==============================================================================
# DASHBOARD ENDPOINTS - Admin Rollups
# ==============================================================================

from __future__ import annotations

from fastapi import APIRouter, Path, Query

from cosmetics_store.api.dependencies import AdminUserID, DashboardServiceDep
from cosmetics_store.schemas.base import APIResponse
from cosmetics_store.schemas.dashboard import (
    DashboardSummary,
    MonthlyOrders,
    OrderStatusCounts,
    Revenue,
)

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get(
    "/summary",
    response_model=APIResponse[DashboardSummary],
    summary="Dashboard summary",
)
async def get_summary(
    _: AdminUserID,
    service: DashboardServiceDep,
) -> APIResponse[DashboardSummary]:
    return APIResponse.ok(data=await service.summary())


@router.get(
    "/orders/status",
    response_model=APIResponse[OrderStatusCounts],
    summary="Orders per status",
)
async def get_status_counts(
    _: AdminUserID,
    service: DashboardServiceDep,
) -> APIResponse[OrderStatusCounts]:
    return APIResponse.ok(data=await service.status_counts())


@router.get(
    "/orders/monthly",
    response_model=APIResponse[MonthlyOrders],
    summary="Orders in a month",
)
async def get_monthly_orders(
    _: AdminUserID,
    service: DashboardServiceDep,
    year: int = Query(..., ge=2000, le=9999),
    month: int = Query(..., ge=1, le=12),
) -> APIResponse[MonthlyOrders]:
    return APIResponse.ok(data=await service.orders_in_month(year, month))


@router.get(
    "/revenue/{year}",
    response_model=APIResponse[Revenue],
    summary="Revenue for a year",
)
async def get_yearly_revenue(
    _: AdminUserID,
    service: DashboardServiceDep,
    year: int = Path(..., ge=2000, le=9999),
) -> APIResponse[Revenue]:
    return APIResponse.ok(data=await service.revenue_by_year(year))


@router.get(
    "/revenue/{year}/{month}",
    response_model=APIResponse[Revenue],
    summary="Revenue for a month",
)
async def get_monthly_revenue(
    _: AdminUserID,
    service: DashboardServiceDep,
    year: int = Path(..., ge=2000, le=9999),
    month: int = Path(..., ge=1, le=12),
) -> APIResponse[Revenue]:
    return APIResponse.ok(data=await service.revenue_by_month(year, month))
