# ==============================================================================
# ORDER ENDPOINTS - Checkout & Fulfillment Routes
# ==============================================================================
# Customers place and track their orders; administrators move orders
# through the fulfillment states
# ==============================================================================

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Query, status

from cosmetics_store.api.dependencies import (
    AdminUserID,
    CurrentUserID,
    OrderServiceDep,
)
from cosmetics_store.core.constants import APIConstants, SuccessMessages
from cosmetics_store.schemas.base import APIResponse, PaginatedResponse
from cosmetics_store.schemas.order import OrderCreate, OrderResponse, OrderUpdate

router = APIRouter(prefix="/orders", tags=["Orders"])

_STATUS_PATTERN = "^(pending|processing|completed|cancelled)$"


# ==============================================================================
# CUSTOMER ROUTES
# ==============================================================================

@router.post(
    "",
    response_model=APIResponse[OrderResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Place order",
    description="Check out: reserve stock, record the order, prune the cart.",
)
async def create_order(
    user_id: CurrentUserID,
    schema: OrderCreate,
    service: OrderServiceDep,
) -> APIResponse[OrderResponse]:
    """Place an order for the current user."""
    order = await service.create_order(user_id, schema)
    return APIResponse.ok(data=order, message=SuccessMessages.ORDER_PLACED)


@router.get(
    "/me",
    response_model=APIResponse[PaginatedResponse[OrderResponse]],
    summary="List my orders",
)
async def list_my_orders(
    user_id: CurrentUserID,
    service: OrderServiceDep,
    page: int = Query(1, ge=1),
    page_size: int = Query(
        APIConstants.DEFAULT_PAGE_SIZE,
        ge=APIConstants.MIN_PAGE_SIZE,
        le=APIConstants.MAX_PAGE_SIZE,
    ),
) -> APIResponse[PaginatedResponse[OrderResponse]]:
    result = await service.list_user_orders(user_id, page=page, page_size=page_size)
    return APIResponse.ok(data=PaginatedResponse[OrderResponse](**result))


@router.get(
    "/me/{order_id}",
    response_model=APIResponse[OrderResponse],
    summary="Get my order",
)
async def get_my_order(
    order_id: str,
    user_id: CurrentUserID,
    service: OrderServiceDep,
) -> APIResponse[OrderResponse]:
    order = await service.get_order_for_user(user_id, order_id)
    return APIResponse.ok(data=order)


@router.delete(
    "/me/{order_id}",
    response_model=APIResponse[None],
    summary="Remove my order",
    description="Remove an own order while it is processing.",
)
async def delete_my_order(
    order_id: str,
    user_id: CurrentUserID,
    service: OrderServiceDep,
) -> APIResponse[None]:
    await service.delete_own_order(user_id, order_id)
    return APIResponse.ok(data=None, message=SuccessMessages.ORDER_DELETED)


# ==============================================================================
# ADMIN ROUTES
# ==============================================================================

@router.get(
    "",
    response_model=APIResponse[PaginatedResponse[OrderResponse]],
    summary="List orders",
    description="All active orders, optionally by status (admin only).",
)
async def list_orders(
    _: AdminUserID,
    service: OrderServiceDep,
    page: int = Query(1, ge=1),
    page_size: int = Query(
        APIConstants.DEFAULT_PAGE_SIZE,
        ge=APIConstants.MIN_PAGE_SIZE,
        le=APIConstants.MAX_PAGE_SIZE,
    ),
    status_filter: Optional[str] = Query(None, alias="status", pattern=_STATUS_PATTERN),
) -> APIResponse[PaginatedResponse[OrderResponse]]:
    result = await service.list_orders(
        page=page,
        page_size=page_size,
        status=status_filter,
    )
    return APIResponse.ok(data=PaginatedResponse[OrderResponse](**result))


@router.get(
    "/{order_id}",
    response_model=APIResponse[OrderResponse],
    summary="Get order",
)
async def get_order(
    order_id: str,
    _: AdminUserID,
    service: OrderServiceDep,
) -> APIResponse[OrderResponse]:
    order = await service.get_order(order_id)
    return APIResponse.ok(data=order)


@router.patch(
    "/{order_id}",
    response_model=APIResponse[OrderResponse],
    summary="Update order",
    description="Change status, receiver details or payment (admin only).",
)
async def update_order(
    order_id: str,
    _: AdminUserID,
    schema: OrderUpdate,
    service: OrderServiceDep,
) -> APIResponse[OrderResponse]:
    """Apply an order update and its status transition."""
    order = await service.update_order(order_id, schema)
    return APIResponse.ok(data=order, message=SuccessMessages.ORDER_UPDATED)


@router.delete(
    "/{order_id}",
    response_model=APIResponse[None],
    summary="Delete order",
    description="Soft-delete an order and restock its lines (admin only).",
)
async def delete_order(
    order_id: str,
    _: AdminUserID,
    service: OrderServiceDep,
) -> APIResponse[None]:
    await service.delete_order(order_id)
    return APIResponse.ok(data=None, message=SuccessMessages.ORDER_DELETED)
