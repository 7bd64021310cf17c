# ==============================================================================
# CART ENDPOINTS - Shopping Cart Routes
# ==============================================================================
# The authenticated user's own cart
# ==============================================================================

from __future__ import annotations

from fastapi import APIRouter, status

from cosmetics_store.api.dependencies import CartServiceDep, CurrentUserID
from cosmetics_store.core.constants import SuccessMessages
from cosmetics_store.schemas.base import APIResponse
from cosmetics_store.schemas.cart import CartItemAdd, CartItemUpdate, CartResponse

router = APIRouter(prefix="/carts", tags=["Carts"])


@router.get(
    "",
    response_model=APIResponse[CartResponse],
    summary="Get cart",
    description="Current user's cart with product details.",
)
async def get_cart(
    user_id: CurrentUserID,
    service: CartServiceDep,
) -> APIResponse[CartResponse]:
    cart = await service.get_cart(user_id)
    return APIResponse.ok(data=cart)


@router.post(
    "",
    response_model=APIResponse[CartResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Create cart",
)
async def create_cart(
    user_id: CurrentUserID,
    service: CartServiceDep,
) -> APIResponse[CartResponse]:
    cart = await service.create_cart(user_id)
    return APIResponse.ok(data=cart, message=SuccessMessages.CART_CREATED)


@router.post(
    "/items",
    response_model=APIResponse[CartResponse],
    summary="Add item",
    description="Add a product, merging with an existing line.",
)
async def add_item(
    user_id: CurrentUserID,
    schema: CartItemAdd,
    service: CartServiceDep,
) -> APIResponse[CartResponse]:
    """Add a product to the cart."""
    cart = await service.add_item(user_id, schema)
    return APIResponse.ok(data=cart, message=SuccessMessages.CART_ITEM_ADDED)


@router.put(
    "/items",
    response_model=APIResponse[CartResponse],
    summary="Update item quantity",
    description="Set a line's quantity; zero removes the line.",
)
async def update_item(
    user_id: CurrentUserID,
    schema: CartItemUpdate,
    service: CartServiceDep,
) -> APIResponse[CartResponse]:
    cart = await service.update_item_quantity(user_id, schema)
    return APIResponse.ok(data=cart, message=SuccessMessages.CART_ITEM_UPDATED)


@router.delete(
    "/items/{product_id}",
    response_model=APIResponse[CartResponse],
    summary="Remove item",
)
async def remove_item(
    product_id: str,
    user_id: CurrentUserID,
    service: CartServiceDep,
) -> APIResponse[CartResponse]:
    cart = await service.remove_item(user_id, product_id)
    return APIResponse.ok(data=cart, message=SuccessMessages.CART_ITEM_REMOVED)


@router.delete(
    "",
    response_model=APIResponse[None],
    summary="Clear cart",
)
async def clear_cart(
    user_id: CurrentUserID,
    service: CartServiceDep,
) -> APIResponse[None]:
    await service.clear(user_id)
    return APIResponse.ok(data=None, message=SuccessMessages.CART_CLEARED)
