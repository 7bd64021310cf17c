# ==============================================================================
# PRODUCT ENDPOINTS - Catalog Routes
# ==============================================================================
# Public catalog reads and admin catalog writes
# ==============================================================================

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Query, status

from cosmetics_store.api.dependencies import AdminUserID, ProductServiceDep
from cosmetics_store.core.constants import APIConstants, SuccessMessages
from cosmetics_store.schemas.base import APIResponse, PaginatedResponse
from cosmetics_store.schemas.product import (
    ProductCreate,
    ProductResponse,
    ProductUpdate,
)

router = APIRouter(prefix="/products", tags=["Products"])


@router.get(
    "",
    response_model=APIResponse[PaginatedResponse[ProductResponse]],
    summary="List products",
    description="Active products, newest first.",
)
async def list_products(
    service: ProductServiceDep,
    page: int = Query(1, ge=1),
    page_size: int = Query(
        APIConstants.DEFAULT_PAGE_SIZE,
        ge=APIConstants.MIN_PAGE_SIZE,
        le=APIConstants.MAX_PAGE_SIZE,
    ),
    category: Optional[str] = Query(None),
    brand: Optional[str] = Query(None),
) -> APIResponse[PaginatedResponse[ProductResponse]]:
    """List catalog products."""
    result = await service.list_products(
        page=page,
        page_size=page_size,
        category=category,
        brand=brand,
    )
    return APIResponse.ok(data=PaginatedResponse[ProductResponse](**result))


@router.get(
    "/slug/{slug}",
    response_model=APIResponse[ProductResponse],
    summary="Get product by slug",
)
async def get_product_by_slug(
    slug: str,
    service: ProductServiceDep,
) -> APIResponse[ProductResponse]:
    product = await service.get_by_slug(slug)
    return APIResponse.ok(data=product)


@router.get(
    "/{product_id}",
    response_model=APIResponse[ProductResponse],
    summary="Get product",
)
async def get_product(
    product_id: str,
    service: ProductServiceDep,
) -> APIResponse[ProductResponse]:
    product = await service.get_by_id(product_id)
    return APIResponse.ok(data=product)


@router.post(
    "",
    response_model=APIResponse[ProductResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Create product",
    description="Add a product to the catalog (admin only).",
)
async def create_product(
    _: AdminUserID,
    schema: ProductCreate,
    service: ProductServiceDep,
) -> APIResponse[ProductResponse]:
    """Create a catalog product."""
    product = await service.create_product(schema)
    return APIResponse.ok(data=product, message=SuccessMessages.PRODUCT_CREATED)


@router.patch(
    "/{product_id}",
    response_model=APIResponse[ProductResponse],
    summary="Update product",
    description="Update product fields or stock (admin only).",
)
async def update_product(
    product_id: str,
    _: AdminUserID,
    schema: ProductUpdate,
    service: ProductServiceDep,
) -> APIResponse[ProductResponse]:
    product = await service.update_product(product_id, schema)
    return APIResponse.ok(data=product, message=SuccessMessages.PRODUCT_UPDATED)


@router.delete(
    "/{product_id}",
    response_model=APIResponse[None],
    summary="Delete product",
    description="Soft-delete a product (admin only).",
)
async def delete_product(
    product_id: str,
    _: AdminUserID,
    service: ProductServiceDep,
) -> APIResponse[None]:
    await service.delete_product(product_id)
    return APIResponse.ok(data=None, message=SuccessMessages.PRODUCT_DELETED)
