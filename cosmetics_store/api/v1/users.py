# ==============================================================================
# USER ENDPOINTS - Account Views & Administration
# ==============================================================================

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Query

from cosmetics_store.api.dependencies import (
    AdminUserID,
    CurrentUserID,
    UserServiceDep,
)
from cosmetics_store.core.constants import APIConstants, SuccessMessages
from cosmetics_store.schemas.base import APIResponse, PaginatedResponse
from cosmetics_store.schemas.user import UserResponse

router = APIRouter(prefix="/users", tags=["Users"])


@router.get(
    "/me",
    response_model=APIResponse[UserResponse],
    summary="Get current user",
)
async def get_me(
    user_id: CurrentUserID,
    service: UserServiceDep,
) -> APIResponse[UserResponse]:
    user = await service.get_user(user_id)
    return APIResponse.ok(data=user)


# ==============================================================================
# ADMIN ROUTES
# ==============================================================================

@router.get(
    "",
    response_model=APIResponse[List[UserResponse]],
    summary="List users",
    description="Every active account, newest first (admin only).",
)
async def list_users(
    _: AdminUserID,
    service: UserServiceDep,
) -> APIResponse[List[UserResponse]]:
    return APIResponse.ok(data=await service.list_users())


@router.get(
    "/paginated",
    response_model=APIResponse[PaginatedResponse[UserResponse]],
    summary="List users by page",
)
async def list_users_paginated(
    _: AdminUserID,
    service: UserServiceDep,
    page: int = Query(1, ge=1),
    page_size: int = Query(
        APIConstants.DEFAULT_PAGE_SIZE,
        ge=APIConstants.MIN_PAGE_SIZE,
        le=APIConstants.MAX_PAGE_SIZE,
    ),
) -> APIResponse[PaginatedResponse[UserResponse]]:
    result = await service.list_users_paginated(page=page, page_size=page_size)
    return APIResponse.ok(data=PaginatedResponse[UserResponse](**result))


@router.get(
    "/{user_id}",
    response_model=APIResponse[UserResponse],
    summary="Get user",
)
async def get_user(
    user_id: str,
    _: AdminUserID,
    service: UserServiceDep,
) -> APIResponse[UserResponse]:
    return APIResponse.ok(data=await service.get_user(user_id))


@router.delete(
    "/{user_id}",
    response_model=APIResponse[None],
    summary="Delete user",
    description="Soft-delete an account (admin only).",
)
async def delete_user(
    user_id: str,
    _: AdminUserID,
    service: UserServiceDep,
) -> APIResponse[None]:
    await service.delete_user(user_id)
    return APIResponse.ok(data=None, message=SuccessMessages.USER_DELETED)
