# ==============================================================================
# ADDRESS ENDPOINTS - Current User's Address Book
# ==============================================================================
# Entries are addressed by their position in the book
# ==============================================================================

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Path, status

from cosmetics_store.api.dependencies import AddressServiceDep, CurrentUserID
from cosmetics_store.core.constants import SuccessMessages
from cosmetics_store.schemas.address import AddressCreate, AddressItem, AddressUpdate
from cosmetics_store.schemas.base import APIResponse

router = APIRouter(prefix="/addresses", tags=["Addresses"])


@router.post(
    "",
    response_model=APIResponse[List[AddressItem]],
    status_code=status.HTTP_201_CREATED,
    summary="Add address",
    description="Append an address; returns the whole book.",
)
async def add_address(
    user_id: CurrentUserID,
    schema: AddressCreate,
    service: AddressServiceDep,
) -> APIResponse[List[AddressItem]]:
    addresses = await service.add_address(user_id, schema)
    return APIResponse.ok(data=addresses, message=SuccessMessages.ADDRESS_CREATED)


@router.get(
    "",
    response_model=APIResponse[List[AddressItem]],
    summary="List addresses",
)
async def list_addresses(
    user_id: CurrentUserID,
    service: AddressServiceDep,
) -> APIResponse[List[AddressItem]]:
    return APIResponse.ok(data=await service.list_addresses(user_id))


@router.get(
    "/default",
    response_model=APIResponse[Optional[AddressItem]],
    summary="Get default address",
)
async def get_default_address(
    user_id: CurrentUserID,
    service: AddressServiceDep,
) -> APIResponse[Optional[AddressItem]]:
    return APIResponse.ok(data=await service.get_default(user_id))


@router.get(
    "/{index}",
    response_model=APIResponse[AddressItem],
    summary="Get address",
)
async def get_address(
    user_id: CurrentUserID,
    service: AddressServiceDep,
    index: int = Path(..., ge=0),
) -> APIResponse[AddressItem]:
    return APIResponse.ok(data=await service.get_address(user_id, index))


@router.put(
    "/{index}",
    response_model=APIResponse[AddressItem],
    summary="Update address",
)
async def update_address(
    user_id: CurrentUserID,
    schema: AddressUpdate,
    service: AddressServiceDep,
    index: int = Path(..., ge=0),
) -> APIResponse[AddressItem]:
    address = await service.update_address(user_id, index, schema)
    return APIResponse.ok(data=address, message=SuccessMessages.ADDRESS_UPDATED)


@router.delete(
    "/{index}",
    response_model=APIResponse[None],
    summary="Delete address",
)
async def delete_address(
    user_id: CurrentUserID,
    service: AddressServiceDep,
    index: int = Path(..., ge=0),
) -> APIResponse[None]:
    await service.delete_address(user_id, index)
    return APIResponse.ok(data=None, message=SuccessMessages.ADDRESS_DELETED)


@router.put(
    "/{index}/default",
    response_model=APIResponse[AddressItem],
    summary="Set default address",
)
async def set_default_address(
    user_id: CurrentUserID,
    service: AddressServiceDep,
    index: int = Path(..., ge=0),
) -> APIResponse[AddressItem]:
    address = await service.set_default(user_id, index)
    return APIResponse.ok(data=address, message=SuccessMessages.DEFAULT_ADDRESS_SET)
