# ==============================================================================
# ADDRESS SCHEMAS - Delivery Address Book
# ==============================================================================

from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from cosmetics_store.core.constants import AccountConstants
from cosmetics_store.schemas.base import BaseSchema, RecordSchema


class AddressItem(BaseSchema):
    """One delivery address; position in the book is its identifier."""

    name: str = Field(
        ...,
        min_length=AccountConstants.ADDRESS_NAME_MIN,
        max_length=AccountConstants.ADDRESS_NAME_MAX,
        description="Receiver name",
    )
    phone: str = Field(
        ...,
        pattern=AccountConstants.VN_PHONE_PATTERN,
        description="Vietnamese mobile number",
    )
    address_detail: str = Field(
        ...,
        min_length=AccountConstants.ADDRESS_DETAIL_MIN,
        max_length=AccountConstants.ADDRESS_DETAIL_MAX,
    )
    is_default: bool = False


class AddressBookInDB(RecordSchema):
    user_id: str
    addresses: List[AddressItem] = Field(default_factory=list)


class AddressCreate(BaseSchema):
    name: str = Field(
        ...,
        min_length=AccountConstants.ADDRESS_NAME_MIN,
        max_length=AccountConstants.ADDRESS_NAME_MAX,
    )
    phone: str = Field(..., pattern=AccountConstants.VN_PHONE_PATTERN)
    address_detail: str = Field(
        ...,
        min_length=AccountConstants.ADDRESS_DETAIL_MIN,
        max_length=AccountConstants.ADDRESS_DETAIL_MAX,
    )
    is_default: bool = Field(
        False,
        description="Ignored for the first address, which is always the default",
    )


class AddressUpdate(BaseSchema):
    """Partial update; ``is_default=False`` is refused on the only default."""

    name: Optional[str] = Field(
        None,
        min_length=AccountConstants.ADDRESS_NAME_MIN,
        max_length=AccountConstants.ADDRESS_NAME_MAX,
    )
    phone: Optional[str] = Field(None, pattern=AccountConstants.VN_PHONE_PATTERN)
    address_detail: Optional[str] = Field(
        None,
        min_length=AccountConstants.ADDRESS_DETAIL_MIN,
        max_length=AccountConstants.ADDRESS_DETAIL_MAX,
    )
    is_default: Optional[bool] = None
