# ==============================================================================
# ADDRESS REPOSITORY - Address Book Store
# ==============================================================================

from __future__ import annotations

from typing import Any, Dict, List, Optional

from cosmetics_store.core.constants import DatabaseConstants
from cosmetics_store.database.adapters.base_adapter import BaseDatabaseAdapter
from cosmetics_store.database.repositories.base_repository import BaseRepository
from cosmetics_store.schemas.address import AddressBookInDB, AddressItem


class AddressRepository(BaseRepository[AddressBookInDB]):
    """At most one active address book per user."""

    def __init__(self, adapter: BaseDatabaseAdapter) -> None:
        super().__init__(adapter, DatabaseConstants.ADDRESSES_COLLECTION)

    def _to_entity(self, data: Dict[str, Any]) -> AddressBookInDB:
        return AddressBookInDB.model_validate(data)

    async def get_by_user(self, user_id: str) -> Optional[AddressBookInDB]:
        return await self.find_one({"user_id": user_id})

    async def create_for_user(
        self,
        user_id: str,
        addresses: List[AddressItem],
    ) -> AddressBookInDB:
        return await self.create(
            {
                "user_id": user_id,
                "addresses": [item.model_dump() for item in addresses],
            }
        )

    async def replace_addresses(
        self,
        book_id: str,
        addresses: List[AddressItem],
    ) -> Optional[AddressBookInDB]:
        """Write the whole entry list back in one update."""
        return await self.update(
            book_id,
            {"addresses": [item.model_dump() for item in addresses]},
        )
