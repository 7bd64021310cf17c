# ==============================================================================
# USER REPOSITORY - Account Store
# ==============================================================================

from __future__ import annotations

from typing import Any, Dict, Optional

from cosmetics_store.core.constants import DatabaseConstants
from cosmetics_store.database.adapters.base_adapter import BaseDatabaseAdapter
from cosmetics_store.database.repositories.base_repository import BaseRepository
from cosmetics_store.schemas.user import UserInDB


class UserRepository(BaseRepository[UserInDB]):
    def __init__(self, adapter: BaseDatabaseAdapter) -> None:
        super().__init__(adapter, DatabaseConstants.USERS_COLLECTION)

    def _to_entity(self, data: Dict[str, Any]) -> UserInDB:
        return UserInDB.model_validate(data)

    async def get_by_email(
        self,
        email: str,
        include_deleted: bool = False,
    ) -> Optional[UserInDB]:
        return await self.find_one({"email": email}, include_deleted=include_deleted)

    async def get_by_username(
        self,
        username: str,
        include_deleted: bool = False,
    ) -> Optional[UserInDB]:
        return await self.find_one(
            {"username": username},
            include_deleted=include_deleted,
        )
