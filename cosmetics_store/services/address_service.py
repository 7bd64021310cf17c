# ==============================================================================
# ADDRESS SERVICE - Delivery Address Book
# ==============================================================================
# Each user keeps one book of addresses; exactly one entry of a
# non-empty book is the default
# ==============================================================================

from __future__ import annotations

import logging
from typing import List, Optional

from cosmetics_store.core.constants import ErrorMessages
from cosmetics_store.core.exceptions import BusinessRuleError, NotFoundError
from cosmetics_store.database.adapters.base_adapter import BaseDatabaseAdapter
from cosmetics_store.database.repositories.address_repository import AddressRepository
from cosmetics_store.database.repositories.user_repository import UserRepository
from cosmetics_store.schemas.address import (
    AddressBookInDB,
    AddressCreate,
    AddressItem,
    AddressUpdate,
)

logger = logging.getLogger(__name__)


class AddressService:
    """
    Address book operations.

    Entries are addressed by their index in the book, so deleting an
    entry shifts the ones after it.
    """

    def __init__(self, adapter: BaseDatabaseAdapter) -> None:
        self._books = AddressRepository(adapter)
        self._users = UserRepository(adapter)

    async def _require_book(self, user_id: str) -> AddressBookInDB:
        book = await self._books.get_by_user(user_id)
        if book is None:
            raise NotFoundError(
                message=ErrorMessages.ADDRESS_NOT_FOUND,
                resource_type="address",
            )
        return book

    @staticmethod
    def _check_index(book: AddressBookInDB, index: int) -> None:
        if index < 0 or index >= len(book.addresses):
            raise NotFoundError(
                message=ErrorMessages.ADDRESS_NOT_FOUND,
                resource_type="address",
                resource_id=index,
            )

    async def _save(
        self,
        book: AddressBookInDB,
        addresses: List[AddressItem],
    ) -> AddressBookInDB:
        saved = await self._books.replace_addresses(book.id, addresses)
        if saved is None:
            raise NotFoundError(
                message=ErrorMessages.ADDRESS_NOT_FOUND,
                resource_type="address",
            )
        return saved

    # ==========================================================================
    # OPERATIONS
    # ==========================================================================

    async def add_address(
        self,
        user_id: str,
        schema: AddressCreate,
    ) -> List[AddressItem]:
        """
        Append an address to the user's book.

        The first address of an empty book is always the default; a new
        default takes the flag from every other entry.

        Raises:
            NotFoundError: If the user does not exist
        """
        if await self._users.get_by_id(user_id) is None:
            raise NotFoundError(
                message=ErrorMessages.USER_NOT_FOUND,
                resource_type="user",
                resource_id=user_id,
            )

        book = await self._books.get_by_user(user_id)
        current = book.addresses if book else []
        item = AddressItem(
            **schema.model_dump(exclude={"is_default"}),
            is_default=not current or schema.is_default,
        )

        if book is None:
            book = await self._books.create_for_user(user_id, [item])
            logger.info(f"Address book created for user {user_id}")
            return book.addresses

        if item.is_default:
            current = [a.model_copy(update={"is_default": False}) for a in current]
        book = await self._save(book, [*current, item])
        return book.addresses

    async def list_addresses(self, user_id: str) -> List[AddressItem]:
        book = await self._books.get_by_user(user_id)
        return book.addresses if book else []

    async def get_address(self, user_id: str, index: int) -> AddressItem:
        book = await self._require_book(user_id)
        self._check_index(book, index)
        return book.addresses[index]

    async def update_address(
        self,
        user_id: str,
        index: int,
        schema: AddressUpdate,
    ) -> AddressItem:
        """
        Change fields of one entry.

        Raises:
            NotFoundError: If the book or index does not exist
            BusinessRuleError: If the change would leave no default
        """
        book = await self._require_book(user_id)
        self._check_index(book, index)

        changes = schema.model_dump(exclude_unset=True, exclude_none=True)
        addresses = list(book.addresses)

        if changes.get("is_default") is False and addresses[index].is_default:
            others = [a for i, a in enumerate(addresses) if i != index and a.is_default]
            if not others:
                raise BusinessRuleError(
                    message=ErrorMessages.DEFAULT_ADDRESS_REQUIRED,
                    rule="one_default_address",
                )
        if changes.get("is_default") is True:
            addresses = [a.model_copy(update={"is_default": False}) for a in addresses]

        addresses[index] = AddressItem.model_validate(
            {**addresses[index].model_dump(), **changes}
        )
        book = await self._save(book, addresses)
        return book.addresses[index]

    async def delete_address(self, user_id: str, index: int) -> None:
        """Remove an entry; if it was the default, the first remaining one takes over."""
        book = await self._require_book(user_id)
        self._check_index(book, index)

        addresses = list(book.addresses)
        removed = addresses.pop(index)
        if removed.is_default and addresses:
            addresses[0] = addresses[0].model_copy(update={"is_default": True})
        await self._save(book, addresses)
        logger.info(f"Address {index} removed for user {user_id}")

    async def set_default(self, user_id: str, index: int) -> AddressItem:
        book = await self._require_book(user_id)
        self._check_index(book, index)

        addresses = [
            a.model_copy(update={"is_default": i == index})
            for i, a in enumerate(book.addresses)
        ]
        book = await self._save(book, addresses)
        return book.addresses[index]

    async def get_default(self, user_id: str) -> Optional[AddressItem]:
        """The default entry, or None when the book is missing or empty."""
        book = await self._books.get_by_user(user_id)
        if book is None:
            return None
        return next((a for a in book.addresses if a.is_default), None)
