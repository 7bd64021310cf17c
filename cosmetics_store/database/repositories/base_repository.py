# ==============================================================================
# BASE REPOSITORY - Generic Data Access Abstraction
# ==============================================================================
# Repository Pattern implementation for consistent data access
# Works with both SQL and NoSQL database adapters
# ==============================================================================

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import (
    Any,
    Dict,
    Generic,
    List,
    Optional,
    TypeVar,
)

from cosmetics_store.database.adapters.base_adapter import BaseDatabaseAdapter
from cosmetics_store.utils.helpers import utc_now

# Type variable for generic repository
ModelType = TypeVar("ModelType")

# Matches records without the flag as well as is_deleted=False
ACTIVE_FILTER: Dict[str, Any] = {"is_deleted": {"$ne": True}}


class BaseRepository(ABC, Generic[ModelType]):
    """
    Abstract base repository providing standard CRUD operations.

    Implements the Repository Pattern for data access abstraction,
    decoupling business logic from database implementation details.
    Reads skip soft-deleted records unless ``include_deleted`` is set;
    writes stamp ``created_at`` / ``updated_at``.

    Generic Parameters:
        ModelType: Record schema returned to services

    Attributes:
        _adapter: Database adapter for database operations
        _collection_name: Table/collection identifier
    """

    def __init__(
        self,
        adapter: BaseDatabaseAdapter,
        collection_name: str,
    ) -> None:
        """
        Initialize repository.

        Args:
            adapter: Database adapter instance
            collection_name: Table/collection name for operations
        """
        self._adapter = adapter
        self._collection_name = collection_name

    # ==========================================================================
    # ABSTRACT METHODS - Must be implemented by subclasses
    # ==========================================================================

    @abstractmethod
    def _to_entity(self, data: Dict[str, Any]) -> ModelType:
        """
        Convert database record to a record schema.

        Args:
            data: Raw database record dictionary

        Returns:
            Record schema instance
        """
        pass

    @staticmethod
    def _scoped(
        filters: Optional[Dict[str, Any]],
        include_deleted: bool,
    ) -> Dict[str, Any]:
        scoped = dict(filters or {})
        if not include_deleted:
            scoped.update(ACTIVE_FILTER)
        return scoped

    # ==========================================================================
    # CRUD OPERATIONS
    # ==========================================================================

    async def create(self, data: Dict[str, Any]) -> ModelType:
        """
        Create a new record.

        Args:
            data: Field values; timestamps and the delete flag are filled in

        Returns:
            Created record with generated ID
        """
        record = dict(data)
        record.setdefault("is_deleted", False)
        record["created_at"] = utc_now()
        record["updated_at"] = None
        result = await self._adapter.create(self._collection_name, record)
        return self._to_entity(result)

    async def get_by_id(
        self,
        id: Any,
        include_deleted: bool = False,
    ) -> Optional[ModelType]:
        """
        Retrieve record by ID.

        Args:
            id: Primary key value
            include_deleted: Also return soft-deleted records

        Returns:
            Record if found, None otherwise
        """
        result = await self._adapter.get_by_id(self._collection_name, id)
        if not result:
            return None
        if result.get("is_deleted") and not include_deleted:
            return None
        return self._to_entity(result)

    async def get_all(
        self,
        skip: int = 0,
        limit: int = 100,
        filters: Optional[Dict[str, Any]] = None,
        sort_by: Optional[str] = None,
        sort_order: str = "asc",
        include_deleted: bool = False,
    ) -> List[ModelType]:
        """
        Retrieve multiple records with pagination.

        Args:
            skip: Number of records to skip
            limit: Maximum records to return
            filters: Field-value pairs for filtering
            sort_by: Field to sort by
            sort_order: Sort direction ("asc" or "desc")
            include_deleted: Also return soft-deleted records
        """
        results = await self._adapter.get_all(
            self._collection_name,
            skip=skip,
            limit=limit,
            filters=self._scoped(filters, include_deleted),
            sort_by=sort_by,
            sort_order=sort_order,
        )
        return [self._to_entity(r) for r in results]

    async def update(
        self,
        id: Any,
        data: Dict[str, Any],
    ) -> Optional[ModelType]:
        """
        Apply a partial update and stamp ``updated_at``.

        ``id`` and ``created_at`` are never overwritten.

        Returns:
            Updated record if found, None otherwise
        """
        changes = {
            k: v for k, v in data.items() if k not in ("id", "created_at")
        }
        changes["updated_at"] = utc_now()
        result = await self._adapter.update(self._collection_name, id, changes)
        return self._to_entity(result) if result else None

    async def delete(self, id: Any) -> bool:
        """
        Physically delete a record by ID.

        Returns:
            True if deleted, False if not found
        """
        return await self._adapter.delete(self._collection_name, id)

    # ==========================================================================
    # QUERY OPERATIONS
    # ==========================================================================

    async def count(
        self,
        filters: Optional[Dict[str, Any]] = None,
        include_deleted: bool = False,
    ) -> int:
        """Count records matching filters."""
        return await self._adapter.count(
            self._collection_name,
            self._scoped(filters, include_deleted),
        )

    async def find_one(
        self,
        filters: Dict[str, Any],
        include_deleted: bool = False,
    ) -> Optional[ModelType]:
        """
        Find a single record matching filters.

        Returns:
            First matching record, None if not found
        """
        result = await self._adapter.find_one(
            self._collection_name,
            self._scoped(filters, include_deleted),
        )
        return self._to_entity(result) if result else None
