# ==============================================================================
# BASE DATABASE ADAPTER - Abstract Interface
# ==============================================================================
# Record-level contract shared by the MongoDB and SQLite backends
# ==============================================================================

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional


class BaseDatabaseAdapter(ABC):
    """
    Storage backend seen by the repositories.

    Every adapter returns records as plain dictionaries with a string
    ``id`` key, so repositories never see driver types.

    Filters are field-value pairs. A value may also be an operator
    dictionary using the Mongo spelling (``$gte``, ``$gt``, ``$lte``,
    ``$lt``, ``$ne``, ``$in``); the SQL adapter translates them.
    """

    # ==========================================================================
    # LIFECYCLE METHODS
    # ==========================================================================

    @abstractmethod
    async def connect(self) -> None:
        """Open the connection; raises ``DatabaseError`` on failure."""
        pass

    @abstractmethod
    async def disconnect(self) -> None:
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """True when a ping succeeds."""
        pass

    # ==========================================================================
    # CRUD OPERATIONS
    # ==========================================================================

    @abstractmethod
    async def create(
        self,
        collection: str,
        data: Dict[str, Any],
    ) -> Dict[str, Any]:
        """Insert ``data`` and return it with its generated ``id``."""
        pass

    @abstractmethod
    async def get_by_id(
        self,
        collection: str,
        id: Any,
    ) -> Optional[Dict[str, Any]]:
        """None when missing, malformed ids included."""
        pass

    @abstractmethod
    async def get_all(
        self,
        collection: str,
        skip: int = 0,
        limit: int = 100,
        filters: Optional[Dict[str, Any]] = None,
        sort_by: Optional[str] = None,
        sort_order: str = "asc",
    ) -> List[Dict[str, Any]]:
        """Page through records; ``sort_order`` is ``"asc"`` or ``"desc"``."""
        pass

    @abstractmethod
    async def update(
        self,
        collection: str,
        id: Any,
        data: Dict[str, Any],
    ) -> Optional[Dict[str, Any]]:
        """Set the given fields; None when the record does not exist."""
        pass

    @abstractmethod
    async def delete(
        self,
        collection: str,
        id: Any,
    ) -> bool:
        """Physical delete; False when nothing matched."""
        pass

    # ==========================================================================
    # QUERY OPERATIONS
    # ==========================================================================

    @abstractmethod
    async def count(
        self,
        collection: str,
        filters: Optional[Dict[str, Any]] = None,
    ) -> int:
        """Count records matching filters."""
        pass

    @abstractmethod
    async def find_one(
        self,
        collection: str,
        filters: Dict[str, Any],
    ) -> Optional[Dict[str, Any]]:
        """Find a single record matching filters."""
        pass

    async def exists(
        self,
        collection: str,
        filters: Dict[str, Any],
    ) -> bool:
        """Check if any record matches the filters."""
        return await self.count(collection, filters) > 0

    # ==========================================================================
    # ATOMIC OPERATIONS
    # ==========================================================================

    @abstractmethod
    async def increment(
        self,
        collection: str,
        filters: Dict[str, Any],
        field: str,
        amount: int,
        floor: Optional[int] = None,
        data: Optional[Dict[str, Any]] = None,
    ) -> Optional[Dict[str, Any]]:
        """
        Atomically add ``amount`` to a numeric field.

        The write is a single conditional statement: when ``floor`` is
        given it only applies if ``field + amount >= floor`` holds at
        write time. Extra ``data`` fields are set in the same write.

        Args:
            collection: Table/collection name
            filters: Field-value pairs selecting the record
            field: Numeric field to change
            amount: Signed delta
            floor: Lowest value the field may reach
            data: Additional fields to set alongside the increment

        Returns:
            Updated record, or None if no record matched or the
            guard failed
        """
        pass

    @abstractmethod
    async def sum_field(
        self,
        collection: str,
        field: str,
        filters: Optional[Dict[str, Any]] = None,
    ) -> float:
        """
        Sum a numeric field over records matching filters.

        Returns:
            The sum, or 0 when nothing matches
        """
        pass
