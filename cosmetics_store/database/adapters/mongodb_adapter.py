# ==============================================================================
# MONGODB ADAPTER - Motor Async Driver Implementation
# ==============================================================================
# Document-oriented database adapter with full async support
# Uses Motor for non-blocking MongoDB operations
# ==============================================================================

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from bson import ObjectId
from motor.motor_asyncio import (
    AsyncIOMotorClient,
    AsyncIOMotorCollection,
    AsyncIOMotorDatabase,
)
from pymongo import ASCENDING, DESCENDING, ReturnDocument

from cosmetics_store.core.constants import DatabaseConstants
from cosmetics_store.core.settings import settings
from cosmetics_store.core.exceptions import DatabaseError
from cosmetics_store.database.adapters.base_adapter import BaseDatabaseAdapter

logger = logging.getLogger(__name__)


class MongoDBAdapter(BaseDatabaseAdapter):
    """
    Motor adapter. ObjectIds become string ``id`` keys on the way out;
    stock counters use conditional ``$inc`` writes and sums run as an
    aggregation pipeline.
    """

    def __init__(
        self,
        connection_url: Optional[str] = None,
        database_name: Optional[str] = None,
    ) -> None:
        self._connection_url = connection_url or settings.MONGODB_URL
        self._database_name = database_name or settings.MONGODB_DB
        self._client: Optional[AsyncIOMotorClient] = None
        self._database: Optional[AsyncIOMotorDatabase] = None

    # ==========================================================================
    # ID SERIALIZATION HELPERS
    # ==========================================================================

    @staticmethod
    def _serialize_id(document: Dict[str, Any]) -> Dict[str, Any]:
        """
        Convert MongoDB ObjectId to string for serialization.

        Transforms _id to id and converts ObjectId to string.
        """
        if document and "_id" in document:
            document["id"] = str(document.pop("_id"))
        return document

    @staticmethod
    def _deserialize_id(id_value: Any) -> Any:
        """
        Convert string ID to MongoDB ObjectId.

        Strings that are not valid ObjectIds are passed through so the
        query simply matches nothing.
        """
        if isinstance(id_value, str) and ObjectId.is_valid(id_value):
            return ObjectId(id_value)
        return id_value

    def _build_query(
        self,
        filters: Optional[Dict[str, Any]],
    ) -> Dict[str, Any]:
        """
        Build MongoDB query from filter dictionary.

        Handles id -> _id conversion; operator dictionaries ($gt, $lt,
        $in, etc.) are passed through unchanged.
        """
        if not filters:
            return {}

        query: Dict[str, Any] = {}
        for key, value in filters.items():
            if key == "id":
                if isinstance(value, dict):
                    query["_id"] = {
                        op: (
                            [self._deserialize_id(v) for v in operand]
                            if op == "$in"
                            else self._deserialize_id(operand)
                        )
                        for op, operand in value.items()
                    }
                else:
                    query["_id"] = self._deserialize_id(value)
            else:
                query[key] = value

        return query

    def _collection(self, name: str) -> AsyncIOMotorCollection:
        if self._database is None:
            raise RuntimeError("Database not connected. Call connect() first.")
        return self._database[name]

    # ==========================================================================
    # LIFECYCLE METHODS
    # ==========================================================================

    async def connect(self) -> None:
        """
        Initialize MongoDB connection.

        Creates Motor client, selects target database and ensures the
        indexes the stores query by.
        """
        try:
            self._client = AsyncIOMotorClient(
                self._connection_url,
                maxPoolSize=settings.DB_POOL_SIZE,
                minPoolSize=1,
                maxIdleTimeMS=settings.DB_POOL_TIMEOUT * 1000,
            )
            self._database = self._client[self._database_name]

            # Verify connection
            await self._client.admin.command("ping")

            db = self._database
            await db[DatabaseConstants.PRODUCTS_COLLECTION].create_index("slug")
            await db[DatabaseConstants.CARTS_COLLECTION].create_index("user_id")
            await db[DatabaseConstants.ORDERS_COLLECTION].create_index(
                [("user_id", ASCENDING), ("created_at", DESCENDING)]
            )
            await db[DatabaseConstants.USERS_COLLECTION].create_index("email", unique=True)
            await db[DatabaseConstants.USERS_COLLECTION].create_index("username", unique=True)
            await db[DatabaseConstants.ADDRESSES_COLLECTION].create_index("user_id")

            logger.info(
                f"MongoDB adapter connected to {self._database_name}"
            )

        except Exception as e:
            logger.error(f"Failed to connect to MongoDB: {e}")
            raise DatabaseError(f"MongoDB connection failed: {e}")

    async def disconnect(self) -> None:
        """Close MongoDB connection."""
        if self._client is not None:
            self._client.close()
            self._client = None
            self._database = None
            logger.info("MongoDB adapter disconnected")

    async def health_check(self) -> bool:
        """
        Verify database connectivity.

        Returns:
            True if connection is healthy
        """
        try:
            if self._client is not None:
                await self._client.admin.command("ping")
                return True
            return False
        except Exception as e:
            logger.warning(f"MongoDB health check failed: {e}")
            return False

    # ==========================================================================
    # CRUD OPERATIONS
    # ==========================================================================

    async def create(
        self,
        collection: str,
        data: Dict[str, Any],
    ) -> Dict[str, Any]:
        """Create a new document."""
        # MongoDB generates _id
        document = {k: v for k, v in data.items() if k != "id"}

        result = await self._collection(collection).insert_one(document)
        document.pop("_id", None)
        document["id"] = str(result.inserted_id)
        return document

    async def get_by_id(
        self,
        collection: str,
        id: Any,
    ) -> Optional[Dict[str, Any]]:
        """Retrieve document by ID."""
        document = await self._collection(collection).find_one(
            {"_id": self._deserialize_id(id)}
        )
        return self._serialize_id(document) if document else None

    async def get_all(
        self,
        collection: str,
        skip: int = 0,
        limit: int = 100,
        filters: Optional[Dict[str, Any]] = None,
        sort_by: Optional[str] = None,
        sort_order: str = "asc",
    ) -> List[Dict[str, Any]]:
        """Retrieve multiple documents with pagination."""
        query = self._build_query(filters)
        cursor = self._collection(collection).find(query)

        if sort_by:
            direction = ASCENDING if sort_order.lower() == "asc" else DESCENDING
            cursor = cursor.sort("_id" if sort_by == "id" else sort_by, direction)

        cursor = cursor.skip(skip).limit(limit)

        documents = await cursor.to_list(length=limit)
        return [self._serialize_id(doc) for doc in documents]

    async def update(
        self,
        collection: str,
        id: Any,
        data: Dict[str, Any],
    ) -> Optional[Dict[str, Any]]:
        """Update an existing document."""
        data = {k: v for k, v in data.items() if k != "id"}

        result = await self._collection(collection).find_one_and_update(
            {"_id": self._deserialize_id(id)},
            {"$set": data},
            return_document=ReturnDocument.AFTER,
        )
        return self._serialize_id(result) if result else None

    async def delete(
        self,
        collection: str,
        id: Any,
    ) -> bool:
        """Delete a document by ID."""
        result = await self._collection(collection).delete_one(
            {"_id": self._deserialize_id(id)}
        )
        return result.deleted_count > 0

    # ==========================================================================
    # QUERY OPERATIONS
    # ==========================================================================

    async def count(
        self,
        collection: str,
        filters: Optional[Dict[str, Any]] = None,
    ) -> int:
        """Count documents matching filters."""
        query = self._build_query(filters)
        return await self._collection(collection).count_documents(query)

    async def find_one(
        self,
        collection: str,
        filters: Dict[str, Any],
    ) -> Optional[Dict[str, Any]]:
        """Find a single document matching filters."""
        query = self._build_query(filters)
        document = await self._collection(collection).find_one(query)
        return self._serialize_id(document) if document else None

    # ==========================================================================
    # ATOMIC OPERATIONS
    # ==========================================================================

    async def increment(
        self,
        collection: str,
        filters: Dict[str, Any],
        field: str,
        amount: int,
        floor: Optional[int] = None,
        data: Optional[Dict[str, Any]] = None,
    ) -> Optional[Dict[str, Any]]:
        """Apply a guarded ``$inc`` in one find_one_and_update."""
        query = self._build_query(filters)
        if floor is not None:
            query[field] = {"$gte": floor - amount}

        update: Dict[str, Any] = {"$inc": {field: amount}}
        if data:
            update["$set"] = {k: v for k, v in data.items() if k != "id"}

        result = await self._collection(collection).find_one_and_update(
            query,
            update,
            return_document=ReturnDocument.AFTER,
        )
        return self._serialize_id(result) if result else None

    async def sum_field(
        self,
        collection: str,
        field: str,
        filters: Optional[Dict[str, Any]] = None,
    ) -> float:
        """Sum a field with a $match/$group aggregation."""
        pipeline = [
            {"$match": self._build_query(filters)},
            {"$group": {"_id": None, "total": {"$sum": f"${field}"}}},
        ]
        cursor = self._collection(collection).aggregate(pipeline)
        results = await cursor.to_list(length=1)
        return results[0]["total"] if results else 0
