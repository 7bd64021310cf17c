# ==============================================================================
# SQLITE ADAPTER - SQLAlchemy Async with aiosqlite
# ==============================================================================
# Lightweight database adapter for development and testing
# Full async support using aiosqlite driver
# ==============================================================================

from __future__ import annotations

import json
import logging
import operator
from contextlib import asynccontextmanager
from datetime import date, datetime
from typing import Any, AsyncIterator, Dict, List, Optional, Type

from sqlalchemy import and_, func, select, text, update
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from cosmetics_store.core.settings import settings
from cosmetics_store.core.exceptions import DatabaseError
from cosmetics_store.database.adapters.base_adapter import BaseDatabaseAdapter
from cosmetics_store.domain_models.base import SQLBase

logger = logging.getLogger(__name__)


_OPERATORS = {
    "$gte": operator.ge,
    "$gt": operator.gt,
    "$lte": operator.le,
    "$lt": operator.lt,
    "$ne": operator.ne,
}


def _json_default(value: Any) -> Any:
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _json_serializer(value: Any) -> str:
    return json.dumps(value, default=_json_default)


class SQLiteAdapter(BaseDatabaseAdapter):
    """
    SQLAlchemy async adapter over aiosqlite.

    Records go in and come out as dictionaries; nested documents live in
    JSON columns and Mongo-style filter operators are translated to SQL.
    Tables for registered models are created on connect.
    """

    def __init__(self, database_url: Optional[str] = None) -> None:
        # Ensure async driver is used
        url = database_url or settings.SQLITE_URL
        if "sqlite://" in url and "aiosqlite" not in url:
            url = url.replace("sqlite://", "sqlite+aiosqlite://")

        self._database_url = url
        self._engine: Optional[AsyncEngine] = None
        self._session_factory: Optional[async_sessionmaker[AsyncSession]] = None
        self._model_registry: Dict[str, Type[SQLBase]] = {}

    # ==========================================================================
    # MODEL REGISTRY
    # ==========================================================================

    def register_model(
        self,
        name: str,
        model: Type[SQLBase],
    ) -> None:
        """
        Register a SQLAlchemy model for table mapping.

        Args:
            name: Collection/table identifier
            model: SQLAlchemy model class
        """
        self._model_registry[name] = model
        logger.debug(f"Registered model '{name}' -> {model.__name__}")

    def _get_model(self, collection: str) -> Type[SQLBase]:
        """
        Get registered model by collection name.

        Raises:
            ValueError: If model not registered
        """
        if collection not in self._model_registry:
            raise ValueError(
                f"Model '{collection}' not registered. "
                f"Available models: {list(self._model_registry.keys())}"
            )
        return self._model_registry[collection]

    @staticmethod
    def _build_conditions(
        model: Type[SQLBase],
        filters: Optional[Dict[str, Any]],
    ) -> List[Any]:
        """Translate a filter dictionary into SQLAlchemy conditions."""
        conditions: List[Any] = []
        if not filters:
            return conditions

        for key, value in filters.items():
            if not hasattr(model, key):
                continue
            column = getattr(model, key)
            if isinstance(value, dict):
                for op, operand in value.items():
                    if op == "$in":
                        conditions.append(column.in_(list(operand)))
                    elif op in _OPERATORS:
                        conditions.append(_OPERATORS[op](column, operand))
                    else:
                        raise ValueError(f"Unsupported filter operator: {op}")
            else:
                conditions.append(column == value)
        return conditions

    @staticmethod
    def _columns_only(
        model: Type[SQLBase],
        data: Dict[str, Any],
    ) -> Dict[str, Any]:
        columns = model.__table__.columns
        return {k: v for k, v in data.items() if k in columns}

    # ==========================================================================
    # LIFECYCLE METHODS
    # ==========================================================================

    async def connect(self) -> None:
        """
        Initialize database engine and create tables.

        Creates an async engine and automatically creates all
        mapped tables if they don't exist.
        """
        try:
            self._engine = create_async_engine(
                self._database_url,
                echo=settings.DEBUG,
                json_serializer=_json_serializer,
                # SQLite-specific settings
                connect_args={"check_same_thread": False},
            )

            self._session_factory = async_sessionmaker(
                bind=self._engine,
                class_=AsyncSession,
                expire_on_commit=False,
                autoflush=False,
            )

            # Create tables
            async with self._engine.begin() as conn:
                await conn.run_sync(SQLBase.metadata.create_all)

            logger.info("SQLite adapter connected successfully")

        except Exception as e:
            logger.error(f"Failed to connect to SQLite: {e}")
            raise DatabaseError(f"SQLite connection failed: {e}")

    async def disconnect(self) -> None:
        """Close database connections and dispose engine."""
        if self._engine is not None:
            await self._engine.dispose()
            self._engine = None
            self._session_factory = None
            logger.info("SQLite adapter disconnected")

    async def health_check(self) -> bool:
        """
        Verify database connectivity.

        Returns:
            True if connection is healthy
        """
        try:
            async with self.session() as session:
                await session.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.warning(f"SQLite health check failed: {e}")
            return False

    # ==========================================================================
    # SESSION MANAGEMENT
    # ==========================================================================

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """
        Provide transactional session scope.

        Commits on successful exit, rolls back on exception.

        Raises:
            RuntimeError: If database not connected
        """
        if self._session_factory is None:
            raise RuntimeError(
                "Database not connected. Call connect() first."
            )

        session: AsyncSession = self._session_factory()
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    # ==========================================================================
    # CRUD OPERATIONS
    # ==========================================================================

    async def create(
        self,
        collection: str,
        data: Dict[str, Any],
    ) -> Dict[str, Any]:
        """Create a new record."""
        model = self._get_model(collection)

        async with self.session() as session:
            instance = model(**self._columns_only(model, data))
            session.add(instance)
            await session.flush()
            await session.refresh(instance)
            return instance.to_dict()

    async def get_by_id(
        self,
        collection: str,
        id: Any,
    ) -> Optional[Dict[str, Any]]:
        """Retrieve record by primary key."""
        model = self._get_model(collection)

        async with self.session() as session:
            instance = await session.get(model, str(id))
            return instance.to_dict() if instance else None

    async def get_all(
        self,
        collection: str,
        skip: int = 0,
        limit: int = 100,
        filters: Optional[Dict[str, Any]] = None,
        sort_by: Optional[str] = None,
        sort_order: str = "asc",
    ) -> List[Dict[str, Any]]:
        """Retrieve multiple records with pagination and filtering."""
        model = self._get_model(collection)

        async with self.session() as session:
            query = select(model)

            conditions = self._build_conditions(model, filters)
            if conditions:
                query = query.where(and_(*conditions))

            if sort_by and hasattr(model, sort_by):
                order_column = getattr(model, sort_by)
                if sort_order.lower() == "desc":
                    order_column = order_column.desc()
                query = query.order_by(order_column)

            query = query.offset(skip).limit(limit)

            result = await session.execute(query)
            return [instance.to_dict() for instance in result.scalars().all()]

    async def update(
        self,
        collection: str,
        id: Any,
        data: Dict[str, Any],
    ) -> Optional[Dict[str, Any]]:
        """Update an existing record."""
        model = self._get_model(collection)

        async with self.session() as session:
            instance = await session.get(model, str(id))
            if instance is None:
                return None

            for key, value in self._columns_only(model, data).items():
                if key != "id":
                    setattr(instance, key, value)

            await session.flush()
            await session.refresh(instance)
            return instance.to_dict()

    async def delete(
        self,
        collection: str,
        id: Any,
    ) -> bool:
        """Delete a record by ID."""
        model = self._get_model(collection)

        async with self.session() as session:
            instance = await session.get(model, str(id))
            if instance is None:
                return False

            await session.delete(instance)
            return True

    # ==========================================================================
    # QUERY OPERATIONS
    # ==========================================================================

    async def count(
        self,
        collection: str,
        filters: Optional[Dict[str, Any]] = None,
    ) -> int:
        """Count records matching filters."""
        model = self._get_model(collection)

        async with self.session() as session:
            query = select(func.count()).select_from(model)

            conditions = self._build_conditions(model, filters)
            if conditions:
                query = query.where(and_(*conditions))

            result = await session.execute(query)
            return result.scalar() or 0

    async def find_one(
        self,
        collection: str,
        filters: Dict[str, Any],
    ) -> Optional[Dict[str, Any]]:
        """Find a single record matching filters."""
        results = await self.get_all(
            collection,
            skip=0,
            limit=1,
            filters=filters,
        )
        return results[0] if results else None

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
        """Apply a guarded ``UPDATE ... SET field = field + amount``."""
        model = self._get_model(collection)
        column = getattr(model, field)

        conditions = self._build_conditions(model, filters)
        if floor is not None:
            conditions.append(column + amount >= floor)

        values: Dict[str, Any] = {field: column + amount}
        if data:
            values.update(
                {k: v for k, v in self._columns_only(model, data).items() if k != "id"}
            )

        async with self.session() as session:
            stmt = update(model).where(and_(*conditions)).values(**values)
            result = await session.execute(stmt)
            if result.rowcount == 0:
                return None

            query = select(model).where(
                and_(*self._build_conditions(model, filters))
            ).limit(1)
            row = (await session.execute(query)).scalars().first()
            return row.to_dict() if row else None

    async def sum_field(
        self,
        collection: str,
        field: str,
        filters: Optional[Dict[str, Any]] = None,
    ) -> float:
        """Sum a column with SQL SUM."""
        model = self._get_model(collection)

        async with self.session() as session:
            query = select(func.sum(getattr(model, field)))

            conditions = self._build_conditions(model, filters)
            if conditions:
                query = query.where(and_(*conditions))

            result = await session.execute(query)
            return result.scalar() or 0
