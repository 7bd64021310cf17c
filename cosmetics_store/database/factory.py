# ==============================================================================
# DATABASE FACTORY - Adapter Instantiation & Lifecycle Management
# ==============================================================================
# Factory Pattern for creating and connecting database adapters
# The caller owns the returned adapter (see main.lifespan)
# ==============================================================================

from __future__ import annotations

import logging
from typing import Optional

from cosmetics_store.core.settings import settings, DatabaseType
from cosmetics_store.core.constants import DatabaseConstants
from cosmetics_store.core.exceptions import DatabaseError
from cosmetics_store.database.adapters.base_adapter import BaseDatabaseAdapter
from cosmetics_store.database.adapters.mongodb_adapter import MongoDBAdapter
from cosmetics_store.database.adapters.sqlite_adapter import SQLiteAdapter

logger = logging.getLogger(__name__)


class DatabaseFactory:
    """
    Factory class for creating database adapters.

    Adapters are not cached here: the application lifespan (or a test
    fixture) holds the connected adapter and hands it to request
    handlers explicitly.
    """

    @classmethod
    def create_adapter(
        cls,
        db_type: Optional[DatabaseType] = None,
        **kwargs,
    ) -> BaseDatabaseAdapter:
        """
        Create the database adapter for a backend type.

        Args:
            db_type: Database type (defaults to settings.DATABASE_TYPE)
            **kwargs: Additional adapter configuration
                - database_url: Custom SQLite URL
                - connection_url: MongoDB connection URL
                - database_name: MongoDB database name

        Raises:
            ValueError: If database type is not supported
        """
        db_type = db_type or settings.DATABASE_TYPE

        adapter: BaseDatabaseAdapter

        if db_type == DatabaseType.SQLITE:
            adapter = SQLiteAdapter(
                database_url=kwargs.get("database_url")
            )
            cls._register_models(adapter)
            logger.info("Created SQLite adapter")

        elif db_type == DatabaseType.MONGODB:
            adapter = MongoDBAdapter(
                connection_url=kwargs.get("connection_url"),
                database_name=kwargs.get("database_name"),
            )
            logger.info("Created MongoDB adapter")

        else:
            raise ValueError(f"Unsupported database type: {db_type}")

        return adapter

    @classmethod
    async def initialize(
        cls,
        db_type: Optional[DatabaseType] = None,
        **kwargs,
    ) -> BaseDatabaseAdapter:
        """
        Create an adapter and establish its connection.

        Raises:
            DatabaseError: If connection fails
        """
        adapter = cls.create_adapter(db_type, **kwargs)

        try:
            await adapter.connect()
        except DatabaseError:
            raise
        except Exception as e:
            logger.error(f"Database initialization failed: {e}")
            raise DatabaseError(f"Failed to initialize database: {e}")

        logger.info(
            f"Database initialized: {db_type or settings.DATABASE_TYPE}"
        )
        return adapter

    @staticmethod
    def _register_models(adapter: SQLiteAdapter) -> None:
        """Register all domain models with a SQL adapter."""
        from cosmetics_store.domain_models import AddressBook, Cart, Order, Product, User

        adapter.register_model(DatabaseConstants.PRODUCTS_COLLECTION, Product)
        adapter.register_model(DatabaseConstants.CARTS_COLLECTION, Cart)
        adapter.register_model(DatabaseConstants.ORDERS_COLLECTION, Order)
        adapter.register_model(DatabaseConstants.USERS_COLLECTION, User)
        adapter.register_model(DatabaseConstants.ADDRESSES_COLLECTION, AddressBook)
