# ==============================================================================
# DATABASE ADAPTERS PACKAGE
# ==============================================================================

"""
Database Adapters
=================

Provides unified interface implementations for different databases:
- BaseDatabaseAdapter: Abstract interface definition
- MongoDBAdapter: MongoDB using Motor async driver
- SQLiteAdapter: SQLite using SQLAlchemy async with aiosqlite
"""

from cosmetics_store.database.adapters.base_adapter import BaseDatabaseAdapter
from cosmetics_store.database.adapters.mongodb_adapter import MongoDBAdapter
from cosmetics_store.database.adapters.sqlite_adapter import SQLiteAdapter

__all__ = [
    "BaseDatabaseAdapter",
    "MongoDBAdapter",
    "SQLiteAdapter",
]
