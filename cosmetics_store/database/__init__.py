# ==============================================================================
# DATABASE PACKAGE INITIALIZATION
# ==============================================================================
# Database Abstraction Layer with multi-database support
# ==============================================================================

"""
Database Module
===============

Provides a unified database abstraction layer supporting:
- MongoDB (document store, production)
- SQLite (development/testing)

Key Components:
- Adapters: Database-specific implementations
- Factory: Dynamic adapter instantiation
- Repositories: Catalog, cart and order stores
"""

from cosmetics_store.database.factory import DatabaseFactory
from cosmetics_store.database.adapters.base_adapter import BaseDatabaseAdapter

__all__ = [
    "DatabaseFactory",
    "BaseDatabaseAdapter",
]
