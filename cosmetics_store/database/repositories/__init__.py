# ==============================================================================
# REPOSITORIES PACKAGE INITIALIZATION
# ==============================================================================

"""
Repository Pattern Implementation
=================================

Provides data access abstraction through the Repository Pattern:
- BaseRepository: Generic repository interface
- ProductRepository: Catalog store
- CartRepository: Cart store
- OrderRepository: Order store
- UserRepository: Account store
- AddressRepository: Address book store
"""

from cosmetics_store.database.repositories.base_repository import BaseRepository
from cosmetics_store.database.repositories.product_repository import ProductRepository
from cosmetics_store.database.repositories.cart_repository import CartRepository
from cosmetics_store.database.repositories.order_repository import OrderRepository
from cosmetics_store.database.repositories.user_repository import UserRepository
from cosmetics_store.database.repositories.address_repository import AddressRepository

__all__ = [
    "BaseRepository",
    "ProductRepository",
    "CartRepository",
    "OrderRepository",
    "UserRepository",
    "AddressRepository",
]
