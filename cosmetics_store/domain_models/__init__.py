# ==============================================================================
# DOMAIN MODELS PACKAGE INITIALIZATION
# ==============================================================================

"""
Domain Models
=============

SQLAlchemy ORM models backing the SQLite adapter:
- Product: Cosmetics catalog
- Cart: Per-user shopping cart
- Order: Customer orders
- User: Accounts
- AddressBook: Per-user delivery addresses
"""

from cosmetics_store.domain_models.base import SQLBase, SoftDeleteMixin, TimestampMixin
from cosmetics_store.domain_models.product import Product
from cosmetics_store.domain_models.cart import Cart
from cosmetics_store.domain_models.order import Order
from cosmetics_store.domain_models.user import User
from cosmetics_store.domain_models.address import AddressBook

__all__ = [
    "SQLBase",
    "SoftDeleteMixin",
    "TimestampMixin",
    "Product",
    "Cart",
    "Order",
    "User",
    "AddressBook",
]
