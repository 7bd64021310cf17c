# ==============================================================================
# SERVICES PACKAGE INITIALIZATION
# ==============================================================================

"""
Service Layer
=============

Business logic for the store:
- BaseService: Generic read operations
- ProductService: Catalog management
- CartService: Cart reconciliation
- OrderService: Checkout and fulfillment workflow
- DashboardService: Admin rollups
- UserService: Accounts and sign-in
- AddressService: Delivery address book
"""

from cosmetics_store.services.address_service import AddressService
from cosmetics_store.services.base_service import BaseService
from cosmetics_store.services.cart_service import CartService, summarize_items
from cosmetics_store.services.dashboard_service import DashboardService
from cosmetics_store.services.order_service import OrderService
from cosmetics_store.services.product_service import ProductService
from cosmetics_store.services.user_service import UserService

__all__ = [
    "AddressService",
    "BaseService",
    "CartService",
    "DashboardService",
    "OrderService",
    "ProductService",
    "UserService",
    "summarize_items",
]
