# ==============================================================================
# API V1 ENDPOINTS PACKAGE
# ==============================================================================

"""
API V1 Endpoints
================

Version 1 API endpoint implementations.
"""

from cosmetics_store.api.v1.addresses import router as addresses_router
from cosmetics_store.api.v1.auth import router as auth_router
from cosmetics_store.api.v1.carts import router as carts_router
from cosmetics_store.api.v1.dashboard import router as dashboard_router
from cosmetics_store.api.v1.orders import router as orders_router
from cosmetics_store.api.v1.products import router as products_router
from cosmetics_store.api.v1.users import router as users_router

__all__ = [
    "addresses_router",
    "auth_router",
    "carts_router",
    "dashboard_router",
    "orders_router",
    "products_router",
    "users_router",
]
