# ==============================================================================
# MAIN API ROUTER - Route Aggregation
# ==============================================================================
# Combines all API version routers
# ==============================================================================

from __future__ import annotations

from fastapi import APIRouter

from cosmetics_store.core.settings import settings
from cosmetics_store.api.v1 import (
    addresses_router,
    auth_router,
    carts_router,
    dashboard_router,
    orders_router,
    products_router,
    users_router,
)

# Create main API router
api_router = APIRouter()

# Include v1 routers with API prefix
api_router.include_router(auth_router, prefix=settings.API_V1_PREFIX)
api_router.include_router(users_router, prefix=settings.API_V1_PREFIX)
api_router.include_router(addresses_router, prefix=settings.API_V1_PREFIX)
api_router.include_router(products_router, prefix=settings.API_V1_PREFIX)
api_router.include_router(carts_router, prefix=settings.API_V1_PREFIX)
api_router.include_router(orders_router, prefix=settings.API_V1_PREFIX)
api_router.include_router(dashboard_router, prefix=settings.API_V1_PREFIX)
