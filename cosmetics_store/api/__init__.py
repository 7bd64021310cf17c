# ==============================================================================
# API PACKAGE INITIALIZATION
# ==============================================================================

"""
API Module
==========

FastAPI routers and endpoint definitions:
- Dependencies: Bearer token claims, database access, services
- Routers: Products, Carts, Orders, Dashboard
"""

from cosmetics_store.api.router import api_router

__all__ = ["api_router"]
