# ==============================================================================
# COSMETICS STORE PACKAGE INITIALIZATION
# ==============================================================================
# Cosmetics e-commerce backend on FastAPI
# Supports: MongoDB, SQLite
# ==============================================================================

"""
Cosmetics Store Backend
=======================

Accounts, catalog, cart and order fulfillment service for a cosmetics shop.

Features:
---------
- Customer accounts with bcrypt passwords and a delivery address book
- Product catalog with slugs and soft deletion
- Carts whose totals are always recomputed from their lines
- Checkout that reserves stock, records the order and prunes the cart
- Order status workflow keeping stock and payment in step
- Admin dashboard rollups (order counts, revenue)
- MongoDB or SQLite storage behind one adapter interface

Usage:
------
    uvicorn cosmetics_store.main:app --reload
"""

__version__ = "1.0.0"
__all__ = ["__version__"]
