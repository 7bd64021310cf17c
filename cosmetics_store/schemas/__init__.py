# ==============================================================================
# SCHEMAS PACKAGE INITIALIZATION
# ==============================================================================

"""
Pydantic Schemas
================

Request/Response validation schemas for API endpoints:
- Base: Common schemas and pagination
- User: Accounts, sign-in and tokens
- Address: Delivery address book
- Product: Catalog schemas
- Cart: Cart lines and reconciliation results
- Order: Checkout, status transitions and payment
- Dashboard: Admin rollups
"""

from cosmetics_store.schemas.base import (
    BaseSchema,
    RecordSchema,
    TimestampSchema,
    PaginatedResponse,
    APIResponse,
    HealthResponse,
)
from cosmetics_store.schemas.user import (
    UserInDB,
    UserCreate,
    UserLogin,
    UserVerify,
    UserResponse,
    TokenResponse,
    LoginResponse,
)
from cosmetics_store.schemas.address import (
    AddressItem,
    AddressBookInDB,
    AddressCreate,
    AddressUpdate,
)
from cosmetics_store.schemas.product import (
    ProductInDB,
    ProductCreate,
    ProductUpdate,
    ProductResponse,
    ProductSummary,
)
from cosmetics_store.schemas.cart import (
    CartLine,
    CartInDB,
    CartItemAdd,
    CartItemUpdate,
    CartLineResponse,
    CartResponse,
)
from cosmetics_store.schemas.order import (
    OrderLine,
    Payment,
    OrderInDB,
    OrderItemCreate,
    OrderCreate,
    PaymentUpdate,
    OrderUpdate,
    OrderResponse,
)
from cosmetics_store.schemas.dashboard import (
    OrderStatusCounts,
    DashboardSummary,
    MonthlyOrders,
    Revenue,
)

__all__ = [
    # Base
    "BaseSchema",
    "RecordSchema",
    "TimestampSchema",
    "PaginatedResponse",
    "APIResponse",
    "HealthResponse",
    # User
    "UserInDB",
    "UserCreate",
    "UserLogin",
    "UserVerify",
    "UserResponse",
    "TokenResponse",
    "LoginResponse",
    # Address
    "AddressItem",
    "AddressBookInDB",
    "AddressCreate",
    "AddressUpdate",
    # Product
    "ProductInDB",
    "ProductCreate",
    "ProductUpdate",
    "ProductResponse",
    "ProductSummary",
    # Cart
    "CartLine",
    "CartInDB",
    "CartItemAdd",
    "CartItemUpdate",
    "CartLineResponse",
    "CartResponse",
    # Order
    "OrderLine",
    "Payment",
    "OrderInDB",
    "OrderItemCreate",
    "OrderCreate",
    "PaymentUpdate",
    "OrderUpdate",
    "OrderResponse",
    # Dashboard
    "OrderStatusCounts",
    "DashboardSummary",
    "MonthlyOrders",
    "Revenue",
]
