# ==============================================================================
# API DEPENDENCIES - Dependency Injection
# ==============================================================================
# FastAPI dependencies for authentication and database access
# ==============================================================================

from __future__ import annotations

from typing import Annotated, Any, Dict, Optional

from fastapi import Depends, Request
from fastapi.security import OAuth2PasswordBearer

from cosmetics_store.core.constants import ErrorMessages
from cosmetics_store.core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    DatabaseError,
)
from cosmetics_store.core.security import is_admin, verify_access_token
from cosmetics_store.core.settings import settings
from cosmetics_store.database.adapters.base_adapter import BaseDatabaseAdapter
from cosmetics_store.services.address_service import AddressService
from cosmetics_store.services.cart_service import CartService
from cosmetics_store.services.dashboard_service import DashboardService
from cosmetics_store.services.order_service import OrderService
from cosmetics_store.services.product_service import ProductService
from cosmetics_store.services.user_service import UserService

# Tokens come from POST /auth/login
oauth2_scheme = OAuth2PasswordBearer(
    tokenUrl=f"{settings.API_V1_PREFIX}/auth/login",
    auto_error=False,
)


# ==============================================================================
# DATABASE DEPENDENCIES
# ==============================================================================

async def get_adapter(request: Request) -> BaseDatabaseAdapter:
    """
    Get database adapter dependency.

    Returns the adapter connected by the application lifespan.
    """
    adapter = getattr(request.app.state, "adapter", None)
    if adapter is None:
        raise DatabaseError(message="Database not initialized")
    return adapter


# Annotated type for database adapter
DatabaseDep = Annotated[BaseDatabaseAdapter, Depends(get_adapter)]


# ==============================================================================
# AUTHENTICATION DEPENDENCIES
# ==============================================================================

async def get_token_claims(
    token: Annotated[Optional[str], Depends(oauth2_scheme)],
) -> Dict[str, Any]:
    """
    Decode the bearer token.

    Raises:
        AuthenticationError: If the token is missing
        TokenExpiredError: If the token has expired
        InvalidTokenError: If the token is malformed
    """
    if not token:
        raise AuthenticationError(message=ErrorMessages.UNAUTHORIZED)
    return verify_access_token(token)


TokenClaims = Annotated[Dict[str, Any], Depends(get_token_claims)]


async def get_current_user_id(claims: TokenClaims) -> str:
    """Extract user ID from the token subject."""
    return str(claims["sub"])


async def get_admin_user_id(claims: TokenClaims) -> str:
    """
    Extract user ID, requiring the admin role.

    Raises:
        AuthorizationError: If the caller is not an administrator
    """
    if not is_admin(claims):
        raise AuthorizationError(
            message=ErrorMessages.ADMIN_REQUIRED,
            required_permission="admin",
        )
    return str(claims["sub"])


# Annotated types
CurrentUserID = Annotated[str, Depends(get_current_user_id)]
AdminUserID = Annotated[str, Depends(get_admin_user_id)]


# ==============================================================================
# SERVICE DEPENDENCIES
# ==============================================================================

async def get_product_service(adapter: DatabaseDep) -> ProductService:
    """Get product service instance."""
    return ProductService(adapter)


async def get_cart_service(adapter: DatabaseDep) -> CartService:
    """Get cart service instance."""
    return CartService(adapter)


async def get_order_service(adapter: DatabaseDep) -> OrderService:
    """Get order service instance."""
    return OrderService(adapter)


async def get_user_service(adapter: DatabaseDep) -> UserService:
    """Get user service instance."""
    return UserService(adapter)


async def get_address_service(adapter: DatabaseDep) -> AddressService:
    return AddressService(adapter)


async def get_dashboard_service(adapter: DatabaseDep) -> DashboardService:
    """Get dashboard service instance."""
    return DashboardService(adapter)


# Annotated service types
ProductServiceDep = Annotated[ProductService, Depends(get_product_service)]
CartServiceDep = Annotated[CartService, Depends(get_cart_service)]
OrderServiceDep = Annotated[OrderService, Depends(get_order_service)]
DashboardServiceDep = Annotated[DashboardService, Depends(get_dashboard_service)]
UserServiceDep = Annotated[UserService, Depends(get_user_service)]
AddressServiceDep = Annotated[AddressService, Depends(get_address_service)]
