# ==============================================================================
# APPLICATION CONSTANTS - Centralized Configuration Values
# ==============================================================================
# Immutable constants used throughout the application
# Organized by category for easy maintenance
# ==============================================================================

from __future__ import annotations

from typing import Final


# ==============================================================================
# API CONSTANTS
# ==============================================================================

class APIConstants:
    """API-related constants."""

    # Pagination defaults
    DEFAULT_PAGE_SIZE: Final[int] = 10
    MAX_PAGE_SIZE: Final[int] = 100
    MIN_PAGE_SIZE: Final[int] = 1

    # Response headers
    RATE_LIMIT_HEADER: Final[str] = "X-RateLimit-Limit"
    RATE_LIMIT_REMAINING_HEADER: Final[str] = "X-RateLimit-Remaining"
    RATE_LIMIT_RESET_HEADER: Final[str] = "X-RateLimit-Reset"
    REQUEST_ID_HEADER: Final[str] = "X-Request-ID"
    RESPONSE_TIME_HEADER: Final[str] = "X-Response-Time"


# ==============================================================================
# DATABASE CONSTANTS
# ==============================================================================

class DatabaseConstants:
    """Database-related constants."""

    # Collection/Table names
    PRODUCTS_COLLECTION: Final[str] = "products"
    CARTS_COLLECTION: Final[str] = "carts"
    ORDERS_COLLECTION: Final[str] = "orders"
    USERS_COLLECTION: Final[str] = "users"
    ADDRESSES_COLLECTION: Final[str] = "addresses"


# ==============================================================================
# SECURITY CONSTANTS
# ==============================================================================

class SecurityConstants:
    """Security-related constants."""

    TOKEN_TYPE_BEARER: Final[str] = "bearer"

    # Role claim values
    ROLE_CLAIM: Final[str] = "role"
    ROLE_USER: Final[str] = "user"
    ROLE_ADMIN: Final[str] = "admin"


# ==============================================================================
# ORDER CONSTANTS
# ==============================================================================

class OrderConstants:
    """Order lifecycle constants."""

    # Order statuses
    STATUS_PENDING: Final[str] = "pending"
    STATUS_PROCESSING: Final[str] = "processing"
    STATUS_COMPLETED: Final[str] = "completed"
    STATUS_CANCELLED: Final[str] = "cancelled"

    # Payment statuses
    PAYMENT_UNPAID: Final[str] = "unpaid"
    PAYMENT_PAID: Final[str] = "paid"
    PAYMENT_FAILED: Final[str] = "failed"

    # Payment methods
    METHOD_COD: Final[str] = "COD"
    METHOD_BANK: Final[str] = "BANK"

    # Checkout field limits
    RECEIVER_NAME_MIN: Final[int] = 2
    RECEIVER_NAME_MAX: Final[int] = 50
    RECEIVER_ADDRESS_MIN: Final[int] = 10
    RECEIVER_ADDRESS_MAX: Final[int] = 200
    ORDER_NOTES_MAX: Final[int] = 500
    PHONE_PATTERN: Final[str] = r"^[0-9]{10,11}$"
    LINE_QUANTITY_MIN: Final[int] = 1
    LINE_QUANTITY_MAX: Final[int] = 99

    @classmethod
    def all_statuses(cls) -> list[str]:
        """Get all valid order statuses."""
        return [
            cls.STATUS_PENDING,
            cls.STATUS_PROCESSING,
            cls.STATUS_COMPLETED,
            cls.STATUS_CANCELLED,
        ]


# ==============================================================================
# ACCOUNT CONSTANTS
# ==============================================================================

class AccountConstants:
    """Field limits for user accounts and address book entries."""

    USERNAME_PATTERN: Final[str] = r"^[a-zA-Z0-9_]{3,30}$"
    PASSWORD_MIN: Final[int] = 8
    PASSWORD_MAX: Final[int] = 256
    FULL_NAME_MAX: Final[int] = 100

    ADDRESS_NAME_MIN: Final[int] = 2
    ADDRESS_NAME_MAX: Final[int] = 100
    ADDRESS_DETAIL_MIN: Final[int] = 10
    ADDRESS_DETAIL_MAX: Final[int] = 500
    # Vietnamese mobile numbers, local or +84 form
    VN_PHONE_PATTERN: Final[str] = (
        r"^(\+84|84|0)(3[2-9]|5[689]|7[06-9]|8[1-9]|9[0-9])[0-9]{7}$"
    )


# ==============================================================================
# ERROR MESSAGES
# ==============================================================================

class ErrorMessages:
    """Standardized error messages."""

    # Authentication
    UNAUTHORIZED: Final[str] = "Authentication required"
    INVALID_CREDENTIALS: Final[str] = "Incorrect email or password"
    ACCOUNT_INACTIVE: Final[str] = "Account is not verified or has been disabled"
    INVALID_VERIFY_TOKEN: Final[str] = "Invalid verification token"

    # Authorization
    ADMIN_REQUIRED: Final[str] = "Administrator access required"

    # Resources
    PRODUCT_NOT_FOUND: Final[str] = "Product not found"
    CART_NOT_FOUND: Final[str] = "Cart not found"
    CART_ITEM_NOT_FOUND: Final[str] = "Product not found in cart"
    ORDER_NOT_FOUND: Final[str] = "Order not found"
    USER_NOT_FOUND: Final[str] = "User not found"
    ADDRESS_NOT_FOUND: Final[str] = "Address not found"

    # Conflicts
    CART_EXISTS: Final[str] = "Cart already exists for this user"
    SLUG_EXISTS: Final[str] = "A product with this name already exists"
    EMAIL_EXISTS: Final[str] = "Email is already registered"
    USERNAME_EXISTS: Final[str] = "Username is already taken"

    # Business rules
    ORDER_NOT_REMOVABLE: Final[str] = "Only processing orders can be removed"
    ALREADY_VERIFIED: Final[str] = "Account is already verified"
    DEFAULT_ADDRESS_REQUIRED: Final[str] = "At least one address must stay the default"

    # Rate limiting
    RATE_LIMIT_EXCEEDED: Final[str] = "Rate limit exceeded. Please try again later"


# ==============================================================================
# SUCCESS MESSAGES
# ==============================================================================

class SuccessMessages:
    """Standardized success messages."""

    # Accounts
    USER_REGISTERED: Final[str] = "User registered successfully"
    USER_VERIFIED: Final[str] = "Account verified"
    LOGIN_SUCCESS: Final[str] = "Login successful"
    USER_DELETED: Final[str] = "User deleted successfully"

    # Address book
    ADDRESS_CREATED: Final[str] = "Address added"
    ADDRESS_UPDATED: Final[str] = "Address updated"
    ADDRESS_DELETED: Final[str] = "Address deleted"
    DEFAULT_ADDRESS_SET: Final[str] = "Default address updated"

    # Catalog
    PRODUCT_CREATED: Final[str] = "Product created successfully"
    PRODUCT_UPDATED: Final[str] = "Product updated successfully"
    PRODUCT_DELETED: Final[str] = "Product deleted successfully"

    # Cart
    CART_CREATED: Final[str] = "Cart created successfully"
    CART_ITEM_ADDED: Final[str] = "Product added to cart"
    CART_ITEM_UPDATED: Final[str] = "Cart item updated"
    CART_ITEM_REMOVED: Final[str] = "Product removed from cart"
    CART_CLEARED: Final[str] = "Cart cleared"

    # Orders
    ORDER_PLACED: Final[str] = "Order placed successfully"
    ORDER_UPDATED: Final[str] = "Order updated successfully"
    ORDER_DELETED: Final[str] = "Order deleted successfully"
