# ==============================================================================
# EXCEPTIONS - Store Error Kinds
# ==============================================================================
# Every error a service raises carries its HTTP status and a machine code;
# main.py renders them through AppException.to_dict()
# ==============================================================================

from __future__ import annotations

from typing import Any, Dict, Optional


class AppException(Exception):
    """Root of the store's error kinds."""

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        error_code: str = "INTERNAL_ERROR",
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Error envelope returned to API clients."""
        return {
            "success": False,
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
            },
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.error_code}, {self.message!r})"


class DatabaseError(AppException):
    """Store unreachable or a driver failure (503)."""

    def __init__(
        self,
        message: str = "Database operation failed",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, "DATABASE_ERROR", 503, details)


# ==============================================================================
# LOOKUPS AND UNIQUENESS
# ==============================================================================

class NotFoundError(AppException):
    """
    Missing record (404).

    Soft-deleted records and records owned by someone else are
    reported the same way.
    """

    def __init__(
        self,
        message: str = "Resource not found",
        resource_type: Optional[str] = None,
        resource_id: Optional[Any] = None,
    ) -> None:
        details: Dict[str, Any] = {}
        if resource_type:
            details["resource_type"] = resource_type
        if resource_id is not None:
            details["resource_id"] = str(resource_id)
        super().__init__(message, "NOT_FOUND", 404, details)
        self.resource_type = resource_type
        self.resource_id = resource_id


class ConflictError(AppException):
    """Duplicate slug, email, username or cart (409)."""

    def __init__(
        self,
        message: str = "Resource already exists",
        resource_type: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        details = dict(details or {})
        if resource_type:
            details["resource_type"] = resource_type
        super().__init__(message, "CONFLICT", 409, details)


class ValidationError(AppException):
    def __init__(
        self,
        message: str = "Validation error",
        errors: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message,
            "VALIDATION_ERROR",
            422,
            {"validation_errors": errors or {}},
        )
        self.errors = errors or {}


# ==============================================================================
# AUTH
# ==============================================================================

class AuthenticationError(AppException):
    """Missing or bad credentials (401)."""

    def __init__(
        self,
        message: str = "Authentication failed",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, "AUTHENTICATION_ERROR", 401, details)


class AuthorizationError(AppException):
    """Authenticated, but not allowed (403)."""

    def __init__(
        self,
        message: str = "Permission denied",
        required_permission: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        details = dict(details or {})
        if required_permission:
            details["required_permission"] = required_permission
        super().__init__(message, "AUTHORIZATION_ERROR", 403, details)


class TokenExpiredError(AuthenticationError):
    def __init__(self, message: str = "Token has expired") -> None:
        super().__init__(message)
        self.error_code = "TOKEN_EXPIRED"


class InvalidTokenError(AuthenticationError):
    def __init__(self, message: str = "Invalid token") -> None:
        super().__init__(message)
        self.error_code = "INVALID_TOKEN"


class RateLimitError(AppException):
    """Client exhausted its request budget (429)."""

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        retry_after: int = 60,
    ) -> None:
        super().__init__(
            message,
            "RATE_LIMIT_EXCEEDED",
            429,
            {"retry_after_seconds": retry_after},
        )
        self.retry_after = retry_after


# ==============================================================================
# STORE RULES
# ==============================================================================

class InsufficientStockError(AppException):
    """
    A line asks for more units than the catalog holds (400).

    ``details`` names the product and both quantities so clients can
    tell the buyer what is left.
    """

    def __init__(
        self,
        message: str = "Insufficient stock available",
        product_id: Optional[str] = None,
        product_name: Optional[str] = None,
        requested: Optional[int] = None,
        available: Optional[int] = None,
    ) -> None:
        details: Dict[str, Any] = {}
        if product_id is not None:
            details["product_id"] = product_id
        if product_name is not None:
            details["product_name"] = product_name
        if requested is not None:
            details["requested_quantity"] = requested
        if available is not None:
            details["available_quantity"] = available
        super().__init__(message, "INSUFFICIENT_STOCK", 400, details)
        self.product_id = product_id


class BusinessRuleError(AppException):
    """A request the current state does not allow (400)."""

    def __init__(
        self,
        message: str = "Business rule violation",
        rule: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        details = dict(details or {})
        if rule:
            details["violated_rule"] = rule
        super().__init__(message, "BUSINESS_RULE_ERROR", 400, details)
