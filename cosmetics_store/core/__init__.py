# ==============================================================================
# CORE PACKAGE INITIALIZATION
# ==============================================================================
# Core utilities: Settings, Security, Exceptions, Constants
# ==============================================================================

"""
Core Module
===========

Contains core utilities and configurations for the application:
- settings: Environment configuration management
- security: JWT authentication
- exceptions: Custom exception classes
- constants: Application-wide constants
"""

from cosmetics_store.core.settings import settings, get_settings, DatabaseType
from cosmetics_store.core.exceptions import (
    AppException,
    DatabaseError,
    NotFoundError,
    ConflictError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    RateLimitError,
    InsufficientStockError,
    BusinessRuleError,
)

__all__ = [
    "settings",
    "get_settings",
    "DatabaseType",
    "AppException",
    "DatabaseError",
    "NotFoundError",
    "ConflictError",
    "ValidationError",
    "AuthenticationError",
    "AuthorizationError",
    "RateLimitError",
    "InsufficientStockError",
    "BusinessRuleError",
]
