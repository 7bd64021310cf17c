# ==============================================================================
# SETTINGS - Environment Configuration
# ==============================================================================
# Read once from the environment and an optional .env file
# ==============================================================================

from __future__ import annotations

from enum import Enum
from functools import lru_cache
from typing import Annotated, List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from cosmetics_store.core.constants import OrderConstants

_DEFAULT_SECRET = "your-super-secret-key-change-in-production"


class DatabaseType(str, Enum):
    MONGODB = "mongodb"
    SQLITE = "sqlite"


class Environment(str, Enum):
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"


class Settings(BaseSettings):
    """Store configuration; every field can be set by an env variable of the same name."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "Cosmetics Store"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    ENVIRONMENT: Environment = Environment.DEVELOPMENT

    # API
    API_V1_PREFIX: str = "/api/v1"
    API_TITLE: str = "Cosmetics Store API"
    API_DESCRIPTION: str = (
        "Accounts, catalog, cart, address book and order fulfillment "
        "backend for a cosmetics shop"
    )

    # Database
    DATABASE_TYPE: DatabaseType = DatabaseType.MONGODB
    MONGODB_URL: str = "mongodb://localhost:27017"
    MONGODB_DB: str = "cosmetics_store"
    SQLITE_URL: str = "sqlite:///./cosmetics_store.db"
    DB_POOL_SIZE: int = Field(default=10, ge=1, le=100)
    DB_POOL_TIMEOUT: int = Field(default=30, ge=1, le=300, description="seconds")

    # Tokens and passwords
    SECRET_KEY: str = Field(default=_DEFAULT_SECRET, min_length=32)
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(default=30, ge=1, le=1440)
    PASSWORD_HASH_ROUNDS: int = Field(default=12, ge=4, le=31)

    # Accounts
    USER_REQUIRE_EMAIL_VERIFICATION: bool = Field(
        default=False,
        description="New accounts stay inactive until /auth/verify succeeds",
    )

    # Rate limiting
    RATE_LIMIT_ENABLED: bool = True
    RATE_LIMIT_REQUESTS: int = Field(default=100, ge=1)
    RATE_LIMIT_WINDOW: int = Field(default=60, ge=1, description="seconds")

    # CORS
    CORS_ORIGINS: Annotated[List[str], NoDecode] = ["*"]
    CORS_ALLOW_CREDENTIALS: bool = True

    LOG_LEVEL: str = "INFO"

    # Order workflow
    ORDER_DEFAULT_PAYMENT_METHOD: str = OrderConstants.METHOD_COD
    ORDER_PAID_ON_CREATE_METHODS: Annotated[List[str], NoDecode] = [
        OrderConstants.METHOD_BANK
    ]
    ORDER_REAPPLY_STOCK_ON_FIRST_ADVANCE: bool = Field(
        default=False,
        description=(
            "Decrement stock again on the first status change of a pending "
            "order even though checkout already took it"
        ),
    )

    @field_validator("SECRET_KEY")
    @classmethod
    def validate_secret_key(cls, v: str) -> str:
        if v == _DEFAULT_SECRET:
            import warnings
            warnings.warn(
                "Using default SECRET_KEY. Generate a secure key for production!",
                UserWarning,
            )
        return v

    @field_validator("CORS_ORIGINS", "ORDER_PAID_ON_CREATE_METHODS", mode="before")
    @classmethod
    def parse_comma_separated(cls, v):
        """Accept ``a,b`` from the environment as well as a list."""
        if isinstance(v, str):
            return [item.strip() for item in v.split(",") if item.strip()]
        return v


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
