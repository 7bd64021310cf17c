# ==============================================================================
# USER SCHEMAS - Accounts and Sign-in
# ==============================================================================

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import EmailStr, Field, field_validator

from cosmetics_store.core.constants import AccountConstants, SecurityConstants
from cosmetics_store.schemas.base import BaseSchema, RecordSchema, TimestampSchema


class UserInDB(RecordSchema):
    """User record as stored, password hash included."""

    email: str
    username: str
    hashed_password: str
    full_name: str
    phone: Optional[str] = None
    gender: Optional[str] = None
    dob: Optional[datetime] = None
    avatar_url: Optional[str] = None
    role: str = SecurityConstants.ROLE_USER
    is_active: bool = True
    verify_token: Optional[str] = None


class UserCreate(BaseSchema):
    """Schema for user registration."""

    email: EmailStr = Field(
        ...,
        description="Sign-in email",
        examples=["lan.nguyen@example.com"],
    )
    username: str = Field(
        ...,
        pattern=AccountConstants.USERNAME_PATTERN,
        description="3-30 letters, digits or underscores",
    )
    password: str = Field(
        ...,
        min_length=AccountConstants.PASSWORD_MIN,
        max_length=AccountConstants.PASSWORD_MAX,
    )
    full_name: Optional[str] = Field(
        None,
        max_length=AccountConstants.FULL_NAME_MAX,
        description="Display name, defaults to the part of the email before @",
    )

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.lower()

    @field_validator("password")
    @classmethod
    def validate_password_strength(cls, v: str) -> str:
        if not any(c.isupper() for c in v):
            raise ValueError("Password must contain at least one uppercase letter")
        if not any(c.isdigit() for c in v):
            raise ValueError("Password must contain at least one digit")
        if all(c.isalnum() for c in v):
            raise ValueError("Password must contain at least one special character")
        return v


class UserLogin(BaseSchema):
    email: EmailStr
    password: str

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.lower()


class UserVerify(BaseSchema):
    """Email plus the token handed out at registration."""

    email: EmailStr
    token: str = Field(..., min_length=1)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.lower()


class UserResponse(TimestampSchema):
    """Public view of an account; no password hash, no verification token."""

    id: str
    email: str
    username: str
    full_name: str
    phone: Optional[str] = None
    gender: Optional[str] = None
    dob: Optional[datetime] = None
    avatar_url: Optional[str] = None
    role: str
    is_active: bool


class TokenResponse(BaseSchema):
    access_token: str
    token_type: str = SecurityConstants.TOKEN_TYPE_BEARER
    expires_in: int = Field(..., description="Seconds until the token expires")


class LoginResponse(BaseSchema):
    user: UserResponse
    tokens: TokenResponse
