# ==============================================================================
# SECURITY MODULE - Authentication & Authorization
# ==============================================================================
# Password hashing and JWT access tokens carrying the user id and role
# ==============================================================================

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional, Union

from jose import JWTError, jwt
from passlib.context import CryptContext

from cosmetics_store.core.settings import settings
from cosmetics_store.core.constants import SecurityConstants
from cosmetics_store.core.exceptions import (
    AuthenticationError,
    TokenExpiredError,
    InvalidTokenError,
)


# ==============================================================================
# PASSWORD HASHING
# ==============================================================================

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.PASSWORD_HASH_ROUNDS,
)


def hash_password(password: str) -> str:
    """Bcrypt hash of a plaintext password, safe to store."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


# ==============================================================================
# JWT TOKEN MANAGEMENT
# ==============================================================================

class TokenType:
    ACCESS = "access"


def create_access_token(
    subject: Union[str, Any],
    role: str = SecurityConstants.ROLE_USER,
    expires_delta: Optional[timedelta] = None,
    additional_claims: Optional[Dict[str, Any]] = None,
) -> str:
    """
    Sign an access token for ``subject`` with a role claim.

    Issued by /auth/login for an active account. ``additional_claims``
    are applied last and may override the standard ones.
    """
    now = datetime.now(timezone.utc)
    if expires_delta:
        expire = now + expires_delta
    else:
        expire = now + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    to_encode: Dict[str, Any] = {
        "sub": str(subject),
        "exp": expire,
        "iat": now,
        "type": TokenType.ACCESS,
        SecurityConstants.ROLE_CLAIM: role,
    }

    if additional_claims:
        to_encode.update(additional_claims)

    return jwt.encode(
        to_encode,
        settings.SECRET_KEY,
        algorithm=settings.ALGORITHM,
    )


def decode_token(token: str) -> Dict[str, Any]:
    """
    Check signature and expiry and return the claims.

    Raises:
        TokenExpiredError: If token has expired
        InvalidTokenError: If token is invalid or malformed
    """
    try:
        return jwt.decode(
            token,
            settings.SECRET_KEY,
            algorithms=[settings.ALGORITHM],
        )
    except jwt.ExpiredSignatureError:
        raise TokenExpiredError()
    except JWTError as e:
        raise InvalidTokenError(message=f"Invalid token: {str(e)}")


def verify_access_token(token: str) -> Dict[str, Any]:
    """
    Verify that a token is a valid access token with a subject.

    Raises:
        InvalidTokenError: If token is not an access token
        AuthenticationError: If the token has no subject
        TokenExpiredError: If token has expired
    """
    payload = decode_token(token)

    if payload.get("type") != TokenType.ACCESS:
        raise InvalidTokenError(message="Invalid token type: expected access token")
    if not payload.get("sub"):
        raise AuthenticationError(message="Token has no subject")

    return payload


def is_admin(payload: Dict[str, Any]) -> bool:
    """Check whether decoded claims carry the admin role."""
    return payload.get(SecurityConstants.ROLE_CLAIM) == SecurityConstants.ROLE_ADMIN
