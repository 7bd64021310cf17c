# ==============================================================================
# USER SERVICE - Registration, Sign-in & Account Management
# ==============================================================================

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional
from uuid import uuid4

from cosmetics_store.core.constants import ErrorMessages, SecurityConstants
from cosmetics_store.core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    BusinessRuleError,
    ConflictError,
    NotFoundError,
)
from cosmetics_store.core.security import (
    create_access_token,
    hash_password,
    verify_password,
)
from cosmetics_store.core.settings import Settings, settings as default_settings
from cosmetics_store.database.adapters.base_adapter import BaseDatabaseAdapter
from cosmetics_store.database.repositories.user_repository import UserRepository
from cosmetics_store.schemas.user import (
    LoginResponse,
    TokenResponse,
    UserCreate,
    UserInDB,
    UserResponse,
    UserVerify,
)
from cosmetics_store.services.base_service import BaseService

logger = logging.getLogger(__name__)


class UserService(BaseService[UserInDB, UserResponse]):
    """
    User accounts.

    With ``USER_REQUIRE_EMAIL_VERIFICATION`` on, a new account is
    inactive and carries a one-off ``verify_token`` that the mailer
    sends out; :meth:`verify_email` activates it. Inactive accounts
    cannot sign in.
    """

    def __init__(
        self,
        adapter: BaseDatabaseAdapter,
        config: Optional[Settings] = None,
    ) -> None:
        self._users = UserRepository(adapter)
        self._config = config or default_settings
        super().__init__(self._users, "user")

    def _to_response(self, entity: UserInDB) -> UserResponse:
        return UserResponse.model_validate(entity.model_dump())

    # ==========================================================================
    # AUTHENTICATION
    # ==========================================================================

    async def register(
        self,
        schema: UserCreate,
        role: str = SecurityConstants.ROLE_USER,
    ) -> UserResponse:
        """
        Register a new account.

        Emails and usernames of deleted accounts stay taken.

        Raises:
            ConflictError: If the email or username is in use
        """
        if await self._users.get_by_email(schema.email, include_deleted=True):
            raise ConflictError(
                message=ErrorMessages.EMAIL_EXISTS,
                resource_type="user",
                details={"email": schema.email},
            )
        if await self._users.get_by_username(schema.username, include_deleted=True):
            raise ConflictError(
                message=ErrorMessages.USERNAME_EXISTS,
                resource_type="user",
                details={"username": schema.username},
            )

        needs_verification = self._config.USER_REQUIRE_EMAIL_VERIFICATION
        user = await self._users.create(
            {
                "email": schema.email,
                "username": schema.username,
                "hashed_password": hash_password(schema.password),
                "full_name": schema.full_name or schema.email.split("@")[0],
                "role": role,
                "is_active": not needs_verification,
                "verify_token": uuid4().hex if needs_verification else None,
            }
        )
        logger.info(f"User {user.id} registered ({user.email}, role {role})")
        return self._to_response(user)

    async def verify_email(self, schema: UserVerify) -> UserResponse:
        """
        Activate an account with its registration token.

        Raises:
            NotFoundError: If no account has the email
            BusinessRuleError: If the account is already active
            AuthenticationError: If the token does not match
        """
        user = await self._users.get_by_email(schema.email)
        if user is None:
            raise NotFoundError(
                message=ErrorMessages.USER_NOT_FOUND,
                resource_type="user",
            )
        if user.is_active:
            raise BusinessRuleError(
                message=ErrorMessages.ALREADY_VERIFIED,
                rule="verify_inactive_account_only",
            )
        if not user.verify_token or user.verify_token != schema.token:
            raise AuthenticationError(message=ErrorMessages.INVALID_VERIFY_TOKEN)

        updated = await self._users.update(
            user.id, {"is_active": True, "verify_token": None}
        )
        logger.info(f"User {user.id} verified")
        return self._to_response(updated)

    async def authenticate(self, email: str, password: str) -> LoginResponse:
        """
        Check credentials and issue an access token.

        Raises:
            AuthenticationError: If the email is unknown or the password wrong
            AuthorizationError: If the account is not active
        """
        user = await self._users.get_by_email(email.lower())
        if user is None or not verify_password(password, user.hashed_password):
            logger.info(f"Failed sign-in for {email}")
            raise AuthenticationError(message=ErrorMessages.INVALID_CREDENTIALS)
        if not user.is_active:
            raise AuthorizationError(message=ErrorMessages.ACCOUNT_INACTIVE)

        token = create_access_token(subject=user.id, role=user.role)
        return LoginResponse(
            user=self._to_response(user),
            tokens=TokenResponse(
                access_token=token,
                expires_in=self._config.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
            ),
        )

    # ==========================================================================
    # ACCOUNT MANAGEMENT
    # ==========================================================================

    async def get_user(self, user_id: str) -> UserResponse:
        return await self.get_by_id(user_id)

    async def list_users(self) -> List[UserResponse]:
        """Every active account, newest first."""
        total = await self._users.count()
        users = await self._users.get_all(
            limit=max(total, 1),
            sort_by="created_at",
            sort_order="desc",
        )
        return [self._to_response(user) for user in users]

    async def list_users_paginated(
        self,
        page: int = 1,
        page_size: int = 10,
    ) -> Dict[str, Any]:
        return await self.get_paginated(
            page=page,
            page_size=page_size,
            sort_by="created_at",
            sort_order="desc",
        )

    async def delete_user(self, user_id: str) -> None:
        """
        Soft-delete an account.

        Raises:
            NotFoundError: If the account is missing or already deleted
        """
        await self._get_or_404(user_id)
        await self._users.update(user_id, {"is_deleted": True})
        logger.info(f"User {user_id} deleted")
