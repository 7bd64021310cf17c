# ==============================================================================
# AUTH ENDPOINTS - Registration & Sign-in
# ==============================================================================

from __future__ import annotations

from typing import Annotated, Dict

from fastapi import APIRouter, Depends, status
from fastapi.security import OAuth2PasswordRequestForm

from cosmetics_store.api.dependencies import UserServiceDep
from cosmetics_store.core.constants import SuccessMessages
from cosmetics_store.schemas.base import APIResponse
from cosmetics_store.schemas.user import (
    LoginResponse,
    UserCreate,
    UserLogin,
    UserResponse,
    UserVerify,
)

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post(
    "/register",
    response_model=APIResponse[UserResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Register new user",
)
async def register(
    schema: UserCreate,
    service: UserServiceDep,
) -> APIResponse[UserResponse]:
    user = await service.register(schema)
    return APIResponse.ok(data=user, message=SuccessMessages.USER_REGISTERED)


@router.post(
    "/verify",
    response_model=APIResponse[UserResponse],
    summary="Verify email",
    description="Activate a new account with the token from its welcome email.",
)
async def verify_email(
    schema: UserVerify,
    service: UserServiceDep,
) -> APIResponse[UserResponse]:
    user = await service.verify_email(schema)
    return APIResponse.ok(data=user, message=SuccessMessages.USER_VERIFIED)


@router.post(
    "/login",
    response_model=Dict[str, str],
    summary="User login",
    description="OAuth2 password flow; the username field carries the email.",
)
async def login(
    form_data: Annotated[OAuth2PasswordRequestForm, Depends()],
    service: UserServiceDep,
) -> Dict[str, str]:
    result = await service.authenticate(
        email=form_data.username,
        password=form_data.password,
    )
    return {
        "access_token": result.tokens.access_token,
        "token_type": result.tokens.token_type,
    }


@router.post(
    "/login/json",
    response_model=APIResponse[LoginResponse],
    summary="User login (JSON)",
)
async def login_json(
    credentials: UserLogin,
    service: UserServiceDep,
) -> APIResponse[LoginResponse]:
    result = await service.authenticate(
        email=credentials.email,
        password=credentials.password,
    )
    return APIResponse.ok(data=result, message=SuccessMessages.LOGIN_SUCCESS)
