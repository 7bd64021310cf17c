# ==============================================================================
# USER TESTS
# ==============================================================================
# Registration, verification, sign-in and account administration
# ==============================================================================

import pytest
import pytest_asyncio
from httpx import AsyncClient

from cosmetics_store.core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    BusinessRuleError,
    ConflictError,
    NotFoundError,
)
from cosmetics_store.core.security import verify_access_token, verify_password
from cosmetics_store.core.settings import settings
from cosmetics_store.database.repositories import UserRepository
from cosmetics_store.schemas.user import UserCreate, UserVerify
from cosmetics_store.services.user_service import UserService

PASSWORD = "Secret#123"


def _signup(n: int = 1, **extra) -> UserCreate:
    return UserCreate(
        email=f"Lan{n}@Example.com",
        username=f"lan_{n}",
        password=PASSWORD,
        **extra,
    )


@pytest_asyncio.fixture
async def service(adapter) -> UserService:
    return UserService(adapter)


@pytest_asyncio.fixture
async def verifying_service(adapter) -> UserService:
    config = settings.model_copy(update={"USER_REQUIRE_EMAIL_VERIFICATION": True})
    return UserService(adapter, config=config)


class TestRegistration:

    @pytest.mark.asyncio
    async def test_register_hashes_password(self, adapter, service):
        user = await service.register(_signup())

        stored = await UserRepository(adapter).get_by_id(user.id)
        assert user.email == "lan1@example.com"
        assert user.full_name == "lan1"
        assert user.role == "user"
        assert user.is_active
        assert stored.hashed_password != PASSWORD
        assert verify_password(PASSWORD, stored.hashed_password)

    @pytest.mark.asyncio
    async def test_duplicate_email(self, service):
        await service.register(_signup())

        with pytest.raises(ConflictError):
            await service.register(
                UserCreate(email="lan1@example.com", username="other", password=PASSWORD)
            )

    @pytest.mark.asyncio
    async def test_duplicate_username(self, service):
        await service.register(_signup())

        with pytest.raises(ConflictError):
            await service.register(
                UserCreate(email="other@example.com", username="lan_1", password=PASSWORD)
            )

    @pytest.mark.asyncio
    async def test_deleted_account_keeps_email(self, service):
        user = await service.register(_signup())
        await service.delete_user(user.id)

        with pytest.raises(ConflictError):
            await service.register(_signup())

    def test_weak_password_rejected(self):
        with pytest.raises(ValueError):
            UserCreate(email="a@example.com", username="abc", password="alllowercase1!")
        with pytest.raises(ValueError):
            UserCreate(email="a@example.com", username="abc", password="NoSpecial123")


class TestVerification:

    @pytest.mark.asyncio
    async def test_new_account_inactive_until_verified(self, adapter, verifying_service):
        user = await verifying_service.register(_signup())
        stored = await UserRepository(adapter).get_by_id(user.id)

        assert not user.is_active
        with pytest.raises(AuthorizationError):
            await verifying_service.authenticate("lan1@example.com", PASSWORD)

        verified = await verifying_service.verify_email(
            UserVerify(email="lan1@example.com", token=stored.verify_token)
        )
        login = await verifying_service.authenticate("lan1@example.com", PASSWORD)

        assert verified.is_active
        assert login.user.id == user.id

    @pytest.mark.asyncio
    async def test_wrong_token(self, verifying_service):
        await verifying_service.register(_signup())

        with pytest.raises(AuthenticationError):
            await verifying_service.verify_email(
                UserVerify(email="lan1@example.com", token="nope")
            )

    @pytest.mark.asyncio
    async def test_already_active(self, service):
        await service.register(_signup())

        with pytest.raises(BusinessRuleError):
            await service.verify_email(UserVerify(email="lan1@example.com", token="x"))

    @pytest.mark.asyncio
    async def test_unknown_email(self, service):
        with pytest.raises(NotFoundError):
            await service.verify_email(UserVerify(email="ghost@example.com", token="x"))


class TestAuthenticate:

    @pytest.mark.asyncio
    async def test_token_carries_id_and_role(self, service):
        user = await service.register(_signup(), role="admin")

        result = await service.authenticate("LAN1@example.com", PASSWORD)
        claims = verify_access_token(result.tokens.access_token)

        assert claims["sub"] == user.id
        assert claims["role"] == "admin"
        assert result.tokens.token_type == "bearer"
        assert result.tokens.expires_in == settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60

    @pytest.mark.asyncio
    async def test_wrong_password(self, service):
        await service.register(_signup())

        with pytest.raises(AuthenticationError):
            await service.authenticate("lan1@example.com", "Wrong#123")

    @pytest.mark.asyncio
    async def test_unknown_email(self, service):
        with pytest.raises(AuthenticationError):
            await service.authenticate("ghost@example.com", PASSWORD)

    @pytest.mark.asyncio
    async def test_deleted_user_cannot_sign_in(self, service):
        user = await service.register(_signup())
        await service.delete_user(user.id)

        with pytest.raises(AuthenticationError):
            await service.authenticate("lan1@example.com", PASSWORD)


class TestAccountManagement:

    @pytest.mark.asyncio
    async def test_list_newest_first_without_deleted(self, service):
        first = await service.register(_signup(1))
        second = await service.register(_signup(2))
        third = await service.register(_signup(3))
        await service.delete_user(second.id)

        users = await service.list_users()

        assert [u.id for u in users] == [third.id, first.id]

    @pytest.mark.asyncio
    async def test_paginated(self, service):
        for n in range(3):
            await service.register(_signup(n))

        page = await service.list_users_paginated(page=1, page_size=2)

        assert page["total"] == 3
        assert page["pages"] == 2
        assert len(page["items"]) == 2
        assert page["has_next"]

    @pytest.mark.asyncio
    async def test_delete_twice(self, service):
        user = await service.register(_signup())
        await service.delete_user(user.id)

        with pytest.raises(NotFoundError):
            await service.delete_user(user.id)
        with pytest.raises(NotFoundError):
            await service.get_user(user.id)


class TestAuthEndpoints:

    @pytest.mark.asyncio
    async def test_register_then_form_login(self, client: AsyncClient):
        register = await client.post(
            "/api/v1/auth/register",
            json={"email": "mai@example.com", "username": "mai", "password": PASSWORD},
        )
        login = await client.post(
            "/api/v1/auth/login",
            data={"username": "mai@example.com", "password": PASSWORD},
        )

        assert register.status_code == 201
        assert "hashed_password" not in register.json()["data"]
        assert login.status_code == 200
        assert login.json()["token_type"] == "bearer"

        token = login.json()["access_token"]
        me = await client.get(
            "/api/v1/users/me", headers={"Authorization": f"Bearer {token}"}
        )
        assert me.status_code == 200
        assert me.json()["data"]["username"] == "mai"

    @pytest.mark.asyncio
    async def test_json_login(self, client: AsyncClient, adapter):
        await UserService(adapter).register(_signup())

        response = await client.post(
            "/api/v1/auth/login/json",
            json={"email": "lan1@example.com", "password": PASSWORD},
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["user"]["email"] == "lan1@example.com"
        assert data["tokens"]["access_token"]

    @pytest.mark.asyncio
    async def test_bad_credentials(self, client: AsyncClient):
        response = await client.post(
            "/api/v1/auth/login",
            data={"username": "ghost@example.com", "password": PASSWORD},
        )

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_duplicate_register(self, client: AsyncClient):
        body = {"email": "mai@example.com", "username": "mai", "password": PASSWORD}
        await client.post("/api/v1/auth/register", json=body)

        response = await client.post("/api/v1/auth/register", json=body)

        assert response.status_code == 409

    @pytest.mark.asyncio
    async def test_invalid_email(self, client: AsyncClient):
        response = await client.post(
            "/api/v1/auth/register",
            json={"email": "not-an-email", "username": "mai", "password": PASSWORD},
        )

        assert response.status_code == 422


class TestUserEndpoints:

    @pytest.mark.asyncio
    async def test_me_requires_token(self, client: AsyncClient):
        response = await client.get("/api/v1/users/me")

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_admin_listing(self, client: AsyncClient, adapter, admin_headers):
        service = UserService(adapter)
        for n in range(3):
            await service.register(_signup(n))

        listing = await client.get("/api/v1/users", headers=admin_headers)
        page = await client.get(
            "/api/v1/users/paginated",
            params={"page": 2, "page_size": 2},
            headers=admin_headers,
        )

        assert len(listing.json()["data"]) == 3
        assert page.json()["data"]["total"] == 3
        assert len(page.json()["data"]["items"]) == 1
        assert page.json()["data"]["has_prev"]

    @pytest.mark.asyncio
    async def test_listing_forbidden_for_customers(self, client: AsyncClient, user_headers):
        response = await client.get("/api/v1/users", headers=user_headers)

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_admin_delete(self, client: AsyncClient, adapter, admin_headers):
        user = await UserService(adapter).register(_signup())

        deleted = await client.delete(f"/api/v1/users/{user.id}", headers=admin_headers)
        fetched = await client.get(f"/api/v1/users/{user.id}", headers=admin_headers)

        assert deleted.status_code == 200
        assert fetched.status_code == 404
