# ==============================================================================
# ADDRESS BOOK TESTS
# ==============================================================================

import pytest
import pytest_asyncio
from httpx import AsyncClient

from cosmetics_store.core.exceptions import BusinessRuleError, NotFoundError
from cosmetics_store.core.security import create_access_token
from cosmetics_store.schemas.address import AddressCreate, AddressUpdate
from cosmetics_store.schemas.user import UserCreate
from cosmetics_store.services.address_service import AddressService
from cosmetics_store.services.user_service import UserService


def _address(name: str, is_default: bool = False) -> AddressCreate:
    return AddressCreate(
        name=name,
        phone="0912345678",
        address_detail=f"{len(name)} Trang Tien, Hoan Kiem, Ha Noi",
        is_default=is_default,
    )


@pytest_asyncio.fixture
async def account(adapter):
    return await UserService(adapter).register(
        UserCreate(email="hoa@example.com", username="hoa", password="Secret#123")
    )


@pytest_asyncio.fixture
async def service(adapter) -> AddressService:
    return AddressService(adapter)


@pytest.fixture
def account_headers(account) -> dict:
    return {"Authorization": f"Bearer {create_access_token(subject=account.id)}"}


class TestAddressBook:

    @pytest.mark.asyncio
    async def test_first_address_is_default(self, service, account):
        addresses = await service.add_address(account.id, _address("Home"))

        assert len(addresses) == 1
        assert addresses[0].is_default

    @pytest.mark.asyncio
    async def test_new_default_takes_flag(self, service, account):
        await service.add_address(account.id, _address("Home"))
        await service.add_address(account.id, _address("Office"))
        addresses = await service.add_address(account.id, _address("Parents", True))

        assert [a.is_default for a in addresses] == [False, False, True]
        assert (await service.get_default(account.id)).name == "Parents"

    @pytest.mark.asyncio
    async def test_unknown_user(self, service):
        with pytest.raises(NotFoundError):
            await service.add_address("missing-user", _address("Home"))

    @pytest.mark.asyncio
    async def test_update_fields(self, service, account):
        await service.add_address(account.id, _address("Home"))

        updated = await service.update_address(account.id, 0, AddressUpdate(name="Old home"))

        assert updated.name == "Old home"
        assert updated.is_default

    @pytest.mark.asyncio
    async def test_cannot_unset_only_default(self, service, account):
        await service.add_address(account.id, _address("Home"))
        await service.add_address(account.id, _address("Office"))

        with pytest.raises(BusinessRuleError):
            await service.update_address(account.id, 0, AddressUpdate(is_default=False))

    @pytest.mark.asyncio
    async def test_update_to_default(self, service, account):
        await service.add_address(account.id, _address("Home"))
        await service.add_address(account.id, _address("Office"))

        await service.update_address(account.id, 1, AddressUpdate(is_default=True))

        addresses = await service.list_addresses(account.id)
        assert [a.is_default for a in addresses] == [False, True]

    @pytest.mark.asyncio
    async def test_deleting_default_promotes_first(self, service, account):
        await service.add_address(account.id, _address("Home"))
        await service.add_address(account.id, _address("Office"))
        await service.add_address(account.id, _address("Parents", True))

        await service.delete_address(account.id, 2)

        addresses = await service.list_addresses(account.id)
        assert [a.name for a in addresses] == ["Home", "Office"]
        assert addresses[0].is_default

    @pytest.mark.asyncio
    async def test_emptied_book_restarts_default(self, service, account):
        await service.add_address(account.id, _address("Home"))
        await service.delete_address(account.id, 0)

        assert await service.get_default(account.id) is None

        addresses = await service.add_address(account.id, _address("Office"))
        assert addresses[0].is_default

    @pytest.mark.asyncio
    async def test_set_default(self, service, account):
        await service.add_address(account.id, _address("Home"))
        await service.add_address(account.id, _address("Office"))

        chosen = await service.set_default(account.id, 1)

        addresses = await service.list_addresses(account.id)
        assert chosen.name == "Office"
        assert [a.is_default for a in addresses] == [False, True]

    @pytest.mark.asyncio
    async def test_index_out_of_range(self, service, account):
        await service.add_address(account.id, _address("Home"))

        with pytest.raises(NotFoundError):
            await service.get_address(account.id, 1)
        with pytest.raises(NotFoundError):
            await service.set_default(account.id, 5)

    @pytest.mark.asyncio
    async def test_missing_book(self, service, account):
        assert await service.list_addresses(account.id) == []
        assert await service.get_default(account.id) is None
        with pytest.raises(NotFoundError):
            await service.delete_address(account.id, 0)


class TestAddressEndpoints:

    @pytest.mark.asyncio
    async def test_add_and_list(self, client: AsyncClient, account_headers):
        body = {
            "name": "Home",
            "phone": "+84912345678",
            "address_detail": "8 Trang Tien, Hoan Kiem, Ha Noi",
        }

        created = await client.post("/api/v1/addresses", json=body, headers=account_headers)
        listed = await client.get("/api/v1/addresses", headers=account_headers)
        default = await client.get("/api/v1/addresses/default", headers=account_headers)

        assert created.status_code == 201
        assert listed.json()["data"][0]["is_default"] is True
        assert default.json()["data"]["name"] == "Home"

    @pytest.mark.asyncio
    async def test_invalid_phone(self, client: AsyncClient, account_headers):
        body = {
            "name": "Home",
            "phone": "12345",
            "address_detail": "8 Trang Tien, Hoan Kiem, Ha Noi",
        }

        response = await client.post("/api/v1/addresses", json=body, headers=account_headers)

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_update_default_and_delete(
        self, client: AsyncClient, adapter, account, account_headers
    ):
        service = AddressService(adapter)
        await service.add_address(account.id, _address("Home"))
        await service.add_address(account.id, _address("Office"))

        updated = await client.put(
            "/api/v1/addresses/1", json={"name": "Work"}, headers=account_headers
        )
        defaulted = await client.put("/api/v1/addresses/1/default", headers=account_headers)
        deleted = await client.delete("/api/v1/addresses/0", headers=account_headers)
        remaining = await client.get("/api/v1/addresses/0", headers=account_headers)

        assert updated.json()["data"]["name"] == "Work"
        assert defaulted.json()["data"]["is_default"] is True
        assert deleted.status_code == 200
        assert remaining.json()["data"]["name"] == "Work"

    @pytest.mark.asyncio
    async def test_missing_index(self, client: AsyncClient, account_headers):
        response = await client.get("/api/v1/addresses/3", headers=account_headers)

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_requires_token(self, client: AsyncClient):
        response = await client.get("/api/v1/addresses")

        assert response.status_code == 401
