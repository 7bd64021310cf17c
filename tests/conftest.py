# ==============================================================================
# CONFTEST - Pytest Fixtures and Configuration
# ==============================================================================
# Shared fixtures for all tests
# ==============================================================================

from __future__ import annotations

import os
from typing import AsyncGenerator, Awaitable, Callable
from uuid import uuid4

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Set test environment before importing the application
os.environ["ENVIRONMENT"] = "development"
os.environ["DEBUG"] = "false"
os.environ["DATABASE_TYPE"] = "sqlite"
os.environ["SECRET_KEY"] = "test-secret-key-for-testing-only-32chars!"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["PASSWORD_HASH_ROUNDS"] = "4"

from cosmetics_store.core.security import create_access_token  # noqa: E402
from cosmetics_store.core.settings import DatabaseType  # noqa: E402
from cosmetics_store.database.adapters.base_adapter import BaseDatabaseAdapter  # noqa: E402
from cosmetics_store.database.factory import DatabaseFactory  # noqa: E402
from cosmetics_store.schemas.order import OrderCreate  # noqa: E402
from cosmetics_store.schemas.product import ProductCreate, ProductResponse  # noqa: E402
from cosmetics_store.services.product_service import ProductService  # noqa: E402


# ==============================================================================
# DATABASE FIXTURES
# ==============================================================================

@pytest_asyncio.fixture
async def adapter(tmp_path) -> AsyncGenerator[BaseDatabaseAdapter, None]:
    """Connected SQLite adapter on a per-test database file."""
    db = await DatabaseFactory.initialize(
        DatabaseType.SQLITE,
        database_url=f"sqlite+aiosqlite:///{tmp_path}/test.db",
    )
    yield db
    await db.disconnect()


# ==============================================================================
# HTTP CLIENT FIXTURES
# ==============================================================================

@pytest_asyncio.fixture
async def client(adapter: BaseDatabaseAdapter) -> AsyncGenerator[AsyncClient, None]:
    """Create async HTTP client for API testing."""
    from cosmetics_store.main import create_app

    app = create_app(adapter=adapter)
    transport = ASGITransport(app=app)
    async with AsyncClient(
        transport=transport,
        base_url="http://test",
        timeout=30.0,
    ) as async_client:
        yield async_client


@pytest.fixture
def user_id() -> str:
    return f"user-{uuid4().hex[:8]}"


@pytest.fixture
def user_headers(user_id: str) -> dict:
    """Bearer header for a regular customer."""
    token = create_access_token(subject=user_id)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers() -> dict:
    """Bearer header for an administrator."""
    token = create_access_token(subject=f"admin-{uuid4().hex[:8]}", role="admin")
    return {"Authorization": f"Bearer {token}"}


# ==============================================================================
# HELPER FIXTURES
# ==============================================================================

@pytest.fixture
def make_product(
    adapter: BaseDatabaseAdapter,
) -> Callable[..., Awaitable[ProductResponse]]:
    """Factory creating catalog products through the service."""
    service = ProductService(adapter)

    async def _make(
        name: str = "",
        quantity: int = 10,
        price: float = 100.0,
        **extra,
    ) -> ProductResponse:
        return await service.create_product(
            ProductCreate(
                name=name or f"Lipstick {uuid4().hex[:6]}",
                quantity=quantity,
                original_price=price,
                discount_price=price,
                **extra,
            )
        )

    return _make


@pytest.fixture
def order_request() -> Callable[..., OrderCreate]:
    """Build a checkout request from ``(product_id, quantity, price)`` lines."""

    def _build(*lines, payment_method=None) -> OrderCreate:
        return OrderCreate(
            receiver_name="Nguyen Van A",
            receiver_phone="0912345678",
            receiver_address="12 Hang Bai, Hoan Kiem, Ha Noi",
            items=[
                {"product_id": pid, "quantity": qty, "price": price}
                for pid, qty, price in lines
            ],
            payment_method=payment_method,
        )

    return _build


@pytest.fixture
def sample_order_payload() -> Callable[..., dict]:
    """JSON checkout body for API tests."""

    def _payload(product_id: str, quantity: int = 1, price: float = 100.0) -> dict:
        return {
            "receiver_name": "Tran Thi B",
            "receiver_phone": "0987654321",
            "receiver_address": "45 Le Loi, District 1, HCMC",
            "items": [
                {"product_id": product_id, "quantity": quantity, "price": price},
            ],
        }

    return _payload
