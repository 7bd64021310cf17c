# ==============================================================================
# DASHBOARD TESTS
# ==============================================================================

import pytest
import pytest_asyncio
from httpx import AsyncClient

from cosmetics_store.database.repositories import OrderRepository
from cosmetics_store.schemas.order import OrderUpdate
from cosmetics_store.schemas.user import UserCreate
from cosmetics_store.services.dashboard_service import DashboardService
from cosmetics_store.services.order_service import OrderService
from cosmetics_store.services.user_service import UserService
from cosmetics_store.utils.helpers import utc_now


@pytest_asyncio.fixture
async def placed_orders(adapter, make_product, order_request, user_id):
    """Three orders: one completed, one cancelled, one deleted."""
    product = await make_product(quantity=50)
    service = OrderService(adapter)

    completed = await service.create_order(user_id, order_request((product.id, 2, 100.0)))
    await service.update_order(completed.id, OrderUpdate(status="processing"))
    await service.update_order(completed.id, OrderUpdate(status="completed"))

    cancelled = await service.create_order(user_id, order_request((product.id, 1, 70.0)))
    await service.update_order(cancelled.id, OrderUpdate(status="cancelled"))

    deleted = await service.create_order(user_id, order_request((product.id, 1, 10.0)))
    await service.delete_order(deleted.id)

    return completed, cancelled, deleted


class TestDashboardService:

    @pytest.mark.asyncio
    async def test_summary_counts_deleted_orders(self, adapter, placed_orders):
        summary = await DashboardService(adapter).summary()

        assert summary.total_products == 1
        assert summary.total_orders == 3
        assert summary.orders_by_status.completed == 1
        assert summary.orders_by_status.cancelled == 2
        assert summary.orders_by_status.pending == 0

    @pytest.mark.asyncio
    async def test_revenue_counts_completed_only(self, adapter, placed_orders):
        now = utc_now()
        service = DashboardService(adapter)

        yearly = await service.revenue_by_year(now.year)
        monthly = await service.revenue_by_month(now.year, now.month)
        last_year = await service.revenue_by_year(now.year - 1)

        assert yearly.revenue == 200.0
        assert monthly.revenue == 200.0
        assert monthly.month == now.month
        assert last_year.revenue == 0

    @pytest.mark.asyncio
    async def test_orders_in_month(self, adapter, placed_orders):
        now = utc_now()
        service = DashboardService(adapter)

        current = await service.orders_in_month(now.year, now.month)
        empty = await service.orders_in_month(now.year - 1, 12)

        assert current.total_orders == 3
        assert empty.total_orders == 0

    @pytest.mark.asyncio
    async def test_empty_store(self, adapter):
        summary = await DashboardService(adapter).summary()

        assert summary.total_orders == 0
        assert summary.total_users == 0
        assert await OrderRepository(adapter).count() == 0


class TestDashboardEndpoints:

    @pytest.mark.asyncio
    async def test_admin_only(self, client: AsyncClient, user_headers):
        response = await client.get("/api/v1/dashboard/summary", headers=user_headers)

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_revenue_route(self, client: AsyncClient, admin_headers, placed_orders):
        year = utc_now().year

        response = await client.get(f"/api/v1/dashboard/revenue/{year}", headers=admin_headers)

        assert response.status_code == 200
        assert response.json()["data"] == {"year": year, "month": None, "revenue": 200.0}

    @pytest.mark.asyncio
    async def test_monthly_orders_validation(self, client: AsyncClient, admin_headers):
        response = await client.get(
            "/api/v1/dashboard/orders/monthly",
            params={"year": 2024, "month": 13},
            headers=admin_headers,
        )

        assert response.status_code == 422


class TestUserTotals:

    @pytest.mark.asyncio
    async def test_deleted_accounts_not_counted(self, adapter):
        users = UserService(adapter)
        kept = await users.register(
            UserCreate(email="a@example.com", username="aaa", password="Secret#123")
        )
        gone = await users.register(
            UserCreate(email="b@example.com", username="bbb", password="Secret#123")
        )
        await users.delete_user(gone.id)

        summary = await DashboardService(adapter).summary()

        assert kept.is_active
        assert summary.total_users == 1
