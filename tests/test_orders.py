# ==============================================================================
# ORDER ENDPOINT TESTS
# ==============================================================================
# Tests for /orders routing, auth and error envelopes
# ==============================================================================

import pytest
from httpx import AsyncClient


class TestCustomerOrders:
    """Customer-side order routes."""

    @pytest.mark.asyncio
    async def test_place_order(
        self, client: AsyncClient, user_headers, user_id, make_product, sample_order_payload
    ):
        product = await make_product(quantity=10, price=100.0)

        response = await client.post(
            "/api/v1/orders",
            json=sample_order_payload(product.id, quantity=3),
            headers=user_headers,
        )

        assert response.status_code == 201
        data = response.json()
        assert data["success"] is True
        order = data["data"]
        assert order["user_id"] == user_id
        assert order["status"] == "pending"
        assert order["total_amount"] == 300.0
        assert order["payment"]["status"] == "unpaid"
        assert "stock_applied" not in order
        assert "is_deleted" not in order

        response = await client.get(f"/api/v1/products/{product.id}")
        assert response.json()["data"]["quantity"] == 7

    @pytest.mark.asyncio
    async def test_place_order_unauthenticated(
        self, client: AsyncClient, make_product, sample_order_payload
    ):
        product = await make_product()

        response = await client.post("/api/v1/orders", json=sample_order_payload(product.id))

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_insufficient_stock(
        self, client: AsyncClient, user_headers, make_product, sample_order_payload
    ):
        product = await make_product(quantity=1)

        response = await client.post(
            "/api/v1/orders",
            json=sample_order_payload(product.id, quantity=2),
            headers=user_headers,
        )

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "INSUFFICIENT_STOCK"
        assert error["details"]["product_name"] == product.name
        assert error["details"]["requested_quantity"] == 2

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "field, value",
        [
            ("receiver_phone", "12345"),
            ("receiver_name", "A"),
            ("receiver_address", "short"),
            ("items", []),
        ],
    )
    async def test_checkout_validation(
        self, client: AsyncClient, user_headers, make_product, sample_order_payload, field, value
    ):
        product = await make_product()
        payload = {**sample_order_payload(product.id), field: value}

        response = await client.post("/api/v1/orders", json=payload, headers=user_headers)

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_my_orders(
        self, client: AsyncClient, user_headers, make_product, sample_order_payload
    ):
        product = await make_product(quantity=10)
        created = await client.post(
            "/api/v1/orders", json=sample_order_payload(product.id), headers=user_headers
        )
        order_id = created.json()["data"]["id"]

        response = await client.get("/api/v1/orders/me", headers=user_headers)
        assert response.status_code == 200
        assert response.json()["data"]["total"] == 1

        response = await client.get(f"/api/v1/orders/me/{order_id}", headers=user_headers)
        assert response.json()["data"]["id"] == order_id

    @pytest.mark.asyncio
    async def test_pending_order_not_removable(
        self, client: AsyncClient, user_headers, make_product, sample_order_payload
    ):
        product = await make_product(quantity=10)
        created = await client.post(
            "/api/v1/orders", json=sample_order_payload(product.id), headers=user_headers
        )
        order_id = created.json()["data"]["id"]

        response = await client.delete(f"/api/v1/orders/me/{order_id}", headers=user_headers)

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "BUSINESS_RULE_ERROR"


class TestAdminOrders:
    """Admin-side order routes."""

    @pytest.mark.asyncio
    async def test_customer_cannot_list_all(self, client: AsyncClient, user_headers):
        response = await client.get("/api/v1/orders", headers=user_headers)

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_fulfillment_flow(
        self,
        client: AsyncClient,
        user_headers,
        admin_headers,
        make_product,
        sample_order_payload,
    ):
        product = await make_product(quantity=10, price=50.0)
        created = await client.post(
            "/api/v1/orders",
            json=sample_order_payload(product.id, quantity=2, price=50.0),
            headers=user_headers,
        )
        order_id = created.json()["data"]["id"]

        response = await client.patch(
            f"/api/v1/orders/{order_id}",
            json={"status": "processing"},
            headers=admin_headers,
        )
        assert response.status_code == 200
        assert response.json()["data"]["status"] == "processing"

        response = await client.patch(
            f"/api/v1/orders/{order_id}",
            json={"status": "completed"},
            headers=admin_headers,
        )
        order = response.json()["data"]
        assert order["status"] == "completed"
        assert order["payment"]["status"] == "paid"
        assert order["payment"]["paid_at"] is not None

        response = await client.get(
            "/api/v1/orders", params={"status": "completed"}, headers=admin_headers
        )
        assert response.json()["data"]["total"] == 1

        response = await client.get(f"/api/v1/products/{product.id}")
        assert response.json()["data"]["quantity"] == 8

    @pytest.mark.asyncio
    async def test_invalid_status(
        self, client: AsyncClient, user_headers, admin_headers, make_product, sample_order_payload
    ):
        product = await make_product(quantity=10)
        created = await client.post(
            "/api/v1/orders", json=sample_order_payload(product.id), headers=user_headers
        )
        order_id = created.json()["data"]["id"]

        response = await client.patch(
            f"/api/v1/orders/{order_id}",
            json={"status": "shipped"},
            headers=admin_headers,
        )

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_admin_delete(
        self, client: AsyncClient, user_headers, admin_headers, make_product, sample_order_payload
    ):
        product = await make_product(quantity=10)
        created = await client.post(
            "/api/v1/orders",
            json=sample_order_payload(product.id, quantity=4),
            headers=user_headers,
        )
        order_id = created.json()["data"]["id"]

        response = await client.delete(f"/api/v1/orders/{order_id}", headers=admin_headers)
        assert response.status_code == 200

        response = await client.get(f"/api/v1/orders/{order_id}", headers=admin_headers)
        assert response.status_code == 404

        response = await client.get(f"/api/v1/products/{product.id}")
        assert response.json()["data"]["quantity"] == 10
