# ==============================================================================
# CART TESTS
# ==============================================================================
# Cart reconciliation through the service and the /carts endpoints
# ==============================================================================

import pytest
from httpx import AsyncClient

from cosmetics_store.core.exceptions import (
    ConflictError,
    InsufficientStockError,
    NotFoundError,
)
from cosmetics_store.schemas.cart import CartItemAdd, CartItemUpdate
from cosmetics_store.schemas.product import ProductUpdate
from cosmetics_store.services.cart_service import CartService
from cosmetics_store.services.product_service import ProductService


class TestCartService:
    """Totals always follow the lines."""

    @pytest.mark.asyncio
    async def test_get_cart_without_cart(self, adapter, user_id):
        cart = await CartService(adapter).get_cart(user_id)

        assert cart.id is None
        assert cart.items == []
        assert cart.total_amount == 0

    @pytest.mark.asyncio
    async def test_add_creates_cart_and_merges_lines(self, adapter, make_product, user_id):
        product = await make_product(quantity=10, price=45.5)
        service = CartService(adapter)

        await service.add_item(user_id, CartItemAdd(product_id=product.id, quantity=2))
        cart = await service.add_item(user_id, CartItemAdd(product_id=product.id, quantity=1))

        assert len(cart.items) == 1
        assert cart.items[0].quantity == 3
        assert cart.items[0].subtotal == pytest.approx(136.5)
        assert cart.items[0].product.slug == product.slug
        assert cart.total_items == 3
        assert cart.total_amount == pytest.approx(136.5)

    @pytest.mark.asyncio
    async def test_merge_keeps_line_price(self, adapter, make_product, user_id):
        """A price change after adding does not reprice the existing line."""
        product = await make_product(quantity=10, price=20.0)
        service = CartService(adapter)
        await service.add_item(user_id, CartItemAdd(product_id=product.id, quantity=1))
        await ProductService(adapter).update_product(
            product.id, ProductUpdate(discount_price=99.0)
        )

        cart = await service.add_item(user_id, CartItemAdd(product_id=product.id, quantity=1))

        assert cart.items[0].price == 20.0
        assert cart.total_amount == 40.0

    @pytest.mark.asyncio
    async def test_add_over_stock(self, adapter, make_product, user_id):
        product = await make_product(quantity=2)

        with pytest.raises(InsufficientStockError):
            await CartService(adapter).add_item(
                user_id, CartItemAdd(product_id=product.id, quantity=3)
            )

    @pytest.mark.asyncio
    async def test_add_unknown_product(self, adapter, user_id):
        with pytest.raises(NotFoundError):
            await CartService(adapter).add_item(
                user_id, CartItemAdd(product_id="missing", quantity=1)
            )

    @pytest.mark.asyncio
    async def test_update_quantity_recomputes_totals(self, adapter, make_product, user_id):
        serum = await make_product(quantity=10, price=100.0)
        toner = await make_product(quantity=10, price=30.0)
        service = CartService(adapter)
        await service.add_item(user_id, CartItemAdd(product_id=serum.id, quantity=1))
        await service.add_item(user_id, CartItemAdd(product_id=toner.id, quantity=1))

        cart = await service.update_item_quantity(
            user_id, CartItemUpdate(product_id=toner.id, quantity=4)
        )

        assert cart.total_items == 5
        assert cart.total_amount == 220.0

    @pytest.mark.asyncio
    async def test_update_to_zero_removes_line(self, adapter, make_product, user_id):
        product = await make_product(quantity=10)
        service = CartService(adapter)
        await service.add_item(user_id, CartItemAdd(product_id=product.id, quantity=2))

        cart = await service.update_item_quantity(
            user_id, CartItemUpdate(product_id=product.id, quantity=0)
        )

        assert cart.items == []
        assert cart.total_items == 0
        assert cart.total_amount == 0

    @pytest.mark.asyncio
    async def test_update_line_not_in_cart(self, adapter, make_product, user_id):
        in_cart = await make_product(quantity=10)
        other = await make_product(quantity=10)
        service = CartService(adapter)
        await service.add_item(user_id, CartItemAdd(product_id=in_cart.id, quantity=1))

        with pytest.raises(NotFoundError):
            await service.update_item_quantity(
                user_id, CartItemUpdate(product_id=other.id, quantity=2)
            )

    @pytest.mark.asyncio
    async def test_update_over_stock(self, adapter, make_product, user_id):
        product = await make_product(quantity=3)
        service = CartService(adapter)
        await service.add_item(user_id, CartItemAdd(product_id=product.id, quantity=1))

        with pytest.raises(InsufficientStockError):
            await service.update_item_quantity(
                user_id, CartItemUpdate(product_id=product.id, quantity=4)
            )

    @pytest.mark.asyncio
    async def test_create_cart_twice(self, adapter, user_id):
        service = CartService(adapter)
        await service.create_cart(user_id)

        with pytest.raises(ConflictError):
            await service.create_cart(user_id)

    @pytest.mark.asyncio
    async def test_clear_and_prune(self, adapter, make_product, user_id):
        product = await make_product(quantity=10)
        service = CartService(adapter)
        assert await service.prune_purchased(user_id, [product.id]) is None

        await service.add_item(user_id, CartItemAdd(product_id=product.id, quantity=1))
        await service.clear(user_id)

        cart = await service.get_cart(user_id)
        assert cart.id is not None
        assert cart.items == []


class TestCartEndpoints:
    """Tests for /carts."""

    @pytest.mark.asyncio
    async def test_requires_authentication(self, client: AsyncClient):
        response = await client.get("/api/v1/carts")

        assert response.status_code == 401
        assert response.json()["success"] is False

    @pytest.mark.asyncio
    async def test_add_update_remove(self, client: AsyncClient, user_headers, make_product):
        product = await make_product(quantity=5, price=12.0)

        response = await client.post(
            "/api/v1/carts/items",
            json={"product_id": product.id, "quantity": 2},
            headers=user_headers,
        )
        assert response.status_code == 200
        assert response.json()["data"]["total_amount"] == 24.0

        response = await client.put(
            "/api/v1/carts/items",
            json={"product_id": product.id, "quantity": 3},
            headers=user_headers,
        )
        assert response.json()["data"]["total_items"] == 3

        response = await client.delete(
            f"/api/v1/carts/items/{product.id}",
            headers=user_headers,
        )
        data = response.json()["data"]
        assert data["items"] == []
        assert data["total_amount"] == 0

    @pytest.mark.asyncio
    async def test_add_over_stock_error_envelope(
        self, client: AsyncClient, user_headers, make_product
    ):
        product = await make_product(quantity=1)

        response = await client.post(
            "/api/v1/carts/items",
            json={"product_id": product.id, "quantity": 2},
            headers=user_headers,
        )

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "INSUFFICIENT_STOCK"
        assert error["details"]["available_quantity"] == 1
