# ==============================================================================
# REPOSITORY TESTS
# ==============================================================================

import pytest

from cosmetics_store.database.repositories import ProductRepository


class TestAdjustStock:

    @pytest.mark.asyncio
    async def test_guard_rejects_write_below_floor(self, adapter, make_product):
        product = await make_product(quantity=2)
        products = ProductRepository(adapter)

        result = await products.adjust_stock(product.id, -3, floor=0)

        assert result is None
        assert (await products.get_by_id(product.id)).quantity == 2

    @pytest.mark.asyncio
    async def test_guard_allows_reaching_floor(self, adapter, make_product):
        product = await make_product(quantity=2)

        result = await ProductRepository(adapter).adjust_stock(product.id, -2, floor=0)

        assert result.quantity == 0

    @pytest.mark.asyncio
    async def test_unguarded_restock(self, adapter, make_product):
        product = await make_product(quantity=0)

        result = await ProductRepository(adapter).adjust_stock(product.id, 5, floor=None)

        assert result.quantity == 5

    @pytest.mark.asyncio
    async def test_deleted_product_is_not_adjusted(self, adapter, make_product):
        product = await make_product(quantity=4)
        products = ProductRepository(adapter)
        await products.update(product.id, {"is_deleted": True})

        assert await products.adjust_stock(product.id, -1) is None
        stored = await products.get_by_id(product.id, include_deleted=True)
        assert stored.quantity == 4
