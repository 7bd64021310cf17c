# ==============================================================================
# CART SERVICE - Cart Reconciliation
# ==============================================================================
# Every mutation rebuilds the line list and recomputes totals from it
# ==============================================================================

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence, Tuple

from cosmetics_store.core.constants import ErrorMessages
from cosmetics_store.core.exceptions import (
    ConflictError,
    InsufficientStockError,
    NotFoundError,
)
from cosmetics_store.database.adapters.base_adapter import BaseDatabaseAdapter
from cosmetics_store.database.repositories.cart_repository import CartRepository
from cosmetics_store.database.repositories.product_repository import ProductRepository
from cosmetics_store.schemas.cart import (
    CartInDB,
    CartItemAdd,
    CartItemUpdate,
    CartLine,
    CartLineResponse,
    CartResponse,
)
from cosmetics_store.schemas.product import ProductInDB, ProductSummary
from cosmetics_store.services.base_service import BaseService

logger = logging.getLogger(__name__)


def summarize_items(items: Iterable) -> Tuple[float, int]:
    """
    Fold line items into ``(total_amount, total_items)``.

    Works for any line exposing ``subtotal`` and ``quantity``.
    """
    total_amount = 0.0
    total_items = 0
    for item in items:
        total_amount += item.subtotal
        total_items += item.quantity
    return total_amount, total_items


class CartService(BaseService[CartInDB, CartResponse]):
    """
    Cart service.

    Carts are created lazily by the first add-to-cart. Stock is
    re-checked on every add and quantity change, not only at checkout.
    """

    def __init__(self, adapter: BaseDatabaseAdapter) -> None:
        """Initialize cart service."""
        self._carts = CartRepository(adapter)
        self._products = ProductRepository(adapter)
        super().__init__(self._carts, "cart")

    def _to_response(self, entity: CartInDB) -> CartResponse:
        """Convert cart record to response without product details."""
        return CartResponse(
            id=entity.id,
            user_id=entity.user_id,
            items=[CartLineResponse(**line.model_dump()) for line in entity.items],
            total_amount=entity.total_amount,
            total_items=entity.total_items,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    async def _with_products(self, cart: CartInDB) -> CartResponse:
        response = self._to_response(cart)
        for line in response.items:
            product = await self._products.get_by_id(line.product_id)
            if product is not None:
                line.product = ProductSummary.model_validate(product.model_dump())
        return response

    async def _require_cart(self, user_id: str) -> CartInDB:
        cart = await self._carts.get_by_user(user_id)
        if cart is None:
            raise NotFoundError(
                message=ErrorMessages.CART_NOT_FOUND,
                resource_type="cart",
                resource_id=user_id,
            )
        return cart

    async def _require_product(self, product_id: str) -> ProductInDB:
        product = await self._products.get_by_id(product_id)
        if product is None:
            raise NotFoundError(
                message=ErrorMessages.PRODUCT_NOT_FOUND,
                resource_type="product",
                resource_id=product_id,
            )
        return product

    @staticmethod
    def _check_stock(product: ProductInDB, quantity: int) -> None:
        if quantity > product.quantity:
            raise InsufficientStockError(
                message=f"Insufficient stock for {product.name}",
                product_id=product.id,
                product_name=product.name,
                requested=quantity,
                available=product.quantity,
            )

    async def _save(self, cart: CartInDB, items: List[CartLine]) -> CartInDB:
        total_amount, total_items = summarize_items(items)
        saved = await self._carts.replace_items(
            cart.id, items, total_amount, total_items
        )
        if saved is None:
            raise NotFoundError(
                message=ErrorMessages.CART_NOT_FOUND,
                resource_type="cart",
                resource_id=cart.id,
            )
        return saved

    # ==========================================================================
    # CART OPERATIONS
    # ==========================================================================

    async def get_cart(self, user_id: str) -> CartResponse:
        """A user's cart with product details; empty shape when none exists."""
        cart = await self._carts.get_by_user(user_id)
        if cart is None:
            return CartResponse(user_id=user_id)
        return await self._with_products(cart)

    async def create_cart(self, user_id: str) -> CartResponse:
        """
        Create an empty cart.

        Raises:
            ConflictError: If the user already has a cart
        """
        if await self._carts.get_by_user(user_id) is not None:
            raise ConflictError(
                message=ErrorMessages.CART_EXISTS,
                resource_type="cart",
            )
        cart = await self._carts.create_for_user(user_id)
        logger.info(f"Cart created for user {user_id}")
        return self._to_response(cart)

    async def add_item(self, user_id: str, schema: CartItemAdd) -> CartResponse:
        """
        Add a product to the cart.

        Merges into an existing line for the same product, keeping that
        line's price snapshot; otherwise appends a line priced at the
        product's current discount price.
        """
        product = await self._require_product(schema.product_id)
        self._check_stock(product, schema.quantity)

        cart = await self._carts.get_by_user(user_id)
        if cart is None:
            cart = await self._carts.create_for_user(user_id)

        items: List[CartLine] = []
        merged = False
        for line in cart.items:
            if line.product_id == product.id:
                quantity = line.quantity + schema.quantity
                line = CartLine(
                    product_id=line.product_id,
                    quantity=quantity,
                    price=line.price,
                    subtotal=line.price * quantity,
                )
                merged = True
            items.append(line)

        if not merged:
            items.append(
                CartLine(
                    product_id=product.id,
                    quantity=schema.quantity,
                    price=product.discount_price,
                    subtotal=product.discount_price * schema.quantity,
                )
            )

        saved = await self._save(cart, items)
        return await self._with_products(saved)

    async def update_item_quantity(
        self,
        user_id: str,
        schema: CartItemUpdate,
    ) -> CartResponse:
        """Set a line's quantity; zero or less removes the line."""
        if schema.quantity <= 0:
            return await self.remove_item(user_id, schema.product_id)

        cart = await self._require_cart(user_id)
        if not any(line.product_id == schema.product_id for line in cart.items):
            raise NotFoundError(
                message=ErrorMessages.CART_ITEM_NOT_FOUND,
                resource_type="cart_item",
                resource_id=schema.product_id,
            )

        product = await self._require_product(schema.product_id)
        self._check_stock(product, schema.quantity)

        items = [
            CartLine(
                product_id=line.product_id,
                quantity=schema.quantity,
                price=line.price,
                subtotal=line.price * schema.quantity,
            )
            if line.product_id == schema.product_id
            else line
            for line in cart.items
        ]
        saved = await self._save(cart, items)
        return await self._with_products(saved)

    async def remove_item(self, user_id: str, product_id: str) -> CartResponse:
        """Remove a product's line from the cart."""
        cart = await self._require_cart(user_id)
        items = [line for line in cart.items if line.product_id != product_id]
        saved = await self._save(cart, items)
        return await self._with_products(saved)

    async def clear(self, user_id: str) -> None:
        """Remove every line from the cart."""
        cart = await self._require_cart(user_id)
        await self._save(cart, [])
        logger.info(f"Cart cleared for user {user_id}")

    async def prune_purchased(
        self,
        user_id: str,
        product_ids: Sequence[str],
    ) -> Optional[CartInDB]:
        """
        Drop purchased products from the user's cart after checkout.

        Returns the updated cart, or None when the user has no cart.
        """
        cart = await self._carts.get_by_user(user_id)
        if cart is None:
            return None

        purchased = set(product_ids)
        remaining = [line for line in cart.items if line.product_id not in purchased]
        if len(remaining) == len(cart.items):
            return cart
        return await self._save(cart, remaining)
