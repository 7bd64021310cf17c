# ==============================================================================
# ORDER SERVICE - Checkout & Fulfillment Workflow
# ==============================================================================
# Order creation, status transitions and soft deletion, keeping the
# catalog stock, the order record and the user's cart in step
# ==============================================================================

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence

from cosmetics_store.core.constants import ErrorMessages, OrderConstants
from cosmetics_store.core.exceptions import (
    BusinessRuleError,
    InsufficientStockError,
    NotFoundError,
)
from cosmetics_store.core.settings import Settings, settings as default_settings
from cosmetics_store.database.adapters.base_adapter import BaseDatabaseAdapter
from cosmetics_store.database.repositories.order_repository import OrderRepository
from cosmetics_store.database.repositories.product_repository import ProductRepository
from cosmetics_store.schemas.order import (
    OrderCreate,
    OrderInDB,
    OrderLine,
    OrderResponse,
    OrderUpdate,
    Payment,
)
from cosmetics_store.services.base_service import BaseService
from cosmetics_store.services.cart_service import CartService, summarize_items
from cosmetics_store.utils.helpers import utc_now

logger = logging.getLogger(__name__)


class OrderService(BaseService[OrderInDB, OrderResponse]):
    """
    Order workflow.

    Checkout validates every line against the catalog, reserves stock
    with conditional decrements, inserts the order and prunes the
    purchased products from the user's cart. A failure after the first
    reservation undoes what was applied (restock, remove the inserted
    order) before the error propagates, so a failed checkout leaves no
    trace.

    ``stock_applied`` on the order records whether the catalog
    currently reflects its quantities. Cancellation restocks only
    while it is set; the first status advance of a pending order
    decrements again only when it is clear, or when
    ``ORDER_REAPPLY_STOCK_ON_FIRST_ADVANCE`` asks for the legacy
    double decrement.
    """

    def __init__(
        self,
        adapter: BaseDatabaseAdapter,
        config: Optional[Settings] = None,
    ) -> None:
        """Initialize order service."""
        self._orders = OrderRepository(adapter)
        self._products = ProductRepository(adapter)
        self._carts = CartService(adapter)
        self._config = config or default_settings
        super().__init__(self._orders, "order")

    def _to_response(self, entity: OrderInDB) -> OrderResponse:
        """Convert order record to response (drops internal flags)."""
        return OrderResponse.model_validate(entity.model_dump())

    # ==========================================================================
    # STOCK HELPERS
    # ==========================================================================

    async def _take_stock(self, lines: Sequence[OrderLine]) -> None:
        """
        Decrement stock for every line with a guarded write.

        On failure the lines already taken are restocked and
        InsufficientStockError is raised. Lines whose product has
        disappeared are skipped.
        """
        taken: List[OrderLine] = []
        for line in lines:
            try:
                updated = await self._products.adjust_stock(
                    line.product_id, -line.quantity, floor=0
                )
            except Exception:
                logger.exception(
                    f"Stock reservation errored for product {line.product_id}"
                )
                await self._release(taken)
                raise
            if updated is not None:
                taken.append(line)
                continue

            current = await self._products.get_by_id(line.product_id)
            if current is None:
                logger.warning(
                    f"Stock decrement skipped, product {line.product_id} not found"
                )
                continue

            logger.warning(
                f"Stock reservation failed for product {line.product_id}: "
                f"requested {line.quantity}, available {current.quantity}"
            )
            await self._release(taken)
            raise InsufficientStockError(
                message=f"Insufficient stock for {current.name}",
                product_id=current.id,
                product_name=current.name,
                requested=line.quantity,
                available=current.quantity,
            )

    async def _restock(self, lines: Sequence[OrderLine]) -> None:
        """Add every line's quantity back to its product."""
        for line in lines:
            updated = await self._products.adjust_stock(
                line.product_id, line.quantity, floor=None
            )
            if updated is None:
                logger.warning(
                    f"Restock skipped, product {line.product_id} not found"
                )

    async def _release(self, lines: Sequence[OrderLine]) -> None:
        """
        Compensating restock. Each line is attempted on its own and
        failures are logged, never raised.
        """
        for line in lines:
            try:
                await self._restock([line])
            except Exception:
                logger.exception(
                    f"Could not release {line.quantity} of product {line.product_id}"
                )

    def _initial_payment(self, method: Optional[str], amount: float) -> Payment:
        method = method or self._config.ORDER_DEFAULT_PAYMENT_METHOD
        if method in self._config.ORDER_PAID_ON_CREATE_METHODS:
            return Payment(
                status=OrderConstants.PAYMENT_PAID,
                method=method,
                amount=amount,
                paid_at=utc_now(),
            )
        return Payment(
            status=OrderConstants.PAYMENT_UNPAID,
            method=method,
            amount=amount,
        )

    # ==========================================================================
    # WORKFLOW OPERATIONS
    # ==========================================================================

    async def create_order(
        self,
        user_id: str,
        schema: OrderCreate,
    ) -> OrderResponse:
        """
        Place an order for a user.

        Args:
            user_id: Customer placing the order
            schema: Receiver details, lines and payment method

        Returns:
            The persisted order

        Raises:
            NotFoundError: If a product does not exist
            InsufficientStockError: If a line exceeds available stock
        """
        lines: List[OrderLine] = []
        for item in schema.items:
            product = await self._products.get_by_id(item.product_id)
            if product is None:
                raise NotFoundError(
                    message=f"Product {item.product_id} not found",
                    resource_type="product",
                    resource_id=item.product_id,
                )
            if product.quantity < item.quantity:
                raise InsufficientStockError(
                    message=f"Insufficient stock for {product.name}",
                    product_id=product.id,
                    product_name=product.name,
                    requested=item.quantity,
                    available=product.quantity,
                )

            # Price comes from the request; stock was validated above
            lines.append(
                OrderLine(
                    product_id=product.id,
                    quantity=item.quantity,
                    price=item.price,
                    subtotal=item.price * item.quantity,
                    product_name=product.name,
                    product_image=product.image_url,
                )
            )

        total_amount, total_items = summarize_items(lines)
        payment = self._initial_payment(schema.payment_method, total_amount)

        await self._take_stock(lines)

        order: Optional[OrderInDB] = None
        try:
            order = await self._orders.create(
                {
                    "user_id": user_id,
                    "receiver_name": schema.receiver_name,
                    "receiver_phone": schema.receiver_phone,
                    "receiver_address": schema.receiver_address,
                    "order_notes": schema.order_notes,
                    "items": [line.model_dump() for line in lines],
                    "total_amount": total_amount,
                    "total_items": total_items,
                    "status": OrderConstants.STATUS_PENDING,
                    "payment": payment.model_dump(),
                    "stock_applied": True,
                }
            )
            await self._carts.prune_purchased(
                user_id, [line.product_id for line in lines]
            )
        except Exception:
            logger.exception(
                f"Checkout failed for user {user_id}, releasing reserved stock"
            )
            await self._release(lines)
            if order is not None:
                try:
                    await self._orders.delete(order.id)
                except Exception:
                    logger.exception(f"Could not remove failed order {order.id}")
            raise

        logger.info(
            f"Order {order.id} placed by user {user_id}: "
            f"{total_items} items, total {total_amount}"
        )
        return self._to_response(order)

    async def update_order(
        self,
        order_id: str,
        schema: OrderUpdate,
    ) -> OrderResponse:
        """
        Apply field changes and the status transition rules.

        Exactly one rule fires, checked in order:

        1. A status change on a stored ``pending`` order whose stock is not
           applied (or with the legacy reapply setting on) decrements stock.
        2. Target ``completed`` marks the payment paid now.
        3. Target ``cancelled`` restocks the lines and fails the payment
           unless it already failed.

        Raises:
            NotFoundError: If the order is missing or soft-deleted
        """
        order = await self._get_or_404(order_id)

        changes: Dict[str, Any] = schema.model_dump(
            exclude_unset=True,
            exclude_none=True,
            exclude={"payment"},
        )
        payment_patch: Dict[str, Any] = (
            schema.payment.model_dump(exclude_unset=True, exclude_none=True)
            if schema.payment is not None
            else {}
        )
        target = schema.status

        first_advance = (
            target is not None
            and order.status == OrderConstants.STATUS_PENDING
            and (
                self._config.ORDER_REAPPLY_STOCK_ON_FIRST_ADVANCE
                or not order.stock_applied
            )
        )

        if first_advance:
            await self._take_stock(order.items)
            changes["stock_applied"] = True
        elif target == OrderConstants.STATUS_COMPLETED:
            payment_patch = {
                "status": OrderConstants.PAYMENT_PAID,
                "paid_at": utc_now(),
            }
        elif target == OrderConstants.STATUS_CANCELLED:
            if order.stock_applied:
                await self._restock(order.items)
                changes["stock_applied"] = False
            if order.payment.status != OrderConstants.PAYMENT_FAILED:
                payment_patch = {"status": OrderConstants.PAYMENT_FAILED}

        if payment_patch:
            merged = {**order.payment.model_dump(), **payment_patch}
            changes["payment"] = Payment.model_validate(merged).model_dump()

        updated = await self._orders.update(order_id, changes)
        if updated is None:
            raise NotFoundError(
                message=ErrorMessages.ORDER_NOT_FOUND,
                resource_type="order",
                resource_id=order_id,
            )

        logger.info(
            f"Order {order_id} updated: status {order.status} -> {updated.status}, "
            f"payment {updated.payment.status}"
        )
        return self._to_response(updated)

    async def delete_order(self, order_id: str) -> None:
        """
        Soft-delete an order and restock its lines.

        A non-cancelled order is cancelled; an already cancelled order
        has its payment failed instead. Never both. Stock is returned
        for every line whichever branch applied.

        Raises:
            NotFoundError: If the order is missing or soft-deleted
        """
        order = await self._get_or_404(order_id)

        changes: Dict[str, Any] = {"is_deleted": True, "stock_applied": False}
        if order.status != OrderConstants.STATUS_CANCELLED:
            changes["status"] = OrderConstants.STATUS_CANCELLED
        elif order.payment.status != OrderConstants.PAYMENT_FAILED:
            changes["payment"] = {
                **order.payment.model_dump(),
                "status": OrderConstants.PAYMENT_FAILED,
            }

        await self._orders.update(order_id, changes)
        await self._restock(order.items)
        logger.info(f"Order {order_id} deleted (was {order.status})")

    # ==========================================================================
    # QUERIES
    # ==========================================================================

    async def get_order(self, order_id: str) -> OrderResponse:
        """Any active order by id."""
        return await self.get_by_id(order_id)

    async def _get_owned(self, user_id: str, order_id: str) -> OrderInDB:
        order = await self._get_or_404(order_id)
        if order.user_id != user_id:
            raise NotFoundError(
                message=ErrorMessages.ORDER_NOT_FOUND,
                resource_type="order",
                resource_id=order_id,
            )
        return order

    async def get_order_for_user(
        self,
        user_id: str,
        order_id: str,
    ) -> OrderResponse:
        """An order owned by the user; other users' orders read as missing."""
        return self._to_response(await self._get_owned(user_id, order_id))

    async def list_user_orders(
        self,
        user_id: str,
        page: int = 1,
        page_size: int = 10,
    ) -> Dict[str, Any]:
        """A user's orders, newest first."""
        return await self.get_paginated(
            page=page,
            page_size=page_size,
            filters={"user_id": user_id},
            sort_by="created_at",
            sort_order="desc",
        )

    async def list_orders(
        self,
        page: int = 1,
        page_size: int = 10,
        status: Optional[str] = None,
    ) -> Dict[str, Any]:
        """All active orders, newest first."""
        return await self.get_paginated(
            page=page,
            page_size=page_size,
            filters={"status": status} if status else None,
            sort_by="created_at",
            sort_order="desc",
        )

    async def delete_own_order(self, user_id: str, order_id: str) -> None:
        """
        Customer-side removal of an order.

        Raises:
            NotFoundError: If the order is not the user's
            BusinessRuleError: If the order is not ``processing``
        """
        order = await self._get_owned(user_id, order_id)
        if order.status != OrderConstants.STATUS_PROCESSING:
            raise BusinessRuleError(
                message=ErrorMessages.ORDER_NOT_REMOVABLE,
                rule="order_removable_while_processing",
                details={"status": order.status},
            )
        await self.delete_order(order_id)
