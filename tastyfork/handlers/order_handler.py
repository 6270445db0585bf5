"""
handlers/order_handler.py – OrderHandler class.
Responsibility: place, list and cancel orders.

Placing an order is two independent writes: insert the order, then bump the
food's purchaseCount. The increment is best-effort; if it fails the order
still counts as placed and the counter goes stale.
"""
import logging

from ..db.store import MarketStore
from ..models import OrderCreate, Document

logger = logging.getLogger(__name__)


class OrderHandler:
    """Handles /orders, /my_orders, /my_orders/{id}."""

    def __init__(self, store: MarketStore) -> None:
        self._store = store

    async def place(self, order: OrderCreate) -> Document:
        data = order.model_dump(exclude_unset=True)
        data.update(order.model_extra or {})
        result = await self._store.insert_order(data)
        logger.info(f"Order {result['insertedId']} placed for food {order.food_id}")
        try:
            inc = await self._store.increment_purchase_count(order.food_id)
            if not inc["matchedCount"]:
                logger.warning(f"Order {result['insertedId']}: food {order.food_id} not found, count not updated")
        except Exception as e:
            logger.warning(f"Order {result['insertedId']}: purchaseCount increment failed: {e}")
        return result

    async def mine(self, email: str) -> list[Document]:
        return await self._store.orders_for_email(email)

    async def cancel(self, order_id: str) -> Document:
        """No ownership check: whoever knows the id can delete the order."""
        result = await self._store.delete_order(order_id)
        logger.info(f"Cancel order {order_id}: deleted={result['deletedCount']}")
        return result
