"""In-memory implementation of the Order repository.

Backed by an ordered list held by the instance.  Used to compose
services in tests; it is never wired into a running deployment.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import structlog

from modules.orders.models import Order, OrderItem
from modules.orders.repositories.interfaces import IOrderRepository

logger = structlog.get_logger(__name__)


class InMemoryOrderRepository(IOrderRepository):
    """Order repository backed by a Python list."""

    def __init__(self) -> None:
        self._orders: List[Order] = []

    async def create(self, data: Dict[str, Any]) -> Order:
        items = tuple(
            OrderItem(
                product_id=line["product_id"],
                quantity=line["quantity"],
                price=line["price"],
            )
            for line in data.get("products", [])
        )
        order = Order(customer=data["customer"], items=items)
        self._orders.append(order)

        log = logger.bind(order_id=order.id, item_count=len(items))
        log.info("order.persisted")
        return order

    async def find_by_id(self, id: str) -> Optional[Order]:
        return next((o for o in self._orders if o.id == id), None)

    def all(self) -> List[Order]:
        return list(self._orders)
