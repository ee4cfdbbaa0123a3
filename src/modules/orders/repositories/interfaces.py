"""Order repository interface.

Extends ``IRepository[Order]``.  The store persists what it is given:
validation is the responsibility of the Service Layer.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Dict, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.orders.models import Order


class IOrderRepository(IRepository["Order"]):
    """Repository contract for the Order aggregate root."""

    @abstractmethod
    async def create(self, data: Dict[str, Any]) -> Order:
        """Create an order with its items.

        ``data`` must include ``customer`` (a ``Customer``) and
        ``products`` (list of dicts with ``product_id``, ``quantity``,
        ``price``).
        """

    @abstractmethod
    async def find_by_id(self, id: str) -> Optional[Order]:
        """Retrieve an order by id."""
