"""Order and OrderItem entities.

- ``OrderItem`` snapshots the product price at creation time
  (``price``); later price changes never reach existing orders.
- ``subtotal`` is always ``quantity * price``.
- Orders are created once per successful workflow run and are immutable
  afterwards (frozen dataclasses, items held in a tuple).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Tuple

from modules.core.models import new_id, utcnow

if TYPE_CHECKING:
    from modules.customers.models import Customer


@dataclass(frozen=True)
class OrderItem:
    """Line item linking an Order to a Product."""

    product_id: str
    quantity: int
    price: Decimal

    def __post_init__(self) -> None:
        if self.quantity < 1:
            raise ValueError("Quantity must be at least 1.")
        object.__setattr__(self, "price", Decimal(str(self.price)))

    @property
    def subtotal(self) -> Decimal:
        return self.quantity * self.price

    def __str__(self) -> str:
        return f"{self.product_id} x{self.quantity} (${self.subtotal})"


@dataclass(frozen=True, kw_only=True)
class Order:
    """Order aggregate root.

    Carries the same ``id`` / ``created_at`` bookkeeping as
    ``BaseEntity`` but is frozen, so it cannot inherit from it.
    """

    customer: Customer
    items: Tuple[OrderItem, ...] = field(default_factory=tuple)
    id: str = field(default_factory=new_id)
    created_at: datetime = field(default_factory=utcnow)

    @property
    def customer_id(self) -> str:
        return self.customer.id

    @property
    def total_amount(self) -> Decimal:
        return sum((item.subtotal for item in self.items), Decimal("0"))

    def __str__(self) -> str:
        return f"Order {self.id} ({len(self.items)} items)"
