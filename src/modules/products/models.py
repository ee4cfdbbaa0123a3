"""Product entity with stock control.

Rules:
- ``price`` is non-negative.
- ``quantity`` (stock on hand) is non-negative; it is the only field the
  order workflow mutates.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from modules.core.models import BaseEntity


@dataclass(kw_only=True)
class Product(BaseEntity):
    """Product aggregate root."""

    name: str
    price: Decimal
    quantity: int = 0

    def __post_init__(self) -> None:
        self.price = Decimal(str(self.price))
        if self.price < 0:
            raise ValueError("Price cannot be negative.")
        if self.quantity < 0:
            raise ValueError("Stock quantity cannot be negative.")

    def __str__(self) -> str:
        return f"{self.name} ({self.quantity} in stock)"
