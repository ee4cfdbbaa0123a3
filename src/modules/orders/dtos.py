"""Order DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
DTOs are immutable (``frozen=True``).

- ``CreateOrderItemDTO``: input for a single requested product.
- ``CreateOrderDTO``: input for order creation (nested products).
- ``OrderItemOutputDTO``: output for a single line item.
- ``OrderOutputDTO``: output with items and total.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, List

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

if TYPE_CHECKING:
    from modules.orders.models import Order


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class CreateOrderItemDTO(BaseModel):
    """Immutable DTO for a single requested product.

    The caller sends the product ``id`` and ``quantity``; the unit price
    is resolved by the Service Layer from the product catalog.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    quantity: int

    @field_validator("quantity")
    @classmethod
    def quantity_must_be_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("Quantity must be at least 1.")
        return v


class CreateOrderDTO(BaseModel):
    """Immutable DTO for order creation requests.

    Validates:
    - ``products`` must contain at least one item.
    - Each quantity must be positive.
    - A product id may appear only once.
    """

    model_config = ConfigDict(frozen=True)

    customer_id: str
    products: List[CreateOrderItemDTO]

    @field_validator("products")
    @classmethod
    def products_must_not_be_empty(
        cls, v: List[CreateOrderItemDTO]
    ) -> List[CreateOrderItemDTO]:
        if not v:
            raise ValueError("Order must have at least one product.")
        return v

    @model_validator(mode="after")
    def no_duplicate_products(self):
        """Prevent duplicate product ids in the same order."""
        product_ids = [item.id for item in self.products]
        if len(product_ids) != len(set(product_ids)):
            raise ValueError("Duplicate product ids are not allowed in the same order.")
        return self


# ---------------------------------------------------------------------------
# Output DTOs
# ---------------------------------------------------------------------------


class OrderItemOutputDTO(BaseModel):
    """Immutable DTO for order line responses."""

    model_config = ConfigDict(frozen=True)

    product_id: str
    quantity: int
    price: Decimal
    subtotal: Decimal


class OrderOutputDTO(BaseModel):
    """Immutable DTO for order responses."""

    model_config = ConfigDict(frozen=True)

    id: str
    customer_id: str
    total_amount: Decimal
    items: List[OrderItemOutputDTO]

    @classmethod
    def from_entity(cls, order: Order) -> OrderOutputDTO:
        """Build an output DTO from an Order entity."""
        items = [
            OrderItemOutputDTO(
                product_id=item.product_id,
                quantity=item.quantity,
                price=item.price,
                subtotal=item.subtotal,
            )
            for item in order.items
        ]
        return cls(
            id=order.id,
            customer_id=order.customer_id,
            total_amount=order.total_amount,
            items=items,
        )
