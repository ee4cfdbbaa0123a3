"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
DTOs are immutable (``frozen=True``).

- ``CreateProductDTO``: input for product creation.
- ``ProductQuantityUpdate``: one entry of a bulk stock update.
- ``ProductOutputDTO``: output with all product fields.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, field_validator

if TYPE_CHECKING:
    from modules.products.models import Product


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class CreateProductDTO(BaseModel):
    """Immutable DTO for product creation requests.

    Validates:
    - ``name`` is a non-empty string.
    - ``price`` is a non-negative Decimal.
    - ``quantity`` is non-negative.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    price: Decimal
    quantity: int = 0

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Name must not be empty.")
        return v.strip()

    @field_validator("price")
    @classmethod
    def price_must_be_non_negative(cls, v: Decimal) -> Decimal:
        if v < 0:
            raise ValueError("Price cannot be negative.")
        return v

    @field_validator("quantity")
    @classmethod
    def stock_must_be_non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("Stock quantity cannot be negative.")
        return v


class ProductQuantityUpdate(BaseModel):
    """New absolute stock quantity for one product."""

    model_config = ConfigDict(frozen=True)

    id: str
    quantity: int

    @field_validator("quantity")
    @classmethod
    def stock_must_be_non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("Stock quantity cannot be negative.")
        return v


# ---------------------------------------------------------------------------
# Output DTO
# ---------------------------------------------------------------------------


class ProductOutputDTO(BaseModel):
    """Immutable DTO for product responses."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    price: Decimal
    quantity: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, product: Product) -> ProductOutputDTO:
        """Build an output DTO from a Product entity."""
        return cls(
            id=product.id,
            name=product.name,
            price=product.price,
            quantity=product.quantity,
            created_at=product.created_at,
            updated_at=product.updated_at,
        )
