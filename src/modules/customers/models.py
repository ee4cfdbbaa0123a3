"""Customer entity.

Customers are created by the registration flow and referenced, never
mutated, by order creation.  ``email`` is unique across the store.
"""

from __future__ import annotations

from dataclasses import dataclass

from modules.core.models import BaseEntity


@dataclass(kw_only=True)
class Customer(BaseEntity):
    """Customer aggregate root."""

    name: str
    email: str

    def __str__(self) -> str:
        return f"{self.name} <{self.email}>"
