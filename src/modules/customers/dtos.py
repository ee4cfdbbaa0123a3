"""Customer DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
DTOs are immutable (``frozen=True``).

- ``CreateCustomerDTO``: input for customer creation.
- ``CustomerOutputDTO``: output for customer look-ups.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, EmailStr, field_validator

if TYPE_CHECKING:
    from modules.customers.models import Customer


class CreateCustomerDTO(BaseModel):
    """Immutable DTO for customer creation requests.

    Validates:
    - ``name`` is a non-empty string (whitespace stripped).
    - ``email`` is a well-formed address, normalised to lowercase.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    email: EmailStr

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Name must not be empty.")
        return v.strip()

    @field_validator("email")
    @classmethod
    def normalise_email(cls, v: str) -> str:
        return v.strip().lower()


class CustomerOutputDTO(BaseModel):
    """Immutable DTO for customer responses."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    email: str
    created_at: datetime

    @classmethod
    def from_entity(cls, customer: Customer) -> CustomerOutputDTO:
        return cls(
            id=customer.id,
            name=customer.name,
            email=customer.email,
            created_at=customer.created_at,
        )
