"""Customer repository interface.

Extends ``IRepository[Customer]`` with the email look-up used to keep
emails unique.  Misses are signalled by returning ``None``, never by
raising.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.customers.dtos import CreateCustomerDTO
    from modules.customers.models import Customer


class ICustomerRepository(IRepository["Customer"]):
    """Repository contract for the Customer aggregate."""

    @abstractmethod
    async def find_by_id(self, id: str) -> Optional[Customer]:
        """Retrieve a customer by id."""

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[Customer]:
        """Retrieve a customer by email address."""

    @abstractmethod
    async def create(self, data: CreateCustomerDTO) -> Customer:
        """Register a new customer and assign it an id."""
