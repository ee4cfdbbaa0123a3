"""In-memory implementation of the Customer repository.

Backed by an ordered list held by the instance.  Used to compose
services in tests; it is never wired into a running deployment.
"""

from __future__ import annotations

from typing import List, Optional

import structlog

from modules.customers.dtos import CreateCustomerDTO
from modules.customers.models import Customer
from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class InMemoryCustomerRepository(ICustomerRepository):
    """Customer repository backed by a Python list."""

    def __init__(self, customers: Optional[List[Customer]] = None) -> None:
        self._customers: List[Customer] = list(customers or [])

    async def find_by_id(self, id: str) -> Optional[Customer]:
        return next((c for c in self._customers if c.id == id), None)

    async def find_by_email(self, email: str) -> Optional[Customer]:
        return next((c for c in self._customers if c.email == email), None)

    async def create(self, data: CreateCustomerDTO) -> Customer:
        customer = Customer(name=data.name, email=data.email)
        self._customers.append(customer)
        logger.info("customer.created", customer_id=customer.id)
        return customer

    def all(self) -> List[Customer]:
        return list(self._customers)
