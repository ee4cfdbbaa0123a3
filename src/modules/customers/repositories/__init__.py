"""Customer repositories package."""

from modules.customers.repositories.in_memory_repository import (
    InMemoryCustomerRepository,
)
from modules.customers.repositories.interfaces import ICustomerRepository

__all__ = ["ICustomerRepository", "InMemoryCustomerRepository"]
