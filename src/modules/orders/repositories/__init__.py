"""Order repositories package."""

from modules.orders.repositories.in_memory_repository import InMemoryOrderRepository
from modules.orders.repositories.interfaces import IOrderRepository

__all__ = ["IOrderRepository", "InMemoryOrderRepository"]
