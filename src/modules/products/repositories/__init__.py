"""Product repositories package."""

from modules.products.repositories.in_memory_repository import (
    InMemoryProductRepository,
)
from modules.products.repositories.interfaces import IProductRepository

__all__ = ["IProductRepository", "InMemoryProductRepository"]
