"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that all
domain-specific store interfaces extend.  Service-layer code depends on
this abstraction, never on a storage technology directly.

All methods are coroutines: the concrete backing may be a database
driver, a remote service or an in-process list.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the domain entity managed by the
    repository (e.g. ``Customer``, ``Product``).
    """

    @abstractmethod
    async def find_by_id(self, id: str) -> Optional[T]:
        """Retrieve an entity by id; ``None`` when it does not exist."""

    @abstractmethod
    async def create(self, data: Any) -> T:
        """Persist a new entity and return it with its assigned id."""
