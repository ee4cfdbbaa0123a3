"""Product repository interface.

Extends ``IRepository[Product]`` with the bulk look-up and bulk stock
update used by order creation, plus the name look-up that keeps product
names unique.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Iterable, List, Optional, Sequence

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.dtos import CreateProductDTO, ProductQuantityUpdate
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    async def find_by_id(self, id: str) -> Optional[Product]:
        """Retrieve a product by id."""

    @abstractmethod
    async def find_by_name(self, name: str) -> Optional[Product]:
        """Retrieve a product by its (unique) name."""

    @abstractmethod
    async def find_all_by_id(self, ids: Iterable[str]) -> List[Product]:
        """Retrieve every product whose id is in ``ids``.

        Unknown ids are omitted from the result, not reported; callers
        compare counts to detect them.
        """

    @abstractmethod
    async def update_quantity(
        self, updates: Sequence[ProductQuantityUpdate]
    ) -> List[Product]:
        """Set the stock quantity of each identified product.

        No rollback is guaranteed if an entry fails partway.
        """

    @abstractmethod
    async def create(self, data: CreateProductDTO) -> Product:
        """Register a new product and assign it an id."""
