"""In-memory implementation of the Product repository.

Backed by an ordered list held by the instance.  Used to compose
services in tests; it is never wired into a running deployment.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

import structlog

from modules.products.dtos import CreateProductDTO, ProductQuantityUpdate
from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class InMemoryProductRepository(IProductRepository):
    """Product repository backed by a Python list."""

    def __init__(self, products: Optional[List[Product]] = None) -> None:
        self._products: List[Product] = list(products or [])

    async def find_by_id(self, id: str) -> Optional[Product]:
        return next((p for p in self._products if p.id == id), None)

    async def find_by_name(self, name: str) -> Optional[Product]:
        return next((p for p in self._products if p.name == name), None)

    async def find_all_by_id(self, ids: Iterable[str]) -> List[Product]:
        wanted = set(ids)
        return [p for p in self._products if p.id in wanted]

    async def update_quantity(
        self, updates: Sequence[ProductQuantityUpdate]
    ) -> List[Product]:
        updated = []
        for update in updates:
            product = await self.find_by_id(update.id)
            if product is None:
                logger.warning("product.update_quantity_missing", product_id=update.id)
                continue
            product.quantity = update.quantity
            product.touch()
            updated.append(product)

        logger.info("product.quantities_updated", count=len(updated))
        return updated

    async def create(self, data: CreateProductDTO) -> Product:
        product = Product(name=data.name, price=data.price, quantity=data.quantity)
        self._products.append(product)
        logger.info("product.created", product_id=product.id, name=product.name)
        return product

    def all(self) -> List[Product]:
        return list(self._products)
