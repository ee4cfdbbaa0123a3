"""Product service layer (Use Cases).

Orchestrates business logic for the Product aggregate, delegating
persistence to the injected ``IProductRepository``.

Business rules enforced here:
- Product names must be unique.
- Price and stock must be non-negative (validated by the DTO).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from modules.products.exceptions import ProductAlreadyExists, ProductNotFound
from shared.domain.result import ServiceResult, service_err, service_ok

if TYPE_CHECKING:
    from modules.products.dtos import CreateProductDTO
    from modules.products.models import Product
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    async def create_product(self, dto: CreateProductDTO) -> ServiceResult[Product]:
        """Create a new product after enforcing name uniqueness.

        Fails with ``ProductAlreadyExists`` if the name is taken.
        """
        log = logger.bind(name=dto.name)

        if await self._repo.find_by_name(dto.name):
            log.warning("product.duplicate_name")
            return service_err(
                ProductAlreadyExists(f"Product '{dto.name}' already registered.")
            )

        product = await self._repo.create(dto)
        log.info("product.registered", product_id=product.id)
        return service_ok(product)

    async def get_product(self, id: str) -> ServiceResult[Product]:
        """Retrieve a single product by id.

        Fails with ``ProductNotFound`` if the product does not exist.
        """
        product = await self._repo.find_by_id(id)
        if not product:
            return service_err(ProductNotFound(f"Product {id} not found."))
        return service_ok(product)
