"""Order service layer (Use Cases).

Orchestrates order creation across the customer, product and order
stores.  Every check runs before the first write, so a rejected request
leaves all stores untouched.

Gates, in order:
1. The customer must exist.
2. Every requested product must exist.
3. Every requested quantity must be covered by the product's stock.

Known limitation: stock is decremented by ``update_quantity`` before
``orders.create`` runs, and nothing compensates if the second call fails.
Two concurrent requests may also both read the same stock level before
either writes it.  Both are left to the store implementation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List

import structlog

from modules.orders.exceptions import (
    CustomerNotFound,
    InsufficientStock,
    OrderNotFound,
    ProductNotFoundInRequest,
    ProductsNotFound,
)
from modules.products.dtos import ProductQuantityUpdate
from shared.domain.result import ServiceResult, service_err, service_ok

if TYPE_CHECKING:
    from modules.customers.repositories.interfaces import ICustomerRepository
    from modules.orders.dtos import CreateOrderDTO
    from modules.orders.models import Order
    from modules.orders.repositories.interfaces import IOrderRepository
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class OrderService:
    """Application service for Order use-cases.

    Receives repositories via constructor injection (DIP).
    """

    def __init__(
        self,
        order_repository: IOrderRepository,
        customer_repository: ICustomerRepository,
        product_repository: IProductRepository,
    ) -> None:
        self._order_repo = order_repository
        self._customer_repo = customer_repository
        self._product_repo = product_repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    async def create_order(self, dto: CreateOrderDTO) -> ServiceResult[Order]:
        """Create a new order and decrement stock for every line.

        Steps:
        1. Validate the customer exists.
        2. Bulk-fetch the requested products; the fetched count must
           equal the requested count.
        3. For each fetched product: match its requested line, snapshot
           the current price, check stock, compute the new quantity.
        4. Submit every stock update in one call.
        5. Persist the order.

        Failure kinds: ``CustomerNotFound``, ``ProductsNotFound``,
        ``ProductNotFoundInRequest``, ``InsufficientStock``.
        """
        log = logger.bind(customer_id=dto.customer_id)
        log.info("order.creation_started", product_count=len(dto.products))

        # 1. Validate customer
        customer = await self._customer_repo.find_by_id(dto.customer_id)
        if not customer:
            log.warning("order.customer_not_found")
            return service_err(CustomerNotFound("Customer not found"))

        # 2. Resolve products
        product_ids = {item.id for item in dto.products}
        found_products = await self._product_repo.find_all_by_id(product_ids)

        if len(found_products) != len(dto.products):
            log.warning(
                "order.products_not_found",
                requested=len(dto.products),
                found=len(found_products),
            )
            return service_err(ProductsNotFound("Some ordered product does not exist"))

        # 3. Build lines and stock updates; nothing is written yet
        ordered_products: List[Dict[str, Any]] = []
        stock_updates: List[ProductQuantityUpdate] = []

        for product in found_products:
            requested = next(
                (item for item in dto.products if item.id == product.id), None
            )
            if requested is None:
                log.error("order.product_not_in_request", product_id=product.id)
                return service_err(ProductNotFoundInRequest("Product not found."))

            ordered_products.append(
                {
                    "product_id": requested.id,
                    "quantity": requested.quantity,
                    "price": product.price,
                }
            )

            if product.quantity < requested.quantity:
                log.warning(
                    "order.insufficient_stock",
                    product_id=product.id,
                    requested=requested.quantity,
                    available=product.quantity,
                )
                return service_err(
                    InsufficientStock(
                        f"Product {product.name} has insufficient quantity. "
                        f"The available amount is: {product.quantity}"
                    )
                )

            stock_updates.append(
                ProductQuantityUpdate(
                    id=product.id,
                    quantity=product.quantity - requested.quantity,
                )
            )

        # 4. Decrement stock
        await self._product_repo.update_quantity(stock_updates)

        # 5. Persist order
        order = await self._order_repo.create(
            {"customer": customer, "products": ordered_products}
        )

        log.info(
            "order.created",
            order_id=order.id,
            total_amount=str(order.total_amount),
        )
        return service_ok(order)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    async def get_order(self, order_id: str) -> ServiceResult[Order]:
        """Retrieve a single order by id.

        Fails with ``OrderNotFound`` if the order does not exist.
        """
        order = await self._order_repo.find_by_id(order_id)
        if not order:
            return service_err(OrderNotFound(f"Order {order_id} not found."))
        return service_ok(order)
