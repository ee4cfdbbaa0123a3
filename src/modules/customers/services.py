"""Customer service layer (Use Cases).

Orchestrates business logic for the Customer aggregate, delegating
persistence to the injected ``ICustomerRepository``.

Business rules enforced here:
- Email must be unique across customers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from modules.customers.exceptions import CustomerAlreadyExists, CustomerNotFound
from shared.domain.result import ServiceResult, service_err, service_ok

if TYPE_CHECKING:
    from modules.customers.dtos import CreateCustomerDTO
    from modules.customers.models import Customer
    from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class CustomerService:
    """Application service for Customer use-cases.

    Receives an ``ICustomerRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: ICustomerRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    async def create_customer(
        self, dto: CreateCustomerDTO
    ) -> ServiceResult[Customer]:
        """Register a new customer after enforcing email uniqueness.

        Fails with ``CustomerAlreadyExists`` if the email is taken.
        """
        log = logger.bind(email=dto.email)

        if await self._repo.find_by_email(dto.email):
            log.warning("customer.duplicate_email")
            return service_err(CustomerAlreadyExists("This e-mail is already in use."))

        customer = await self._repo.create(dto)
        log.info("customer.registered", customer_id=customer.id)
        return service_ok(customer)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    async def get_customer(self, id: str) -> ServiceResult[Customer]:
        """Retrieve a single customer by id.

        Fails with ``CustomerNotFound`` if the customer does not exist.
        """
        customer = await self._repo.find_by_id(id)
        if not customer:
            return service_err(CustomerNotFound(f"Customer {id} not found."))
        return service_ok(customer)
