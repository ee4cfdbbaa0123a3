from decimal import Decimal

import pytest

from modules.customers.models import Customer
from modules.customers.repositories import InMemoryCustomerRepository
from modules.orders.repositories import InMemoryOrderRepository
from modules.orders.services import OrderService
from modules.products.models import Product
from modules.products.repositories import InMemoryProductRepository


@pytest.fixture()
def customer():
    return Customer(id="C1", name="Maria Silva", email="maria@example.com")


@pytest.fixture()
def customer_repo(customer):
    """Customer store seeded with ``C1``."""
    return InMemoryCustomerRepository([customer])


@pytest.fixture()
def product_repo():
    """Product store seeded with ``P1`` (10 @ 5.00) and ``P2`` (3 @ 12.50)."""
    return InMemoryProductRepository(
        [
            Product(id="P1", name="Widget", price=Decimal("5.00"), quantity=10),
            Product(id="P2", name="Gadget", price=Decimal("12.50"), quantity=3),
        ]
    )


@pytest.fixture()
def order_repo():
    return InMemoryOrderRepository()


@pytest.fixture()
def order_service(order_repo, customer_repo, product_repo):
    return OrderService(
        order_repository=order_repo,
        customer_repository=customer_repo,
        product_repository=product_repo,
    )
