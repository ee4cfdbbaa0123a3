"""Unit tests for InMemoryOrderRepository."""

from __future__ import annotations

import asyncio
from decimal import Decimal

import pytest

from modules.customers.models import Customer
from modules.orders.repositories import IOrderRepository, InMemoryOrderRepository

pytestmark = pytest.mark.unit


@pytest.fixture()
def repo():
    return InMemoryOrderRepository()


@pytest.fixture()
def customer():
    return Customer(id="C1", name="Maria", email="maria@example.com")


def test_implements_interface(repo):
    assert isinstance(repo, IOrderRepository)


def test_create_builds_items(repo, customer):
    order = asyncio.run(
        repo.create(
            {
                "customer": customer,
                "products": [
                    {"product_id": "P1", "quantity": 2, "price": Decimal("5.00")},
                ],
            }
        )
    )

    assert order.customer is customer
    assert order.items[0].product_id == "P1"
    assert order.items[0].quantity == 2
    assert order.items[0].price == Decimal("5.00")
    assert repo.all() == [order]


def test_find_by_id(repo, customer):
    order = asyncio.run(repo.create({"customer": customer, "products": []}))

    assert asyncio.run(repo.find_by_id(order.id)) is order
    assert asyncio.run(repo.find_by_id("missing")) is None
