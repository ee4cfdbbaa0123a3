"""Unit tests for ProductService.

Covers:
- create_product: happy path, duplicate name.
- get_product: happy path, not found.
"""

from __future__ import annotations

import asyncio
from decimal import Decimal

import pytest

from modules.products.dtos import CreateProductDTO
from modules.products.exceptions import ProductAlreadyExists, ProductNotFound
from modules.products.services import ProductService

pytestmark = pytest.mark.unit


@pytest.fixture()
def service(product_repo):
    return ProductService(repository=product_repo)


def test_create_product(service, product_repo):
    dto = CreateProductDTO(name="Lamp", price=Decimal("30.00"), quantity=2)

    result = asyncio.run(service.create_product(dto))

    assert result.ok
    assert result.value.name == "Lamp"
    assert len(product_repo.all()) == 3


def test_create_product_duplicate_name(service, product_repo):
    dto = CreateProductDTO(name="Widget", price=Decimal("1.00"))

    result = asyncio.run(service.create_product(dto))

    assert isinstance(result.error, ProductAlreadyExists)
    assert len(product_repo.all()) == 2


def test_get_product(service):
    assert asyncio.run(service.get_product("P2")).value.name == "Gadget"


def test_get_product_not_found(service):
    result = asyncio.run(service.get_product("P404"))

    assert isinstance(result.error, ProductNotFound)
