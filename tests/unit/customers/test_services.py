"""Unit tests for CustomerService.

Covers:
- create_customer: happy path, duplicate email.
- get_customer: happy path, not found.
"""

from __future__ import annotations

import asyncio

import pytest

from modules.customers.dtos import CreateCustomerDTO
from modules.customers.exceptions import CustomerAlreadyExists, CustomerNotFound
from modules.customers.services import CustomerService

pytestmark = pytest.mark.unit


@pytest.fixture()
def service(customer_repo):
    return CustomerService(repository=customer_repo)


def test_create_customer(service, customer_repo):
    dto = CreateCustomerDTO(name="Joao", email="joao@example.com")

    result = asyncio.run(service.create_customer(dto))

    assert result.ok
    assert result.value.email == "joao@example.com"
    assert len(customer_repo.all()) == 2


def test_create_customer_duplicate_email(service, customer_repo):
    dto = CreateCustomerDTO(name="Other", email="MARIA@example.com")

    result = asyncio.run(service.create_customer(dto))

    assert isinstance(result.error, CustomerAlreadyExists)
    assert result.error.message == "This e-mail is already in use."
    assert len(customer_repo.all()) == 1


def test_get_customer(service, customer):
    assert asyncio.run(service.get_customer("C1")).value is customer


def test_get_customer_not_found(service):
    result = asyncio.run(service.get_customer("C404"))

    assert isinstance(result.error, CustomerNotFound)
    assert result.code == "customer_not_found"
