"""Unit tests for Customer DTOs."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from modules.customers.dtos import CreateCustomerDTO, CustomerOutputDTO
from modules.customers.models import Customer

pytestmark = pytest.mark.unit


class TestCreateCustomerDTO:
    def test_email_is_normalised(self):
        dto = CreateCustomerDTO(name="  Maria  ", email="Maria@Example.COM")
        assert dto.name == "Maria"
        assert dto.email == "maria@example.com"

    def test_invalid_email_raises(self):
        with pytest.raises(ValidationError):
            CreateCustomerDTO(name="Maria", email="not-an-email")

    def test_blank_name_raises(self):
        with pytest.raises(ValidationError, match="Name must not be empty"):
            CreateCustomerDTO(name="   ", email="maria@example.com")


def test_output_from_entity():
    customer = Customer(id="C1", name="Maria", email="maria@example.com")

    dto = CustomerOutputDTO.from_entity(customer)

    assert dto.id == "C1"
    assert dto.email == "maria@example.com"
    assert dto.created_at == customer.created_at
