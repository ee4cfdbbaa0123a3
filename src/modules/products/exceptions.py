"""Product domain errors.

Returned by the Service Layer inside a ``ServiceResult`` when business
rules are violated.
"""

from __future__ import annotations

from shared.domain.errors import DomainError


class ProductAlreadyExists(DomainError):
    """A product with the same name already exists."""

    code = "product_already_exists"


class ProductNotFound(DomainError):
    """The requested product does not exist."""

    code = "product_not_found"
