"""Customer domain errors.

Returned by the Service Layer inside a ``ServiceResult`` when business
rules are violated.  The API layer translates them into responses.
"""

from __future__ import annotations

from shared.domain.errors import DomainError


class CustomerAlreadyExists(DomainError):
    """A customer with the same email already exists."""

    code = "customer_already_exists"


class CustomerNotFound(DomainError):
    """The requested customer does not exist."""

    code = "customer_not_found"
