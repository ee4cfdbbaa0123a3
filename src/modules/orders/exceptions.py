"""Order domain errors.

Returned by the Service Layer inside a ``ServiceResult`` when business
rules are violated.  Each class carries a stable ``code`` (the error
kind) that callers can switch on.
"""

from __future__ import annotations

from shared.domain.errors import DomainError


class CustomerNotFound(DomainError):
    """The customer referenced by the order does not exist."""

    code = "customer_not_found"


class ProductsNotFound(DomainError):
    """At least one requested product id does not resolve."""

    code = "products_not_found"


class ProductNotFoundInRequest(DomainError):
    """A fetched product has no matching line in the request."""

    code = "product_not_found_in_request"


class InsufficientStock(DomainError):
    """Not enough stock to fulfil a line of the order."""

    code = "insufficient_stock"


class OrderNotFound(DomainError):
    """The requested order does not exist."""

    code = "order_not_found"
