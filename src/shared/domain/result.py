"""Result type returned by the Service Layer.

A ``ServiceResult`` holds either a success ``value`` or a classified
``DomainError``.  Failure paths are propagated by early return::

    result = await service.create_order(dto)
    if result.ok:
        order = result.value
    else:
        log.warning("rejected", code=result.error.code)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from shared.domain.errors import DomainError

T = TypeVar("T")


@dataclass(frozen=True)
class ServiceResult(Generic[T]):
    """Immutable success-or-error container."""

    value: Optional[T] = None
    error: Optional[DomainError] = None

    def __post_init__(self) -> None:
        if self.value is not None and self.error is not None:
            raise ValueError("ServiceResult cannot carry both a value and an error.")

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def code(self) -> Optional[str]:
        """Error kind, or ``None`` on success."""
        return self.error.code if self.error is not None else None

    def unwrap(self) -> T:
        """Return the value or raise the carried error."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]


def service_ok(value: T) -> ServiceResult[T]:
    return ServiceResult(value=value)


def service_err(error: DomainError) -> ServiceResult:
    return ServiceResult(error=error)
