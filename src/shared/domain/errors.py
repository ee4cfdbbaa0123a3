"""Classified domain errors shared by every bounded context.

Each error carries a stable machine-readable ``code`` (the error kind)
and a human-readable ``message``.  Services return them inside a
``ServiceResult`` instead of raising; callers that prefer exceptions
call ``ServiceResult.unwrap()``.
"""

from __future__ import annotations


class DomainError(Exception):
    """Base class for expected business-rule rejections."""

    code: str = "domain_error"

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"
