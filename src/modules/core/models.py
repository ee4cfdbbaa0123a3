"""Base entity for the domain models.

Provides ``BaseEntity``: a UUIDv7 string id plus ``created_at`` /
``updated_at`` timestamps.  Entities are plain dataclasses; how they are
persisted is the concern of the repository implementation behind each
store interface.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

import uuid6


def new_id() -> str:
    """Return a new time-ordered identifier (UUIDv7)."""
    return str(uuid6.uuid7())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(kw_only=True)
class BaseEntity:
    """Abstract base with id and timestamp bookkeeping."""

    id: str = field(default_factory=new_id)
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

    def touch(self) -> None:
        """Refresh ``updated_at`` after a mutation."""
        self.updated_at = utcnow()
