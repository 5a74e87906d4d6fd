"""
User GraphQL type definitions
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

if TYPE_CHECKING:
    from ...store import UserRecord


@strawberry.type
class User:
    """User type for GraphQL API."""

    id: str | None
    name: str | None

    @classmethod
    def from_record(cls, record: UserRecord) -> User:
        return cls(id=record.id, name=record.name)
