"""
Root GraphQL query definitions
"""

import strawberry

from ..types.user import User


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field(description="Get user by id")
    def user(self, info: strawberry.Info, id: str | None = None) -> User | None:
        from ..resolvers.user import resolve_user_by_id

        return resolve_user_by_id(info, id)
