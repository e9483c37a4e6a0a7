"""
Root GraphQL query definitions
"""

import strawberry

from ..types.user import User


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field(description="Hello World, for testing")
    def hello(self) -> str | None:
        from ..resolvers.query import resolve_hello

        return resolve_hello()

    @strawberry.field(description="Current user")
    def me(self, info: strawberry.Info) -> User | None:
        """Get the user bound to the current request."""
        from ..resolvers.query import resolve_current_user

        return resolve_current_user(info)

    @strawberry.field(description="All users")
    def users(self, info: strawberry.Info) -> list[User | None] | None:
        from ..resolvers.query import resolve_users

        return resolve_users(info)

    @strawberry.field(description="A specific user, looked up by name")
    def user(self, info: strawberry.Info, name: str) -> User | None:
        """Get the first user with the given name."""
        from ..resolvers.query import resolve_user_by_name

        return resolve_user_by_name(info, name)
