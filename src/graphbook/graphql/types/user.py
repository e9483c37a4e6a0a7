"""
User GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

from ...dataset import UserRecord
from ..scalars import DateTime, EmailAddress
from ...units import HeightUnit, WeightUnit

if TYPE_CHECKING:
    from .post import Post


@strawberry.type(description="User")
class User:
    """User type for GraphQL API."""

    id: strawberry.ID = strawberry.field(description="Identifier")
    email: EmailAddress = strawberry.field(description="Account email")
    name: str | None = strawberry.field(description="Name")
    age: int | None = strawberry.field(description="Age")
    birth_day: DateTime | None = strawberry.field(description="Birthday (ISO format)")

    # Stored values; exposed only through the resolvers below
    user_id: strawberry.Private[int]
    height_cm: strawberry.Private[float | None]
    weight_kg: strawberry.Private[float | None]
    friend_ids: strawberry.Private[tuple[int, ...]]

    @classmethod
    def from_record(cls, record: UserRecord) -> "User":
        return cls(
            id=strawberry.ID(str(record.id)),
            email=record.email,
            name=record.name,
            age=record.age,
            birth_day=record.birth_day,
            user_id=record.id,
            height_cm=record.height,
            weight_kg=record.weight,
            friend_ids=record.friend_ids,
        )

    @strawberry.field(description="Height")
    def height(self, unit: HeightUnit | None = HeightUnit.CENTIMETRE) -> float | None:
        from ..resolvers.user import resolve_user_height

        return resolve_user_height(self, unit)

    @strawberry.field(description="Weight", deprecation_reason="It's secret")
    def weight(self, unit: WeightUnit | None = WeightUnit.KILOGRAM) -> float | None:
        from ..resolvers.user import resolve_user_weight

        return resolve_user_weight(self, unit)

    @strawberry.field(description="Friends")
    def friends(self, info: strawberry.Info) -> "list[User | None] | None":
        """Get this user's friends; unknown friend ids resolve to null."""
        from ..resolvers.user import resolve_user_friends

        return resolve_user_friends(self, info)

    @strawberry.field(description="Posts")
    def posts(
        self, info: strawberry.Info
    ) -> list[Annotated["Post", strawberry.lazy(".post")] | None] | None:  # noqa: E501
        """Get posts written by this user."""
        from ..resolvers.user import resolve_user_posts

        return resolve_user_posts(self, info)
