"""
Post GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

from ...dataset import PostRecord
from ..scalars import DateTime

if TYPE_CHECKING:
    from .user import User


@strawberry.type(description="Post")
class Post:
    """Post type for GraphQL API."""

    id: strawberry.ID = strawberry.field(description="Identifier")
    title: str | None = strawberry.field(description="Title")
    content: str | None = strawberry.field(description="Content")
    created_at: DateTime | None = strawberry.field(description="Creation time")

    author_id: strawberry.Private[int]
    like_giver_ids: strawberry.Private[tuple[int, ...]]

    @classmethod
    def from_record(cls, record: PostRecord) -> "Post":
        return cls(
            id=strawberry.ID(str(record.id)),
            title=record.title,
            content=record.content,
            created_at=record.created_at,
            author_id=record.author_id,
            like_giver_ids=record.like_giver_ids,
        )

    @strawberry.field(description="Author")
    def author(self, info: strawberry.Info) -> Annotated["User", strawberry.lazy(".user")] | None:
        from ..resolvers.post import resolve_post_author

        return resolve_post_author(self, info)

    @strawberry.field(description="Users who liked this post")
    def like_givers(
        self, info: strawberry.Info
    ) -> list[Annotated["User", strawberry.lazy(".user")] | None] | None:  # noqa: E501
        from ..resolvers.post import resolve_post_like_givers

        return resolve_post_like_givers(self, info)
