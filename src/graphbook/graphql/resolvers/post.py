from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...dataset import find_user_by_id, find_users_by_ids
from ..context import get_context_from_info

if TYPE_CHECKING:
    from ..types.post import Post
    from ..types.user import User


def resolve_post_author(post: Post, info: strawberry.Info) -> User | None:
    from ..types.user import User as UserType

    context = get_context_from_info(info)
    record = find_user_by_id(context.dataset, post.author_id)
    return UserType.from_record(record) if record else None


def resolve_post_like_givers(post: Post, info: strawberry.Info) -> list[User | None]:
    """Resolve like giver ids in order, leaving null for ids with no user."""
    from ..types.user import User as UserType

    context = get_context_from_info(info)
    return [
        UserType.from_record(record) if record else None
        for record in find_users_by_ids(context.dataset, post.like_giver_ids)
    ]
