from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...dataset import filter_posts_by_author_id, find_users_by_ids
from ...units import HeightUnit, WeightUnit, convert_height, convert_weight
from ..context import get_context_from_info

if TYPE_CHECKING:
    from ..types.post import Post
    from ..types.user import User


def resolve_user_height(user: User, unit: HeightUnit | None) -> float | None:
    return convert_height(user.height_cm, unit)


def resolve_user_weight(user: User, unit: WeightUnit | None) -> float | None:
    return convert_weight(user.weight_kg, unit)


def resolve_user_friends(user: User, info: strawberry.Info) -> list[User | None]:
    """Resolve friend ids in order, leaving null for ids with no user."""
    from ..types.user import User as UserType

    context = get_context_from_info(info)
    return [
        UserType.from_record(record) if record else None
        for record in find_users_by_ids(context.dataset, user.friend_ids)
    ]


def resolve_user_posts(user: User, info: strawberry.Info) -> list[Post | None]:
    from ..types.post import Post as PostType

    context = get_context_from_info(info)
    return [
        PostType.from_record(record)
        for record in filter_posts_by_author_id(context.dataset, user.user_id)
    ]
