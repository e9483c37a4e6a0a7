from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...dataset import find_user_by_id, find_user_by_name
from ..context import get_context_from_info

if TYPE_CHECKING:
    from ..types.user import User

GREETING = "Hello world!"


def resolve_hello() -> str:
    return GREETING


def resolve_current_user(info: strawberry.Info) -> User | None:
    """Resolve the user bound to the request's viewer id."""
    from ..types.user import User

    context = get_context_from_info(info)
    record = find_user_by_id(context.dataset, context.viewer_id)
    return User.from_record(record) if record else None


def resolve_users(info: strawberry.Info) -> list[User]:
    from ..types.user import User

    context = get_context_from_info(info)
    return [User.from_record(record) for record in context.dataset.users]


def resolve_user_by_name(info: strawberry.Info, name: str) -> User | None:
    from ..types.user import User

    context = get_context_from_info(info)
    record = find_user_by_name(context.dataset, name)
    return User.from_record(record) if record else None
