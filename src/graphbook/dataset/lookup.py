"""
Lookup functions over the dataset

Lookups never raise for a missing entity; absence is returned as None
(or an empty list for collections).
"""

from collections.abc import Iterable

from .records import Dataset, PostRecord, UserRecord


def find_user_by_id(dataset: Dataset, user_id: int) -> UserRecord | None:
    """Return the user with the given id, or None."""
    for user in dataset.users:
        if user.id == user_id:
            return user
    return None


def find_user_by_name(dataset: Dataset, name: str) -> UserRecord | None:
    """Return the first user whose name equals `name`, or None.

    Names are not unique; when several users share a name the earliest one
    in the dataset wins.
    """
    for user in dataset.users:
        if user.name == name:
            return user
    return None


def filter_posts_by_author_id(dataset: Dataset, author_id: int) -> list[PostRecord]:
    """Return every post written by `author_id`, in dataset order."""
    return [post for post in dataset.posts if post.author_id == author_id]


def find_users_by_ids(dataset: Dataset, user_ids: Iterable[int]) -> list[UserRecord | None]:
    """Resolve each id to a user, keeping order and a None slot per unknown id."""
    return [find_user_by_id(dataset, user_id) for user_id in user_ids]
