"""
Immutable record types held by the dataset
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserRecord:
    """A user as stored in the dataset.

    Height is kept in centimetres and weight in kilograms.
    """

    id: int
    email: str
    name: str | None = None
    password: str | None = None
    age: int | None = None
    height: float | None = None
    weight: float | None = None
    friend_ids: tuple[int, ...] = ()
    birth_day: str | None = None


@dataclass(frozen=True)
class PostRecord:
    """A post as stored in the dataset."""

    id: int
    author_id: int
    title: str
    content: str
    created_at: str
    like_giver_ids: tuple[int, ...] = ()


@dataclass(frozen=True)
class Dataset:
    """Snapshot of every user and post, in insertion order."""

    users: tuple[UserRecord, ...]
    posts: tuple[PostRecord, ...]
