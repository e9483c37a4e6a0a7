"""
In-memory dataset of users and posts
"""

from .lookup import (
    filter_posts_by_author_id,
    find_user_by_id,
    find_user_by_name,
    find_users_by_ids,
)
from .records import Dataset, PostRecord, UserRecord
from .seed_data import generate_dataset, get_dataset

__all__ = [
    "Dataset",
    "PostRecord",
    "UserRecord",
    "filter_posts_by_author_id",
    "find_user_by_id",
    "find_user_by_name",
    "find_users_by_ids",
    "generate_dataset",
    "get_dataset",
]
