"""
Seed data for the in-memory dataset.

The dataset is generated once per process and never mutated afterwards.
"""

from __future__ import annotations

from functools import lru_cache

from ..logging import get_logger
from .records import Dataset, PostRecord, UserRecord

logger = get_logger(__name__)


def generate_dataset() -> Dataset:
    """
    Build the fixed snapshot of users and posts.

    Heights are in centimetres, weights in kilograms. Mary (id 3) has no
    recorded weight.

    Returns:
        A new Dataset instance
    """
    users = (
        UserRecord(
            id=1,
            name="Fong",
            email="fong@test.com",
            password="123456",
            age=25,
            friend_ids=(2, 3),
            height=175.0,
            weight=70.0,
            birth_day="1997-07-12",
        ),
        UserRecord(
            id=2,
            name="Kevin",
            email="kevin@test.com",
            password="kevin123456",
            age=40,
            height=185.0,
            weight=90.0,
            friend_ids=(1,),
        ),
        UserRecord(
            id=3,
            name="Mary",
            email="Mary@test.com",
            password="mary123456",
            age=18,
            height=162.0,
            weight=None,
            friend_ids=(1,),
        ),
    )

    posts = (
        PostRecord(
            id=1,
            author_id=1,
            title="Hello World!!",
            content="This is my first post. Nice to see you guys.",
            created_at="2018-10-15",
            like_giver_ids=(1, 3),
        ),
        PostRecord(
            id=2,
            author_id=2,
            title="Good Night",
            content=(
                "Started earnest brother believe an exposed so. Me he believing "
                "daughters if forfeited at furniture. Age again and stuff downs "
                "spoke. Late hour new nay able fat each sell. Nor themselves age "
                "introduced frequently use unsatiable devonshire get. They why quit "
                "gay cold rose deal park. One same they four did ask busy. Reserved "
                "opinions fat him nay position. Breakfast as zealously incommode do "
                "agreeable furniture. One too nay led fanny allow plate. "
            ),
            created_at="2018-10-11",
            like_giver_ids=(2, 3),
        ),
        PostRecord(
            id=3,
            author_id=3,
            title="Love U",
            content=(
                "好濕。燕 草 如 碧 絲，秦 桑 低 綠 枝。當 君 懷 歸 日，是 妾 斷 腸 時 。"
                "春 風 不 相 識，\t何 事 入 羅 幃 ？"
            ),
            created_at="2018-10-10",
            like_giver_ids=(1, 2),
        ),
        PostRecord(
            id=4,
            author_id=1,
            title="Love U Too",
            content="This is my first post. Nice to see you guys.",
            created_at="2018-10-10",
            like_giver_ids=(1, 2, 3),
        ),
    )

    return Dataset(users=users, posts=posts)


@lru_cache(maxsize=1)
def get_dataset() -> Dataset:
    """Return the process-wide dataset, generating it on first use."""
    dataset = generate_dataset()
    logger.info(
        "Dataset generated",
        users=len(dataset.users),
        posts=len(dataset.posts),
    )
    return dataset
