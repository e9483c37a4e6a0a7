"""
Tests for dataset generation
"""

import dataclasses

import pytest

from graphbook.dataset import generate_dataset, get_dataset


def test_seed_users_in_insertion_order(dataset):
    assert [user.id for user in dataset.users] == [1, 2, 3]
    assert [user.name for user in dataset.users] == ["Fong", "Kevin", "Mary"]


def test_seed_posts_in_insertion_order(dataset):
    assert [post.id for post in dataset.posts] == [1, 2, 3, 4]
    assert [post.author_id for post in dataset.posts] == [1, 2, 3, 1]


def test_ids_are_unique(dataset):
    user_ids = [user.id for user in dataset.users]
    post_ids = [post.id for post in dataset.posts]
    assert len(set(user_ids)) == len(user_ids)
    assert len(set(post_ids)) == len(post_ids)


def test_foreign_keys_reference_existing_users(dataset):
    user_ids = {user.id for user in dataset.users}
    for user in dataset.users:
        assert set(user.friend_ids) <= user_ids
    for post in dataset.posts:
        assert post.author_id in user_ids
        assert set(post.like_giver_ids) <= user_ids


def test_canonical_units(dataset):
    fong, kevin, mary = dataset.users
    assert fong.height == 175.0
    assert fong.weight == 70.0
    assert kevin.height == 185.0
    assert mary.height == 162.0
    assert mary.weight is None


def test_records_are_immutable(dataset):
    with pytest.raises(dataclasses.FrozenInstanceError):
        dataset.users[0].name = "Someone else"  # type: ignore[misc]


def test_generate_dataset_returns_equal_snapshots():
    assert generate_dataset() == generate_dataset()


def test_get_dataset_is_generated_once():
    assert get_dataset() is get_dataset()
