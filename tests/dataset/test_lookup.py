"""
Tests for dataset lookup functions
"""

import pytest

from graphbook.dataset import (
    Dataset,
    UserRecord,
    filter_posts_by_author_id,
    find_user_by_id,
    find_user_by_name,
    find_users_by_ids,
)


class TestFindUserById:
    @pytest.mark.parametrize("user_id", [1, 2, 3])
    def test_returns_record_with_matching_id(self, dataset, user_id):
        user = find_user_by_id(dataset, user_id)
        assert user is not None
        assert user.id == user_id

    @pytest.mark.parametrize("user_id", [0, 4, -1, 999])
    def test_unknown_id_returns_none(self, dataset, user_id):
        assert find_user_by_id(dataset, user_id) is None

    def test_post_author_resolves_through_lookup(self, dataset):
        for post in dataset.posts:
            author = find_user_by_id(dataset, post.author_id)
            assert author is not None
            assert author.id == post.author_id


class TestFindUserByName:
    def test_finds_kevin(self, dataset):
        user = find_user_by_name(dataset, "Kevin")
        assert user is not None
        assert user.id == 2

    def test_unknown_name_returns_none(self, dataset):
        assert find_user_by_name(dataset, "Nonexistent") is None

    def test_match_is_case_sensitive(self, dataset):
        assert find_user_by_name(dataset, "kevin") is None

    def test_first_match_wins(self):
        dataset = Dataset(
            users=(
                UserRecord(id=10, email="a@test.com", name="Sam"),
                UserRecord(id=11, email="b@test.com", name="Sam"),
            ),
            posts=(),
        )
        user = find_user_by_name(dataset, "Sam")
        assert user is not None
        assert user.id == 10


class TestFilterPostsByAuthorId:
    def test_preserves_dataset_order(self, dataset):
        posts = filter_posts_by_author_id(dataset, 1)
        assert [post.id for post in posts] == [1, 4]

    def test_unknown_author_returns_empty_list(self, dataset):
        assert filter_posts_by_author_id(dataset, 42) == []


class TestFindUsersByIds:
    def test_keeps_order_and_none_slots(self, dataset):
        users = find_users_by_ids(dataset, [3, 99, 1])
        assert users[0] is not None and users[0].id == 3
        assert users[1] is None
        assert users[2] is not None and users[2].id == 1

    def test_empty_ids(self, dataset):
        assert find_users_by_ids(dataset, ()) == []
