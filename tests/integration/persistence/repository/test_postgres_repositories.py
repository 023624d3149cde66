"""Integration tests for the PostgreSQL repositories.

These tests assume PostgreSQL is running and migrated. Run them with
``pytest -m integration``.
"""

from uuid import uuid4

import pytest

from hive.domain.repository import (
    CommentRepository,
    PostRepository,
    ReportRepository,
    UserRepository,
)
from hive.domain.value import MembershipTier, PostSortField, Role, VoteType
from tests.conftest import make_comment, make_post, make_report, make_user
from tests.harness import create_env_fixture

pytestmark = pytest.mark.integration

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})


def _email(name: str) -> str:
    return f"{name}-{uuid4().hex[:8]}@example.com"


class TestPostgresUserRepository:
    """Integration tests for PostgresUserRepository."""

    @pytest.mark.asyncio
    async def test_save_applies_defaults(self, integration_env):
        # Arrange
        user_repo = await integration_env.get(UserRepository)
        email = _email("alice")

        # Act
        await user_repo.save(make_user(email))
        found = await user_repo.find_by_email(email)

        # Assert
        assert found is not None
        assert found.role is None
        assert found.membership == MembershipTier.NON_MEMBER
        assert found.badges == []

    @pytest.mark.asyncio
    async def test_upgrade_membership_adds_badge_once(self, integration_env):
        user_repo = await integration_env.get(UserRepository)
        email = _email("member")
        await user_repo.save(make_user(email))

        for _ in range(2):
            await user_repo.upgrade_membership(
                email, tier=MembershipTier.MEMBER, post_bonus=5, badge="Gold"
            )

        found = await user_repo.find_by_email(email)
        assert found.membership == MembershipTier.MEMBER
        assert found.badges == ["Gold"]
        assert found.post_limit == 15

    @pytest.mark.asyncio
    async def test_search_treats_wildcards_literally(self, integration_env):
        user_repo = await integration_env.get(UserRepository)
        plain = await user_repo.save(make_user(_email("plain")))

        results = await user_repo.search("%")

        assert plain.id not in [u.id for u in results]

    @pytest.mark.asyncio
    async def test_set_role(self, integration_env):
        user_repo = await integration_env.get(UserRepository)
        user = await user_repo.save(make_user(_email("promoted")))

        assert await user_repo.set_role(user.id, Role.ADMIN) == 1

        found = await user_repo.find_by_id(user.id)
        assert found.is_admin


class TestPostgresPostRepository:
    """Integration tests for PostgresPostRepository."""

    @pytest.mark.asyncio
    async def test_votes_and_popularity(self, integration_env):
        post_repo = await integration_env.get(PostRepository)
        email = _email("author")
        post = await post_repo.save(make_post(email))

        await post_repo.increment_vote(post.id, VoteType.UP)
        await post_repo.increment_vote(post.id, VoteType.DOWN)
        await post_repo.increment_vote(post.id, VoteType.UP)

        found = await post_repo.find_by_id(post.id)
        assert (found.up_vote, found.down_vote) == (2, 1)
        ranked = await post_repo.find_all(sort=PostSortField.POPULARITY, limit=1000)
        assert post.id in [p.id for p in ranked]
        assert await post_repo.count_by_author(email) == 1

    @pytest.mark.asyncio
    async def test_delete(self, integration_env):
        post_repo = await integration_env.get(PostRepository)
        post = await post_repo.save(make_post(_email("author")))

        assert await post_repo.delete(post.id) is True
        assert await post_repo.delete(post.id) is False


class TestPostgresReportRepository:
    """Integration tests for PostgresReportRepository."""

    @pytest.mark.asyncio
    async def test_second_report_for_comment_is_not_stored(self, integration_env):
        comment_repo = await integration_env.get(CommentRepository)
        report_repo = await integration_env.get(ReportRepository)
        comment = await comment_repo.save(make_comment())

        first = await report_repo.save(make_report(comment))
        second = await report_repo.save(make_report(comment))

        assert first is not None
        assert second is None
        assert (await report_repo.find_by_comment(comment.id)).id == first.id
