"""Unit tests for the membership quota engine."""

import pytest

from hive.domain.error import QuotaExceededError
from hive.domain.repository import UserRepository
from hive.domain.service import QuotaService
from hive.domain.value import MembershipTier
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestEnsureCanPost:
    """Tests for the tier ceiling check."""

    @pytest.mark.asyncio
    async def test_non_member_ceiling_is_strictly_greater_than_five(self, unit_env):
        quota = await unit_env.get(QuotaService)
        user = make_user(membership=MembershipTier.NON_MEMBER)

        quota.ensure_can_post(user, existing_posts=5)

        with pytest.raises(QuotaExceededError) as exc_info:
            quota.ensure_can_post(user, existing_posts=6)

        assert exc_info.value.message == "Post limit exceeded"

    @pytest.mark.asyncio
    async def test_member_ceiling_is_strictly_greater_than_ten(self, unit_env):
        quota = await unit_env.get(QuotaService)
        user = make_user(membership=MembershipTier.MEMBER)

        quota.ensure_can_post(user, existing_posts=10)

        with pytest.raises(QuotaExceededError):
            quota.ensure_can_post(user, existing_posts=11)

    @pytest.mark.asyncio
    async def test_ceiling_for_each_tier(self, unit_env):
        quota = await unit_env.get(QuotaService)

        assert quota.ceiling_for(MembershipTier.NON_MEMBER) == 5
        assert quota.ceiling_for(MembershipTier.MEMBER) == 10


class TestPostLimitCounter:
    """Tests for the advisory post_limit counter."""

    @pytest.mark.asyncio
    async def test_create_and_delete_move_the_counter(self, unit_env):
        quota = await unit_env.get(QuotaService)
        user_repo = await unit_env.get(UserRepository)
        await user_repo.save(make_user("alice@example.com"))

        await quota.record_post_created("alice@example.com")
        await quota.record_post_created("alice@example.com")
        await quota.record_post_deleted("alice@example.com")

        user = await user_repo.find_by_email("alice@example.com")
        assert user.post_limit == 4


class TestApplyMembership:
    """Tests for the membership upgrade."""

    @pytest.mark.asyncio
    async def test_upgrade_sets_tier_bonus_and_badge(self, unit_env):
        quota = await unit_env.get(QuotaService)
        user_repo = await unit_env.get(UserRepository)
        await user_repo.save(make_user("alice@example.com"))

        await quota.apply_membership("alice@example.com")

        user = await user_repo.find_by_email("alice@example.com")
        assert user.membership == MembershipTier.MEMBER
        assert user.post_limit == 10
        assert user.badges == ["Gold"]

    @pytest.mark.asyncio
    async def test_badge_is_added_once(self, unit_env):
        """Every purchase grants the bonus, the badge never repeats."""
        quota = await unit_env.get(QuotaService)
        user_repo = await unit_env.get(UserRepository)
        await user_repo.save(make_user("alice@example.com"))

        await quota.apply_membership("alice@example.com")
        await quota.apply_membership("alice@example.com")

        user = await user_repo.find_by_email("alice@example.com")
        assert user.badges == ["Gold"]
        assert user.post_limit == 15
