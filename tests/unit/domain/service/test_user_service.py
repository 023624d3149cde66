"""Unit tests for the user domain service."""

import pytest

from hive.domain.error import NotFoundError
from hive.domain.repository import UserRepository
from hive.domain.service import UserService
from hive.domain.value import Role
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestUsernameExists:
    """Tests for the username availability check."""

    @pytest.mark.asyncio
    async def test_taken_and_free_usernames(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        await user_repo.save(make_user("alice@example.com", username="alice"))
        service = await unit_env.get(UserService)

        assert await service.username_exists("alice") is True
        assert await service.username_exists("bob") is False


class TestGetRole:
    """Tests for role lookup."""

    @pytest.mark.asyncio
    async def test_admin_role(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        await user_repo.save(make_user("admin@example.com", role=Role.ADMIN))
        service = await unit_env.get(UserService)

        assert await service.get_role("admin@example.com") == Role.ADMIN

    @pytest.mark.asyncio
    async def test_unknown_email_is_not_found(self, unit_env):
        service = await unit_env.get(UserService)

        with pytest.raises(NotFoundError):
            await service.get_role("nobody@example.com")
