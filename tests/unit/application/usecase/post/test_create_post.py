"""Unit tests for CreatePostUseCase."""

import pytest

from hive.application.usecase.post.create_post import (
    CreatePostRequest,
    CreatePostUseCase,
)
from hive.domain.error import ForbiddenError, QuotaExceededError
from hive.domain.repository import PostRepository, UserRepository
from hive.domain.value import MembershipTier
from tests.conftest import make_post, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


def _request(acting_email: str = "alice@example.com", **overrides) -> CreatePostRequest:
    fields = {
        "acting_email": acting_email,
        "author_email": acting_email,
        "author_name": "Alice",
        "title": "Hello",
        "description": "First post",
        "tag": "intro",
    }
    fields.update(overrides)
    return CreatePostRequest(**fields)


async def _seed_posts(post_repo: PostRepository, email: str, count: int) -> None:
    for _ in range(count):
        await post_repo.save(make_post(email))


class TestCreatePost:
    """Tests for creating posts under the tier quota."""

    @pytest.mark.asyncio
    async def test_create_post_success(self, unit_env):
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)
        await user_repo.save(make_user("alice@example.com"))
        use_case = await unit_env.get(CreatePostUseCase)

        # Act
        result = await use_case.execute(_request())

        # Assert
        assert result.title == "Hello"
        assert result.up_vote == 0
        assert result.down_vote == 0
        assert await post_repo.count_by_author("alice@example.com") == 1

    @pytest.mark.asyncio
    async def test_create_post_decrements_post_limit(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        await user_repo.save(make_user("alice@example.com"))
        use_case = await unit_env.get(CreatePostUseCase)

        await use_case.execute(_request())

        user = await user_repo.find_by_email("alice@example.com")
        assert user.post_limit == 4

    @pytest.mark.asyncio
    async def test_author_mismatch_is_forbidden(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)
        await user_repo.save(make_user("alice@example.com"))
        use_case = await unit_env.get(CreatePostUseCase)

        with pytest.raises(ForbiddenError) as exc_info:
            await use_case.execute(_request(author_email="bob@example.com"))

        assert exc_info.value.message == "Forbidden: email mismatch"
        assert await post_repo.count() == 0

    @pytest.mark.asyncio
    async def test_unknown_author_is_forbidden(self, unit_env):
        use_case = await unit_env.get(CreatePostUseCase)

        with pytest.raises(ForbiddenError) as exc_info:
            await use_case.execute(_request())

        assert exc_info.value.message == "Forbidden: user not found"

    @pytest.mark.asyncio
    async def test_non_member_with_six_posts_is_rejected(self, unit_env):
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)
        await user_repo.save(make_user("alice@example.com"))
        await _seed_posts(post_repo, "alice@example.com", 6)
        use_case = await unit_env.get(CreatePostUseCase)

        # Act / Assert
        with pytest.raises(QuotaExceededError):
            await use_case.execute(_request())
        assert await post_repo.count_by_author("alice@example.com") == 6

    @pytest.mark.asyncio
    async def test_non_member_with_five_posts_may_post_once_more(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)
        await user_repo.save(make_user("alice@example.com"))
        await _seed_posts(post_repo, "alice@example.com", 5)
        use_case = await unit_env.get(CreatePostUseCase)

        await use_case.execute(_request())

        assert await post_repo.count_by_author("alice@example.com") == 6

    @pytest.mark.asyncio
    async def test_member_ceiling_is_higher(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)
        await user_repo.save(
            make_user("alice@example.com", membership=MembershipTier.MEMBER)
        )
        await _seed_posts(post_repo, "alice@example.com", 10)
        use_case = await unit_env.get(CreatePostUseCase)

        await use_case.execute(_request())

        with pytest.raises(QuotaExceededError):
            await use_case.execute(_request())
