"""API tests for post, vote and comment routes."""

from datetime import datetime, timedelta, timezone

import pytest

from hive.domain.repository import PostRepository, UserRepository
from tests.conftest import make_post, make_user
from tests.harness import create_api_fixture

# API test fixture
api_env = create_api_fixture()

BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)

POST_BODY = {
    "author_email": "alice@example.com",
    "author_name": "Alice",
    "title": "Hello",
    "description": "First post",
    "tag": "intro",
}


async def _get(api_env, dependency):
    async with api_env.container() as request_container:
        return await request_container.get(dependency)


class TestCreatePostRoute:
    """Tests for POST /posts."""

    @pytest.mark.asyncio
    async def test_without_cookie_is_unauthorized(self, api_env):
        response = await api_env.client.post("/posts", json=POST_BODY)

        assert response.status_code == 401
        assert response.json() == {"detail": "Unauthorized access"}

    @pytest.mark.asyncio
    async def test_without_cookie_is_unauthorized_before_body_validation(
        self, api_env
    ):
        response = await api_env.client.post("/posts", json={})

        assert response.status_code == 401
        assert response.json() == {"detail": "Unauthorized access"}

    @pytest.mark.asyncio
    async def test_bad_token_is_forbidden(self, api_env):
        api_env.client.cookies.set("jwtToken", "garbage")

        response = await api_env.client.post("/posts", json=POST_BODY)

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_author_mismatch_is_forbidden(self, api_env):
        user_repo = await _get(api_env, UserRepository)
        await user_repo.save(make_user("bob@example.com"))
        await api_env.login("bob@example.com")

        response = await api_env.client.post("/posts", json=POST_BODY)

        assert response.status_code == 403
        assert response.json()["detail"] == "Forbidden: email mismatch"

    @pytest.mark.asyncio
    async def test_create_then_fetch(self, api_env):
        # Arrange
        user_repo = await _get(api_env, UserRepository)
        await user_repo.save(make_user("alice@example.com"))
        await api_env.login("alice@example.com")

        # Act
        created = await api_env.client.post("/posts", json=POST_BODY)
        fetched = await api_env.client.get(f"/post/{created.json()['post_id']}")

        # Assert
        assert created.status_code == 201
        assert fetched.status_code == 200
        assert fetched.json()["title"] == "Hello"
        assert fetched.json()["up_vote"] == 0

    @pytest.mark.asyncio
    async def test_over_quota_is_forbidden(self, api_env):
        user_repo = await _get(api_env, UserRepository)
        post_repo = await _get(api_env, PostRepository)
        await user_repo.save(make_user("alice@example.com"))
        for _ in range(6):
            await post_repo.save(make_post("alice@example.com"))
        await api_env.login("alice@example.com")

        response = await api_env.client.post("/posts", json=POST_BODY)

        assert response.status_code == 403
        assert response.json()["detail"] == "Post limit exceeded"


class TestDeletePostRoute:
    """Tests for DELETE /posts/{post_id}."""

    @pytest.mark.asyncio
    async def test_owner_deletes(self, api_env):
        user_repo = await _get(api_env, UserRepository)
        post_repo = await _get(api_env, PostRepository)
        await user_repo.save(make_user("alice@example.com"))
        post = await post_repo.save(make_post("alice@example.com"))
        await api_env.login("alice@example.com")

        response = await api_env.client.delete(f"/posts/{post.id}")

        assert response.status_code == 200
        assert response.json()["deleted_count"] == 1

    @pytest.mark.asyncio
    async def test_non_owner_is_forbidden(self, api_env):
        post_repo = await _get(api_env, PostRepository)
        post = await post_repo.save(make_post("alice@example.com"))
        await api_env.login("bob@example.com")

        response = await api_env.client.delete(f"/posts/{post.id}")

        assert response.status_code == 403
        assert await post_repo.find_by_id(post.id) is not None


class TestAuthorPostsRoute:
    """Tests for the owner-only author listing."""

    @pytest.mark.asyncio
    async def test_other_users_posts_are_forbidden(self, api_env):
        await api_env.login("bob@example.com")

        response = await api_env.client.get("/posts/user/alice@example.com")

        assert response.status_code == 403


class TestPublicPostRoutes:
    """Tests for the anonymous listing routes."""

    @pytest.mark.asyncio
    async def test_listing_and_count(self, api_env):
        post_repo = await _get(api_env, PostRepository)
        for i in range(7):
            await post_repo.save(make_post(title=f"Post {i}"))

        listed = await api_env.client.get("/posts", params={"sortBy": "date"})
        count = await api_env.client.get("/posts/count")

        assert listed.status_code == 200
        assert len(listed.json()) == 5
        assert count.json() == {"count": 7}

    @pytest.mark.asyncio
    async def test_unknown_sort_field_falls_back_to_newest_first(self, api_env):
        post_repo = await _get(api_env, PostRepository)
        for i in range(3):
            await post_repo.save(
                make_post(title=f"Post {i}", created_at=BASE_TIME + timedelta(hours=i))
            )

        response = await api_env.client.get(
            "/posts", params={"sortBy": "newest", "current": 0, "limit": 5}
        )

        assert response.status_code == 200
        assert [p["title"] for p in response.json()] == ["Post 2", "Post 1", "Post 0"]

    @pytest.mark.asyncio
    async def test_unknown_order_sorts_descending(self, api_env):
        post_repo = await _get(api_env, PostRepository)
        for i in range(3):
            await post_repo.save(
                make_post(title=f"Post {i}", created_at=BASE_TIME + timedelta(hours=i))
            )

        response = await api_env.client.get(
            "/posts", params={"sortBy": "date", "order": "latest"}
        )

        assert response.status_code == 200
        assert [p["title"] for p in response.json()] == ["Post 2", "Post 1", "Post 0"]

    @pytest.mark.asyncio
    async def test_unknown_post_is_not_found(self, api_env):
        response = await api_env.client.get(
            "/post/00000000-0000-0000-0000-000000000000"
        )

        assert response.status_code == 404


class TestVoteRoute:
    """Tests for PATCH /post/vote/{post_id}."""

    @pytest.mark.asyncio
    async def test_up_vote_increments_counter(self, api_env):
        post_repo = await _get(api_env, PostRepository)
        post = await post_repo.save(make_post())

        response = await api_env.client.patch(
            f"/post/vote/{post.id}", json={"type": "up"}
        )

        assert response.status_code == 200
        assert response.json() == {"modified_count": 1}
        stored = await post_repo.find_by_id(post.id)
        assert stored.up_vote == 1
        assert stored.down_vote == 0

    @pytest.mark.asyncio
    async def test_unknown_vote_type_is_rejected(self, api_env):
        post_repo = await _get(api_env, PostRepository)
        post = await post_repo.save(make_post())

        response = await api_env.client.patch(
            f"/post/vote/{post.id}", json={"type": "sideways"}
        )

        assert response.status_code == 422


class TestCommentRoutes:
    """Tests for comment creation and listing."""

    @pytest.mark.asyncio
    async def test_anonymous_comment_is_listed(self, api_env):
        post_repo = await _get(api_env, PostRepository)
        post = await post_repo.save(make_post())

        created = await api_env.client.post(
            "/post/comment", json={"post_id": str(post.id), "text": "Nice"}
        )
        listed = await api_env.client.get(f"/comment/{post.id}")

        assert created.status_code == 201
        assert [c["text"] for c in listed.json()] == ["Nice"]
