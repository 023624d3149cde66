"""API tests for the session cookie endpoints and liveness routes."""

import pytest

from hive.domain.service import JWTService
from tests.harness import create_api_fixture

# API test fixture
api_env = create_api_fixture()


class TestLiveness:
    """Tests for the root and health routes."""

    @pytest.mark.asyncio
    async def test_root_is_plain_text(self, api_env):
        response = await api_env.client.get("/")

        assert response.status_code == 200
        assert response.text == "ForumHive server is running"

    @pytest.mark.asyncio
    async def test_health(self, api_env):
        response = await api_env.client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestSessionCookie:
    """Tests for /auth/set-cookie and /auth/clear-cookies."""

    @pytest.mark.asyncio
    async def test_set_cookie_issues_http_only_token(self, api_env):
        # Act
        response = await api_env.client.post(
            "/auth/set-cookie", json={"email": "alice@example.com"}
        )

        # Assert
        assert response.status_code == 200
        assert response.json() == {"success": True}
        header = response.headers["set-cookie"]
        assert header.startswith("jwtToken=")
        assert "HttpOnly" in header
        assert "Path=/" in header
        assert "Max-Age=604800" in header
        assert "samesite=lax" in header.lower()

        async with api_env.container() as request_container:
            jwt_service = await request_container.get(JWTService)
            token = response.cookies["jwtToken"]
            assert jwt_service.verify(token).email == "alice@example.com"

    @pytest.mark.asyncio
    async def test_clear_cookies_expires_cookie(self, api_env):
        await api_env.client.post(
            "/auth/set-cookie", json={"email": "alice@example.com"}
        )

        response = await api_env.client.post("/auth/clear-cookies")

        assert response.status_code == 200
        header = response.headers["set-cookie"]
        assert header.startswith("jwtToken=")
        assert "Max-Age=0" in header

    @pytest.mark.asyncio
    async def test_cookie_from_set_cookie_authenticates_requests(self, api_env):
        """The cookie set by the server is the one the gate reads."""
        await api_env.client.post(
            "/auth/set-cookie", json={"email": "alice@example.com"}
        )

        response = await api_env.client.get("/posts/user/alice@example.com/count")

        assert response.status_code == 200
        assert response.json() == {"count": 0}
