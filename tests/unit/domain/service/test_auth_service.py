"""Unit tests for the authentication gate."""

from datetime import datetime, timedelta, timezone

import pytest

from hive.config import AuthSettings
from hive.domain.error import ForbiddenError, UnauthorizedError
from hive.domain.service import AuthService, JWTService
from hive.util.jwt import create_token
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestAuthenticate:
    """Tests for AuthService.authenticate."""

    @pytest.mark.asyncio
    async def test_missing_token_is_unauthorized(self, unit_env):
        auth_service = await unit_env.get(AuthService)

        with pytest.raises(UnauthorizedError) as exc_info:
            auth_service.authenticate(None)

        assert exc_info.value.message == "Unauthorized access"

    @pytest.mark.asyncio
    async def test_empty_token_is_unauthorized(self, unit_env):
        auth_service = await unit_env.get(AuthService)

        with pytest.raises(UnauthorizedError):
            auth_service.authenticate("")

    @pytest.mark.asyncio
    async def test_invalid_token_is_forbidden(self, unit_env):
        auth_service = await unit_env.get(AuthService)

        with pytest.raises(ForbiddenError) as exc_info:
            auth_service.authenticate("garbage")

        assert exc_info.value.message == "Forbidden"

    @pytest.mark.asyncio
    async def test_expired_token_is_forbidden(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        auth_settings = await unit_env.get(AuthSettings)
        token = create_token(
            "alice@example.com",
            auth_settings,
            issued_at=datetime.now(timezone.utc) - timedelta(days=30),
        )

        with pytest.raises(ForbiddenError):
            auth_service.authenticate(token)

    @pytest.mark.asyncio
    async def test_valid_token_yields_email(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        jwt_service = await unit_env.get(JWTService)
        token = jwt_service.issue("alice@example.com")

        assert auth_service.authenticate(token) == "alice@example.com"
