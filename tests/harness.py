"""Test harness for unit, API and integration tests.

Integration tests assume PostgreSQL is running and migrated; settings are
loaded from environment variables (configure via .env or export).
"""

from dataclasses import dataclass

import httpx
import pytest_asyncio
from dishka import AsyncContainer

from hive.config import AuthSettings
from hive.interface.api.app import create_app
from hive.util.di import Component
from hive.util.jwt import create_token
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that builds a test container with the given
    unmocking and yields a request-scoped container for service access.

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything mocked
        unit_env = create_env_fixture()

        # Integration tests - real persistence, assumes postgres running
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_create_post(unit_env):
            repo = await unit_env.get(PostRepository)
            post = await repo.save(Post(...))
            assert post.id is not None
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment


@dataclass
class ApiEnv:
    """HTTP client bound to an app, plus the container behind it."""

    client: httpx.AsyncClient
    container: AsyncContainer

    async def login(self, email: str) -> None:
        """Put a valid session cookie for the email on the client."""
        auth_settings = await self.container.get(AuthSettings)
        self.client.cookies.set(
            auth_settings.cookie_name, create_token(email, auth_settings)
        )


def create_api_fixture(unmock: set[Component] | None = None):
    """Factory for fixtures driving the FastAPI app over ASGI.

    Usage:
        api_env = create_api_fixture()

        @pytest.mark.asyncio
        async def test_health(api_env):
            response = await api_env.client.get("/health")
            assert response.status_code == 200
    """

    @pytest_asyncio.fixture
    async def _api_environment():
        container = build_test_container(unmock=unmock or set())
        app = create_app(container)
        transport = httpx.ASGITransport(app=app)

        async with httpx.AsyncClient(
            transport=transport, base_url="http://test"
        ) as client:
            yield ApiEnv(client=client, container=container)

        await container.close()

    return _api_environment
