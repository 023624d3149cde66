"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hive.config import Settings
from hive.interface.api.errors import register_error_handlers
from hive.interface.api.routes import (
    auth,
    comments,
    health,
    payments,
    posts,
    reports,
    users,
    votes,
)
from hive.util.di.container import create_container, setup_di
from hive.util.observability import instrument_app

ROUTERS = (
    health.router,
    auth.router,
    users.router,
    posts.router,
    votes.router,
    comments.router,
    reports.router,
    payments.router,
)


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create the ForumHive API.

    Logfire must already be configured: scripts/start_app.py does it in
    production and tests/conftest.py under pytest.

    Args:
        container: DI container to use (defaults to the production container)
    """
    settings = Settings()

    app_instance = FastAPI(
        title="ForumHive API",
        description="Discussion forum with paid memberships and comment moderation",
        version="0.1.0",
    )
    instrument_app(app_instance, settings.observability)

    # The session cookie is sent cross-site, so credentials must be allowed
    cors = settings.cors
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=cors.allowed_origins,
        allow_credentials=True,
        allow_methods=cors.allowed_methods,
        allow_headers=cors.allowed_headers,
        max_age=cors.preflight_max_age,
    )

    setup_di(app_instance, container or create_container())
    register_error_handlers(app_instance)

    for router in ROUTERS:
        app_instance.include_router(router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
app = create_app()
