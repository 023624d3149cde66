#!/usr/bin/env python3
"""Serve the ForumHive API with uvicorn.

Logging and Logfire are configured here, before the app module is imported,
so that import-time failures are reported too.
"""

import sys

import logfire
import uvicorn

from hive.config import Settings
from hive.util.logging import setup_logging
from hive.util.observability import configure_logfire

APP_PATH = "hive.interface.api.app:app"


def main() -> int:
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    if settings.is_production and settings.auth.jwt_secret == "CHANGE_ME_IN_PRODUCTION":
        logfire.error("Refusing to start: AUTH__JWT_SECRET is not set")
        return 1

    logfire.info(
        "Starting ForumHive API",
        host=settings.host,
        port=settings.port,
        environment=settings.environment,
    )
    try:
        uvicorn.run(
            APP_PATH,
            host=settings.host,
            port=settings.port,
            log_config=None,  # keep the handlers installed by setup_logging
            proxy_headers=True,
        )
    except Exception:
        logfire.exception("API process crashed")
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
