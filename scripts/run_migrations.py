#!/usr/bin/env python3
"""Upgrade the ForumHive schema to the latest Alembic revision.

Runs before the API starts; a failure stops the deploy so the service never
serves requests against a stale schema.
"""

import sys

import logfire
from alembic import command
from alembic.config import Config

from hive.config import Settings
from hive.util.observability import configure_logfire


def main(revision: str = "head") -> int:
    settings = Settings()
    configure_logfire(settings)

    config = Config("alembic.ini")
    config.set_main_option("sqlalchemy.url", settings.database_url)

    with logfire.span("migrations.upgrade", revision=revision, git_sha=settings.git_sha):
        try:
            command.upgrade(config, revision)
        except Exception:
            logfire.exception("Schema upgrade failed", revision=revision)
            raise

    logfire.info("Schema is up to date", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
