"""Stdlib logging for the API process.

Route modules log through ``logging.getLogger(__name__)``; spans and
structured events go through Logfire instead.
"""

import logging
import sys

from hive.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# Loggers that are chatty at INFO
NOISY_LOGGERS = ("httpx", "httpcore", "asyncio")


def setup_logging(settings: Settings) -> None:
    """Route all log records to stdout at a level chosen by ``debug``.

    SQL echo stays at the engine's discretion (``echo=debug``), and the
    uvicorn access log is kept off in production where request spans
    already record every call.
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%dT%H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    if settings.is_production:
        logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    logging.getLogger(__name__).info(
        "Logging configured: environment=%s level=%s",
        settings.environment,
        logging.getLevelName(level),
    )
