"""Logfire setup for the API process and its outbound calls.

Services and repositories emit spans and events straight through the
``logfire`` module::

    with logfire.span("quota_service.apply_membership", email=email):
        ...
        logfire.info("Membership applied", email=email)

This module only decides where that telemetry goes and which libraries are
traced automatically.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from hive.config import ObservabilitySettings, Settings


def should_send(observability: ObservabilitySettings) -> bool:
    """Whether telemetry leaves the process.

    An explicit ``send_to_logfire`` wins; otherwise a configured token
    turns cloud export on.
    """
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once per process, before the app is imported."""
    observability = settings.observability
    send = should_send(observability)

    logfire.configure(
        service_name=observability.service_name,
        service_version=settings.git_sha,
        environment=settings.environment,
        send_to_logfire=send,
        token=observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send,
    )


def _request_attributes(request, attributes: dict) -> dict:
    """Attach method, path and client address to request spans."""
    mapped = dict(attributes)
    mapped["path"] = request.url.path
    if getattr(request, "method", None):
        mapped["method"] = request.method
    if request.client:
        mapped["client_host"] = request.client.host
    return mapped


def instrument_app(app: FastAPI, observability: ObservabilitySettings) -> None:
    """Trace incoming requests and outbound payment processor calls.

    Headers are never captured: the Cookie header carries the session token.
    """
    logfire.instrument_httpx()
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_request_attributes,
        excluded_urls=observability.untraced_paths,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace every statement issued through the engine."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
