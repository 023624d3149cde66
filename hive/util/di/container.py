"""Container assembly."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from hive.util.di import PROVIDERS, Component, get_provider


def build_container(mocked: frozenset[Component] = frozenset()) -> AsyncContainer:
    """Assemble a container, using mock implementations for ``mocked``.

    FastapiProvider makes the current Request resolvable, so the same
    container can back the ASGI app.
    """
    providers = [
        get_provider(base, use_mock=base.__mock_component__ in mocked)()
        for base in PROVIDERS
    ]
    return make_async_container(*providers, FastapiProvider())


def create_container() -> AsyncContainer:
    """Production container; settings come from the environment."""
    return build_container()


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    setup_dishka(container, app)
