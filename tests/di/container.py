"""Test container builder with selective unmocking."""

from dishka import AsyncContainer

from hive.util.di import Component, mockable_components
from hive.util.di.container import build_container


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build a container where every mockable component is mocked by default.

    Examples:
        # Unit tests - all mocks
        container = build_test_container()

        # Integration tests - real PostgreSQL
        container = build_test_container(unmock={"persistence"})

    Raises:
        ValueError: If unknown components are requested
    """
    unmock = unmock or set()
    components = mockable_components()

    unknown = unmock - components
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")

    return build_container(mocked=frozenset(components - unmock))
