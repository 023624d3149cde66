"""Dependency injection wiring."""

from typing import Type

from hive.util.di.application import ProdApplicationProvider
from hive.util.di.base import Component, ProviderBase
from hive.util.di.core import ProdConfigProvider
from hive.util.di.domain import ProdDomainProvider
from hive.util.di.infrastructure import (
    PaymentsProvider,
    PersistenceProvider,
    ProdPaymentsProvider,
    ProdPersistenceProvider,
)

# Layer order: config, domain, application, then swappable infrastructure
PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PaymentsProvider,
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a provider entry of PROVIDERS to the class to instantiate.

    Mock implementations only exist once the test package defining them
    has been imported.

    Raises:
        ValueError: If the component has no implementation of that kind
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for implementation in implementations:
        if implementation.__is_mock__ == use_mock:
            return implementation

    kind = "mock" if use_mock else "production"
    raise ValueError(f"No {kind} implementation for {base.__mock_component__}")


def mockable_components() -> set[Component]:
    """Names of the components that have implementations to choose from."""
    return {
        base.__mock_component__
        for base in PROVIDERS
        if base.__mock_component__ and base.__subclasses__()
    }


__all__ = [
    "Component",
    "PROVIDERS",
    "PaymentsProvider",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdPaymentsProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "get_provider",
    "mockable_components",
]
