"""Swappable infrastructure providers.

The production implementations are imported here so that
``PaymentsProvider.__subclasses__()`` and friends always see them.
"""

from .payments import PaymentsProvider, ProdPaymentsProvider
from .persistence import PersistenceProvider, ProdPersistenceProvider

__all__ = [
    "PaymentsProvider",
    "PersistenceProvider",
    "ProdPaymentsProvider",
    "ProdPersistenceProvider",
]
