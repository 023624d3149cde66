"""Payment repository interface."""

from abc import ABC, abstractmethod
from typing import List

from hive.domain.model import Payment


class PaymentRepository(ABC):
    """Repository for membership payments."""

    @abstractmethod
    async def save(self, payment: Payment) -> Payment:
        """Insert a payment record."""
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> List[Payment]:
        """Find all payments made by a user."""
        pass
