"""In-memory payment repository for testing."""

from hive.domain.model import Payment
from hive.domain.repository.payment import PaymentRepository


class InMemoryPaymentRepository(PaymentRepository):
    """In-memory implementation of PaymentRepository for testing."""

    def __init__(self) -> None:
        self._payments: list[Payment] = []

    async def save(self, payment: Payment) -> Payment:
        self._payments.append(payment)
        return payment

    async def find_by_email(self, email: str) -> list[Payment]:
        """Find all payments made by a user, newest first."""
        payments = [p for p in self._payments if p.email == email]
        return sorted(payments, key=lambda p: p.created_at, reverse=True)
