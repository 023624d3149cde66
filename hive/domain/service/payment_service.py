"""Payment domain service."""

import logfire

from hive.config import PaymentSettings
from hive.domain.model import Payment
from hive.domain.repository import PaymentRepository

from .base import Service


class PaymentProcessor:
    """Payment processor interface."""

    async def create_payment_intent(self, amount: int, currency: str) -> str:
        """Create a payment intent.

        Args:
            amount: Amount in minor currency units (cents)
            currency: ISO currency code

        Returns:
            Client secret the frontend uses to complete the payment
        """
        raise NotImplementedError


class PaymentService(Service):
    """Domain service for membership payments."""

    def __init__(
        self,
        payment_processor: PaymentProcessor,
        payment_repository: PaymentRepository,
        payment_settings: PaymentSettings,
    ) -> None:
        """Initialize payment service.

        Args:
            payment_processor: External payment processor client
            payment_repository: Payment repository
            payment_settings: Payment settings (currency)
        """
        self.payment_processor = payment_processor
        self.payment_repository = payment_repository
        self.payment_settings = payment_settings

    @staticmethod
    def to_minor_units(amount: float) -> int:
        """Convert a major-unit amount to minor units."""
        return int(round(amount * 100))

    async def create_payment_intent(self, amount: float) -> str:
        """Create a payment intent for an amount in major currency units.

        Args:
            amount: Amount in major units (dollars)

        Returns:
            Client secret

        Raises:
            PaymentProcessorError: If the processor rejects the request
        """
        minor = self.to_minor_units(amount)
        currency = self.payment_settings.currency
        with logfire.span(
            "payment_service.create_payment_intent", amount=minor, currency=currency
        ):
            client_secret = await self.payment_processor.create_payment_intent(
                minor, currency
            )
            logfire.info("Payment intent created", amount=minor, currency=currency)
            return client_secret

    async def record_payment(self, payment: Payment) -> Payment:
        """Save a completed payment."""
        with logfire.span("payment_service.record_payment", email=payment.email):
            saved = await self.payment_repository.save(payment)
            logfire.info(
                "Payment recorded",
                payment_id=str(saved.id),
                email=saved.email,
                amount=saved.amount,
            )
            return saved
