"""Payment processor infrastructure providers."""

from dishka import Scope, provide

from hive.adapter.stripe import RealStripePaymentClient
from hive.config import PaymentSettings
from hive.domain.service import PaymentProcessor
from hive.util.di.base import ProviderBase


class PaymentsProvider(ProviderBase):
    """Payments component base."""

    __mock_component__ = "payments"


class ProdPaymentsProvider(PaymentsProvider):
    """Production payments provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_payment_processor(self, settings: PaymentSettings) -> PaymentProcessor:
        """Provide Stripe payment client.

        Raises:
            ValueError: If the Stripe secret key is not configured
        """
        if not settings.stripe_secret_key:
            raise ValueError("Stripe secret key must be configured")

        return RealStripePaymentClient(
            secret_key=settings.stripe_secret_key,
            api_base_url=settings.api_base_url,
        )
