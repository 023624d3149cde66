"""Stripe payment processor client.

Talks to the Stripe REST API directly over httpx.
"""

import httpx
import logfire

from hive.adapter.error import PaymentProcessorError
from hive.domain.service.payment_service import PaymentProcessor


class StripePaymentClient(PaymentProcessor):
    """Base class for Stripe clients.

    Provides type distinction for dependency injection.
    """

    pass


class RealStripePaymentClient(StripePaymentClient):
    """Stripe client creating PaymentIntents."""

    def __init__(self, secret_key: str, api_base_url: str) -> None:
        """Initialize Stripe client.

        Args:
            secret_key: Stripe secret API key
            api_base_url: Stripe API base URL
        """
        self.secret_key = secret_key
        self.payment_intents_url = f"{api_base_url.rstrip('/')}/v1/payment_intents"

    async def create_payment_intent(self, amount: int, currency: str) -> str:
        """Create a Stripe PaymentIntent.

        Args:
            amount: Amount in minor currency units
            currency: ISO currency code

        Returns:
            PaymentIntent client secret

        Raises:
            PaymentProcessorError: If Stripe rejects the request or is unreachable
        """
        data = {"amount": str(amount), "currency": currency}

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.payment_intents_url,
                    data=data,
                    auth=(self.secret_key, ""),
                    headers={"Content-Type": "application/x-www-form-urlencoded"},
                    timeout=30.0,
                )
        except httpx.HTTPError as e:
            logfire.error("Stripe HTTP error", error=str(e))
            raise PaymentProcessorError(f"HTTP error creating payment intent: {e}")

        if response.status_code != 200:
            message = self._error_message(response)
            logfire.error(
                "Stripe payment intent failed",
                status_code=response.status_code,
                error=message,
            )
            raise PaymentProcessorError(message)

        result = response.json()
        logfire.info("Stripe payment intent created", payment_intent=result.get("id"))
        return result["client_secret"]

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        """Extract Stripe's error message from a failed response."""
        try:
            return response.json()["error"]["message"]
        except (ValueError, KeyError, TypeError):
            return f"Payment processor returned {response.status_code}"


class MockStripePaymentClient(StripePaymentClient):
    """Mock Stripe client for testing.

    Returns deterministic client secrets without making real API calls and
    records every intent it was asked to create.
    """

    def __init__(self) -> None:
        self.created: list[tuple[int, str]] = []

    async def create_payment_intent(self, amount: int, currency: str) -> str:
        """Return a mock client secret.

        Raises:
            PaymentProcessorError: For non-positive amounts, like Stripe does
        """
        if amount <= 0:
            raise PaymentProcessorError(
                "This value must be greater than or equal to 1."
            )
        self.created.append((amount, currency))
        return f"pi_mock_{len(self.created)}_secret_{amount}{currency}"
