"""Create payment intent use case."""

from pydantic import BaseModel

from hive.adapter.error import PaymentProcessorError
from hive.application.usecase.base import BaseUseCase
from hive.domain.error import UpstreamFailureError
from hive.domain.service import PaymentService


class CreatePaymentIntentRequest(BaseModel):
    """Amount in major currency units."""

    amount: float


class CreatePaymentIntentResponse(BaseModel):
    client_secret: str


class CreatePaymentIntentUseCase(BaseUseCase):
    """Delegate a payment intent to the payment processor."""

    def __init__(self, payment_service: PaymentService) -> None:
        self.payment_service = payment_service

    async def execute(
        self, request: CreatePaymentIntentRequest
    ) -> CreatePaymentIntentResponse:
        """Create the intent.

        Raises:
            UpstreamFailureError: Carrying the processor's message on failure
        """
        try:
            client_secret = await self.payment_service.create_payment_intent(
                request.amount
            )
        except PaymentProcessorError as e:
            raise UpstreamFailureError("Payment processor error", detail=str(e)) from e
        return CreatePaymentIntentResponse(client_secret=client_secret)
