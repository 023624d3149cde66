"""Purchase membership use case."""

from datetime import datetime
from uuid import uuid4

import logfire
from pydantic import BaseModel, Field

from hive.application.usecase.base import BaseUseCase
from hive.domain.model import Payment
from hive.domain.service import PaymentService, QuotaService
from hive.domain.value import PaymentId


class PurchaseMembershipRequest(BaseModel):
    """Completed membership payment."""

    email: str
    amount: float = Field(gt=0)
    transaction_id: str | None = None


class PaymentResponse(BaseModel):
    payment_id: str
    email: str
    amount: float
    transaction_id: str | None
    created_at: datetime


class PurchaseMembershipUseCase(BaseUseCase):
    """Record a membership payment and upgrade the payer.

    The payment is not verified against the processor and no session is
    required.
    """

    def __init__(
        self, payment_service: PaymentService, quota_service: QuotaService
    ) -> None:
        """Initialize purchase membership use case.

        Args:
            payment_service: Payment domain service
            quota_service: Membership quota service
        """
        self.payment_service = payment_service
        self.quota_service = quota_service

    async def execute(self, request: PurchaseMembershipRequest) -> PaymentResponse:
        """Save the payment, then apply the membership upgrade."""
        with logfire.span("purchase_membership.execute", email=request.email):
            payment = Payment(
                id=PaymentId(uuid4()),
                email=request.email,
                amount=request.amount,
                transaction_id=request.transaction_id,
            )
            saved = await self.payment_service.record_payment(payment)
            await self.quota_service.apply_membership(request.email)

            return PaymentResponse(
                payment_id=str(saved.id),
                email=saved.email,
                amount=saved.amount,
                transaction_id=saved.transaction_id,
                created_at=saved.created_at,
            )
