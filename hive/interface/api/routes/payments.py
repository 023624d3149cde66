"""Payment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from hive.application.usecase.payment import (
    CreatePaymentIntentRequest,
    CreatePaymentIntentResponse,
    CreatePaymentIntentUseCase,
    PaymentResponse,
    PurchaseMembershipRequest,
    PurchaseMembershipUseCase,
)

router = APIRouter(tags=["payments"], route_class=DishkaRoute)


@router.post("/create-payment-intent", response_model=CreatePaymentIntentResponse)
async def create_payment_intent(
    request: CreatePaymentIntentRequest,
    create_payment_intent_use_case: FromDishka[CreatePaymentIntentUseCase],
) -> CreatePaymentIntentResponse:
    """Create a payment intent for an amount in dollars.

    Raises:
        UpstreamFailureError: If the payment processor rejects it (500)
    """
    return await create_payment_intent_use_case.execute(request)


@router.post("/membership", response_model=PaymentResponse)
async def purchase_membership(
    request: PurchaseMembershipRequest,
    purchase_membership_use_case: FromDishka[PurchaseMembershipUseCase],
) -> PaymentResponse:
    """Record a membership payment and upgrade the payer to member."""
    return await purchase_membership_use_case.execute(request)
