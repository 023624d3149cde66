"""Payment use cases."""

from .create_payment_intent import (
    CreatePaymentIntentRequest,
    CreatePaymentIntentResponse,
    CreatePaymentIntentUseCase,
)
from .purchase_membership import (
    PaymentResponse,
    PurchaseMembershipRequest,
    PurchaseMembershipUseCase,
)

__all__ = [
    "CreatePaymentIntentRequest",
    "CreatePaymentIntentResponse",
    "CreatePaymentIntentUseCase",
    "PaymentResponse",
    "PurchaseMembershipRequest",
    "PurchaseMembershipUseCase",
]
