"""Stripe payment adapter."""

from .client import (
    MockStripePaymentClient,
    RealStripePaymentClient,
    StripePaymentClient,
)

__all__ = ["StripePaymentClient", "RealStripePaymentClient", "MockStripePaymentClient"]
