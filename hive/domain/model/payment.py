"""Membership payment record."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from hive.domain.model.common import DomainModel, utc_now
from hive.domain.value import PaymentId


class Payment(DomainModel):
    """Completed membership payment."""

    id: PaymentId
    email: str
    amount: float = Field(gt=0)  # Major currency units
    transaction_id: Optional[str] = None
    created_at: datetime = Field(default_factory=utc_now)
