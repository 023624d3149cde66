"""PostgreSQL implementation of Payment repository."""

from typing import List

import logfire
from sqlalchemy import desc, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from hive.domain.model import Payment
from hive.domain.repository.payment import PaymentRepository
from hive.persistence.mappers import payment_to_dict, row_to_payment
from hive.persistence.tables import payments_table


class PostgresPaymentRepository(PaymentRepository):
    """PostgreSQL implementation of PaymentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def save(self, payment: Payment) -> Payment:
        """Insert a payment record."""
        with logfire.span("payment_repository.save", email=payment.email):
            stmt = insert(payments_table).values(**payment_to_dict(payment))
            await self.session.execute(stmt)
            await self.session.flush()
            return payment

    async def find_by_email(self, email: str) -> List[Payment]:
        """Find all payments made by a user, newest first."""
        stmt = (
            select(payments_table)
            .where(payments_table.c.email == email)
            .order_by(desc(payments_table.c.created_at))
        )
        result = await self.session.execute(stmt)
        return [row_to_payment(row._asdict()) for row in result.fetchall()]
