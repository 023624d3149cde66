"""Unit tests for the payment use cases."""

import pytest

from hive.application.usecase.payment import (
    CreatePaymentIntentRequest,
    CreatePaymentIntentUseCase,
    PurchaseMembershipRequest,
    PurchaseMembershipUseCase,
)
from hive.domain.error import UpstreamFailureError
from hive.domain.repository import PaymentRepository, UserRepository
from hive.domain.service.payment_service import PaymentProcessor
from hive.domain.value import MembershipTier
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreatePaymentIntent:
    """Tests for CreatePaymentIntentUseCase."""

    @pytest.mark.asyncio
    async def test_amount_is_sent_in_cents(self, unit_env):
        use_case = await unit_env.get(CreatePaymentIntentUseCase)
        processor = await unit_env.get(PaymentProcessor)

        result = await use_case.execute(CreatePaymentIntentRequest(amount=9.99))

        assert result.client_secret
        assert processor.created == [(999, "usd")]

    @pytest.mark.asyncio
    async def test_processor_failure_is_upstream_failure(self, unit_env):
        use_case = await unit_env.get(CreatePaymentIntentUseCase)

        with pytest.raises(UpstreamFailureError) as exc_info:
            await use_case.execute(CreatePaymentIntentRequest(amount=0))

        assert exc_info.value.message == "Payment processor error"
        assert exc_info.value.detail


class TestPurchaseMembership:
    """Tests for PurchaseMembershipUseCase."""

    @pytest.mark.asyncio
    async def test_payment_is_recorded_and_user_upgraded(self, unit_env):
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        payment_repo = await unit_env.get(PaymentRepository)
        await user_repo.save(make_user("alice@example.com"))
        use_case = await unit_env.get(PurchaseMembershipUseCase)

        # Act
        result = await use_case.execute(
            PurchaseMembershipRequest(
                email="alice@example.com", amount=10.0, transaction_id="pi_123"
            )
        )

        # Assert
        assert result.transaction_id == "pi_123"
        assert len(await payment_repo.find_by_email("alice@example.com")) == 1
        user = await user_repo.find_by_email("alice@example.com")
        assert user.membership == MembershipTier.MEMBER
        assert user.post_limit == 10
        assert user.badges == ["Gold"]

    @pytest.mark.asyncio
    async def test_payment_for_unknown_user_is_still_recorded(self, unit_env):
        payment_repo = await unit_env.get(PaymentRepository)
        use_case = await unit_env.get(PurchaseMembershipUseCase)

        await use_case.execute(
            PurchaseMembershipRequest(email="ghost@example.com", amount=10.0)
        )

        assert len(await payment_repo.find_by_email("ghost@example.com")) == 1
