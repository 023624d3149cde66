"""Membership quota engine."""

import logfire

from hive.config import QuotaSettings
from hive.domain.error import QuotaExceededError
from hive.domain.model import User
from hive.domain.repository import UserRepository
from hive.domain.value import MembershipTier

from .base import Service


class QuotaService(Service):
    """Per-tier post ceilings and the advisory post_limit counter.

    Two mechanisms are maintained side by side: the ceiling check counts the
    author's stored posts, while post_limit is a counter shown to users and
    adjusted on every create, delete and membership purchase.
    """

    def __init__(
        self, user_repository: UserRepository, quota_settings: QuotaSettings
    ) -> None:
        """Initialize quota service.

        Args:
            user_repository: User repository
            quota_settings: Tier ceilings and membership perks
        """
        self.user_repository = user_repository
        self.quota_settings = quota_settings

    def ceiling_for(self, tier: MembershipTier) -> int:
        """Post ceiling of a membership tier."""
        if tier == MembershipTier.MEMBER:
            return self.quota_settings.member_post_ceiling
        return self.quota_settings.non_member_post_ceiling

    def ensure_can_post(self, user: User, existing_posts: int) -> None:
        """Reject post creation once the author is over their tier ceiling.

        The comparison is strictly greater-than, so an author may hold one
        post more than the ceiling.

        Args:
            user: Post author
            existing_posts: Number of posts the author already has

        Raises:
            QuotaExceededError: If the author is over the ceiling
        """
        ceiling = self.ceiling_for(user.membership)
        if existing_posts > ceiling:
            logfire.warn(
                "Post quota exceeded",
                email=user.email,
                membership=user.membership.value,
                existing_posts=existing_posts,
                ceiling=ceiling,
            )
            raise QuotaExceededError()

    async def record_post_created(self, email: str) -> None:
        """Decrement the author's post_limit counter."""
        await self.user_repository.adjust_post_limit(email, -1)
        logfire.info("Post limit decremented", email=email)

    async def record_post_deleted(self, email: str) -> None:
        """Increment the author's post_limit counter."""
        await self.user_repository.adjust_post_limit(email, 1)
        logfire.info("Post limit incremented", email=email)

    async def apply_membership(self, email: str) -> None:
        """Upgrade a user to the member tier.

        Sets the tier, grants the post bonus and adds the membership badge
        (once, however many times this is applied).
        """
        with logfire.span("quota_service.apply_membership", email=email):
            await self.user_repository.upgrade_membership(
                email,
                tier=MembershipTier.MEMBER,
                post_bonus=self.quota_settings.membership_post_bonus,
                badge=self.quota_settings.membership_badge,
            )
            logfire.info("Membership applied", email=email)
