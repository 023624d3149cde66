"""User aggregate root.

Users are identified by email across sessions; role and membership tier
are tracked independently, so an admin may also hold a paid membership.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from hive.domain.model.common import DomainModel, utc_now
from hive.domain.value import MembershipTier, Role, UserId


class User(DomainModel):
    """User aggregate root."""

    id: UserId
    email: str = Field(min_length=3, max_length=255)
    username: str = Field(min_length=1, max_length=255)
    name: Optional[str] = None
    photo_url: Optional[str] = None
    role: Optional[Role] = None
    membership: MembershipTier = MembershipTier.NON_MEMBER
    post_limit: int = 5  # Advisory counter; quota is enforced by post count
    is_blocked: bool = False
    warning: bool = False
    badges: list[str] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utc_now)
    last_sign_in: Optional[datetime] = None
    last_sign_in_ip: Optional[str] = None

    @property
    def is_admin(self) -> bool:
        """Whether the user holds the admin role."""
        return self.role == Role.ADMIN
