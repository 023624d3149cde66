"""User repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from hive.domain.model import User
from hive.domain.value import MembershipTier, Role, UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email (exact match)."""
        pass

    @abstractmethod
    async def find_by_username(self, username: str) -> Optional[User]:
        """Find a user by username (exact match)."""
        pass

    @abstractmethod
    async def search(self, term: str) -> List[User]:
        """Find users whose username or email contains the term.

        Matching is case-insensitive. An empty term matches every user.

        Args:
            term: Substring to look for

        Returns:
            Matching users
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Insert a new user.

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass

    @abstractmethod
    async def record_sign_in(
        self, email: str, signed_in_at: datetime, ip: Optional[str]
    ) -> None:
        """Set last sign-in time and address, leaving every other field untouched."""
        pass

    @abstractmethod
    async def set_role(self, user_id: UserId, role: Role) -> int:
        """Set a user's role.

        Returns:
            Number of modified users (0 or 1)
        """
        pass

    @abstractmethod
    async def set_flags(
        self,
        email: str,
        warning: Optional[bool] = None,
        is_blocked: Optional[bool] = None,
    ) -> int:
        """Set moderation flags on a user; None leaves a flag unchanged.

        Returns:
            Number of modified users (0 or 1)
        """
        pass

    @abstractmethod
    async def adjust_post_limit(self, email: str, delta: int) -> None:
        """Atomically add delta to the user's post_limit counter."""
        pass

    @abstractmethod
    async def upgrade_membership(
        self, email: str, tier: MembershipTier, post_bonus: int, badge: str
    ) -> None:
        """Set the tier, add the post bonus and add the badge (no duplicates)."""
        pass
