"""In-memory user repository for testing."""

from datetime import datetime
from typing import Optional

from hive.domain.model import User
from hive.domain.repository.user import UserRepository
from hive.domain.value import MembershipTier, Role, UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    def _by_email(self, email: str) -> Optional[User]:
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    def _replace(self, user: User, **changes) -> None:
        self._users[user.id] = user.model_copy(update=changes)

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email."""
        return self._by_email(email)

    async def find_by_username(self, username: str) -> Optional[User]:
        """Find a user by username."""
        for user in self._users.values():
            if user.username == username:
                return user
        return None

    async def search(self, term: str) -> list[User]:
        """Case-insensitive substring search over username and email."""
        needle = term.lower()
        return [
            user
            for user in self._users.values()
            if needle in user.username.lower() or needle in user.email.lower()
        ]

    async def save(self, user: User) -> User:
        """Insert a new user."""
        self._users[user.id] = user
        return user

    async def record_sign_in(
        self, email: str, signed_in_at: datetime, ip: Optional[str]
    ) -> None:
        user = self._by_email(email)
        if user:
            self._replace(user, last_sign_in=signed_in_at, last_sign_in_ip=ip)

    async def set_role(self, user_id: UserId, role: Role) -> int:
        user = self._users.get(user_id)
        if user is None:
            return 0
        self._replace(user, role=role)
        return 1

    async def set_flags(
        self,
        email: str,
        warning: Optional[bool] = None,
        is_blocked: Optional[bool] = None,
    ) -> int:
        user = self._by_email(email)
        changes = {}
        if warning is not None:
            changes["warning"] = warning
        if is_blocked is not None:
            changes["is_blocked"] = is_blocked
        if user is None or not changes:
            return 0
        self._replace(user, **changes)
        return 1

    async def adjust_post_limit(self, email: str, delta: int) -> None:
        user = self._by_email(email)
        if user:
            self._replace(user, post_limit=user.post_limit + delta)

    async def upgrade_membership(
        self, email: str, tier: MembershipTier, post_bonus: int, badge: str
    ) -> None:
        user = self._by_email(email)
        if user is None:
            return
        badges = list(user.badges)
        if badge not in badges:
            badges.append(badge)
        self._replace(
            user,
            membership=tier,
            post_limit=user.post_limit + post_bonus,
            badges=badges,
        )
