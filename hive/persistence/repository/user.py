"""PostgreSQL implementation of User repository."""

from datetime import datetime
from typing import List, Optional

import logfire
from sqlalchemy import (
    String,
    any_,
    case,
    func,
    insert,
    literal,
    or_,
    select,
    update,
)
from sqlalchemy.dialects.postgresql import ARRAY
from sqlalchemy.ext.asyncio import AsyncSession

from hive.domain.model import User
from hive.domain.repository.user import UserRepository
from hive.domain.value import MembershipTier, Role, UserId
from hive.persistence.mappers import row_to_user, user_to_dict
from hive.persistence.repository._search import ESCAPE_CHAR, contains_pattern
from hive.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _find_one(self, clause) -> Optional[User]:
        stmt = select(users_table).where(clause)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        with logfire.span("user_repository.find_by_id", user_id=str(user_id)):
            return await self._find_one(users_table.c.id == user_id)

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email."""
        with logfire.span("user_repository.find_by_email", email=email):
            return await self._find_one(users_table.c.email == email)

    async def find_by_username(self, username: str) -> Optional[User]:
        """Find a user by username."""
        with logfire.span("user_repository.find_by_username", username=username):
            return await self._find_one(users_table.c.username == username)

    async def search(self, term: str) -> List[User]:
        """Find users whose username or email contains the term."""
        with logfire.span("user_repository.search", term=term):
            pattern = contains_pattern(term)
            stmt = (
                select(users_table)
                .where(
                    or_(
                        users_table.c.username.ilike(pattern, escape=ESCAPE_CHAR),
                        users_table.c.email.ilike(pattern, escape=ESCAPE_CHAR),
                    )
                )
                .order_by(users_table.c.created_at)
            )
            result = await self.session.execute(stmt)
            return [row_to_user(row._asdict()) for row in result.fetchall()]

    async def save(self, user: User) -> User:
        """Insert a new user."""
        with logfire.span("user_repository.save", email=user.email):
            stmt = insert(users_table).values(**user_to_dict(user))
            await self.session.execute(stmt)
            await self.session.flush()
            logfire.info("User saved", user_id=str(user.id))
            return user

    async def record_sign_in(
        self, email: str, signed_in_at: datetime, ip: Optional[str]
    ) -> None:
        """Update last sign-in fields only."""
        stmt = (
            update(users_table)
            .where(users_table.c.email == email)
            .values(last_sign_in=signed_in_at, last_sign_in_ip=ip)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def set_role(self, user_id: UserId, role: Role) -> int:
        """Set a user's role."""
        stmt = (
            update(users_table)
            .where(users_table.c.id == user_id)
            .values(role=role.value)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def set_flags(
        self,
        email: str,
        warning: Optional[bool] = None,
        is_blocked: Optional[bool] = None,
    ) -> int:
        """Set moderation flags on a user."""
        values = {}
        if warning is not None:
            values["warning"] = warning
        if is_blocked is not None:
            values["is_blocked"] = is_blocked
        if not values:
            return 0

        stmt = update(users_table).where(users_table.c.email == email).values(**values)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def adjust_post_limit(self, email: str, delta: int) -> None:
        """Atomically add delta to post_limit."""
        stmt = (
            update(users_table)
            .where(users_table.c.email == email)
            .values(post_limit=users_table.c.post_limit + delta)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def upgrade_membership(
        self, email: str, tier: MembershipTier, post_bonus: int, badge: str
    ) -> None:
        """Set tier, add the post bonus and add the badge once, in one statement."""
        with logfire.span(
            "user_repository.upgrade_membership", email=email, tier=tier.value
        ):
            badges = users_table.c.badges
            stmt = (
                update(users_table)
                .where(users_table.c.email == email)
                .values(
                    membership=tier.value,
                    post_limit=users_table.c.post_limit + post_bonus,
                    badges=case(
                        (literal(badge) == any_(badges), badges),
                        else_=func.array_append(
                            badges, literal(badge), type_=ARRAY(String(50))
                        ),
                    ),
                )
            )
            result = await self.session.execute(stmt)
            await self.session.flush()
            if not result.rowcount:
                logfire.warn("Membership upgrade matched no user", email=email)
