"""User domain service."""

from datetime import datetime
from typing import Optional

import logfire

from hive.domain.error import NotFoundError
from hive.domain.model import User
from hive.domain.repository import UserRepository
from hive.domain.value import Role, UserId

from .base import Service


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_user_by_email(self, email: str) -> User | None:
        """Get user by email.

        Args:
            email: User email

        Returns:
            User if found, None otherwise
        """
        with logfire.span("user_service.get_user_by_email", email=email):
            user = await self.user_repository.find_by_email(email)
            if user:
                logfire.info("User found", email=email, user_id=str(user.id))
            else:
                logfire.warn("User not found", email=email)
            return user

    async def username_exists(self, username: str) -> bool:
        """Check whether a username is taken."""
        with logfire.span("user_service.username_exists", username=username):
            user = await self.user_repository.find_by_username(username)
            return user is not None

    async def get_role(self, email: str) -> Optional[Role]:
        """Get a user's role.

        Args:
            email: User email

        Returns:
            The role, None for regular users

        Raises:
            NotFoundError: If no user has this email
        """
        user = await self.get_user_by_email(email)
        if user is None:
            raise NotFoundError("User", email)
        return user.role

    async def create_user(self, user: User) -> User:
        """Insert a new user.

        Args:
            user: User to save

        Returns:
            Saved user
        """
        with logfire.span(
            "user_service.create_user", email=user.email, username=user.username
        ):
            saved = await self.user_repository.save(user)
            logfire.info("User created", user_id=str(saved.id), email=saved.email)
            return saved

    async def record_sign_in(
        self, email: str, signed_in_at: datetime, ip: str | None
    ) -> None:
        """Record a returning user's sign-in time and address."""
        with logfire.span("user_service.record_sign_in", email=email):
            await self.user_repository.record_sign_in(email, signed_in_at, ip)
            logfire.info("Sign-in recorded", email=email, ip=ip)

    async def search(self, term: str) -> list[User]:
        """Search users by username or email substring."""
        with logfire.span("user_service.search", term=term):
            users = await self.user_repository.search(term)
            logfire.info("User search completed", term=term, count=len(users))
            return users

    async def promote_to_admin(self, user_id: UserId) -> int:
        """Grant the admin role.

        Returns:
            Number of modified users
        """
        with logfire.span("user_service.promote_to_admin", user_id=str(user_id)):
            modified = await self.user_repository.set_role(user_id, Role.ADMIN)
            logfire.info(
                "User promoted to admin", user_id=str(user_id), modified=modified
            )
            return modified

    async def warn(self, email: str) -> int:
        """Flag a user with a moderation warning."""
        modified = await self.user_repository.set_flags(email, warning=True)
        logfire.info("User warned", email=email, modified=modified)
        return modified

    async def block(self, email: str) -> int:
        """Block a user."""
        modified = await self.user_repository.set_flags(email, is_blocked=True)
        logfire.info("User blocked", email=email, modified=modified)
        return modified
