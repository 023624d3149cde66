"""Authorization policy: admin gating and ownership checks."""

import logfire

from hive.domain.error import ForbiddenError, UnauthorizedError
from hive.domain.model import User
from hive.domain.repository import UserRepository

from .base import Service


class AccessPolicy(Service):
    """Decides whether an authenticated identity may act on a resource."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize access policy.

        Args:
            user_repository: User repository used for role lookups
        """
        self.user_repository = user_repository

    async def require_admin(self, email: str | None) -> User:
        """Require the acting identity to hold the admin role.

        The role is read from the stored user record on every call, never
        from the session token.

        Args:
            email: Acting identity established by the authentication gate

        Returns:
            The admin user

        Raises:
            UnauthorizedError: If no identity was established
            ForbiddenError: If the user is unknown or not an admin
        """
        if not email:
            raise UnauthorizedError()

        with logfire.span("access_policy.require_admin", email=email):
            user = await self.user_repository.find_by_email(email)
            if user is None or not user.is_admin:
                logfire.warn("Admin access denied", email=email)
                raise ForbiddenError("Admin access only")
            return user

    @staticmethod
    def require_owner(acting_email: str, owner_email: str | None) -> None:
        """Require the acting identity to own the resource.

        Args:
            acting_email: Acting identity established by the authentication gate
            owner_email: Owner recorded on the resource or named in the path

        Raises:
            ForbiddenError: If the identities differ
        """
        if acting_email != owner_email:
            logfire.warn(
                "Ownership check failed",
                acting_email=acting_email,
                owner_email=owner_email,
            )
            raise ForbiddenError("Forbidden: email mismatch")
