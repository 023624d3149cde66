"""Authentication gate."""

import logfire

from hive.domain.error import ForbiddenError, UnauthorizedError
from hive.util.jwt import JWTError

from .base import Service
from .jwt_service import JWTService


class AuthService(Service):
    """Establishes the acting identity of a request from its session token.

    Makes no authorization decision: it only answers who is calling.
    """

    def __init__(self, jwt_service: JWTService) -> None:
        """Initialize auth service.

        Args:
            jwt_service: JWT token domain service
        """
        self.jwt_service = jwt_service

    def authenticate(self, token: str | None) -> str:
        """Verify the session token and return the acting email.

        Args:
            token: Session token from the request cookie (optional)

        Returns:
            Verified email claim

        Raises:
            UnauthorizedError: If no token was sent
            ForbiddenError: If the token is expired, malformed or badly signed
        """
        if not token:
            logfire.info("Request without session token")
            raise UnauthorizedError()

        try:
            payload = self.jwt_service.verify(token)
        except JWTError as e:
            raise ForbiddenError() from e

        return payload.email
