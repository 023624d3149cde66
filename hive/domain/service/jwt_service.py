"""JWT token domain service."""

import logfire

from hive.config import AuthSettings
from hive.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Issues and verifies session credentials with the configured secret."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def issue(self, email: str) -> str:
        """Issue a session token for ``email``, valid for the configured days."""
        token = create_token(email, self.auth_settings)
        logfire.info("Session token issued", email=email)
        return token

    def verify(self, token: str) -> TokenPayload:
        """Verify a session token and return its payload.

        Raises:
            ExpiredTokenError: If the token is past its expiry
            BadSignatureError: If it was signed with another secret
            MalformedTokenError: If it cannot be decoded or lacks the email
        """
        try:
            return verify_token(token, self.auth_settings)
        except JWTError as e:
            logfire.info("Session token rejected", reason=type(e).__name__)
            raise
