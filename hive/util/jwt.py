"""JWT token utilities."""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel, ValidationError

from hive.config import AuthSettings


class TokenPayload(BaseModel):
    """JWT token payload."""

    email: str
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


class ExpiredTokenError(JWTError):
    """Token is past its validity window."""

    pass


class BadSignatureError(JWTError):
    """Token signature does not match the signing secret."""

    pass


class MalformedTokenError(JWTError):
    """Token cannot be decoded or lacks the identity claim."""

    pass


def create_token(
    email: str, settings: AuthSettings, issued_at: datetime | None = None
) -> str:
    """Create a JWT token carrying the user's email.

    Args:
        email: Identity claim
        settings: Authentication settings
        issued_at: Issue time (defaults to now)

    Returns:
        Encoded JWT token
    """
    issued_at = issued_at or datetime.now(timezone.utc)
    expiry = issued_at + timedelta(days=settings.jwt_expiry_days)

    payload = {
        "email": email,
        "iat": issued_at,
        "exp": expiry,
    }

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a JWT token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        ExpiredTokenError: If the token has expired
        BadSignatureError: If the signature does not match
        MalformedTokenError: If the token cannot be decoded
    """
    try:
        payload = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
    except jwt.ExpiredSignatureError:
        raise ExpiredTokenError("Token has expired")
    except jwt.InvalidSignatureError:
        raise BadSignatureError("Token signature is invalid")
    except jwt.InvalidTokenError:
        raise MalformedTokenError("Invalid token")

    try:
        return TokenPayload(**payload)
    except ValidationError:
        raise MalformedTokenError("Token is missing the email claim")
