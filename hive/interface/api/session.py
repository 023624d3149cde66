"""Session cookie transport.

The session token travels in an HttpOnly cookie. Production serves the
frontend from another site, so the cookie must be ``SameSite=None`` and
``Secure`` there; other environments use ``SameSite=Lax`` over plain HTTP.
"""

from typing import Annotated

from dishka import AsyncContainer
from fastapi import Depends, Request, Response

from hive.config import Settings
from hive.domain.service import AuthService


def cookie_options(settings: Settings) -> dict:
    """Attributes shared by setting and clearing the session cookie."""
    is_production = settings.is_production
    return {
        "httponly": True,
        "secure": is_production,
        "samesite": "none" if is_production else "lax",
        "path": "/",
    }


def set_session_cookie(response: Response, token: str, settings: Settings) -> None:
    response.set_cookie(
        key=settings.auth.cookie_name,
        value=token,
        max_age=settings.auth.jwt_expiry_days * 24 * 60 * 60,
        **cookie_options(settings),
    )


def clear_session_cookie(response: Response, settings: Settings) -> None:
    response.delete_cookie(key=settings.auth.cookie_name, **cookie_options(settings))


async def require_session(request: Request) -> str:
    """Run the authentication gate on the request's session cookie.

    Used as a route dependency, so it resolves before the request body is
    validated: a request without a session never sees a 422.

    Raises:
        UnauthorizedError: If the cookie is absent
        ForbiddenError: If the token fails verification
    """
    container: AsyncContainer = request.state.dishka_container
    auth_service = await container.get(AuthService)
    settings = await container.get(Settings)
    return auth_service.authenticate(request.cookies.get(settings.auth.cookie_name))


# Email of the signed-in user
SessionEmail = Annotated[str, Depends(require_session)]
