"""Authentication routes."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Response
from pydantic import BaseModel

from hive.config import Settings
from hive.domain.service import JWTService
from hive.interface.api.session import clear_session_cookie, set_session_cookie

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


class SetCookieRequest(BaseModel):
    """Identity the frontend signed in with."""

    email: str


class SuccessResponse(BaseModel):
    success: bool


@router.post("/set-cookie", response_model=SuccessResponse)
async def set_cookie(
    request: SetCookieRequest,
    response: Response,
    jwt_service: FromDishka[JWTService],
    settings: FromDishka[Settings],
) -> SuccessResponse:
    """Issue a session token for the email and set it as an HttpOnly cookie.

    The frontend authenticates users itself; this endpoint trusts the email
    it is given.

    Example:
        POST /auth/set-cookie
        {"email": "alice@example.com"}

        Sets cookie: jwtToken
    """
    token = jwt_service.issue(request.email)
    set_session_cookie(response, token, settings)

    logger.info(
        f"Session cookie set: environment={settings.environment}, "
        f"secure={settings.is_production}"
    )
    return SuccessResponse(success=True)


@router.post("/clear-cookies", response_model=SuccessResponse)
async def clear_cookies(
    response: Response,
    settings: FromDishka[Settings],
) -> SuccessResponse:
    """Clear the session cookie.

    Args:
        response: FastAPI response object
        settings: Application settings from DI
    """
    # Delete with the same attributes the cookie was set with
    clear_session_cookie(response, settings)
    logger.info("Session cookie cleared")
    return SuccessResponse(success=True)
