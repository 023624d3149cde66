"""Register user use case."""

from datetime import datetime, timezone
from uuid import uuid4

import logfire
from pydantic import BaseModel

from hive.application.usecase.base import BaseUseCase
from hive.domain.error import DuplicateError
from hive.domain.model import User
from hive.domain.service import UserService
from hive.domain.value import UserId


class RegisterUserRequest(BaseModel):
    """Register (or sign in) request."""

    email: str
    username: str
    name: str | None = None
    photo_url: str | None = None
    ip: str | None = None  # Client address, filled in by the route


class RegisterUserResponse(BaseModel):
    """Register user response."""

    created: bool
    message: str
    inserted_id: str | None = None


class RegisterUserUseCase(BaseUseCase):
    """Upsert-or-register a user after the frontend signs them in.

    A known email is a returning user: only the sign-in time and address
    are updated and the rest of the payload is ignored.
    """

    def __init__(self, user_service: UserService) -> None:
        """Initialize register user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: RegisterUserRequest) -> RegisterUserResponse:
        """Execute the register flow.

        Raises:
            DuplicateError: If the email is new but the username is taken
        """
        with logfire.span(
            "register_user.execute", email=request.email, username=request.username
        ):
            now = datetime.now(timezone.utc)

            existing = await self.user_service.get_user_by_email(request.email)
            if existing is not None:
                await self.user_service.record_sign_in(request.email, now, request.ip)
                return RegisterUserResponse(
                    created=False, message="Email already exists"
                )

            if await self.user_service.username_exists(request.username):
                logfire.warn("Username already taken", username=request.username)
                raise DuplicateError("Username already exists")

            user = User(
                id=UserId(uuid4()),
                email=request.email,
                username=request.username,
                name=request.name,
                photo_url=request.photo_url,
                created_at=now,
                last_sign_in=now,
                last_sign_in_ip=request.ip,
            )
            saved = await self.user_service.create_user(user)

            return RegisterUserResponse(
                created=True,
                message="User saved successfully",
                inserted_id=str(saved.id),
            )
