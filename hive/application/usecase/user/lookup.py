"""Public user lookups."""

from pydantic import BaseModel

from hive.application.usecase.base import BaseUseCase
from hive.domain.service import UserService

from .common import UserResponse


class CheckUsernameResponse(BaseModel):
    exists: bool


class CheckUsernameUseCase(BaseUseCase):
    """Tell whether a username is taken."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: str) -> CheckUsernameResponse:
        return CheckUsernameResponse(
            exists=await self.user_service.username_exists(request)
        )


class GetUserUseCase(BaseUseCase):
    """Fetch a user by email; None when absent."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: str) -> UserResponse | None:
        user = await self.user_service.get_user_by_email(request)
        return UserResponse.from_user(user) if user else None


class RoleResponse(BaseModel):
    role: str | None


class GetRoleUseCase(BaseUseCase):
    """Fetch a user's role by email."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: str) -> RoleResponse:
        """Raises NotFoundError when no user has the email."""
        role = await self.user_service.get_role(request)
        return RoleResponse(role=role.value if role else None)
