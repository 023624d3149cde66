"""Admin user management use cases."""

import logfire
from pydantic import BaseModel

from hive.application.usecase.base import BaseUseCase
from hive.application.usecase.common import ModifiedResponse
from hive.domain.service import AccessPolicy, UserService
from hive.domain.value import UserId

from .common import UserResponse


class SearchUsersRequest(BaseModel):
    """Admin user search."""

    acting_email: str
    search: str = ""


class SearchUsersUseCase(BaseUseCase):
    """Search users by username or email substring (admin only)."""

    def __init__(self, access_policy: AccessPolicy, user_service: UserService) -> None:
        self.access_policy = access_policy
        self.user_service = user_service

    async def execute(self, request: SearchUsersRequest) -> list[UserResponse]:
        await self.access_policy.require_admin(request.acting_email)
        users = await self.user_service.search(request.search)
        return [UserResponse.from_user(user) for user in users]


class PromoteUserRequest(BaseModel):
    """Promote a user to admin."""

    acting_email: str
    user_id: UserId


class PromoteUserUseCase(BaseUseCase):
    """Grant the admin role (admin only)."""

    def __init__(self, access_policy: AccessPolicy, user_service: UserService) -> None:
        self.access_policy = access_policy
        self.user_service = user_service

    async def execute(self, request: PromoteUserRequest) -> ModifiedResponse:
        admin = await self.access_policy.require_admin(request.acting_email)
        modified = await self.user_service.promote_to_admin(request.user_id)
        logfire.info(
            "Admin promotion requested",
            by=admin.email,
            user_id=str(request.user_id),
            modified=modified,
        )
        return ModifiedResponse(modified_count=modified)
