"""User routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, Response, status
from pydantic import BaseModel, Field

from hive.application.usecase.common import ModifiedResponse
from hive.application.usecase.user import (
    CheckUsernameResponse,
    CheckUsernameUseCase,
    GetRoleUseCase,
    GetUserUseCase,
    PromoteUserRequest,
    PromoteUserUseCase,
    RegisterUserRequest,
    RegisterUserResponse,
    RegisterUserUseCase,
    RoleResponse,
    SearchUsersRequest,
    SearchUsersUseCase,
    UserResponse,
)
from hive.domain.error import ValidationError
from hive.domain.value import UserId
from hive.interface.api.session import SessionEmail

router = APIRouter(tags=["users"], route_class=DishkaRoute)


class RegisterUserAPIRequest(BaseModel):
    """API request for registering a user."""

    email: str = Field(min_length=1)
    username: str = Field(min_length=1, max_length=255)
    name: str | None = None
    photo_url: str | None = None


@router.get("/users/check-username/{username}", response_model=CheckUsernameResponse)
async def check_username(
    username: str,
    check_username_use_case: FromDishka[CheckUsernameUseCase],
) -> CheckUsernameResponse:
    """Tell whether a username is already taken."""
    return await check_username_use_case.execute(username)


@router.post("/users", response_model=RegisterUserResponse)
async def register_user(
    body: RegisterUserAPIRequest,
    request: Request,
    response: Response,
    register_user_use_case: FromDishka[RegisterUserUseCase],
) -> RegisterUserResponse:
    """Register a new user, or record a returning user's sign-in.

    Returns 201 when a user was created, 200 for a returning email.

    Raises:
        DuplicateError: If the email is new but the username is taken (409)
    """
    result = await register_user_use_case.execute(
        RegisterUserRequest(
            email=body.email,
            username=body.username,
            name=body.name,
            photo_url=body.photo_url,
            ip=request.client.host if request.client else None,
        )
    )
    response.status_code = (
        status.HTTP_201_CREATED if result.created else status.HTTP_200_OK
    )
    return result


@router.get("/user/{email}", response_model=UserResponse | None)
async def get_user(
    email: str,
    get_user_use_case: FromDishka[GetUserUseCase],
) -> UserResponse | None:
    """Fetch a user by email; null when there is none."""
    return await get_user_use_case.execute(email)


@router.get("/role", response_model=RoleResponse)
async def get_role(
    get_role_use_case: FromDishka[GetRoleUseCase],
    email: str | None = None,
) -> RoleResponse:
    """Fetch a user's role.

    Raises:
        ValidationError: If no email was given (400)
        NotFoundError: If no user has the email (404)
    """
    if not email:
        raise ValidationError("Email is required")
    return await get_role_use_case.execute(email)


@router.get("/admin/users", response_model=list[UserResponse])
async def search_users(
    actor: SessionEmail,
    search_users_use_case: FromDishka[SearchUsersUseCase],
    search: str = "",
) -> list[UserResponse]:
    """Search users by username or email substring. Admin only."""
    return await search_users_use_case.execute(
        SearchUsersRequest(acting_email=actor, search=search)
    )


@router.patch("/makeAdmin/{user_id}", response_model=ModifiedResponse)
async def make_admin(
    user_id: UUID,
    actor: SessionEmail,
    promote_user_use_case: FromDishka[PromoteUserUseCase],
) -> ModifiedResponse:
    """Promote a user to admin. Admin only."""
    return await promote_user_use_case.execute(
        PromoteUserRequest(acting_email=actor, user_id=UserId(user_id))
    )
