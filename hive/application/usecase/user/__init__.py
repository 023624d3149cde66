"""User use cases."""

from .admin import (
    PromoteUserRequest,
    PromoteUserUseCase,
    SearchUsersRequest,
    SearchUsersUseCase,
)
from .common import UserResponse
from .lookup import (
    CheckUsernameResponse,
    CheckUsernameUseCase,
    GetRoleUseCase,
    GetUserUseCase,
    RoleResponse,
)
from .register_user import (
    RegisterUserRequest,
    RegisterUserResponse,
    RegisterUserUseCase,
)

__all__ = [
    "CheckUsernameResponse",
    "CheckUsernameUseCase",
    "GetRoleUseCase",
    "GetUserUseCase",
    "PromoteUserRequest",
    "PromoteUserUseCase",
    "RegisterUserRequest",
    "RegisterUserResponse",
    "RegisterUserUseCase",
    "RoleResponse",
    "SearchUsersRequest",
    "SearchUsersUseCase",
    "UserResponse",
]
