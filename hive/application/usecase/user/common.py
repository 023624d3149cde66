"""Shared user response schema."""

from datetime import datetime

from pydantic import BaseModel

from hive.domain.model import User


class UserResponse(BaseModel):
    """User as returned to clients."""

    user_id: str
    email: str
    username: str
    name: str | None
    photo_url: str | None
    role: str | None
    membership: str
    post_limit: int
    is_blocked: bool
    warning: bool
    badges: list[str]
    created_at: datetime
    last_sign_in: datetime | None

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(
            user_id=str(user.id),
            email=user.email,
            username=user.username,
            name=user.name,
            photo_url=user.photo_url,
            role=user.role.value if user.role else None,
            membership=user.membership.value,
            post_limit=user.post_limit,
            is_blocked=user.is_blocked,
            warning=user.warning,
            badges=list(user.badges),
            created_at=user.created_at,
            last_sign_in=user.last_sign_in,
        )
