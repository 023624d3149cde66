"""Domain services."""

from .access_policy import AccessPolicy
from .auth_service import AuthService
from .base import Service
from .comment_service import CommentService
from .jwt_service import JWTService
from .moderation_service import ModerationService
from .payment_service import PaymentProcessor, PaymentService
from .post_service import PostService
from .quota_service import QuotaService
from .user_service import UserService

__all__ = [
    "AccessPolicy",
    "AuthService",
    "CommentService",
    "JWTService",
    "ModerationService",
    "PaymentProcessor",
    "PaymentService",
    "PostService",
    "QuotaService",
    "Service",
    "UserService",
]
