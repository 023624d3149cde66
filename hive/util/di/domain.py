"""Domain layer DI providers."""

from dishka import Scope, provide

from hive.config import AuthSettings, PaymentSettings, QuotaSettings
from hive.domain.repository import (
    CommentRepository,
    PaymentRepository,
    PostRepository,
    ReportRepository,
    UserRepository,
)
from hive.domain.service import (
    AccessPolicy,
    AuthService,
    CommentService,
    JWTService,
    ModerationService,
    PaymentProcessor,
    PaymentService,
    PostService,
    QuotaService,
    UserService,
)
from hive.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_auth_service(self, jwt_service: JWTService) -> AuthService:
        """Provide the authentication gate."""
        return AuthService(jwt_service=jwt_service)

    @provide
    def get_access_policy(self, user_repository: UserRepository) -> AccessPolicy:
        """Provide the authorization policy."""
        return AccessPolicy(user_repository=user_repository)

    @provide
    def get_quota_service(
        self, user_repository: UserRepository, quota_settings: QuotaSettings
    ) -> QuotaService:
        """Provide membership quota service."""
        return QuotaService(
            user_repository=user_repository, quota_settings=quota_settings
        )

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_post_service(self, post_repository: PostRepository) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository)

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository=comment_repository)

    @provide
    def get_moderation_service(
        self,
        report_repository: ReportRepository,
        comment_service: CommentService,
        user_service: UserService,
    ) -> ModerationService:
        """Provide moderation domain service."""
        return ModerationService(
            report_repository=report_repository,
            comment_service=comment_service,
            user_service=user_service,
        )

    @provide
    def get_payment_service(
        self,
        payment_processor: PaymentProcessor,
        payment_repository: PaymentRepository,
        payment_settings: PaymentSettings,
    ) -> PaymentService:
        """Provide payment domain service."""
        return PaymentService(
            payment_processor=payment_processor,
            payment_repository=payment_repository,
            payment_settings=payment_settings,
        )
