"""Application layer DI providers."""

from dishka import Scope, provide

from hive.application.usecase.comment import CreateCommentUseCase, ListCommentsUseCase
from hive.application.usecase.moderation import (
    ApplyActionUseCase,
    GetReportUseCase,
    ListReportsUseCase,
    SubmitReportUseCase,
)
from hive.application.usecase.payment import (
    CreatePaymentIntentUseCase,
    PurchaseMembershipUseCase,
)
from hive.application.usecase.post import (
    CountAuthorPostsUseCase,
    CountPostsUseCase,
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListAuthorPostsUseCase,
    ListPostsUseCase,
    SearchPostsUseCase,
    VotePostUseCase,
)
from hive.application.usecase.user import (
    CheckUsernameUseCase,
    GetRoleUseCase,
    GetUserUseCase,
    PromoteUserUseCase,
    RegisterUserUseCase,
    SearchUsersUseCase,
)
from hive.config import PostListingSettings
from hive.domain.service import (
    AccessPolicy,
    CommentService,
    ModerationService,
    PaymentService,
    PostService,
    QuotaService,
    UserService,
)
from hive.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Post use cases
    @provide
    def get_create_post_use_case(
        self,
        post_service: PostService,
        user_service: UserService,
        quota_service: QuotaService,
    ) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(
            post_service=post_service,
            user_service=user_service,
            quota_service=quota_service,
        )

    @provide
    def get_delete_post_use_case(
        self, post_service: PostService, quota_service: QuotaService
    ) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(post_service=post_service, quota_service=quota_service)

    @provide
    def get_list_posts_use_case(
        self, post_service: PostService, listing_settings: PostListingSettings
    ) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(
            post_service=post_service, listing_settings=listing_settings
        )

    @provide
    def get_search_posts_use_case(
        self, post_service: PostService, listing_settings: PostListingSettings
    ) -> SearchPostsUseCase:
        """Provide tag search use case."""
        return SearchPostsUseCase(
            post_service=post_service, listing_settings=listing_settings
        )

    @provide
    def get_count_posts_use_case(self, post_service: PostService) -> CountPostsUseCase:
        return CountPostsUseCase(post_service=post_service)

    @provide
    def get_get_post_use_case(self, post_service: PostService) -> GetPostUseCase:
        return GetPostUseCase(post_service=post_service)

    @provide
    def get_list_author_posts_use_case(
        self, post_service: PostService
    ) -> ListAuthorPostsUseCase:
        return ListAuthorPostsUseCase(post_service=post_service)

    @provide
    def get_count_author_posts_use_case(
        self, post_service: PostService
    ) -> CountAuthorPostsUseCase:
        return CountAuthorPostsUseCase(post_service=post_service)

    @provide
    def get_vote_post_use_case(self, post_service: PostService) -> VotePostUseCase:
        """Provide vote use case."""
        return VotePostUseCase(post_service=post_service)

    # Comment use cases
    @provide
    def get_create_comment_use_case(
        self, comment_service: CommentService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(comment_service=comment_service)

    @provide
    def get_list_comments_use_case(
        self, comment_service: CommentService
    ) -> ListCommentsUseCase:
        return ListCommentsUseCase(comment_service=comment_service)

    # User use cases
    @provide
    def get_register_user_use_case(
        self, user_service: UserService
    ) -> RegisterUserUseCase:
        """Provide register user use case."""
        return RegisterUserUseCase(user_service=user_service)

    @provide
    def get_check_username_use_case(
        self, user_service: UserService
    ) -> CheckUsernameUseCase:
        return CheckUsernameUseCase(user_service=user_service)

    @provide
    def get_get_user_use_case(self, user_service: UserService) -> GetUserUseCase:
        return GetUserUseCase(user_service=user_service)

    @provide
    def get_get_role_use_case(self, user_service: UserService) -> GetRoleUseCase:
        return GetRoleUseCase(user_service=user_service)

    @provide
    def get_search_users_use_case(
        self, access_policy: AccessPolicy, user_service: UserService
    ) -> SearchUsersUseCase:
        """Provide admin user search use case."""
        return SearchUsersUseCase(
            access_policy=access_policy, user_service=user_service
        )

    @provide
    def get_promote_user_use_case(
        self, access_policy: AccessPolicy, user_service: UserService
    ) -> PromoteUserUseCase:
        """Provide admin promotion use case."""
        return PromoteUserUseCase(
            access_policy=access_policy, user_service=user_service
        )

    # Moderation use cases
    @provide
    def get_submit_report_use_case(
        self, moderation_service: ModerationService
    ) -> SubmitReportUseCase:
        """Provide submit report use case."""
        return SubmitReportUseCase(moderation_service=moderation_service)

    @provide
    def get_get_report_use_case(
        self, moderation_service: ModerationService
    ) -> GetReportUseCase:
        return GetReportUseCase(moderation_service=moderation_service)

    @provide
    def get_list_reports_use_case(
        self, access_policy: AccessPolicy, moderation_service: ModerationService
    ) -> ListReportsUseCase:
        """Provide admin report listing use case."""
        return ListReportsUseCase(
            access_policy=access_policy, moderation_service=moderation_service
        )

    @provide
    def get_apply_action_use_case(
        self, access_policy: AccessPolicy, moderation_service: ModerationService
    ) -> ApplyActionUseCase:
        """Provide moderation action use case."""
        return ApplyActionUseCase(
            access_policy=access_policy, moderation_service=moderation_service
        )

    # Payment use cases
    @provide
    def get_create_payment_intent_use_case(
        self, payment_service: PaymentService
    ) -> CreatePaymentIntentUseCase:
        """Provide payment intent use case."""
        return CreatePaymentIntentUseCase(payment_service=payment_service)

    @provide
    def get_purchase_membership_use_case(
        self, payment_service: PaymentService, quota_service: QuotaService
    ) -> PurchaseMembershipUseCase:
        """Provide membership purchase use case."""
        return PurchaseMembershipUseCase(
            payment_service=payment_service, quota_service=quota_service
        )
