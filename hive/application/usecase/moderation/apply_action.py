"""Apply moderation action use case."""

import logfire
from pydantic import BaseModel

from hive.application.usecase.base import BaseUseCase
from hive.application.usecase.common import ModifiedResponse
from hive.domain.service import AccessPolicy, ModerationService
from hive.domain.value import CommentId, ReportId


class ApplyActionRequest(BaseModel):
    """Moderation action request.

    Which of the optional fields are needed depends on the action.
    """

    acting_email: str
    action: str
    report_id: ReportId | None = None
    user_email: str | None = None
    comment_id: CommentId | None = None


class ApplyActionUseCase(BaseUseCase):
    """Apply ignore, warn, delete-comment or block to a report (admin only)."""

    def __init__(
        self, access_policy: AccessPolicy, moderation_service: ModerationService
    ) -> None:
        """Initialize apply action use case.

        Args:
            access_policy: Authorization policy
            moderation_service: Moderation domain service
        """
        self.access_policy = access_policy
        self.moderation_service = moderation_service

    async def execute(self, request: ApplyActionRequest) -> ModifiedResponse:
        """Apply the action.

        Unknown actions do nothing and still report one modification.

        Raises:
            UnauthorizedError: If no identity was established
            ForbiddenError: If the acting user is not an admin
            ValidationError: If a field the action needs is missing
        """
        admin = await self.access_policy.require_admin(request.acting_email)
        applied = await self.moderation_service.apply_action(
            request.action,
            report_id=request.report_id,
            user_email=request.user_email,
            comment_id=request.comment_id,
        )
        logfire.info(
            "Moderation request handled",
            admin=admin.email,
            action=request.action,
            applied=applied.value if applied else None,
        )
        return ModifiedResponse(modified_count=1)
