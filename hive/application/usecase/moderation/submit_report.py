"""Submit report use case."""

from uuid import uuid4

from pydantic import BaseModel

from hive.application.usecase.base import BaseUseCase
from hive.domain.model import Report
from hive.domain.service import ModerationService
from hive.domain.value import CommentId, PostId, ReportId

DUPLICATE_REPORT_MESSAGE = "Report already exists for this comment"


class SubmitReportRequest(BaseModel):
    """Submit report request."""

    comment_id: CommentId
    post_id: PostId | None = None
    comment_text: str | None = None
    commenter_email: str | None = None
    reporter_email: str | None = None
    feedback: str | None = None


class SubmitReportResponse(BaseModel):
    """Submit report response.

    ``submitted`` is False when the comment had already been reported.
    """

    submitted: bool
    message: str
    report_id: str | None = None


class SubmitReportUseCase(BaseUseCase):
    """Flag a comment for moderation. No session is required."""

    def __init__(self, moderation_service: ModerationService) -> None:
        self.moderation_service = moderation_service

    async def execute(self, request: SubmitReportRequest) -> SubmitReportResponse:
        report = Report(
            id=ReportId(uuid4()),
            comment_id=request.comment_id,
            post_id=request.post_id,
            comment_text=request.comment_text,
            commenter_email=request.commenter_email,
            reporter_email=request.reporter_email,
            feedback=request.feedback,
        )
        saved = await self.moderation_service.submit_report(report)
        if saved is None:
            return SubmitReportResponse(
                submitted=False, message=DUPLICATE_REPORT_MESSAGE
            )
        return SubmitReportResponse(
            submitted=True, message="Report submitted", report_id=str(saved.id)
        )
