"""Report lookup and listing use cases."""

from pydantic import BaseModel

from hive.application.usecase.base import BaseUseCase
from hive.domain.service import AccessPolicy, ModerationService
from hive.domain.value import CommentId

from .common import ReportResponse


class GetReportRequest(BaseModel):
    comment_id: CommentId


class GetReportUseCase(BaseUseCase):
    """Fetch the report filed against a comment, or None."""

    def __init__(self, moderation_service: ModerationService) -> None:
        self.moderation_service = moderation_service

    async def execute(self, request: GetReportRequest) -> ReportResponse | None:
        report = await self.moderation_service.get_report_for_comment(
            request.comment_id
        )
        return ReportResponse.from_report(report) if report else None


class ListReportsRequest(BaseModel):
    acting_email: str


class ListReportsUseCase(BaseUseCase):
    """List every report, newest first (admin only)."""

    def __init__(
        self, access_policy: AccessPolicy, moderation_service: ModerationService
    ) -> None:
        self.access_policy = access_policy
        self.moderation_service = moderation_service

    async def execute(self, request: ListReportsRequest) -> list[ReportResponse]:
        await self.access_policy.require_admin(request.acting_email)
        reports = await self.moderation_service.list_reports()
        return [ReportResponse.from_report(report) for report in reports]
