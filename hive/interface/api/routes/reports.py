"""Report and moderation routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from hive.application.usecase.common import ModifiedResponse
from hive.application.usecase.moderation import (
    ApplyActionRequest,
    ApplyActionUseCase,
    GetReportRequest,
    GetReportUseCase,
    ListReportsRequest,
    ListReportsUseCase,
    ReportResponse,
    SubmitReportRequest,
    SubmitReportResponse,
    SubmitReportUseCase,
)
from hive.domain.value import CommentId, PostId, ReportId
from hive.interface.api.session import SessionEmail

router = APIRouter(tags=["reports"], route_class=DishkaRoute)


class SubmitReportAPIRequest(BaseModel):
    """API request for reporting a comment."""

    comment_id: UUID
    post_id: UUID | None = None
    comment_text: str | None = None
    commenter_email: str | None = None
    reporter_email: str | None = None
    feedback: str | None = None


class ApplyActionAPIRequest(BaseModel):
    """API request for a moderation action."""

    action: str
    report_id: UUID | None = None
    user_email: str | None = None
    comment_id: UUID | None = None


@router.get("/report/{comment_id}", response_model=ReportResponse | None)
async def get_report(
    comment_id: UUID,
    get_report_use_case: FromDishka[GetReportUseCase],
) -> ReportResponse | None:
    """Fetch the report filed against a comment; null when there is none."""
    return await get_report_use_case.execute(
        GetReportRequest(comment_id=CommentId(comment_id))
    )


@router.post("/reports", response_model=SubmitReportResponse)
async def submit_report(
    request: SubmitReportAPIRequest,
    submit_report_use_case: FromDishka[SubmitReportUseCase],
) -> SubmitReportResponse:
    """Report a comment.

    A comment can only be reported once; a repeat returns a notice with
    ``submitted: false`` and stores nothing.
    """
    return await submit_report_use_case.execute(
        SubmitReportRequest(
            comment_id=CommentId(request.comment_id),
            post_id=PostId(request.post_id) if request.post_id else None,
            comment_text=request.comment_text,
            commenter_email=request.commenter_email,
            reporter_email=request.reporter_email,
            feedback=request.feedback,
        )
    )


@router.get("/reports", response_model=list[ReportResponse])
async def list_reports(
    actor: SessionEmail,
    list_reports_use_case: FromDishka[ListReportsUseCase],
) -> list[ReportResponse]:
    """List all reports, newest first. Admin only.

    Raises:
        UnauthorizedError: Without a session cookie (401)
        ForbiddenError: Bad token or not an admin (403)
    """
    return await list_reports_use_case.execute(ListReportsRequest(acting_email=actor))


@router.patch("/reports/action", response_model=ModifiedResponse)
async def apply_action(
    body: ApplyActionAPIRequest,
    actor: SessionEmail,
    apply_action_use_case: FromDishka[ApplyActionUseCase],
) -> ModifiedResponse:
    """Apply a moderation action. Admin only.

    Example:
        PATCH /reports/action
        {"action": "delete-comment", "report_id": "...", "comment_id": "..."}
    """
    return await apply_action_use_case.execute(
        ApplyActionRequest(
            acting_email=actor,
            action=body.action,
            report_id=ReportId(body.report_id) if body.report_id else None,
            user_email=body.user_email,
            comment_id=CommentId(body.comment_id) if body.comment_id else None,
        )
    )
