"""Shared report response schema."""

from datetime import datetime

from pydantic import BaseModel

from hive.domain.model import Report


class ReportResponse(BaseModel):
    """Report as returned to clients."""

    report_id: str
    comment_id: str
    post_id: str | None
    comment_text: str | None
    commenter_email: str | None
    reporter_email: str | None
    feedback: str | None
    status: str | None
    created_at: datetime

    @classmethod
    def from_report(cls, report: Report) -> "ReportResponse":
        return cls(
            report_id=str(report.id),
            comment_id=str(report.comment_id),
            post_id=str(report.post_id) if report.post_id else None,
            comment_text=report.comment_text,
            commenter_email=report.commenter_email,
            reporter_email=report.reporter_email,
            feedback=report.feedback,
            status=report.status.value if report.status else None,
            created_at=report.created_at,
        )
