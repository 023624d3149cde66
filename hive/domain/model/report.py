"""Report entity for flagged comments."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from hive.domain.model.common import DomainModel, utc_now
from hive.domain.value import CommentId, PostId, ReportId, ReportStatus


class Report(DomainModel):
    """A flagged comment awaiting or past moderation.

    A report with no status is open.
    """

    id: ReportId
    comment_id: CommentId
    post_id: Optional[PostId] = None
    comment_text: Optional[str] = None
    commenter_email: Optional[str] = None
    reporter_email: Optional[str] = None
    feedback: Optional[str] = None
    status: Optional[ReportStatus] = None
    created_at: datetime = Field(default_factory=utc_now)

    @property
    def is_open(self) -> bool:
        return self.status != ReportStatus.RESOLVED
