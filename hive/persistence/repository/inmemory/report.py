"""In-memory report repository for testing."""

from typing import Optional

from hive.domain.model import Report
from hive.domain.repository.report import ReportRepository
from hive.domain.value import CommentId, ReportId, ReportStatus


class InMemoryReportRepository(ReportRepository):
    """In-memory implementation of ReportRepository for testing."""

    def __init__(self) -> None:
        self._reports: dict[ReportId, Report] = {}

    async def find_by_id(self, report_id: ReportId) -> Optional[Report]:
        return self._reports.get(report_id)

    async def find_by_comment(self, comment_id: CommentId) -> Optional[Report]:
        for report in self._reports.values():
            if report.comment_id == comment_id:
                return report
        return None

    async def find_all(self) -> list[Report]:
        """Find all reports, newest first."""
        return sorted(self._reports.values(), key=lambda r: r.created_at, reverse=True)

    async def save(self, report: Report) -> Optional[Report]:
        """Insert a report unless the comment already has one."""
        if await self.find_by_comment(report.comment_id) is not None:
            return None
        self._reports[report.id] = report
        return report

    async def set_status(self, report_id: ReportId, status: ReportStatus) -> int:
        report = self._reports.get(report_id)
        if report is None:
            return 0
        self._reports[report_id] = report.model_copy(update={"status": status})
        return 1

    async def delete(self, report_id: ReportId) -> bool:
        return self._reports.pop(report_id, None) is not None
