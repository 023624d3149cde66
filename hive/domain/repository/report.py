"""Report repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from hive.domain.model import Report
from hive.domain.value import CommentId, ReportId, ReportStatus


class ReportRepository(ABC):
    """Repository for Report entities."""

    @abstractmethod
    async def find_by_id(self, report_id: ReportId) -> Optional[Report]:
        """Find a report by ID."""
        pass

    @abstractmethod
    async def find_by_comment(self, comment_id: CommentId) -> Optional[Report]:
        """Find the report referencing a comment, whatever its status."""
        pass

    @abstractmethod
    async def find_all(self) -> List[Report]:
        """Find all reports, newest first."""
        pass

    @abstractmethod
    async def save(self, report: Report) -> Optional[Report]:
        """Insert a report.

        Returns:
            The saved report, or None if the comment already has one
        """
        pass

    @abstractmethod
    async def set_status(self, report_id: ReportId, status: ReportStatus) -> int:
        """Set a report's status.

        Returns:
            Number of modified reports (0 or 1)
        """
        pass

    @abstractmethod
    async def delete(self, report_id: ReportId) -> bool:
        """Delete a report.

        Returns:
            True if a report was deleted
        """
        pass
