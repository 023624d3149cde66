"""PostgreSQL implementation of Report repository."""

from typing import List, Optional

import logfire
from sqlalchemy import delete, desc, select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from hive.domain.model import Report
from hive.domain.repository.report import ReportRepository
from hive.domain.value import CommentId, ReportId, ReportStatus
from hive.persistence.mappers import report_to_dict, row_to_report
from hive.persistence.tables import reports_table


class PostgresReportRepository(ReportRepository):
    """PostgreSQL implementation of ReportRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, report_id: ReportId) -> Optional[Report]:
        """Find a report by ID."""
        stmt = select(reports_table).where(reports_table.c.id == report_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_report(row._asdict()) if row else None

    async def find_by_comment(self, comment_id: CommentId) -> Optional[Report]:
        """Find the report referencing a comment."""
        stmt = select(reports_table).where(reports_table.c.comment_id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_report(row._asdict()) if row else None

    async def find_all(self) -> List[Report]:
        """Find all reports, newest first."""
        with logfire.span("report_repository.find_all"):
            stmt = select(reports_table).order_by(desc(reports_table.c.created_at))
            result = await self.session.execute(stmt)
            return [row_to_report(row._asdict()) for row in result.fetchall()]

    async def save(self, report: Report) -> Optional[Report]:
        """Insert a report unless the comment already has one."""
        with logfire.span(
            "report_repository.save", comment_id=str(report.comment_id)
        ):
            stmt = (
                insert(reports_table)
                .values(**report_to_dict(report))
                .on_conflict_do_nothing(index_elements=[reports_table.c.comment_id])
                .returning(reports_table.c.id)
            )
            result = await self.session.execute(stmt)
            inserted = result.fetchone()
            await self.session.flush()

            if inserted is None:
                logfire.warn(
                    "Report insert skipped on conflict",
                    comment_id=str(report.comment_id),
                )
                return None
            return report

    async def set_status(self, report_id: ReportId, status: ReportStatus) -> int:
        """Set a report's status."""
        stmt = (
            update(reports_table)
            .where(reports_table.c.id == report_id)
            .values(status=status.value)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def delete(self, report_id: ReportId) -> bool:
        """Delete a report."""
        stmt = delete(reports_table).where(reports_table.c.id == report_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0
