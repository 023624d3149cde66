"""Moderation domain service: report lifecycle for flagged comments."""

import logfire

from hive.domain.error import ValidationError
from hive.domain.model import Report
from hive.domain.repository import ReportRepository
from hive.domain.value import CommentId, ModerationAction, ReportId, ReportStatus

from .base import Service
from .comment_service import CommentService
from .user_service import UserService


class ModerationService(Service):
    """Domain service for comment reports.

    Report states: open (no status) -> resolved via ``ignore``, or removed
    entirely via ``delete-comment``. ``warn`` and ``block`` act on the
    reported user and leave the report untouched.
    """

    def __init__(
        self,
        report_repository: ReportRepository,
        comment_service: CommentService,
        user_service: UserService,
    ) -> None:
        """Initialize moderation service.

        Args:
            report_repository: Report repository
            comment_service: Comment domain service
            user_service: User domain service
        """
        self.report_repository = report_repository
        self.comment_service = comment_service
        self.user_service = user_service

    async def submit_report(self, report: Report) -> Report | None:
        """File a report against a comment.

        A comment can be reported once; later submissions for the same
        comment are dropped whatever the status of the existing report.
        The store enforces one report per comment, so a concurrent
        duplicate that passes the lookup is dropped on insert.

        Args:
            report: New report

        Returns:
            The saved report, or None if the comment was already reported
        """
        with logfire.span(
            "moderation_service.submit_report", comment_id=str(report.comment_id)
        ):
            existing = await self.report_repository.find_by_comment(report.comment_id)
            if existing is not None:
                logfire.info(
                    "Duplicate report ignored",
                    comment_id=str(report.comment_id),
                    existing_report_id=str(existing.id),
                )
                return None

            saved = await self.report_repository.save(report)
            if saved is None:
                logfire.info(
                    "Duplicate report ignored", comment_id=str(report.comment_id)
                )
                return None

            logfire.info(
                "Report submitted",
                report_id=str(saved.id),
                comment_id=str(saved.comment_id),
            )
            return saved

    async def get_report_for_comment(self, comment_id: CommentId) -> Report | None:
        """Get the report filed against a comment, if any."""
        return await self.report_repository.find_by_comment(comment_id)

    async def list_reports(self) -> list[Report]:
        """List all reports, newest first."""
        with logfire.span("moderation_service.list_reports"):
            reports = await self.report_repository.find_all()
            logfire.info("Reports listed", count=len(reports))
            return reports

    async def apply_action(
        self,
        action: str,
        report_id: ReportId | None = None,
        user_email: str | None = None,
        comment_id: CommentId | None = None,
    ) -> ModerationAction | None:
        """Apply a moderation action.

        Unknown action tags are accepted and do nothing.

        Args:
            action: Action tag (ignore, warn, delete-comment, block)
            report_id: Report being handled
            user_email: Author of the reported comment
            comment_id: Reported comment

        Returns:
            The applied action, None for unknown tags

        Raises:
            ValidationError: If a field the action needs is missing
        """
        try:
            kind = ModerationAction(action)
        except ValueError:
            logfire.warn("Unknown moderation action ignored", action=action)
            return None

        with logfire.span(
            "moderation_service.apply_action",
            action=kind.value,
            report_id=str(report_id) if report_id else None,
        ):
            if kind == ModerationAction.IGNORE:
                if report_id is None:
                    raise ValidationError("report_id is required to ignore a report")
                await self.report_repository.set_status(
                    report_id, ReportStatus.RESOLVED
                )
            elif kind == ModerationAction.WARN:
                if not user_email:
                    raise ValidationError("user_email is required to warn a user")
                await self.user_service.warn(user_email)
            elif kind == ModerationAction.DELETE_COMMENT:
                if comment_id is None or report_id is None:
                    raise ValidationError(
                        "comment_id and report_id are required to delete a comment"
                    )
                # Best-effort: the report goes even if the comment is already gone
                await self.comment_service.delete_comment(comment_id)
                await self.report_repository.delete(report_id)
            elif kind == ModerationAction.BLOCK:
                if not user_email:
                    raise ValidationError("user_email is required to block a user")
                await self.user_service.block(user_email)

            logfire.info("Moderation action applied", action=kind.value)
            return kind
