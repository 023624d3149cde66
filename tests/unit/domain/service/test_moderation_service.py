"""Unit tests for the moderation workflow."""

import pytest

from hive.domain.error import ValidationError
from hive.domain.repository import CommentRepository, ReportRepository, UserRepository
from hive.domain.service import ModerationService
from hive.domain.value import ModerationAction, ReportStatus
from tests.conftest import make_comment, make_report, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestSubmitReport:
    """Tests for report de-duplication."""

    @pytest.mark.asyncio
    async def test_first_report_is_stored_open(self, unit_env):
        moderation = await unit_env.get(ModerationService)
        comment = make_comment()

        saved = await moderation.submit_report(make_report(comment))

        assert saved is not None
        assert saved.is_open
        stored = await moderation.get_report_for_comment(comment.id)
        assert stored.id == saved.id

    @pytest.mark.asyncio
    async def test_second_report_for_same_comment_is_dropped(self, unit_env):
        moderation = await unit_env.get(ModerationService)
        report_repo = await unit_env.get(ReportRepository)
        comment = make_comment()
        await moderation.submit_report(make_report(comment))

        duplicate = await moderation.submit_report(
            make_report(comment, reporter_email="dave@example.com")
        )

        assert duplicate is None
        assert len(await report_repo.find_all()) == 1

    @pytest.mark.asyncio
    async def test_resolved_report_still_blocks_new_ones(self, unit_env):
        moderation = await unit_env.get(ModerationService)
        comment = make_comment()
        first = await moderation.submit_report(make_report(comment))
        await moderation.apply_action("ignore", report_id=first.id)

        assert await moderation.submit_report(make_report(comment)) is None


class TestApplyAction:
    """Tests for each moderation action."""

    @pytest.mark.asyncio
    async def test_ignore_resolves_report(self, unit_env):
        moderation = await unit_env.get(ModerationService)
        report_repo = await unit_env.get(ReportRepository)
        report = await moderation.submit_report(make_report(make_comment()))

        applied = await moderation.apply_action("ignore", report_id=report.id)

        assert applied == ModerationAction.IGNORE
        stored = await report_repo.find_by_id(report.id)
        assert stored.status == ReportStatus.RESOLVED

    @pytest.mark.asyncio
    async def test_warn_flags_user(self, unit_env):
        moderation = await unit_env.get(ModerationService)
        user_repo = await unit_env.get(UserRepository)
        await user_repo.save(make_user("bob@example.com"))

        await moderation.apply_action("warn", user_email="bob@example.com")

        user = await user_repo.find_by_email("bob@example.com")
        assert user.warning is True
        assert user.is_blocked is False

    @pytest.mark.asyncio
    async def test_block_blocks_user(self, unit_env):
        moderation = await unit_env.get(ModerationService)
        user_repo = await unit_env.get(UserRepository)
        await user_repo.save(make_user("bob@example.com"))

        await moderation.apply_action("block", user_email="bob@example.com")

        user = await user_repo.find_by_email("bob@example.com")
        assert user.is_blocked is True

    @pytest.mark.asyncio
    async def test_delete_comment_removes_comment_and_report(self, unit_env):
        moderation = await unit_env.get(ModerationService)
        comment_repo = await unit_env.get(CommentRepository)
        report_repo = await unit_env.get(ReportRepository)
        comment = await comment_repo.save(make_comment())
        report = await moderation.submit_report(make_report(comment))

        await moderation.apply_action(
            "delete-comment", report_id=report.id, comment_id=comment.id
        )

        assert await comment_repo.find_by_id(comment.id) is None
        assert await report_repo.find_by_id(report.id) is None

    @pytest.mark.asyncio
    async def test_unknown_action_is_a_no_op(self, unit_env):
        moderation = await unit_env.get(ModerationService)
        report = await moderation.submit_report(make_report(make_comment()))

        applied = await moderation.apply_action("escalate", report_id=report.id)

        assert applied is None
        stored = await moderation.get_report_for_comment(report.comment_id)
        assert stored.is_open

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "action,fields",
        [
            ("ignore", {}),
            ("warn", {}),
            ("block", {}),
            ("delete-comment", {"comment_id": None, "report_id": None}),
        ],
    )
    async def test_missing_fields_are_rejected(self, unit_env, action, fields):
        moderation = await unit_env.get(ModerationService)

        with pytest.raises(ValidationError):
            await moderation.apply_action(action, **fields)
