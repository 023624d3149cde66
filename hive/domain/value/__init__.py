"""Domain value objects for the forum."""

from hive.domain.value.identifiers import (
    CommentId,
    PaymentId,
    PostId,
    ReportId,
    UserId,
)
from hive.domain.value.types import (
    MembershipTier,
    ModerationAction,
    PostSortField,
    ReportStatus,
    Role,
    SortDirection,
    VoteType,
)

__all__ = [
    "CommentId",
    "MembershipTier",
    "ModerationAction",
    "PaymentId",
    "PostId",
    "PostSortField",
    "ReportId",
    "ReportStatus",
    "Role",
    "SortDirection",
    "UserId",
    "VoteType",
]
