"""Enumerated domain values."""

from enum import Enum


class Role(str, Enum):
    """User roles. Users without a role are regular members of the forum."""

    ADMIN = "admin"


class MembershipTier(str, Enum):
    """Paid membership tier, tracked independently of the role."""

    MEMBER = "member"
    NON_MEMBER = "non-member"


class VoteType(str, Enum):
    """Direction of a vote on a post."""

    UP = "up"
    DOWN = "down"


class ReportStatus(str, Enum):
    """Report status. Reports without a status are open."""

    RESOLVED = "resolved"


class ModerationAction(str, Enum):
    """Actions an administrator can apply to a report."""

    IGNORE = "ignore"
    WARN = "warn"
    DELETE_COMMENT = "delete-comment"
    BLOCK = "block"


class PostSortField(str, Enum):
    """Post listing orderings."""

    POPULARITY = "popularity"  # up_vote - down_vote
    DATE = "date"  # created_at


class SortDirection(str, Enum):
    """Sort direction."""

    ASC = "asc"
    DESC = "desc"
