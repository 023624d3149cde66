"""Domain model entities for the forum."""

from hive.domain.model.comment import Comment
from hive.domain.model.payment import Payment
from hive.domain.model.post import Post
from hive.domain.model.report import Report
from hive.domain.model.user import User

__all__ = [
    "Comment",
    "Payment",
    "Post",
    "Report",
    "User",
]
