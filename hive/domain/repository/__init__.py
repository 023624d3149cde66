"""Repository interfaces for the forum domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from hive.domain.repository.comment import CommentRepository
from hive.domain.repository.payment import PaymentRepository
from hive.domain.repository.post import PostRepository
from hive.domain.repository.report import ReportRepository
from hive.domain.repository.user import UserRepository

__all__ = [
    "CommentRepository",
    "PaymentRepository",
    "PostRepository",
    "ReportRepository",
    "UserRepository",
]
