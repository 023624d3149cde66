"""PostgreSQL repository implementations."""

from hive.persistence.repository.comment import PostgresCommentRepository
from hive.persistence.repository.payment import PostgresPaymentRepository
from hive.persistence.repository.post import PostgresPostRepository
from hive.persistence.repository.report import PostgresReportRepository
from hive.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresPostRepository",
    "PostgresCommentRepository",
    "PostgresReportRepository",
    "PostgresPaymentRepository",
]
