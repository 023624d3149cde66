"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .payment import InMemoryPaymentRepository
from .post import InMemoryPostRepository
from .report import InMemoryReportRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryPaymentRepository",
    "InMemoryPostRepository",
    "InMemoryReportRepository",
    "InMemoryUserRepository",
]
