"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from hive.domain.model import Comment, Payment, Post, Report, User
from hive.domain.value import (
    CommentId,
    MembershipTier,
    PaymentId,
    PostId,
    ReportId,
    ReportStatus,
    Role,
    UserId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        email=row["email"],
        username=row["username"],
        name=row.get("name"),
        photo_url=row.get("photo_url"),
        role=Role(row["role"]) if row.get("role") else None,
        membership=MembershipTier(row["membership"]),
        post_limit=row["post_limit"],
        is_blocked=row["is_blocked"],
        warning=row["warning"],
        badges=list(row.get("badges") or []),
        created_at=row["created_at"],
        last_sign_in=row.get("last_sign_in"),
        last_sign_in_ip=row.get("last_sign_in_ip"),
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    data = user.model_dump()
    data["role"] = user.role.value if user.role else None
    data["membership"] = user.membership.value
    return data


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model."""
    return Post(
        id=PostId(_uuid(row["id"])),
        author_email=row["author_email"],
        author_name=row.get("author_name"),
        author_image=row.get("author_image"),
        title=row["title"],
        description=row["description"],
        tag=row["tag"],
        up_vote=row["up_vote"],
        down_vote=row["down_vote"],
        created_at=row["created_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict."""
    return post.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    return Comment(
        id=CommentId(_uuid(row["id"])),
        post_id=PostId(_uuid(row["post_id"])),
        author_email=row.get("author_email"),
        author_name=row.get("author_name"),
        author_image=row.get("author_image"),
        text=row["text"],
        created_at=row["created_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return comment.model_dump()


def row_to_report(row: Dict[str, Any]) -> Report:
    """Convert database row to Report domain model."""
    return Report(
        id=ReportId(_uuid(row["id"])),
        comment_id=CommentId(_uuid(row["comment_id"])),
        post_id=PostId(_uuid(row["post_id"])) if row.get("post_id") else None,
        comment_text=row.get("comment_text"),
        commenter_email=row.get("commenter_email"),
        reporter_email=row.get("reporter_email"),
        feedback=row.get("feedback"),
        status=ReportStatus(row["status"]) if row.get("status") else None,
        created_at=row["created_at"],
    )


def report_to_dict(report: Report) -> Dict[str, Any]:
    """Convert Report domain model to database dict."""
    data = report.model_dump()
    data["status"] = report.status.value if report.status else None
    return data


def row_to_payment(row: Dict[str, Any]) -> Payment:
    """Convert database row to Payment domain model."""
    return Payment(
        id=PaymentId(_uuid(row["id"])),
        email=row["email"],
        amount=row["amount"],
        transaction_id=row.get("transaction_id"),
        created_at=row["created_at"],
    )


def payment_to_dict(payment: Payment) -> Dict[str, Any]:
    """Convert Payment domain model to database dict."""
    return payment.model_dump()
