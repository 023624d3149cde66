"""Test configuration and fixtures."""

from uuid import uuid4

import logfire

from hive.domain.model import Comment, Post, Report, User
from hive.domain.value import (
    CommentId,
    MembershipTier,
    PostId,
    ReportId,
    Role,
    UserId,
)

# Spans and events are recorded but never exported or printed
logfire.configure(send_to_logfire=False, console=False)


def make_user(
    email: str = "alice@example.com",
    username: str | None = None,
    role: Role | None = None,
    membership: MembershipTier = MembershipTier.NON_MEMBER,
) -> User:
    """Build a user with sensible defaults."""
    return User(
        id=UserId(uuid4()),
        email=email,
        username=username or email.split("@")[0],
        name="Test User",
        role=role,
        membership=membership,
    )


def make_post(author_email: str = "alice@example.com", **overrides) -> Post:
    """Build a post with sensible defaults."""
    fields = {
        "id": PostId(uuid4()),
        "author_email": author_email,
        "author_name": "Test User",
        "title": "Test Post",
        "description": "Test content",
        "tag": "general",
    }
    fields.update(overrides)
    return Post(**fields)


def make_comment(post_id: PostId | None = None, **overrides) -> Comment:
    """Build a comment with sensible defaults."""
    fields = {
        "id": CommentId(uuid4()),
        "post_id": post_id or PostId(uuid4()),
        "author_email": "bob@example.com",
        "text": "Nice post",
    }
    fields.update(overrides)
    return Comment(**fields)


def make_report(comment: Comment, **overrides) -> Report:
    """Build an open report against a comment."""
    fields = {
        "id": ReportId(uuid4()),
        "comment_id": comment.id,
        "post_id": comment.post_id,
        "comment_text": comment.text,
        "commenter_email": comment.author_email,
        "reporter_email": "carol@example.com",
        "feedback": "Spam",
    }
    fields.update(overrides)
    return Report(**fields)
