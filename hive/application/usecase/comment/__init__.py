"""Comment use cases."""

from .create_comment import CommentResponse, CreateCommentRequest, CreateCommentUseCase
from .list_comments import ListCommentsRequest, ListCommentsUseCase

__all__ = [
    "CommentResponse",
    "CreateCommentRequest",
    "CreateCommentUseCase",
    "ListCommentsRequest",
    "ListCommentsUseCase",
]
