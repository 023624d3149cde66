"""Create comment use case."""

from datetime import datetime
from uuid import uuid4

from pydantic import BaseModel

from hive.application.usecase.base import BaseUseCase
from hive.domain.model import Comment
from hive.domain.service import CommentService
from hive.domain.value import CommentId, PostId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: PostId
    text: str
    author_email: str | None = None
    author_name: str | None = None
    author_image: str | None = None


class CommentResponse(BaseModel):
    """Comment as returned to clients."""

    comment_id: str
    post_id: str
    author_email: str | None
    author_name: str | None
    author_image: str | None
    text: str
    created_at: datetime

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentResponse":
        return cls(
            comment_id=str(comment.id),
            post_id=str(comment.post_id),
            author_email=comment.author_email,
            author_name=comment.author_name,
            author_image=comment.author_image,
            text=comment.text,
            created_at=comment.created_at,
        )


class CreateCommentUseCase(BaseUseCase):
    """Use case for commenting on a post.

    Comments are accepted without a session; the post is not checked for
    existence.
    """

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CommentResponse:
        comment = Comment(
            id=CommentId(uuid4()),
            post_id=request.post_id,
            author_email=request.author_email,
            author_name=request.author_name,
            author_image=request.author_image,
            text=request.text,
        )
        saved = await self.comment_service.create_comment(comment)
        return CommentResponse.from_comment(saved)
