"""Comment domain service."""

import logfire

from hive.domain.model import Comment
from hive.domain.repository import CommentRepository
from hive.domain.value import CommentId, PostId

from .base import Service


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def create_comment(self, comment: Comment) -> Comment:
        """Save a new comment.

        Args:
            comment: Comment to save

        Returns:
            Saved comment
        """
        with logfire.span(
            "comment_service.create_comment",
            comment_id=str(comment.id),
            post_id=str(comment.post_id),
        ):
            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                post_id=str(saved.post_id),
            )
            return saved

    async def list_for_post(self, post_id: PostId) -> list[Comment]:
        """List comments on a post, newest first."""
        with logfire.span("comment_service.list_for_post", post_id=str(post_id)):
            return await self.comment_repository.find_by_post(post_id)

    async def delete_comment(self, comment_id: CommentId) -> bool:
        """Delete a comment."""
        deleted = await self.comment_repository.delete(comment_id)
        logfire.info("Comment deleted", comment_id=str(comment_id), deleted=deleted)
        return deleted
