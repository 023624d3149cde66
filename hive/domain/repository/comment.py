"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from hive.domain.model import Comment
from hive.domain.value import CommentId, PostId


class CommentRepository(ABC):
    """Repository for Comment entities."""

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        pass

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments on a post, newest first."""
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Insert a comment."""
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment.

        Returns:
            True if a comment was deleted
        """
        pass
