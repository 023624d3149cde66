"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from hive.domain.model import Post
from hive.domain.value import PostId, PostSortField, SortDirection, VoteType


class PostRepository(ABC):
    """Repository for Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        sort: Optional[PostSortField] = None,
        direction: SortDirection = SortDirection.DESC,
        limit: int = 5,
        offset: int = 0,
    ) -> List[Post]:
        """Find posts with ordering and pagination.

        Args:
            sort: Popularity (up_vote - down_vote) or date; None means newest first
            direction: Sort direction, ignored when sort is None
            limit: Maximum number of posts to return
            offset: Number of posts to skip

        Returns:
            List of posts
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all posts."""
        pass

    @abstractmethod
    async def count_by_author(self, author_email: str) -> int:
        """Count posts written by the given author."""
        pass

    @abstractmethod
    async def find_by_author(
        self, author_email: str, limit: Optional[int] = None
    ) -> List[Post]:
        """Find an author's posts, newest first.

        Args:
            author_email: The author's email
            limit: Maximum number of posts to return (None for all)

        Returns:
            List of posts by the author
        """
        pass

    @abstractmethod
    async def search_by_tag(
        self, tag: str, limit: int = 5, offset: int = 0
    ) -> List[Post]:
        """Find posts whose tag contains the given text, newest first.

        Matching is case-insensitive.
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Insert a post.

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> bool:
        """Delete a post (hard delete).

        Returns:
            True if a post was deleted
        """
        pass

    @abstractmethod
    async def increment_vote(self, post_id: PostId, vote_type: VoteType) -> int:
        """Atomically increment the up or down vote counter by 1.

        Returns:
            Number of modified posts (0 or 1)
        """
        pass
