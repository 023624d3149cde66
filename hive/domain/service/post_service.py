"""Post domain service."""

import logfire

from hive.domain.error import NotFoundError
from hive.domain.model import Post
from hive.domain.repository import PostRepository
from hive.domain.value import PostId, PostSortField, SortDirection, VoteType

from .base import Service


class PostService(Service):
    """Domain service for post operations."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def list_posts(
        self,
        sort: PostSortField | None,
        direction: SortDirection,
        limit: int,
        offset: int,
    ) -> list[Post]:
        """List posts ordered by popularity, date, or newest first by default."""
        with logfire.span(
            "post_service.list_posts",
            sort=sort.value if sort else None,
            direction=direction.value,
            limit=limit,
            offset=offset,
        ):
            return await self.post_repository.find_all(
                sort=sort, direction=direction, limit=limit, offset=offset
            )

    async def count_posts(self) -> int:
        """Count all posts."""
        return await self.post_repository.count()

    async def search_by_tag(self, tag: str, limit: int, offset: int) -> list[Post]:
        """Search posts by tag substring."""
        with logfire.span("post_service.search_by_tag", tag=tag):
            posts = await self.post_repository.search_by_tag(
                tag.strip(), limit=limit, offset=offset
            )
            logfire.info("Tag search completed", tag=tag, count=len(posts))
            return posts

    async def get_post_by_id(self, post_id: PostId) -> Post | None:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.get_post_by_id", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)

            if post:
                logfire.info("Post found", post_id=str(post_id), title=post.title)
            else:
                logfire.warn("Post not found", post_id=str(post_id))

            return post

    async def get_post(self, post_id: PostId) -> Post:
        """Get a post by ID.

        Raises:
            NotFoundError: If post not found
        """
        post = await self.get_post_by_id(post_id)
        if post is None:
            raise NotFoundError("Post", str(post_id))
        return post

    async def list_by_author(self, author_email: str, limit: int | None) -> list[Post]:
        """List an author's posts, newest first."""
        return await self.post_repository.find_by_author(author_email, limit=limit)

    async def count_by_author(self, author_email: str) -> int:
        """Count an author's posts."""
        return await self.post_repository.count_by_author(author_email)

    async def save_post(self, post: Post) -> Post:
        """Save a post.

        Args:
            post: Post to save

        Returns:
            Saved post
        """
        with logfire.span(
            "post_service.save_post", post_id=str(post.id), title=post.title
        ):
            saved = await self.post_repository.save(post)
            logfire.info("Post saved", post_id=str(saved.id))
            return saved

    async def delete_post(self, post_id: PostId) -> bool:
        """Hard-delete a post."""
        with logfire.span("post_service.delete_post", post_id=str(post_id)):
            deleted = await self.post_repository.delete(post_id)
            logfire.info("Post deleted", post_id=str(post_id), deleted=deleted)
            return deleted

    async def vote(self, post_id: PostId, vote_type: VoteType) -> int:
        """Increment a post's up or down vote counter.

        Returns:
            Number of modified posts
        """
        with logfire.span(
            "post_service.vote", post_id=str(post_id), vote_type=vote_type.value
        ):
            modified = await self.post_repository.increment_vote(post_id, vote_type)
            if not modified:
                logfire.warn("Vote on unknown post", post_id=str(post_id))
            return modified
