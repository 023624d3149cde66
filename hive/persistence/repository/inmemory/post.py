"""In-memory post repository for testing."""

from typing import Optional

from hive.domain.model import Post
from hive.domain.repository.post import PostRepository
from hive.domain.value import PostId, PostSortField, SortDirection, VoteType


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    def _newest_first(self, posts: list[Post]) -> list[Post]:
        return sorted(posts, key=lambda p: p.created_at, reverse=True)

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_all(
        self,
        sort: Optional[PostSortField] = None,
        direction: SortDirection = SortDirection.DESC,
        limit: int = 5,
        offset: int = 0,
    ) -> list[Post]:
        """Find posts with ordering and pagination."""
        posts = self._newest_first(list(self._posts.values()))
        reverse = direction == SortDirection.DESC

        # Sort (stable, so ties keep newest-first order)
        if sort == PostSortField.POPULARITY:
            posts.sort(key=lambda p: p.vote_difference, reverse=reverse)
        elif sort == PostSortField.DATE:
            posts.sort(key=lambda p: p.created_at, reverse=reverse)

        # Paginate
        return posts[offset : offset + limit]

    async def count(self) -> int:
        return len(self._posts)

    async def count_by_author(self, author_email: str) -> int:
        return sum(1 for p in self._posts.values() if p.author_email == author_email)

    async def find_by_author(
        self, author_email: str, limit: Optional[int] = None
    ) -> list[Post]:
        """Find an author's posts, newest first."""
        posts = self._newest_first(
            [p for p in self._posts.values() if p.author_email == author_email]
        )
        return posts if limit is None else posts[:limit]

    async def search_by_tag(
        self, tag: str, limit: int = 5, offset: int = 0
    ) -> list[Post]:
        """Case-insensitive substring search on tag, newest first."""
        needle = tag.lower()
        posts = self._newest_first(
            [p for p in self._posts.values() if needle in p.tag.lower()]
        )
        return posts[offset : offset + limit]

    async def save(self, post: Post) -> Post:
        """Insert a post."""
        self._posts[post.id] = post
        return post

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post (hard delete)."""
        return self._posts.pop(post_id, None) is not None

    async def increment_vote(self, post_id: PostId, vote_type: VoteType) -> int:
        """Increment the up or down vote counter by 1."""
        post = self._posts.get(post_id)
        if post is None:
            return 0
        if vote_type == VoteType.UP:
            updated = post.model_copy(update={"up_vote": post.up_vote + 1})
        else:
            updated = post.model_copy(update={"down_vote": post.down_vote + 1})
        self._posts[post_id] = updated
        return 1
