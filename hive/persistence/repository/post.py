"""PostgreSQL implementation of Post repository."""

from typing import List, Optional

import logfire
from sqlalchemy import asc, delete, desc, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from hive.domain.model import Post
from hive.domain.repository.post import PostRepository
from hive.domain.value import PostId, PostSortField, SortDirection, VoteType
from hive.persistence.mappers import post_to_dict, row_to_post
from hive.persistence.repository._search import ESCAPE_CHAR, contains_pattern
from hive.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=str(post_id)):
            stmt = select(posts_table).where(posts_table.c.id == post_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if not row:
                logfire.warn("Post not found", post_id=str(post_id))
                return None

            return row_to_post(row._asdict())

    async def find_all(
        self,
        sort: Optional[PostSortField] = None,
        direction: SortDirection = SortDirection.DESC,
        limit: int = 5,
        offset: int = 0,
    ) -> List[Post]:
        """Find posts with ordering and pagination."""
        with logfire.span(
            "post_repository.find_all",
            sort=sort.value if sort else None,
            direction=direction.value,
            limit=limit,
            offset=offset,
        ):
            order = asc if direction == SortDirection.ASC else desc

            stmt = select(posts_table)
            if sort == PostSortField.POPULARITY:
                stmt = stmt.order_by(
                    order(posts_table.c.up_vote - posts_table.c.down_vote),
                    desc(posts_table.c.created_at),
                )
            elif sort == PostSortField.DATE:
                stmt = stmt.order_by(order(posts_table.c.created_at))
            else:
                stmt = stmt.order_by(desc(posts_table.c.created_at))

            stmt = stmt.limit(limit).offset(offset)

            result = await self.session.execute(stmt)
            posts = [row_to_post(row._asdict()) for row in result.fetchall()]

            logfire.info("Posts retrieved", count=len(posts))
            return posts

    async def count(self) -> int:
        """Count all posts."""
        stmt = select(func.count()).select_from(posts_table)
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def count_by_author(self, author_email: str) -> int:
        """Count posts written by the given author."""
        stmt = (
            select(func.count())
            .select_from(posts_table)
            .where(posts_table.c.author_email == author_email)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def find_by_author(
        self, author_email: str, limit: Optional[int] = None
    ) -> List[Post]:
        """Find an author's posts, newest first."""
        with logfire.span(
            "post_repository.find_by_author", author_email=author_email, limit=limit
        ):
            stmt = (
                select(posts_table)
                .where(posts_table.c.author_email == author_email)
                .order_by(desc(posts_table.c.created_at))
            )
            if limit is not None:
                stmt = stmt.limit(limit)

            result = await self.session.execute(stmt)
            return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def search_by_tag(
        self, tag: str, limit: int = 5, offset: int = 0
    ) -> List[Post]:
        """Find posts whose tag contains the given text, newest first."""
        with logfire.span("post_repository.search_by_tag", tag=tag):
            stmt = (
                select(posts_table)
                .where(
                    posts_table.c.tag.ilike(contains_pattern(tag), escape=ESCAPE_CHAR)
                )
                .order_by(desc(posts_table.c.created_at))
                .limit(limit)
                .offset(offset)
            )
            result = await self.session.execute(stmt)
            return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def save(self, post: Post) -> Post:
        """Insert a post."""
        with logfire.span("post_repository.save", post_id=str(post.id)):
            stmt = insert(posts_table).values(**post_to_dict(post))
            await self.session.execute(stmt)
            await self.session.flush()
            logfire.info("Post saved successfully", post_id=str(post.id))
            return post

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post (hard delete)."""
        stmt = delete(posts_table).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def increment_vote(self, post_id: PostId, vote_type: VoteType) -> int:
        """Atomically increment the up or down vote counter by 1."""
        column = (
            posts_table.c.up_vote
            if vote_type == VoteType.UP
            else posts_table.c.down_vote
        )
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .values({column: column + 1})
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
