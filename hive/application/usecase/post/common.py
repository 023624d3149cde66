"""Shared post response schema."""

from datetime import datetime

from pydantic import BaseModel

from hive.domain.model import Post


class PostResponse(BaseModel):
    """Post as returned to clients."""

    post_id: str
    author_email: str
    author_name: str | None
    author_image: str | None
    title: str
    description: str
    tag: str
    up_vote: int
    down_vote: int
    vote_difference: int
    created_at: datetime

    @classmethod
    def from_post(cls, post: Post) -> "PostResponse":
        return cls(
            post_id=str(post.id),
            author_email=post.author_email,
            author_name=post.author_name,
            author_image=post.author_image,
            title=post.title,
            description=post.description,
            tag=post.tag,
            up_vote=post.up_vote,
            down_vote=post.down_vote,
            vote_difference=post.vote_difference,
            created_at=post.created_at,
        )


class CountResponse(BaseModel):
    """Number of posts."""

    count: int
