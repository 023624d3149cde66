"""Comment entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from hive.domain.model.common import DomainModel, utc_now
from hive.domain.value import CommentId, PostId


class Comment(DomainModel):
    """Comment on a post.

    Comments are only ever removed by moderation.
    """

    id: CommentId
    post_id: PostId
    author_email: Optional[str] = None
    author_name: Optional[str] = None
    author_image: Optional[str] = None
    text: str = Field(min_length=1, max_length=10000)
    created_at: datetime = Field(default_factory=utc_now)
