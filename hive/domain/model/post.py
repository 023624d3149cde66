"""Post aggregate root."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from hive.domain.model.common import DomainModel, utc_now
from hive.domain.value import PostId


class Post(DomainModel):
    """Post aggregate root.

    Vote counters only ever increase; popularity is their difference.
    """

    id: PostId
    author_email: str
    author_name: Optional[str] = None
    author_image: Optional[str] = None
    title: str = Field(min_length=1, max_length=300)
    description: str = Field(default="", max_length=10000)
    tag: str = Field(min_length=1, max_length=100)
    up_vote: int = Field(default=0, ge=0)
    down_vote: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=utc_now)

    @property
    def vote_difference(self) -> int:
        """Popularity score used for ordering."""
        return self.up_vote - self.down_vote
