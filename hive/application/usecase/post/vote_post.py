"""Vote on post use case."""

import logfire
from pydantic import BaseModel

from hive.application.usecase.base import BaseUseCase
from hive.application.usecase.common import ModifiedResponse
from hive.domain.service import PostService
from hive.domain.value import PostId, VoteType


class VotePostRequest(BaseModel):
    """Vote request."""

    post_id: PostId
    vote_type: VoteType


class VotePostUseCase(BaseUseCase):
    """Use case for up/down voting a post.

    Votes are anonymous and unbounded: every call adds exactly one to the
    chosen counter.
    """

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: VotePostRequest) -> ModifiedResponse:
        modified = await self.post_service.vote(request.post_id, request.vote_type)
        logfire.info(
            "Post voted",
            post_id=str(request.post_id),
            vote_type=request.vote_type.value,
            modified=modified,
        )
        return ModifiedResponse(modified_count=modified)
