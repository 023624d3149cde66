"""List comments use case."""

from pydantic import BaseModel

from hive.application.usecase.base import BaseUseCase
from hive.domain.service import CommentService
from hive.domain.value import PostId

from .create_comment import CommentResponse


class ListCommentsRequest(BaseModel):
    post_id: PostId


class ListCommentsUseCase(BaseUseCase):
    """List the comments on a post, newest first."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: ListCommentsRequest) -> list[CommentResponse]:
        comments = await self.comment_service.list_for_post(request.post_id)
        return [CommentResponse.from_comment(c) for c in comments]
