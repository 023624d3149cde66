"""Get post use case."""

from pydantic import BaseModel

from hive.application.usecase.base import BaseUseCase
from hive.domain.service import PostService
from hive.domain.value import PostId

from .common import PostResponse


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: PostId


class GetPostUseCase(BaseUseCase):
    """Use case for fetching a single post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: GetPostRequest) -> PostResponse:
        """Get a post by ID.

        Raises:
            NotFoundError: If the post does not exist
        """
        post = await self.post_service.get_post(request.post_id)
        return PostResponse.from_post(post)
