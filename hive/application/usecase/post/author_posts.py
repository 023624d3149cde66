"""Use cases for an author's own posts."""

from pydantic import BaseModel

from hive.application.usecase.base import BaseUseCase
from hive.domain.service import AccessPolicy, PostService

from .common import CountResponse, PostResponse


class AuthorPostsRequest(BaseModel):
    """Request scoped to the author named in the path."""

    acting_email: str
    author_email: str
    limit: int | None = None


class ListAuthorPostsUseCase(BaseUseCase):
    """List the acting user's posts, newest first."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: AuthorPostsRequest) -> list[PostResponse]:
        """Raises ForbiddenError when the path email is not the acting identity."""
        AccessPolicy.require_owner(request.acting_email, request.author_email)
        posts = await self.post_service.list_by_author(
            request.author_email, limit=request.limit
        )
        return [PostResponse.from_post(post) for post in posts]


class CountAuthorPostsUseCase(BaseUseCase):
    """Count the acting user's posts."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: AuthorPostsRequest) -> CountResponse:
        AccessPolicy.require_owner(request.acting_email, request.author_email)
        count = await self.post_service.count_by_author(request.author_email)
        return CountResponse(count=count)
