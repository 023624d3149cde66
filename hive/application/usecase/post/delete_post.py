"""Delete post use case."""

import logfire
from pydantic import BaseModel

from hive.application.usecase.base import BaseUseCase
from hive.domain.service import AccessPolicy, PostService, QuotaService
from hive.domain.value import PostId


class DeletePostRequest(BaseModel):
    """Delete post request."""

    acting_email: str
    post_id: PostId


class DeletePostResponse(BaseModel):
    """Delete post response."""

    success: bool
    message: str
    deleted_count: int


class DeletePostUseCase(BaseUseCase):
    """Use case for an author deleting their own post."""

    def __init__(self, post_service: PostService, quota_service: QuotaService) -> None:
        self.post_service = post_service
        self.quota_service = quota_service

    async def execute(self, request: DeletePostRequest) -> DeletePostResponse:
        """Delete a post and give the author's post_limit back.

        Ownership is checked against the author stored with the post, never
        against anything the client sent.

        Raises:
            NotFoundError: If the post does not exist
            ForbiddenError: If the acting identity is not the author
        """
        with logfire.span(
            "delete_post.execute",
            post_id=str(request.post_id),
            acting_email=request.acting_email,
        ):
            post = await self.post_service.get_post(request.post_id)
            AccessPolicy.require_owner(request.acting_email, post.author_email)

            deleted = await self.post_service.delete_post(request.post_id)
            await self.quota_service.record_post_deleted(request.acting_email)

            return DeletePostResponse(
                success=True,
                message="Post deleted successfully",
                deleted_count=int(deleted),
            )
