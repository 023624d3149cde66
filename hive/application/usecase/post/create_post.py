"""Create post use case."""

from uuid import uuid4

import logfire
from pydantic import BaseModel

from hive.application.usecase.base import BaseUseCase
from hive.domain.error import ForbiddenError
from hive.domain.model import Post
from hive.domain.service import AccessPolicy, PostService, QuotaService, UserService
from hive.domain.value import PostId

from .common import PostResponse


class CreatePostRequest(BaseModel):
    """Create post request."""

    acting_email: str  # Verified email from the session token
    author_email: str  # Author declared in the request body
    author_name: str | None = None
    author_image: str | None = None
    title: str
    description: str = ""
    tag: str


class CreatePostUseCase(BaseUseCase):
    """Use case for creating a new post under the author's tier quota."""

    def __init__(
        self,
        post_service: PostService,
        user_service: UserService,
        quota_service: QuotaService,
    ) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
            quota_service: Membership quota service
        """
        self.post_service = post_service
        self.user_service = user_service
        self.quota_service = quota_service

    async def execute(self, request: CreatePostRequest) -> PostResponse:
        """Execute create post flow.

        Steps:
        1. Check the declared author is the acting identity
        2. Count the author's existing posts
        3. Load the author (must exist)
        4. Check the count against the author's tier ceiling
        5. Save the post
        6. Decrement the author's post_limit counter

        Args:
            request: Create post request

        Returns:
            The created post

        Raises:
            ForbiddenError: On email mismatch or unknown author
            QuotaExceededError: If the author is over their tier ceiling
        """
        with logfire.span(
            "create_post.execute", author=request.acting_email, title=request.title
        ):
            AccessPolicy.require_owner(request.acting_email, request.author_email)

            existing = await self.post_service.count_by_author(request.acting_email)

            user = await self.user_service.get_user_by_email(request.acting_email)
            if user is None:
                raise ForbiddenError("Forbidden: user not found")

            self.quota_service.ensure_can_post(user, existing)

            post = Post(
                id=PostId(uuid4()),
                author_email=request.author_email,
                author_name=request.author_name,
                author_image=request.author_image,
                title=request.title,
                description=request.description,
                tag=request.tag,
            )
            saved = await self.post_service.save_post(post)
            await self.quota_service.record_post_created(request.acting_email)

            logfire.info(
                "Post created successfully",
                post_id=str(saved.id),
                existing_posts=existing,
            )
            return PostResponse.from_post(saved)
