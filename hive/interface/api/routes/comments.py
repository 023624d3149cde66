"""Comment routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import BaseModel, Field

from hive.application.usecase.comment import (
    CommentResponse,
    CreateCommentRequest,
    CreateCommentUseCase,
    ListCommentsRequest,
    ListCommentsUseCase,
)
from hive.domain.value import PostId

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    post_id: UUID
    text: str = Field(min_length=1, max_length=10000)
    author_email: str | None = None
    author_name: str | None = None
    author_image: str | None = None


@router.post(
    "/post/comment",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
) -> CommentResponse:
    """Comment on a post. No session is required."""
    return await create_comment_use_case.execute(
        CreateCommentRequest(
            post_id=PostId(request.post_id),
            text=request.text,
            author_email=request.author_email,
            author_name=request.author_name,
            author_image=request.author_image,
        )
    )


@router.get("/comment/{post_id}", response_model=list[CommentResponse])
async def list_comments(
    post_id: UUID,
    list_comments_use_case: FromDishka[ListCommentsUseCase],
) -> list[CommentResponse]:
    """List a post's comments, newest first."""
    return await list_comments_use_case.execute(
        ListCommentsRequest(post_id=PostId(post_id))
    )
