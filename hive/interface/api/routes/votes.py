"""Vote routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from hive.application.usecase.common import ModifiedResponse
from hive.application.usecase.post import VotePostRequest, VotePostUseCase
from hive.domain.value import PostId, VoteType

router = APIRouter(prefix="/post/vote", tags=["votes"], route_class=DishkaRoute)


class VoteAPIRequest(BaseModel):
    """API request for voting."""

    type: VoteType


@router.patch("/{post_id}", response_model=ModifiedResponse)
async def vote_post(
    post_id: UUID,
    request: VoteAPIRequest,
    vote_post_use_case: FromDishka[VotePostUseCase],
) -> ModifiedResponse:
    """Add one up or down vote to a post.

    Example:
        PATCH /post/vote/{post_id}
        {"type": "up"}
    """
    return await vote_post_use_case.execute(
        VotePostRequest(post_id=PostId(post_id), vote_type=request.type)
    )
