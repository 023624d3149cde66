"""Post routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, status
from pydantic import BaseModel, Field

from hive.application.usecase.post import (
    AuthorPostsRequest,
    CountAuthorPostsUseCase,
    CountPostsUseCase,
    CountResponse,
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostResponse,
    DeletePostUseCase,
    GetPostRequest,
    GetPostUseCase,
    ListAuthorPostsUseCase,
    ListPostsRequest,
    ListPostsUseCase,
    PostResponse,
    SearchPostsRequest,
    SearchPostsUseCase,
)
from hive.domain.value import PostId
from hive.interface.api.session import SessionEmail

router = APIRouter(tags=["posts"], route_class=DishkaRoute)


class CreatePostAPIRequest(BaseModel):
    """API request for creating a post."""

    author_email: str
    author_name: str | None = None
    author_image: str | None = None
    title: str = Field(min_length=1, max_length=300)
    description: str = Field(default="", max_length=10000)
    tag: str = Field(min_length=1, max_length=100)


@router.get("/posts", response_model=list[PostResponse])
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    sort_by: str | None = Query(default=None, alias="sortBy"),
    order: str | None = None,
    current: int = Query(default=0, ge=0),
    limit: int | None = Query(default=None, ge=1),
) -> list[PostResponse]:
    """List posts.

    ``sortBy`` orders by popularity (up votes minus down votes) or date;
    any other value keeps the newest posts first. ``order`` is ``asc`` or
    descending. ``current`` is a page index.

    Example:
        GET /posts?sortBy=popularity&order=desc&current=1&limit=5
    """
    return await list_posts_use_case.execute(
        ListPostsRequest(sort_by=sort_by, order=order, current=current, limit=limit)
    )


@router.get("/posts/count", response_model=CountResponse)
async def count_posts(
    count_posts_use_case: FromDishka[CountPostsUseCase],
) -> CountResponse:
    """Total number of posts."""
    return await count_posts_use_case.execute()


@router.get("/posts/search", response_model=list[PostResponse])
async def search_posts(
    search_posts_use_case: FromDishka[SearchPostsUseCase],
    tag: str = "",
    current: int = Query(default=0, ge=0),
    limit: int | None = Query(default=None, ge=1),
) -> list[PostResponse]:
    """Search posts whose tag contains the text, case-insensitively."""
    return await search_posts_use_case.execute(
        SearchPostsRequest(tag=tag, current=current, limit=limit)
    )


@router.get("/post/{post_id}", response_model=PostResponse)
async def get_post(
    post_id: UUID,
    get_post_use_case: FromDishka[GetPostUseCase],
) -> PostResponse:
    """Fetch a single post.

    Raises:
        NotFoundError: If the post does not exist (404)
    """
    return await get_post_use_case.execute(GetPostRequest(post_id=PostId(post_id)))


@router.get("/posts/user/{email}", response_model=list[PostResponse])
async def list_author_posts(
    email: str,
    actor: SessionEmail,
    list_author_posts_use_case: FromDishka[ListAuthorPostsUseCase],
    limit: int | None = Query(default=None, ge=1),
) -> list[PostResponse]:
    """List the signed-in user's own posts, newest first."""
    return await list_author_posts_use_case.execute(
        AuthorPostsRequest(acting_email=actor, author_email=email, limit=limit)
    )


@router.get("/posts/user/{email}/count", response_model=CountResponse)
async def count_author_posts(
    email: str,
    actor: SessionEmail,
    count_author_posts_use_case: FromDishka[CountAuthorPostsUseCase],
) -> CountResponse:
    """Count the signed-in user's own posts."""
    return await count_author_posts_use_case.execute(
        AuthorPostsRequest(acting_email=actor, author_email=email)
    )


@router.post(
    "/posts", response_model=PostResponse, status_code=status.HTTP_201_CREATED
)
async def create_post(
    body: CreatePostAPIRequest,
    actor: SessionEmail,
    create_post_use_case: FromDishka[CreatePostUseCase],
) -> PostResponse:
    """Create a post.

    Requires a session whose email matches ``author_email``, and the author
    must be under their membership tier's post ceiling.

    Raises:
        UnauthorizedError: Without a session cookie (401)
        ForbiddenError: Bad token, email mismatch or unknown author (403)
        QuotaExceededError: Over the tier ceiling (403)
    """
    return await create_post_use_case.execute(
        CreatePostRequest(
            acting_email=actor,
            author_email=body.author_email,
            author_name=body.author_name,
            author_image=body.author_image,
            title=body.title,
            description=body.description,
            tag=body.tag,
        )
    )


@router.delete("/posts/{post_id}", response_model=DeletePostResponse)
async def delete_post(
    post_id: UUID,
    actor: SessionEmail,
    delete_post_use_case: FromDishka[DeletePostUseCase],
) -> DeletePostResponse:
    """Delete one of the signed-in user's posts.

    Raises:
        NotFoundError: If the post does not exist (404)
        ForbiddenError: If the signed-in user is not the author (403)
    """
    return await delete_post_use_case.execute(
        DeletePostRequest(acting_email=actor, post_id=PostId(post_id))
    )
