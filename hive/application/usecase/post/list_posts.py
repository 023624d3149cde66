"""Public post listing use cases."""

from pydantic import BaseModel, Field, field_validator

from hive.application.usecase.base import BaseUseCase
from hive.config import PostListingSettings
from hive.domain.service import PostService
from hive.domain.value import PostSortField, SortDirection

from .common import CountResponse, PostResponse


class ListPostsRequest(BaseModel):
    """List posts request.

    ``current`` is a page index; the number of rows skipped per page is a
    fixed stride, independent of ``limit``. An unrecognised ``sort_by``
    falls back to the newest-first feed, and any ``order`` other than
    ``asc`` sorts descending.
    """

    sort_by: PostSortField | None = None
    order: SortDirection = SortDirection.DESC
    current: int = Field(default=0, ge=0)
    limit: int | None = Field(default=None, ge=1)

    @field_validator("sort_by", mode="before")
    @classmethod
    def known_sort_field(cls, v: str | None) -> PostSortField | None:
        """Map unknown sort fields to the default ordering."""
        try:
            return PostSortField(v) if v is not None else None
        except ValueError:
            return None

    @field_validator("order", mode="before")
    @classmethod
    def ascending_or_descending(cls, v: str | None) -> SortDirection:
        return SortDirection.ASC if v == SortDirection.ASC else SortDirection.DESC


class ListPostsUseCase(BaseUseCase):
    """Use case for the paginated post feed."""

    def __init__(
        self, post_service: PostService, listing_settings: PostListingSettings
    ) -> None:
        self.post_service = post_service
        self.listing_settings = listing_settings

    async def execute(self, request: ListPostsRequest) -> list[PostResponse]:
        posts = await self.post_service.list_posts(
            sort=request.sort_by,
            direction=request.order,
            limit=request.limit or self.listing_settings.default_limit,
            offset=request.current * self.listing_settings.page_stride,
        )
        return [PostResponse.from_post(post) for post in posts]


class SearchPostsRequest(BaseModel):
    """Search posts by tag."""

    tag: str = ""
    current: int = Field(default=0, ge=0)
    limit: int | None = Field(default=None, ge=1)


class SearchPostsUseCase(BaseUseCase):
    """Use case for tag search, newest first."""

    def __init__(
        self, post_service: PostService, listing_settings: PostListingSettings
    ) -> None:
        self.post_service = post_service
        self.listing_settings = listing_settings

    async def execute(self, request: SearchPostsRequest) -> list[PostResponse]:
        posts = await self.post_service.search_by_tag(
            request.tag,
            limit=request.limit or self.listing_settings.default_limit,
            offset=request.current * self.listing_settings.page_stride,
        )
        return [PostResponse.from_post(post) for post in posts]


class CountPostsUseCase(BaseUseCase):
    """Use case for the total post count."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: None = None) -> CountResponse:
        return CountResponse(count=await self.post_service.count_posts())
