"""Post use cases."""

from .author_posts import (
    AuthorPostsRequest,
    CountAuthorPostsUseCase,
    ListAuthorPostsUseCase,
)
from .common import CountResponse, PostResponse
from .create_post import CreatePostRequest, CreatePostUseCase
from .delete_post import DeletePostRequest, DeletePostResponse, DeletePostUseCase
from .get_post import GetPostRequest, GetPostUseCase
from .list_posts import (
    CountPostsUseCase,
    ListPostsRequest,
    ListPostsUseCase,
    SearchPostsRequest,
    SearchPostsUseCase,
)
from .vote_post import VotePostRequest, VotePostUseCase

__all__ = [
    "AuthorPostsRequest",
    "CountAuthorPostsUseCase",
    "CountPostsUseCase",
    "CountResponse",
    "CreatePostRequest",
    "CreatePostUseCase",
    "DeletePostRequest",
    "DeletePostResponse",
    "DeletePostUseCase",
    "GetPostRequest",
    "GetPostUseCase",
    "ListAuthorPostsUseCase",
    "ListPostsRequest",
    "ListPostsUseCase",
    "PostResponse",
    "SearchPostsRequest",
    "SearchPostsUseCase",
    "VotePostRequest",
    "VotePostUseCase",
]
