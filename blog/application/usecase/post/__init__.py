"""Post use cases."""

from .create_post import CreatePostRequest, CreatePostUseCase
from .delete_post import DeletePostUseCase
from .get_post import GetPostUseCase
from .list_posts import ListPostsRequest, ListPostsResponse, ListPostsUseCase
from .seed_posts import SeedPostsUseCase
from .update_post import UpdatePostUseCase
from .view import AuthorView, PostView

__all__ = [
    "AuthorView",
    "CreatePostRequest",
    "CreatePostUseCase",
    "DeletePostUseCase",
    "GetPostUseCase",
    "ListPostsRequest",
    "ListPostsResponse",
    "ListPostsUseCase",
    "PostView",
    "SeedPostsUseCase",
    "UpdatePostUseCase",
]
