"""Domain services."""

from .base import Service
from .jwt_service import JWTService
from .post_service import PostPage, PostService

__all__ = [
    "JWTService",
    "PostPage",
    "PostService",
    "Service",
]
