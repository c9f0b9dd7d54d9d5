"""Domain value objects for the blog."""

from blog.domain.value.identifiers import (
    PostId,
    UserId,
    is_valid_post_id,
    parse_post_id,
)

__all__ = [
    "PostId",
    "UserId",
    "is_valid_post_id",
    "parse_post_id",
]
