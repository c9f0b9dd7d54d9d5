"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
instead of through the ORM.
"""

from typing import Any, Dict, List

from blog.domain.model import Author, NewPost, Post
from blog.domain.value import PostId, UserId


def row_to_post(row: Dict[str, Any], tags: List[str]) -> Post:
    """Convert a posts row and its tag names to a Post domain model.

    Args:
        row: Database row as dict
        tags: Tag names in their stored order

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(row["id"]),
        title=row["title"],
        body=row["body"],
        tags=tags,
        user=Author(id=UserId(row["user_id"]), username=row["username"]),
        published_at=row["published_at"],
    )


def post_to_row(post: NewPost) -> Dict[str, Any]:
    """Convert a new post to a posts row (tags are stored separately).

    Args:
        post: Post domain model

    Returns:
        Dict suitable for database insertion
    """
    return {
        "title": post.title,
        "body": post.body,
        "user_id": post.user.id,
        "username": post.user.username,
        "published_at": post.published_at,
    }


def tags_to_rows(post_id: PostId, tags: List[str]) -> List[Dict[str, Any]]:
    """Convert a post's tags to post_tags rows, keeping their order."""
    return [
        {"post_id": post_id, "position": position, "name": name}
        for position, name in enumerate(tags)
    ]
