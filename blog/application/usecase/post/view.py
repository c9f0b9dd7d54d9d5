"""Response representation of posts."""

from datetime import datetime

from pydantic import BaseModel

from blog.domain.model import Post


class AuthorView(BaseModel):
    """Post owner in responses."""

    id: str
    username: str


class PostView(BaseModel):
    """A post as returned by the API."""

    id: int
    title: str
    body: str
    tags: list[str]
    user: AuthorView
    published_at: datetime

    @classmethod
    def from_post(cls, post: Post, body: str | None = None) -> "PostView":
        """Build a view of a post, optionally replacing the body text."""
        return cls(
            id=post.id,
            title=post.title,
            body=post.body if body is None else body,
            tags=list(post.tags),
            user=AuthorView(id=post.user.id, username=post.user.username),
            published_at=post.published_at,
        )
