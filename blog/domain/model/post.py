"""Post aggregate root."""

from datetime import datetime, timezone

from pydantic import Field

from blog.domain.model.author import Author
from blog.domain.model.common import DomainModel
from blog.domain.value import PostId

# Fields a post owner may change after creation
EDITABLE_FIELDS = frozenset({"title", "body", "tags"})


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class NewPost(DomainModel):
    """A post that has not been stored yet.

    The store assigns the id on insert and returns a Post.
    """

    title: str = Field(min_length=1)
    body: str = Field(min_length=1)
    tags: list[str] = Field(default_factory=list)
    user: Author
    published_at: datetime = Field(default_factory=_utcnow)


class Post(NewPost):
    """Post aggregate root.

    The owning user is fixed at creation; updates only ever touch title,
    body and tags.
    """

    id: PostId

    def is_owned_by(self, author: Author) -> bool:
        """Check whether the given identity owns this post."""
        return self.user.id == author.id

    def with_changes(self, changes: dict) -> "Post":
        """Return a copy with the given editable fields replaced."""
        editable = {k: v for k, v in changes.items() if k in EDITABLE_FIELDS}
        return self.model_copy(update=editable)
