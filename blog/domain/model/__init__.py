"""Domain model entities for the blog."""

from blog.domain.model.author import Author
from blog.domain.model.post import EDITABLE_FIELDS, NewPost, Post

__all__ = [
    "Author",
    "EDITABLE_FIELDS",
    "NewPost",
    "Post",
]
