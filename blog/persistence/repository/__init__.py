"""SQL repository implementations."""

from blog.persistence.repository.post import PostgresPostRepository

__all__ = [
    "PostgresPostRepository",
]
