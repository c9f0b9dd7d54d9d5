"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import Any, List, Optional

from blog.domain.model.common import DomainModel
from blog.domain.model.post import NewPost, Post
from blog.domain.value import PostId


class PostFilter(DomainModel):
    """Filter for post listings.

    Unset criteria are omitted; an empty filter matches every post.
    Set criteria are combined with AND.
    """

    tag: Optional[str] = None
    username: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return self.tag is None and self.username is None

    def matches(self, post: Post) -> bool:
        """Check a post against the filter in memory."""
        if self.tag is not None and self.tag not in post.tags:
            return False
        if self.username is not None and post.user.username != self.username:
            return False
        return True


class PostRepository(ABC):
    """Repository for Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the persistence layer and raise
    PersistenceError when the store fails.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        post_filter: PostFilter,
        limit: int,
        offset: int = 0,
    ) -> List[Post]:
        """Find posts newest first (id descending).

        Args:
            post_filter: Tag and username criteria
            limit: Maximum number of posts to return
            offset: Number of posts to skip

        Returns:
            List of posts matching the criteria
        """
        pass

    @abstractmethod
    async def count(self, post_filter: PostFilter) -> int:
        """Count posts matching the given filter."""
        pass

    @abstractmethod
    async def insert(self, post: NewPost) -> Post:
        """Store a new post and return it with its generated id."""
        pass

    @abstractmethod
    async def insert_many(self, posts: List[NewPost]) -> List[Post]:
        """Store several new posts in order and return them with their ids."""
        pass

    @abstractmethod
    async def update(self, post_id: PostId, changes: dict[str, Any]) -> Optional[Post]:
        """Replace the given fields of a post.

        Args:
            post_id: ID of the post to update
            changes: Field values to set; fields not present are left as they are

        Returns:
            The updated post, or None if no post has that id
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> bool:
        """Delete a post (hard delete).

        Returns:
            True if a post was removed, False if none had that id
        """
        pass
