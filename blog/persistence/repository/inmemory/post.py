"""In-memory post repository for testing."""

from typing import Any, Optional

from blog.domain.model import NewPost, Post
from blog.domain.repository.post import PostFilter, PostRepository
from blog.domain.value import PostId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing.

    Ids are allocated from a counter, so like the SQL store they increase
    with insertion order and are never reused.
    """

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}
        self._next_id = 1

    def _matching(self, post_filter: PostFilter) -> list[Post]:
        posts = [p for p in self._posts.values() if post_filter.matches(p)]
        posts.sort(key=lambda p: p.id, reverse=True)
        return posts

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_all(
        self,
        post_filter: PostFilter,
        limit: int,
        offset: int = 0,
    ) -> list[Post]:
        """Find posts newest first with filtering and pagination."""
        return self._matching(post_filter)[offset : offset + limit]

    async def count(self, post_filter: PostFilter) -> int:
        """Count posts matching the given filter."""
        return len(self._matching(post_filter))

    async def insert(self, post: NewPost) -> Post:
        """Store a post under the next id."""
        post_id = PostId(self._next_id)
        self._next_id += 1
        stored = Post(id=post_id, **post.model_dump())
        self._posts[post_id] = stored
        return stored

    async def insert_many(self, posts: list[NewPost]) -> list[Post]:
        """Store posts in list order."""
        return [await self.insert(post) for post in posts]

    async def update(self, post_id: PostId, changes: dict[str, Any]) -> Optional[Post]:
        """Replace the supplied fields of a post."""
        post = self._posts.get(post_id)
        if post is None:
            return None

        updated = post.with_changes(changes)
        self._posts[post_id] = updated
        return updated

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post."""
        return self._posts.pop(post_id, None) is not None
