"""Post domain service."""

import math
from typing import Any

import logfire

from blog.config import PostSettings
from blog.domain.error import InvalidPageError
from blog.domain.model import NewPost, Post
from blog.domain.model.common import DomainModel
from blog.domain.repository import PostFilter, PostRepository
from blog.domain.value import PostId

from .base import Service


class PostPage(DomainModel):
    """A page of posts plus the number of the last page."""

    posts: list[Post]
    last_page: int


class PostService(Service):
    """Domain service for post operations."""

    def __init__(self, post_repository: PostRepository, settings: PostSettings) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            settings: Pagination and preview settings
        """
        self.post_repository = post_repository
        self.settings = settings

    async def get_post_by_id(self, post_id: PostId) -> Post | None:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.get_post_by_id", post_id=post_id):
            post = await self.post_repository.find_by_id(post_id)

            if post:
                logfire.info("Post found", post_id=post_id, title=post.title)
            else:
                logfire.warn("Post not found", post_id=post_id)

            return post

    async def list_page(self, post_filter: PostFilter, page: int) -> PostPage:
        """Fetch one page of posts, newest first.

        Args:
            post_filter: Tag and username criteria
            page: 1-based page number

        Returns:
            The posts on the page and the number of the last page

        Raises:
            InvalidPageError: If page is below 1 (checked before any query)
        """
        if page < 1:
            raise InvalidPageError(page)

        page_size = self.settings.page_size
        with logfire.span(
            "post_service.list_page",
            tag=post_filter.tag,
            username=post_filter.username,
            page=page,
        ):
            posts = await self.post_repository.find_all(
                post_filter, limit=page_size, offset=(page - 1) * page_size
            )
            total = await self.post_repository.count(post_filter)
            last_page = math.ceil(total / page_size)

            logfire.info(
                "Posts listed", count=len(posts), total=total, last_page=last_page
            )
            return PostPage(posts=posts, last_page=last_page)

    async def create_post(self, post: NewPost) -> Post:
        """Store a new post.

        Args:
            post: Post to store

        Returns:
            Stored post with its generated id
        """
        with logfire.span(
            "post_service.create_post", title=post.title, username=post.user.username
        ):
            saved = await self.post_repository.insert(post)
            logfire.info("Post saved", post_id=saved.id)
            return saved

    async def create_posts(self, posts: list[NewPost]) -> list[Post]:
        """Store several new posts in one batch."""
        with logfire.span("post_service.create_posts", count=len(posts)):
            saved = await self.post_repository.insert_many(posts)
            logfire.info("Posts saved", post_ids=[post.id for post in saved])
            return saved

    async def update_post(self, post_id: PostId, changes: dict[str, Any]) -> Post | None:
        """Apply a partial update to a post.

        Args:
            post_id: Post ID
            changes: Only the fields to replace

        Returns:
            Updated post, or None if the post no longer exists
        """
        with logfire.span(
            "post_service.update_post", post_id=post_id, fields=sorted(changes)
        ):
            updated = await self.post_repository.update(post_id, changes)

            if updated:
                logfire.info("Post updated", post_id=post_id, title=updated.title)
            else:
                logfire.warn("Post not found for update", post_id=post_id)

            return updated

    async def delete_post(self, post_id: PostId) -> None:
        """Delete a post whether or not it still exists."""
        with logfire.span("post_service.delete_post", post_id=post_id):
            deleted = await self.post_repository.delete(post_id)
            logfire.info("Post deleted", post_id=post_id, matched=deleted)

    def preview_body(self, body: str) -> str:
        """Shorten a body for list responses.

        Bodies up to the preview length are returned as they are; longer ones
        are cut to the preview length and suffixed with an ellipsis marker.
        """
        limit = self.settings.body_preview_length
        if len(body) <= limit:
            return body
        return f"{body[:limit]}{self.settings.body_preview_suffix}"
