"""Create post use case."""

from typing import Any

import logfire
from pydantic import BaseModel

from blog.application.validation import CreatePostPayload, validate_payload
from blog.domain.error import PayloadValidationError
from blog.domain.model import Author, NewPost
from blog.domain.service import PostService

from .view import PostView


class CreatePostRequest(BaseModel):
    """Create post request."""

    payload: Any = None  # Raw JSON body, validated by the use case
    author: Author  # Authenticated caller


class CreatePostUseCase:
    """Use case for creating a new post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: CreatePostRequest) -> PostView:
        """Execute create post flow.

        Steps:
        1. Validate the payload against the create schema
        2. Build the post, owned by the authenticated caller
        3. Store it

        Args:
            request: Create post request

        Returns:
            The stored post, including its generated id

        Raises:
            PayloadValidationError: If the payload fails validation
            PersistenceError: If the store fails
        """
        result = validate_payload(CreatePostPayload, request.payload)
        if not result.ok:
            logfire.warn(
                "Post creation payload rejected",
                fields=[error.field for error in result.errors],
            )
            raise PayloadValidationError(result.errors)

        with logfire.span(
            "create_post.execute",
            title=result.values["title"],
            tags=result.values["tags"],
            author=request.author.username,
        ):
            post = NewPost(
                title=result.values["title"],
                body=result.values["body"],
                tags=result.values["tags"],
                user=request.author,
            )

            saved = await self.post_service.create_post(post)

            logfire.info("Post created successfully", post_id=saved.id)
            return PostView.from_post(saved)
