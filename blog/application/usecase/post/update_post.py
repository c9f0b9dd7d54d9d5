"""Update post use case."""

from typing import Any

import logfire

from blog.application.pipeline import PostContext
from blog.application.validation import UpdatePostPayload, validate_payload
from blog.domain.error import NotFoundError, PayloadValidationError
from blog.domain.service import PostService

from .view import PostView


class UpdatePostUseCase:
    """Use case for patching a post's title, body or tags."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize update post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, context: PostContext, payload: Any) -> PostView:
        """Execute update post flow.

        The lookup and ownership guards must already have run on the context.
        Only the fields present in the payload change.

        Args:
            context: Guarded request context with the resolved post
            payload: Raw JSON body

        Returns:
            Updated post details

        Raises:
            PayloadValidationError: If the payload fails validation
            NotFoundError: If the post was deleted after the guards resolved it
        """
        post = context.require_post()

        result = validate_payload(UpdatePostPayload, payload)
        if not result.ok:
            logfire.warn(
                "Post update payload rejected",
                post_id=post.id,
                fields=[error.field for error in result.errors],
            )
            raise PayloadValidationError(result.errors)

        updated = await self.post_service.update_post(post.id, result.values)

        if updated is None:
            # Deleted between the lookup guard and this update
            raise NotFoundError("Post", str(post.id))

        return PostView.from_post(updated)
