"""Delete post use case."""

from blog.application.pipeline import PostContext
from blog.domain.service import PostService


class DeletePostUseCase:
    """Use case for removing a post."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, context: PostContext) -> None:
        """Delete the guarded post.

        Succeeds even if the post is already gone by the time the delete runs.
        """
        await self.post_service.delete_post(context.require_post().id)
