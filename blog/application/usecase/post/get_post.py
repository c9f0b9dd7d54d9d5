"""Get post use case."""

from blog.application.pipeline import PostContext

from .view import PostView


class GetPostUseCase:
    """Use case for returning the post resolved by the lookup guard."""

    async def execute(self, context: PostContext) -> PostView:
        """Return the post already attached to the context.

        No second fetch is made; the lookup guard has resolved the post.
        """
        return PostView.from_post(context.require_post())
