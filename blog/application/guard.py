"""Guards for post routes: authentication, post lookup and ownership."""

import logfire

from blog.application.pipeline import PostContext
from blog.domain.error import NotAuthorizedError, NotFoundError
from blog.domain.service import JWTService, PostService
from blog.domain.value import parse_post_id


class AuthenticateGuard:
    """Attach the caller's identity, or reject with NotAuthenticatedError."""

    def __init__(self, jwt_service: JWTService) -> None:
        self.jwt_service = jwt_service

    async def __call__(self, context: PostContext) -> PostContext:
        user = self.jwt_service.authenticate(context.token)
        return context.model_copy(update={"user": user})


class ResolvePostGuard:
    """Look up the post named in the path and attach it to the context."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def __call__(self, context: PostContext) -> PostContext:
        """Resolve ``context.raw_post_id``.

        Raises:
            InvalidIdentifierError: If the id is malformed (no lookup is made)
            NotFoundError: If no post has that id
        """
        raw_post_id = context.raw_post_id or ""
        post_id = parse_post_id(raw_post_id)

        post = await self.post_service.get_post_by_id(post_id)
        if post is None:
            raise NotFoundError("Post", raw_post_id)

        return context.model_copy(update={"post": post})


class OwnershipGuard:
    """Allow the request through only if the caller owns the resolved post."""

    async def __call__(self, context: PostContext) -> PostContext:
        user = context.require_user()
        post = context.require_post()

        if not post.is_owned_by(user):
            logfire.warn(
                "Ownership check failed",
                post_id=post.id,
                owner_id=post.user.id,
                user_id=user.id,
            )
            raise NotAuthorizedError("post", str(post.id), user.id)

        return context
