"""Guard pipeline for post requests.

A request's state is an immutable PostContext. Each guard receives the
context and either returns an augmented copy or raises a DomainError, which
stops the pipeline before the handler runs.
"""

from typing import Optional, Protocol, Sequence

import logfire

from blog.domain.model import Author, Post
from blog.domain.model.common import DomainModel


class PostContext(DomainModel):
    """Per-request state threaded through the guards.

    Attributes:
        raw_post_id: Post id as it appeared in the path, not yet validated
        token: Access token from the request, if any
        user: Authenticated caller, set by the authentication guard
        post: Resolved post, set by the lookup guard
    """

    raw_post_id: Optional[str] = None
    token: Optional[str] = None
    user: Optional[Author] = None
    post: Optional[Post] = None

    def require_user(self) -> Author:
        if self.user is None:
            raise RuntimeError("No authenticated user in context")
        return self.user

    def require_post(self) -> Post:
        if self.post is None:
            raise RuntimeError("No resolved post in context")
        return self.post


class Guard(Protocol):
    """A pipeline stage that may halt the request."""

    async def __call__(self, context: PostContext) -> PostContext: ...


async def run_guards(context: PostContext, guards: Sequence[Guard]) -> PostContext:
    """Run guards in order, feeding each the context returned by the last.

    Args:
        context: Initial request context
        guards: Guards to apply, in order

    Returns:
        The context produced by the final guard

    Raises:
        DomainError: From the first guard that rejects the request
    """
    for guard in guards:
        context = await guard(context)
        logfire.debug("Guard passed", guard=type(guard).__name__)
    return context
