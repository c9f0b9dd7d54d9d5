"""Post routes.

Each route builds a PostContext from the request, runs its guards in order
and hands the guarded context to a use case. Guards and use cases raise
domain errors, which the app's error handlers turn into responses.
"""

from typing import Any

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Body, Request, Response, status

from blog.application.guard import AuthenticateGuard, OwnershipGuard, ResolvePostGuard
from blog.application.pipeline import PostContext, run_guards
from blog.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsUseCase,
    PostView,
    UpdatePostUseCase,
)
from blog.config import AuthSettings

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)

LAST_PAGE_HEADER = "Last-Page"


def _access_token(request: Request, auth_settings: AuthSettings) -> str | None:
    return request.cookies.get(auth_settings.cookie_name)


@router.get("", response_model=list[PostView])
async def list_posts(
    response: Response,
    list_posts_use_case: FromDishka[ListPostsUseCase],
    page: str | None = None,
    tag: str | None = None,
    username: str | None = None,
) -> list[PostView]:
    """List posts, newest first, ten per page.

    Bodies longer than the preview length are shortened. The number of the
    last page is returned in the ``Last-Page`` header.

    Args:
        response: Outgoing response (for the header)
        list_posts_use_case: List posts use case from DI
        page: 1-based page number (default 1)
        tag: Only posts carrying this tag
        username: Only posts by this user
    """
    result = await list_posts_use_case.execute(
        ListPostsRequest(page=page, tag=tag, username=username)
    )
    response.headers[LAST_PAGE_HEADER] = str(result.last_page)
    return result.posts


@router.post("", response_model=PostView)
async def create_post(
    request: Request,
    create_post_use_case: FromDishka[CreatePostUseCase],
    authenticate: FromDishka[AuthenticateGuard],
    auth_settings: FromDishka[AuthSettings],
    payload: Any = Body(default=None),
) -> PostView:
    """Create a post owned by the authenticated caller.

    Requires authentication.
    """
    context = await run_guards(
        PostContext(token=_access_token(request, auth_settings)),
        [authenticate],
    )
    return await create_post_use_case.execute(
        CreatePostRequest(payload=payload, author=context.require_user())
    )


@router.get("/{post_id}", response_model=PostView)
async def get_post(
    post_id: str,
    get_post_use_case: FromDishka[GetPostUseCase],
    resolve_post: FromDishka[ResolvePostGuard],
) -> PostView:
    """Get a post by ID."""
    context = await run_guards(PostContext(raw_post_id=post_id), [resolve_post])
    return await get_post_use_case.execute(context)


@router.patch("/{post_id}", response_model=PostView)
async def update_post(
    post_id: str,
    request: Request,
    update_post_use_case: FromDishka[UpdatePostUseCase],
    authenticate: FromDishka[AuthenticateGuard],
    resolve_post: FromDishka[ResolvePostGuard],
    check_ownership: FromDishka[OwnershipGuard],
    auth_settings: FromDishka[AuthSettings],
    payload: Any = Body(default=None),
) -> PostView:
    """Replace the supplied fields of a post.

    Only the post owner can edit.
    """
    context = await run_guards(
        PostContext(
            raw_post_id=post_id, token=_access_token(request, auth_settings)
        ),
        [authenticate, resolve_post, check_ownership],
    )
    return await update_post_use_case.execute(context, payload)


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(
    post_id: str,
    request: Request,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    authenticate: FromDishka[AuthenticateGuard],
    resolve_post: FromDishka[ResolvePostGuard],
    check_ownership: FromDishka[OwnershipGuard],
    auth_settings: FromDishka[AuthSettings],
) -> Response:
    """Delete a post.

    Only the post owner can delete.
    """
    context = await run_guards(
        PostContext(
            raw_post_id=post_id, token=_access_token(request, auth_settings)
        ),
        [authenticate, resolve_post, check_ownership],
    )
    await delete_post_use_case.execute(context)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
