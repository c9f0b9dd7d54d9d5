"""List posts use case."""

import re

from pydantic import BaseModel

from blog.domain.error import InvalidPageError
from blog.domain.repository import PostFilter
from blog.domain.service import PostService

from .view import PostView

_PAGE_PATTERN = re.compile(r"[0-9]+")


class ListPostsRequest(BaseModel):
    """List posts request.

    Values arrive as raw query strings; empty strings count as absent.
    """

    page: str | None = None
    tag: str | None = None
    username: str | None = None


class ListPostsResponse(BaseModel):
    """List posts response."""

    posts: list[PostView]
    last_page: int


def parse_page(raw: str | None) -> int:
    """Parse the page query value, defaulting to 1.

    Raises:
        InvalidPageError: If the value is not plain decimal digits or is below 1
    """
    if not raw:
        return 1
    if not _PAGE_PATTERN.fullmatch(raw):
        raise InvalidPageError(raw)
    page = int(raw)
    if page < 1:
        raise InvalidPageError(page)
    return page


class ListPostsUseCase:
    """Use case for listing posts with filtering and pagination."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow.

        Steps:
        1. Validate the page number (before touching the store)
        2. Build the filter from the tag and username that were supplied
        3. Fetch the page and the last page number
        4. Shorten long bodies for the listing

        Args:
            request: List posts request with filters and page

        Returns:
            Posts on the page, newest first, and the last page number

        Raises:
            InvalidPageError: If page is not a positive integer
        """
        page = parse_page(request.page)
        post_filter = PostFilter(
            tag=request.tag or None,
            username=request.username or None,
        )

        result = await self.post_service.list_page(post_filter, page)

        return ListPostsResponse(
            posts=[
                PostView.from_post(post, body=self.post_service.preview_body(post.body))
                for post in result.posts
            ],
            last_page=result.last_page,
        )
