"""Seed posts use case."""

import logfire

from blog.config import SeedSettings
from blog.domain.model import Author, NewPost, Post
from blog.domain.service import PostService
from blog.domain.value import UserId

LOREM_IPSUM = (
    "Lorem ipsum dolor sit amet consectetur adipisicing elit. Veniam dolores "
    "similique consectetur temporibus, corporis inventore tempora ad nulla alias. "
    "Sed, dignissimos? Quas nobis doloribus, sequi sit eligendi dicta blanditiis "
    "fugiat?"
)
SEED_TAGS = ["fake", "data"]


class SeedPostsUseCase:
    """Use case for filling the store with fake posts for local development."""

    def __init__(self, post_service: PostService, seed_settings: SeedSettings) -> None:
        """Initialize seed posts use case.

        Args:
            post_service: Post domain service
            seed_settings: Number of posts and the author that owns them
        """
        self.post_service = post_service
        self.seed_settings = seed_settings

    async def execute(self, count: int | None = None) -> list[Post]:
        """Insert fake posts titled ``Post #0`` onwards.

        Args:
            count: Number of posts to create (defaults to the configured count)

        Returns:
            The stored posts, in insertion order
        """
        count = self.seed_settings.count if count is None else count
        author = Author(
            id=UserId(self.seed_settings.author_id),
            username=self.seed_settings.author_username,
        )

        with logfire.span("seed_posts.execute", count=count, author=author.username):
            posts = [
                NewPost(
                    title=f"Post #{i}",
                    body=LOREM_IPSUM,
                    tags=list(SEED_TAGS),
                    user=author,
                )
                for i in range(count)
            ]
            if not posts:
                return []

            return await self.post_service.create_posts(posts)
