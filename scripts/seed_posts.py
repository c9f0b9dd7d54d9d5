#!/usr/bin/env python3
"""Fill the database with fake posts for local development.

Usage:
    python scripts/seed_posts.py [COUNT]
"""

import asyncio
import sys

import logfire

from blog.application.usecase.post import SeedPostsUseCase
from blog.config import Settings
from blog.util.di.container import create_script_container
from blog.util.observability import configure_logfire


async def seed(count: int | None) -> int:
    """Insert fake posts inside one request scope (one transaction)."""
    container = create_script_container()
    try:
        async with container() as request_container:
            use_case = await request_container.get(SeedPostsUseCase)
            posts = await use_case.execute(count)
    finally:
        await container.close()

    logfire.info("Fake posts inserted", post_ids=[post.id for post in posts])
    return len(posts)


def main() -> int:
    settings = Settings()
    configure_logfire(settings)

    count = int(sys.argv[1]) if len(sys.argv) > 1 else None

    try:
        inserted = asyncio.run(seed(count))
    except Exception as e:
        logfire.error(
            "Seeding failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise

    print(f"Inserted {inserted} posts")
    return 0


if __name__ == "__main__":
    sys.exit(main())
